"""
Custom exceptions for the Collection Export API.
"""

from typing import Any


class ExportAPIException(Exception):
    """Base exception for all export API errors."""

    def __init__(
        self,
        error: str,
        message: str,
        status_code: int = 500,
        details: dict[str, Any] | None = None,
    ):
        self.error = error
        self.message = message
        self.status_code = status_code
        self.details = details or {}
        super().__init__(message)

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to response dictionary."""
        response = {
            "error": self.error,
            "message": self.message,
        }
        if self.details:
            response["details"] = self.details
        return response


class NoDataError(ExportAPIException):
    """422 - Export requested for zero assets."""

    def __init__(self, message: str = "No assets to export", details: dict[str, Any] | None = None):
        super().__init__(
            error="no_data",
            message=message,
            status_code=422,
            details=details,
        )


class ValidationException(ExportAPIException):
    """400 - Malformed request (invalid JSON, missing parameters)."""

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        super().__init__(
            error="validation_failed",
            message=message,
            status_code=400,
            details=details,
        )


class CollectionNotFoundException(ExportAPIException):
    """404 - Collection not found in the configured library."""

    def __init__(self, collection_id: str):
        super().__init__(
            error="not_found",
            message=f"Collection with ID '{collection_id}' not found",
            status_code=404,
        )


class ConfigurationException(ExportAPIException):
    """500 - Frontify access is not configured."""

    def __init__(self, message: str):
        super().__init__(
            error="configuration_error",
            message=message,
            status_code=500,
        )


class FrontifyAPIException(ExportAPIException):
    """502 - Frontify GraphQL request failed or returned an unusable payload."""

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        super().__init__(
            error="upstream_error",
            message=message,
            status_code=502,
            details=details,
        )
