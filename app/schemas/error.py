"""
Pydantic schemas for error responses.
"""

from typing import Any

from pydantic import BaseModel, Field


class ErrorResponse(BaseModel):
    """
    Standard error response format.

    Examples:
        404: {"error": "not_found", "message": "Collection with ID '...' not found"}
        422: {"error": "no_data", "message": "No assets to export"}
        502: {"error": "upstream_error", "message": "GraphQL error: ..."}
    """

    error: str = Field(
        ...,
        description="Error code string",
        examples=["no_data", "not_found", "upstream_error", "configuration_error"],
    )
    message: str = Field(
        ...,
        description="Human-readable error message",
    )
    details: dict[str, Any] | None = Field(
        default=None,
        description="Optional additional error details",
    )
