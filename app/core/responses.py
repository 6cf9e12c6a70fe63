"""
Response utilities for the Collection Export API.
Provides standardized response formatting.
"""

from typing import Any

from fastapi.responses import JSONResponse, Response

from app.services.tabular_exporter import ExportResult


def create_error_response(
    error: str,
    message: str,
    status_code: int,
    details: dict[str, Any] | None = None,
) -> JSONResponse:
    """
    Create a standardized error response.

    Args:
        error: Error code string
        message: Human-readable error message
        status_code: HTTP status code
        details: Optional additional error details

    Returns:
        JSONResponse with error payload
    """
    content = {
        "error": error,
        "message": message,
    }
    if details:
        content["details"] = details

    return JSONResponse(status_code=status_code, content=content)


def create_csv_download_response(result: ExportResult) -> Response:
    """
    Deliver an export as a CSV attachment.

    Args:
        result: Finished export

    Returns:
        Response with UTF-8 CSV body and Content-Disposition filename
    """
    return Response(
        content=result.data,
        media_type=result.media_type,
        headers={
            "Content-Disposition": f'attachment; filename="{result.filename}"',
            "X-Export-Row-Count": str(result.row_count),
        },
    )
