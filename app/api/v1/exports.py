"""
Export endpoints.
Converts asset batches supplied by the caller into CSV.
"""

from fastapi import APIRouter

from app.core.responses import create_csv_download_response
from app.dependencies import Exporter
from app.schemas.error import ErrorResponse
from app.schemas.export import ExportPreviewResponse, ExportRequest

router = APIRouter()


@router.post(
    "/csv",
    responses={422: {"model": ErrorResponse}},
)
async def export_csv(body: ExportRequest, exporter: Exporter):
    """
    Export the given assets as a CSV download.

    Columns are the base asset fields followed by every custom metadata
    property seen in the batch, in first-seen order.
    """
    result = exporter.export(body.assets, body.label)
    return create_csv_download_response(result)


@router.post(
    "/preview",
    response_model=ExportPreviewResponse,
    responses={422: {"model": ErrorResponse}},
)
async def preview_export(body: ExportRequest, exporter: Exporter):
    """Return the column schema and rows an export would contain."""
    result = exporter.export(body.assets, body.label)
    return {
        "filename": result.filename,
        "columns": result.columns,
        "rows": result.rows,
        "rowCount": result.row_count,
    }
