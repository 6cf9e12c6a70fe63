"""
Pydantic schemas for CSV export requests and previews.
"""

from pydantic import BaseModel, ConfigDict, Field

from app.schemas.asset import AssetRecord


class ExportRequest(BaseModel):
    """Ad-hoc export of an already fetched asset batch."""

    label: str = Field(
        ...,
        description="Human-readable label; the download filename is derived from it",
        examples=["Q4 Partner Assets"],
    )
    assets: list[AssetRecord] = Field(
        default_factory=list,
        description="Asset records in export order",
    )


class ExportPreviewResponse(BaseModel):
    """Tabular view of an export without the CSV encoding."""

    filename: str
    columns: list[str]
    rows: list[dict[str, str]]
    row_count: int = Field(alias="rowCount")

    model_config = ConfigDict(
        populate_by_name=True,
    )
