"""
Pydantic schemas for Frontify collections.
"""

from pydantic import BaseModel, ConfigDict, Field


class FrontifyCollection(BaseModel):
    """A collection in the configured library."""

    id: str
    name: str
    asset_count: int = Field(default=0, alias="assetCount")

    model_config = ConfigDict(
        populate_by_name=True,
    )


class CollectionListResponse(BaseModel):
    """Response schema for collection listing."""

    items: list[dict]
    total: int
