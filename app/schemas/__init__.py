"""
Pydantic schemas for request/response validation.
"""

from app.schemas.asset import (
    AssetRecord,
    Copyright,
    CustomMetadataEntry,
    CustomMetadataOption,
    CustomMetadataProperty,
    License,
    Tag,
)
from app.schemas.collection import CollectionListResponse, FrontifyCollection
from app.schemas.export import ExportPreviewResponse, ExportRequest
from app.schemas.error import ErrorResponse

__all__ = [
    # Asset schemas
    "AssetRecord",
    "Copyright",
    "CustomMetadataEntry",
    "CustomMetadataOption",
    "CustomMetadataProperty",
    "License",
    "Tag",
    # Collection schemas
    "CollectionListResponse",
    "FrontifyCollection",
    # Export schemas
    "ExportPreviewResponse",
    "ExportRequest",
    # Error schemas
    "ErrorResponse",
]
