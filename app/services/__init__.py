"""
Business logic services for the Collection Export API.
Services handle core operations separate from API endpoints.
"""

from app.services.frontify_client import FrontifyService, sort_collections
from app.services.metadata_resolver import resolve
from app.services.tabular_exporter import (
    ExportResult,
    TabularExporter,
    build_column_schema,
    build_row,
    derive_filename,
    serialize,
)

__all__ = [
    "ExportResult",
    "FrontifyService",
    "TabularExporter",
    "build_column_schema",
    "build_row",
    "derive_filename",
    "resolve",
    "serialize",
    "sort_collections",
]
