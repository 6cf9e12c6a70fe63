"""Core utilities and exceptions for the Collection Export API."""

from app.core.exceptions import (
    ExportAPIException,
    NoDataError,
    ValidationException,
    CollectionNotFoundException,
    ConfigurationException,
    FrontifyAPIException,
)

__all__ = [
    "ExportAPIException",
    "NoDataError",
    "ValidationException",
    "CollectionNotFoundException",
    "ConfigurationException",
    "FrontifyAPIException",
]
