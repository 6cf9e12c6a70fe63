"""
FastAPI dependency injection functions.
Provides common dependencies used across endpoints.
"""

from typing import Annotated

from fastapi import Depends

from app.config import Settings, get_settings
from app.services.frontify_client import FrontifyService
from app.services.tabular_exporter import TabularExporter


def get_frontify_service(settings: Annotated[Settings, Depends(get_settings)]) -> FrontifyService:
    """
    Build a Frontify client from settings.

    Raises:
        ConfigurationException: If Frontify access is not configured
    """
    return FrontifyService.from_settings(settings)


def get_exporter() -> TabularExporter:
    """Exporters hold no state; a fresh one per request."""
    return TabularExporter()


# Type aliases for cleaner endpoint signatures
AppSettings = Annotated[Settings, Depends(get_settings)]
Frontify = Annotated[FrontifyService, Depends(get_frontify_service)]
Exporter = Annotated[TabularExporter, Depends(get_exporter)]
