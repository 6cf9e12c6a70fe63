"""
Configuration management for the Collection Export API.
Uses pydantic-settings for environment-based configuration.
"""

from functools import lru_cache
from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # API Settings
    API_V1_PREFIX: str = "/api/v1"
    PROJECT_NAME: str = "Frontify Collection Export"
    DEBUG: bool = False

    # Frontify GraphQL access
    FRONTIFY_DOMAIN: str | None = None
    FRONTIFY_BEARER_TOKEN: str | None = None
    FRONTIFY_LIBRARY_ID: str | None = None
    FRONTIFY_TIMEOUT: float = 30.0

    # Collection listing
    SHOW_ASSET_COUNT: bool = True
    COLLECTION_SORT_BY: Literal["name", "count"] = "name"

    # Logging
    LOG_LEVEL: str = "INFO"

    @property
    def frontify_configured(self) -> bool:
        """True when every value needed to reach Frontify is set."""
        return bool(
            self.FRONTIFY_DOMAIN
            and self.FRONTIFY_BEARER_TOKEN
            and self.FRONTIFY_LIBRARY_ID
        )


@lru_cache
def get_settings() -> Settings:
    """
    Get cached application settings.
    Uses lru_cache to ensure settings are only loaded once.
    """
    return Settings()
