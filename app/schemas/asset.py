"""
Pydantic schemas for Frontify asset records.
Mirrors the GraphQL asset payload; every field except the id is optional
because custom metadata and media fields drift between accounts.
"""

from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


def text_or_none(v: Any) -> Any:
    """Scalars become strings; objects and lists in a text slot become None."""
    if v is None or isinstance(v, str):
        return v
    if isinstance(v, bool):
        return "true" if v else "false"
    if isinstance(v, (int, float)):
        return str(v)
    return None


def object_or_none(v: Any) -> Any:
    """Anything that is not an object is treated as absent."""
    if isinstance(v, (Mapping, BaseModel)):
        return v
    return None


def objects_only(v: Any) -> Any:
    """Keep the object items of a list; a non-list is treated as absent."""
    if not isinstance(v, (list, tuple)):
        return None
    return [item for item in v if isinstance(item, (Mapping, BaseModel))]


class FrontifyModel(BaseModel):
    """Base model accepting both camelCase aliases and field names."""

    model_config = ConfigDict(
        populate_by_name=True,
        extra="ignore",
        coerce_numbers_to_str=True,
    )


class Copyright(FrontifyModel):
    """Copyright block of an asset."""

    status: str | None = None
    notice: str | None = None

    _text = field_validator("status", "notice", mode="before")(text_or_none)


class Tag(FrontifyModel):
    """Asset tag as returned by Frontify."""

    value: str | None = None
    source: str | None = None

    _text = field_validator("value", "source", mode="before")(text_or_none)


class License(FrontifyModel):
    """License attached to an asset."""

    id: str | None = None
    title: str | None = None

    _text = field_validator("id", "title", mode="before")(text_or_none)


class CustomMetadataProperty(FrontifyModel):
    """Descriptor of a custom metadata property. The name becomes a CSV header."""

    id: str | None = None
    name: str | None = None

    _text = field_validator("id", "name", mode="before")(text_or_none)


class CustomMetadataOption(FrontifyModel):
    """Select/dropdown option value. Only the display text is exported."""

    option_id: str | None = Field(default=None, alias="optionId")
    text: str | None = None

    _text = field_validator("option_id", "text", mode="before")(text_or_none)


class CustomMetadataEntry(FrontifyModel):
    """
    One custom metadata field on an asset.

    Frontify returns either a single ``value`` (CustomMetadataValue) or a
    ``values`` list (CustomMetadataValues). Raw values are kept untyped
    here and classified by the metadata resolver.
    """

    descriptor: CustomMetadataProperty | None = Field(default=None, alias="property")
    typename: str | None = Field(default=None, alias="__typename")
    value: Any = None
    values: list[Any] | None = None

    _descriptor = field_validator("descriptor", mode="before")(object_or_none)
    _typename = field_validator("typename", mode="before")(text_or_none)

    @field_validator("values", mode="before")
    @classmethod
    def drop_non_list_values(cls, v: Any) -> Any:
        """Treat a non-list ``values`` payload as absent."""
        if v is not None and not isinstance(v, (list, tuple)):
            return None
        return v

    @property
    def name(self) -> str | None:
        """Property name, if the descriptor carries one."""
        return self.descriptor.name if self.descriptor else None


class AssetRecord(FrontifyModel):
    """A Frontify asset with standard and custom metadata."""

    id: str
    title: str | None = None
    description: str | None = None
    status: str | None = None
    created_at: str | None = Field(default=None, alias="createdAt")
    modified_at: str | None = Field(default=None, alias="modifiedAt")
    expires_at: str | None = Field(default=None, alias="expiresAt")
    copyright: Copyright | None = None
    custom_metadata: list[CustomMetadataEntry] | None = Field(default=None, alias="customMetadata")
    tags: list[Tag] | None = None
    licenses: list[License] | None = None
    preview_url: str | None = Field(default=None, alias="previewUrl")
    download_url: str | None = Field(default=None, alias="downloadUrl")
    alternative_text: str | None = Field(default=None, alias="alternativeText")
    duration: str | None = None

    _text = field_validator(
        "title",
        "description",
        "status",
        "created_at",
        "modified_at",
        "expires_at",
        "preview_url",
        "download_url",
        "alternative_text",
        "duration",
        mode="before",
    )(text_or_none)
    _copyright = field_validator("copyright", mode="before")(object_or_none)
    _lists = field_validator("custom_metadata", "tags", "licenses", mode="before")(objects_only)
