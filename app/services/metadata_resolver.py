"""
Custom metadata value resolution.

Frontify returns custom metadata values in several shapes: plain strings
for text fields, option objects (``{"optionId": ..., "text": ...}``) for
select fields, and occasionally something else entirely when a field type
is new or misconfigured. Every shape is reduced to a display string here.
"""

import json
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Union

from app.schemas.asset import CustomMetadataOption


@dataclass(frozen=True)
class PlainValue:
    """A plain text value."""

    text: str


@dataclass(frozen=True)
class OptionValue:
    """A select option; only ``text`` is shown to users."""

    text: str
    option_id: str | None = None


@dataclass(frozen=True)
class UnknownValue:
    """Any shape not recognised above."""

    raw: Any


MetadataValue = Union[PlainValue, OptionValue, UnknownValue]


def classify(raw: Any) -> MetadataValue | None:
    """
    Classify a raw metadata value.

    Args:
        raw: Value as found in a ``value`` field or ``values`` list

    Returns:
        The matching variant, or None when the value is absent
    """
    if raw is None:
        return None
    if isinstance(raw, str):
        return PlainValue(raw)
    if isinstance(raw, CustomMetadataOption):
        if isinstance(raw.text, str):
            return OptionValue(raw.text, raw.option_id)
        return UnknownValue(raw.model_dump(by_alias=True, exclude_none=True))
    if isinstance(raw, Mapping) and isinstance(raw.get("text"), str):
        return OptionValue(raw["text"], raw.get("optionId"))
    return UnknownValue(raw)


def stringify(raw: Any) -> str:
    """Best-effort string for values of unknown shape. Never raises."""
    if isinstance(raw, bool):
        return "true" if raw else "false"
    if isinstance(raw, (Mapping, list, tuple)):
        try:
            return json.dumps(raw, ensure_ascii=False, separators=(",", ":"))
        except (TypeError, ValueError):
            return str(raw)
    return str(raw)


def resolve(raw: Any) -> str:
    """
    Resolve a raw metadata value into its display string.

    None becomes an empty string, plain strings pass through unchanged,
    option objects yield their ``text``; anything else is stringified.
    """
    value = classify(raw)
    if value is None:
        return ""
    if isinstance(value, (PlainValue, OptionValue)):
        return value.text
    return stringify(value.raw)
