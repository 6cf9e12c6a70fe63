"""
Tabular export of asset metadata.

Turns a batch of asset records into flat rows, derives the column schema
from whatever custom metadata the batch actually carries, and renders the
result as CSV text with a filesystem-safe filename.
"""

import logging
import re
from collections.abc import Iterable, Mapping, Sequence
from dataclasses import dataclass
from typing import Any

from app.core.exceptions import NoDataError
from app.schemas.asset import AssetRecord
from app.services.metadata_resolver import resolve

logger = logging.getLogger(__name__)

ExportRow = dict[str, str]

BASE_COLUMNS = (
    "id",
    "title",
    "description",
    "status",
    "createdAt",
    "modifiedAt",
    "expiresAt",
    "copyrightStatus",
    "copyrightNotice",
    "previewUrl",
    "downloadUrl",
    "alternativeText",
    "duration",
    "tags",
    "licenses",
)

LIST_SEPARATOR = ", "
# Metadata text may itself contain commas.
METADATA_VALUES_SEPARATOR = "; "

CSV_MEDIA_TYPE = "text/csv;charset=utf-8"
FILENAME_SUFFIX = "_assets.csv"

_NEEDS_QUOTING = (",", '"', "\n")
_NON_ALNUM = re.compile(r"[^A-Za-z0-9]")
_UNDERSCORE_RUN = re.compile(r"_+")


def _coerce_asset(asset: AssetRecord | Mapping[str, Any]) -> AssetRecord:
    if isinstance(asset, AssetRecord):
        return asset
    return AssetRecord.model_validate(asset)


def build_row(asset: AssetRecord | Mapping[str, Any]) -> ExportRow:
    """
    Flatten one asset into an export row.

    Base columns always come first, defaulting to empty strings. Custom
    metadata follows in source order, one column per property name; a
    repeated name overwrites the earlier value. An entry with a name but
    no usable value still registers its column with an empty string.

    Args:
        asset: AssetRecord or raw asset mapping (camelCase keys)

    Returns:
        Ordered mapping of column name to cell text
    """
    asset = _coerce_asset(asset)
    copyright_ = asset.copyright

    row: ExportRow = {
        "id": asset.id,
        "title": asset.title or "",
        "description": asset.description or "",
        "status": asset.status or "",
        "createdAt": asset.created_at or "",
        "modifiedAt": asset.modified_at or "",
        "expiresAt": asset.expires_at or "",
        "copyrightStatus": (copyright_.status if copyright_ else None) or "",
        "copyrightNotice": (copyright_.notice if copyright_ else None) or "",
        "previewUrl": asset.preview_url or "",
        "downloadUrl": asset.download_url or "",
        "alternativeText": asset.alternative_text or "",
        "duration": asset.duration or "",
        "tags": LIST_SEPARATOR.join(tag.value or "" for tag in asset.tags or []),
        "licenses": LIST_SEPARATOR.join(lic.title or "" for lic in asset.licenses or []),
    }

    for entry in asset.custom_metadata or []:
        name = entry.name
        if not name:
            continue

        if entry.value is not None:
            cell = resolve(entry.value)
        elif entry.values:
            cell = METADATA_VALUES_SEPARATOR.join(resolve(v) for v in entry.values)
        else:
            cell = ""

        row[name] = cell

    return row


def build_rows(assets: Iterable[AssetRecord | Mapping[str, Any]]) -> list[ExportRow]:
    """Flatten every asset, preserving input order."""
    return [build_row(asset) for asset in assets]


def build_column_schema(rows: Iterable[Mapping[str, Any]]) -> list[str]:
    """
    Union of row keys in first-seen order.

    Rows are scanned in input order and keys in each row's own insertion
    order. Nothing is sorted, so header order is reproducible for the same
    input and dynamic columns appear where they were first discovered.
    """
    columns: dict[str, None] = {}
    for row in rows:
        for key in row:
            columns.setdefault(key, None)
    return list(columns)


def escape_csv_value(value: str) -> str:
    """
    Quote a cell if it contains a comma, a double quote or a newline.

    Internal double quotes are doubled. Anything else is emitted bare.
    """
    if any(ch in value for ch in _NEEDS_QUOTING):
        return '"' + value.replace('"', '""') + '"'
    return value


def _cell(row: Mapping[str, Any], column: str) -> str:
    value = row.get(column)
    return "" if value is None else str(value)


def serialize(rows: Sequence[Mapping[str, Any]], columns: Sequence[str]) -> str:
    """
    Render rows as CSV text.

    One header line followed by one line per row, joined by ``\\n`` with
    no trailing newline. Missing cells render empty.

    Raises:
        NoDataError: If there are no rows
    """
    if not rows:
        raise NoDataError()

    lines = [",".join(escape_csv_value(column) for column in columns)]
    for row in rows:
        lines.append(",".join(escape_csv_value(_cell(row, column)) for column in columns))
    return "\n".join(lines)


def derive_filename(label: str) -> str:
    """
    Derive a download filename from a label.

    Non-alphanumeric ASCII characters become underscores, runs of
    underscores collapse, the result is lowercased and ``_assets.csv`` is
    appended. ``"Q4 Partner Assets!"`` becomes
    ``"q4_partner_assets__assets.csv"``. A label without letters or digits
    yields ``"_assets.csv"``.
    """
    stem = _UNDERSCORE_RUN.sub("_", _NON_ALNUM.sub("_", label)).lower()
    if stem.strip("_") == "":
        logger.warning(f"Export label {label!r} has no letters or digits; using {FILENAME_SUFFIX!r}")
        return FILENAME_SUFFIX
    return f"{stem}{FILENAME_SUFFIX}"


@dataclass(frozen=True)
class ExportResult:
    """Finished export ready for delivery."""

    filename: str
    columns: list[str]
    rows: list[ExportRow]
    content: str
    media_type: str = CSV_MEDIA_TYPE

    @property
    def data(self) -> bytes:
        """CSV content encoded as UTF-8."""
        return self.content.encode("utf-8")

    @property
    def row_count(self) -> int:
        return len(self.rows)


class TabularExporter:
    """Runs the full asset-to-CSV pipeline for one batch."""

    def prepare(self, assets: Sequence[AssetRecord | Mapping[str, Any]]) -> tuple[list[ExportRow], list[str]]:
        """
        Build rows and the column schema for a batch.

        Raises:
            NoDataError: If the batch is empty
        """
        if not assets:
            raise NoDataError()

        rows = build_rows(assets)
        columns = build_column_schema(rows)
        dynamic = len(columns) - len(BASE_COLUMNS)
        logger.debug(f"Prepared {len(rows)} rows with {len(columns)} columns ({dynamic} custom)")
        return rows, columns

    def export(self, assets: Sequence[AssetRecord | Mapping[str, Any]], label: str) -> ExportResult:
        """
        Export a batch of assets as CSV.

        Args:
            assets: Asset records in the order they should appear
            label: Collection name or other label for the filename

        Returns:
            ExportResult with filename, schema, rows and CSV text

        Raises:
            NoDataError: If the batch is empty
        """
        rows, columns = self.prepare(assets)
        content = serialize(rows, columns)
        filename = derive_filename(label)
        logger.info(f"Exported {len(rows)} assets to {filename}")
        return ExportResult(
            filename=filename,
            columns=columns,
            rows=rows,
            content=content,
        )
