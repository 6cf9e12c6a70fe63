"""
Collection endpoints.
Lists collections of the configured Frontify library and exports them as CSV.
"""

import logging

from fastapi import APIRouter, Query

from app.core.exceptions import NoDataError, ValidationException
from app.core.responses import create_csv_download_response
from app.dependencies import AppSettings, Exporter, Frontify
from app.schemas.collection import CollectionListResponse, FrontifyCollection
from app.services.frontify_client import sort_collections

logger = logging.getLogger(__name__)

router = APIRouter()

SORT_KEYS = ("name", "count")


def _collection_to_response(collection: FrontifyCollection, show_asset_count: bool) -> dict:
    """Convert a collection to its response dict."""
    response = {
        "id": collection.id,
        "name": collection.name,
    }
    if show_asset_count:
        response["assetCount"] = collection.asset_count
    return response


@router.get("", response_model=CollectionListResponse)
async def list_collections(
    settings: AppSettings,
    frontify: Frontify,
    sortBy: str | None = Query(default=None, description="Sort order: name or count"),
):
    """
    List collections in the configured library.

    Sorted by name (A-Z) or by asset count (high to low); defaults to
    COLLECTION_SORT_BY. Asset counts are hidden when SHOW_ASSET_COUNT is off.
    """
    sort_by = sortBy or settings.COLLECTION_SORT_BY
    if sort_by not in SORT_KEYS:
        raise ValidationException(
            f"Unknown sort order: {sort_by}",
            details={"allowed": list(SORT_KEYS)},
        )

    collections = await frontify.fetch_collections()
    sorted_collections = sort_collections(collections, sort_by)

    items = [_collection_to_response(c, settings.SHOW_ASSET_COUNT) for c in sorted_collections]
    return {
        "items": items,
        "total": len(items),
    }


@router.get("/{collection_id}/export")
async def export_collection(
    collection_id: str,
    frontify: Frontify,
    exporter: Exporter,
):
    """
    Export every asset of a collection as a CSV download.

    The filename is derived from the collection name. A collection without
    assets is rejected with 422 instead of producing an empty file.
    """
    name, assets = await frontify.fetch_collection_assets(collection_id)
    if not assets:
        raise NoDataError("Collection has no assets to export", details={"collectionId": collection_id})

    logger.info(f"Exporting collection {name} ({collection_id})")
    result = exporter.export(assets, name)
    return create_csv_download_response(result)
