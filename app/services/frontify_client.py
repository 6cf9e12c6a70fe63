"""
Frontify GraphQL client.
Fetches collections and asset metadata for export from the configured library.
"""

import logging
import re
from typing import Any

import httpx

from app.config import Settings, get_settings
from app.core.exceptions import (
    CollectionNotFoundException,
    ConfigurationException,
    FrontifyAPIException,
)
from app.schemas.asset import AssetRecord
from app.schemas.collection import FrontifyCollection

logger = logging.getLogger(__name__)


LIBRARY_COLLECTIONS_QUERY = """
query GetLibraryCollections($libraryId: ID!) {
  library(id: $libraryId) {
    collections {
      total
      items {
        id
        name
        assets {
          total
        }
      }
    }
  }
}
"""

COLLECTION_ASSETS_QUERY = """
query GetCollectionAssetIds($libraryId: ID!) {
  library(id: $libraryId) {
    collections {
      items {
        id
        name
        assets {
          items {
            id
          }
        }
      }
    }
  }
}
"""

ASSETS_BY_IDS_QUERY = """
query GetAssetsByIds($ids: [ID!]!) {
  assets(ids: $ids) {
    id
    title
    description
    createdAt
    modifiedAt
    copyright {
      status
      notice
    }
    expiresAt
    customMetadata {
      property {
        id
        name
      }
      ... on CustomMetadataValue {
        __typename
        value
      }
      ... on CustomMetadataValues {
        __typename
        values
      }
    }
    tags {
      value
      source
    }
    ... on Image {
      alternativeText
      previewUrl
      downloadUrl
    }
    ... on Video {
      alternativeText
      previewUrl
      downloadUrl
      duration
    }
    ... on Document {
      previewUrl
      downloadUrl
    }
    ... on Audio {
      previewUrl
      downloadUrl
    }
    status
  }
}
"""

_SCHEME = re.compile(r"^https?://")


def sort_collections(collections: list[FrontifyCollection], sort_by: str) -> list[FrontifyCollection]:
    """
    Sort collections for display.

    Args:
        collections: Collections in API order
        sort_by: "name" (A-Z, case-insensitive) or "count" (most assets first)

    Returns:
        New sorted list; input order is kept for unknown keys
    """
    if sort_by == "name":
        return sorted(collections, key=lambda c: c.name.casefold())
    if sort_by == "count":
        return sorted(collections, key=lambda c: c.asset_count, reverse=True)
    return list(collections)


class FrontifyService:
    """
    Thin GraphQL client for one Frontify library.

    Authenticates with a bearer token. Retries and pagination are left to
    the caller.
    """

    def __init__(
        self,
        domain: str | None,
        token: str | None,
        library_id: str | None,
        timeout: float = 30.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        """
        Initialize the client.

        Args:
            domain: Frontify domain, with or without scheme
            token: API bearer token
            library_id: Library containing the collections
            timeout: Request timeout in seconds
            transport: Optional httpx transport (used by tests)

        Raises:
            ConfigurationException: If domain, token or library id is missing
        """
        if not domain:
            raise ConfigurationException("Frontify domain is required.")
        if not token:
            raise ConfigurationException("API Bearer Token is required. Set FRONTIFY_BEARER_TOKEN.")
        if not library_id:
            raise ConfigurationException("Library ID is required. Set FRONTIFY_LIBRARY_ID.")

        self.domain = domain
        self.token = token
        self.library_id = library_id
        self.timeout = timeout
        self.transport = transport

    @classmethod
    def from_settings(cls, settings: Settings | None = None) -> "FrontifyService":
        """Build a client from application settings."""
        settings = settings or get_settings()
        return cls(
            domain=settings.FRONTIFY_DOMAIN,
            token=settings.FRONTIFY_BEARER_TOKEN,
            library_id=settings.FRONTIFY_LIBRARY_ID,
            timeout=settings.FRONTIFY_TIMEOUT,
        )

    @property
    def endpoint(self) -> str:
        """GraphQL endpoint for the configured domain."""
        clean_domain = _SCHEME.sub("", self.domain).rstrip("/")
        return f"https://{clean_domain}/graphql"

    async def execute_query(self, query: str, variables: dict[str, Any] | None = None) -> dict[str, Any]:
        """
        Execute a GraphQL query.

        Returns:
            The ``data`` member of the response

        Raises:
            FrontifyAPIException: On transport errors, non-2xx responses
                or a GraphQL ``errors`` array
        """
        headers = {
            "Content-Type": "application/json",
            "Authorization": f"Bearer {self.token}",
        }
        payload = {"query": query, "variables": variables or {}}

        try:
            async with httpx.AsyncClient(timeout=self.timeout, transport=self.transport) as client:
                response = await client.post(self.endpoint, json=payload, headers=headers)
        except httpx.HTTPError as e:
            logger.error(f"GraphQL request to {self.endpoint} failed: {e}")
            raise FrontifyAPIException(
                message=f"Failed to reach Frontify: {str(e)}",
                details={"endpoint": self.endpoint},
            )

        if response.is_error:
            logger.error(f"GraphQL request returned HTTP {response.status_code}")
            raise FrontifyAPIException(
                message=f"HTTP error! status: {response.status_code}",
                details={"status": response.status_code},
            )

        try:
            result = response.json()
        except ValueError:
            raise FrontifyAPIException(message="Frontify returned a non-JSON response")

        if result.get("errors"):
            error_message = ", ".join(str(e.get("message", e)) for e in result["errors"])
            logger.error(f"GraphQL error: {error_message}")
            raise FrontifyAPIException(message=f"GraphQL error: {error_message}")

        return result.get("data") or {}

    async def fetch_collections(self) -> list[FrontifyCollection]:
        """
        List collections in the library.

        Raises:
            FrontifyAPIException: If the response lacks the collections list
        """
        data = await self.execute_query(LIBRARY_COLLECTIONS_QUERY, {"libraryId": self.library_id})
        items = ((data.get("library") or {}).get("collections") or {}).get("items")
        if items is None:
            raise FrontifyAPIException(
                message="Invalid response structure from Frontify API. Check your library ID.",
            )

        collections = [
            FrontifyCollection(
                id=item["id"],
                name=item.get("name") or "",
                asset_count=(item.get("assets") or {}).get("total") or 0,
            )
            for item in items
        ]
        logger.info(f"Fetched {len(collections)} collections from library {self.library_id}")
        return collections

    async def fetch_collection(self, collection_id: str) -> dict[str, Any]:
        """
        Fetch a collection with its asset ids.

        Raises:
            CollectionNotFoundException: If the library has no such collection
        """
        data = await self.execute_query(COLLECTION_ASSETS_QUERY, {"libraryId": self.library_id})
        items = ((data.get("library") or {}).get("collections") or {}).get("items") or []

        collection = next((c for c in items if c.get("id") == collection_id), None)
        if collection is None:
            raise CollectionNotFoundException(collection_id)
        return collection

    async def fetch_assets(self, asset_ids: list[str]) -> list[AssetRecord]:
        """
        Fetch full metadata for the given asset ids.

        Raises:
            FrontifyAPIException: If the response lacks the assets list
        """
        if not asset_ids:
            return []

        data = await self.execute_query(ASSETS_BY_IDS_QUERY, {"ids": asset_ids})
        assets = data.get("assets")
        if assets is None:
            raise FrontifyAPIException(message="Invalid response structure from Frontify API")

        records = [AssetRecord.model_validate(asset) for asset in assets if asset]
        logger.info(f"Fetched metadata for {len(records)} assets")
        return records

    async def fetch_collection_assets(self, collection_id: str) -> tuple[str, list[AssetRecord]]:
        """
        Fetch every asset in a collection.

        Returns:
            Tuple of (collection name, asset records)
        """
        collection = await self.fetch_collection(collection_id)
        asset_ids = [a["id"] for a in (collection.get("assets") or {}).get("items") or []]
        logger.info(f"Collection {collection_id} has {len(asset_ids)} assets")

        assets = await self.fetch_assets(asset_ids)
        return collection.get("name") or collection_id, assets
