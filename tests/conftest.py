"""
Pytest configuration and fixtures for the Collection Export API tests.
"""

import json
from collections.abc import AsyncGenerator
from typing import Any

import httpx
import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport

from app.config import Settings, get_settings
from app.dependencies import get_frontify_service
from app.main import app
from app.services.frontify_client import FrontifyService


@pytest.fixture
def test_settings() -> Settings:
    """Get test settings."""
    return Settings(
        FRONTIFY_DOMAIN="https://acme.frontify.com",
        FRONTIFY_BEARER_TOKEN="test-token",
        FRONTIFY_LIBRARY_ID="lib-001",
        SHOW_ASSET_COUNT=True,
        COLLECTION_SORT_BY="name",
    )


@pytest.fixture
def sample_assets() -> list[dict[str, Any]]:
    """Asset payloads as returned by the Frontify GraphQL API."""
    return [
        {
            "id": "asset-1",
            "title": "Hero Banner",
            "description": "Homepage hero, 2024 campaign",
            "status": "FINISHED",
            "createdAt": "2024-01-05T10:00:00Z",
            "modifiedAt": "2024-02-01T09:30:00Z",
            "copyright": {"status": "COPYRIGHTED", "notice": "Acme, Inc. \"Premium\""},
            "tags": [
                {"value": "campaign", "source": "USER"},
                {"value": "hero", "source": "AI"},
            ],
            "licenses": [{"id": "lic-1", "title": "Internal Use"}],
            "previewUrl": "https://cdn.example.com/preview/1.png",
            "downloadUrl": "https://cdn.example.com/download/1.png",
            "alternativeText": "Smiling customer",
            "customMetadata": [
                {
                    "property": {"id": "p-photographer", "name": "Photographer"},
                    "__typename": "CustomMetadataValue",
                    "value": "Smith Studio",
                },
                {
                    "property": {"id": "p-color", "name": "Color"},
                    "__typename": "CustomMetadataValue",
                    "value": {"optionId": "x1", "text": "Original Red"},
                },
            ],
        },
        {
            "id": "asset-2",
            "title": "Product Shot",
            "customMetadata": [
                {
                    "property": {"id": "p-material", "name": "Material"},
                    "__typename": "CustomMetadataValues",
                    "values": ["Cotton", "Silk"],
                },
                {
                    "property": {"id": "p-color", "name": "Color"},
                    "__typename": "CustomMetadataValue",
                    "value": None,
                },
            ],
        },
    ]


def build_frontify_transport(
    collections: list[dict[str, Any]],
    assets: list[dict[str, Any]],
) -> httpx.MockTransport:
    """
    Mock Frontify GraphQL endpoint.

    Args:
        collections: Collection payloads, each with "id", "name" and "assetIds"
        assets: Asset payloads returned by the assets-by-ids query
    """

    def handler(request: httpx.Request) -> httpx.Response:
        payload = json.loads(request.content)
        query = payload["query"]

        if "GetLibraryCollections" in query:
            items = [
                {"id": c["id"], "name": c["name"], "assets": {"total": len(c["assetIds"])}}
                for c in collections
            ]
            return httpx.Response(200, json={"data": {"library": {"collections": {"total": len(items), "items": items}}}})

        if "GetCollectionAssetIds" in query:
            items = [
                {"id": c["id"], "name": c["name"], "assets": {"items": [{"id": i} for i in c["assetIds"]]}}
                for c in collections
            ]
            return httpx.Response(200, json={"data": {"library": {"collections": {"items": items}}}})

        if "GetAssetsByIds" in query:
            wanted = payload["variables"]["ids"]
            found = [a for a in assets if a["id"] in wanted]
            return httpx.Response(200, json={"data": {"assets": found}})

        return httpx.Response(400, json={"errors": [{"message": "Unknown query"}]})

    return httpx.MockTransport(handler)


@pytest.fixture
def sample_collections() -> list[dict[str, Any]]:
    """Collections of the mocked library."""
    return [
        {"id": "col-b", "name": "Spring Launch", "assetIds": ["asset-2"]},
        {"id": "col-a", "name": "Q4 Partner Assets!", "assetIds": ["asset-1", "asset-2"]},
        {"id": "col-empty", "name": "Archive", "assetIds": []},
    ]


@pytest.fixture
def frontify_service(test_settings, sample_collections, sample_assets) -> FrontifyService:
    """Frontify client wired to the mock transport."""
    return FrontifyService(
        domain=test_settings.FRONTIFY_DOMAIN,
        token=test_settings.FRONTIFY_BEARER_TOKEN,
        library_id=test_settings.FRONTIFY_LIBRARY_ID,
        transport=build_frontify_transport(sample_collections, sample_assets),
    )


@pytest_asyncio.fixture(scope="function")
async def client(test_settings, frontify_service) -> AsyncGenerator[AsyncClient, None]:
    """Create a test HTTP client."""

    def override_get_settings():
        return test_settings

    def override_get_frontify_service():
        return frontify_service

    app.dependency_overrides[get_settings] = override_get_settings
    app.dependency_overrides[get_frontify_service] = override_get_frontify_service

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client

    app.dependency_overrides.clear()
