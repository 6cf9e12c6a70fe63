"""
Tests for the Frontify GraphQL client against a mocked transport.
"""

import json

import httpx
import pytest

from app.core.exceptions import (
    CollectionNotFoundException,
    ConfigurationException,
    FrontifyAPIException,
)
from app.schemas.collection import FrontifyCollection
from app.services.frontify_client import FrontifyService, sort_collections


def make_service(handler) -> FrontifyService:
    return FrontifyService(
        domain="acme.frontify.com",
        token="secret",
        library_id="lib-001",
        transport=httpx.MockTransport(handler),
    )


def test_endpoint_strips_scheme():
    service = FrontifyService("https://acme.frontify.com/", "t", "lib")
    assert service.endpoint == "https://acme.frontify.com/graphql"

    service = FrontifyService("acme.frontify.com", "t", "lib")
    assert service.endpoint == "https://acme.frontify.com/graphql"


@pytest.mark.parametrize(
    "domain,token,library_id,expected",
    [
        ("", "t", "lib", "domain"),
        ("acme.frontify.com", None, "lib", "Token"),
        ("acme.frontify.com", "t", "", "Library ID"),
    ],
)
def test_missing_configuration_raises(domain, token, library_id, expected):
    with pytest.raises(ConfigurationException) as exc_info:
        FrontifyService(domain, token, library_id)

    assert expected in exc_info.value.message
    assert exc_info.value.error == "configuration_error"


@pytest.mark.asyncio
async def test_fetch_collections(frontify_service: FrontifyService):
    collections = await frontify_service.fetch_collections()

    assert [c.id for c in collections] == ["col-b", "col-a", "col-empty"]
    assert [c.asset_count for c in collections] == [1, 2, 0]


@pytest.mark.asyncio
async def test_request_carries_bearer_token_and_variables():
    seen = {}

    def handler(request: httpx.Request) -> httpx.Response:
        seen["auth"] = request.headers["Authorization"]
        seen["url"] = str(request.url)
        seen["variables"] = json.loads(request.content)["variables"]
        return httpx.Response(200, json={"data": {"library": {"collections": {"items": []}}}})

    assert await make_service(handler).fetch_collections() == []
    assert seen["auth"] == "Bearer secret"
    assert seen["url"] == "https://acme.frontify.com/graphql"
    assert seen["variables"] == {"libraryId": "lib-001"}


@pytest.mark.asyncio
async def test_fetch_collection_assets(frontify_service: FrontifyService):
    name, assets = await frontify_service.fetch_collection_assets("col-a")

    assert name == "Q4 Partner Assets!"
    assert [a.id for a in assets] == ["asset-1", "asset-2"]
    assert assets[0].custom_metadata[1].value == {"optionId": "x1", "text": "Original Red"}
    assert assets[1].custom_metadata[0].values == ["Cotton", "Silk"]


@pytest.mark.asyncio
async def test_fetch_collection_assets_unknown_collection(frontify_service: FrontifyService):
    with pytest.raises(CollectionNotFoundException):
        await frontify_service.fetch_collection_assets("missing")


@pytest.mark.asyncio
async def test_empty_collection_skips_asset_query():
    queries = []

    def handler(request: httpx.Request) -> httpx.Response:
        queries.append(json.loads(request.content)["query"])
        items = [{"id": "col-1", "name": "Empty", "assets": {"items": []}}]
        return httpx.Response(200, json={"data": {"library": {"collections": {"items": items}}}})

    name, assets = await make_service(handler).fetch_collection_assets("col-1")

    assert name == "Empty"
    assert assets == []
    assert len(queries) == 1


@pytest.mark.asyncio
async def test_graphql_errors_raise():
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, json={"errors": [{"message": "Bad token"}, {"message": "Expired"}]})

    with pytest.raises(FrontifyAPIException) as exc_info:
        await make_service(handler).fetch_collections()

    assert exc_info.value.message == "GraphQL error: Bad token, Expired"
    assert exc_info.value.status_code == 502


@pytest.mark.asyncio
async def test_http_error_status_raises():
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(401, text="unauthorized")

    with pytest.raises(FrontifyAPIException) as exc_info:
        await make_service(handler).fetch_collections()

    assert exc_info.value.message == "HTTP error! status: 401"


@pytest.mark.asyncio
async def test_transport_error_raises():
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    with pytest.raises(FrontifyAPIException) as exc_info:
        await make_service(handler).fetch_collections()

    assert "connection refused" in exc_info.value.message


@pytest.mark.asyncio
async def test_invalid_structure_raises():
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, json={"data": {"library": None}})

    with pytest.raises(FrontifyAPIException) as exc_info:
        await make_service(handler).fetch_collections()

    assert "Check your library ID" in exc_info.value.message


def test_sort_collections():
    collections = [
        FrontifyCollection(id="1", name="beta", asset_count=5),
        FrontifyCollection(id="2", name="Alpha", asset_count=1),
        FrontifyCollection(id="3", name="gamma", asset_count=9),
    ]

    assert [c.name for c in sort_collections(collections, "name")] == ["Alpha", "beta", "gamma"]
    assert [c.asset_count for c in sort_collections(collections, "count")] == [9, 5, 1]
    assert sort_collections(collections, "unknown") == collections
