"""Subgraph gateway tests."""

from __future__ import annotations

import asyncio
import json

import httpx
import pytest
from subgraph_lessons.configuration import GatewaySettings
from subgraph_lessons.content_addressing import ContentIdentifier
from subgraph_lessons.graphql_gateway import (
    GatewayRequestError,
    GraphQLResponseError,
    SubgraphGateway,
)

GRAPHQL_URL = "https://api.example.com/subgraphs/name/example/exchange"
CID = "QmZ7hfY6Fa1MsPG6sD4Ns8TAd7r3U5vC2LSkbaHfnFe3Fu"


def _gateway(handler) -> SubgraphGateway:
    settings = GatewaySettings(
        graphql_url=GRAPHQL_URL,
        ipfs_url_template="https://ipfs.example.com/api/v0/cat?arg={cid}",
        timeout_seconds=5,
    )
    return SubgraphGateway(settings, transport=httpx.MockTransport(handler))


def test_run_query_posts_query_body_and_returns_data() -> None:
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, json={"data": {"tokens": [{"id": "0x1", "symbol": "ABC"}]}})

    data = asyncio.run(_gateway(handler).run_query("{ tokens { id symbol } }"))

    assert data == {"tokens": [{"id": "0x1", "symbol": "ABC"}]}
    assert seen[0].method == "POST"
    assert str(seen[0].url) == GRAPHQL_URL
    assert json.loads(seen[0].content) == {"query": "{ tokens { id symbol } }"}


def test_run_query_sends_variables_when_given() -> None:
    seen: list[dict] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(json.loads(request.content))
        return httpx.Response(200, json={"data": {}})

    asyncio.run(_gateway(handler).run_query("query($n: Int) { t(first: $n) }", {"n": 3}))

    assert seen[0]["variables"] == {"n": 3}


def test_non_2xx_status_raises_request_error() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(502, text="bad gateway")

    with pytest.raises(GatewayRequestError, match="HTTP 502") as exc_info:
        asyncio.run(_gateway(handler).run_query("{ tokens { id } }"))

    assert exc_info.value.status_code == 502


def test_transport_failure_raises_request_error() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    with pytest.raises(GatewayRequestError, match="connection refused"):
        asyncio.run(_gateway(handler).run_query("{ tokens { id } }"))


def test_graphql_errors_raise_response_error() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(
            200, json={"errors": [{"message": "Type `Query` has no field `tokenz`"}]}
        )

    with pytest.raises(GraphQLResponseError, match="has no field") as exc_info:
        asyncio.run(_gateway(handler).run_query("{ tokenz { id } }"))

    assert len(exc_info.value.errors) == 1


@pytest.mark.parametrize(
    "body",
    [b"not json", b"[1, 2]", b'{"data": null}', b'{"data": []}'],
)
def test_unusable_body_raises_response_error(body: bytes) -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, content=body)

    with pytest.raises(GraphQLResponseError):
        asyncio.run(_gateway(handler).run_query("{ tokens { id } }"))


def test_fetch_document_gets_raw_text_by_identifier() -> None:
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, text="specVersion: 0.0.4\n")

    text = asyncio.run(_gateway(handler).fetch_document(ContentIdentifier.parse(CID)))

    assert text == "specVersion: 0.0.4\n"
    assert seen[0].method == "GET"
    assert seen[0].url.params["arg"] == CID


def test_fetch_document_missing_raises_request_error() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(404)

    with pytest.raises(GatewayRequestError, match="HTTP 404"):
        asyncio.run(_gateway(handler).fetch_document(ContentIdentifier.parse(CID)))
