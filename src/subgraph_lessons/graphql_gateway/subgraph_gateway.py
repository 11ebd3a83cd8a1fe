"""Async HTTP access to a subgraph's GraphQL API and the document store."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

import httpx

from subgraph_lessons.configuration.runtime_settings import GatewaySettings
from subgraph_lessons.content_addressing import ContentIdentifier

from .gateway_errors import GatewayRequestError, GraphQLResponseError

logger = logging.getLogger(__name__)


class SubgraphGateway:
    """Issues one request per call against the configured endpoints.

    Every call opens its own ``httpx.AsyncClient``; there is no retry and no
    pagination. ``transport`` lets callers substitute an ``httpx`` transport,
    for example ``httpx.MockTransport``.
    """

    def __init__(
        self,
        settings: GatewaySettings,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._settings = settings
        self._transport = transport

    async def run_query(
        self, query_text: str, variables: Mapping[str, Any] | None = None
    ) -> dict[str, Any]:
        """POST a GraphQL query and return the ``data`` mapping of the response."""
        payload: dict[str, Any] = {"query": query_text}
        if variables:
            payload["variables"] = dict(variables)

        logger.debug("POST %s", self._settings.graphql_url)
        response = await self._send("POST", self._settings.graphql_url, json=payload)
        return _extract_data(response)

    async def fetch_document(self, identifier: ContentIdentifier) -> str:
        """GET the raw text of a stored document such as a manifest or schema."""
        url = self._settings.ipfs_url_template.format(cid=identifier)
        logger.debug("GET %s", url)
        response = await self._send("GET", url)
        return response.text

    async def _send(self, method: str, url: str, **kwargs: Any) -> httpx.Response:
        try:
            async with httpx.AsyncClient(
                timeout=self._settings.timeout_seconds,
                transport=self._transport,
            ) as client:
                response = await client.request(method, url, **kwargs)
                response.raise_for_status()
                await response.aread()
                return response
        except httpx.HTTPStatusError as exc:
            status_code = exc.response.status_code
            raise GatewayRequestError(
                f"{method} {url} failed with HTTP {status_code}", status_code=status_code
            ) from exc
        except httpx.HTTPError as exc:
            raise GatewayRequestError(f"{method} {url} failed: {exc}") from exc


def _extract_data(response: httpx.Response) -> dict[str, Any]:
    try:
        body = response.json()
    except ValueError as exc:
        raise GraphQLResponseError(f"GraphQL response is not valid JSON: {exc}") from exc

    if not isinstance(body, Mapping):
        raise GraphQLResponseError("GraphQL response body must be a JSON object.")

    errors = body.get("errors")
    if errors:
        if not isinstance(errors, list):
            errors = [errors]
        messages = [
            error.get("message", str(error)) if isinstance(error, Mapping) else str(error)
            for error in errors
        ]
        raise GraphQLResponseError(f"GraphQL errors: {'; '.join(messages)}", errors=errors)

    data = body.get("data")
    if not isinstance(data, Mapping):
        raise GraphQLResponseError("GraphQL response has no 'data' object.")
    return dict(data)
