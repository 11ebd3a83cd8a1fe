"""Gateway error types."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any


class GatewayError(Exception):
    """Base error for gateway failures."""


class GatewayRequestError(GatewayError):
    """Raised when an endpoint is unreachable or answers with a non-2xx status."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class GraphQLResponseError(GatewayError):
    """Raised when a GraphQL response body is unusable or reports errors."""

    def __init__(self, message: str, errors: Sequence[Any] = ()) -> None:
        super().__init__(message)
        self.errors = tuple(errors)
