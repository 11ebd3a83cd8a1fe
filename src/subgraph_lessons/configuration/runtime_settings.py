"""Configuration domain entities."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

DEFAULT_IPFS_URL_TEMPLATE = "https://ipfs.network.thegraph.com/api/v0/cat?arg={cid}"


@dataclass(frozen=True)
class GatewaySettings:
    """Endpoints used to reach the subgraph and the document store."""

    graphql_url: str
    ipfs_url_template: str = DEFAULT_IPFS_URL_TEMPLATE
    timeout_seconds: float = 30.0


@dataclass(frozen=True)
class QuerySettings:
    """Query text plus the shape of the records it returns."""

    text: str
    collection: str
    columns: tuple[str, ...]
    source_path: Path | None


@dataclass(frozen=True)
class DocumentationSettings:
    """Output location for generated documentation."""

    output_dir: Path


@dataclass(frozen=True)
class Configuration:
    """Top-level configuration aggregate."""

    path: Path
    gateway: GatewaySettings
    query: QuerySettings | None
    documentation: DocumentationSettings
