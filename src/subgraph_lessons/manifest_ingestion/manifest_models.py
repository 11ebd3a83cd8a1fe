"""Manifest domain entities."""

from __future__ import annotations

from dataclasses import dataclass

from subgraph_lessons.content_addressing import ContentIdentifier


@dataclass(frozen=True)
class DataSource:
    """One indexed contract (or data-source template) declared by a manifest."""

    kind: str
    name: str
    network: str | None
    address: str | None
    abi: str | None
    start_block: int | None


@dataclass(frozen=True)
class Manifest:
    """Deserialized subgraph manifest."""

    spec_version: str
    description: str | None
    repository: str | None
    schema_file: ContentIdentifier | None
    data_sources: tuple[DataSource, ...]
    templates: tuple[DataSource, ...]
    schema_path: str | None = None
