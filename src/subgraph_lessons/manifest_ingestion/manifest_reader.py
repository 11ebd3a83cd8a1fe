"""Manifest deserialization service."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any

import yaml

from subgraph_lessons.content_addressing import (
    ContentIdentifier,
    InvalidContentIdentifierError,
)

from .manifest_models import DataSource, Manifest


class ManifestError(Exception):
    """Raised when a manifest cannot be deserialized."""


def parse_manifest(text: str) -> Manifest:
    """Parse manifest YAML text into a :class:`Manifest`."""
    try:
        parsed = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ManifestError(f"Failed to parse manifest: {exc}") from exc

    if not isinstance(parsed, Mapping):
        raise ManifestError("Manifest root must be a mapping.")

    spec_version = parsed.get("specVersion")
    if spec_version is None:
        raise ManifestError("Manifest field 'specVersion' is required.")

    return Manifest(
        spec_version=str(spec_version),
        description=_optional_string(parsed.get("description"), "description"),
        repository=_optional_string(parsed.get("repository"), "repository"),
        schema_file=_schema_file(parsed.get("schema")),
        data_sources=_data_sources(parsed.get("dataSources"), "dataSources", required=True),
        templates=_data_sources(parsed.get("templates"), "templates", required=False),
        schema_path=_schema_path(parsed.get("schema")),
    )


def _schema_file(value: Any) -> ContentIdentifier | None:
    if value is None:
        return None
    if not isinstance(value, Mapping):
        raise ManifestError("Manifest field 'schema' must be a mapping.")
    file_link = value.get("file")
    # Deployed manifests link files as {"/": "/ipfs/<cid>"}; local ones use a path.
    if not isinstance(file_link, Mapping):
        return None
    target = file_link.get("/")
    if not isinstance(target, str):
        raise ManifestError("Manifest field 'schema.file./' must be a string.")
    try:
        return ContentIdentifier.parse(target)
    except InvalidContentIdentifierError as exc:
        raise ManifestError(f"Manifest schema link is invalid: {exc}") from exc


def _schema_path(value: Any) -> str | None:
    if not isinstance(value, Mapping):
        return None
    file_link = value.get("file")
    if isinstance(file_link, str) and file_link.strip():
        return file_link
    return None


def _data_sources(value: Any, field_name: str, *, required: bool) -> tuple[DataSource, ...]:
    if value is None:
        if required:
            raise ManifestError(f"Manifest field '{field_name}' is required.")
        return ()
    if isinstance(value, (str, bytes)) or not isinstance(value, Sequence):
        raise ManifestError(f"Manifest field '{field_name}' must be a list.")
    return tuple(
        _data_source(entry, f"{field_name}[{index}]") for index, entry in enumerate(value)
    )


def _data_source(value: Any, label: str) -> DataSource:
    if not isinstance(value, Mapping):
        raise ManifestError(f"Manifest entry '{label}' must be a mapping.")
    name = _optional_string(value.get("name"), f"{label}.name")
    if not name:
        raise ManifestError(f"Manifest entry '{label}' requires a name.")
    source = value.get("source") or {}
    if not isinstance(source, Mapping):
        raise ManifestError(f"Manifest field '{label}.source' must be a mapping.")
    return DataSource(
        kind=_optional_string(value.get("kind"), f"{label}.kind") or "",
        name=name,
        network=_optional_string(value.get("network"), f"{label}.network"),
        address=_optional_string(source.get("address"), f"{label}.source.address"),
        abi=_optional_string(source.get("abi"), f"{label}.source.abi"),
        start_block=_optional_int(source.get("startBlock"), f"{label}.source.startBlock"),
    )


def _optional_string(value: Any, field_name: str) -> str | None:
    if value is None:
        return None
    if not isinstance(value, str):
        raise ManifestError(f"Manifest field '{field_name}' must be a string.")
    stripped = value.strip()
    return stripped or None


def _optional_int(value: Any, field_name: str) -> int | None:
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, int):
        raise ManifestError(f"Manifest field '{field_name}' must be an integer.")
    return value
