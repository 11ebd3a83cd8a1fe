"""Configuration loader service."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from pathlib import Path
from typing import Any
from urllib.parse import urlparse

import yaml

from .runtime_settings import (
    DEFAULT_IPFS_URL_TEMPLATE,
    Configuration,
    DocumentationSettings,
    GatewaySettings,
    QuerySettings,
)

_DEFAULT_DOCS_DIR = "docs"


class ConfigurationError(Exception):
    """Raised when the configuration file is invalid."""


def load_configuration(config_path: Path | str) -> Configuration:
    """Load and validate the configuration file."""
    path = Path(config_path)
    if not path.exists():
        raise ConfigurationError(f"Configuration file not found: {path}")

    text = _read_text(path, "Configuration file")
    try:
        parsed = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigurationError(f"Failed to parse configuration file: {exc}") from exc

    if parsed is None:
        parsed = {}

    if not isinstance(parsed, Mapping):
        raise ConfigurationError("Configuration root must be a mapping.")

    base_path = path.resolve().parent
    gateway = _parse_gateway_section(parsed.get("gateway"))
    query = _parse_query_section(parsed.get("query"), base_path)
    documentation = _parse_documentation_section(parsed.get("documentation"), base_path)

    return Configuration(
        path=path,
        gateway=gateway,
        query=query,
        documentation=documentation,
    )


def _parse_gateway_section(value: Any) -> GatewaySettings:
    section = _require_mapping(value, "gateway")
    graphql_url = _require_url(section.get("graphql_url"), "gateway.graphql_url")
    ipfs_url_template = _require_non_empty_string(
        section.get("ipfs_url_template", DEFAULT_IPFS_URL_TEMPLATE),
        "gateway.ipfs_url_template",
    )
    if "{cid}" not in ipfs_url_template:
        raise ConfigurationError("gateway.ipfs_url_template must contain a {cid} placeholder.")
    try:
        ipfs_url_template.format(cid="cid")
    except (KeyError, IndexError, ValueError) as exc:
        raise ConfigurationError(
            f"gateway.ipfs_url_template may only use the {{cid}} placeholder: {exc!r}"
        ) from exc
    _require_url(ipfs_url_template, "gateway.ipfs_url_template")
    timeout_seconds = _require_positive_number(
        section.get("timeout_seconds", 30), "gateway.timeout_seconds"
    )
    return GatewaySettings(
        graphql_url=graphql_url,
        ipfs_url_template=ipfs_url_template,
        timeout_seconds=timeout_seconds,
    )


def _parse_query_section(value: Any, base_path: Path) -> QuerySettings | None:
    if value is None:
        return None
    section = _require_mapping(value, "query")
    text, source_path = _load_query_text(section, base_path)
    collection = _require_non_empty_string(section.get("collection"), "query.collection")
    columns = _normalize_columns(section.get("columns"))
    return QuerySettings(
        text=text,
        collection=collection,
        columns=columns,
        source_path=source_path,
    )


def _load_query_text(section: Mapping[str, Any], base_path: Path) -> tuple[str, Path | None]:
    inline = section.get("inline")
    path_value = section.get("path")
    if inline and path_value:
        raise ConfigurationError("Query definition must not set both inline and path.")
    if inline:
        if not isinstance(inline, str):
            raise ConfigurationError("query.inline must be a string.")
        return inline, None
    if path_value:
        if not isinstance(path_value, str):
            raise ConfigurationError("query.path must be a string.")
        query_path = _resolve_path(base_path, path_value)
        if not query_path.exists():
            raise ConfigurationError(f"Query file not found: {query_path}")
        text = _read_text(query_path, "Query file")
        if not text.strip():
            raise ConfigurationError("Query text cannot be empty.")
        return text, query_path
    raise ConfigurationError("Query definition requires either inline or path.")


def _parse_documentation_section(value: Any, base_path: Path) -> DocumentationSettings:
    section = {} if value is None else _require_mapping(value, "documentation")
    output_dir = _require_non_empty_string(
        section.get("output_dir", _DEFAULT_DOCS_DIR), "documentation.output_dir"
    )
    return DocumentationSettings(output_dir=_resolve_path(base_path, output_dir))


def _normalize_columns(value: Any) -> tuple[str, ...]:
    if isinstance(value, str):
        columns = [item.strip() for item in value.split(",") if item.strip()]
    elif isinstance(value, Sequence):
        columns = []
        for item in value:
            if not isinstance(item, str):
                raise ConfigurationError("query.columns entries must be strings.")
            stripped = item.strip()
            if stripped:
                columns.append(stripped)
    else:
        raise ConfigurationError("query.columns must be a string or list of strings.")
    if not columns:
        raise ConfigurationError("query.columns must contain at least one column.")
    if len(set(columns)) != len(columns):
        raise ConfigurationError("query.columns must not contain duplicates.")
    return tuple(columns)


def _read_text(path: Path, label: str) -> str:
    try:
        return path.read_text(encoding="utf-8")
    except UnicodeDecodeError as exc:
        raise ConfigurationError(f"{label} is not valid UTF-8: {path}") from exc


def _resolve_path(base_path: Path, raw_path: str) -> Path:
    candidate = Path(raw_path)
    if not candidate.is_absolute():
        return (base_path / candidate).resolve()
    return candidate


def _require_mapping(value: Any, section_name: str) -> Mapping[str, Any]:
    if not isinstance(value, Mapping):
        raise ConfigurationError(f"Configuration section '{section_name}' is required.")
    return value


def _require_non_empty_string(value: Any, field_name: str) -> str:
    if not isinstance(value, str):
        raise ConfigurationError(f"{field_name} must be a string.")
    stripped = value.strip()
    if not stripped:
        raise ConfigurationError(f"{field_name} must not be empty.")
    return stripped


def _require_url(value: Any, field_name: str) -> str:
    url = _require_non_empty_string(value, field_name)
    parsed = urlparse(url)
    if parsed.scheme not in ("http", "https") or not parsed.netloc:
        raise ConfigurationError(f"{field_name} must be an http(s) URL.")
    return url


def _require_positive_number(value: Any, field_name: str) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ConfigurationError(f"{field_name} must be a number.")
    if value <= 0:
        raise ConfigurationError(f"{field_name} must be greater than zero.")
    return float(value)
