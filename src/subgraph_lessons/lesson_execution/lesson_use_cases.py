"""Lesson use-case services.

Each lesson is one linear pipeline: load configuration, await the network
step, deserialize, then write or return the result. Collaborator failures are
wrapped in :class:`LessonExecutionError`; nothing is written before all data
is in hand.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable
from pathlib import Path

from subgraph_lessons.configuration import (
    Configuration,
    ConfigurationError,
    GatewaySettings,
    QuerySettings,
    load_configuration,
)
from subgraph_lessons.content_addressing import (
    ContentIdentifier,
    InvalidContentIdentifierError,
)
from subgraph_lessons.docs_rendering import write_documentation
from subgraph_lessons.graphql_gateway import GatewayError, SubgraphGateway
from subgraph_lessons.manifest_ingestion import Manifest, ManifestError, parse_manifest
from subgraph_lessons.results_writing import (
    RecordShapeError,
    records_from_response,
    write_records,
)
from subgraph_lessons.schema_documentation import (
    SchemaDocumentationError,
    extract_schema_text,
)

from .lesson_contracts import (
    DocumentationLessonOutcome,
    DocumentationLessonRequest,
    ExportLessonOutcome,
    ExportLessonRequest,
    ManifestLessonRequest,
    QueryLessonOutcome,
    QueryLessonRequest,
)

GatewayFactory = Callable[[GatewaySettings], SubgraphGateway]

_DEFAULT_DOCS_DIR = Path("docs")

logger = logging.getLogger(__name__)

_LESSON_ERRORS = (
    ConfigurationError,
    InvalidContentIdentifierError,
    GatewayError,
    ManifestError,
    RecordShapeError,
    SchemaDocumentationError,
    UnicodeDecodeError,
    OSError,
)


class LessonExecutionError(Exception):
    """Raised when a lesson cannot be completed."""


def execute_query_lesson(
    request: QueryLessonRequest, *, gateway_factory: GatewayFactory | None = None
) -> QueryLessonOutcome:
    """Run the configured query (or the query file override) and return its data."""
    try:
        configuration = load_configuration(request.config_path)
        query_text = _query_text(configuration, request.query_path)
        gateway = _build_gateway(configuration.gateway, gateway_factory)
        data = asyncio.run(gateway.run_query(query_text))
    except _LESSON_ERRORS as exc:
        raise LessonExecutionError(str(exc)) from exc
    return QueryLessonOutcome(data=data)


def execute_export_lesson(
    request: ExportLessonRequest, *, gateway_factory: GatewayFactory | None = None
) -> ExportLessonOutcome:
    """Run the configured query and export its records to CSV or XLSX."""
    try:
        configuration = load_configuration(request.config_path)
        query = _require_query(configuration)
        gateway = _build_gateway(configuration.gateway, gateway_factory)
        data = asyncio.run(gateway.run_query(query.text))
        records = records_from_response(data, query.collection, query.columns)
        output_path = write_records(
            query.columns, records, request.output_path, request.export_format
        )
    except _LESSON_ERRORS as exc:
        raise LessonExecutionError(str(exc)) from exc
    logger.info("Exported %d %s records to %s", len(records), query.collection, output_path)
    return ExportLessonOutcome(
        output_path=output_path,
        record_count=len(records),
        export_format=request.export_format,
    )


def execute_manifest_lesson(
    request: ManifestLessonRequest, *, gateway_factory: GatewayFactory | None = None
) -> Manifest:
    """Load and deserialize one manifest."""
    try:
        configuration = _optional_configuration(request.config_path)
        return _load_manifest(
            configuration,
            manifest_cid=request.manifest_cid,
            manifest_path=request.manifest_path,
            gateway_factory=gateway_factory,
        )
    except _LESSON_ERRORS as exc:
        raise LessonExecutionError(str(exc)) from exc


def execute_documentation_lesson(
    request: DocumentationLessonRequest, *, gateway_factory: GatewayFactory | None = None
) -> DocumentationLessonOutcome:
    """Generate overview.md and entities.md for a subgraph."""
    try:
        configuration = _optional_configuration(request.config_path)
        manifest = _load_manifest(
            configuration,
            manifest_cid=request.manifest_cid,
            manifest_path=request.manifest_path,
            gateway_factory=gateway_factory,
        )
        schema_text = _load_schema_text(
            configuration, manifest, request, gateway_factory=gateway_factory
        )
        extraction = extract_schema_text(schema_text)
        paths = write_documentation(
            manifest,
            extraction.records,
            _documentation_dir(configuration, request.output_dir),
        )
    except _LESSON_ERRORS as exc:
        raise LessonExecutionError(str(exc)) from exc
    return DocumentationLessonOutcome(
        paths=paths,
        record_count=len(extraction.records),
        notices=extraction.notices,
    )


def _optional_configuration(config_path: str | None) -> Configuration | None:
    if config_path is None:
        return None
    return load_configuration(config_path)


def _require_query(configuration: Configuration) -> QuerySettings:
    if configuration.query is None:
        raise ConfigurationError("Configuration section 'query' is required.")
    return configuration.query


def _query_text(configuration: Configuration, query_path: str | None) -> str:
    if query_path is None:
        return _require_query(configuration).text
    text = Path(query_path).read_text(encoding="utf-8")
    if not text.strip():
        raise ConfigurationError(f"Query file is empty: {query_path}")
    return text


def _build_gateway(
    settings: GatewaySettings, gateway_factory: GatewayFactory | None
) -> SubgraphGateway:
    factory = gateway_factory or SubgraphGateway
    return factory(settings)


def _load_manifest(
    configuration: Configuration | None,
    *,
    manifest_cid: str | None,
    manifest_path: str | None,
    gateway_factory: GatewayFactory | None,
) -> Manifest:
    text = _read_document(
        configuration,
        cid=manifest_cid,
        path=manifest_path,
        label="manifest",
        gateway_factory=gateway_factory,
    )
    return parse_manifest(text)


def _load_schema_text(
    configuration: Configuration | None,
    manifest: Manifest,
    request: DocumentationLessonRequest,
    *,
    gateway_factory: GatewayFactory | None,
) -> str:
    schema_cid = request.schema_cid
    schema_path = request.schema_path
    if schema_cid is None and schema_path is None:
        if manifest.schema_file is not None:
            schema_cid = str(manifest.schema_file)
        elif manifest.schema_path is not None and request.manifest_path is not None:
            # Local manifests name the schema relative to the manifest file.
            schema_path = str(Path(request.manifest_path).parent / manifest.schema_path)
        else:
            raise ManifestError(
                "Manifest does not link a schema file; pass a schema explicitly."
            )
    return _read_document(
        configuration,
        cid=schema_cid,
        path=schema_path,
        label="schema",
        gateway_factory=gateway_factory,
    )


def _read_document(
    configuration: Configuration | None,
    *,
    cid: str | None,
    path: str | None,
    label: str,
    gateway_factory: GatewayFactory | None,
) -> str:
    if (cid is None) == (path is None):
        raise ConfigurationError(f"Provide exactly one {label} CID or {label} file.")
    if path is not None:
        return Path(path).read_text(encoding="utf-8")

    identifier = ContentIdentifier.parse(cid)
    if configuration is None:
        raise ConfigurationError(f"Fetching the {label} by CID requires a configuration file.")
    gateway = _build_gateway(configuration.gateway, gateway_factory)
    logger.info("Fetching %s %s", label, identifier)
    return asyncio.run(gateway.fetch_document(identifier))


def _documentation_dir(configuration: Configuration | None, output_dir: str | None) -> Path:
    if output_dir is not None:
        return Path(output_dir)
    if configuration is not None:
        return configuration.documentation.output_dir
    return _DEFAULT_DOCS_DIR
