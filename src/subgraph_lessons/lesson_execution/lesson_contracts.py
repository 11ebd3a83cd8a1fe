"""Lesson execution entities."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any

from subgraph_lessons.docs_rendering import DocumentationPaths
from subgraph_lessons.results_writing import ExportFormat


@dataclass(frozen=True)
class QueryLessonRequest:
    """Input contract for running one GraphQL query."""

    config_path: str
    query_path: str | None = None


@dataclass(frozen=True)
class QueryLessonOutcome:
    """The ``data`` payload returned by the subgraph."""

    data: dict[str, Any]


@dataclass(frozen=True)
class ExportLessonRequest:
    """Input contract for exporting query records to a file."""

    config_path: str
    output_path: str
    export_format: ExportFormat = ExportFormat.CSV


@dataclass(frozen=True)
class ExportLessonOutcome:
    """Output contract for one completed export."""

    output_path: Path
    record_count: int
    export_format: ExportFormat


@dataclass(frozen=True)
class ManifestLessonRequest:
    """Input contract for loading one manifest, by CID or from a local file."""

    config_path: str | None = None
    manifest_cid: str | None = None
    manifest_path: str | None = None


@dataclass(frozen=True)
class DocumentationLessonRequest:  # pylint: disable=too-many-instance-attributes
    """Input contract for generating schema documentation."""

    config_path: str | None = None
    manifest_cid: str | None = None
    manifest_path: str | None = None
    schema_cid: str | None = None
    schema_path: str | None = None
    output_dir: str | None = None


@dataclass(frozen=True)
class DocumentationLessonOutcome:
    """Output contract for one documentation run."""

    paths: DocumentationPaths
    record_count: int
    notices: tuple[str, ...]
