"""Documentation file writer."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path

from subgraph_lessons.manifest_ingestion import Manifest
from subgraph_lessons.schema_documentation import DefinitionRecord

from .schema_renderers import render_entities, render_overview

OVERVIEW_FILENAME = "overview.md"
ENTITIES_FILENAME = "entities.md"

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DocumentationPaths:
    """Locations of the written documentation files."""

    overview: Path
    entities: Path


def write_documentation(
    manifest: Manifest,
    records: Sequence[DefinitionRecord],
    output_dir: Path | str,
) -> DocumentationPaths:
    """Render both documents, then overwrite them in ``output_dir``."""
    overview_text = render_overview(manifest)
    entities_text = render_entities(records)

    destination = Path(output_dir)
    destination.mkdir(parents=True, exist_ok=True)
    paths = DocumentationPaths(
        overview=(destination / OVERVIEW_FILENAME).resolve(),
        entities=(destination / ENTITIES_FILENAME).resolve(),
    )
    paths.overview.write_text(overview_text, encoding="utf-8")
    paths.entities.write_text(entities_text, encoding="utf-8")
    logger.info("Wrote %s and %s", paths.overview, paths.entities)
    return paths
