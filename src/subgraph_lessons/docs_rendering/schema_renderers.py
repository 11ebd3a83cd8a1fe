"""Overview and entities document renderers."""

from __future__ import annotations

from collections.abc import Sequence

from subgraph_lessons.manifest_ingestion import Manifest
from subgraph_lessons.schema_documentation import DefinitionRecord

from .markdown_document import MarkdownDocument

OVERVIEW_TITLE = "Subgraph Overview"
OVERVIEW_PREAMBLE = (
    "This document was generated from the subgraph manifest. "
    "It lists the contracts the subgraph indexes."
)
ENTITIES_TITLE = "Entities"
DATA_SOURCE_COLUMNS: tuple[str, ...] = ("Name", "Address")
ENTITY_TABLE_COLUMNS: tuple[str, ...] = ("Field/Value", "Type", "Description")


def render_overview(manifest: Manifest) -> str:
    """Render the manifest overview document."""
    document = MarkdownDocument()
    document.heading(OVERVIEW_TITLE).paragraph(OVERVIEW_PREAMBLE)

    document.heading("Description", level=2)
    document.paragraph(manifest.description or "No description provided.")

    document.heading("Repository", level=2)
    if manifest.repository:
        document.link(manifest.repository, manifest.repository)
    else:
        document.paragraph("No repository provided.")

    document.heading("Data Sources", level=2)
    document.table(
        DATA_SOURCE_COLUMNS,
        [(source.name, source.address) for source in manifest.data_sources],
    )
    return document.render()


def render_entities(records: Sequence[DefinitionRecord]) -> str:
    """Render the table of contents plus one table per definition record."""
    document = MarkdownDocument()
    document.heading(ENTITIES_TITLE)
    document.link_list([(record.name, f"#{record.name.lower()}") for record in records])

    for record in records:
        document.heading(record.name, level=2)
        if record.description:
            document.paragraph(record.description)
        document.table(ENTITY_TABLE_COLUMNS, _record_rows(record))
    return document.render()


def _record_rows(record: DefinitionRecord) -> list[tuple[str, str, str]]:
    rows = [(field.name, str(field.field_type), field.description or "") for field in record.fields]
    rows.extend((value.name, "", value.description or "") for value in record.values)
    return rows
