"""Documentation rendering exports."""

from .documentation_writer import (
    ENTITIES_FILENAME,
    OVERVIEW_FILENAME,
    DocumentationPaths,
    write_documentation,
)
from .markdown_document import MarkdownDocument, escape_table_cell
from .schema_renderers import ENTITY_TABLE_COLUMNS, render_entities, render_overview

__all__ = [
    "ENTITIES_FILENAME",
    "ENTITY_TABLE_COLUMNS",
    "OVERVIEW_FILENAME",
    "DocumentationPaths",
    "MarkdownDocument",
    "escape_table_cell",
    "render_entities",
    "render_overview",
    "write_documentation",
]
