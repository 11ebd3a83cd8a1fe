"""Structured Markdown document builder."""

from __future__ import annotations

from collections.abc import Iterable, Sequence


def escape_table_cell(value: str | None) -> str:
    """Return cell text that keeps a Markdown table row on one line."""
    if not value:
        return ""
    single_line = value.replace("\r\n", " ").replace("\r", " ").replace("\n", " ")
    return single_line.replace("|", "\\|")


class MarkdownDocument:
    """Collects Markdown blocks and renders them once."""

    def __init__(self) -> None:
        self._blocks: list[str] = []

    def heading(self, text: str, level: int = 1) -> MarkdownDocument:
        if not 1 <= level <= 6:
            raise ValueError(f"Heading level must be between 1 and 6, got {level}.")
        self._blocks.append(f"{'#' * level} {text}")
        return self

    def paragraph(self, text: str) -> MarkdownDocument:
        self._blocks.append(text.strip())
        return self

    def link(self, label: str, target: str) -> MarkdownDocument:
        self._blocks.append(f"[{label}]({target})")
        return self

    def link_list(self, links: Sequence[tuple[str, str]]) -> MarkdownDocument:
        if links:
            self._blocks.append("\n".join(f"- [{label}]({target})" for label, target in links))
        return self

    def table(
        self, columns: Sequence[str], rows: Sequence[Sequence[str | None]]
    ) -> MarkdownDocument:
        """Append a table; every row must have one cell per column."""
        lines = [
            _table_line(escape_table_cell(column) for column in columns),
            _table_line("---" for _ in columns),
        ]
        for row in rows:
            if len(row) != len(columns):
                raise ValueError(f"Table row has {len(row)} cells, expected {len(columns)}.")
            lines.append(_table_line(escape_table_cell(cell) for cell in row))
        self._blocks.append("\n".join(lines))
        return self

    def render(self) -> str:
        return "\n\n".join(self._blocks) + "\n"


def _table_line(cells: Iterable[str]) -> str:
    return "| " + " | ".join(cells) + " |"
