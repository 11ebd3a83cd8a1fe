"""Query record entities and response deserialization."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from enum import Enum
from typing import Any


class ExportFormat(str, Enum):
    """Supported record export file formats."""

    CSV = "csv"
    XLSX = "xlsx"


class RecordShapeError(Exception):
    """Raised when response data does not match the declared record columns."""


@dataclass(frozen=True)
class QueryRecord:
    """One exported row, values ordered like the export columns."""

    values: tuple[str, ...]


def records_from_response(
    data: Mapping[str, Any], collection: str, columns: Sequence[str]
) -> list[QueryRecord]:
    """Deserialize ``data[collection]`` into records with one value per column."""
    if collection not in data:
        raise RecordShapeError(f"Response data has no '{collection}' field.")
    payload = data[collection]
    if isinstance(payload, Mapping):
        items: Sequence[Any] = [payload]
    elif isinstance(payload, list):
        items = payload
    else:
        raise RecordShapeError(f"Response field '{collection}' must be an object or a list.")

    records = []
    for index, item in enumerate(items):
        if not isinstance(item, Mapping):
            raise RecordShapeError(f"{collection}[{index}] must be an object.")
        records.append(
            QueryRecord(
                values=tuple(
                    _cell_text(_resolve_column(item, column, f"{collection}[{index}]"))
                    for column in columns
                )
            )
        )
    return records


def _resolve_column(item: Mapping[str, Any], column: str, label: str) -> Any:
    current: Any = item
    for segment in column.split("."):
        if not isinstance(current, Mapping) or segment not in current:
            raise RecordShapeError(f"{label} is missing field '{column}'.")
        current = current[segment]
    if current is None:
        raise RecordShapeError(f"{label} has null for required field '{column}'.")
    return current


def _cell_text(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (Mapping, list)):
        raise RecordShapeError(f"Column value must be a scalar, got {type(value).__name__}.")
    return str(value)
