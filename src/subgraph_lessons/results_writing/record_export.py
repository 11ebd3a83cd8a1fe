"""Record export writers."""

from __future__ import annotations

import csv
from collections.abc import Sequence
from pathlib import Path

from openpyxl import Workbook
from openpyxl.styles import Font
from openpyxl.utils import get_column_letter
from openpyxl.worksheet.worksheet import Worksheet

from .record_models import ExportFormat, QueryRecord

RECORDS_SHEET_NAME = "Records"


def write_records(
    columns: Sequence[str],
    records: Sequence[QueryRecord],
    output_path: Path | str,
    export_format: ExportFormat,
) -> Path:
    """Write records in the requested format and return the resolved path."""
    if export_format is ExportFormat.XLSX:
        return write_records_workbook(columns, records, output_path)
    return write_records_csv(columns, records, output_path)


def write_records_csv(
    columns: Sequence[str], records: Sequence[QueryRecord], output_path: Path | str
) -> Path:
    """Write a UTF-8 CSV file whose header row is the column order."""
    output = Path(output_path)
    output.parent.mkdir(parents=True, exist_ok=True)
    with output.open("w", encoding="utf-8", newline="") as handle:
        writer = csv.writer(handle)
        writer.writerow(columns)
        for record in records:
            writer.writerow(record.values)
    return output.resolve()


def write_records_workbook(
    columns: Sequence[str], records: Sequence[QueryRecord], output_path: Path | str
) -> Path:
    """Write the same table as the CSV export into a single worksheet."""
    workbook = Workbook()
    sheet = workbook.active
    if sheet is None:
        raise RuntimeError("Workbook active sheet is not available.")
    assert isinstance(sheet, Worksheet)
    sheet.title = RECORDS_SHEET_NAME

    header_font = Font(bold=True)
    for column_index, name in enumerate(columns, start=1):
        cell = sheet.cell(row=1, column=column_index, value=name)
        cell.font = header_font
        sheet.column_dimensions[get_column_letter(column_index)].width = max(
            12, min(len(name) + 6, 60)
        )
    for row_index, record in enumerate(records, start=2):
        for column_index, value in enumerate(record.values, start=1):
            sheet.cell(row=row_index, column=column_index, value=value)

    output = Path(output_path)
    output.parent.mkdir(parents=True, exist_ok=True)
    workbook.save(output)
    return output.resolve()
