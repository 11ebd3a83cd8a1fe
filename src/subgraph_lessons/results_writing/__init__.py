"""Results writing domain exports."""

from .record_export import write_records, write_records_csv, write_records_workbook
from .record_models import ExportFormat, QueryRecord, RecordShapeError, records_from_response

__all__ = [
    "ExportFormat",
    "QueryRecord",
    "RecordShapeError",
    "records_from_response",
    "write_records",
    "write_records_csv",
    "write_records_workbook",
]
