"""Lesson execution domain exports."""

from .lesson_contracts import (
    DocumentationLessonOutcome,
    DocumentationLessonRequest,
    ExportLessonOutcome,
    ExportLessonRequest,
    ManifestLessonRequest,
    QueryLessonOutcome,
    QueryLessonRequest,
)
from .lesson_use_cases import (
    LessonExecutionError,
    execute_documentation_lesson,
    execute_export_lesson,
    execute_manifest_lesson,
    execute_query_lesson,
)

__all__ = [
    "DocumentationLessonOutcome",
    "DocumentationLessonRequest",
    "ExportLessonOutcome",
    "ExportLessonRequest",
    "LessonExecutionError",
    "ManifestLessonRequest",
    "QueryLessonOutcome",
    "QueryLessonRequest",
    "execute_documentation_lesson",
    "execute_export_lesson",
    "execute_manifest_lesson",
    "execute_query_lesson",
]
