"""Schema documentation exports."""

from .definition_extractor import (
    SchemaDocumentationError,
    SchemaParseError,
    UnsupportedDefinitionKindError,
    extract_definitions,
    extract_schema_text,
)
from .definition_models import (
    DefinitionBody,
    DefinitionKind,
    DefinitionRecord,
    ExtractionResult,
    FieldRecord,
    FieldsBody,
    ListTypeReference,
    NamedTypeReference,
    NonNullTypeReference,
    TypeReference,
    ValueRecord,
    ValuesBody,
)

__all__ = [
    "DefinitionBody",
    "DefinitionKind",
    "DefinitionRecord",
    "ExtractionResult",
    "FieldRecord",
    "FieldsBody",
    "ListTypeReference",
    "NamedTypeReference",
    "NonNullTypeReference",
    "SchemaDocumentationError",
    "SchemaParseError",
    "TypeReference",
    "UnsupportedDefinitionKindError",
    "ValueRecord",
    "ValuesBody",
    "extract_definitions",
    "extract_schema_text",
]
