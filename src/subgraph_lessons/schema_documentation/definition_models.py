"""Schema documentation entities."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


@dataclass(frozen=True)
class NamedTypeReference:
    """Reference to a named type such as ``ID`` or ``Token``."""

    name: str

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True)
class ListTypeReference:
    """List wrapper around another type reference."""

    of_type: TypeReference

    def __str__(self) -> str:
        return f"[{self.of_type}]"


@dataclass(frozen=True)
class NonNullTypeReference:
    """Non-null wrapper around another type reference."""

    of_type: TypeReference

    def __str__(self) -> str:
        return f"{self.of_type}!"


TypeReference = NamedTypeReference | ListTypeReference | NonNullTypeReference


@dataclass(frozen=True)
class FieldRecord:
    """One documented field of an object or interface type."""

    name: str
    description: str | None
    field_type: TypeReference


@dataclass(frozen=True)
class ValueRecord:
    """One documented enum member."""

    name: str
    description: str | None


@dataclass(frozen=True)
class FieldsBody:
    """Body of a record documenting an object or interface."""

    fields: tuple[FieldRecord, ...]


@dataclass(frozen=True)
class ValuesBody:
    """Body of a record documenting an enum."""

    values: tuple[ValueRecord, ...]


DefinitionBody = FieldsBody | ValuesBody


class DefinitionKind(str, Enum):
    """Schema definition kinds that produce documentation records."""

    OBJECT = "object"
    INTERFACE = "interface"
    ENUM = "enum"


@dataclass(frozen=True)
class DefinitionRecord:
    """Normalized, renderable summary of one schema type definition."""

    name: str
    description: str | None
    kind: DefinitionKind
    body: DefinitionBody

    @property
    def fields(self) -> tuple[FieldRecord, ...]:
        if isinstance(self.body, FieldsBody):
            return self.body.fields
        return ()

    @property
    def values(self) -> tuple[ValueRecord, ...]:
        if isinstance(self.body, ValuesBody):
            return self.body.values
        return ()


@dataclass(frozen=True)
class ExtractionResult:
    """Records produced by one traversal plus the notices it emitted."""

    records: tuple[DefinitionRecord, ...]
    notices: tuple[str, ...]
