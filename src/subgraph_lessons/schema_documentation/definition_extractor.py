"""Schema documentation extraction service.

Walks the type definitions of a parsed GraphQL SDL document and turns each
object, interface and enum definition into a :class:`DefinitionRecord`.
Scalar, union and input object definitions are skipped with a notice. Any
other definition kind stops the traversal with
:class:`UnsupportedDefinitionKindError`.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from graphql import GraphQLSyntaxError, parse
from graphql.language import (
    DefinitionNode,
    EnumTypeDefinitionNode,
    FieldDefinitionNode,
    InputObjectTypeDefinitionNode,
    InterfaceTypeDefinitionNode,
    ListTypeNode,
    NamedTypeNode,
    NonNullTypeNode,
    ObjectTypeDefinitionNode,
    ScalarTypeDefinitionNode,
    StringValueNode,
    TypeNode,
    UnionTypeDefinitionNode,
)

from .definition_models import (
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

logger = logging.getLogger(__name__)

_SKIPPED_KIND_LABELS: tuple[tuple[type[DefinitionNode], str], ...] = (
    (ScalarTypeDefinitionNode, "Scalar"),
    (UnionTypeDefinitionNode, "Union"),
    (InputObjectTypeDefinitionNode, "InputObject"),
)


class SchemaDocumentationError(Exception):
    """Base error for schema documentation failures."""


class SchemaParseError(SchemaDocumentationError):
    """Raised when schema text is not valid GraphQL SDL."""


class UnsupportedDefinitionKindError(SchemaDocumentationError):
    """Raised for definition kinds that have no documentation policy."""

    def __init__(self, kind: str, name: str | None = None) -> None:
        self.kind = kind
        self.name = name
        label = f" '{name}'" if name else ""
        super().__init__(f"Unsupported schema definition kind: {kind}{label}")


def extract_schema_text(sdl_text: str) -> ExtractionResult:
    """Parse GraphQL SDL text and extract its documentation records."""
    try:
        document = parse(sdl_text, no_location=True)
    except GraphQLSyntaxError as exc:
        raise SchemaParseError(f"Invalid GraphQL schema: {exc.message}") from exc
    return extract_definitions(document.definitions)


def extract_definitions(definitions: Iterable[DefinitionNode]) -> ExtractionResult:
    """Return one record per object, interface or enum definition, in input order."""
    records: list[DefinitionRecord] = []
    notices: list[str] = []

    for definition in definitions:
        if isinstance(definition, ObjectTypeDefinitionNode):
            records.append(_fields_record(definition, DefinitionKind.OBJECT))
        elif isinstance(definition, InterfaceTypeDefinitionNode):
            records.append(_fields_record(definition, DefinitionKind.INTERFACE))
        elif isinstance(definition, EnumTypeDefinitionNode):
            records.append(_enum_record(definition))
        else:
            notice = _skip_notice(definition)
            logger.info(notice)
            notices.append(notice)

    return ExtractionResult(records=tuple(records), notices=tuple(notices))


def _fields_record(
    definition: ObjectTypeDefinitionNode | InterfaceTypeDefinitionNode, kind: DefinitionKind
) -> DefinitionRecord:
    fields = tuple(_field_record(field) for field in definition.fields or ())
    return DefinitionRecord(
        name=definition.name.value,
        description=_description(definition.description),
        kind=kind,
        body=FieldsBody(fields=fields),
    )


def _field_record(field: FieldDefinitionNode) -> FieldRecord:
    return FieldRecord(
        name=field.name.value,
        description=_description(field.description),
        field_type=to_type_reference(field.type),
    )


def _enum_record(definition: EnumTypeDefinitionNode) -> DefinitionRecord:
    values = tuple(
        ValueRecord(name=value.name.value, description=_description(value.description))
        for value in definition.values or ()
    )
    return DefinitionRecord(
        name=definition.name.value,
        description=_description(definition.description),
        kind=DefinitionKind.ENUM,
        body=ValuesBody(values=values),
    )


def _skip_notice(definition: DefinitionNode) -> str:
    name = _definition_name(definition)
    for node_type, label in _SKIPPED_KIND_LABELS:
        if isinstance(definition, node_type):
            return f"{label} definitions are not yet supported; skipped '{name}'"
    raise UnsupportedDefinitionKindError(definition.kind, name)


def to_type_reference(node: TypeNode) -> TypeReference:
    """Convert a graphql-core type node into a :data:`TypeReference`."""
    if isinstance(node, NonNullTypeNode):
        return NonNullTypeReference(of_type=to_type_reference(node.type))
    if isinstance(node, ListTypeNode):
        return ListTypeReference(of_type=to_type_reference(node.type))
    if isinstance(node, NamedTypeNode):
        return NamedTypeReference(name=node.name.value)
    raise SchemaDocumentationError(f"Unsupported type reference node: {node.kind}")


def _definition_name(definition: DefinitionNode) -> str | None:
    name_node = getattr(definition, "name", None)
    return name_node.value if name_node is not None else None


def _description(node: StringValueNode | None) -> str | None:
    return node.value if node is not None else None
