"""Schema documentation extractor tests."""

from __future__ import annotations

import logging
import types
from pathlib import Path

import pytest
from graphql import parse
from subgraph_lessons.schema_documentation import (
    DefinitionBody,
    DefinitionKind,
    FieldsBody,
    ListTypeReference,
    NamedTypeReference,
    NonNullTypeReference,
    SchemaParseError,
    TypeReference,
    UnsupportedDefinitionKindError,
    ValuesBody,
    extract_definitions,
    extract_schema_text,
)


def _definitions(sdl: str):
    return parse(sdl).definitions


def test_enum_definition_produces_values_record() -> None:
    result = extract_definitions(_definitions("enum Choice { Null Yes No }"))

    assert len(result.records) == 1
    record = result.records[0]
    assert record.name == "Choice"
    assert record.description is None
    assert record.kind is DefinitionKind.ENUM
    assert isinstance(record.body, ValuesBody)
    assert [(value.name, value.description) for value in record.values] == [
        ("Null", None),
        ("Yes", None),
        ("No", None),
    ]
    assert record.fields == ()
    assert result.notices == ()


def test_object_field_keeps_non_null_type_reference() -> None:
    result = extract_definitions(_definitions("type Category { id: ID! }"))

    record = result.records[0]
    assert isinstance(record.body, FieldsBody)
    assert len(record.fields) == 1
    field = record.fields[0]
    assert field.name == "id"
    assert field.description is None
    assert field.field_type == NonNullTypeReference(NamedTypeReference("ID"))
    assert str(field.field_type) == "ID!"
    assert record.values == ()


def test_nested_list_types_render_graphql_notation() -> None:
    result = extract_schema_text("type Pool { swaps: [Swap!]!  tags: [[String]] }")

    swaps, tags = result.records[0].fields
    assert swaps.field_type == NonNullTypeReference(
        ListTypeReference(NonNullTypeReference(NamedTypeReference("Swap")))
    )
    assert str(swaps.field_type) == "[Swap!]!"
    assert str(tags.field_type) == "[[String]]"


def test_descriptions_are_copied_verbatim() -> None:
    sdl = '''
"A traded token."
type Token {
  "Token symbol"
  symbol: String!
}

"""
Swap direction.
"""
enum Direction {
  "Token0 in"
  ZERO_FOR_ONE
}
'''
    token, direction = extract_schema_text(sdl).records

    assert token.description == "A traded token."
    assert token.fields[0].description == "Token symbol"
    assert direction.description == "Swap direction."
    assert direction.values[0].description == "Token0 in"


def test_interface_definition_is_documented_like_an_object() -> None:
    result = extract_schema_text("interface Event { id: ID! timestamp: BigInt! }")

    record = result.records[0]
    assert record.kind is DefinitionKind.INTERFACE
    assert [field.name for field in record.fields] == ["id", "timestamp"]
    assert record.values == ()


def test_output_preserves_input_order_and_counts() -> None:
    sdl = """
enum B { X }
type A { id: ID! a: Int b: Int }
interface C { id: ID! }
type D { id: ID! }
"""
    records = extract_schema_text(sdl).records

    assert [record.name for record in records] == ["B", "A", "C", "D"]
    assert [len(record.fields) for record in records] == [0, 3, 1, 1]
    assert [len(record.values) for record in records] == [1, 0, 0, 0]


def test_scalar_definition_is_skipped_with_one_notice(caplog) -> None:
    with caplog.at_level(logging.INFO):
        result = extract_schema_text("scalar BigDecimal")

    assert result.records == ()
    assert len(result.notices) == 1
    assert "Scalar" in result.notices[0]
    assert "BigDecimal" in result.notices[0]
    assert "Scalar" in caplog.text


@pytest.mark.parametrize(
    ("sdl", "label"),
    [
        ("union SearchResult = Token | Pool", "Union"),
        ("input PoolFilter { feeTier: BigInt }", "InputObject"),
    ],
)
def test_union_and_input_definitions_are_skipped(sdl: str, label: str) -> None:
    result = extract_schema_text(sdl)

    assert result.records == ()
    assert len(result.notices) == 1
    assert label in result.notices[0]


def test_skipped_kinds_do_not_reorder_records() -> None:
    sdl = """
type First { id: ID! }
scalar Bytes
type Second { id: ID! }
"""
    result = extract_schema_text(sdl)

    assert [record.name for record in result.records] == ["First", "Second"]
    assert len(result.notices) == 1


@pytest.mark.parametrize(
    ("sdl", "kind"),
    [
        ("schema { query: Query }", "schema_definition"),
        ("directive @entity on OBJECT", "directive_definition"),
        ("extend type Token { extra: Int }", "object_type_extension"),
    ],
)
def test_unsupported_definition_kind_stops_traversal(sdl: str, kind: str) -> None:
    with pytest.raises(UnsupportedDefinitionKindError) as exc_info:
        extract_schema_text("type Before { id: ID! }\n" + sdl)

    assert exc_info.value.kind == kind


def test_malformed_schema_raises_parse_error() -> None:
    with pytest.raises(SchemaParseError, match="Invalid GraphQL schema"):
        extract_schema_text("type Broken {")


def test_sample_schema_extraction() -> None:
    sample_path = Path(__file__).resolve().parents[3] / "samples" / "schema.graphql"

    result = extract_schema_text(sample_path.read_text(encoding="utf-8"))

    assert [record.name for record in result.records] == [
        "Token",
        "Event",
        "Pool",
        "Swap",
        "Direction",
    ]
    assert len(result.notices) == 3
    swap = result.records[3]
    assert [str(field.field_type) for field in swap.fields] == [
        "ID!",
        "BigInt!",
        "Pool!",
        "Direction",
    ]


def test_skip_notices_stay_below_warning_level(caplog) -> None:
    with caplog.at_level(logging.WARNING):
        result = extract_schema_text("scalar BigDecimal\nunion Either = A | B")

    assert len(result.notices) == 2
    assert caplog.records == []


def test_type_reference_and_body_aliases_are_native_unions() -> None:
    assert isinstance(TypeReference, types.UnionType)
    assert set(TypeReference.__args__) == {
        NamedTypeReference,
        ListTypeReference,
        NonNullTypeReference,
    }
    assert isinstance(DefinitionBody, types.UnionType)
    assert set(DefinitionBody.__args__) == {FieldsBody, ValuesBody}
