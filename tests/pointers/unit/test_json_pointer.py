"""JSON pointer value tests."""

from __future__ import annotations

import pytest
from openrpc_schema_registry.pointers import ParseError, Pointer


def test_parse_splits_path_into_segments() -> None:
    pointer = Pointer.parse("/components/schemas/people.Person")

    assert pointer.segments == ("components", "schemas", "people.Person")
    assert pointer.render() == "/components/schemas/people.Person"


def test_parse_accepts_uri_fragment_form() -> None:
    pointer = Pointer.parse("#/components/schemas/int%5B%5D")

    assert pointer.segments == ("components", "schemas", "int[]")


def test_parse_of_empty_string_is_root() -> None:
    pointer = Pointer.parse("")

    assert pointer.is_root
    assert pointer == Pointer()
    assert pointer.render() == ""


@pytest.mark.parametrize("path", ["components/schemas", "/a/~2b", "/trailing~"])
def test_parse_rejects_malformed_syntax(path: str) -> None:
    with pytest.raises(ParseError):
        Pointer.parse(path)


def test_build_escapes_reserved_characters_on_render() -> None:
    pointer = Pointer.build(["a/b", "c~d"])

    assert pointer.render() == "/a~1b/c~0d"
    assert Pointer.parse(pointer.render()) == pointer


def test_build_rejects_empty_segments() -> None:
    with pytest.raises(ParseError, match="non-empty"):
        Pointer.build(["components", ""])


def test_pointers_compare_by_segments() -> None:
    first = Pointer.build(["components", "schemas"])
    second = Pointer.parse("/components/schemas")

    assert first == second
    assert hash(first) == hash(second)
    assert first != Pointer.build(["components"])


def test_child_and_parent_navigate_the_path() -> None:
    base = Pointer.parse("/components/schemas")

    child = base.child("string")

    assert child.segments == ("components", "schemas", "string")
    assert child.parent() == base
    with pytest.raises(ParseError):
        Pointer().parent()


def test_as_reference_renders_json_reference_object() -> None:
    pointer = Pointer.parse("/components/schemas/integer")

    assert pointer.as_reference() == {"$ref": "#/components/schemas/integer"}
    assert str(pointer) == "/components/schemas/integer"
