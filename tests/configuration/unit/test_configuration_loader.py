"""Configuration loader tests."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from openrpc_schema_registry.configuration.loader import ConfigurationError, load_configuration
from openrpc_schema_registry.pointers import Pointer
from openrpc_schema_registry.type_descriptors import (
    RecordType,
    ReferenceType,
    ScalarKind,
    ScalarType,
    SequenceType,
)


def _write_file(path: Path, contents: str) -> Path:
    path.write_text(contents, encoding="utf-8")
    return path


def test_loads_yaml_configuration_with_defaults(tmp_path: Path) -> None:
    config_path = _write_file(
        tmp_path / "schemas.yaml",
        """
types:
  people.Person:
    record:
      Name: string
      Age: integer
      Friends:
        sequence: people.Person
  people.Team:
    record:
      Lead:
        ref: people.Person
""",
    )

    configuration = load_configuration(config_path)

    assert configuration.registry.base_pointer == Pointer.parse("/components/schemas")
    assert configuration.registry.include_builtin_schemas is False
    assert configuration.registry.type_exceptions == ()
    assert configuration.document is None
    assert [registration.label for registration in configuration.registrations] == [
        "people.Person",
        "people.Team",
    ]
    person = configuration.types["people.Person"]
    assert isinstance(person, RecordType)
    assert (person.module, person.name) == ("people", "Person")
    assert person.fields[2].type == SequenceType(person)
    team = configuration.types["people.Team"]
    assert isinstance(team, RecordType)
    assert team.fields[0].type == ReferenceType(person)


def test_loads_json_configuration_with_registrations_and_document(tmp_path: Path) -> None:
    config_path = _write_file(
        tmp_path / "schemas.json",
        json.dumps(
            {
                "registry": {
                    "base_pointer": "#/definitions",
                    "include_builtin_schemas": True,
                    "type_exceptions": ["events.Timestamp"],
                },
                "types": {
                    "events.Timestamp": {"record": {}},
                    "ids.UserId": {"scalar": "integer"},
                },
                "register": [
                    "ids.UserId",
                    {"type": "events.Timestamp", "as_string": True},
                    {"type": {"map": "boolean"}},
                ],
                "document": {
                    "title": "Users",
                    "version": "1.0.0",
                    "methods": [
                        {
                            "name": "users.get",
                            "params": [{"name": "id", "type": "ids.UserId", "required": True}],
                            "result": {"name": "created", "type": "events.Timestamp"},
                        }
                    ],
                },
            }
        ),
    )

    configuration = load_configuration(config_path)

    assert configuration.registry.base_pointer == Pointer.parse("/definitions")
    assert configuration.registry.include_builtin_schemas is True
    assert configuration.registry.type_exceptions == (configuration.types["events.Timestamp"],)
    assert configuration.types["ids.UserId"] == ScalarType(
        ScalarKind.INTEGER, name="UserId", module="ids"
    )
    labels = [(item.label, item.as_string) for item in configuration.registrations]
    assert labels == [
        ("ids.UserId", False),
        ("events.Timestamp", True),
        ("register[2]", False),
    ]
    assert configuration.document is not None
    method = configuration.document.methods[0]
    assert method.params[0].required is True
    assert method.result.descriptor is configuration.types["events.Timestamp"]


def test_empty_configuration_file_is_accepted(tmp_path: Path) -> None:
    configuration = load_configuration(_write_file(tmp_path / "schemas.yaml", ""))

    assert configuration.types == {}
    assert configuration.registrations == ()


def test_missing_file_raises(tmp_path: Path) -> None:
    with pytest.raises(ConfigurationError, match="not found"):
        load_configuration(tmp_path / "missing.yaml")


@pytest.mark.parametrize(
    ("contents", "message"),
    [
        ("- just\n- a list\n", "root must be a mapping"),
        ("types: [1, 2]\n", "'types' must be a mapping"),
        ("registry:\n  base_pointer: components\n", "base_pointer is invalid"),
        ("registry:\n  include_builtin_schemas: sometimes\n", "must be a boolean"),
        ("types:\n  A: unknown\n", "unknown type 'unknown'"),
        ("types:\n  A:\n    sequence: A\n", "cycle"),
        ("types:\n  string: integer\n", "reserved"),
        ("types:\n  A:\n    map: string\n    sequence: string\n", "exactly one of"),
        ("types:\n  A:\n    sequence: string\n    length: -1\n", "must not be negative"),
        ("types:\n  A:\n    scalar: decimal\n", "must be one of"),
        ("register:\n  - Missing\n", "unknown type 'Missing'"),
        ("register:\n  - as_string: true\n", "register[0].type is required"),
        ("document:\n  version: '1'\n", "document.title must be a string"),
        (
            "document:\n  title: T\n  version: '1'\n  methods:\n    - name: m\n",
            "result is required",
        ),
        ("types:\n  A:\n    record: [x]\n", "must map field names"),
    ],
)
def test_invalid_configuration_raises(tmp_path: Path, contents: str, message: str) -> None:
    config_path = _write_file(tmp_path / "schemas.yaml", contents)

    with pytest.raises(ConfigurationError) as excinfo:
        load_configuration(config_path)

    assert message in str(excinfo.value)
