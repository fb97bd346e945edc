"""Configuration scaffold builder tests."""

from __future__ import annotations

from pathlib import Path

import pytest
from openrpc_schema_registry.configuration.config_scaffold_builder import (
    build_placeholder_configuration,
    write_placeholder_configuration,
)
from openrpc_schema_registry.configuration.loader import load_configuration


def test_build_placeholder_configuration_contains_all_supported_sections() -> None:
    scaffold = build_placeholder_configuration()

    assert "Schema generation configuration" in scaffold
    assert "registry:" in scaffold
    assert "base_pointer:" in scaffold
    assert "type_exceptions:" in scaffold
    assert "types:" in scaffold
    assert "register:" in scaffold
    assert "document:" in scaffold
    assert "<REQUIRED>" in scaffold


def test_write_placeholder_configuration_writes_loadable_file(tmp_path: Path) -> None:
    output_path = tmp_path / "schemas.yaml"

    written_path = write_placeholder_configuration(output_path)
    configuration = load_configuration(written_path)

    assert written_path == output_path.resolve()
    assert [registration.label for registration in configuration.registrations] == [
        "people.Person"
    ]
    assert configuration.document is not None


def test_write_placeholder_configuration_fails_when_file_exists(tmp_path: Path) -> None:
    output_path = tmp_path / "schemas.yaml"
    output_path.write_text("existing", encoding="utf-8")

    with pytest.raises(FileExistsError):
        write_placeholder_configuration(output_path)
