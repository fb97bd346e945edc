"""CLI orchestration integration tests."""

from __future__ import annotations

import json
from pathlib import Path

import yaml
from click.testing import CliRunner
from openrpc_schema_registry.cli import cli


def _write_config(tmp_path: Path) -> Path:
    config = {
        "types": {
            "shop.Item": {"record": {"sku": "string", "price": "number"}},
            "shop.Order": {
                "record": {
                    "items": {"sequence": "shop.Item"},
                    "notes": {"map": "string"},
                }
            },
        },
        "register": ["shop.Order"],
        "document": {
            "title": "Shop",
            "version": "0.1.0",
            "methods": [
                {
                    "name": "shop.place",
                    "params": [{"name": "order", "type": "shop.Order", "required": True}],
                    "result": {"name": "accepted", "type": "boolean"},
                }
            ],
        },
    }
    path = tmp_path / "schemas.yaml"
    path.write_text(yaml.safe_dump(config), encoding="utf-8")
    return path


def test_generate_schemas_prints_resolved_tree(tmp_path: Path) -> None:
    runner = CliRunner()
    config_path = _write_config(tmp_path)

    result = runner.invoke(cli, ["generate-schemas", "--config", str(config_path)])

    assert result.exit_code == 0
    schemas = json.loads(result.output)
    assert schemas["shop.Order"]["properties"]["items"] == {
        "$ref": "#/components/schemas/shop.Item[]"
    }
    assert schemas["shop.Item[]"]["items"] == {"$ref": "#/components/schemas/shop.Item"}
    assert schemas["Object[string]"]["patternProperties"] == {
        "^.+$": {"$ref": "#/components/schemas/string"}
    }


def test_generate_schemas_writes_document_to_output(tmp_path: Path) -> None:
    runner = CliRunner()
    config_path = _write_config(tmp_path)
    output_path = tmp_path / "openrpc.json"

    result = runner.invoke(
        cli,
        [
            "generate-schemas",
            "--config",
            str(config_path),
            "--output",
            str(output_path),
            "--document",
        ],
    )

    assert result.exit_code == 0
    assert str(output_path.resolve()) in result.output
    document = json.loads(output_path.read_text(encoding="utf-8"))
    assert document["openrpc"] == "1.2"
    param = document["methods"][0]["params"][0]
    assert param == {
        "name": "order",
        "schema": {"$ref": "#/components/schemas/shop.Order"},
        "required": True,
    }
    assert "shop.Order" in document["components"]["schemas"]


def test_generate_config_output_feeds_generate_schemas(tmp_path: Path) -> None:
    runner = CliRunner()
    config_path = tmp_path / "generated.yaml"

    scaffold = runner.invoke(cli, ["generate-config", "--output", str(config_path)])
    generated = runner.invoke(cli, ["generate-schemas", "--config", str(config_path)])

    assert scaffold.exit_code == 0
    assert config_path.exists()
    assert generated.exit_code == 0
    assert "people.Person" in json.loads(generated.output)


def test_generate_config_refuses_to_overwrite(tmp_path: Path) -> None:
    runner = CliRunner()
    config_path = tmp_path / "schemas.yaml"
    config_path.write_text("types: {}\n", encoding="utf-8")

    result = runner.invoke(cli, ["generate-config", "--output", str(config_path)])

    assert result.exit_code != 0
    assert config_path.read_text(encoding="utf-8") == "types: {}\n"
