"""Configuration scaffold generation helpers."""

from __future__ import annotations

from pathlib import Path

DEFAULT_CONFIG_FILENAME = "schemas.yaml"

_CONFIG_SCAFFOLD_TEMPLATE = """# Schema generation configuration for openrpc-schema-registry.
# Declare types under `types`, then run generate-schemas with this file.

registry:
  # JSON pointer under which every schema is registered.
  base_pointer: "/components/schemas"
  # Pre-register integer, number, string, boolean and anything schemas.
  include_builtin_schemas: false
  # Declared types that are always emitted as string schemas.
  type_exceptions:
    - "events.Timestamp"

types:
  # Shapes: integer, number, string, boolean, anything, a declared type name,
  # or one of record / sequence (+ length) / map / ref / scalar.
  events.Timestamp:
    record: {}
  people.Person:
    record:
      Name: string
      Age: integer
      Tags:
        sequence: string
      Position:
        sequence: number
        length: 3
      Labels:
        map: boolean
      Born: events.Timestamp
      Friend:
        ref: people.Person

# Types to register, in order. Defaults to every declared type.
register:
  - "people.Person"

# Optional: wrap the schemas in an OpenRPC document (generate-schemas --document).
document:
  title: "<REQUIRED>"
  version: "<REQUIRED>"
  methods:
    - name: "people.get"
      params:
        - name: "name"
          type: string
          required: true
      result:
        name: "person"
        type: "people.Person"
"""


def build_placeholder_configuration() -> str:
    """Build a YAML configuration template with an example and inline guidance."""
    return _CONFIG_SCAFFOLD_TEMPLATE


def write_placeholder_configuration(output_path: Path | str) -> Path:
    """Write the configuration template to the requested output path.

    Args:
      output_path: Destination file path for the scaffold.

    Returns:
      The resolved destination path.

    Raises:
      FileExistsError: If the destination file already exists.
      OSError: If writing the scaffold fails.
    """
    destination = Path(output_path)
    if destination.exists():
        raise FileExistsError(f"Configuration file already exists: {destination.resolve()}")
    destination.write_text(build_placeholder_configuration(), encoding="utf-8")
    return destination.resolve()
