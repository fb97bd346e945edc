"""Fixed schema bodies emitted for scalar and dynamic types."""

from __future__ import annotations

import json
from types import MappingProxyType
from typing import Any

INTEGER_SCHEMA = '{"type":"integer","pattern":"^[0-9]*$"}'
NUMBER_SCHEMA = '{"type":"number","pattern":"^([0-9]*\\\\.[0-9]+)$|^([0-9]*)$"}'
STRING_SCHEMA = '{"type":"string","pattern":"(.*)"}'
BOOLEAN_SCHEMA = '{"type":"boolean","pattern":"(true|false)"}'
ANY_SCHEMA = "{}"

SCALAR_SCHEMAS = MappingProxyType(
    {
        "integer": INTEGER_SCHEMA,
        "number": NUMBER_SCHEMA,
        "string": STRING_SCHEMA,
        "boolean": BOOLEAN_SCHEMA,
        "anything": ANY_SCHEMA,
    }
)


def scalar_schema_body(kind: str) -> dict[str, Any]:
    """Return a fresh copy of the fixed body for `kind`."""
    try:
        text = SCALAR_SCHEMAS[kind]
    except KeyError as exc:
        raise KeyError(f"No fixed schema for kind {kind!r}") from exc
    return json.loads(text)
