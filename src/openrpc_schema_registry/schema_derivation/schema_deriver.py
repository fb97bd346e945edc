"""Type-to-schema derivation."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from openrpc_schema_registry.pointers.json_pointer import Pointer
from openrpc_schema_registry.schema_values.scalar_schemas import scalar_schema_body
from openrpc_schema_registry.type_descriptors.descriptor_models import (
    DYNAMIC_NAME,
    DynamicType,
    MapType,
    RecordType,
    ScalarType,
    SequenceType,
    TypeDescriptor,
    UnsupportedType,
    canonical_name,
    unwrap_references,
)

SubschemaRegistrar = Callable[[TypeDescriptor], Pointer]
TypeExceptionCheck = Callable[[TypeDescriptor], bool]

MAP_KEY_PATTERN = "^.+$"


class UnsupportedTypeError(Exception):
    """Raised when a type kind has no JSON-Schema representation."""

    def __init__(self, descriptor: TypeDescriptor) -> None:
        kind = descriptor.kind if isinstance(descriptor, UnsupportedType) else "unknown"
        super().__init__(f"Unsupported type kind '{kind}' for type {canonical_name(descriptor)!r}.")
        self.descriptor = descriptor


def _never_an_exception(_: TypeDescriptor) -> bool:
    return False


def derive_schema_body(
    descriptor: TypeDescriptor,
    *,
    register: SubschemaRegistrar,
    is_type_exception: TypeExceptionCheck = _never_an_exception,
    force_string: bool = False,
) -> dict[str, Any]:
    """Return the schema body for `descriptor`.

    Element, value and field types are handed to `register`, which stores
    their schemas and returns the pointer they are referenced by. Rules are
    checked in order: record, string coercion, sequence, map, scalar.
    """
    descriptor = unwrap_references(descriptor)
    is_exception = is_type_exception(descriptor)

    if isinstance(descriptor, RecordType) and not is_exception:
        properties = {
            record_field.name: register(record_field.type).as_reference()
            for record_field in descriptor.fields
        }
        return {"type": "object", "properties": properties}
    if force_string or is_exception:
        return scalar_schema_body("string")
    if isinstance(descriptor, SequenceType):
        body: dict[str, Any] = {
            "type": "array",
            "items": register(descriptor.element).as_reference(),
        }
        if descriptor.fixed_length is not None:
            body["maxItems"] = descriptor.fixed_length
        return body
    if isinstance(descriptor, MapType):
        value_pointer = register(descriptor.value)
        return {
            "type": "object",
            "patternProperties": {MAP_KEY_PATTERN: value_pointer.as_reference()},
        }
    if isinstance(descriptor, ScalarType):
        return scalar_schema_body(descriptor.kind.value)
    if isinstance(descriptor, DynamicType):
        return scalar_schema_body(DYNAMIC_NAME)
    raise UnsupportedTypeError(descriptor)
