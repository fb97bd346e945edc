"""Static type-descriptor model consumed by the schema deriver."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class ScalarKind(str, Enum):
    """Scalar families with a fixed schema body."""

    INTEGER = "integer"
    NUMBER = "number"
    STRING = "string"
    BOOLEAN = "boolean"


@dataclass(frozen=True)
class ScalarType:
    """Integer, floating-point, string or boolean type, optionally named."""

    kind: ScalarKind
    name: str | None = None
    module: str | None = None


@dataclass(frozen=True)
class RecordField:
    """One declared record field."""

    name: str
    type: TypeDescriptor


@dataclass(eq=False)
class RecordType:
    """Named struct-like type.

    Fields may be appended after construction so that a record can refer to
    itself through its own fields.
    """

    name: str
    module: str | None = None
    fields: list[RecordField] = field(default_factory=list)

    def add_field(self, name: str, field_type: TypeDescriptor) -> RecordType:
        self.fields.append(RecordField(name=name, type=field_type))
        return self


@dataclass(frozen=True)
class SequenceType:
    """Variable-length list, or fixed-length array when `fixed_length` is set."""

    element: TypeDescriptor
    fixed_length: int | None = None


@dataclass(frozen=True)
class MapType:
    """Associative type; keys are always treated as strings."""

    value: TypeDescriptor


@dataclass(frozen=True)
class DynamicType:
    """Type whose shape is unknown until runtime."""


@dataclass(frozen=True)
class ReferenceType:
    """Pointer-like wrapper unwrapped to its target before derivation."""

    target: TypeDescriptor


@dataclass(frozen=True)
class UnsupportedType:
    """A kind that has no JSON-Schema representation (function, channel, ...)."""

    kind: str
    name: str | None = None


TypeDescriptor = (
    ScalarType
    | RecordType
    | SequenceType
    | MapType
    | DynamicType
    | ReferenceType
    | UnsupportedType
)

DYNAMIC_NAME = "anything"


def unwrap_references(descriptor: TypeDescriptor) -> TypeDescriptor:
    """Follow reference wrappers down to the first non-reference type."""
    while isinstance(descriptor, ReferenceType):
        descriptor = descriptor.target
    return descriptor


def qualified_name(name: str, module: str | None) -> str:
    """Render `<shortModuleName>.<typeName>`, or the bare name without a module."""
    if module:
        short_module = module.rsplit(".", 1)[-1]
        if short_module:
            return f"{short_module}.{name}"
    return name


def canonical_name(descriptor: TypeDescriptor) -> str:
    """Return the deterministic name used for registration pointers."""
    descriptor = unwrap_references(descriptor)
    if isinstance(descriptor, RecordType):
        return qualified_name(descriptor.name, descriptor.module)
    if isinstance(descriptor, ScalarType):
        if descriptor.name is None:
            return descriptor.kind.value
        return qualified_name(descriptor.name, descriptor.module)
    if isinstance(descriptor, SequenceType):
        element_name = canonical_name(descriptor.element)
        if descriptor.fixed_length is None:
            return f"{element_name}[]"
        return f"{element_name}[{descriptor.fixed_length}]"
    if isinstance(descriptor, MapType):
        return f"Object[{canonical_name(descriptor.value)}]"
    if isinstance(descriptor, DynamicType):
        return DYNAMIC_NAME
    if isinstance(descriptor, UnsupportedType):
        return descriptor.name or descriptor.kind
    raise TypeError(f"Not a type descriptor: {descriptor!r}")
