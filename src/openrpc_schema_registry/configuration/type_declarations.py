"""Resolution of declared type shapes into type descriptors."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from openrpc_schema_registry.type_descriptors import (
    DynamicType,
    MapType,
    RecordType,
    ReferenceType,
    ScalarKind,
    ScalarType,
    SequenceType,
    TypeDescriptor,
)

SHAPE_KEYS = ("record", "sequence", "map", "ref", "scalar")


class TypeDeclarationError(Exception):
    """Raised for invalid or unresolvable type declarations."""


def builtin_shapes() -> dict[str, TypeDescriptor]:
    """Keywords usable anywhere a shape is expected."""
    shapes: dict[str, TypeDescriptor] = {kind.value: ScalarType(kind=kind) for kind in ScalarKind}
    shapes["anything"] = DynamicType()
    return shapes


class TypeDeclarations:
    """Resolves a `name -> shape` mapping; records may refer to themselves."""

    def __init__(self, declarations: Mapping[str, Any]) -> None:
        self._declarations = dict(declarations)
        self._builtins = builtin_shapes()
        self._resolved: dict[str, TypeDescriptor] = {}
        self._resolving: set[str] = set()

    def resolve_all(self) -> dict[str, TypeDescriptor]:
        for name, shape in self._declarations.items():
            _validate_declared_name(name, self._builtins)
            if _declares_record(shape):
                module, short_name = split_type_name(name)
                self._resolved[name] = RecordType(name=short_name, module=module)

        for name in self._declarations:
            self._resolve_declared(name)

        for name, shape in self._declarations.items():
            record = self._resolved[name]
            # Aliases of a record share its descriptor; only the declaring entry fills it.
            if isinstance(record, RecordType) and _declares_record(shape):
                self._fill_record(record, shape, context=f"types.{name}")

        return {name: self._resolved[name] for name in self._declarations}

    def resolve_shape(self, shape: Any, *, context: str) -> TypeDescriptor:
        """Resolve an inline shape, which may name any declared type."""
        return self._resolve_shape(shape, context=context, declared_name=None)

    def _resolve_declared(self, name: str) -> TypeDescriptor:
        if name in self._resolved:
            return self._resolved[name]
        if name in self._resolving:
            raise TypeDeclarationError(f"Type alias cycle detected at '{name}'.")
        self._resolving.add(name)
        try:
            descriptor = self._resolve_shape(
                self._declarations[name], context=f"types.{name}", declared_name=name
            )
        finally:
            self._resolving.discard(name)
        self._resolved[name] = descriptor
        return descriptor

    def _resolve_shape(
        self, shape: Any, *, context: str, declared_name: str | None
    ) -> TypeDescriptor:
        if isinstance(shape, str):
            stripped = shape.strip()
            if stripped in self._builtins:
                return self._builtins[stripped]
            if stripped in self._declarations:
                return self._resolve_declared(stripped)
            raise TypeDeclarationError(f"{context}: unknown type '{stripped}'.")
        if not isinstance(shape, Mapping):
            raise TypeDeclarationError(f"{context} must be a type name or a mapping.")

        keys = [key for key in SHAPE_KEYS if key in shape]
        if len(keys) != 1:
            raise TypeDeclarationError(
                f"{context} must set exactly one of: {', '.join(SHAPE_KEYS)}."
            )
        key = keys[0]
        nested_context = f"{context}.{key}"

        if key == "record":
            if declared_name is None:
                raise TypeDeclarationError(f"{context}: records must be declared by name.")
            return self._resolved[declared_name]
        if key == "sequence":
            element = self._resolve_shape(
                shape["sequence"], context=nested_context, declared_name=None
            )
            return SequenceType(
                element=element, fixed_length=_optional_length(shape.get("length"), context)
            )
        if key == "map":
            value = self._resolve_shape(shape["map"], context=nested_context, declared_name=None)
            return MapType(value=value)
        if key == "ref":
            target = self._resolve_shape(shape["ref"], context=nested_context, declared_name=None)
            return ReferenceType(target=target)
        return _named_scalar(shape["scalar"], declared_name, nested_context)

    def _fill_record(self, record: RecordType, shape: Mapping[str, Any], *, context: str) -> None:
        fields = shape.get("record") or {}
        if not isinstance(fields, Mapping):
            raise TypeDeclarationError(f"{context}.record must map field names to types.")
        for field_name, field_shape in fields.items():
            if not isinstance(field_name, str) or not field_name.strip():
                raise TypeDeclarationError(f"{context}.record field names must be strings.")
            record.add_field(
                field_name,
                self._resolve_shape(
                    field_shape, context=f"{context}.{field_name}", declared_name=None
                ),
            )


def _declares_record(shape: Any) -> bool:
    return isinstance(shape, Mapping) and "record" in shape


def split_type_name(name: str) -> tuple[str | None, str]:
    """Split `module.Name` into its module and short name."""
    module, separator, short_name = name.rpartition(".")
    if not separator:
        return None, name
    return module or None, short_name


def _validate_declared_name(name: Any, builtins: Mapping[str, TypeDescriptor]) -> None:
    if not isinstance(name, str) or not name.strip():
        raise TypeDeclarationError("Declared type names must be non-empty strings.")
    if name in builtins:
        raise TypeDeclarationError(f"Type name '{name}' is reserved.")
    if name.endswith("."):
        raise TypeDeclarationError(f"Type name '{name}' must not end with a dot.")


def _optional_length(value: Any, context: str) -> int | None:
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeDeclarationError(f"{context}.length must be an integer.")
    if value < 0:
        raise TypeDeclarationError(f"{context}.length must not be negative.")
    return value


def _named_scalar(kind_value: Any, declared_name: str | None, context: str) -> ScalarType:
    try:
        kind = ScalarKind(kind_value)
    except ValueError as exc:
        allowed = ", ".join(kind.value for kind in ScalarKind)
        raise TypeDeclarationError(f"{context} must be one of: {allowed}.") from exc
    if declared_name is None:
        return ScalarType(kind=kind)
    module, short_name = split_type_name(declared_name)
    return ScalarType(kind=kind, name=short_name, module=module)
