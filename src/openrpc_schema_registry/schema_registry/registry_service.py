"""Schema registry combining the pointer store, pointer tree and deriver."""

from __future__ import annotations

import json
import logging
from typing import Any

from openrpc_schema_registry.pointers import Pointer, PointerStore, PointerTree
from openrpc_schema_registry.schema_derivation import derive_schema_body
from openrpc_schema_registry.schema_values import SCALAR_SCHEMAS, Schema
from openrpc_schema_registry.type_descriptors import (
    ReferenceType,
    TypeDescriptor,
    canonical_name,
    unwrap_references,
)

logger = logging.getLogger(__name__)

DEFAULT_BASE_POINTER = "/components/schemas"


class MissingSchemaError(Exception):
    """Raised when the registry base pointer has no node in the pointer tree."""


class SchemaRegistry:
    """Registers types as JSON schemas under a base pointer.

    One registry serves one document-generation pass. It is not thread-safe;
    callers sharing an instance across threads must serialize access.
    """

    def __init__(self, base_pointer: Pointer | str | None = None) -> None:
        self.base_pointer = _coerce_pointer(base_pointer)
        self._store = PointerStore()
        self._tree = PointerTree(Pointer())
        self._type_exceptions: dict[str, TypeDescriptor] = {}
        self._in_flight: set[Pointer] = set()
        self._pass_registered: list[Pointer] = []
        self._tree.insert(self.base_pointer)

    @classmethod
    def with_builtin_schemas(cls, base_pointer: Pointer | str | None = None) -> SchemaRegistry:
        """Create a registry with the fixed scalar and dynamic schemas pre-registered."""
        registry = cls(base_pointer)
        for name, text in SCALAR_SCHEMAS.items():
            registry.register_schema(registry.base_pointer.child(name), Schema.decode(text))
        return registry

    @property
    def store(self) -> PointerStore:
        return self._store

    @property
    def tree(self) -> PointerTree:
        return self._tree

    def add_type_exception(self, descriptor: TypeDescriptor) -> None:
        """Always derive `descriptor` as a string schema, whatever its shape."""
        if isinstance(descriptor, ReferenceType):
            descriptor = descriptor.target
        self._type_exceptions[canonical_name(descriptor)] = descriptor

    def is_type_exception(self, descriptor: TypeDescriptor) -> bool:
        return canonical_name(descriptor) in self._type_exceptions

    def is_registered(self, pointer: Pointer) -> bool:
        return pointer in self._store

    def register_schema(self, pointer: Pointer, schema: Schema) -> None:
        """Store a prebuilt schema; an already-present pointer keeps its schema."""
        self._store.set(pointer, schema)
        self._tree.insert(pointer)

    def register_type(
        self, descriptor: TypeDescriptor, force_string: bool = False
    ) -> tuple[Pointer, str]:
        """Register `descriptor` and return its canonical pointer and name.

        Re-registering a known type returns the same pointer without deriving
        again. A type met again while its own derivation is in progress is
        returned as a forward reference. When registration fails, every
        schema stored since the outermost call began is discarded again, so no
        stored schema refers to a type that was never registered.
        """
        descriptor = unwrap_references(descriptor)
        name = canonical_name(descriptor)
        pointer = self.base_pointer.child(name)

        if pointer in self._in_flight:
            logger.debug("Forward reference to %s while it is being derived", pointer)
            return pointer, name
        if self.is_registered(pointer):
            return pointer, name

        outermost = not self._in_flight
        if outermost:
            self._pass_registered = []
        self._in_flight.add(pointer)
        try:
            body = derive_schema_body(
                descriptor,
                register=self._register_subschema,
                is_type_exception=self.is_type_exception,
                force_string=force_string,
            )
            schema = Schema.from_body(body)
        except Exception:
            if outermost:
                self._discard_pass()
            raise
        finally:
            self._in_flight.discard(pointer)

        self.register_schema(pointer, schema)
        self._pass_registered.append(pointer)
        logger.debug("Registered schema for %s at %s", name, pointer)
        return pointer, name

    def marshal(self) -> Any:
        """Resolve the tree below the base pointer into one JSON value."""
        node = self._tree.find(self.base_pointer)
        if node is None:
            raise MissingSchemaError(
                f"No pointer tree node exists at base pointer {self.base_pointer.render()!r}."
            )
        return node.resolve(self._store)

    def marshal_json(self) -> str:
        return json.dumps(self.marshal())

    def __str__(self) -> str:
        return json.dumps(self.marshal(), indent=1)

    def _discard_pass(self) -> None:
        for pointer in self._pass_registered:
            self._store.discard(pointer)
            self._tree.remove(pointer)
        logger.debug("Discarded %d schemas after a failed registration", len(self._pass_registered))
        self._pass_registered = []

    def _register_subschema(self, descriptor: TypeDescriptor) -> Pointer:
        pointer, _ = self.register_type(descriptor)
        return pointer


def _coerce_pointer(value: Pointer | str | None) -> Pointer:
    if value is None:
        return Pointer()
    if isinstance(value, Pointer):
        return value
    return Pointer.parse(value)
