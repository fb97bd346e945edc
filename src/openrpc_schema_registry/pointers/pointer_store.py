"""Flat pointer-to-schema store with insert-once semantics."""

from __future__ import annotations

from openrpc_schema_registry.schema_values.canonical_schema import Schema

from .json_pointer import Pointer

_ROOT_KEY = ""


class PointerStore:
    """Maps canonical pointer strings to schemas; the first write wins."""

    def __init__(self) -> None:
        self._schemas: dict[str, Schema] = {}

    def set(self, pointer: Pointer | None, schema: Schema) -> None:
        key = _store_key(pointer)
        if key not in self._schemas:
            self._schemas[key] = schema

    def discard(self, pointer: Pointer | None) -> None:
        """Forget the schema stored under `pointer`, if any."""
        self._schemas.pop(_store_key(pointer), None)

    def get(self, pointer: Pointer | None) -> tuple[Schema | None, bool]:
        schema = self._schemas.get(_store_key(pointer))
        return schema, schema is not None

    def __contains__(self, pointer: object) -> bool:
        if pointer is not None and not isinstance(pointer, Pointer):
            return False
        return _store_key(pointer) in self._schemas

    def __len__(self) -> int:
        return len(self._schemas)

    def keys(self) -> tuple[str, ...]:
        return tuple(self._schemas)


def _store_key(pointer: Pointer | None) -> str:
    if pointer is None:
        return _ROOT_KEY
    return pointer.render()
