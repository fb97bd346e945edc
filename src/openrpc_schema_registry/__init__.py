"""Derive JSON Schema components from type descriptors."""

from .pointers import ParseError, Pointer, PointerStore, PointerTree
from .schema_derivation import UnsupportedTypeError, derive_schema_body
from .schema_registry import MissingSchemaError, SchemaRegistry
from .schema_values import EncodingError, Schema
from .type_descriptors import canonical_name, describe_type

__all__ = [
    "EncodingError",
    "MissingSchemaError",
    "ParseError",
    "Pointer",
    "PointerStore",
    "PointerTree",
    "Schema",
    "SchemaRegistry",
    "UnsupportedTypeError",
    "canonical_name",
    "derive_schema_body",
    "describe_type",
]
