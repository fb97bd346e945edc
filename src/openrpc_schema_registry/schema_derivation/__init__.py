"""Schema derivation exports."""

from .schema_deriver import (
    MAP_KEY_PATTERN,
    SubschemaRegistrar,
    UnsupportedTypeError,
    derive_schema_body,
)

__all__ = [
    "MAP_KEY_PATTERN",
    "SubschemaRegistrar",
    "UnsupportedTypeError",
    "derive_schema_body",
]
