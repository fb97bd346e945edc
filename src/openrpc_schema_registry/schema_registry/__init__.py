"""Schema registry exports."""

from .registry_service import DEFAULT_BASE_POINTER, MissingSchemaError, SchemaRegistry

__all__ = ["DEFAULT_BASE_POINTER", "MissingSchemaError", "SchemaRegistry"]
