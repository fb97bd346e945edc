"""Schema value exports."""

from .canonical_schema import EncodingError, Schema
from .scalar_schemas import SCALAR_SCHEMAS, scalar_schema_body

__all__ = [
    "EncodingError",
    "SCALAR_SCHEMAS",
    "Schema",
    "scalar_schema_body",
]
