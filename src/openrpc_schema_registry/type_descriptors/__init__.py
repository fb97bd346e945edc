"""Type descriptor exports."""

from .descriptor_models import (
    DYNAMIC_NAME,
    DynamicType,
    MapType,
    RecordField,
    RecordType,
    ReferenceType,
    ScalarKind,
    ScalarType,
    SequenceType,
    TypeDescriptor,
    UnsupportedType,
    canonical_name,
    qualified_name,
    unwrap_references,
)
from .python_types import describe_type

__all__ = [
    "DYNAMIC_NAME",
    "DynamicType",
    "MapType",
    "RecordField",
    "RecordType",
    "ReferenceType",
    "ScalarKind",
    "ScalarType",
    "SequenceType",
    "TypeDescriptor",
    "UnsupportedType",
    "canonical_name",
    "describe_type",
    "qualified_name",
    "unwrap_references",
]
