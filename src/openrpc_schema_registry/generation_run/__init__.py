"""Generation run exports."""

from .generation_contracts import GenerationOutcome, GenerationRequest, RegisteredType
from .schema_generation_use_case import GenerationError, build_registry, execute_schema_generation

__all__ = [
    "GenerationRequest",
    "GenerationOutcome",
    "RegisteredType",
    "GenerationError",
    "build_registry",
    "execute_schema_generation",
]
