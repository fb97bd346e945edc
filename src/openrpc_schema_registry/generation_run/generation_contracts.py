"""Generation run entities."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any

from openrpc_schema_registry.pointers import Pointer


@dataclass(frozen=True)
class GenerationRequest:
    """Input contract for one schema generation pass."""

    config_path: str
    output_path: str | None = None
    as_document: bool = False


@dataclass(frozen=True)
class RegisteredType:
    """Pointer assigned to one configured registration."""

    label: str
    name: str
    pointer: Pointer


@dataclass(frozen=True)
class GenerationOutcome:
    """Output contract for one completed generation pass."""

    payload: Any
    registered: tuple[RegisteredType, ...]
    output_path: Path | None
