"""Configuration domain entities."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

from openrpc_schema_registry.pointers import Pointer
from openrpc_schema_registry.type_descriptors import TypeDescriptor


@dataclass(frozen=True)
class RegistrySettings:
    """Normalized schema registry settings."""

    base_pointer: Pointer
    include_builtin_schemas: bool
    type_exceptions: tuple[TypeDescriptor, ...]


@dataclass(frozen=True)
class TypeRegistration:
    """One type to register, in configuration order."""

    label: str
    descriptor: TypeDescriptor
    as_string: bool = False


@dataclass(frozen=True)
class ContentSettings:
    """Parameter or result declaration of a document method."""

    name: str
    descriptor: TypeDescriptor
    summary: str | None
    description: str | None
    required: bool


@dataclass(frozen=True)
class MethodSettings:
    """Document method declaration."""

    name: str
    summary: str | None
    description: str | None
    params: tuple[ContentSettings, ...]
    result: ContentSettings


@dataclass(frozen=True)
class DocumentSettings:
    """Metadata and methods for a full OpenRPC document."""

    title: str
    version: str
    description: str | None
    methods: tuple[MethodSettings, ...]


@dataclass(frozen=True)
class Configuration:
    """Top-level configuration aggregate."""

    path: Path
    registry: RegistrySettings
    types: Mapping[str, TypeDescriptor]
    registrations: tuple[TypeRegistration, ...]
    document: DocumentSettings | None
