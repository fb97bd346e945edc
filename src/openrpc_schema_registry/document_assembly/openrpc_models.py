"""OpenRPC document records embedding registry pointers and schemas."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import Any

from openrpc_schema_registry.pointers import Pointer

OPENRPC_VERSION = "1.2"


@dataclass(frozen=True)
class Info:
    """Document metadata."""

    title: str
    version: str
    description: str | None = None

    def to_dict(self) -> dict[str, Any]:
        return _without_none(
            {"title": self.title, "version": self.version, "description": self.description}
        )


@dataclass(frozen=True)
class ContentDescriptor:
    """Named parameter or result whose schema is a registry pointer."""

    name: str
    schema: Pointer
    summary: str | None = None
    description: str | None = None
    required: bool = False

    def to_dict(self) -> dict[str, Any]:
        payload = _without_none(
            {
                "name": self.name,
                "summary": self.summary,
                "description": self.description,
                "schema": self.schema.as_reference(),
            }
        )
        if self.required:
            payload["required"] = True
        return payload


@dataclass(frozen=True)
class Method:
    """One callable method of the described service."""

    name: str
    params: tuple[ContentDescriptor, ...]
    result: ContentDescriptor
    summary: str | None = None
    description: str | None = None

    def to_dict(self) -> dict[str, Any]:
        return _without_none(
            {
                "name": self.name,
                "summary": self.summary,
                "description": self.description,
                "params": [param.to_dict() for param in self.params],
                "result": self.result.to_dict(),
            }
        )


@dataclass(frozen=True)
class Components:
    """Reusable document components; `schemas` holds the resolved registry tree."""

    schemas: Any = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        return {"schemas": self.schemas if self.schemas is not None else {}}


@dataclass(frozen=True)
class OpenRpcDocument:
    """Top-level OpenRPC document."""

    openrpc: str
    info: Info
    methods: tuple[Method, ...]
    components: Components

    def to_dict(self) -> dict[str, Any]:
        return {
            "openrpc": self.openrpc,
            "info": self.info.to_dict(),
            "methods": [method.to_dict() for method in self.methods],
            "components": self.components.to_dict(),
        }


def new_document(methods: Sequence[Method], info: Info, schemas: Any = None) -> OpenRpcDocument:
    """Assemble a document around already-registered methods and schemas."""
    return OpenRpcDocument(
        openrpc=OPENRPC_VERSION,
        info=info,
        methods=tuple(methods),
        components=Components(schemas=schemas if schemas is not None else {}),
    )


def _without_none(payload: dict[str, Any]) -> dict[str, Any]:
    return {key: value for key, value in payload.items() if value is not None}
