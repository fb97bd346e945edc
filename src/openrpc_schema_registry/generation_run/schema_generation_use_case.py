"""Schema generation use-case service."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from openrpc_schema_registry.configuration import (
    Configuration,
    ConfigurationError,
    ContentSettings,
    DocumentSettings,
    RegistrySettings,
    load_configuration,
)
from openrpc_schema_registry.document_assembly import (
    ContentDescriptor,
    Info,
    Method,
    new_document,
)
from openrpc_schema_registry.pointers import ParseError, Pointer
from openrpc_schema_registry.schema_derivation import UnsupportedTypeError
from openrpc_schema_registry.schema_registry import MissingSchemaError, SchemaRegistry
from openrpc_schema_registry.schema_values import EncodingError

from .generation_contracts import GenerationOutcome, GenerationRequest, RegisteredType

logger = logging.getLogger(__name__)


class GenerationError(Exception):
    """Raised when a generation pass cannot be completed."""


def execute_schema_generation(request: GenerationRequest) -> GenerationOutcome:
    """Load the configuration, register its types and write the resulting JSON."""
    try:
        configuration = load_configuration(request.config_path)
    except (ConfigurationError, OSError) as exc:
        raise GenerationError(str(exc)) from exc

    try:
        registry = build_registry(configuration.registry)
        registered = _register_configured_types(registry, configuration)
        payload = (
            _assemble_document(registry, _require_document(configuration))
            if request.as_document
            else registry.marshal()
        )
    except (UnsupportedTypeError, EncodingError, ParseError, MissingSchemaError) as exc:
        raise GenerationError(str(exc)) from exc

    output_path = _write_payload(payload, request.output_path)
    return GenerationOutcome(payload=payload, registered=registered, output_path=output_path)


def build_registry(settings: RegistrySettings) -> SchemaRegistry:
    """Create a registry for one generation pass from registry settings."""
    registry = (
        SchemaRegistry.with_builtin_schemas(settings.base_pointer)
        if settings.include_builtin_schemas
        else SchemaRegistry(settings.base_pointer)
    )
    for descriptor in settings.type_exceptions:
        registry.add_type_exception(descriptor)
    return registry


def _register_configured_types(
    registry: SchemaRegistry, configuration: Configuration
) -> tuple[RegisteredType, ...]:
    registered: list[RegisteredType] = []
    for registration in configuration.registrations:
        pointer, name = registry.register_type(
            registration.descriptor, force_string=registration.as_string
        )
        registered.append(RegisteredType(label=registration.label, name=name, pointer=pointer))
    logger.info("Registered %d configured types under %s", len(registered), registry.base_pointer)
    return tuple(registered)


def _require_document(configuration: Configuration) -> DocumentSettings:
    if configuration.document is None:
        raise GenerationError("Document output requires a 'document' configuration section.")
    return configuration.document


def _assemble_document(registry: SchemaRegistry, settings: DocumentSettings) -> dict[str, Any]:
    methods = [
        Method(
            name=method.name,
            summary=method.summary,
            description=method.description,
            params=tuple(_content_descriptor(registry, param) for param in method.params),
            result=_content_descriptor(registry, method.result),
        )
        for method in settings.methods
    ]
    info = Info(title=settings.title, version=settings.version, description=settings.description)
    document = new_document(methods, info).to_dict()
    _embed_schemas(document, registry.base_pointer, registry.marshal())
    return document


def _embed_schemas(document: dict[str, Any], base_pointer: Pointer, schemas: Any) -> None:
    """Place the resolved schemas at the base pointer so every method `$ref` resolves."""
    if base_pointer.is_root:
        raise GenerationError("Document output requires a non-root registry.base_pointer.")
    node = document
    for segment in base_pointer.segments[:-1]:
        child = node.setdefault(segment, {})
        if not isinstance(child, dict):
            raise GenerationError(_collision_message(base_pointer, segment))
        node = child
    leaf = base_pointer.segments[-1]
    if node.get(leaf, {}) != {}:
        raise GenerationError(_collision_message(base_pointer, leaf))
    node[leaf] = schemas if schemas is not None else {}


def _collision_message(base_pointer: Pointer, segment: str) -> str:
    return (
        f"registry.base_pointer {base_pointer.render()!r} collides with the "
        f"OpenRPC document field '{segment}'."
    )


def _content_descriptor(registry: SchemaRegistry, settings: ContentSettings) -> ContentDescriptor:
    pointer, _ = registry.register_type(settings.descriptor)
    return ContentDescriptor(
        name=settings.name,
        schema=pointer,
        summary=settings.summary,
        description=settings.description,
        required=settings.required,
    )


def _write_payload(payload: Any, output_path: str | None) -> Path | None:
    if output_path is None:
        return None
    destination = Path(output_path)
    try:
        destination.write_text(json.dumps(payload, indent=2) + "\n", encoding="utf-8")
    except OSError as exc:
        raise GenerationError(f"Failed to write output file {destination}: {exc}") from exc
    return destination.resolve()
