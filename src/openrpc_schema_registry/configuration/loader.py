"""Configuration loader service."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from pathlib import Path
from typing import Any

import yaml

from openrpc_schema_registry.pointers import ParseError, Pointer
from openrpc_schema_registry.schema_registry import DEFAULT_BASE_POINTER
from openrpc_schema_registry.type_descriptors import TypeDescriptor

from .runtime_settings import (
    Configuration,
    ContentSettings,
    DocumentSettings,
    MethodSettings,
    RegistrySettings,
    TypeRegistration,
)
from .type_declarations import TypeDeclarationError, TypeDeclarations


class ConfigurationError(Exception):
    """Raised when the configuration file is invalid."""


def load_configuration(config_path: Path | str) -> Configuration:
    """Load and validate the configuration file."""
    path = Path(config_path)
    if not path.exists():
        raise ConfigurationError(f"Configuration file not found: {path}")

    text = path.read_text(encoding="utf-8")
    try:
        parsed = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigurationError(f"Failed to parse configuration file: {exc}") from exc

    if parsed is None:
        parsed = {}

    if not isinstance(parsed, Mapping):
        raise ConfigurationError("Configuration root must be a mapping.")

    declarations = TypeDeclarations(_optional_mapping(parsed.get("types"), "types"))
    try:
        types = declarations.resolve_all()
        registry = _parse_registry_section(parsed.get("registry"), declarations)
        registrations = _parse_register_section(parsed.get("register"), declarations, types)
        document = _parse_document_section(parsed.get("document"), declarations)
    except TypeDeclarationError as exc:
        raise ConfigurationError(str(exc)) from exc

    return Configuration(
        path=path,
        registry=registry,
        types=types,
        registrations=registrations,
        document=document,
    )


def _parse_registry_section(value: Any, declarations: TypeDeclarations) -> RegistrySettings:
    section = _optional_mapping(value, "registry")
    raw_pointer = section.get("base_pointer", DEFAULT_BASE_POINTER)
    if raw_pointer is None:
        raw_pointer = ""
    if not isinstance(raw_pointer, str):
        raise ConfigurationError("registry.base_pointer must be a string.")
    try:
        base_pointer = Pointer.parse(raw_pointer.strip())
    except ParseError as exc:
        raise ConfigurationError(f"registry.base_pointer is invalid: {exc}") from exc

    include_builtin_schemas = section.get("include_builtin_schemas", False)
    if not isinstance(include_builtin_schemas, bool):
        raise ConfigurationError("registry.include_builtin_schemas must be a boolean.")

    type_exceptions = tuple(
        declarations.resolve_shape(shape, context=f"registry.type_exceptions[{index}]")
        for index, shape in enumerate(
            _optional_sequence(section.get("type_exceptions"), "registry.type_exceptions")
        )
    )
    return RegistrySettings(
        base_pointer=base_pointer,
        include_builtin_schemas=include_builtin_schemas,
        type_exceptions=type_exceptions,
    )


def _parse_register_section(
    value: Any,
    declarations: TypeDeclarations,
    types: Mapping[str, TypeDescriptor],
) -> tuple[TypeRegistration, ...]:
    if value is None:
        return tuple(
            TypeRegistration(label=name, descriptor=descriptor)
            for name, descriptor in types.items()
        )

    registrations: list[TypeRegistration] = []
    for index, entry in enumerate(_optional_sequence(value, "register")):
        context = f"register[{index}]"
        if isinstance(entry, str):
            label = _require_non_empty_string(entry, context)
            descriptor = declarations.resolve_shape(label, context=context)
            registrations.append(TypeRegistration(label=label, descriptor=descriptor))
            continue
        mapping = _require_mapping(entry, context)
        shape = mapping.get("type")
        if shape is None:
            raise ConfigurationError(f"{context}.type is required.")
        as_string = mapping.get("as_string", False)
        if not isinstance(as_string, bool):
            raise ConfigurationError(f"{context}.as_string must be a boolean.")
        registrations.append(
            TypeRegistration(
                label=shape if isinstance(shape, str) else context,
                descriptor=declarations.resolve_shape(shape, context=f"{context}.type"),
                as_string=as_string,
            )
        )
    return tuple(registrations)


def _parse_document_section(
    value: Any, declarations: TypeDeclarations
) -> DocumentSettings | None:
    if value is None:
        return None
    section = _require_mapping(value, "document")
    title = _require_non_empty_string(section.get("title"), "document.title")
    version = _require_non_empty_string(section.get("version"), "document.version")
    description = _optional_string(section.get("description"), "document.description")
    methods = tuple(
        _parse_method(method, declarations, context=f"document.methods[{index}]")
        for index, method in enumerate(
            _optional_sequence(section.get("methods"), "document.methods")
        )
    )
    return DocumentSettings(
        title=title,
        version=version,
        description=description,
        methods=methods,
    )


def _parse_method(value: Any, declarations: TypeDeclarations, *, context: str) -> MethodSettings:
    section = _require_mapping(value, context)
    params = tuple(
        _parse_content(param, declarations, context=f"{context}.params[{index}]")
        for index, param in enumerate(
            _optional_sequence(section.get("params"), f"{context}.params")
        )
    )
    if section.get("result") is None:
        raise ConfigurationError(f"{context}.result is required.")
    return MethodSettings(
        name=_require_non_empty_string(section.get("name"), f"{context}.name"),
        summary=_optional_string(section.get("summary"), f"{context}.summary"),
        description=_optional_string(section.get("description"), f"{context}.description"),
        params=params,
        result=_parse_content(section.get("result"), declarations, context=f"{context}.result"),
    )


def _parse_content(value: Any, declarations: TypeDeclarations, *, context: str) -> ContentSettings:
    section = _require_mapping(value, context)
    shape = section.get("type")
    if shape is None:
        raise ConfigurationError(f"{context}.type is required.")
    required = section.get("required", False)
    if not isinstance(required, bool):
        raise ConfigurationError(f"{context}.required must be a boolean.")
    return ContentSettings(
        name=_require_non_empty_string(section.get("name"), f"{context}.name"),
        descriptor=declarations.resolve_shape(shape, context=f"{context}.type"),
        summary=_optional_string(section.get("summary"), f"{context}.summary"),
        description=_optional_string(section.get("description"), f"{context}.description"),
        required=required,
    )


def _optional_mapping(value: Any, section_name: str) -> Mapping[str, Any]:
    if value is None:
        return {}
    if not isinstance(value, Mapping):
        raise ConfigurationError(f"Configuration section '{section_name}' must be a mapping.")
    return value


def _optional_sequence(value: Any, field_name: str) -> Sequence[Any]:
    if value is None:
        return ()
    if isinstance(value, (str, bytes)) or not isinstance(value, Sequence):
        raise ConfigurationError(f"{field_name} must be a list.")
    return value


def _require_mapping(value: Any, section_name: str) -> Mapping[str, Any]:
    if not isinstance(value, Mapping):
        raise ConfigurationError(f"Configuration section '{section_name}' is required.")
    return value


def _require_non_empty_string(value: Any, field_name: str) -> str:
    if not isinstance(value, str):
        raise ConfigurationError(f"{field_name} must be a string.")
    stripped = value.strip()
    if not stripped:
        raise ConfigurationError(f"{field_name} must not be empty.")
    return stripped


def _optional_string(value: Any, field_name: str) -> str | None:
    if value is None:
        return None
    if not isinstance(value, str):
        raise ConfigurationError(f"{field_name} must be a string.")
    stripped = value.strip()
    return stripped or None
