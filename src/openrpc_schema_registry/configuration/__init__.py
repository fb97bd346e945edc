"""Configuration domain exports."""

from .config_scaffold_builder import (
    DEFAULT_CONFIG_FILENAME,
    build_placeholder_configuration,
    write_placeholder_configuration,
)
from .loader import ConfigurationError, load_configuration
from .runtime_settings import (
    Configuration,
    ContentSettings,
    DocumentSettings,
    MethodSettings,
    RegistrySettings,
    TypeRegistration,
)
from .type_declarations import TypeDeclarationError, TypeDeclarations

__all__ = [
    "Configuration",
    "ContentSettings",
    "DocumentSettings",
    "MethodSettings",
    "RegistrySettings",
    "TypeRegistration",
    "ConfigurationError",
    "load_configuration",
    "TypeDeclarationError",
    "TypeDeclarations",
    "DEFAULT_CONFIG_FILENAME",
    "build_placeholder_configuration",
    "write_placeholder_configuration",
]
