"""Document assembly exports."""

from .openrpc_models import (
    OPENRPC_VERSION,
    Components,
    ContentDescriptor,
    Info,
    Method,
    OpenRpcDocument,
    new_document,
)

__all__ = [
    "OPENRPC_VERSION",
    "Components",
    "ContentDescriptor",
    "Info",
    "Method",
    "OpenRpcDocument",
    "new_document",
]
