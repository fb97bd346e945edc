"""Pointer domain exports."""

from .json_pointer import ParseError, Pointer
from .pointer_store import PointerStore
from .pointer_tree import PointerTree

__all__ = [
    "ParseError",
    "Pointer",
    "PointerStore",
    "PointerTree",
]
