"""Hierarchical pointer index mirroring JSON document nesting."""

from __future__ import annotations

import json
import logging
from typing import Any

from .json_pointer import Pointer
from .pointer_store import PointerStore

logger = logging.getLogger(__name__)


class PointerTree:
    """Tree node owning its own pointer and its children keyed by segment.

    Leaf nodes resolve to the schema stored under their pointer; internal
    nodes resolve to an object assembled from their children.
    """

    def __init__(self, pointer: Pointer | None = None) -> None:
        self.pointer = pointer if pointer is not None else Pointer()
        self.children: dict[str, PointerTree] = {}

    def insert(self, pointer: Pointer) -> PointerTree:
        """Insert `pointer` below this node, creating missing ancestors first."""
        segments = pointer.segments
        if not segments:
            return self
        if len(segments) == 1:
            self.children.setdefault(segments[0], PointerTree(pointer))
            return self

        parent = self.find(Pointer(segments[:-1]))
        if parent is None:
            self.insert(Pointer(segments[:-1]))
            return self.insert(pointer)
        parent.children.setdefault(segments[-1], PointerTree(pointer))
        return self

    def find(self, pointer: Pointer) -> PointerTree | None:
        """Descend one segment at a time; the empty pointer finds this node."""
        node: PointerTree = self
        for segment in pointer.segments:
            child = node.children.get(segment)
            if child is None:
                return None
            node = child
        return node

    def remove(self, pointer: Pointer) -> None:
        """Detach the node at `pointer` and its subtree; a missing node is ignored."""
        if not pointer.segments:
            return
        parent = self.find(Pointer(pointer.segments[:-1]))
        if parent is not None:
            parent.children.pop(pointer.segments[-1], None)

    def resolve(self, store: PointerStore) -> Any:
        """Assemble the JSON value for this subtree from `store`."""
        if not self.children:
            schema, found = store.get(self.pointer)
            if not found or schema is None:
                logger.debug("No schema stored for tree leaf %r", self.pointer.render())
                return None
            return json.loads(schema.encode())
        return {segment: child.resolve(store) for segment, child in self.children.items()}

    def shallow_equals(self, other: PointerTree) -> bool:
        """Compare own pointer segments and the immediate child names."""
        if self.pointer.segments != other.pointer.segments:
            return False
        return set(self.children) == set(other.children)

    def __repr__(self) -> str:
        return f"PointerTree({self.pointer.render()!r}, children={sorted(self.children)!r})"
