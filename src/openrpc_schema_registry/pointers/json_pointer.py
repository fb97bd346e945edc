"""JSON Pointer value used to key schemas in the components tree."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from urllib.parse import unquote

from jsonpointer import JsonPointer, JsonPointerException


class ParseError(Exception):
    """Raised for malformed JSON Pointer syntax."""


@dataclass(frozen=True)
class Pointer:
    """Immutable ordered sequence of unescaped path segments."""

    segments: tuple[str, ...] = ()

    @classmethod
    def parse(cls, path: str) -> Pointer:
        """Parse an RFC 6901 pointer, optionally in `#/a/b` fragment form."""
        if not isinstance(path, str):
            raise ParseError(f"Pointer path must be a string, got {type(path).__name__}.")
        text = path
        if text.startswith("#"):
            text = unquote(text[1:])
        try:
            parsed = JsonPointer(text)
        except JsonPointerException as exc:
            raise ParseError(f"Invalid JSON pointer {path!r}: {exc}") from exc
        return cls(tuple(parsed.parts))

    @classmethod
    def build(cls, segments: Iterable[str]) -> Pointer:
        """Create a pointer from raw segments."""
        parts = tuple(segments)
        for segment in parts:
            if not isinstance(segment, str) or not segment:
                raise ParseError(f"Pointer segments must be non-empty strings: {parts!r}")
        return cls(parts)

    @property
    def is_root(self) -> bool:
        return not self.segments

    def child(self, segment: str) -> Pointer:
        return Pointer.build((*self.segments, segment))

    def parent(self) -> Pointer:
        if self.is_root:
            raise ParseError("The root pointer has no parent.")
        return Pointer(self.segments[:-1])

    def render(self) -> str:
        """Return the canonical escaped form, `""` for the root."""
        return JsonPointer.from_parts(list(self.segments)).path

    def as_reference(self) -> dict[str, str]:
        """Return the JSON Reference object pointing at this path."""
        return {"$ref": "#" + self.render()}

    def __str__(self) -> str:
        return self.render()
