"""Opaque, validated JSON-Schema value."""

from __future__ import annotations

import json
from collections.abc import Mapping
from typing import Any

from jsonschema import Draft202012Validator
from jsonschema.exceptions import SchemaError


class EncodingError(Exception):
    """Raised when a schema body cannot be encoded or decoded as JSON Schema."""


class Schema:
    """Already-valid JSON-Schema document exposing only encode and decode."""

    __slots__ = ("_encoded",)

    def __init__(self, encoded: bytes) -> None:
        self._encoded = encoded

    @classmethod
    def decode(cls, data: bytes | str) -> Schema:
        """Parse JSON text and check it against the JSON-Schema meta-schema."""
        try:
            document = json.loads(data)
        except (TypeError, ValueError) as exc:
            raise EncodingError(f"Schema is not valid JSON: {exc}") from exc
        if not isinstance(document, (Mapping, bool)):
            raise EncodingError(
                f"Schema must be a JSON object or boolean, got {type(document).__name__}."
            )
        try:
            Draft202012Validator.check_schema(document)
        except SchemaError as exc:
            raise EncodingError(f"Invalid JSON schema: {exc.message}") from exc
        return cls(_dump(document))

    @classmethod
    def from_body(cls, body: Mapping[str, Any] | bool) -> Schema:
        return cls.decode(_dump(body))

    def encode(self) -> bytes:
        return self._encoded

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Schema):
            return NotImplemented
        return self._encoded == other._encoded

    def __hash__(self) -> int:
        return hash(self._encoded)

    def __repr__(self) -> str:
        return f"Schema({self._encoded.decode('utf-8')})"


def _dump(document: Any) -> bytes:
    try:
        return json.dumps(document, separators=(",", ":"), allow_nan=False).encode("utf-8")
    except (TypeError, ValueError) as exc:
        raise EncodingError(f"Schema body is not JSON serializable: {exc}") from exc
