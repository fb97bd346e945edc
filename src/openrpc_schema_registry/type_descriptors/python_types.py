"""Build type descriptors from Python annotations."""

from __future__ import annotations

import asyncio
import collections.abc
import dataclasses
import datetime
import decimal
import enum
import queue
import types
import typing
import uuid
from typing import Any

from .descriptor_models import (
    DynamicType,
    MapType,
    RecordType,
    ReferenceType,
    ScalarKind,
    ScalarType,
    SequenceType,
    TypeDescriptor,
    UnsupportedType,
)

_SCALAR_BASES: tuple[tuple[type, ScalarKind], ...] = (
    # bool subclasses int, so it is checked first.
    (bool, ScalarKind.BOOLEAN),
    (int, ScalarKind.INTEGER),
    (float, ScalarKind.NUMBER),
    (str, ScalarKind.STRING),
)
# Classes with a textual or numeric wire form, named after the class.
_WIRE_SCALARS: tuple[tuple[type, ScalarKind], ...] = (
    (decimal.Decimal, ScalarKind.NUMBER),
    (datetime.date, ScalarKind.STRING),
    (datetime.time, ScalarKind.STRING),
    (uuid.UUID, ScalarKind.STRING),
)
_SEQUENCE_ORIGINS = (
    list,
    set,
    frozenset,
    collections.abc.Sequence,
    collections.abc.MutableSequence,
    collections.abc.Set,
    collections.abc.MutableSet,
    collections.abc.Iterable,
    collections.abc.Collection,
)
_MAPPING_ORIGINS = (dict, collections.abc.Mapping, collections.abc.MutableMapping)
_CHANNEL_TYPES = (queue.Queue, queue.SimpleQueue, asyncio.Queue)
_UNION_ORIGINS = (typing.Union, types.UnionType)
_BYTE_TYPES = (bytes, bytearray)


def describe_type(annotation: Any) -> TypeDescriptor:
    """Map a Python annotation onto the descriptor model.

    Records are memoized per class, so self-referential dataclasses produce a
    record whose field refers back to the same descriptor object.
    """
    return _Describer().describe(annotation)


class _Describer:
    def __init__(self) -> None:
        self._records: dict[type, RecordType] = {}

    def describe(self, annotation: Any) -> TypeDescriptor:
        if annotation is Any or annotation is object:
            return DynamicType()
        if annotation is None or annotation is type(None):
            return UnsupportedType(kind="null")
        if isinstance(annotation, typing.TypeVar):
            return DynamicType()
        if isinstance(annotation, (str, typing.ForwardRef)):
            raise TypeError(f"Unresolved forward reference {_printable(annotation)}.")

        origin = typing.get_origin(annotation)
        if origin is typing.Annotated:
            return self.describe(typing.get_args(annotation)[0])
        if origin in _UNION_ORIGINS:
            return self._describe_union(annotation)
        if origin is tuple:
            return self._describe_tuple(annotation)
        if origin in _SEQUENCE_ORIGINS:
            args = typing.get_args(annotation)
            element = self.describe(args[0]) if args else DynamicType()
            return SequenceType(element=element)
        if origin in _MAPPING_ORIGINS:
            args = typing.get_args(annotation)
            value = self.describe(args[1]) if len(args) == 2 else DynamicType()
            return MapType(value=value)
        if origin is collections.abc.Callable:
            return UnsupportedType(kind="function")
        if origin is typing.Literal:
            return self._describe_literal(annotation)
        if origin is not None:
            return UnsupportedType(
                kind=getattr(origin, "__name__", "generic"), name=_printable(annotation)
            )
        if isinstance(annotation, typing.NewType):
            return self._describe_new_type(annotation)

        if not isinstance(annotation, type):
            if callable(annotation):
                return UnsupportedType(kind="function", name=getattr(annotation, "__name__", None))
            return UnsupportedType(kind=type(annotation).__name__)
        return self._describe_class(annotation)

    def _describe_union(self, annotation: Any) -> TypeDescriptor:
        members = [arg for arg in typing.get_args(annotation) if arg is not type(None)]
        if len(members) == 1:
            return ReferenceType(target=self.describe(members[0]))
        return UnsupportedType(kind="union", name=_printable(annotation))

    def _describe_tuple(self, annotation: Any) -> TypeDescriptor:
        args = typing.get_args(annotation)
        if not args:
            return SequenceType(element=DynamicType())
        if len(args) == 2 and args[1] is Ellipsis:
            return SequenceType(element=self.describe(args[0]))
        if all(arg == args[0] for arg in args):
            return SequenceType(element=self.describe(args[0]), fixed_length=len(args))
        return UnsupportedType(kind="tuple", name=_printable(annotation))

    def _describe_literal(self, annotation: Any) -> TypeDescriptor:
        value_types = {type(value) for value in typing.get_args(annotation)}
        if len(value_types) == 1:
            return self.describe(value_types.pop())
        return UnsupportedType(kind="literal", name=_printable(annotation))

    def _describe_new_type(self, new_type: Any) -> TypeDescriptor:
        underlying = self.describe(new_type.__supertype__)
        if isinstance(underlying, ScalarType):
            return ScalarType(
                kind=underlying.kind, name=new_type.__name__, module=new_type.__module__
            )
        return underlying

    def _describe_class(self, cls: type) -> TypeDescriptor:
        if cls in self._records:
            return self._records[cls]
        for base, kind in _SCALAR_BASES:
            if issubclass(cls, base):
                if cls is base:
                    return ScalarType(kind=kind, name=cls.__name__)
                return ScalarType(kind=kind, name=cls.__name__, module=cls.__module__)
        for base, kind in _WIRE_SCALARS:
            if issubclass(cls, base):
                return ScalarType(kind=kind, name=cls.__name__, module=cls.__module__)
        if issubclass(cls, _BYTE_TYPES):
            return SequenceType(element=ScalarType(kind=ScalarKind.INTEGER, name="int"))
        if issubclass(cls, enum.Enum):
            return self._describe_enum(cls)
        if cls in (list, set, frozenset, tuple):
            return SequenceType(element=DynamicType())
        if cls is dict:
            return MapType(value=DynamicType())
        if issubclass(cls, _CHANNEL_TYPES):
            return UnsupportedType(kind="channel", name=cls.__name__)
        if issubclass(cls, (types.FunctionType, types.BuiltinFunctionType, types.MethodType)):
            return UnsupportedType(kind="function", name=cls.__name__)
        return self._describe_record(cls)

    def _describe_enum(self, cls: type[enum.Enum]) -> TypeDescriptor:
        value_types = {type(member.value) for member in cls}
        if len(value_types) == 1:
            underlying = self.describe(value_types.pop())
            if isinstance(underlying, ScalarType):
                return ScalarType(kind=underlying.kind, name=cls.__name__, module=cls.__module__)
        return UnsupportedType(kind="enum", name=cls.__qualname__)

    def _describe_record(self, cls: type) -> TypeDescriptor:
        fields = _record_fields(cls)
        if not fields and not _is_structured(cls):
            return UnsupportedType(kind="class", name=cls.__qualname__)
        record = RecordType(name=cls.__name__, module=cls.__module__)
        self._records[cls] = record
        for field_name, field_annotation in fields:
            record.add_field(field_name, self.describe(field_annotation))
        return record


def _record_fields(cls: type) -> list[tuple[str, Any]]:
    try:
        hints = typing.get_type_hints(cls)
    except NameError as exc:
        raise TypeError(f"Cannot resolve annotations of {cls.__qualname__}: {exc}") from exc
    except TypeError:
        hints = dict(getattr(cls, "__annotations__", {}))
    if dataclasses.is_dataclass(cls):
        return [(item.name, hints.get(item.name, item.type)) for item in dataclasses.fields(cls)]
    return [
        (name, annotation) for name, annotation in hints.items() if not _is_class_var(annotation)
    ]


def _is_structured(cls: type) -> bool:
    if dataclasses.is_dataclass(cls) or typing.is_typeddict(cls):
        return True
    return issubclass(cls, tuple) and hasattr(cls, "_fields")


def _is_class_var(annotation: Any) -> bool:
    return annotation is typing.ClassVar or typing.get_origin(annotation) is typing.ClassVar


def _printable(annotation: Any) -> str:
    return repr(annotation).replace("typing.", "")
