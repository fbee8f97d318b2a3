"""Type descriptors – a closed description of what a type hint asks for.

:func:`describe` turns a Python type hint into one of a fixed set of
variants so that generator resolution is an exhaustive ``match`` instead of
open-ended runtime type inspection:

==================  =====================================================
``PrimitiveType``   ``str``, ``int``, ``Long``, ``float``, ``bool``,
                    ``bytes``, ``Decimal``, ``UUID``, ``date``, ``datetime``
``CollectionType``  ``list[T]`` / ``set[T]`` / ``frozenset[T]`` and their
                    ABCs
``MapType``         ``dict[K, V]`` / ``Mapping[K, V]``
``EnumType``        any :class:`enum.Enum` subclass
``CompositeType``   every other class; populated field by field
==================  =====================================================

:func:`discover_fields` lists the instance fields of a composite type once,
from its annotations.
"""
from __future__ import annotations

import collections.abc
import dataclasses
import datetime
import decimal
import enum
import inspect
import re
import sys
import types
import typing
import uuid
from typing import Any, ClassVar, Final

from mp_datagen.kernel.errors import UnsupportedTypeError
from mp_datagen.kernel.types import Long


class PrimitiveKind(enum.Enum):
    STRING = "string"
    INTEGER = "integer"
    LONG = "long"
    DOUBLE = "double"
    BOOLEAN = "boolean"
    BYTES = "bytes"
    DECIMAL = "decimal"
    UUID = "uuid"
    DATE = "date"
    INSTANT = "instant"


class CollectionKind(enum.Enum):
    LIST = "list"
    SET = "set"
    FROZENSET = "frozenset"


@dataclasses.dataclass(frozen=True, slots=True)
class PrimitiveType:
    kind: PrimitiveKind


@dataclasses.dataclass(frozen=True, slots=True)
class CollectionType:
    """``element`` is ``None`` when the hint carries no type argument."""

    kind: CollectionKind
    element: "TypeDescriptor | None" = None


@dataclasses.dataclass(frozen=True, slots=True)
class MapType:
    key: "TypeDescriptor | None" = None
    value: "TypeDescriptor | None" = None

    @property
    def parameterized(self) -> bool:
        return self.key is not None and self.value is not None


@dataclasses.dataclass(frozen=True, slots=True)
class EnumType:
    cls: type[enum.Enum]


@dataclasses.dataclass(frozen=True, slots=True)
class CompositeType:
    cls: type


type TypeDescriptor = PrimitiveType | CollectionType | MapType | EnumType | CompositeType


# The primitive-like set is closed: these hints never reach the object builder.
PRIMITIVES: dict[Any, PrimitiveKind] = {
    str: PrimitiveKind.STRING,
    int: PrimitiveKind.INTEGER,
    Long: PrimitiveKind.LONG,
    float: PrimitiveKind.DOUBLE,
    bool: PrimitiveKind.BOOLEAN,
    bytes: PrimitiveKind.BYTES,
    decimal.Decimal: PrimitiveKind.DECIMAL,
    uuid.UUID: PrimitiveKind.UUID,
    datetime.date: PrimitiveKind.DATE,
    datetime.datetime: PrimitiveKind.INSTANT,
}

_COLLECTION_ORIGINS: dict[Any, CollectionKind] = {
    list: CollectionKind.LIST,
    collections.abc.Sequence: CollectionKind.LIST,
    collections.abc.MutableSequence: CollectionKind.LIST,
    collections.abc.Collection: CollectionKind.LIST,
    collections.abc.Iterable: CollectionKind.LIST,
    set: CollectionKind.SET,
    collections.abc.MutableSet: CollectionKind.SET,
    frozenset: CollectionKind.FROZENSET,
    # the read-only ABC is satisfied by an immutable frozenset
    collections.abc.Set: CollectionKind.FROZENSET,
}
_MAP_ORIGINS = frozenset({
    dict,
    collections.abc.Mapping,
    collections.abc.MutableMapping,
})

_EXCLUDED_TEXT = re.compile(r"^(?:typing\.|dataclasses\.)?(?:ClassVar|Final|InitVar)\b")

# Bare typing aliases (``typing.List``) have no origin until subscripted.
_BARE_ALIASES: dict[Any, Any] = {
    typing.List: list,
    typing.Set: set,
    typing.FrozenSet: frozenset,
    typing.Dict: dict,
    typing.Mapping: collections.abc.Mapping,
    typing.Sequence: collections.abc.Sequence,
}


def describe(hint: Any) -> TypeDescriptor:
    """Describe a type hint.

    ``X | None`` and ``Annotated[X, ...]`` describe as ``X``.

    Raises:
        UnsupportedTypeError: the hint is not a class and not one of the
            supported generic forms (``Any``, ``TypeVar``, multi-member
            unions, ``Literal`` ...).
    """
    hint = _unwrap(hint)
    if hint is Any:
        raise UnsupportedTypeError(hint, "Any carries no type information")

    if hint in _BARE_ALIASES:
        hint = _BARE_ALIASES[hint]

    kind = PRIMITIVES.get(hint)
    if kind is not None:
        return PrimitiveType(kind)

    origin = typing.get_origin(hint) or (hint if inspect.isclass(hint) else None)
    args = typing.get_args(hint)

    collection_kind = _COLLECTION_ORIGINS.get(origin)
    if collection_kind is not None:
        element = describe(args[0]) if args else None
        return CollectionType(collection_kind, element)

    if origin in _MAP_ORIGINS:
        if len(args) == 2:
            return MapType(describe(args[0]), describe(args[1]))
        return MapType()

    if inspect.isclass(hint):
        if issubclass(hint, enum.Enum):
            return EnumType(hint)
        return CompositeType(hint)

    raise UnsupportedTypeError(hint, "not a class or a supported generic")


def _unwrap(hint: Any) -> Any:
    origin = typing.get_origin(hint)
    if origin is typing.Annotated:
        return _unwrap(typing.get_args(hint)[0])
    if origin is typing.Union or origin is types.UnionType:
        members = [a for a in typing.get_args(hint) if a is not type(None)]
        if len(members) == 1:
            return _unwrap(members[0])
    return hint


def is_primitive(hint: Any) -> bool:
    try:
        return _unwrap(hint) in PRIMITIVES
    except TypeError:  # unhashable, so not a type
        return False


# ---------------------------------------------------------------------------
# Field discovery
# ---------------------------------------------------------------------------


@dataclasses.dataclass(frozen=True, slots=True)
class FieldDescriptor:
    """One populatable instance field.

    Attributes:
        name: Attribute name.  ``__private`` annotations arrive already
            mangled (``_Owner__secret``), so this is also what is assigned.
        declared_type: The resolved type hint, or the raw annotation when
            it could not be resolved.
        type_args: Generic arguments of the hint (``()`` when none).
        owner: The class in the MRO that declares the field.
        unresolved: Why the annotation could not be resolved; ``None`` for
            every usable field.
    """

    name: str
    declared_type: Any
    type_args: tuple[Any, ...]
    owner: type
    unresolved: str | None = None


def discover_fields(cls: type) -> tuple[FieldDescriptor, ...]:
    """List the instance fields of *cls*, base classes first.

    ``ClassVar`` (class-level) and ``Final`` (constant) annotations are
    excluded, as are dataclass ``InitVar`` pseudo-fields.

    An annotation that cannot be resolved (a name defined inside a
    function, or imported only under ``TYPE_CHECKING``) does not hide the
    other fields: it is returned with ``unresolved`` set.
    """
    try:
        hints = typing.get_type_hints(cls, include_extras=True)
        failures: dict[str, str] = {}
    except (NameError, TypeError):
        hints, failures = _resolve_each(cls)

    fields: list[FieldDescriptor] = []
    for name, hint in hints.items():
        reason = failures.get(name)
        if reason is None and _is_excluded(hint):
            continue
        if reason is not None and _names_excluded_form(hint):
            continue
        resolved = hint if reason is not None else _unwrap(hint)
        fields.append(
            FieldDescriptor(
                name=name,
                declared_type=resolved,
                type_args=() if reason is not None else typing.get_args(resolved),
                owner=_declaring_class(cls, name),
                unresolved=reason,
            )
        )
    return tuple(fields)


def _resolve_each(cls: type) -> tuple[dict[str, Any], dict[str, str]]:
    """Resolve annotations one name at a time, in ``get_type_hints`` order."""
    hints: dict[str, Any] = {}
    failures: dict[str, str] = {}
    for klass in reversed(cls.__mro__):
        module = sys.modules.get(klass.__module__)
        globalns = vars(module) if module is not None else {}
        localns = dict(vars(klass))
        for name, annotation in _raw_annotations(klass).items():
            try:
                hints[name] = _evaluate(annotation, globalns, localns)
                failures.pop(name, None)
            except (NameError, TypeError, AttributeError, SyntaxError) as exc:
                hints[name] = annotation
                failures[name] = f"cannot resolve annotation {_annotation_text(annotation)!r} ({exc})"
    return hints, failures


def _evaluate(annotation: Any, globalns: dict[str, Any], localns: dict[str, Any]) -> Any:
    if isinstance(annotation, typing.ForwardRef):
        annotation = annotation.__forward_arg__
    if isinstance(annotation, str):
        return eval(annotation, globalns, localns)  # noqa: S307
    return annotation


def _annotation_text(annotation: Any) -> str:
    if isinstance(annotation, typing.ForwardRef):
        return annotation.__forward_arg__
    return annotation if isinstance(annotation, str) else repr(annotation)


def _raw_annotations(klass: type) -> dict[str, Any]:
    try:
        return inspect.get_annotations(klass)
    except NameError:
        # lazily evaluated annotations (3.14+) naming an undefined class
        import annotationlib

        return annotationlib.get_annotations(klass, format=annotationlib.Format.FORWARDREF)


def _is_excluded(hint: Any) -> bool:
    if hint is ClassVar or hint is Final:
        return True
    if isinstance(hint, dataclasses.InitVar):
        return True
    origin = typing.get_origin(hint)
    if origin is typing.Annotated:
        return _is_excluded(typing.get_args(hint)[0])
    return origin is ClassVar or origin is Final


def _names_excluded_form(annotation: Any) -> bool:
    return _EXCLUDED_TEXT.match(_annotation_text(annotation)) is not None


def _declaring_class(cls: type, name: str) -> type:
    for klass in cls.__mro__:
        if name in _raw_annotations(klass):
            return klass
    return cls


__all__ = [
    "CollectionKind",
    "CollectionType",
    "CompositeType",
    "EnumType",
    "FieldDescriptor",
    "MapType",
    "PRIMITIVES",
    "PrimitiveKind",
    "PrimitiveType",
    "TypeDescriptor",
    "describe",
    "discover_fields",
    "is_primitive",
]
