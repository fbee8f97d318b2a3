"""GeneratorRegistry – immutable type → generator lookup.

The process-wide default is built once, on first use, by
:func:`default_registry` and never changes afterwards.  Customisation is
copy-and-override::

    registry = default_registry().with_overrides({str: strings_from_fixed_list(["a", "b"])})

Keys may be type hints (``str``, ``list[int]``, ``Address``) or
:mod:`~mp_datagen.objects.descriptors` values; hints are described first, so
``list[int]`` and ``typing.List[int]`` address the same entry and the later
one wins.
"""
from __future__ import annotations

import functools
import uuid
from collections.abc import Iterator, Mapping
from decimal import Decimal
from types import MappingProxyType
from typing import Any, Callable

from mp_datagen.generators import (
    alphabetic_string,
    binary,
    booleans,
    dates,
    positive_doubles,
    positive_longs,
    small_positive_integers,
    times,
    uuids,
)
from mp_datagen.generators.core import ValueGenerator, generator
from mp_datagen.objects.descriptors import (
    CollectionType,
    CompositeType,
    EnumType,
    MapType,
    PrimitiveKind,
    PrimitiveType,
    TypeDescriptor,
    describe,
)

_DESCRIPTOR_TYPES = (PrimitiveType, CollectionType, MapType, EnumType, CompositeType)

type Mappings = Mapping[Any, ValueGenerator[Any] | Callable[[], Any]]


class GeneratorRegistry(Mapping[TypeDescriptor, ValueGenerator[Any]]):
    """Read-only mapping from :data:`TypeDescriptor` to a generator."""

    __slots__ = ("_entries",)

    def __init__(self, entries: Mappings | None = None) -> None:
        self._entries = MappingProxyType(_normalise(entries or {}))

    def __getitem__(self, key: Any) -> ValueGenerator[Any]:
        return self._entries[_key(key)]

    def __contains__(self, key: object) -> bool:
        try:
            return _key(key) in self._entries
        except (TypeError, ValueError):
            return False

    def __iter__(self) -> Iterator[TypeDescriptor]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def lookup(self, descriptor: TypeDescriptor) -> ValueGenerator[Any] | None:
        return self._entries.get(descriptor)

    def with_overrides(self, overrides: Mappings | None) -> "GeneratorRegistry":
        """Return a new registry: this one's entries, then *overrides*."""
        if not overrides:
            return self
        return GeneratorRegistry({**self._entries, **_normalise(overrides)})

    def __repr__(self) -> str:
        return f"GeneratorRegistry({len(self)} entries)"


def _key(key: Any) -> TypeDescriptor:
    if isinstance(key, _DESCRIPTOR_TYPES):
        return key
    return describe(key)


def _normalise(entries: Mappings) -> dict[TypeDescriptor, ValueGenerator[Any]]:
    normalised: dict[TypeDescriptor, ValueGenerator[Any]] = {}
    for key, source in entries.items():
        normalised[_key(key)] = generator(source)
    return normalised


def _decimals() -> ValueGenerator[Decimal]:
    cents = small_positive_integers()
    return cents.map(lambda value: Decimal(value).scaleb(-2))


def _uuid_values() -> ValueGenerator[uuid.UUID]:
    return uuids().map(uuid.UUID)


@functools.cache
def default_registry() -> GeneratorRegistry:
    """The default entries, created once per process."""
    return GeneratorRegistry({
        PrimitiveType(PrimitiveKind.STRING): alphabetic_string(),
        PrimitiveType(PrimitiveKind.INTEGER): small_positive_integers(),
        PrimitiveType(PrimitiveKind.LONG): positive_longs(),
        PrimitiveType(PrimitiveKind.DOUBLE): positive_doubles(),
        PrimitiveType(PrimitiveKind.BOOLEAN): booleans(),
        PrimitiveType(PrimitiveKind.BYTES): binary(16),
        PrimitiveType(PrimitiveKind.DECIMAL): _decimals(),
        PrimitiveType(PrimitiveKind.UUID): _uuid_values(),
        PrimitiveType(PrimitiveKind.DATE): dates.anytime(),
        PrimitiveType(PrimitiveKind.INSTANT): times.anytime(),
    })


__all__ = ["GeneratorRegistry", "default_registry"]
