"""Collection generators – lists, sets and dicts built from element generators.

``list_of`` / ``set_of`` / ``map_of`` build one container right away;
``lists`` / ``sets`` / ``maps`` return generators that build a fresh
container per call.  When no size is given, one is drawn from the
configured range (``MP_DATAGEN_COLLECTION_MIN_SIZE`` /
``MP_DATAGEN_COLLECTION_MAX_SIZE``, 10 to 99 by default).

Sets and dicts deduplicate keys, so they may come out smaller than the
requested size::

    set_of(integers(0, 3), 50)   # {0, 1, 2}
"""
from __future__ import annotations

from collections.abc import Sequence
from typing import Callable, TypeVar

from mp_datagen.config.settings import DatagenSettings, get_settings
from mp_datagen.generators.checks import check_that
from mp_datagen.generators.combinators import from_fixed_list
from mp_datagen.generators.core import ValueGenerator, generator
from mp_datagen.generators.numbers import integers

T = TypeVar("T")
K = TypeVar("K")
V = TypeVar("V")

type Source[T] = ValueGenerator[T] | Callable[[], T]


def collection_sizes(settings: DatagenSettings | None = None) -> ValueGenerator[int]:
    """Sizes used when a caller does not pick one."""
    settings = settings or get_settings()
    return integers(settings.collection_min_size, settings.collection_max_size)


def _resolve_size(size: int | None, settings: DatagenSettings | None) -> int:
    if size is None:
        return collection_sizes(settings).get()
    check_that(isinstance(size, int) and not isinstance(size, bool), f"size must be an int, got {size!r}")
    check_that(size >= 0, f"size must be >= 0, got {size}")
    return size


def list_of(source: Source[T], size: int | None = None, *, settings: DatagenSettings | None = None) -> list[T]:
    """A list of exactly *size* values drawn from *source*."""
    elements = generator(source)
    count = _resolve_size(size, settings)
    return [elements.get() for _ in range(count)]


def set_of(source: Source[T], size: int | None = None, *, settings: DatagenSettings | None = None) -> set[T]:
    """A set built from *size* draws; duplicates collapse."""
    elements = generator(source)
    count = _resolve_size(size, settings)
    return {elements.get() for _ in range(count)}


def map_of(
    key_source: Source[K],
    value_source: Source[V],
    size: int | None = None,
    *,
    settings: DatagenSettings | None = None,
) -> dict[K, V]:
    """A dict built from *size* key/value draws; colliding keys overwrite."""
    keys = generator(key_source)
    values = generator(value_source)
    count = _resolve_size(size, settings)
    result: dict[K, V] = {}
    for _ in range(count):
        result[keys.get()] = values.get()
    return result


def lists(source: Source[T], size: int | None = None, *, settings: DatagenSettings | None = None) -> ValueGenerator[list[T]]:
    elements = generator(source)
    if size is not None:
        _resolve_size(size, settings)
    return ValueGenerator(lambda: list_of(elements, size, settings=settings), name=f"lists({elements.name})")


def sets(source: Source[T], size: int | None = None, *, settings: DatagenSettings | None = None) -> ValueGenerator[set[T]]:
    elements = generator(source)
    if size is not None:
        _resolve_size(size, settings)
    return ValueGenerator(lambda: set_of(elements, size, settings=settings), name=f"sets({elements.name})")


def maps(
    key_source: Source[K],
    value_source: Source[V],
    size: int | None = None,
    *,
    settings: DatagenSettings | None = None,
) -> ValueGenerator[dict[K, V]]:
    keys = generator(key_source)
    values = generator(value_source)
    if size is not None:
        _resolve_size(size, settings)
    return ValueGenerator(
        lambda: map_of(keys, values, size, settings=settings),
        name=f"maps({keys.name}, {values.name})",
    )


def from_list(values: Sequence[T]) -> ValueGenerator[T]:
    return from_fixed_list(values)


__all__ = [
    "collection_sizes",
    "from_list",
    "list_of",
    "lists",
    "map_of",
    "maps",
    "set_of",
    "sets",
]
