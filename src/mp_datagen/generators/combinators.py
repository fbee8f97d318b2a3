"""Pure combinators layered over :class:`ValueGenerator`."""
from __future__ import annotations

from collections.abc import Sequence
from typing import Any, Callable, TypeVar

from mp_datagen.generators.checks import check_not_empty, check_not_null, check_that
from mp_datagen.generators.core import ValueGenerator, generator
from mp_datagen.generators.numbers import integers

T = TypeVar("T")


def as_string(source: "ValueGenerator[Any] | Callable[[], Any]") -> ValueGenerator[str]:
    """Textual form of every value *source* produces (``""`` for ``None``)."""
    upstream = generator(source)

    def _as_string() -> str:
        value = upstream.get()
        return "" if value is None else str(value)

    return ValueGenerator(_as_string, name=f"as_string({upstream.name})")


def from_fixed_list(values: Sequence[T]) -> ValueGenerator[T]:
    """Pick one element of *values* uniformly on every call.

    The sequence is copied, so later mutation of *values* does not leak
    into the generator.
    """
    check_not_null(values, "values missing")
    check_that(not isinstance(values, (str, bytes)), "values must be a sequence of items")
    choices = tuple(values)
    check_not_empty(choices, "No values specified")
    index = integers(0, len(choices))
    return ValueGenerator(lambda: choices[index.get()], name="from_fixed_list")


def validated(
    source: "ValueGenerator[T] | Callable[[], T]",
    what: str,
) -> ValueGenerator[T]:
    """Guard a derived generator's upstream.

    The upstream is invoked once immediately so that a generator producing
    ``None`` or an empty value is rejected at construction time; afterwards
    every produced value is checked again.
    """
    upstream = generator(source)
    _check_value(upstream.get(), what)

    def _validated() -> T:
        value = upstream.get()
        _check_value(value, what)
        return value

    return ValueGenerator(_validated, name=upstream.name)


def _check_value(value: Any, what: str) -> None:
    check_not_null(value, f"{what} generator returned None")
    if isinstance(value, (str, bytes)):
        check_that(len(value) > 0, f"{what} generator returned an empty value")


__all__ = ["as_string", "from_fixed_list", "validated"]
