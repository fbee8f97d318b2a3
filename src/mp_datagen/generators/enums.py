"""Enum generators."""
from __future__ import annotations

import enum
import inspect
from typing import TypeVar

from mp_datagen.generators.checks import check_not_null, check_that
from mp_datagen.generators.combinators import from_fixed_list
from mp_datagen.generators.core import ValueGenerator

E = TypeVar("E", bound=enum.Enum)


def enum_values_of(enum_cls: type[E]) -> ValueGenerator[E]:
    """Pick one member of *enum_cls* per call."""
    check_not_null(enum_cls, "enum class missing")
    check_that(
        inspect.isclass(enum_cls) and issubclass(enum_cls, enum.Enum),
        f"Class is not an Enum: {enum_cls!r}",
    )
    members = list(enum_cls)
    check_that(len(members) > 0, f"Enum has no values: {enum_cls.__qualname__}")
    return from_fixed_list(members)


__all__ = ["enum_values_of"]
