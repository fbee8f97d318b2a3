"""String generators."""
from __future__ import annotations

import random
import string
import uuid
from collections.abc import Sequence

from mp_datagen.generators.binary import binary
from mp_datagen.generators.checks import check_that
from mp_datagen.generators.combinators import from_fixed_list
from mp_datagen.generators.core import ValueGenerator
from mp_datagen.generators.numbers import integers

_PRINTABLE = string.ascii_letters + string.digits + string.punctuation + " "
_ALPHANUMERIC = string.ascii_letters + string.digits


def _random_text(alphabet: str, length: int | None, default_range: tuple[int, int], name: str) -> ValueGenerator[str]:
    if length is not None:
        check_that(length > 0, "length must be > 0")
        return ValueGenerator(
            lambda: "".join(random.choices(alphabet, k=length)),  # noqa: S311
            name=f"{name}({length})",
        )

    sizes = integers(*default_range)
    return ValueGenerator(
        lambda: "".join(random.choices(alphabet, k=sizes.get())),  # noqa: S311
        name=name,
    )


def strings(length: int | None = None) -> ValueGenerator[str]:
    """Printable ASCII text; 5 to 999 characters when *length* is omitted."""
    return _random_text(_PRINTABLE, length, (5, 1000), "strings")


def alphabetic_string(length: int | None = None) -> ValueGenerator[str]:
    """Letters only; 10 to 99 characters when *length* is omitted."""
    return _random_text(string.ascii_letters, length, (10, 100), "alphabetic_string")


def alphanumeric_string(length: int | None = None) -> ValueGenerator[str]:
    return _random_text(_ALPHANUMERIC, length, (10, 100), "alphanumeric_string")


def hexadecimal_string(length: int) -> ValueGenerator[str]:
    """Upper-case hex digits, exactly *length* of them."""
    check_that(length > 0, "length must be > 0")
    source = binary((length + 1) // 2)
    return ValueGenerator(lambda: source.get().hex().upper()[:length], name=f"hexadecimal_string({length})")


def uuids() -> ValueGenerator[str]:
    """Canonical UUID4 strings."""
    return ValueGenerator(lambda: str(uuid.uuid4()), name="uuids")


def strings_from_fixed_list(values: Sequence[str]) -> ValueGenerator[str]:
    return from_fixed_list(values)


__all__ = [
    "alphabetic_string",
    "alphanumeric_string",
    "hexadecimal_string",
    "strings",
    "strings_from_fixed_list",
    "uuids",
]
