"""Binary generators."""
from __future__ import annotations

import random

from mp_datagen.generators.checks import check_that
from mp_datagen.generators.core import ValueGenerator


def binary(length: int) -> ValueGenerator[bytes]:
    """Random ``bytes`` of exactly *length* (``>= 0``)."""
    check_that(length >= 0, "length must be >= 0")
    return ValueGenerator(lambda: random.randbytes(length), name=f"binary({length})")  # noqa: S311


def byte_arrays(length: int) -> ValueGenerator[bytearray]:
    """Mutable counterpart of :func:`binary`."""
    return binary(length).map(bytearray)


__all__ = ["binary", "byte_arrays"]
