"""Argument checks shared by the generator factories.

Every failure is an :class:`InvalidArgumentError`, raised while the
generator is being built so that a caller never receives one that cannot
work.
"""
from __future__ import annotations

from collections.abc import Sized
from typing import Any

from mp_datagen.kernel.errors import InvalidArgumentError


def check_not_null(ref: Any, message: str = "missing argument") -> None:
    if ref is None:
        raise InvalidArgumentError(message)


def check_that(predicate: bool, message: str = "check failed") -> None:
    if not predicate:
        raise InvalidArgumentError(message)


def check_not_empty(value: Sized | None, message: str = "empty argument") -> None:
    check_not_null(value, message)
    if len(value) == 0:  # type: ignore[arg-type]
        raise InvalidArgumentError(message)


__all__ = ["check_not_empty", "check_not_null", "check_that"]
