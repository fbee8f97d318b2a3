"""Bounded numeric generators.

Integer generators emulate the 32-bit (``integers``) and 64-bit (``longs``)
domains: bounds must fit the domain and every intermediate step saturates
at the domain boundary instead of leaving it.

A range is split by sign before drawing.  When both bounds are
non-positive the range is mirrored onto the positive side, so the
exclusive upper bound becomes an inclusive lower one; the drawn magnitude
is shifted by one to compensate::

    integers(-10, -5)   # mirrored draw in [5, 10), shifted to [6, 10], negated
"""
from __future__ import annotations

import math
import random
import sys
from collections.abc import Sequence

from mp_datagen.generators.booleans import booleans
from mp_datagen.generators.checks import check_that
from mp_datagen.generators.core import ValueGenerator

INT_MIN = -(2**31)
INT_MAX = 2**31 - 1
LONG_MIN = -(2**63)
LONG_MAX = 2**63 - 1


# ---------------------------------------------------------------------------
# Saturating arithmetic
# ---------------------------------------------------------------------------


def safe_increment(value: int, upper: int = LONG_MAX) -> int:
    """``value + 1``, or *upper* when *value* already sits on it."""
    return value if value >= upper else value + 1


def safe_decrement(value: int, lower: int = LONG_MIN) -> int:
    """``value - 1``, or *lower* when *value* already sits on it."""
    return value if value <= lower else value - 1


def safe_increment_int(value: int) -> int:
    return safe_increment(value, INT_MAX)


def safe_decrement_int(value: int) -> int:
    return safe_decrement(value, INT_MIN)


def _safe_negate(value: int, upper: int) -> int:
    return min(-value, upper)


def _draw(start: int, end: int) -> int:
    """Uniform int in ``[start, end)``; *start* when the range is empty."""
    if start >= end:
        return start
    return random.randrange(start, end)  # noqa: S311


# ---------------------------------------------------------------------------
# Integers / longs
# ---------------------------------------------------------------------------


def _bounded(lower: int, upper: int, lo: int, hi: int, name: str) -> ValueGenerator[int]:
    for bound in (lo, hi):
        check_that(
            isinstance(bound, int) and not isinstance(bound, bool),
            f"bounds must be integers, got {bound!r}",
        )
    check_that(lower <= lo <= upper, f"lower bound {lo} outside [{lower}, {upper}]")
    check_that(lower <= hi <= upper, f"upper bound {hi} outside [{lower}, {upper}]")
    check_that(lo < hi, f"Upper Bound must be greater than Lower Bound: [{lo}, {hi})")

    coin = booleans()

    if hi - lo == 1:
        return ValueGenerator(lambda: lo, name=name)

    if hi <= 0:
        def _negative() -> int:
            magnitude = _draw(-hi, _safe_negate(lo, upper))
            return -safe_increment(magnitude, upper)

        return ValueGenerator(_negative, name=name)

    if lo < 0:
        def _straddling() -> int:
            if coin.get():
                max_magnitude = safe_increment(_safe_negate(lo, upper), upper)
                return -_draw(0, max_magnitude)
            return _draw(0, hi)

        return ValueGenerator(_straddling, name=name)

    return ValueGenerator(lambda: _draw(lo, hi), name=name)


def integers(inclusive_lower_bound: int, exclusive_upper_bound: int) -> ValueGenerator[int]:
    """Ints in ``[inclusive_lower_bound, exclusive_upper_bound)``, 32-bit domain.

    Raises:
        InvalidArgumentError: the bounds are not ints, fall outside the
            32-bit domain, or the range is empty (``lo >= hi``).
    """
    return _bounded(
        INT_MIN, INT_MAX, inclusive_lower_bound, exclusive_upper_bound,
        name=f"integers[{inclusive_lower_bound}, {exclusive_upper_bound})",
    )


def longs(inclusive_lower_bound: int, exclusive_upper_bound: int) -> ValueGenerator[int]:
    """Like :func:`integers` over the 64-bit domain."""
    return _bounded(
        LONG_MIN, LONG_MAX, inclusive_lower_bound, exclusive_upper_bound,
        name=f"longs[{inclusive_lower_bound}, {exclusive_upper_bound})",
    )


def positive_integers() -> ValueGenerator[int]:
    return integers(1, INT_MAX)


def small_positive_integers() -> ValueGenerator[int]:
    return integers(1, 1000)


def negative_integers() -> ValueGenerator[int]:
    return integers(INT_MIN, 0)


def positive_longs() -> ValueGenerator[int]:
    return longs(1, LONG_MAX)


def small_positive_longs() -> ValueGenerator[int]:
    return longs(1, 10_000)


# ---------------------------------------------------------------------------
# Doubles
# ---------------------------------------------------------------------------


def doubles(inclusive_lower_bound: float, inclusive_upper_bound: float) -> ValueGenerator[float]:
    """Floats in ``[inclusive_lower_bound, inclusive_upper_bound]``.

    A continuous domain needs no off-by-one compensation, so the mirrored
    negative branch draws directly.  Equal bounds are allowed.
    """
    lo, hi = float(inclusive_lower_bound), float(inclusive_upper_bound)
    check_that(math.isfinite(lo) and math.isfinite(hi), "bounds must be finite")
    check_that(lo <= hi, f"Upper Bound must be greater than Lower Bound: [{lo}, {hi}]")

    coin = booleans()

    def _clamped(value: float) -> float:
        # uniform() may round one ulp past its end point
        return min(max(value, lo), hi)

    def _draw_double() -> float:
        if hi < 0:
            return -random.uniform(-hi, -lo)  # noqa: S311
        if lo < 0:
            if coin.get():
                return -random.uniform(0.0, -lo)  # noqa: S311
            return random.uniform(0.0, hi)  # noqa: S311
        return random.uniform(lo, hi)  # noqa: S311

    return ValueGenerator(lambda: _clamped(_draw_double()), name=f"doubles[{lo}, {hi}]")


def positive_doubles() -> ValueGenerator[float]:
    return doubles(0.1, sys.float_info.max)


def small_positive_doubles() -> ValueGenerator[float]:
    return doubles(0.1, 1000)


# ---------------------------------------------------------------------------
# Fixed lists
# ---------------------------------------------------------------------------


def integers_from_fixed_list(values: Sequence[int]) -> ValueGenerator[int]:
    from mp_datagen.generators.combinators import from_fixed_list

    return from_fixed_list(values)


def doubles_from_fixed_list(values: Sequence[float]) -> ValueGenerator[float]:
    from mp_datagen.generators.combinators import from_fixed_list

    return from_fixed_list(values)


__all__ = [
    "INT_MAX",
    "INT_MIN",
    "LONG_MAX",
    "LONG_MIN",
    "doubles",
    "doubles_from_fixed_list",
    "integers",
    "integers_from_fixed_list",
    "longs",
    "negative_integers",
    "positive_doubles",
    "positive_integers",
    "positive_longs",
    "safe_decrement",
    "safe_decrement_int",
    "safe_increment",
    "safe_increment_int",
    "small_positive_doubles",
    "small_positive_integers",
    "small_positive_longs",
]
