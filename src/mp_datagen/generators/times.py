"""Instant generators – timezone-aware UTC ``datetime`` values."""
from __future__ import annotations

from datetime import UTC, datetime, timedelta

from mp_datagen.generators.checks import check_not_null, check_that
from mp_datagen.generators.combinators import from_fixed_list
from mp_datagen.generators.core import ValueGenerator
from mp_datagen.generators.numbers import integers


def _offsets(max_days: int) -> ValueGenerator[timedelta]:
    days = integers(1, max_days)
    hours = integers(0, 100)
    minutes = integers(0, 60)
    seconds = integers(0, 60)
    millis = integers(0, 1_000)
    return ValueGenerator(
        lambda: timedelta(
            days=days.get(),
            hours=hours.get(),
            minutes=minutes.get(),
            seconds=seconds.get(),
            milliseconds=millis.get(),
        ),
        name="offsets",
    )


def now() -> ValueGenerator[datetime]:
    return ValueGenerator(lambda: datetime.now(UTC), name="now")


def before(instant: datetime) -> ValueGenerator[datetime]:
    """Instants strictly earlier than *instant* (by up to ~1000 days)."""
    check_not_null(instant, "instant cannot be None")
    check_that(isinstance(instant, datetime), f"not a datetime: {instant!r}")
    offsets = _offsets(1_000)
    return ValueGenerator(lambda: instant - offsets.get(), name="before")


def after(instant: datetime) -> ValueGenerator[datetime]:
    """Instants strictly later than *instant* (by up to ~1000 days)."""
    check_not_null(instant, "instant cannot be None")
    check_that(isinstance(instant, datetime), f"not a datetime: {instant!r}")
    offsets = _offsets(1_000)
    return ValueGenerator(lambda: instant + offsets.get(), name="after")


def before_now() -> ValueGenerator[datetime]:
    return ValueGenerator(lambda: before(datetime.now(UTC)).get(), name="before_now")


def after_now() -> ValueGenerator[datetime]:
    return ValueGenerator(lambda: after(datetime.now(UTC)).get(), name="after_now")


def anytime() -> ValueGenerator[datetime]:
    """Past, present or future, one branch picked per call."""
    branches = from_fixed_list([before_now(), after_now(), now()])
    return ValueGenerator(lambda: branches.get().get(), name="anytime")


__all__ = ["after", "after_now", "anytime", "before", "before_now", "now"]
