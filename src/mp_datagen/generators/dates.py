"""Calendar date generators, derived from the instant generators."""
from __future__ import annotations

from datetime import UTC, date, datetime
from typing import Callable

from mp_datagen.generators import times
from mp_datagen.generators.checks import check_that
from mp_datagen.generators.combinators import validated
from mp_datagen.generators.core import ValueGenerator


def as_date(instant_generator: "ValueGenerator[datetime] | Callable[[], datetime]") -> ValueGenerator[date]:
    """Convert instants to their UTC calendar date.

    Raises:
        InvalidArgumentError: *instant_generator* is missing or its first
            value is ``None``; later calls raise it for ``None`` or
            non-``datetime`` values.
    """
    instants = validated(instant_generator, "instant")

    def _as_date() -> date:
        instant = instants.get()
        check_that(isinstance(instant, datetime), f"not a datetime: {instant!r}")
        if instant.tzinfo is not None:
            instant = instant.astimezone(UTC)
        return instant.date()

    return ValueGenerator(_as_date, name=f"as_date({instants.name})")


def as_instant(date_generator: "ValueGenerator[date] | Callable[[], date]") -> ValueGenerator[datetime]:
    """Convert calendar dates to UTC midnight instants.

    ``datetime`` values pass through, made aware as UTC when naive.
    """
    days = validated(date_generator, "date")

    def _as_instant() -> datetime:
        day = days.get()
        if isinstance(day, datetime):
            return day if day.tzinfo is not None else day.replace(tzinfo=UTC)
        check_that(isinstance(day, date), f"not a date: {day!r}")
        return datetime(day.year, day.month, day.day, tzinfo=UTC)

    return ValueGenerator(_as_instant, name=f"as_instant({days.name})")


def now() -> ValueGenerator[date]:
    return as_date(times.now())


def before_now() -> ValueGenerator[date]:
    return as_date(times.before_now())


def after_now() -> ValueGenerator[date]:
    return as_date(times.after_now())


def anytime() -> ValueGenerator[date]:
    return as_date(times.anytime())


__all__ = ["after_now", "anytime", "as_date", "as_instant", "before_now", "now"]
