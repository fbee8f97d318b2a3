"""Geolocation generators."""
from __future__ import annotations

from mp_datagen.generators.core import ValueGenerator
from mp_datagen.generators.numbers import doubles


def latitudes() -> ValueGenerator[float]:
    return doubles(-90, 90)


def longitudes() -> ValueGenerator[float]:
    return doubles(-180, 180)


__all__ = ["latitudes", "longitudes"]
