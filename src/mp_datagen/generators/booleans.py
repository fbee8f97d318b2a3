"""Boolean generators."""
from __future__ import annotations

import itertools
import random

from mp_datagen.generators.core import ValueGenerator


def booleans() -> ValueGenerator[bool]:
    """Fair coin."""
    return ValueGenerator(lambda: random.random() < 0.5, name="booleans")  # noqa: S311


def alternating_booleans() -> ValueGenerator[bool]:
    """``False, True, False, ...``; each generator keeps its own counter."""
    counter = itertools.count(1)
    return ValueGenerator(lambda: next(counter) % 2 == 0, name="alternating_booleans")


__all__ = ["alternating_booleans", "booleans"]
