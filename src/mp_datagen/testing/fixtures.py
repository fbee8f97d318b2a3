"""Testing fixtures – pytest fixtures for reproducible generation.

Enable them from ``conftest.py``::

    pytest_plugins = ["mp_datagen.testing.fixtures"]
"""
from __future__ import annotations

import os
import random
from collections.abc import Iterator

import pytest

from mp_datagen.config.settings import DatagenSettings

DEFAULT_SEED = 20260101


@pytest.fixture
def seeded_random() -> Iterator[random.Random]:
    """Seed the global :mod:`random` state for one test, then restore it.

    The seed is ``MP_DATAGEN_SEED`` when set, otherwise a fixed default.
    The yielded :class:`random.Random` is seeded identically for tests that
    need an independent stream.
    """
    seed = int(os.environ.get("MP_DATAGEN_SEED", DEFAULT_SEED))
    state = random.getstate()
    random.seed(seed)
    try:
        yield random.Random(seed)
    finally:
        random.setstate(state)


@pytest.fixture
def datagen_settings() -> DatagenSettings:
    """Small collections and a shallow nesting guard, for fast tests."""
    return DatagenSettings(collection_min_size=1, collection_max_size=5, max_depth=3)


__all__ = ["DEFAULT_SEED", "datagen_settings", "seeded_random"]
