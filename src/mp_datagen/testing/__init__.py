"""Testing support – Hypothesis strategies and pytest fixtures.

Import the fixtures in your ``conftest.py``::

    pytest_plugins = ["mp_datagen.testing.fixtures"]
"""

from mp_datagen.testing.strategies import generator_strategy, object_strategy

__all__ = ["generator_strategy", "object_strategy"]
