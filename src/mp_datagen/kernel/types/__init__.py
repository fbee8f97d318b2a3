"""Kernel types – Result monad and the ``Long`` marker type."""
from typing import NewType

from mp_datagen.kernel.types.result import Err, Ok, Result, capture

Long = NewType("Long", int)
"""Annotate a field as ``Long`` to populate it from the 64-bit domain."""

__all__ = ["Err", "Long", "Ok", "Result", "capture"]
