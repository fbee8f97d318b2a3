"""Kernel error hierarchy – public re-export surface.

Hierarchy::

    BaseError
    └── GenerationError              (generation.py)
        ├── InvalidArgumentError     (also a ValueError)
        │   └── UnsupportedTypeError
        ├── FieldInjectionError
        ├── RecursionLimitError
        └── InstantiationError
"""

from mp_datagen.kernel.errors.base import BaseError
from mp_datagen.kernel.errors.generation import (
    FieldInjectionError,
    GenerationError,
    InstantiationError,
    InvalidArgumentError,
    RecursionLimitError,
    UnsupportedTypeError,
)

__all__ = [
    "BaseError",
    "FieldInjectionError",
    "GenerationError",
    "InstantiationError",
    "InvalidArgumentError",
    "RecursionLimitError",
    "UnsupportedTypeError",
]
