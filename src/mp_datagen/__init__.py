"""
mp_datagen – composable random-value generators for test fixtures.

Import path convention::

    from mp_datagen.generators import integers, list_of, one
    from mp_datagen.objects import objects
    from mp_datagen.kernel.errors import InvalidArgumentError
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
