"""ValueGenerator[T] – a repeatable producer of one value."""
from __future__ import annotations

from typing import Callable, Generic, TypeVar

from mp_datagen.generators.checks import check_not_null, check_that

T = TypeVar("T")
U = TypeVar("U")


class ValueGenerator(Generic[T]):
    """Produce one ``T`` per :meth:`get` call.

    A generator is built once and invoked any number of times.  Calls are
    independent of each other: nothing is cached and no ordering is
    guaranteed.  Implementations must never return ``None``.

    Wrap any zero-argument callable::

        dice = ValueGenerator(lambda: random.randint(1, 6), name="dice")
        dice.get()   # 4
        dice()       # 1  -- calling the generator is an alias for get()
    """

    __slots__ = ("_supplier", "_name")

    def __init__(self, supplier: Callable[[], T], name: str | None = None) -> None:
        self._supplier = supplier
        self._name = name or getattr(supplier, "__name__", "generator")

    @property
    def name(self) -> str:
        return self._name

    def get(self) -> T:
        return self._supplier()

    def __call__(self) -> T:
        return self.get()

    def map(self, func: Callable[[T], U]) -> "ValueGenerator[U]":
        """Return a generator that applies *func* to every produced value."""
        check_not_null(func, "mapping function missing")
        return ValueGenerator(lambda: func(self.get()), name=f"{self._name}.map")

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._name})"


def generator(source: "ValueGenerator[T] | Callable[[], T]") -> ValueGenerator[T]:
    """Adapt a zero-argument callable into a :class:`ValueGenerator`."""
    check_not_null(source, "generator missing")
    if isinstance(source, ValueGenerator):
        return source
    check_that(callable(source), f"not a generator: {source!r}")
    return ValueGenerator(source)


def one(source: "ValueGenerator[T] | Callable[[], T]") -> T:
    """Produce a single value from *source*."""
    return generator(source).get()


__all__ = ["ValueGenerator", "generator", "one"]
