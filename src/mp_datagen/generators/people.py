"""People-flavoured generators: names, ages and phone numbers."""
from __future__ import annotations

from mp_datagen.generators.core import ValueGenerator
from mp_datagen.generators.numbers import integers
from mp_datagen.generators.strings import alphabetic_string


def names() -> ValueGenerator[str]:
    """Capitalised made-up names, 2 to 15 letters long."""
    lengths = integers(2, 16)

    def _name() -> str:
        length = lengths.get()
        return alphabetic_string(length).get().capitalize()

    return ValueGenerator(_name, name="names")


def ages() -> ValueGenerator[int]:
    return integers(1, 100)


def adult_ages() -> ValueGenerator[int]:
    return integers(18, 100)


def child_ages() -> ValueGenerator[int]:
    return integers(1, 18)


def _phone_parts() -> ValueGenerator[tuple[int, int, int]]:
    area = integers(100, 1000)
    exchange = integers(100, 1000)
    line = integers(1000, 10000)
    return ValueGenerator(lambda: (area.get(), exchange.get(), line.get()), name="phone_parts")


def phone_numbers() -> ValueGenerator[int]:
    """Ten-digit numbers such as ``5551234567``."""
    return _phone_parts().map(lambda parts: int("".join(str(p) for p in parts)))


def phone_number_strings() -> ValueGenerator[str]:
    """``ddd-ddd-dddd`` formatted numbers."""
    return _phone_parts().map(lambda parts: "-".join(str(p) for p in parts))


__all__ = ["adult_ages", "ages", "child_ages", "names", "phone_number_strings", "phone_numbers"]
