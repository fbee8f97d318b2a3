"""Unit tests for ValueGenerator and the pure combinators."""

from __future__ import annotations

import itertools

import pytest

from mp_datagen.generators import (
    ValueGenerator,
    as_string,
    from_fixed_list,
    generator,
    one,
    validated,
)
from mp_datagen.kernel.errors import InvalidArgumentError


# ---------------------------------------------------------------------------
# ValueGenerator
# ---------------------------------------------------------------------------


class TestValueGenerator:
    def test_get_invokes_supplier_each_time(self) -> None:
        counter = itertools.count()
        gen = ValueGenerator(lambda: next(counter))
        assert [gen.get() for _ in range(3)] == [0, 1, 2]

    def test_call_is_alias_for_get(self) -> None:
        gen = ValueGenerator(lambda: "x")
        assert gen() == "x"

    def test_map(self) -> None:
        gen = ValueGenerator(lambda: 21).map(lambda v: v * 2)
        assert gen.get() == 42

    def test_map_requires_function(self) -> None:
        with pytest.raises(InvalidArgumentError):
            ValueGenerator(lambda: 1).map(None)  # type: ignore[arg-type]

    def test_name_defaults_to_supplier_name(self) -> None:
        def dice() -> int:
            return 4

        assert ValueGenerator(dice).name == "dice"
        assert "dice" in repr(ValueGenerator(dice))


class TestGeneratorAndOne:
    def test_generator_wraps_callable(self) -> None:
        gen = generator(lambda: 5)
        assert isinstance(gen, ValueGenerator)
        assert gen.get() == 5

    def test_generator_returns_existing_instance(self) -> None:
        gen = ValueGenerator(lambda: 5)
        assert generator(gen) is gen

    def test_generator_rejects_non_callable(self) -> None:
        with pytest.raises(InvalidArgumentError):
            generator(42)  # type: ignore[arg-type]

    def test_one_calls_once(self) -> None:
        calls: list[int] = []
        gen = ValueGenerator(lambda: calls.append(1) or "v")
        assert one(gen) == "v"
        assert calls == [1]

    def test_one_rejects_none(self) -> None:
        with pytest.raises(InvalidArgumentError):
            one(None)  # type: ignore[arg-type]


# ---------------------------------------------------------------------------
# as_string
# ---------------------------------------------------------------------------


class TestAsString:
    def test_converts_values(self) -> None:
        assert as_string(lambda: 123).get() == "123"

    def test_none_becomes_empty_string(self) -> None:
        assert as_string(lambda: None).get() == ""

    def test_rejects_missing_generator(self) -> None:
        with pytest.raises(InvalidArgumentError):
            as_string(None)  # type: ignore[arg-type]


# ---------------------------------------------------------------------------
# from_fixed_list
# ---------------------------------------------------------------------------


class TestFromFixedList:
    def test_only_returns_list_members(self) -> None:
        gen = from_fixed_list(["a", "b", "c"])
        values = {gen.get() for _ in range(500)}
        assert values == {"a", "b", "c"}

    def test_single_element(self) -> None:
        assert from_fixed_list([7]).get() == 7

    def test_copy_isolates_later_mutation(self) -> None:
        source = ["a"]
        gen = from_fixed_list(source)
        source.append("b")
        assert {gen.get() for _ in range(50)} == {"a"}

    def test_rejects_empty(self) -> None:
        with pytest.raises(InvalidArgumentError):
            from_fixed_list([])

    def test_rejects_none(self) -> None:
        with pytest.raises(InvalidArgumentError):
            from_fixed_list(None)  # type: ignore[arg-type]

    def test_rejects_plain_string(self) -> None:
        with pytest.raises(InvalidArgumentError):
            from_fixed_list("abc")  # type: ignore[arg-type]


# ---------------------------------------------------------------------------
# validated
# ---------------------------------------------------------------------------


class TestValidated:
    def test_upstream_checked_at_construction(self) -> None:
        calls: list[int] = []

        def upstream() -> str:
            calls.append(1)
            return "ok"

        validated(upstream, "thing")
        assert calls == [1]

    def test_none_rejected_at_construction(self) -> None:
        with pytest.raises(InvalidArgumentError, match="thing"):
            validated(lambda: None, "thing")

    def test_empty_string_rejected_at_construction(self) -> None:
        with pytest.raises(InvalidArgumentError):
            validated(lambda: "", "thing")

    def test_checked_again_per_call(self) -> None:
        values = iter(["first", None])
        gen = validated(lambda: next(values), "thing")
        with pytest.raises(InvalidArgumentError):
            gen.get()
