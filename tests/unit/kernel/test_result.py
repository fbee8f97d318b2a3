"""Unit tests for the Result type."""

from __future__ import annotations

import pytest

from mp_datagen.kernel.types import Err, Ok, capture


class TestOk:
    def test_accessors(self) -> None:
        result = Ok(3)
        assert result.is_ok()
        assert not result.is_err()
        assert result.value == 3
        assert result.unwrap() == 3
        assert result.unwrap_or(0) == 3

    def test_map(self) -> None:
        assert Ok(3).map(lambda v: v + 1) == Ok(4)

    def test_equality_and_hash(self) -> None:
        assert Ok("a") == Ok("a")
        assert Ok("a") != Ok("b")
        assert len({Ok(1), Ok(1)}) == 1

    def test_pattern_matching(self) -> None:
        match Ok(5):
            case Ok(value=found):
                assert found == 5
            case _:
                pytest.fail("Ok did not match")


class TestErr:
    def test_accessors(self) -> None:
        error = ValueError("bad")
        result = Err(error)
        assert result.is_err()
        assert not result.is_ok()
        assert result.error is error
        assert result.unwrap_or("fallback") == "fallback"

    def test_unwrap_raises_the_error(self) -> None:
        with pytest.raises(ValueError, match="bad"):
            Err(ValueError("bad")).unwrap()

    def test_map_is_a_no_op(self) -> None:
        result = Err(ValueError("bad"))
        assert result.map(lambda v: v + 1) is result

    def test_repr(self) -> None:
        assert repr(Ok(1)) == "Ok(1)"
        assert repr(Err(KeyError("k"))) == "Err(KeyError('k'))"


class TestCapture:
    def test_success(self) -> None:
        assert capture(lambda: 42) == Ok(42)

    def test_listed_error_becomes_err(self) -> None:
        result = capture(lambda: int("x"), ValueError)
        assert isinstance(result, Err)
        assert isinstance(result.error, ValueError)

    def test_unlisted_error_propagates(self) -> None:
        with pytest.raises(KeyError):
            capture(lambda: {}["missing"], ValueError)

    def test_defaults_to_any_exception(self) -> None:
        assert capture(lambda: {}["missing"]).is_err()
