"""Tests for lib/result.py - Result type for monadic error handling."""

import pytest

from aws_login.lib.result import Err, Ok, flat_map, map_ok, unwrap


class TestOkErr:
    """Tests for Ok and Err constructors."""

    def test_ok_holds_value(self) -> None:
        assert Ok(42).value == 42

    def test_err_holds_error(self) -> None:
        assert Err("something went wrong").error == "something went wrong"

    def test_ok_with_none_is_valid(self) -> None:
        assert Ok(None).value is None


class TestMapOk:
    """Tests for map_ok combinator."""

    def test_map_ok_transforms_value(self) -> None:
        assert map_ok(Ok(5), lambda x: x * 2) == Ok(10)

    def test_map_ok_preserves_err(self) -> None:
        assert map_ok(Err("error"), lambda x: x * 2) == Err("error")


class TestFlatMap:
    """Tests for flat_map combinator."""

    def test_flat_map_chains_ok(self) -> None:
        assert flat_map(Ok(5), lambda x: Ok(x + 1)) == Ok(6)

    def test_flat_map_chain_can_fail(self) -> None:
        assert flat_map(Ok(5), lambda x: Err("too big")) == Err("too big")

    def test_flat_map_short_circuits(self) -> None:
        called = []
        assert flat_map(Err("first"), lambda x: called.append(x) or Ok(x)) == Err("first")
        assert called == []


class TestUnwrap:
    """Tests for unwrap."""

    def test_unwrap_ok(self) -> None:
        assert unwrap(Ok(42)) == 42

    def test_unwrap_err_raises(self) -> None:
        with pytest.raises(ValueError, match="Called unwrap on Err"):
            unwrap(Err("error"))
