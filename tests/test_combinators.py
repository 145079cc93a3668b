"""Tests for the batch combinators of both families."""

import asyncio
from collections.abc import Awaitable

import pytest

import pyomaybe as pm
from pyomaybe import maybe, result


def test_all_or_none_with_a_none() -> None:
    """The first none is returned as the same instance."""
    assert maybe.all_or_none(pm.EMPTY, pm.Value(3), pm.NONE) is pm.NONE


def test_all_or_none_short_circuits_in_order() -> None:
    """The scan stops at the first none, keeping NotFound labels."""
    missing = maybe.not_found("user", "42")
    assert maybe.all_or_none(pm.Value(1), missing, pm.NONE, pm.Value(3)) is missing


def test_all_or_none_with_only_values() -> None:
    """All values are collected in order."""
    assert maybe.all_or_none(pm.EMPTY, pm.Value(3)) == pm.Value([None, 3])
    assert maybe.all_or_none() == pm.Value([])


def test_all_values() -> None:
    """Nones are dropped, values kept in order."""
    assert maybe.all_values(pm.Value(1), pm.NONE, pm.Value(3)) == [1, 3]
    assert maybe.all_values(pm.Value(1), pm.Value(3)) == [1, 3]
    assert maybe.all_values(pm.NONE, maybe.not_found("x")) == []


def test_maybe_any() -> None:
    """The first value wins, otherwise the generic none."""
    assert maybe.any(maybe.as_none(), pm.NONE) is pm.NONE
    first = pm.Value(3)
    assert maybe.any(first, pm.NONE, pm.EMPTY) is first
    assert maybe.any(pm.NONE, first) is first
    assert maybe.any(maybe.not_found("x")) is pm.NONE
    assert maybe.any() is pm.NONE


def test_result_all_with_okay_values() -> None:
    """All okay values are collected in order."""
    assert result.all(result.okay_void(), result.okay(2), result.okay("yes")) == (
        pm.Okay([None, 2, "yes"])
    )


def test_result_all_with_an_error() -> None:
    """The first error is returned as the same instance."""
    error = result.error(ValueError("no"))
    assert result.all(result.okay("yes"), error, result.error("later")) is error


def test_result_any_with_okay_value() -> None:
    """The first okay is returned as the same instance."""
    okay = result.okay("yes")
    assert result.any(result.error(ValueError("no")), okay) is okay


def test_result_any_with_all_errors() -> None:
    """Every error value is collected in order."""
    first = ValueError("false")
    second = ValueError("no")
    uut = result.any(result.error(first), result.error(second))
    assert uut.assert_is_error() == [first, second]


def test_wrap_returning() -> None:
    """A normal return becomes Okay."""
    assert result.wrap(lambda: 42) == pm.Okay(42)


def test_wrap_raising() -> None:
    """A raised exception becomes Error, untouched."""
    exc = RuntimeError("x")

    def fail() -> int:
        raise exc

    uut = result.wrap(fail)
    assert uut.is_error()
    assert uut.unwrap_error() is exc
    assert str(uut.unwrap_error()) == "x"


def test_wrap_lets_base_exceptions_through() -> None:
    """Interrupts are not captured."""

    def interrupt() -> int:
        raise KeyboardInterrupt

    with pytest.raises(KeyboardInterrupt):
        result.wrap(interrupt)


def test_wrap_async_returning() -> None:
    """A resolved awaitable becomes Okay."""

    async def fetch() -> int:
        await asyncio.sleep(0)
        return 7

    assert asyncio.run(result.wrap_async(fetch)) == pm.Okay(7)


def test_wrap_async_rejecting() -> None:
    """A failing awaitable becomes Error."""
    exc = ValueError("rejected")

    async def fetch() -> int:
        await asyncio.sleep(0)
        raise exc

    uut = asyncio.run(result.wrap_async(fetch))
    assert uut.unwrap_error() is exc


def test_wrap_async_sync_raise_before_awaiting() -> None:
    """A function raising before returning an awaitable gives the same Error shape."""
    exc = KeyError("id")

    def fetch() -> Awaitable[int]:
        raise exc

    uut = asyncio.run(result.wrap_async(fetch))
    assert uut.is_error()
    assert uut.unwrap_error() is exc


def test_wrap_async_propagates_cancellation() -> None:
    """Cancellation belongs to the caller."""

    async def fetch() -> int:
        raise asyncio.CancelledError

    with pytest.raises(asyncio.CancelledError):
        asyncio.run(result.wrap_async(fetch))


def test_wrap_logs_captured_exceptions(caplog: pytest.LogCaptureFixture) -> None:
    """Captured exceptions are logged at debug level."""

    def fail() -> int:
        msg = "boom"
        raise ValueError(msg)

    with caplog.at_level("DEBUG", logger="pyomaybe"):
        result.wrap(fail)
    assert "ValueError('boom')" in caplog.text
