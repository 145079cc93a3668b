"""Tests for the Maybe family."""

import pytest
from cytoolz.functoolz import identity

import pyomaybe as pm
from pyomaybe import maybe


def test_none_unwrap_raises_none_error() -> None:
    """Unwrapping the generic none raises the empty error."""
    with pytest.raises(pm.NoneError, match="Maybe is none"):
        pm.NONE.unwrap()


def test_not_found_unwrap_raises_with_labels() -> None:
    """Unwrapping a NotFound raises an HTTP-friendly error with the joined labels."""
    uut = maybe.not_found("one", "two")
    assert maybe.is_maybe(uut)
    assert uut.is_none()
    with pytest.raises(pm.NotFoundError, match="^NotFound: one two$") as info:
        uut.unwrap()
    assert info.value.status == 404  # noqa: PLR2004
    assert info.value.status_code == 404  # noqa: PLR2004
    assert info.value.what == ("one", "two")


def test_not_found_error_is_a_none_error() -> None:
    """Callers catching NoneError also catch NotFoundError."""
    with pytest.raises(pm.NoneError):
        maybe.not_found("user").unwrap()


def test_none_functions() -> None:
    """Every operation on NONE takes the absent path."""
    none = pm.NONE
    assert none.is_none()
    assert not none.is_value()
    assert none.unwrap_or("hello") == "hello"
    assert none.unwrap_or_none() is None
    assert none.map(lambda _: True) is none
    assert none.map_or(lambda _: True, "orThis") == pm.Value("orThis")
    assert none.map_or_else(lambda _: True, lambda: "orElse") == pm.Value("orElse")
    assert none.and_then(lambda _: pm.Value(1)) is none
    assert str(none) == "None"
    assert repr(none) == "NONE"


def test_none_preserves_not_found_through_chaining() -> None:
    """A NotFound stays the same instance through map, and_then and filter."""
    uut = maybe.not_found("id")
    assert uut.map(str) is uut
    assert uut.and_then(pm.Value) is uut
    assert uut.filter(lambda _: True) is uut


def test_value_functions() -> None:
    """Every operation on a Value takes the present path."""
    content = {"id": "utest"}
    uut = maybe.with_value(content)
    assert uut.is_value()
    assert not uut.is_none()
    assert uut.unwrap() is content
    assert uut.unwrap_or("hello") is content
    assert uut.unwrap_or_raise("hello") is content
    assert uut.unwrap_or_none() is content
    assert uut.map(lambda v: v["id"]) == pm.Value("utest")
    assert uut.map_or(lambda _: "mapped", "unused") == pm.Value("mapped")
    assert uut.map_or_else(lambda _: "mapped", lambda: "unused") == pm.Value("mapped")
    assert uut.and_then(lambda _: pm.EMPTY) is pm.EMPTY
    assert str(uut) == "Value({'id': 'utest'})"


def test_lazy_alternatives_not_called_when_present() -> None:
    """Fallback callbacks only run on the absent path."""

    def boom() -> object:
        msg = "should not be called"
        raise AssertionError(msg)

    uut = pm.Value(1)
    assert uut.unwrap_or_else(boom) == 1
    assert uut.or_else(boom) is uut
    assert uut.map_or_else(lambda v: v + 1, boom) == pm.Value(2)


def test_callbacks_not_called_when_absent() -> None:
    """Mappers and predicates never run on a none."""

    def boom(_: object) -> object:
        msg = "should not be called"
        raise AssertionError(msg)

    assert pm.NONE.map(boom) is pm.NONE
    assert pm.NONE.and_then(boom) is pm.NONE
    assert pm.NONE.filter(boom) is pm.NONE


def test_unwrap_or_raise_variants() -> None:
    """unwrap_or_raise accepts an exception, a message or a producer."""
    mine = ValueError("mine")
    with pytest.raises(ValueError, match="mine") as info:
        pm.NONE.unwrap_or_raise(mine)
    assert info.value is mine
    with pytest.raises(pm.NoneError, match="hello"):
        pm.NONE.unwrap_or_raise("hello")
    with pytest.raises(KeyError):
        pm.NONE.unwrap_or_raise(lambda: KeyError("k"))
    with pytest.raises(pm.NotFoundError, match="NotFound: id"):
        maybe.not_found("id").unwrap_or_raise()


def test_expect_helpers() -> None:
    """expect_some and expect_none raise ExpectationError on mismatch."""
    assert pm.Value(3).expect_some() == 3  # noqa: PLR2004
    assert pm.NONE.expect_none() is None
    with pytest.raises(pm.ExpectationError, match="^Expected Value - None$"):
        pm.NONE.expect_some()
    with pytest.raises(pm.ExpectationError, match=r"^custom - Value\(3\)$"):
        pm.Value(3).expect_none("custom")


def test_boolean_operators() -> None:
    """or_ and and_ follow boolean semantics."""
    some = pm.Value(1)
    other = pm.Value(2)
    assert some.or_(other) is some
    assert pm.NONE.or_(other) is other
    assert some.and_(other) is other
    assert pm.NONE.and_(other) is pm.NONE
    assert pm.NONE.or_else(lambda: other) is other


def test_filter() -> None:
    """filter keeps the value only when the predicate holds."""
    assert pm.Value(4).filter(lambda n: n % 2 == 0) == pm.Value(4)
    assert pm.Value(3).filter(lambda n: n % 2 == 0) is pm.NONE


def test_flattening() -> None:
    """A Value never holds another Value."""
    assert pm.Value(pm.Value(5)) == pm.Value(5)
    assert pm.Value(pm.Value(pm.Value(5))).unwrap() == 5  # noqa: PLR2004
    assert pm.Value(5).map(pm.Value) == pm.Value(5)


def test_functor_identity_law() -> None:
    """Mapping the identity leaves the maybe unchanged."""
    assert pm.Value(3).map(identity) == pm.Value(3)
    assert pm.NONE.map(identity) == pm.NONE


def test_monad_left_identity_law() -> None:
    """Binding a Value is the same as calling the function."""

    def half(n: int) -> pm.Maybe[int]:
        return pm.Value(n // 2) if n % 2 == 0 else pm.NONE

    assert pm.Value(8).and_then(half) == half(8)
    assert pm.Value(3).and_then(half) == half(3)


def test_iteration() -> None:
    """A Value iterates over an iterable payload, everything else yields nothing."""
    assert list(pm.Value([1, 2])) == [1, 2]
    assert list(pm.Value(3)) == []
    assert list(pm.NONE) == []
    assert list(maybe.not_found("x")) == []
    assert list(pm.EMPTY) == []


def test_singletons_are_frozen() -> None:
    """The shared singletons cannot be mutated."""
    assert maybe.as_none() is pm.NONE
    assert maybe.empty() is pm.EMPTY
    with pytest.raises(AttributeError):
        pm.EMPTY.value = 1  # type: ignore[misc]
    with pytest.raises(AttributeError):
        maybe.not_found("a").what = ("b",)  # type: ignore[misc]


def test_wrap() -> None:
    """wrap turns None into NONE and anything else into a Value."""
    assert maybe.wrap(3) == pm.Value(3)
    assert maybe.wrap(0) == pm.Value(0)
    assert maybe.wrap(None) is pm.NONE


def test_namespace_unwrap_helpers() -> None:
    """The namespace unwrap helpers defer to the instance methods."""
    assert maybe.unwrap(pm.Value(3)) == 3  # noqa: PLR2004
    with pytest.raises(pm.NoneError):
        maybe.unwrap(pm.NONE)
    assert maybe.unwrap_or_none(pm.Value(3)) == 3  # noqa: PLR2004
    assert maybe.unwrap_or_none(pm.NONE) is None


def test_to_result() -> None:
    """to_result converts presence to Okay and absence to Error."""
    assert pm.Value(1).to_result("e") == pm.Okay(1)
    assert pm.NONE.to_result("e") == pm.Error("e")
    assert isinstance(pm.NONE.to_result().unwrap_error(), pm.NoneError)
    err = maybe.not_found("user").to_result().unwrap_error()
    assert isinstance(err, pm.NotFoundError)
    assert err.what == ("user",)
    assert repr(pm.NONE.to_result("missing")) == "Error(error='missing')"
    assert repr(pm.Value(1).to_result("missing")) == "Okay(value=1)"


def test_is_maybe_rejects_lookalikes() -> None:
    """is_maybe only accepts real instances."""

    class Lookalike:
        value = 1

        def is_value(self) -> bool:
            return True

    assert pm.is_maybe(pm.NONE)
    assert pm.is_maybe(pm.Value(None))
    assert not pm.is_maybe(Lookalike())
    assert not pm.is_maybe(pm.Okay(1))
    assert not pm.is_maybe(None)


def test_not_found_is_not_equal_to_none() -> None:
    """NotFound compares by labels and never equals the generic none."""
    assert maybe.not_found("a") == maybe.not_found("a")
    assert maybe.not_found("a") != maybe.not_found("b")
    assert maybe.not_found("a") != pm.NONE
