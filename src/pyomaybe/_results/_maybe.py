from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Never, TypeIs

from .._core import PayloadIterable, Pipeable, to_string
from ._errors import ExpectationError, NoneError, NotFoundError

if TYPE_CHECKING:
    from ._result import Result

_MISSING: Any = object()


class Maybe[T](PayloadIterable, Pipeable, ABC):
    __slots__ = ()

    @abstractmethod
    def is_value(self) -> TypeIs[Value[T]]:  # type: ignore[misc]
        """
        Returns `True` if the maybe is a `Value`.

        Returns:
            `True` if the maybe is a `Value` variant, `False` otherwise.

        Example:
            ```python
            >>> from pyomaybe import Value, NONE, Maybe
            >>> x: Maybe[int] = Value(2)
            >>> x.is_value()
            True
            >>> y: Maybe[int] = NONE
            >>> y.is_value()
            False

            ```
        """
        ...

    @abstractmethod
    def is_none(self) -> TypeIs[NoneValue]:  # type: ignore[misc]
        """
        Returns `True` if the maybe is a `NoneValue` (including `NotFound`).

        Example:
            ```python
            >>> from pyomaybe import Value, NONE, maybe
            >>> Value(2).is_none()
            False
            >>> NONE.is_none()
            True
            >>> maybe.not_found("user").is_none()
            True

            ```
        """
        ...

    @abstractmethod
    def unwrap(self) -> T:
        """
        Returns the contained value.

        Returns:
            The contained value.

        Raises:
            NoneError: If the maybe is `NONE`.
            NotFoundError: If the maybe is a `NotFound`.

        Example:
            ```python
            >>> from pyomaybe import Value, NONE, maybe
            >>> Value("car").unwrap()
            'car'
            >>> NONE.unwrap()
            Traceback (most recent call last):
                ...
            pyomaybe._results._errors.NoneError: Maybe is none
            >>> maybe.not_found("user", "42").unwrap()
            Traceback (most recent call last):
                ...
            pyomaybe._results._errors.NotFoundError: NotFound: user 42

            ```
        """
        ...

    def _has_payload(self) -> bool:
        return self.is_value()

    def unwrap_or[U](self, alt_value: U) -> T | U:
        """
        Returns the contained value or a provided alternative.

        Args:
            alt_value: The value to return if the maybe is none.

        Example:
            ```python
            >>> from pyomaybe import Value, NONE
            >>> Value("car").unwrap_or("bike")
            'car'
            >>> NONE.unwrap_or("bike")
            'bike'

            ```
        """
        return self.unwrap() if self.is_value() else alt_value

    def unwrap_or_else[U](self, alt_value_fn: Callable[[], U]) -> T | U:
        """
        Returns the contained value or computes it from a function.

        The function is only called when the maybe is none.

        Example:
            ```python
            >>> from pyomaybe import Value, NONE
            >>> k = 10
            >>> Value(4).unwrap_or_else(lambda: 2 * k)
            4
            >>> NONE.unwrap_or_else(lambda: 2 * k)
            20

            ```
        """
        return self.unwrap() if self.is_value() else alt_value_fn()

    def unwrap_or_none(self) -> T | None:
        """Returns the contained value, or `None` instead of raising."""
        return self.unwrap() if self.is_value() else None

    def unwrap_or_raise(
        self,
        alt_error: BaseException | str | Callable[[], BaseException] | None = None,
    ) -> T:
        """
        Returns the contained value, or raises a caller-chosen error when none.

        Args:
            alt_error: An exception to raise, a message for a `NoneError`, or a function producing the exception.
                When omitted, behaves like `unwrap`.

        Example:
            ```python
            >>> from pyomaybe import Value, NONE
            >>> Value(1).unwrap_or_raise("missing")
            1
            >>> NONE.unwrap_or_raise("missing")
            Traceback (most recent call last):
                ...
            pyomaybe._results._errors.NoneError: missing
            >>> NONE.unwrap_or_raise(lambda: KeyError("id"))
            Traceback (most recent call last):
                ...
            KeyError: 'id'

            ```
        """
        if self.is_value() or alt_error is None:
            return self.unwrap()
        match alt_error:
            case BaseException():
                raise alt_error
            case str():
                raise NoneError(alt_error)
            case _:
                raise alt_error()

    def expect_some(self, message: str | None = None) -> T:
        """
        Asserts that the maybe is a `Value` and returns it. Meant for tests.

        Raises:
            ExpectationError: If the maybe is none.

        Example:
            ```python
            >>> from pyomaybe import Value, NONE
            >>> Value(3).expect_some()
            3
            >>> NONE.expect_some("user should exist")
            Traceback (most recent call last):
                ...
            pyomaybe._results._errors.ExpectationError: user should exist - None

            ```
        """
        if self.is_value():
            return self.unwrap()
        raise ExpectationError(
            f"{'Expected Value' if message is None else message} - {self}"
        )

    def expect_none(self, message: str | None = None) -> None:
        """
        Asserts that the maybe is none. Meant for tests.

        Raises:
            ExpectationError: If the maybe holds a value.

        Example:
            ```python
            >>> from pyomaybe import Value
            >>> Value(3).expect_none()
            Traceback (most recent call last):
                ...
            pyomaybe._results._errors.ExpectationError: Expected None - Value(3)

            ```
        """
        if self.is_value():
            raise ExpectationError(
                f"{'Expected None' if message is None else message} - {self}"
            )

    def or_[U](self, other: Maybe[U]) -> Maybe[T] | Maybe[U]:
        """
        Returns the maybe if it holds a value, otherwise returns `other`.

        Example:
            ```python
            >>> from pyomaybe import Value, NONE
            >>> Value(2).or_(Value(100))
            Value(value=2)
            >>> NONE.or_(Value(100))
            Value(value=100)

            ```
        """
        return self if self.is_value() else other

    def or_else[U](self, other_fn: Callable[[], Maybe[U]]) -> Maybe[T] | Maybe[U]:
        """
        Returns the maybe if it holds a value, otherwise calls a function and returns the result.

        Example:
            ```python
            >>> from pyomaybe import Value, NONE, Maybe
            >>> def nobody() -> Maybe[str]:
            ...     return NONE
            >>> def vikings() -> Maybe[str]:
            ...     return Value("vikings")
            >>> Value("barbarians").or_else(vikings)
            Value(value='barbarians')
            >>> NONE.or_else(vikings)
            Value(value='vikings')
            >>> NONE.or_else(nobody)
            NONE

            ```
        """
        return self if self.is_value() else other_fn()

    def and_[U](self, other: Maybe[U]) -> Maybe[U]:
        """
        Returns `other` if the maybe holds a value, otherwise returns itself.

        Example:
            ```python
            >>> from pyomaybe import Value, NONE
            >>> Value(2).and_(Value("foo"))
            Value(value='foo')
            >>> NONE.and_(Value("foo"))
            NONE

            ```
        """
        if self.is_value():
            return other
        return self  # type: ignore[return-value]

    def and_then[U](self, mapper_fn: Callable[[T], Maybe[U]]) -> Maybe[U]:
        """
        Calls a function with the value if present, otherwise returns itself.
        Some languages call this operation flatmap.

        Args:
            mapper_fn: The function to call with the value; it must return a `Maybe`.

        Example:
            ```python
            >>> from pyomaybe import Value, NONE, Maybe
            >>> def sq(x: int) -> Maybe[int]:
            ...     return Value(x * x)
            >>> def nope(x: int) -> Maybe[int]:
            ...     return NONE
            >>> Value(2).and_then(sq).and_then(sq)
            Value(value=16)
            >>> Value(2).and_then(nope).and_then(sq)
            NONE
            >>> NONE.and_then(sq)
            NONE

            ```
        """
        if self.is_value():
            return mapper_fn(self.unwrap())
        return self  # type: ignore[return-value]

    def map[U](self, mapper_fn: Callable[[T], U]) -> Maybe[U]:
        """
        Maps a `Maybe[T]` to `Maybe[U]` by applying a function to the contained value,
        leaving a none untouched.

        Example:
            ```python
            >>> from pyomaybe import Value, NONE
            >>> Value("Hello, World!").map(len)
            Value(value=13)
            >>> NONE.map(len)
            NONE

            ```
        """
        if self.is_value():
            return Value(mapper_fn(self.unwrap()))
        return self  # type: ignore[return-value]

    def map_or[U](self, mapper_fn: Callable[[T], U], alt_value: U) -> Value[U]:
        """
        Maps the contained value, or uses `alt_value` when none.

        The result always holds a value.

        Example:
            ```python
            >>> from pyomaybe import Value, NONE
            >>> Value("foo").map_or(len, 42)
            Value(value=3)
            >>> NONE.map_or(len, 42)
            Value(value=42)

            ```
        """
        if self.is_value():
            return Value(mapper_fn(self.unwrap()))
        return Value(alt_value)

    def map_or_else[U](
        self, mapper_fn: Callable[[T], U], alt_value_fn: Callable[[], U]
    ) -> Value[U]:
        """
        Maps the contained value, or computes an alternative from a function when none.

        The result always holds a value.

        Example:
            ```python
            >>> from pyomaybe import Value, NONE
            >>> Value("foo").map_or_else(len, lambda: 21 * 2)
            Value(value=3)
            >>> NONE.map_or_else(len, lambda: 21 * 2)
            Value(value=42)

            ```
        """
        if self.is_value():
            return Value(mapper_fn(self.unwrap()))
        return Value(alt_value_fn())

    def filter(self, predicate_fn: Callable[[T], bool]) -> Maybe[T]:
        """
        Keeps the value only if the predicate returns `True`, otherwise returns `NONE`.

        Example:
            ```python
            >>> from pyomaybe import Value, NONE
            >>> def is_even(n: int) -> bool:
            ...     return n % 2 == 0
            >>> Value(4).filter(is_even)
            Value(value=4)
            >>> Value(3).filter(is_even)
            NONE
            >>> NONE.filter(is_even)
            NONE

            ```
        """
        if self.is_none():
            return self
        return self if predicate_fn(self.unwrap()) else NONE

    def to_result[E](self, error: E = _MISSING) -> Result[T, E]:
        """
        Converts to a `Result`, using `error` as the error value when none.

        Without `error`, the exception `unwrap` would raise is used.

        Example:
            ```python
            >>> from pyomaybe import Value, NONE, maybe
            >>> Value(1).to_result("missing")
            Okay(value=1)
            >>> NONE.to_result("missing")
            Error(error='missing')
            >>> maybe.not_found("user").to_result().unwrap_error()
            NotFoundError('NotFound: user')

            ```
        """
        from ._result import Error, Okay

        if self.is_value():
            return Okay(self.unwrap())
        if error is _MISSING:
            return Error(self.as_error())  # type: ignore[union-attr, return-value]
        return Error(error)


@dataclass(slots=True, frozen=True)
class Value[T](Maybe[T]):
    """Maybe variant holding a value.

    Wrapping another `Value` keeps only its content, so a `Value` never holds a `Value`.

    Example:
    ```python
    >>> from pyomaybe import Value
    >>> Value(Value(42))
    Value(value=42)

    ```
    """

    value: T

    def __post_init__(self) -> None:
        if isinstance(self.value, Value):
            object.__setattr__(self, "value", self.value.value)

    def __str__(self) -> str:
        return f"Value({to_string(self.value)})"

    def is_value(self) -> TypeIs[Value[T]]:  # type: ignore[misc]
        return True

    def is_none(self) -> TypeIs[NoneValue]:  # type: ignore[misc]
        return False

    def unwrap(self) -> T:
        return self.value


@dataclass(slots=True, frozen=True)
class NoneValue(Maybe[Any]):
    """Maybe variant representing the absence of a value."""

    def __repr__(self) -> str:
        return "NONE"

    def __str__(self) -> str:
        return "None"

    def is_value(self) -> TypeIs[Value[Any]]:  # type: ignore[misc]
        return False

    def is_none(self) -> TypeIs[NoneValue]:  # type: ignore[misc]
        return True

    def as_error(self) -> NoneError:
        """The exception `unwrap` raises for this variant."""
        return NoneError()

    def unwrap(self) -> Never:
        raise self.as_error()


@dataclass(slots=True, frozen=True)
class NotFound(NoneValue):
    """A none that records what was being looked for.

    Example:
    ```python
    >>> from pyomaybe import NotFound
    >>> NotFound(("user", "42"))
    NotFound(what=('user', '42'))

    ```
    """

    what: tuple[str, ...]

    def __post_init__(self) -> None:
        object.__setattr__(self, "what", tuple(self.what))

    def __repr__(self) -> str:
        return f"NotFound(what={self.what!r})"

    def as_error(self) -> NotFoundError:
        return NotFoundError(*self.what)


NONE: NoneValue = NoneValue()
"""Singleton instance representing the absence of a value."""

EMPTY: Value[None] = Value(None)
"""Singleton instance of a present maybe that carries no meaningful payload."""
