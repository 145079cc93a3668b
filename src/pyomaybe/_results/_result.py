from __future__ import annotations

import os
import sys
import traceback
from abc import ABC, abstractmethod
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any, Never, TypeIs, cast

import cytoolz as cz
import more_itertools as mit

from .._core import PayloadIterable, Pipeable, get_config, to_string
from ._errors import ExpectationError, ResultUnwrapError
from ._maybe import NONE, Maybe, Value

_PACKAGE_ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__))) + os.sep


def _is_internal(frame: traceback.FrameSummary) -> bool:
    return os.path.abspath(frame.filename).startswith(_PACKAGE_ROOT)


def _capture_stack() -> str:
    """Render the stack of whoever built the `Error`.

    Frames 0 to 2 are this function, `__post_init__` and the dataclass `__init__`.
    Trailing frames from this package (factories, `map_error`, `wrap`...) are dropped too.
    """
    cfg = get_config()
    if not cfg.capture_stack or cfg.stack_limit == 0:
        return ""
    frames = list(mit.rstrip(traceback.extract_stack(sys._getframe(3)), _is_internal))  # noqa: SLF001
    if cfg.stack_limit is not None:
        frames = list(cz.itertoolz.tail(cfg.stack_limit, frames))
    return "".join(traceback.format_list(frames)).rstrip("\n")


class Result[T, E](PayloadIterable, Pipeable, ABC):
    __slots__ = ()

    @abstractmethod
    def is_okay(self) -> TypeIs[Okay[T, E]]:  # type: ignore[misc]
        """
        Returns `True` if the result is `Okay`.

        Example:
            ```python
            >>> from pyomaybe import Okay, Error
            >>> Okay(2).is_okay()
            True
            >>> Error("boom").is_okay()
            False

            ```
        """
        ...

    @abstractmethod
    def is_error(self) -> TypeIs[Error[T, E]]:  # type: ignore[misc]
        """Returns `True` if the result is `Error`."""
        ...

    @abstractmethod
    def unwrap(self) -> T:
        """
        Returns the contained `Okay` value.

        When `Error`, the error value is raised if it is an exception,
        otherwise it is carried by a `ResultUnwrapError`.

        Example:
            ```python
            >>> from pyomaybe import Okay, Error
            >>> Okay(2).unwrap()
            2
            >>> Error(ValueError("boom")).unwrap()
            Traceback (most recent call last):
                ...
            ValueError: boom
            >>> Error("boom").unwrap()
            Traceback (most recent call last):
                ...
            pyomaybe._results._errors.ResultUnwrapError: called `unwrap` on Error: boom

            ```
        """
        ...

    @abstractmethod
    def unwrap_error(self) -> E:
        """
        Returns the contained `Error` value, or raises `ResultUnwrapError` if the result is `Okay`.

        Example:
            ```python
            >>> from pyomaybe import Okay, Error
            >>> Error("boom").unwrap_error()
            'boom'
            >>> Okay(2).unwrap_error()
            Traceback (most recent call last):
                ...
            pyomaybe._results._errors.ResultUnwrapError: called `unwrap_error` on Okay: 2

            ```
        """
        ...

    def _has_payload(self) -> bool:
        return self.is_okay()

    def unwrap_or[U](self, alt_value: U) -> T | U:
        """
        Returns the contained `Okay` value or a provided alternative.

        Example:
            ```python
            >>> from pyomaybe import Okay, Error
            >>> Okay(9).unwrap_or(2)
            9
            >>> Error("boom").unwrap_or(2)
            2

            ```
        """
        return self.unwrap() if self.is_okay() else alt_value

    def unwrap_or_else[U](self, alt_value_fn: Callable[[E], U]) -> T | U:
        """
        Returns the contained `Okay` value or computes it from the error.

        The function is only called when the result is `Error`.

        Example:
            ```python
            >>> from pyomaybe import Okay, Error
            >>> Okay(2).unwrap_or_else(len)
            2
            >>> Error("foo").unwrap_or_else(len)
            3

            ```
        """
        return self.unwrap() if self.is_okay() else alt_value_fn(self.unwrap_error())

    def unwrap_or_none(self) -> T | None:
        """Returns the contained `Okay` value, or `None` instead of raising."""
        return self.unwrap() if self.is_okay() else None

    def unwrap_or_raise(
        self,
        alt_error: BaseException | str | Callable[[E], BaseException] | None = None,
    ) -> T:
        """
        Returns the contained `Okay` value, or raises a caller-chosen error.

        Args:
            alt_error: An exception to raise, a message for a `ResultUnwrapError`,
                or a function building the exception from the error value.
                When omitted, behaves like `unwrap`.

        Example:
            ```python
            >>> from pyomaybe import Okay, Error
            >>> Okay(1).unwrap_or_raise("failed")
            1
            >>> Error(404).unwrap_or_raise(lambda code: LookupError(f"status {code}"))
            Traceback (most recent call last):
                ...
            LookupError: status 404

            ```
        """
        if self.is_okay() or alt_error is None:
            return self.unwrap()
        match alt_error:
            case BaseException():
                raise alt_error
            case str():
                raise ResultUnwrapError(alt_error, self.unwrap_error())
            case _:
                raise alt_error(self.unwrap_error())

    @abstractmethod
    def assert_is_okay(self, message: str | None = None) -> T:
        """
        Asserts that the result is `Okay` and returns its value. Meant for tests.

        The raised message embeds the rendered `Error` and the stack captured when it was built.

        Raises:
            ExpectationError: If the result is `Error`.
        """
        ...

    @abstractmethod
    def assert_is_error(self, message: str | None = None) -> E:
        """
        Asserts that the result is `Error` and returns its error value. Meant for tests.

        Raises:
            ExpectationError: If the result is `Okay`.

        Example:
            ```python
            >>> from pyomaybe import Okay, Error
            >>> Error("boom").assert_is_error()
            'boom'
            >>> Okay(1).assert_is_error("should fail")
            Traceback (most recent call last):
                ...
            pyomaybe._results._errors.ExpectationError: should fail - Okay(1)

            ```
        """
        ...

    def or_[T2, E2](self, other: Result[T2, E2]) -> Result[T, E] | Result[T2, E2]:
        """
        Returns the result if it is `Okay`, otherwise returns `other`.

        Example:
            ```python
            >>> from pyomaybe import Okay, Error
            >>> Okay(2).or_(Error("late"))
            Okay(value=2)
            >>> Error("early").or_(Okay(2))
            Okay(value=2)

            ```
        """
        return self if self.is_okay() else other

    def or_else[T2, E2](
        self, other_fn: Callable[[E], Result[T2, E2]]
    ) -> Result[T, E] | Result[T2, E2]:
        """
        Returns the result if it is `Okay`, otherwise calls `other_fn` with the error.

        Example:
            ```python
            >>> from pyomaybe import Okay, Error
            >>> Error(3).or_else(lambda e: Okay(e * e))
            Okay(value=9)
            >>> Okay(2).or_else(lambda e: Okay(e * e))
            Okay(value=2)

            ```
        """
        return self if self.is_okay() else other_fn(self.unwrap_error())

    def and_[T2, E2](self, other: Result[T2, E2]) -> Result[T2, E] | Result[T2, E2]:
        """
        Returns `other` if the result is `Okay`, otherwise returns itself.

        Example:
            ```python
            >>> from pyomaybe import Okay, Error
            >>> Okay(2).and_(Okay("foo"))
            Okay(value='foo')
            >>> Error("early").and_(Okay("foo"))
            Error(error='early')

            ```
        """
        if self.is_okay():
            return other
        return cast(Result[T2, E], self)

    def and_then[T2, E2](
        self, mapper_fn: Callable[[T], Result[T2, E2]]
    ) -> Result[T2, E] | Result[T2, E2]:
        """
        Calls `mapper_fn` with the `Okay` value, otherwise returns the `Error` as-is.

        Example:
            ```python
            >>> from pyomaybe import Okay, Error, Result
            >>> def half(x: int) -> Result[int, str]:
            ...     return Okay(x // 2) if x % 2 == 0 else Error(f"{x} is odd")
            >>> Okay(8).and_then(half).and_then(half)
            Okay(value=2)
            >>> Okay(6).and_then(half).and_then(half)
            Error(error='3 is odd')

            ```
        """
        if self.is_okay():
            return mapper_fn(self.unwrap())
        return cast(Result[T2, E], self)

    def map[U](self, mapper_fn: Callable[[T], U]) -> Result[U, E]:
        """
        Maps a `Result[T, E]` to `Result[U, E]` by applying a function to the `Okay` value,
        leaving an `Error` untouched.

        Example:
            ```python
            >>> from pyomaybe import Okay, Error
            >>> Okay("foo").map(len)
            Okay(value=3)
            >>> Error("boom").map(len)
            Error(error='boom')

            ```
        """
        if self.is_okay():
            return Okay(mapper_fn(self.unwrap()))
        return cast(Result[U, E], self)

    def map_or[U](self, mapper_fn: Callable[[T], U], alt_value: U) -> Okay[U, E]:
        """
        Maps the `Okay` value, or uses `alt_value` when `Error`. The result is always `Okay`.

        Example:
            ```python
            >>> from pyomaybe import Okay, Error
            >>> Okay("foo").map_or(len, 42)
            Okay(value=3)
            >>> Error("boom").map_or(len, 42)
            Okay(value=42)

            ```
        """
        if self.is_okay():
            return Okay(mapper_fn(self.unwrap()))
        return Okay(alt_value)

    def map_or_else[U](
        self, mapper_fn: Callable[[T], U], alt_value_fn: Callable[[E], U]
    ) -> Okay[U, E]:
        """
        Maps the `Okay` value, or maps the error with `alt_value_fn`. The result is always `Okay`.

        Example:
            ```python
            >>> from pyomaybe import Okay, Error
            >>> Okay("foo").map_or_else(len, lambda e: -1)
            Okay(value=3)
            >>> Error("boom").map_or_else(len, lambda e: f"recovered from {e}")
            Okay(value='recovered from boom')

            ```
        """
        if self.is_okay():
            return Okay(mapper_fn(self.unwrap()))
        return Okay(alt_value_fn(self.unwrap_error()))

    def map_error[F](self, mapper_fn: Callable[[E], F]) -> Result[T, F]:
        """
        Maps a `Result[T, E]` to `Result[T, F]` by applying a function to the `Error` value,
        leaving an `Okay` untouched.

        Example:
            ```python
            >>> from pyomaybe import Okay, Error
            >>> Error(404).map_error(lambda code: f"status {code}")
            Error(error='status 404')
            >>> Okay(1).map_error(str)
            Okay(value=1)

            ```
        """
        if self.is_error():
            return Error(mapper_fn(self.unwrap_error()))
        return cast(Result[T, F], self)

    def to_maybe(self) -> Maybe[T]:
        """
        Converts to a `Maybe`, discarding the error.

        Example:
            ```python
            >>> from pyomaybe import Okay, Error
            >>> Okay(2).to_maybe()
            Value(value=2)
            >>> Error("boom").to_maybe()
            NONE

            ```
        """
        if self.is_okay():
            return Value(self.unwrap())
        return NONE


@dataclass(slots=True, frozen=True)
class Okay[T, E](Result[T, E]):
    """Result variant holding a success value.

    Wrapping another `Okay` or `Error` keeps only its content.

    Example:
    ```python
    >>> from pyomaybe import Okay, Error
    >>> Okay(Okay(1))
    Okay(value=1)
    >>> Okay(Error("boom"))
    Okay(value='boom')

    ```
    """

    value: T

    def __post_init__(self) -> None:
        match self.value:
            case Okay(inner):
                object.__setattr__(self, "value", inner)
            case Error(inner):
                object.__setattr__(self, "value", inner)

    def __str__(self) -> str:
        return f"Okay({to_string(self.value)})"

    def is_okay(self) -> TypeIs[Okay[T, E]]:  # type: ignore[misc]
        return True

    def is_error(self) -> TypeIs[Error[T, E]]:  # type: ignore[misc]
        return False

    def unwrap(self) -> T:
        return self.value

    def safe_unwrap(self) -> T:
        """Returns the value. Only `Okay` has this method, so type checkers flag it on a plain `Result`."""
        return self.value

    def unwrap_error(self) -> Never:
        raise ResultUnwrapError(
            f"called `unwrap_error` on Okay: {to_string(self.value)}"
        )

    def assert_is_okay(self, message: str | None = None) -> T:  # noqa: ARG002
        return self.value

    def assert_is_error(self, message: str | None = None) -> Never:
        raise ExpectationError(
            f"{'Expected Error' if message is None else message} - {self}"
        )


@dataclass(slots=True, frozen=True)
class Error[T, E](Result[T, E]):
    """Result variant holding an error value.

    The call stack is captured once, when the instance is built; see `stack`.

    Example:
    ```python
    >>> from pyomaybe import Error
    >>> Error(Error("boom")) == Error("boom")
    True
    >>> print(Error("boom").stack.splitlines()[0])
    Error(boom)

    ```
    """

    error: E
    _stack: str = field(default="", init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        match self.error:
            case Okay(inner):
                object.__setattr__(self, "error", inner)
            case Error(inner):
                object.__setattr__(self, "error", inner)
        object.__setattr__(self, "_stack", _capture_stack())

    def __str__(self) -> str:
        return f"Error({to_string(self.error)})"

    @property
    def stack(self) -> str:
        """The rendered error followed by the frames captured at construction."""
        return f"{self}\n{self._stack}"

    def is_okay(self) -> TypeIs[Okay[T, E]]:  # type: ignore[misc]
        return False

    def is_error(self) -> TypeIs[Error[T, E]]:  # type: ignore[misc]
        return True

    def unwrap(self) -> Never:
        if isinstance(self.error, BaseException):
            raise self.error
        raise ResultUnwrapError(
            f"called `unwrap` on Error: {to_string(self.error)}", self.error
        )

    def unwrap_error(self) -> E:
        return self.error

    def assert_is_okay(self, message: str | None = None) -> Never:
        cause = self.error if isinstance(self.error, BaseException) else None
        raise ExpectationError(
            f"{'Expected Okay' if message is None else message} - {self.stack}"
        ) from cause

    def assert_is_error(self, message: str | None = None) -> E:  # noqa: ARG002
        return self.error


OKAY_VOID: Okay[None, Any] = Okay(None)
"""Singleton instance of a success that carries no value."""
