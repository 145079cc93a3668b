"""Factories and batch combinators for `Maybe`.

Meant to be used as a namespace:

```python
>>> from pyomaybe import maybe
>>> maybe.all_or_none(maybe.with_value(1), maybe.wrap(2))
Value(value=[1, 2])

```
"""

from __future__ import annotations

from typing import Any, TypeIs

import more_itertools as mit

from ._results import EMPTY, NONE, Maybe, NoneValue, NotFound, Value

__all__ = [
    "all_or_none",
    "all_values",
    "any",
    "as_none",
    "empty",
    "is_maybe",
    "not_found",
    "unwrap",
    "unwrap_or_none",
    "with_value",
    "wrap",
]


def with_value[T](value: T) -> Value[T]:
    """Create a `Maybe` holding `value`."""
    return Value(value)


def not_found(*what: str) -> NotFound:
    """
    Create a none recording what was not found.

    Example:
    ```python
    >>> from pyomaybe import maybe
    >>> maybe.not_found("user", "42").unwrap()
    Traceback (most recent call last):
        ...
    pyomaybe._results._errors.NotFoundError: NotFound: user 42

    ```
    """
    return NotFound(what)


def as_none() -> NoneValue:
    """Return the `NONE` singleton."""
    return NONE


def empty() -> Value[None]:
    """Return the `EMPTY` singleton, a present maybe with no meaningful payload."""
    return EMPTY


def wrap[T](value: T | None) -> Maybe[T]:
    """
    Wrap a value that may be `None`.

    Example:
    ```python
    >>> from pyomaybe import maybe
    >>> maybe.wrap(3)
    Value(value=3)
    >>> maybe.wrap(None)
    NONE

    ```
    """
    return NONE if value is None else Value(value)


def unwrap[T](m: Maybe[T]) -> T:
    """Same as `m.unwrap()`, reads better on awaited calls: `maybe.unwrap(await repo.get(id))`."""
    return m.unwrap()


def unwrap_or_none[T](m: Maybe[T]) -> T | None:
    """Same as `m.unwrap_or_none()`."""
    return m.unwrap_or_none()


def all_or_none(*maybes: Maybe[Any]) -> Maybe[list[Any]]:
    """
    Collect every value, or return the first none as-is.

    The inputs are checked in order and the scan stops at the first none,
    so a `NotFound` keeps its labels.

    Example:
    ```python
    >>> from pyomaybe import maybe, NONE
    >>> maybe.all_or_none(maybe.with_value(1), maybe.empty())
    Value(value=[1, None])
    >>> maybe.all_or_none(maybe.with_value(1), maybe.not_found("id"), NONE)
    NotFound(what=('id',))

    ```
    """
    values: list[Any] = []
    for m in maybes:
        if m.is_none():
            return m
        values.append(m.unwrap())
    return Value(values)


def all_values[T](*maybes: Maybe[T]) -> list[T]:
    """
    Return the values of every present maybe, in order, dropping nones.

    Example:
    ```python
    >>> from pyomaybe import maybe, NONE
    >>> maybe.all_values(maybe.with_value(1), NONE, maybe.with_value(3))
    [1, 3]

    ```
    """
    return [m.unwrap() for m in maybes if m.is_value()]


def any[T](*maybes: Maybe[T]) -> Maybe[T]:  # noqa: A001
    """
    Return the first present maybe, or `NONE` when there is none.

    Example:
    ```python
    >>> from pyomaybe import maybe, NONE
    >>> maybe.any(NONE, maybe.with_value(3), maybe.with_value(4))
    Value(value=3)
    >>> maybe.any(NONE, maybe.not_found("id"))
    NONE

    ```
    """
    return mit.first_true(maybes, default=NONE, pred=lambda m: m.is_value())


def is_maybe(value: object) -> TypeIs[Maybe[Any]]:
    """
    Return `True` only for genuine `Maybe` instances.

    Example:
    ```python
    >>> from pyomaybe import maybe
    >>> maybe.is_maybe(maybe.with_value(1))
    True
    >>> class Lookalike:
    ...     def is_value(self) -> bool:
    ...         return True
    >>> maybe.is_maybe(Lookalike())
    False

    ```
    """
    return isinstance(value, Value | NoneValue)
