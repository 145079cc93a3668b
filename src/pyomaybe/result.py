"""Factories and batch combinators for `Result`.

Meant to be used as a namespace:

```python
>>> from pyomaybe import result
>>> result.all(result.okay(1), result.wrap(lambda: 2))
Okay(value=[1, 2])

```
"""

from __future__ import annotations

import logging
from collections.abc import Awaitable, Callable
from typing import Any, TypeIs

from ._core import to_string
from ._results import OKAY_VOID, Error, Okay, Result

__all__ = [
    "all",
    "any",
    "error",
    "is_result",
    "okay",
    "okay_void",
    "unwrap",
    "wrap",
    "wrap_async",
]

logger = logging.getLogger(__name__)


def okay[T](value: T) -> Okay[T, Any]:
    """Create a successful `Result`."""
    return Okay(value)


def okay_void() -> Okay[None, Any]:
    """Return the `OKAY_VOID` singleton, a success with no value."""
    return OKAY_VOID


def error[E](error: E) -> Error[Any, E]:
    """Create a failed `Result`. The call stack of the caller is captured."""
    return Error(error)


def unwrap[T](r: Result[T, Any]) -> T:
    """Same as `r.unwrap()`, reads better on awaited calls: `result.unwrap(await repo.create(x))`."""
    return r.unwrap()


def all(*results: Result[Any, Any]) -> Result[list[Any], Any]:  # noqa: A001
    """
    Collect every `Okay` value, or return the first `Error` as-is.

    Example:
    ```python
    >>> from pyomaybe import result
    >>> result.all(result.okay_void(), result.okay(2), result.okay("yes"))
    Okay(value=[None, 2, 'yes'])
    >>> result.all(result.okay(1), result.error("no"), result.error("never seen"))
    Error(error='no')

    ```
    """
    values: list[Any] = []
    for r in results:
        if r.is_error():
            return r
        values.append(r.unwrap())
    return Okay(values)


def any(*results: Result[Any, Any]) -> Result[Any, list[Any]]:  # noqa: A001
    """
    Return the first `Okay`, or an `Error` holding every error value in order.

    Example:
    ```python
    >>> from pyomaybe import result
    >>> result.any(result.error("no"), result.okay("yes"))
    Okay(value='yes')
    >>> result.any(result.error("false"), result.error("no"))
    Error(error=['false', 'no'])

    ```
    """
    errors: list[Any] = []
    for r in results:
        if r.is_okay():
            return r
        errors.append(r.unwrap_error())
    return Error(errors)


def wrap[T](op_fn: Callable[[], T]) -> Result[T, Exception]:
    """
    Call `op_fn` and capture its outcome.

    Exceptions are returned untouched inside an `Error`. Only `Exception` subclasses are captured,
    so interrupts and exits still propagate.

    Example:
    ```python
    >>> from pyomaybe import result
    >>> result.wrap(lambda: 42)
    Okay(value=42)
    >>> result.wrap(lambda: int("x")).map_error(type)
    Error(error=<class 'ValueError'>)

    ```
    """
    try:
        return Okay(op_fn())
    except Exception as exc:  # noqa: BLE001
        logger.debug("wrap captured %s", to_string(exc))
        return Error(exc)


async def wrap_async[T](op_fn: Callable[[], Awaitable[T]]) -> Result[T, Exception]:
    """
    Await the awaitable returned by `op_fn` and capture its outcome.

    An exception raised by `op_fn` itself, before any awaitable exists, is captured the same way as one raised
    while awaiting. Cancellation is not captured: `asyncio.CancelledError` propagates to the caller.

    Example:
    ```python
    >>> import asyncio
    >>> from pyomaybe import result
    >>> async def fetch() -> int:
    ...     return 7
    >>> asyncio.run(result.wrap_async(fetch))
    Okay(value=7)
    >>> def broken():
    ...     raise KeyError("id")
    >>> asyncio.run(result.wrap_async(broken))
    Error(error=KeyError('id'))

    ```
    """
    try:
        awaitable = op_fn()
    except Exception as exc:  # noqa: BLE001
        logger.debug("wrap_async captured %s before awaiting", to_string(exc))
        return Error(exc)
    try:
        return Okay(await awaitable)
    except Exception as exc:  # noqa: BLE001
        logger.debug("wrap_async captured %s", to_string(exc))
        return Error(exc)


def is_result(value: object) -> TypeIs[Result[Any, Any]]:
    """
    Return `True` only for genuine `Result` instances.

    Example:
    ```python
    >>> from pyomaybe import result, maybe
    >>> result.is_result(result.okay(1)), result.is_result(maybe.with_value(1))
    (True, False)

    ```
    """
    return isinstance(value, Okay | Error)
