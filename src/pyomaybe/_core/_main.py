from __future__ import annotations

from abc import abstractmethod
from collections.abc import Callable, Iterable, Iterator
from typing import Any, Concatenate, Self


class PayloadIterable:
    """Iterate over the payload when it is present and itself iterable, otherwise yield nothing.

    Subclasses tell whether a payload is present and how to get it.
    """

    __slots__ = ()

    @abstractmethod
    def _has_payload(self) -> bool: ...

    @abstractmethod
    def unwrap(self) -> Any: ...

    def __iter__(self) -> Iterator[Any]:
        if self._has_payload():
            inner = self.unwrap()
            if isinstance(inner, Iterable):
                return iter(inner)
        return iter(())


class Pipeable:
    __slots__ = ()

    def into[**P, R](
        self,
        func: Callable[Concatenate[Self, P], R],
        *args: P.args,
        **kwargs: P.kwargs,
    ) -> R:
        """Convert `Self` to `R`.

        This method allows to pipe the instance into an object or function that can convert `Self` into another type.

        Conceptually, this allow to do x.into(f) instead of f(x), hence keeping a functional chaining style.

        Args:
            func (Callable[Concatenate[Self, P], R]): Function for conversion.
            *args (P.args): Positional arguments to pass to the function.
            **kwargs (P.kwargs): Keyword arguments to pass to the function.

        Returns:
            R: The converted value.

        Example:
        ```python
        >>> import pyomaybe as pm
        >>> def describe(m: pm.Maybe[int]) -> str:
        ...     match m:
        ...         case pm.Value(v):
        ...             return f"got {v}"
        ...         case _:
        ...             return "nothing"
        >>>
        >>> pm.Value(3).into(describe)
        'got 3'
        >>> pm.NONE.into(describe)
        'nothing'

        ```
        """
        return func(self, *args, **kwargs)

    def inspect[**P](
        self,
        func: Callable[Concatenate[Self, P], object],
        *args: P.args,
        **kwargs: P.kwargs,
    ) -> Self:
        """Pass the instance to a function to perform side effects without altering the data.

        Args:
            func (Callable[Concatenate[Self, P], object]): Function to apply to the instance for side effects.
            *args (P.args): Positional arguments to pass to the function.
            **kwargs (P.kwargs): Keyword arguments to pass to the function.

        Returns:
            Self: The instance itself for chaining.

        Example:
        ```python
        >>> import pyomaybe as pm
        >>> pm.Okay(4).inspect(print).map(lambda x: x * 2)
        Okay(4)
        Okay(value=8)

        ```
        """
        func(self, *args, **kwargs)
        return self
