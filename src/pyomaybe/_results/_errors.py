from __future__ import annotations

from typing import Final, Literal


class NoneError(RuntimeError):
    """Raised when unwrapping a `Maybe` that holds no value."""

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message if message is not None else "Maybe is none")


class NotFoundError(NoneError):
    """Raised when unwrapping a `NotFound`.

    Carries the conventional HTTP status fields so web handlers can surface it without re-mapping.

    Example:
    ```python
    >>> from pyomaybe import NotFoundError
    >>> err = NotFoundError("user", "42")
    >>> str(err), err.status, err.status_code, err.what
    ('NotFound: user 42', 404, 404, ('user', '42'))

    ```
    """

    status: Final[Literal[404]] = 404
    status_code: Final[Literal[404]] = 404

    def __init__(self, *what: str) -> None:
        self.what = what
        super().__init__("NotFound: " + " ".join(what))


class ResultUnwrapError(RuntimeError):
    """Raised when unwrapping the wrong side of a `Result`.

    When an `Error` holds a value that cannot be raised itself, it is available as `error`.
    """

    def __init__(self, message: str, error: object = None) -> None:
        super().__init__(message)
        self.error = error


class ExpectationError(AssertionError):
    """Raised by the `expect_*` and `assert_is_*` helpers when the variant does not match."""
