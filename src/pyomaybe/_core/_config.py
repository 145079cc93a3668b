from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass, replace

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class EnvSettings(BaseSettings):
    """Defaults read from the `PYOMAYBE_*` environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="PYOMAYBE_",
        env_ignore_empty=True,
        extra="ignore",
    )

    capture_stack: bool = True
    stack_limit: int | None = Field(default=None, ge=0)


@dataclass(slots=True, frozen=True)
class Config:
    """Process-wide settings for diagnostics and rendering.

    Args:
        capture_stack (bool): Whether `Error` records the call stack at construction.
        stack_limit (int | None): Keep only the innermost frames of a captured stack, `0` keeps none.
        repr_max_items (int): Maximum mapping items rendered by `to_string`.
        repr_depth (int): Maximum nesting depth rendered by `to_string`.
        repr_width (int): Line width used by `to_string`.
    """

    capture_stack: bool = True
    stack_limit: int | None = None
    repr_max_items: int = 20
    repr_depth: int = 3
    repr_width: int = 80

    def __post_init__(self) -> None:
        if self.stack_limit is not None and self.stack_limit < 0:
            msg = f"stack_limit must be >= 0, got {self.stack_limit}"
            raise ValueError(msg)

    @classmethod
    def from_env(cls) -> Config:
        """Build a configuration from the `PYOMAYBE_*` environment variables.

        Raises:
            pydantic.ValidationError: If a variable cannot be parsed or is out of range.
        """
        env = EnvSettings()
        return cls(capture_stack=env.capture_stack, stack_limit=env.stack_limit)


_CONFIG = Config.from_env()


def get_config() -> Config:
    """Return the active configuration.

    Example:
    ```python
    >>> from pyomaybe import get_config
    >>> get_config().repr_max_items
    20

    ```
    """
    return _CONFIG


def set_config(**changes: object) -> Config:
    """Replace fields of the active configuration and return the previous one.

    Instances built before the change keep whatever they captured.
    """
    global _CONFIG  # noqa: PLW0603
    previous = _CONFIG
    _CONFIG = replace(_CONFIG, **changes)  # type: ignore[arg-type]
    return previous


@contextmanager
def config_context(**changes: object) -> Iterator[Config]:
    """Temporarily override configuration fields.

    Example:
    ```python
    >>> from pyomaybe import config_context, get_config
    >>> with config_context(capture_stack=False):
    ...     get_config().capture_stack
    False

    ```
    """
    global _CONFIG  # noqa: PLW0603
    previous = set_config(**changes)
    try:
        yield _CONFIG
    finally:
        _CONFIG = previous
