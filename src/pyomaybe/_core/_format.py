from collections.abc import Mapping
from pprint import pformat
from typing import Any

from ._config import get_config


def dict_repr(
    v: Mapping[Any, Any],
    max_items: int = 20,
    depth: int = 3,
    width: int = 80,
    *,
    compact: bool = True,
) -> str:
    truncated = dict(list(v.items())[:max_items])
    suffix = "..." if len(v) > max_items else ""
    return pformat(truncated, depth=depth, width=width, compact=compact) + suffix


def to_string(value: object) -> str:
    """Render a payload for `__str__`, log records and assertion messages.

    Mappings and plain objects (those still using `object.__repr__`) go through `dict_repr`,
    so they show their content instead of a memory address.

    Example:
    ```python
    >>> from pyomaybe._core import to_string
    >>> to_string({"id": 2})
    "{'id': 2}"
    >>> to_string(ValueError("boom"))
    "ValueError('boom')"
    >>> class Point:
    ...     def __init__(self) -> None:
    ...         self.x = 1
    >>> to_string(Point())
    "Point({'x': 1})"

    ```
    """
    cfg = get_config()
    match value:
        case BaseException():
            return repr(value)
        case Mapping():
            return dict_repr(
                value, cfg.repr_max_items, cfg.repr_depth, cfg.repr_width
            )
        case _ if type(value).__repr__ is object.__repr__ and hasattr(
            value, "__dict__"
        ):
            inner = dict_repr(
                vars(value), cfg.repr_max_items, cfg.repr_depth, cfg.repr_width
            )
            return f"{type(value).__name__}({inner})"
        case _:
            return str(value)
