"""Optional values and explicit results for Python."""

import logging

from . import maybe, result
from ._core import Config, Pipeable, config_context, get_config, set_config
from ._results import (
    EMPTY,
    NONE,
    OKAY_VOID,
    Error,
    ExpectationError,
    Maybe,
    NoneError,
    NoneValue,
    NotFound,
    NotFoundError,
    Okay,
    Result,
    ResultUnwrapError,
    Value,
)
from .maybe import is_maybe
from .result import is_result

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "EMPTY",
    "NONE",
    "OKAY_VOID",
    "Config",
    "Error",
    "ExpectationError",
    "Maybe",
    "NoneError",
    "NoneValue",
    "NotFound",
    "NotFoundError",
    "Okay",
    "Pipeable",
    "Result",
    "ResultUnwrapError",
    "Value",
    "config_context",
    "get_config",
    "is_maybe",
    "is_result",
    "maybe",
    "result",
    "set_config",
]
