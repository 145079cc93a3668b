from ._errors import ExpectationError, NoneError, NotFoundError, ResultUnwrapError
from ._maybe import EMPTY, NONE, Maybe, NoneValue, NotFound, Value
from ._result import OKAY_VOID, Error, Okay, Result

__all__ = [
    "EMPTY",
    "NONE",
    "OKAY_VOID",
    "Error",
    "ExpectationError",
    "Maybe",
    "NoneError",
    "NoneValue",
    "NotFound",
    "NotFoundError",
    "Okay",
    "Result",
    "ResultUnwrapError",
    "Value",
]
