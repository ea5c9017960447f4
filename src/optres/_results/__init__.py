from ._option import (
    NONE,
    NoneOption,
    Option,
    OptionType,
    OptionUnwrapError,
    Some,
    is_none,
    is_some,
)
from ._result import Err, Ok, Result, ResultType, ResultUnwrapError, is_err, is_ok

__all__ = [
    "NONE",
    "Err",
    "NoneOption",
    "Ok",
    "Option",
    "OptionType",
    "OptionUnwrapError",
    "Result",
    "ResultType",
    "ResultUnwrapError",
    "Some",
    "is_err",
    "is_none",
    "is_ok",
    "is_some",
]
