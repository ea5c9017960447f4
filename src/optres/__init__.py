from ._results import (
    NONE,
    Err,
    NoneOption,
    Ok,
    Option,
    OptionType,
    OptionUnwrapError,
    Result,
    ResultType,
    ResultUnwrapError,
    Some,
    is_err,
    is_none,
    is_ok,
    is_some,
)

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
