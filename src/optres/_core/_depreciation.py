import warnings
from collections.abc import Callable
from functools import wraps


def deprecated[**P, R](use_instead: str):
    """Mark a function as superseded by `use_instead`.

    Each call emits a `DeprecationWarning` pointing at the caller.
    """

    def decorator(func: Callable[P, R]) -> Callable[P, R]:
        msg = f"`{func.__name__}` is deprecated, use `{use_instead}` instead."

        @wraps(func)
        def wrapper(*args: P.args, **kwargs: P.kwargs) -> R:
            warnings.warn(msg, DeprecationWarning, stacklevel=2)
            return func(*args, **kwargs)

        return wrapper

    return decorator
