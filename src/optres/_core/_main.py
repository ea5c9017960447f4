from __future__ import annotations

from collections.abc import Callable
from typing import Concatenate, Self


class Pipeable:
    __slots__ = ()

    def into[**P, R](
        self,
        func: Callable[Concatenate[Self, P], R],
        *args: P.args,
        **kwargs: P.kwargs,
    ) -> R:
        """Convert `Self` to `R`.

        Conceptually, this allow to do x.into(f) instead of f(x), hence keeping a functional chaining style.

        Args:
            func (Callable[Concatenate[Self, P], R]): Function for conversion.
            *args (P.args): Positional arguments to pass to the function.
            **kwargs (P.kwargs): Keyword arguments to pass to the function.

        Returns:
            R: The converted value.

        Example:
        ```python
        >>> import optres as opr
        >>> def describe(opt: opr.Option[int], unit: str) -> str:
        ...     return opt.match(some=lambda v: f"{v} {unit}", none="unknown")
        >>> opr.Some(3).into(describe, "apples")
        '3 apples'
        >>> opr.NONE.into(describe, "apples")
        'unknown'

        ```
        """
        return func(self, *args, **kwargs)
