from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable
from dataclasses import dataclass
from enum import StrEnum
from typing import Any, Never, TypeIs

from .._core import Pipeable, deprecated


class OptionUnwrapError(RuntimeError):
    """Raised when a value is requested from `NONE`; `ReferenceError` is left to weakrefs."""


class OptionType(StrEnum):
    """Runtime tag of an `Option` variant, exposed as `Option.type`."""

    SOME = ":some"
    NONE = ":none"


class Option[T](ABC, Pipeable):
    """A value of type `T`, or nothing.

    An `Option` is either a `Some` holding exactly one value, or `NONE`.

    Python's own `None` is never a valid payload: use `Option.from_nullable` to turn a nullable value into an `Option`.
    """

    __slots__ = ()

    @property
    @abstractmethod
    def type(self) -> OptionType:
        """The tag of the variant, either `OptionType.SOME` or `OptionType.NONE`.

        Example:
        ```python
        >>> from optres import Some, NONE, OptionType
        >>> Some(1).type is OptionType.SOME
        True
        >>> NONE.type is OptionType.NONE
        True

        ```
        """
        ...

    @abstractmethod
    def is_some(self) -> TypeIs[Some[T]]:  # type: ignore[misc]
        """
        Returns `True` if the option is a `Some` value.

        Example:
        ```python
        >>> from optres import Some, NONE, Option
        >>> x: Option[int] = Some(2)
        >>> x.is_some()
        True
        >>> y: Option[int] = NONE
        >>> y.is_some()
        False

        ```
        """
        ...

    @abstractmethod
    def is_none(self) -> TypeIs[NoneOption]:  # type: ignore[misc]
        """
        Returns `True` if the option is a `None` value.

        Example:
        ```python
        >>> from optres import Some, NONE, Option
        >>> x: Option[int] = Some(2)
        >>> x.is_none()
        False
        >>> y: Option[int] = NONE
        >>> y.is_none()
        True

        ```
        """
        ...

    @abstractmethod
    def unwrap(self) -> T:
        """
        Returns the contained `Some` value.

        Raises:
            OptionUnwrapError: If the option is `None`.

        Example:
        ```python
        >>> from optres import Some, NONE
        >>> Some("car").unwrap()
        'car'
        >>> NONE.unwrap()
        Traceback (most recent call last):
            ...
        optres._results._option.OptionUnwrapError: Trying to unwrap None.

        ```
        """
        ...

    @staticmethod
    def from_nullable[V](value: V | None) -> Option[V]:
        """
        Builds an `Option` from a value that may be Python's `None`.

        Args:
            value: The value to wrap.

        Returns:
            `NONE` if `value` is `None`, otherwise `Some(value)`.

        Example:
        ```python
        >>> from optres import Option
        >>> Option.from_nullable({"a": 1}.get("a"))
        Some(value=1)
        >>> Option.from_nullable({"a": 1}.get("b"))
        NONE

        ```
        """
        if value is None:
            return NONE
        return Some(value)

    def match[U](self, *, some: Callable[[T], U], none: Callable[[], U] | U) -> U:
        """
        Branches on the variant and returns the result of the matching arm.

        On `Some`, `some` is called with the contained value.
        On `None`, `none` is called without arguments if it is callable, otherwise it is returned as is.

        Args:
            some: The function to call with the `Some` value.
            none: A zero-argument function, or a plain value, for the `None` case.

        Returns:
            The output of the arm that matched.

        Example:
        ```python
        >>> from optres import Some, NONE
        >>> Some(5).match(some=lambda v: f"The value is {v}.", none="There is no value.")
        'The value is 5.'
        >>> NONE.match(some=lambda v: f"The value is {v}.", none="There is no value.")
        'There is no value.'
        >>> NONE.match(some=lambda v: v, none=lambda: 0)
        0

        ```
        """
        if self.is_some():
            return some(self.unwrap())
        if callable(none):
            return none()
        return none

    def inspect(self, f: Callable[[T], object]) -> Option[T]:
        """
        Calls `f` with the contained value if `Some`, then returns the option itself.

        Example:
        ```python
        >>> from optres import Some, NONE
        >>> Some("hello").inspect(print)
        hello
        Some(value='hello')
        >>> NONE.inspect(print)
        NONE

        ```
        """
        if self.is_some():
            f(self.unwrap())
        return self

    def map[U](self, f: Callable[[T], U]) -> Option[U]:
        """
        Maps an `Option[T]` to `Option[U]` by applying a function to a contained `Some` value,
        leaving a `None` value untouched.

        `f` must not return `None`: the new `Some` would refuse it.

        Args:
            f: The function to apply to the `Some` value.

        Returns:
            A new `Option` with the mapped value if `Some`, otherwise `None`.

        Example:
        ```python
        >>> from optres import Some, NONE
        >>> Some("Hello, World!").map(len)
        Some(value=13)
        >>> NONE.map(len)
        NONE

        ```
        """
        if self.is_some():
            return Some(f(self.unwrap()))
        return NONE

    def and_then[U](self, f: Callable[[T], Option[U]]) -> Option[U]:
        """
        Calls a function if the option is `Some`, otherwise returns `None`.
        Some languages call this operation flatmap.

        Args:
            f: The function to call with the `Some` value.

        Returns:
            The result of the function if `Some`, otherwise `None`.

        Example:
        ```python
        >>> from optres import Some, NONE, Option
        >>> def parse(s: str) -> Option[int]:
        ...     return Some(int(s)) if s.isdigit() else NONE
        >>> Some("123").and_then(parse)
        Some(value=123)
        >>> Some("abc").and_then(parse)
        NONE
        >>> NONE.and_then(parse)
        NONE

        ```
        """
        if self.is_some():
            return f(self.unwrap())
        return NONE

    def or_(self, optb: Option[T]) -> Option[T]:
        """
        Returns the option if it contains a value, otherwise returns `optb`.

        Example:
        ```python
        >>> from optres import Some, NONE
        >>> Some("some").or_(Some("default"))
        Some(value='some')
        >>> NONE.or_(Some("default"))
        Some(value='default')

        ```
        """
        return self if self.is_some() else optb

    def or_else(self, f: Callable[[], Option[T]]) -> Option[T]:
        """
        Returns the option if it contains a value, otherwise calls `f` and returns the result.

        Example:
        ```python
        >>> from optres import Some, NONE
        >>> Some("barbarians").or_else(lambda: Some("vikings"))
        Some(value='barbarians')
        >>> NONE.or_else(lambda: Some("vikings"))
        Some(value='vikings')

        ```
        """
        return self if self.is_some() else f()

    def and_[U](self, optb: Option[U]) -> Option[U]:
        """
        Returns `optb` if the option is `Some`, otherwise returns `None`.

        Example:
        ```python
        >>> from optres import Some, NONE
        >>> Some("some").and_(Some("another"))
        Some(value='another')
        >>> Some("some").and_(NONE)
        NONE
        >>> NONE.and_(Some("another"))
        NONE

        ```
        """
        return optb if self.is_some() else NONE

    def unwrap_or(self, default: T) -> T:
        """
        Returns the contained `Some` value or a provided default.

        Example:
        ```python
        >>> from optres import Some, NONE
        >>> Some("car").unwrap_or("bike")
        'car'
        >>> NONE.unwrap_or("bike")
        'bike'

        ```
        """
        return self.unwrap() if self.is_some() else default

    def unwrap_or_else(self, f: Callable[[], T]) -> T:
        """
        Returns the contained `Some` value or computes it from a function.

        Example:
        ```python
        >>> from optres import Some, NONE
        >>> k = 10
        >>> Some(4).unwrap_or_else(lambda: 2 * k)
        4
        >>> NONE.unwrap_or_else(lambda: 2 * k)
        20

        ```
        """
        return self.unwrap() if self.is_some() else f()

    def expect(self, msg: str) -> T:
        """
        Returns the contained `Some` value.
        Raises an exception with a provided message if the value is `None`.

        Raises:
            OptionUnwrapError: If the option is `None`.

        Example:
        ```python
        >>> from optres import Some, NONE
        >>> Some("value").expect("fruits are healthy")
        'value'
        >>> NONE.expect("fruits are healthy")
        Traceback (most recent call last):
            ...
        optres._results._option.OptionUnwrapError: fruits are healthy

        ```
        """
        if self.is_some():
            return self.unwrap()
        raise OptionUnwrapError(msg)


@dataclass(slots=True, frozen=True)
class Some[T](Option[T]):
    """Option variant representing the presence of a value.

    Args:
        value (T): The contained value, anything but `None`.

    Example:
    ```python
    >>> from optres import Some
    >>> Some(42)
    Some(value=42)
    >>> Some(None)
    Traceback (most recent call last):
        ...
    TypeError: Some cannot hold None, use NONE instead.

    ```
    """

    value: T

    def __post_init__(self) -> None:
        if self.value is None:
            raise TypeError("Some cannot hold None, use NONE instead.")

    @property
    def type(self) -> OptionType:
        return OptionType.SOME

    def is_some(self) -> TypeIs[Some[T]]:  # type: ignore[misc]
        return True

    def is_none(self) -> TypeIs[NoneOption]:  # type: ignore[misc]
        return False

    def unwrap(self) -> T:
        return self.value


@dataclass(slots=True, frozen=True)
class NoneOption(Option[Any]):
    """Option variant representing the absence of a value."""

    def __repr__(self) -> str:
        return "NONE"

    @property
    def type(self) -> OptionType:
        return OptionType.NONE

    def is_some(self) -> TypeIs[Some[Any]]:  # type: ignore[misc]
        return False

    def is_none(self) -> TypeIs[NoneOption]:  # type: ignore[misc]
        return True

    def unwrap(self) -> Never:
        raise OptionUnwrapError("Trying to unwrap None.")


NONE: Option[Any] = NoneOption()
"""Singleton instance representing the absence of a value."""


@deprecated("Option.is_some")
def is_some[T](opt: Option[T]) -> TypeIs[Some[T]]:
    """Returns `True` if `opt` is a `Some` value."""
    return opt.is_some()


@deprecated("Option.is_none")
def is_none(opt: Option[Any]) -> TypeIs[NoneOption]:
    """Returns `True` if `opt` is the `None` value."""
    return opt.is_none()
