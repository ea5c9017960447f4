from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable
from dataclasses import dataclass
from enum import StrEnum
from typing import Never, TypeIs, cast

from .._core import Pipeable, deprecated
from ._option import NONE, Option


class ResultUnwrapError(RuntimeError): ...


class ResultType(StrEnum):
    """Runtime tag of a `Result` variant, exposed as `Result.type`."""

    OK = ":ok"
    ERR = ":err"


class Result[T, E](ABC, Pipeable):
    """Either a success value `Ok(T)` or a failure value `Err(E)`."""

    __slots__ = ()

    @property
    @abstractmethod
    def type(self) -> ResultType:
        """The tag of the variant, either `ResultType.OK` or `ResultType.ERR`."""
        ...

    @abstractmethod
    def is_ok(self) -> TypeIs[Ok[T, E]]:  # type: ignore[misc]
        """
        Returns True if the result is Ok.

        Equivalent to Rust's Result::is_ok().
        """
        ...

    @abstractmethod
    def is_err(self) -> TypeIs[Err[T, E]]:  # type: ignore[misc]
        """
        Returns True if the result is Err.

        Equivalent to Rust's Result::is_err().
        """
        ...

    @abstractmethod
    def unwrap(self) -> T:
        """
        Returns the contained Ok value, or raises ResultUnwrapError if the result is Err.

        The error message carries the stringified error value.

        Example:
        ```python
        >>> from optres import Ok, Err
        >>> Ok(2).unwrap()
        2
        >>> Err("emergency failure").unwrap()
        Traceback (most recent call last):
            ...
        optres._results._result.ResultUnwrapError: Tried to unwrap Err: emergency failure

        ```
        """
        ...

    @abstractmethod
    def unwrap_err(self) -> E:
        """
        Returns the contained Err value, or raises ResultUnwrapError if the result is Ok.

        The error message carries the stringified Ok value.

        Example:
        ```python
        >>> from optres import Ok, Err
        >>> Err("emergency failure").unwrap_err()
        'emergency failure'
        >>> Ok(2).unwrap_err()
        Traceback (most recent call last):
            ...
        optres._results._result.ResultUnwrapError: Tried to unwrap_err Ok: 2

        ```
        """
        ...

    def ok(self) -> Option[T]:
        """
        Converts the Result into an Option, mapping Ok(v) to Some(v) and Err(e) to None.

        An `Ok(None)` also becomes `None`, since `Some` cannot hold it.

        Example:
        ```python
        >>> from optres import Ok, Err
        >>> Ok(2).ok()
        Some(value=2)
        >>> Err("nothing here").ok()
        NONE

        ```
        """
        if self.is_ok():
            return Option.from_nullable(self.unwrap())
        return NONE

    def err(self) -> Option[E]:
        """
        Converts the Result into an Option, mapping Err(e) to Some(e) and Ok(v) to None.

        Example:
        ```python
        >>> from optres import Ok, Err
        >>> Ok(2).err()
        NONE
        >>> Err("nothing here").err()
        Some(value='nothing here')

        ```
        """
        if self.is_err():
            return Option.from_nullable(self.unwrap_err())
        return NONE

    def match[U](self, *, ok: Callable[[T], U], err: Callable[[E], U]) -> U:
        """
        Pattern matches on the result, calling ok if Ok, or err if Err.

        Unlike `Option.match`, both arms must be callables.

        Args:
            ok: Callable to handle the Ok value.
            err: Callable to handle the Err value.

        Returns:
            The result of the called function.

        Example:
        ```python
        >>> from optres import Ok, Err
        >>> Ok("success").match(ok=lambda v: f"Ok {v}", err=lambda e: f"Err {e}")
        'Ok success'
        >>> Err("error").match(ok=lambda v: f"Ok {v}", err=lambda e: f"Err {e}")
        'Err error'

        ```
        """
        if self.is_ok():
            return ok(self.unwrap())
        return err(self.unwrap_err())

    def map[U](self, f: Callable[[T], U]) -> Result[U, E]:
        """
        Maps a Result[T, E] to Result[U, E] by applying a function to a contained Ok value, leaving Err untouched.

        Example:
        ```python
        >>> from optres import Ok, Err
        >>> Ok("success").map(len)
        Ok(value=7)
        >>> Err("error").map(len)
        Err(error='error')

        ```
        """
        if self.is_ok():
            return Ok(f(self.unwrap()))
        return cast(Result[U, E], self)

    def map_err[F](self, f: Callable[[E], F]) -> Result[T, F]:
        """
        Maps a Result[T, E] to Result[T, F] by applying a function to a contained Err value, leaving Ok untouched.

        Example:
        ```python
        >>> from optres import Ok, Err
        >>> Ok(2).map_err(str.upper)
        Ok(value=2)
        >>> Err("error").map_err(str.upper)
        Err(error='ERROR')

        ```
        """
        if self.is_err():
            return Err(f(self.unwrap_err()))
        return cast(Result[T, F], self)

    def and_then[U](self, f: Callable[[T], Result[U, E]]) -> Result[U, E]:
        """
        Calls f if the result is Ok, otherwise returns Err.

        Example:
        ```python
        >>> from optres import Ok, Err, Result
        >>> def halve(x: int) -> Result[int, str]:
        ...     return Ok(x // 2) if x % 2 == 0 else Err(f"{x} is odd")
        >>> Ok(8).and_then(halve).and_then(halve)
        Ok(value=2)
        >>> Ok(6).and_then(halve).and_then(halve)
        Err(error='3 is odd')
        >>> Err("no input").and_then(halve)
        Err(error='no input')

        ```
        """
        if self.is_ok():
            return f(self.unwrap())
        return cast(Result[U, E], self)

    def or_else[F](self, f: Callable[[E], Result[T, F]]) -> Result[T, F]:
        """
        Calls f if the result is Err, otherwise returns Ok.

        Example:
        ```python
        >>> from optres import Ok, Err
        >>> Err("e").or_else(lambda e: Ok(f"recovered:{e}"))
        Ok(value='recovered:e')
        >>> Ok(1).or_else(lambda e: Ok(0))
        Ok(value=1)

        ```
        """
        if self.is_err():
            return f(self.unwrap_err())
        return cast(Result[T, F], self)

    def inspect(self, f: Callable[[T], object]) -> Result[T, E]:
        """
        Calls f with the contained Ok value, then returns the result itself.

        Equivalent to Rust's Result::inspect().
        """
        if self.is_ok():
            f(self.unwrap())
        return self

    def inspect_err(self, f: Callable[[E], object]) -> Result[T, E]:
        """
        Calls f with the contained Err value, then returns the result itself.

        Equivalent to Rust's Result::inspect_err().
        """
        if self.is_err():
            f(self.unwrap_err())
        return self

    def unwrap_or(self, default: T) -> T:
        """
        Returns the contained Ok value or a provided default.

        Equivalent to Rust's Result::unwrap_or().
        """
        return self.unwrap() if self.is_ok() else default

    def unwrap_or_else(self, f: Callable[[E], T]) -> T:
        """
        Returns the contained Ok value or computes it from a function if Err.

        Args:
            f: Callable that takes the Err value and returns a T.

        Returns:
            The contained Ok value or the result of f(error).

        Equivalent to Rust's Result::unwrap_or_else().
        """
        return self.unwrap() if self.is_ok() else f(self.unwrap_err())

    def expect(self, msg: str) -> T:
        """
        Returns the contained Ok value, or raises ResultUnwrapError with a custom message if the result is Err.

        Args:
            msg: The message to display if the result is Err.

        Raises:
            ResultUnwrapError: If the result is Err, with the provided message and error.

        Example:
        ```python
        >>> from optres import Ok, Err
        >>> Ok("value").expect("Expected a value")
        'value'
        >>> Err("boom").expect("Expected a value")
        Traceback (most recent call last):
            ...
        optres._results._result.ResultUnwrapError: Expected a value: boom

        ```
        """
        if self.is_ok():
            return self.unwrap()
        raise ResultUnwrapError(f"{msg}: {self.unwrap_err()}")

    def expect_err(self, msg: str) -> E:
        """
        Returns the contained Err value, or raises ResultUnwrapError with a custom message if the result is Ok.

        Args:
            msg: The message to display if the result is Ok.

        Raises:
            ResultUnwrapError: If the result is Ok, with the provided message and value.

        Equivalent to Rust's Result::expect_err().
        """
        if self.is_err():
            return self.unwrap_err()
        raise ResultUnwrapError(f"{msg}: {self.unwrap()}")


@dataclass(slots=True, frozen=True)
class Ok[T, E](Result[T, E]):
    """Represents a successful value."""

    value: T

    @property
    def type(self) -> ResultType:
        return ResultType.OK

    def is_ok(self) -> TypeIs[Ok[T, E]]:  # type: ignore[misc]
        return True

    def is_err(self) -> TypeIs[Err[T, E]]:  # type: ignore[misc]
        return False

    def unwrap(self) -> T:
        return self.value

    def unwrap_err(self) -> Never:
        raise ResultUnwrapError(f"Tried to unwrap_err Ok: {self.value}")


@dataclass(slots=True, frozen=True)
class Err[T, E](Result[T, E]):
    """Represents an error value."""

    error: E

    @property
    def type(self) -> ResultType:
        return ResultType.ERR

    def is_ok(self) -> TypeIs[Ok[T, E]]:  # type: ignore[misc]
        return False

    def is_err(self) -> TypeIs[Err[T, E]]:  # type: ignore[misc]
        return True

    def unwrap(self) -> Never:
        raise ResultUnwrapError(f"Tried to unwrap Err: {self.error}")

    def unwrap_err(self) -> E:
        return self.error


@deprecated("Result.is_ok")
def is_ok[T, E](res: Result[T, E]) -> TypeIs[Ok[T, E]]:
    """Returns `True` if `res` is an `Ok` value."""
    return res.is_ok()


@deprecated("Result.is_err")
def is_err[T, E](res: Result[T, E]) -> TypeIs[Err[T, E]]:
    """Returns `True` if `res` is an `Err` value."""
    return res.is_err()
