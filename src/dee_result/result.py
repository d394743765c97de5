"""Result type: Ok[T] | Error[T] for pattern-matched success/failure.

Result is the single-parameter sibling of Either: the failure side is always
an exception. It is meant to be consumed with ``match``.

Example:
    ```python
    from dee_result import Error, Ok, Result

    def safe_divide(a: int, b: int) -> Result[int]:
        if b == 0:
            return Result.error(ZeroDivisionError('Cannot divide by zero'))
        return Result.ok(a // b)

    match safe_divide(10, 0):
        case Ok(value):
            print(f'Success: {value}')
        case Error(error):
            print(f'Error: {error}')
    ```
"""

from __future__ import annotations

from collections.abc import Callable
from typing import NoReturn

import msgspec

from dee_result.either import Either, Left, Right
from dee_result.errors import GuardError, GuardException, InvalidAccessError

__all__ = ['Error', 'Ok', 'Result']


class Result[T](msgspec.Struct, frozen=True):
    """Outcome of an operation: Ok(value) or Error(error).

    Result itself cannot be constructed; use ``Ok``/``Error`` or the
    ``Result.ok``/``Result.error`` constructors.
    """

    def __post_init__(self) -> None:
        if type(self) is Result:
            raise TypeError('Result cannot be instantiated; use Result.ok(value) or Result.error(exc)')

    @staticmethod
    def ok(value: T) -> Ok[T]:
        """Create a successful Result."""
        return Ok(value)

    @staticmethod
    def error(error: BaseException) -> Error[T]:
        """Create a failed Result."""
        return Error(error)

    @staticmethod
    def from_either(either: Either[object, T]) -> Ok[T] | Error[T]:
        """Convert an Either into a Result.

        A Left payload that is not an exception is described by a
        GuardException carrying its ``str()``.

        Example:
            ```python
            Result.from_either(Right(1))
            # Ok(value=1)
            Result.from_either(Left(GuardError('boom', 'ValueError')))
            # Error(error=GuardException('boom'))
            ```
        """
        return either.fold(lambda left: Error(_as_exception(left)), Ok)

    def fold[E](self, if_error: Callable[[BaseException], E], if_ok: Callable[[T], E]) -> E:
        """Apply ``if_error`` to an Error or ``if_ok`` to an Ok, exactly once."""
        raise NotImplementedError

    def is_ok(self) -> bool:
        """Return True if this is Ok."""
        return self.fold(lambda _: False, lambda _: True)

    def is_error(self) -> bool:
        """Return True if this is Error."""
        return self.fold(lambda _: True, lambda _: False)

    def to_either(self) -> Either[BaseException, T]:
        """Convert to Either: Ok becomes Right, Error becomes Left."""
        return self.fold(Left, Right)


class Ok[T](Result[T], frozen=True):
    """Success variant of Result containing a value of type T."""

    value: T

    def fold[E](self, if_error: Callable[[BaseException], E], if_ok: Callable[[T], E]) -> E:  # noqa: ARG002
        return if_ok(self.value)

    def unwrap(self) -> T:
        """Return the contained value."""
        return self.value

    def unwrap_error(self) -> NoReturn:
        """Raise since Ok has no error.

        Raises:
            InvalidAccessError: Always.
        """
        raise InvalidAccessError('unwrap_error', 'Ok')


class Error[T](Result[T], frozen=True):
    """Failure variant of Result containing the exception that ended the operation."""

    error: BaseException

    def fold[E](self, if_error: Callable[[BaseException], E], if_ok: Callable[[T], E]) -> E:  # noqa: ARG002
        return if_error(self.error)

    def unwrap(self) -> NoReturn:
        """Raise since Error has no value.

        Raises:
            InvalidAccessError: Always. The stored exception is chained as the cause.
        """
        raise InvalidAccessError('unwrap', 'Error') from self.error

    def unwrap_error(self) -> BaseException:
        """Return the contained exception."""
        return self.error


def _as_exception(value: object) -> BaseException:
    if isinstance(value, BaseException):
        return value
    if isinstance(value, GuardError):
        return value.to_exception()
    return GuardException(str(value))
