"""Either type: Left[L] | Right[R] for disjoint failure/success outcomes.

Every observation of an Either goes through ``fold``; the predicates and
accessors below are written on top of it.

Example:
    ```python
    from dee_result import Either, Left, Right

    def divide(a: int, b: int) -> Either[str, int]:
        if b == 0:
            return Left('Division by zero')
        return Right(a // b)

    divide(10, 2).fold(lambda e: f'Error: {e}', lambda v: f'Success: {v}')
    # 'Success: 5'
    ```
"""

from __future__ import annotations

from collections.abc import Callable
from typing import NoReturn

import msgspec

from dee_result.errors import InvalidAccessError

__all__ = ['Either', 'Left', 'Right']


class Either[L, R](msgspec.Struct, frozen=True):
    """Outcome of an operation that either failed (Left) or succeeded (Right).

    Either itself carries no payload and cannot be constructed; build
    ``Left(value)`` or ``Right(value)``. Instances are immutable and hashable.
    """

    def __post_init__(self) -> None:
        if type(self) is Either:
            raise TypeError('Either cannot be instantiated; use Left(value) or Right(value)')

    def fold[E](self, if_left: Callable[[L], E], if_right: Callable[[R], E]) -> E:
        """Apply ``if_left`` to a Left payload or ``if_right`` to a Right payload.

        Exactly one of the two functions is called, once.

        Args:
            if_left: Function applied to the failure payload.
            if_right: Function applied to the success payload.

        Returns:
            Whatever the selected function returns.

        Example:
            ```python
            Right(10).fold(lambda e: f'Error: {e}', lambda v: f'Success: {v}')
            # 'Success: 10'
            ```
        """
        raise NotImplementedError

    def is_left(self) -> bool:
        """Return True if this is a Left (failure)."""
        return self.fold(lambda _: True, lambda _: False)

    def is_right(self) -> bool:
        """Return True if this is a Right (success)."""
        return self.fold(lambda _: False, lambda _: True)

    def get_left(self) -> L:
        """Return the Left payload.

        Raises:
            InvalidAccessError: If this is a Right. Check ``is_left()`` first.

        Example:
            ```python
            Left('Error occurred').get_left()
            # 'Error occurred'
            ```
        """
        return self.fold(lambda value: value, lambda _: _invalid_access('get_left', 'Right'))

    def get_right(self) -> R:
        """Return the Right payload.

        Raises:
            InvalidAccessError: If this is a Left. Check ``is_right()`` first.

        Example:
            ```python
            Right(100).get_right()
            # 100
            ```
        """
        return self.fold(lambda _: _invalid_access('get_right', 'Left'), lambda value: value)


class Left[L, R](Either[L, R], frozen=True):
    """Failure variant of Either holding a value of type L.

    Examples:
        >>> Left('boom').is_left()
        True
        >>> Left('boom').fold(len, str)
        4
    """

    value: L

    def fold[E](self, if_left: Callable[[L], E], if_right: Callable[[R], E]) -> E:  # noqa: ARG002
        return if_left(self.value)


class Right[L, R](Either[L, R], frozen=True):
    """Success variant of Either holding a value of type R.

    Examples:
        >>> Right(42).is_right()
        True
        >>> Right(42).fold(str, lambda v: v * 2)
        84
    """

    value: R

    def fold[E](self, if_left: Callable[[L], E], if_right: Callable[[R], E]) -> E:  # noqa: ARG002
        return if_right(self.value)


def _invalid_access(accessor: str, variant: str) -> NoReturn:
    raise InvalidAccessError(accessor, variant)
