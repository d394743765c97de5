"""Error types: dual struct+exception for Either and raise-based code."""

from __future__ import annotations

import traceback as tb

import msgspec

__all__ = [
    'GuardError',
    'GuardException',
    'InvalidAccessError',
    'wrap_exception',
]


# --- Guard Errors ---


class GuardError(msgspec.Struct, frozen=True, gc=False):
    """Normalized exception caught by a guard - struct variant for Left payloads.

    Only the description of the original exception survives: its message
    and the name of its class. Two GuardErrors built from exceptions with
    the same class name and message compare equal.

    Attributes:
        message: ``str()`` of the caught exception.
        kind: Class name of the caught exception.
        traceback: Formatted traceback, when capture is enabled.
    """

    message: str
    kind: str = 'Exception'
    traceback: str | None = None

    def __str__(self) -> str:
        return self.message

    def to_exception(self) -> GuardException:
        """Convert to exception for raise-based code."""
        return GuardException(self.message, self.kind)


class GuardException(Exception):
    """Normalized exception caught by a guard - exception variant."""

    def __init__(self, message: str, kind: str = 'Exception') -> None:
        self.message = message
        self.kind = kind
        super().__init__(message)

    def to_struct(self) -> GuardError:
        """Convert to struct for Either-based code."""
        return GuardError(self.message, self.kind)


def wrap_exception(exc: BaseException, *, capture_traceback: bool = False) -> GuardError:
    """Describe an exception as a GuardError.

    Args:
        exc: The exception to describe.
        capture_traceback: Also record the formatted traceback.

    Returns:
        GuardError carrying the exception's message and class name.

    Example:
        ```python
        wrap_exception(ValueError('boom'))
        # GuardError(message='boom', kind='ValueError', traceback=None)
        ```
    """
    if isinstance(exc, GuardException):
        message, kind = exc.message, exc.kind
    else:
        message, kind = str(exc), type(exc).__name__
    return GuardError(message, kind, _format_traceback(exc) if capture_traceback else None)


def _format_traceback(exc: BaseException) -> str:
    return ''.join(tb.format_exception(exc))


# --- Contract Violations ---


class InvalidAccessError(RuntimeError):
    """Raised when a payload is read from the wrong variant.

    This is a programming error, never a domain failure: calling
    ``get_left()`` on a Right (or ``get_right()`` on a Left) means the caller
    did not check the variant first.
    """

    def __init__(self, accessor: str, variant: str) -> None:
        self.accessor = accessor
        self.variant = variant
        super().__init__(f'Called {accessor} on {variant}')
