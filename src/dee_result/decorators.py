"""@guarded and @guarded_stream decorators for guarding async callables."""

from __future__ import annotations

from collections.abc import AsyncIterable, AsyncIterator, Awaitable, Callable
from typing import Any, overload

import wrapt

from dee_result.either import Either
from dee_result.errors import GuardError
from dee_result.guard import run_guard, run_s_guard

__all__ = ['guarded', 'guarded_stream']


@overload
def guarded[**P, T](
    func: Callable[P, Awaitable[T]],
) -> Callable[P, Awaitable[Either[GuardError, T]]]: ...


@overload
def guarded(
    func: None = None,
    *,
    wrap: Callable[[Exception], Any] | None = None,
) -> Callable[[Callable[..., Awaitable[Any]]], Callable[..., Awaitable[Either[Any, Any]]]]: ...


def guarded[**P, T](
    func: Callable[P, Awaitable[T]] | None = None,
    *,
    wrap: Callable[[Exception], Any] | None = None,
) -> Any:
    """Decorator that runs each call of an async function through ``run_guard``.

    Can be used with or without arguments:
        @guarded
        async def fetch(): ...

        @guarded(wrap=lambda e: e)
        async def fetch_raw(): ...

    Args:
        func: The async function to wrap (when used without parentheses).
        wrap: Converts a caught exception into the Left payload.

    Returns:
        A wrapped async function returning Either[GuardError, T] instead of T.

    Example:
        ```python
        @guarded
        async def divide(a: int, b: int) -> float:
            return a / b

        await divide(10, 0)
        # Left(value=GuardError(message='division by zero', kind='ZeroDivisionError', traceback=None))
        ```
    """

    @wrapt.decorator
    async def wrapper(
        wrapped: Callable[P, Awaitable[T]],
        instance: Any,
        args: tuple[Any, ...],
        kwargs: dict[str, Any],
    ) -> Either[Any, T]:
        return await run_guard(lambda: wrapped(*args, **kwargs), wrap=wrap)

    if func is not None:
        return wrapper(func)
    return wrapper


@overload
def guarded_stream[**P, T](
    func: Callable[P, AsyncIterable[T]],
) -> Callable[P, AsyncIterator[Either[GuardError, T]]]: ...


@overload
def guarded_stream(
    func: None = None,
    *,
    wrap: Callable[[Exception], Any] | None = None,
) -> Callable[[Callable[..., AsyncIterable[Any]]], Callable[..., AsyncIterator[Either[Any, Any]]]]: ...


def guarded_stream[**P, T](
    func: Callable[P, AsyncIterable[T]] | None = None,
    *,
    wrap: Callable[[Exception], Any] | None = None,
) -> Any:
    """Decorator that runs each call of an async generator function through ``run_s_guard``.

    Args:
        func: The async generator function to wrap (when used without parentheses).
        wrap: Converts a caught exception into the Left payload.

    Returns:
        A wrapped function whose calls return a stream of Either values.

    Example:
        ```python
        @guarded_stream
        async def ticks(n: int):
            for i in range(n):
                yield i
            raise RuntimeError('clock stopped')

        [e async for e in ticks(2)]
        # [Right(value=0), Right(value=1), Left(value=GuardError(message='clock stopped', ...))]
        ```
    """

    @wrapt.decorator
    def wrapper(
        wrapped: Callable[P, AsyncIterable[T]],
        instance: Any,
        args: tuple[Any, ...],
        kwargs: dict[str, Any],
    ) -> AsyncIterator[Either[Any, T]]:
        return run_s_guard(lambda: wrapped(*args, **kwargs), wrap=wrap)

    if func is not None:
        return wrapper(func)
    return wrapper
