"""Guards: turn raising async computations into Either values.

``run_guard`` wraps a single awaitable, ``run_s_guard`` wraps an async stream.
Neither lets an ``Exception`` escape; each one becomes a ``Left`` carrying a
GuardError (or whatever ``wrap`` returns). BaseExceptions that are not
Exceptions, like task cancellation, are termination signals and propagate.

Example:
    ```python
    async def fetch_data() -> Either[GuardError, str]:
        async def load() -> str:
            await anyio.sleep(1)
            return 'Data loaded successfully'

        return await run_guard(load)

    (await fetch_data()).fold(
        lambda error: print(f'Error: {error}'),
        lambda value: print(f'Success: {value}'),
    )
    ```
"""

from __future__ import annotations

from collections.abc import AsyncIterable, AsyncIterator, Awaitable, Callable
from typing import Any

from dee_result._config import get_config
from dee_result._logging import get_logger
from dee_result.either import Either, Left, Right
from dee_result.errors import GuardError, wrap_exception

__all__ = ['run_guard', 'run_s_guard']


def _resolve_wrap(wrap: Callable[[Exception], Any] | None) -> Callable[[Exception], Any]:
    if wrap is not None:
        return wrap
    capture = get_config().capture_traceback
    return lambda exc: wrap_exception(exc, capture_traceback=capture)


def _log_caught(event: str, exc: Exception, **fields: Any) -> None:
    if get_config().log_failures:
        get_logger(__name__).debug(event, kind=type(exc).__name__, message=str(exc), **fields)


async def run_guard[T](
    thunk: Callable[[], Awaitable[T]],
    *,
    wrap: Callable[[Exception], Any] | None = None,
) -> Either[GuardError, T]:
    """Await ``thunk()`` and return its outcome as an Either.

    Args:
        thunk: Zero-argument callable returning an awaitable of T.
        wrap: Converts a caught exception into the Left payload.
            Defaults to ``wrap_exception``; pass ``lambda e: e`` to keep the
            exception itself.

    Returns:
        Right(value) if the awaitable completes, Left(wrap(exc)) if it raises.

    Example:
        ```python
        async def answer() -> int:
            return 42

        await run_guard(answer)
        # Right(value=42)
        ```
    """
    wrapper = _resolve_wrap(wrap)
    try:
        value = await thunk()
    except Exception as exc:
        _log_caught('guard.caught', exc)
        return Left(wrapper(exc))
    return Right(value)


async def run_s_guard[T](
    stream: Callable[[], AsyncIterable[T]],
    *,
    wrap: Callable[[Exception], Any] | None = None,
) -> AsyncIterator[Either[GuardError, T]]:
    """Re-emit the elements of ``stream()`` as Right values, ending on the first error.

    Elements are pulled one at a time and yielded in order. If producing the
    next element raises, exactly one Left(wrap(exc)) is yielded and the output
    ends without asking the source for anything else. Closing the output early
    closes the source as well.

    Args:
        stream: Zero-argument callable returning an async iterable of T.
        wrap: Converts a caught exception into the Left payload.

    Yields:
        Right(element) per element, then at most one Left.

    Example:
        ```python
        async def numbers():
            yield 1
            yield 2
            raise ValueError('x')

        [e async for e in run_s_guard(numbers)]
        # [Right(value=1), Right(value=2), Left(value=GuardError(message='x', ...))]
        ```
    """
    wrapper = _resolve_wrap(wrap)
    iterator: AsyncIterator[T] | None = None
    count = 0
    try:
        while True:
            # Only the source is guarded; exceptions thrown in at ``yield`` propagate.
            try:
                if iterator is None:
                    iterator = aiter(stream())
                item = await anext(iterator)
            except StopAsyncIteration:
                return
            except Exception as exc:
                _log_caught('stream_guard.caught', exc, emitted=count)
                yield Left(wrapper(exc))
                return
            count += 1
            yield Right(item)
    finally:
        aclose = getattr(iterator, 'aclose', None)
        if aclose is not None:
            await aclose()
