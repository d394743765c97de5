"""Tests for decorators: @guarded, @guarded_stream."""

from dee_result import GuardError, Left, Right, guarded, guarded_stream


class TestGuardedDecorator:
    """Tests for @guarded."""

    async def test_returns_right_on_success(self):
        """@guarded wraps a successful return in Right."""

        @guarded
        async def fetch(x: int) -> int:
            return x * 2

        assert await fetch(5) == Right(10)

    async def test_returns_left_on_exception(self):
        """@guarded converts an exception into Left(GuardError)."""

        @guarded
        async def divide(a: int, b: int) -> float:
            return a / b

        assert await divide(10, 0) == Left(GuardError('division by zero', 'ZeroDivisionError'))

    async def test_with_wrap_param(self):
        """@guarded(wrap=...) controls the Left payload."""

        @guarded(wrap=lambda e: e)
        async def fail() -> int:
            raise ValueError('async error')

        result = await fail()
        assert isinstance(result.get_left(), ValueError)

    async def test_with_kwargs(self):
        """@guarded passes keyword arguments through."""

        @guarded
        async def greet(name: str, greeting: str = 'Hello') -> str:
            return f'{greeting}, {name}!'

        assert await greet('World') == Right('Hello, World!')
        assert await greet(name='Python', greeting='Hi') == Right('Hi, Python!')

    def test_preserves_function_name(self):
        """@guarded preserves function metadata."""

        @guarded
        async def my_function():
            pass

        assert my_function.__name__ == 'my_function'

    async def test_on_method(self):
        """@guarded works on methods."""

        class Client:
            def __init__(self, base: int) -> None:
                self.base = base

            @guarded
            async def add(self, x: int) -> int:
                return self.base + x

        assert await Client(1).add(2) == Right(3)


class TestGuardedStreamDecorator:
    """Tests for @guarded_stream."""

    async def test_wraps_elements_and_failure(self):
        """@guarded_stream yields Rights then one terminal Left."""

        @guarded_stream
        async def ticks(n: int):
            for i in range(n):
                yield i
            raise RuntimeError('clock stopped')

        items = [item async for item in ticks(2)]
        assert items == [Right(0), Right(1), Left(GuardError('clock stopped', 'RuntimeError'))]

    async def test_each_call_is_independent(self):
        """Every call starts a fresh stream."""

        @guarded_stream
        async def count(n: int):
            for i in range(n):
                yield i

        assert [item async for item in count(2)] == [Right(0), Right(1)]
        assert [item async for item in count(1)] == [Right(0)]

    async def test_with_wrap_param(self):
        """@guarded_stream(wrap=...) controls the Left payload."""

        @guarded_stream(wrap=lambda e: type(e).__name__)
        async def broken():
            raise KeyError('k')
            yield  # pragma: no cover

        assert [item async for item in broken()] == [Left('KeyError')]

    def test_preserves_function_name(self):
        """@guarded_stream preserves function metadata."""

        @guarded_stream
        async def my_stream():
            yield 1

        assert my_stream.__name__ == 'my_stream'
