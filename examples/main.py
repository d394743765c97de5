"""Tour of dee-result: Either, Result and the async guards."""

import anyio

from dee_result import Either, Error, GuardError, Left, Ok, Result, Right, run_guard, run_s_guard


def divide(a: int, b: int) -> Either[str, int]:
    if b == 0:
        return Left('Division by zero')
    return Right(a // b)


def safe_divide(a: int, b: int) -> Result[int]:
    if b == 0:
        return Result.error(ZeroDivisionError('Cannot divide by zero'))
    return Result.ok(a // b)


async def fetch_data() -> Either[GuardError, str]:
    async def load() -> str:
        await anyio.sleep(1)
        return 'Data loaded successfully'

    return await run_guard(load)


async def readings():
    for value in (20.5, 21.0):
        yield value
    raise ConnectionError('sensor went offline')


async def main() -> None:
    divide(10, 2).fold(
        lambda error: print(f'Error: {error}'),
        lambda value: print(f'Success: {value}'),
    )

    match safe_divide(10, 0):
        case Ok(value):
            print(f'Success: {value}')
        case Error(error):
            print(f'Error: {error}')

    (await fetch_data()).fold(
        lambda error: print(f'Error: {error}'),
        lambda value: print(f'Success: {value}'),
    )

    async for reading in run_s_guard(readings):
        reading.fold(
            lambda error: print(f'Stream ended: {error}'),
            lambda value: print(f'Reading: {value}'),
        )


if __name__ == '__main__':
    anyio.run(main)
