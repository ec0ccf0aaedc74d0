"""Scheduling primitives shared by Task.or_, Task.and_, wait_all, wait_any and parallel."""

from __future__ import annotations

import asyncio
import typing
from collections.abc import Callable, Coroutine, Sequence

from kungfu import Error, Ok, Result

type Thunk[T, E] = Callable[[], Coroutine[typing.Any, typing.Any, Result[T, E]]]


async def _settle_all(tasks: Sequence[asyncio.Future[typing.Any]]) -> None:
    # Cancel stragglers and let their cleanup run before returning.
    for t in tasks:
        if not t.done():
            t.cancel()
    await asyncio.gather(*tasks, return_exceptions=True)


async def race[T, E](thunks: Sequence[Thunk[T, E]]) -> Result[T, E]:
    """First run to settle wins (ties go to the earlier input); the rest are cancelled."""
    tasks = [asyncio.ensure_future(thunk()) for thunk in thunks]
    try:
        done, _ = await asyncio.wait(tasks, return_when=asyncio.FIRST_COMPLETED)
        winner = next(t for t in tasks if t in done)
        return winner.result()
    finally:
        await _settle_all(tasks)


async def all_ok[T, E](thunks: Sequence[Thunk[T, E]]) -> Result[list[T], E]:
    """Run concurrently; values in input order, or the first rejection (the rest are cancelled)."""
    tasks = [asyncio.ensure_future(thunk()) for thunk in thunks]
    try:
        for next_done in asyncio.as_completed(tasks):
            result = await next_done
            match result:
                case Error(reason):
                    return Error(reason)
                case Ok(_):
                    pass

        values: list[T] = []
        for t in tasks:
            match t.result():
                case Ok(value):
                    values.append(value)
        return Ok(values)
    finally:
        await _settle_all(tasks)


def limited[T, E](thunk: Thunk[T, E], semaphore: asyncio.Semaphore) -> Thunk[T, E]:
    async def run() -> Result[T, E]:
        async with semaphore:
            return await thunk()

    return run


__all__ = ("all_ok", "limited", "race")
