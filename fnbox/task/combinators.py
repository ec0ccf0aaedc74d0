"""Combinators over collections of tasks."""

from __future__ import annotations

import asyncio
from collections.abc import Sequence

from kungfu import Result

from . import _concurrency
from .monad import Task


def wait_all[T, E](tasks: Sequence[Task[T, E]]) -> Task[list[T], E]:
    """
    Run tasks concurrently and collect their values in input order.

    The first rejection wins and cancels the tasks still running.
    """
    if not tasks:
        raise ValueError("wait_all requires at least one task")
    thunks = [t.__call__ for t in tasks]

    async def run() -> Result[list[T], E]:
        return await _concurrency.all_ok(thunks)

    return Task(run)


def wait_any[T, E](tasks: Sequence[Task[T, E]]) -> Task[T, E]:
    """Run tasks concurrently; the first to settle wins and the rest are cancelled."""
    if not tasks:
        raise ValueError("wait_any requires at least one task")
    thunks = [t.__call__ for t in tasks]

    async def run() -> Result[T, E]:
        return await _concurrency.race(thunks)

    return Task(run)


def parallel[T, E](limit: int, tasks: Sequence[Task[T, E]]) -> Task[list[T], E]:
    """`wait_all` with at most `limit` tasks running at once."""
    if limit < 1:
        raise ValueError(f"limit must be at least 1, got {limit}")
    if not tasks:
        raise ValueError("parallel requires at least one task")

    async def run() -> Result[list[T], E]:
        semaphore = asyncio.Semaphore(limit)
        thunks = [_concurrency.limited(t.__call__, semaphore) for t in tasks]
        return await _concurrency.all_ok(thunks)

    return Task(run)


__all__ = ("parallel", "wait_all", "wait_any")
