"""
Future - Fluture-style, data-last API over Task.

Same lazy, cancellable computation as `Task`, spelled the way a
point-free pipeline reads:

    from fnbox import future as F

    fetch_page = F.encase_p(client.get)
    cancel = F.fork(log_error, log_page, fetch_page(url).pipe(F.map(lambda r: r.text)))
    cancel()
"""

from __future__ import annotations

import asyncio
import typing
from collections.abc import Awaitable, Callable, Sequence
from functools import wraps

from ._types import Canceller
from .curry import curry
from .task import Resolver, Task, delay, from_promised, task
from .task import parallel as parallel_tasks


# Future and Task are the same type
Future = Task


def future[T, E](
    computation: Callable[[Callable[[E], None], Callable[[T], None]], Canceller | None],
) -> Task[T, E]:
    """
    Build a Future from `computation(reject, resolve)`.

    The computation may return a cancel function; it is called if the run is
    cancelled before settling.

    Example:
        def delayed(seconds: float) -> Task[float, typing.Never]:
            def computation(reject, resolve):
                handle = asyncio.get_running_loop().call_later(seconds, resolve, seconds)
                return handle.cancel

            return future(computation)
    """

    def run(resolver: Resolver[T, E]) -> None:
        cancel = computation(resolver.reject, resolver.resolve)
        if cancel is not None:
            resolver.on_cancelled(cancel)

    return task(run)


# Constructors


def resolve[T](value: T) -> Task[T, typing.Never]:
    return Task.of(value)


def reject[E](reason: E) -> Task[typing.Never, E]:
    return Task.rejected(reason)


def after[T](seconds: float, value: T) -> Task[T, typing.Never]:
    """Resolve with `value` after `seconds`."""
    return delay(seconds, value)


def reject_after[E](seconds: float, reason: E) -> Task[typing.Never, E]:
    """Reject with `reason` after `seconds`."""

    def computation(resolver: Resolver[typing.Never, E]) -> None:
        handle = asyncio.get_running_loop().call_later(seconds, resolver.reject, reason)
        resolver.cleanup(handle.cancel)

    return task(computation)


def encase[T, **P](fn: Callable[P, T]) -> Callable[P, Task[T, Exception]]:
    """Lift a sync function; a raised exception becomes the rejection reason."""

    @wraps(fn)
    def wrapper(*args: P.args, **kwargs: P.kwargs) -> Task[T, Exception]:
        def computation(resolver: Resolver[T, Exception]) -> None:
            try:
                value = fn(*args, **kwargs)
            except Exception as exc:
                resolver.reject(exc)
            else:
                resolver.resolve(value)

        return task(computation)

    return wrapper


encase_p = from_promised


def attempt_p[T](thunk: Callable[[], Awaitable[T]]) -> Task[T, Exception]:
    """Lift a zero-arg async callable; a raised exception becomes the rejection reason."""
    return Task.from_coroutine_fn(thunk)


# Operators, for use with Task.pipe


@curry
def map[T, U, E](fn: Callable[[T], U], fut: Task[T, E]) -> Task[U, E]:
    return fut.map(fn)


@curry
def map_rej[T, E, F](fn: Callable[[E], F], fut: Task[T, E]) -> Task[T, F]:
    return fut.map_rejected(fn)


@curry
def bimap[T, U, E, F](
    on_rejected: Callable[[E], F],
    on_resolved: Callable[[T], U],
    fut: Task[T, E],
) -> Task[U, F]:
    return fut.bimap(on_rejected, on_resolved)


@curry
def chain[T, U, E](fn: Callable[[T], Task[U, E]], fut: Task[T, E]) -> Task[U, E]:
    return fut.chain(fn)


@curry
def chain_rej[T, E, F](fn: Callable[[E], Task[T, F]], fut: Task[T, E]) -> Task[T, F]:
    return fut.or_else(fn)


@curry
def alt[T, E](other: Task[T, E], fut: Task[T, E]) -> Task[T, E]:
    """Fall back to `other` when `fut` rejects."""
    return fut.or_else(lambda _: other)


@curry
def both[T, U, E](other: Task[U, E], fut: Task[T, E]) -> Task[tuple[T, U], E]:
    return fut.and_(other)


@curry
def race[T, E](other: Task[T, E], fut: Task[T, E]) -> Task[T, E]:
    return fut.or_(other)


@curry
def coalesce[T, U, E](
    on_rejected: Callable[[E], U],
    on_resolved: Callable[[T], U],
    fut: Task[T, E],
) -> Task[U, typing.Never]:
    return fut.fold(on_rejected, on_resolved)


@curry
def parallel[T, E](limit: int, futures: Sequence[Task[T, E]]) -> Task[list[T], E]:
    """Run at most `limit` futures at a time; values in input order."""
    return parallel_tasks(limit, futures)


# Consumption


@curry
def fork[T, E](
    on_rejected: Callable[[E | BaseException], typing.Any],
    on_resolved: Callable[[T], typing.Any],
    fut: Task[T, E],
) -> Canceller:
    """
    Run `fut` and report through callbacks. Returns its cancel function.

    Needs a running event loop.
    """
    execution = fut.run()
    execution.listen(on_resolved=on_resolved, on_rejected=on_rejected)
    return execution.cancel


async def promise[T, E](fut: Task[T, E]) -> T:
    """Run `fut` and wait for its value; a rejection is raised."""
    return await fut.run().promise()


__all__ = (
    "Future",
    "after",
    "alt",
    "attempt_p",
    "bimap",
    "both",
    "chain",
    "chain_rej",
    "coalesce",
    "encase",
    "encase_p",
    "fork",
    "future",
    "map",
    "map_rej",
    "parallel",
    "promise",
    "race",
    "reject",
    "reject_after",
    "resolve",
)
