"""Task

Lazy, composable, cancellable asynchronous computation.

A Task describes work; nothing happens until it is run. Running it yields
a value (resolved) or a reason (rejected), carried as a kungfu `Result`.
Cancelling a run stops it and fires its cleanup callbacks.

Built on top of kungfu library patterns."""

from __future__ import annotations

import asyncio
import typing
from collections.abc import Awaitable, Callable, Coroutine
from functools import reduce, wraps
from typing import assert_never

from kungfu import Error, LazyCoroResult, Ok, Result

from . import _concurrency
from .execution import TaskExecution
from .resolver import Resolver


class Task[T, E]:
    """Lazy Coroutine Result with cancellation.

    Monadic laws:
    - Left identity: Task.of(a).chain(f) ≡ f(a)
    - Right identity: m.chain(Task.of) ≡ m
    - Associativity: m.chain(f).chain(g) ≡ m.chain(x => f(x).chain(g))
    """

    __slots__ = ("_run",)

    def __init__(
        self,
        run: Callable[[], Coroutine[typing.Any, typing.Any, Result[T, E]]],
        /,
    ) -> None:
        """Create Task from a fn returning coroutine."""
        self._run = run

    # Constructors

    @staticmethod
    def of[V](value: V) -> Task[V, typing.Never]:
        """Task that resolves with `value`."""

        async def run() -> Result[V, typing.Never]:
            return Ok(value)

        return Task(run)

    @staticmethod
    def rejected[R](reason: R) -> Task[typing.Never, R]:
        """Task that rejects with `reason`."""

        async def run() -> Result[typing.Never, R]:
            return Error(reason)

        return Task(run)

    @staticmethod
    def from_coroutine_fn[V](
        thunk: Callable[[], Awaitable[V]],
    ) -> Task[V, Exception]:
        """Wrap a zero-arg async callable; raised exceptions become rejections."""

        async def run() -> Result[V, Exception]:
            try:
                return Ok(await thunk())
            except Exception as exc:
                return Error(exc)

        return Task(run)

    @staticmethod
    def from_lazy_coro_result[V, R](lazy: LazyCoroResult[V, R]) -> Task[V, R]:
        """Convert kungfu LazyCoroResult to Task."""

        async def run() -> Result[V, R]:
            return await lazy

        return Task(run)

    # Functor operations

    def map[U](self, f: Callable[[T], U], /) -> Task[U, E]:
        """Transform the resolved value."""

        async def run() -> Result[U, E]:
            match await self._run():
                case Ok(value):
                    return Ok(f(value))
                case Error(reason):
                    return Error(reason)
                case _ as unreachable:
                    assert_never(unreachable)

        return Task(run)

    def map_rejected[F](self, f: Callable[[E], F], /) -> Task[T, F]:
        """Transform the rejection reason."""

        async def run() -> Result[T, F]:
            match await self._run():
                case Ok(value):
                    return Ok(value)
                case Error(reason):
                    return Error(f(reason))
                case _ as unreachable:
                    assert_never(unreachable)

        return Task(run)

    def bimap[F, U](
        self,
        on_rejected: Callable[[E], F],
        on_resolved: Callable[[T], U],
        /,
    ) -> Task[U, F]:
        return self.map(on_resolved).map_rejected(on_rejected)

    # Monad operations

    def chain[U](self, f: Callable[[T], Task[U, E]], /) -> Task[U, E]:
        """
        Monadic bind (>>=).

        - On resolve: runs the task returned by f
        - On reject: short-circuit
        """

        async def run() -> Result[U, E]:
            match await self._run():
                case Ok(value):
                    return await f(value)._run()
                case Error(reason):
                    return Error(reason)
                case _ as unreachable:
                    assert_never(unreachable)

        return Task(run)

    def or_else[F](self, f: Callable[[E], Task[T, F]], /) -> Task[T, F]:
        """Recover from a rejection with another task."""

        async def run() -> Result[T, F]:
            match await self._run():
                case Ok(value):
                    return Ok(value)
                case Error(reason):
                    return await f(reason)._run()
                case _ as unreachable:
                    assert_never(unreachable)

        return Task(run)

    def fold[U](
        self,
        on_rejected: Callable[[E], U],
        on_resolved: Callable[[T], U],
        /,
    ) -> Task[U, typing.Never]:
        """Collapse both outcomes into a resolved value."""

        async def run() -> Result[U, typing.Never]:
            match await self._run():
                case Ok(value):
                    return Ok(on_resolved(value))
                case Error(reason):
                    return Ok(on_rejected(reason))
                case _ as unreachable:
                    assert_never(unreachable)

        return Task(run)

    def swap(self) -> Task[E, T]:
        async def run() -> Result[E, T]:
            match await self._run():
                case Ok(value):
                    return Error(value)
                case Error(reason):
                    return Ok(reason)
                case _ as unreachable:
                    assert_never(unreachable)

        return Task(run)

    # Concurrency

    def or_(self, other: Task[T, E], /) -> Task[T, E]:
        """Race: whichever settles first wins, the other is cancelled."""

        async def run() -> Result[T, E]:
            return await _concurrency.race([self._run, other._run])

        return Task(run)

    def and_[U](self, other: Task[U, E], /) -> Task[tuple[T, U], E]:
        """Run both concurrently; the first rejection cancels the other."""

        async def run() -> Result[tuple[T, U], E]:
            match await _concurrency.all_ok([self._run, other._run]):
                case Ok(values):
                    left, right = values
                    return Ok((left, right))
                case Error(reason):
                    return Error(reason)
                case _ as unreachable:
                    assert_never(unreachable)

        return Task(run)

    # Utility operations

    def pipe(self, *fns: Callable[[Task[typing.Any, typing.Any]], typing.Any]) -> typing.Any:
        """Thread the task through data-last operators: `t.pipe(F.map(f), F.chain(g))`."""
        return reduce(lambda acc, fn: fn(acc), fns, self)

    def run(self) -> TaskExecution[T, E]:
        """Start the task. Must be called with a running event loop."""
        return TaskExecution(self._run)

    def to_lazy_coro_result(self) -> LazyCoroResult[T, E]:
        """Convert to kungfu LazyCoroResult."""
        return LazyCoroResult(self._run)

    # Protocol methods

    def __call__(self) -> Coroutine[typing.Any, typing.Any, Result[T, E]]:
        """Execute the lazy computation, returning coroutine."""
        return self._run()

    def __await__(self) -> typing.Generator[typing.Any, None, Result[T, E]]:
        """Allow direct await on the task."""
        return self._run().__await__()


# Convenience constructors


def task[T, E](computation: Callable[[Resolver[T, E]], typing.Any]) -> Task[T, E]:
    """
    Build a Task from a callback-style computation.

    `computation` receives a Resolver every time the task runs.

    Example:
        def request(seconds: float, data: dict) -> Task[dict, str]:
            def computation(resolver: Resolver[dict, str]) -> None:
                handle = asyncio.get_running_loop().call_later(seconds, resolver.resolve, data)
                resolver.cleanup(handle.cancel)

            return task(computation)
    """

    async def run() -> Result[T, E]:
        loop = asyncio.get_running_loop()
        resolver: Resolver[T, E] = Resolver(loop.create_future())
        try:
            computation(resolver)
            return await resolver.outcome
        except asyncio.CancelledError:
            resolver.cancel()
            raise
        finally:
            resolver.finish()

    return Task(run)


def delay[T](seconds: float, value: T) -> Task[T, typing.Never]:
    """Resolve with `value` after `seconds`."""

    def computation(resolver: Resolver[T, typing.Never]) -> None:
        handle = asyncio.get_running_loop().call_later(seconds, resolver.resolve, value)
        resolver.cleanup(handle.cancel)

    return task(computation)


def from_promised[T, **P](
    fn: Callable[P, Awaitable[T]],
) -> Callable[P, Task[T, Exception]]:
    """
    Turn an async function into one returning Task.

    Example:
        fetch = from_promised(client.get)
        fetch("https://example.org").map(lambda response: response.text)
    """

    @wraps(fn)
    def wrapper(*args: P.args, **kwargs: P.kwargs) -> Task[T, Exception]:
        return Task.from_coroutine_fn(lambda: fn(*args, **kwargs))

    return wrapper


__all__ = ("Task", "delay", "from_promised", "task")
