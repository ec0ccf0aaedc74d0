"""
TaskExecution - a running Task.

Returned by `Task.run()`. Lets the caller cancel the run, subscribe to its
outcome with callbacks, or await it.
"""

from __future__ import annotations

import asyncio
import logging
import typing
from collections.abc import Callable, Coroutine
from typing import assert_never

from kungfu import Error, Ok, Result

from .._errors import TaskCancelledError, TaskRejectedError

if typing.TYPE_CHECKING:
    from .monad import Task

logger = logging.getLogger(__name__)


class TaskExecution[T, E]:
    """One run of a Task, scheduled on the running event loop."""

    __slots__ = ("_future",)

    def __init__(
        self,
        run: Callable[[], Coroutine[typing.Any, typing.Any, Result[T, E]]],
        /,
    ) -> None:
        loop = asyncio.get_running_loop()
        self._future: asyncio.Task[Result[T, E]] = loop.create_task(run())
        self._future.add_done_callback(_log_outcome)
        logger.debug("Task execution started: %s", self._future.get_name())

    @property
    def done(self) -> bool:
        return self._future.done()

    @property
    def cancelled(self) -> bool:
        return self._future.cancelled()

    def cancel(self) -> None:
        """Cancel the run. Cleanup callbacks fire; resolve/reject listeners do not."""
        if not self._future.done():
            logger.debug("Cancelling task execution: %s", self._future.get_name())
            self._future.cancel()

    def listen(
        self,
        *,
        on_resolved: Callable[[T], typing.Any] | None = None,
        on_rejected: Callable[[E | BaseException], typing.Any] | None = None,
        on_cancelled: Callable[[], typing.Any] | None = None,
    ) -> Callable[[], None]:
        """
        Subscribe to the outcome with callbacks. Returns an unsubscribe function.

        An exception raised inside the computation itself (rather than a
        rejection) is delivered to `on_rejected`.

        Example:
            unsubscribe = execution.listen(
                on_cancelled=lambda: print("task was cancelled"),
                on_rejected=lambda reason: print(f"task was rejected because {reason}"),
                on_resolved=print,
            )
        """

        def notify(future: asyncio.Future[Result[T, E]]) -> None:
            if future.cancelled():
                if on_cancelled is not None:
                    on_cancelled()
                return
            exc = future.exception()
            if exc is not None:
                if on_rejected is not None:
                    on_rejected(exc)
                return
            match future.result():
                case Ok(value):
                    if on_resolved is not None:
                        on_resolved(value)
                case Error(reason):
                    if on_rejected is not None:
                        on_rejected(reason)

        self._future.add_done_callback(notify)

        def unsubscribe() -> None:
            self._future.remove_done_callback(notify)

        return unsubscribe

    async def result(self) -> Result[T, E]:
        """
        Wait for the outcome as a kungfu Result.

        Raises TaskCancelledError if the run is cancelled. Cancelling the
        awaiting coroutine does not cancel the run.
        """
        try:
            return await asyncio.shield(self._future)
        except asyncio.CancelledError:
            if self._future.cancelled():
                raise TaskCancelledError() from None
            raise

    async def promise(self) -> T:
        """
        Wait for the resolved value.

        A rejection is raised: exception reasons as themselves, anything else
        wrapped in TaskRejectedError.
        """
        match await self.result():
            case Ok(value):
                return value
            case Error(reason):
                if isinstance(reason, BaseException):
                    raise reason
                raise TaskRejectedError(reason)
            case _ as unreachable:
                assert_never(unreachable)

    def future(self) -> Task[T, E | TaskCancelledError]:
        """A new Task observing this run instead of starting another one."""
        from .monad import Task

        async def observe() -> Result[T, E | TaskCancelledError]:
            try:
                return await self.result()
            except TaskCancelledError as exc:
                return Error(exc)

        return Task(observe)

    def __await__(self) -> typing.Generator[typing.Any, None, Result[T, E]]:
        return self.result().__await__()


def _log_outcome(future: asyncio.Future[typing.Any]) -> None:
    name = future.get_name() if isinstance(future, asyncio.Task) else repr(future)
    if future.cancelled():
        logger.debug("Task execution cancelled: %s", name)
    elif future.exception() is not None:
        logger.debug("Task execution raised: %s", name, exc_info=future.exception())
    else:
        logger.debug("Task execution settled: %s -> %r", name, future.result())


__all__ = ("TaskExecution",)
