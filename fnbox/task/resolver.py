"""Resolver handed to a task computation to settle it."""

from __future__ import annotations

import asyncio
import logging
import typing
from collections.abc import Callable

from kungfu import Error, Ok, Result

logger = logging.getLogger(__name__)


class Resolver[T, E]:
    """
    Settles one run of a task.

    Only the first `resolve`/`reject` counts. `cleanup` callbacks run exactly
    once when the run ends, however it ends; `on_cancelled` callbacks run only
    when the run is cancelled. A callback that raises is logged at WARNING
    and the remaining ones still run.

    Example:
        def computation(resolver: Resolver[int, str]) -> None:
            handle = asyncio.get_running_loop().call_later(0.1, resolver.resolve, 42)
            resolver.cleanup(handle.cancel)
    """

    __slots__ = ("_outcome", "_cleanups", "_cancel_handlers", "_cancelled")

    def __init__(self, outcome: asyncio.Future[Result[T, E]], /) -> None:
        self._outcome = outcome
        self._cleanups: list[Callable[[], typing.Any]] = []
        self._cancel_handlers: list[Callable[[], typing.Any]] = []
        self._cancelled = False

    @property
    def outcome(self) -> asyncio.Future[Result[T, E]]:
        return self._outcome

    @property
    def is_cancelled(self) -> bool:
        return self._cancelled

    @property
    def is_settled(self) -> bool:
        return self._outcome.done()

    def resolve(self, value: T) -> None:
        if not self._outcome.done():
            self._outcome.set_result(Ok(value))

    def reject(self, reason: E) -> None:
        if not self._outcome.done():
            self._outcome.set_result(Error(reason))

    def cleanup(self, fn: Callable[[], typing.Any]) -> None:
        self._cleanups.append(fn)

    def on_cancelled(self, fn: Callable[[], typing.Any]) -> None:
        self._cancel_handlers.append(fn)

    def cancel(self) -> None:
        """Mark the run cancelled and notify cancel handlers."""
        if self._cancelled:
            return
        self._cancelled = True
        handlers, self._cancel_handlers = self._cancel_handlers, []
        for handler in handlers:
            _call_guarded(handler, "cancel handler")

    def finish(self) -> None:
        """Run cleanup callbacks; later calls are no-ops."""
        cleanups, self._cleanups = self._cleanups, []
        for fn in cleanups:
            _call_guarded(fn, "cleanup")


def _call_guarded(fn: Callable[[], typing.Any], kind: str) -> None:
    # A failing callback must not skip the rest or replace the outcome.
    try:
        fn()
    except Exception:
        logger.warning("Task %s %r raised", kind, fn, exc_info=True)


__all__ = ("Resolver",)
