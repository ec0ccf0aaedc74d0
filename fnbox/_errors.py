from __future__ import annotations

import typing


class EmptyMaybeError(Exception):
    """Tried to extract a value from Nothing."""

    def __init__(self) -> None:
        super().__init__("Cannot extract a value from Nothing")


class EitherProjectionError(Exception):
    """Projected the wrong side of an Either."""

    side: str

    def __init__(self, side: str) -> None:
        self.side = side
        super().__init__(f"Either is not a {side}")


class TaskRejectedError(Exception):
    """Task rejected with a reason that is not an exception."""

    reason: typing.Any

    def __init__(self, reason: typing.Any) -> None:
        self.reason = reason
        super().__init__(f"Task rejected: {reason!r}")


class TaskCancelledError(Exception):
    """Task execution was cancelled before it settled."""

    def __init__(self) -> None:
        super().__init__("Task was cancelled")


__all__ = (
    "EitherProjectionError",
    "EmptyMaybeError",
    "TaskCancelledError",
    "TaskRejectedError",
)
