"""Internal helpers for fnbox.

Small functions shared by several modules. `trace` is the workhorse for
peeking into a pipeline without breaking it."""

from __future__ import annotations

import json
import logging
import typing
from collections.abc import Callable

trace_logger = logging.getLogger("fnbox.trace")


# Identity function
def identity[T](x: T) -> T:
    """Identity function: returns its argument unchanged."""
    return x


def always[T](value: T) -> Callable[..., T]:
    """Function that ignores its arguments and always returns `value`."""

    def constant(*_: typing.Any, **__: typing.Any) -> T:
        return value

    return constant


def dump(x: typing.Any) -> str:
    """Render a value for logs: JSON when possible, repr otherwise."""
    try:
        return json.dumps(x, default=repr)
    except (TypeError, ValueError):
        return repr(x)


def trace[T](x: T) -> T:
    """
    Log a value and return it unchanged.

    Drop it anywhere into a pipe to see what flows through:

        pipe(R.split(" "), trace, R.map(R.to_upper))
    """
    trace_logger.info(dump(x))
    return x


def trace_with[T](label: str) -> Callable[[T], T]:
    """`trace` with a label prefixed to the logged value."""

    def traced(x: T) -> T:
        trace_logger.info("%s: %s", label, dump(x))
        return x

    return traced


__all__ = (
    "always",
    "dump",
    "identity",
    "trace",
    "trace_with",
)
