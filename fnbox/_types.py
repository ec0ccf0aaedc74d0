"""
Core type definitions for fnbox.

Aliases shared by the curry, ops, lens and container modules.
"""

from __future__ import annotations

import typing
from collections.abc import Awaitable, Callable

# ============================================================================
# Type aliases
# ============================================================================

# Predicate = function that tests a value
type Predicate[T] = Callable[[T], bool]

# Fn = plain unary function
type Fn[A, B] = Callable[[A], B]

# Thunk = zero-arg callable producing a value lazily
type Thunk[T] = Callable[[], T]

# AsyncThunk = zero-arg callable producing an awaitable
type AsyncThunk[T] = Callable[[], Awaitable[T]]

# Reducer = step function folding an element into an accumulator
type Reducer[Acc, T] = Callable[[Acc, T], Acc]

# Transducer = reducer transformer, composable with `compose`
type Transducer[Acc, A, B] = Callable[[Reducer[Acc, B]], Reducer[Acc, A]]

# Canceller = zero-arg callable that aborts a running computation
type Canceller = Callable[[], None]

# Path = sequence of dict keys / list indexes
type Path = typing.Sequence[typing.Hashable]

__all__ = (
    "Predicate",
    "Fn",
    "Thunk",
    "AsyncThunk",
    "Reducer",
    "Transducer",
    "Canceller",
    "Path",
)
