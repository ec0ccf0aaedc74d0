"""
fnbox - functional programming building blocks.

Currying and composition, Ramda-style data helpers, lenses, and the
classic containers: Identity (Box), Maybe, Either, Task and Future.

Architecture:
- curry/   curry, placeholders, pipe/compose, predicates
- ops/     data-last helpers over lists, strings, dicts; transducers
- lens/    composable getters/setters over immutable data
- box/     Identity, Maybe, Either
- task/    lazy cancellable async Task (callback-resolver style)
- future   data-last Future operators over the same Task

Supports namespace imports:
    from fnbox import ops as R
    from fnbox import lens as L
    from fnbox import future as F
"""

# Core types
from ._types import AsyncThunk, Canceller, Fn, Path, Predicate, Reducer, Thunk, Transducer

# Helpers
from ._helpers import always, identity, trace, trace_with

# Logging setup for scripts
from ._logging import setup_logger

# Namespaces
from . import future, lens, ops

# Currying and composition
from .curry import (
    __,
    Placeholder,
    complement,
    compose,
    curry,
    curry_n,
    equals,
    flip,
    if_else,
    pipe,
    tap,
    unless,
    when,
)

# Lenses
from .lens import Lens, over, path_lens, prop_lens, view

# Containers
from .box import (
    Box,
    Either,
    Identity,
    Just,
    Left,
    Maybe,
    Nothing,
    Right,
    attempt,
    require_prop,
    safe,
    safe_after,
    safe_head,
    safe_prop,
    to_maybe,
    try_catch,
)

# Task
from .task import (
    Resolver,
    Task,
    TaskExecution,
    delay,
    from_promised,
    parallel,
    task,
    wait_all,
    wait_any,
)

# Errors
from ._errors import (
    EitherProjectionError,
    EmptyMaybeError,
    TaskCancelledError,
    TaskRejectedError,
)

__all__ = (
    # Types
    "AsyncThunk",
    "Canceller",
    "Fn",
    "Path",
    "Predicate",
    "Reducer",
    "Thunk",
    "Transducer",
    # Helpers
    "always",
    "identity",
    "setup_logger",
    "trace",
    "trace_with",
    # Namespaces
    "future",
    "lens",
    "ops",
    # Curry
    "__",
    "Placeholder",
    "complement",
    "compose",
    "curry",
    "curry_n",
    "equals",
    "flip",
    "if_else",
    "pipe",
    "tap",
    "unless",
    "when",
    # Lens
    "Lens",
    "over",
    "path_lens",
    "prop_lens",
    "view",
    # Identity
    "Box",
    "Identity",
    # Maybe
    "Just",
    "Maybe",
    "Nothing",
    "safe",
    "safe_after",
    "safe_head",
    "safe_prop",
    "to_maybe",
    # Either
    "Either",
    "Left",
    "Right",
    "attempt",
    "require_prop",
    "try_catch",
    # Task
    "Resolver",
    "Task",
    "TaskExecution",
    "delay",
    "from_promised",
    "parallel",
    "task",
    "wait_all",
    "wait_any",
    # Errors
    "EitherProjectionError",
    "EmptyMaybeError",
    "TaskCancelledError",
    "TaskRejectedError",
)
