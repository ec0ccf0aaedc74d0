"""
Functor and monad containers: Identity (Box), Maybe, Either.

All containers are immutable, compare by value and work with `match`:

    match get_customer(values):
        case Right(customer):
            ...
        case Left(reason):
            ...
"""

from .either import Either, Left, Right, attempt, require_prop, try_catch
from .identity import Box, Identity
from .maybe import Just, Maybe, Nothing, safe, safe_after, safe_head, safe_prop, to_maybe

__all__ = (
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
)
