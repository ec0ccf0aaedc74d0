"""Currying, composition and logic helpers."""

from .compose import compose, converge, flip, pipe, tap
from .curry import Placeholder, __, arity_of, curry, curry_n
from .logic import (
    all_pass,
    any_pass,
    both,
    complement,
    default_to,
    either,
    equals,
    if_else,
    unless,
    when,
)

__all__ = (
    "Placeholder",
    "__",
    "all_pass",
    "any_pass",
    "arity_of",
    "both",
    "complement",
    "compose",
    "converge",
    "curry",
    "curry_n",
    "default_to",
    "either",
    "equals",
    "flip",
    "if_else",
    "pipe",
    "tap",
    "unless",
    "when",
)
