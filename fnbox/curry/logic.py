"""Curried predicates and branching helpers."""

from __future__ import annotations

import typing
from collections.abc import Callable, Iterable

from .._types import Predicate
from .curry import curry


@curry
def equals(a: typing.Any, b: typing.Any) -> bool:
    return a == b


def complement[T](pred: Predicate[T]) -> Predicate[T]:
    """Negate a predicate."""

    def negated(*args: typing.Any) -> bool:
        return not pred(*args)

    return negated


@curry
def when[T](pred: Predicate[T], fn: Callable[[T], T], x: T) -> T:
    """Apply `fn` when `pred` holds, otherwise return `x` untouched."""
    return fn(x) if pred(x) else x


@curry
def unless[T](pred: Predicate[T], fn: Callable[[T], T], x: T) -> T:
    return x if pred(x) else fn(x)


@curry
def if_else[T, R](
    pred: Predicate[T],
    on_true: Callable[[T], R],
    on_false: Callable[[T], R],
    x: T,
) -> R:
    return on_true(x) if pred(x) else on_false(x)


@curry
def both[T](p: Predicate[T], q: Predicate[T], x: T) -> bool:
    return bool(p(x) and q(x))


@curry
def either[T](p: Predicate[T], q: Predicate[T], x: T) -> bool:
    return bool(p(x) or q(x))


@curry
def all_pass[T](preds: Iterable[Predicate[T]], x: T) -> bool:
    return all(pred(x) for pred in preds)


@curry
def any_pass[T](preds: Iterable[Predicate[T]], x: T) -> bool:
    return any(pred(x) for pred in preds)


@curry
def default_to[T](default: T, x: T | None) -> T:
    """`x` unless it is None."""
    return default if x is None else x


__all__ = (
    "all_pass",
    "any_pass",
    "both",
    "complement",
    "default_to",
    "either",
    "equals",
    "if_else",
    "unless",
    "when",
)
