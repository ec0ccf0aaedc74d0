"""
List helpers, data-last and curried.

Names follow the usual FP vocabulary (`map`, `filter`, `reduce`, `sum`),
so import the namespace rather than the names:

    from fnbox import ops as R

    R.map(R.to_upper, ["a", "b"])

Inputs are never mutated; every helper returns a new list.
"""

from __future__ import annotations

import builtins
import functools
import typing
from collections.abc import Callable, Hashable, Iterable, Sequence

from .._types import Predicate
from ..curry import curry


def head[T](xs: Sequence[T]) -> T | None:
    """First element, or None for an empty sequence."""
    return xs[0] if len(xs) > 0 else None


def last[T](xs: Sequence[T]) -> T | None:
    """Last element, or None for an empty sequence."""
    return xs[-1] if len(xs) > 0 else None


@curry
def nth[T](index: int, xs: Sequence[T]) -> T | None:
    """Element at `index` (negative counts from the end), or None."""
    if -len(xs) <= index < len(xs):
        return xs[index]
    return None


def tail[T](xs: Sequence[T]) -> Sequence[T]:
    return xs[1:]


def init[T](xs: Sequence[T]) -> Sequence[T]:
    return xs[:-1]


@curry
def map[T, U](fn: Callable[[T], U], xs: Iterable[T] | dict[typing.Any, T]) -> typing.Any:
    """Map over a list, or over the values of a dict."""
    if isinstance(xs, dict):
        return {key: fn(value) for key, value in xs.items()}
    return [fn(x) for x in xs]


@curry
def filter[T](pred: Predicate[T], xs: Iterable[T] | dict[typing.Any, T]) -> typing.Any:
    """Keep the elements (or dict values) satisfying `pred`."""
    if isinstance(xs, dict):
        return {key: value for key, value in xs.items() if pred(value)}
    return [x for x in xs if pred(x)]


@curry
def reject[T](pred: Predicate[T], xs: Iterable[T]) -> list[T]:
    return [x for x in xs if not pred(x)]


@curry
def reduce[Acc, T](fn: Callable[[Acc, T], Acc], initial: Acc, xs: Iterable[T]) -> Acc:
    return functools.reduce(fn, xs, initial)


@curry
def find[T](pred: Predicate[T], xs: Iterable[T]) -> T | None:
    return next((x for x in xs if pred(x)), None)


@curry
def find_index[T](pred: Predicate[T], xs: Iterable[T]) -> int:
    """Index of the first match, -1 when nothing matches."""
    return next((i for i, x in enumerate(xs) if pred(x)), -1)


def flatten(xs: Iterable[typing.Any]) -> list[typing.Any]:
    """Flatten nested lists and tuples to any depth."""
    flat: list[typing.Any] = []
    for x in xs:
        if isinstance(x, (list, tuple)):
            flat.extend(flatten(x))
        else:
            flat.append(x)
    return flat


@curry
def chain[T, U](fn: Callable[[T], Iterable[U]], xs: Iterable[T]) -> list[U]:
    """Map then flatten one level."""
    return [y for x in xs for y in fn(x)]


@curry
def remove[T](start: int, count: int, xs: Sequence[T]) -> list[T]:
    """Drop `count` elements starting at `start`."""
    return [*xs[:start], *xs[start + count :]]


@curry
def adjust[T](index: int, fn: Callable[[T], T], xs: Sequence[T]) -> list[T]:
    """Apply `fn` to the element at `index`. Out-of-range indexes leave a copy."""
    adjusted = list(xs)
    if -len(adjusted) <= index < len(adjusted):
        adjusted[index] = fn(adjusted[index])
    return adjusted


@curry
def update[T](index: int, value: T, xs: Sequence[T]) -> list[T]:
    return adjust(index, lambda _: value, xs)


@curry
def append[T](x: T, xs: Sequence[T]) -> list[T]:
    return [*xs, x]


@curry
def prepend[T](x: T, xs: Sequence[T]) -> list[T]:
    return [x, *xs]


@curry
def take[T](n: int, xs: Sequence[T]) -> Sequence[T]:
    return xs[: builtins.max(n, 0)]


@curry
def drop[T](n: int, xs: Sequence[T]) -> Sequence[T]:
    return xs[builtins.max(n, 0) :]


def reverse[T](xs: Sequence[T]) -> Sequence[T]:
    """Reverse a list or a string."""
    if isinstance(xs, str):
        return xs[::-1]
    return list(xs)[::-1]


def sum(xs: Iterable[typing.Any]) -> typing.Any:
    return builtins.sum(xs)


@curry
def sum_by[T](fn: Callable[[T], typing.Any], xs: Iterable[T]) -> typing.Any:
    """
    Sum `fn(x)` over `xs`.

    Example:
        sum_by(R.prop("a"), [{"a": 2}, {"a": 4}])  # 6
    """
    return builtins.sum(fn(x) for x in xs)


def length(xs: typing.Sized) -> int:
    return len(xs)


def is_empty(x: typing.Any) -> bool:
    """True for empty strings, lists, dicts, tuples and sets. None is not empty."""
    if isinstance(x, (str, list, dict, tuple, set, frozenset)):
        return len(x) == 0
    return False


def has_value(x: typing.Any) -> bool:
    return not is_empty(x)


def uniq[T](xs: Iterable[T]) -> list[T]:
    """Drop duplicates, keeping first occurrences in order."""
    seen: list[T] = []
    for x in xs:
        if x not in seen:
            seen.append(x)
    return seen


@curry
def group_by[T, K: Hashable](fn: Callable[[T], K], xs: Iterable[T]) -> dict[K, list[T]]:
    groups: dict[K, list[T]] = {}
    for x in xs:
        groups.setdefault(fn(x), []).append(x)
    return groups


@curry
def sort_by[T](fn: Callable[[T], typing.Any], xs: Iterable[T]) -> list[T]:
    return sorted(xs, key=fn)


@curry
def zip_obj[K: Hashable, V](keys: Iterable[K], vals: Iterable[V]) -> dict[K, V]:
    return dict(zip(keys, vals))


@curry
def range_(start: int, stop: int) -> list[int]:
    return list(range(start, stop))


__all__ = (
    "adjust",
    "append",
    "chain",
    "drop",
    "filter",
    "find",
    "find_index",
    "flatten",
    "group_by",
    "has_value",
    "head",
    "init",
    "is_empty",
    "last",
    "length",
    "map",
    "nth",
    "prepend",
    "range_",
    "reduce",
    "reject",
    "remove",
    "reverse",
    "sort_by",
    "sum",
    "sum_by",
    "tail",
    "take",
    "uniq",
    "update",
    "zip_obj",
)
