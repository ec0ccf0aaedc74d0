"""
Lenses: composable getter/setter pairs over immutable data.

A lens focuses on one spot inside a structure. `view` reads it, `set`
replaces it and `over` transforms it; both writers return a new structure
and leave the input untouched.

Lens laws:
- Get-put: set(l, view(l, s), s) == s, for a focus present in `s`. A missing
  key views as None, and setting None writes the key.
- Put-get: view(l, set(l, v, s)) == v
- Put-put: set(l, b, set(l, a, s)) == set(l, b, s)
"""

from __future__ import annotations

import typing
from collections.abc import Callable, Hashable

from .._types import Path
from ..curry import curry
from ..ops.objects import assoc, get


class Lens[S, A]:
    """Getter/setter pair focusing on an `A` inside an `S`."""

    __slots__ = ("_getter", "_setter")

    def __init__(
        self,
        getter: Callable[[S], A],
        setter: Callable[[A, S], S],
        /,
    ) -> None:
        self._getter = getter
        self._setter = setter

    def get(self, target: S) -> A:
        return self._getter(target)

    def put(self, value: A, target: S) -> S:
        return self._setter(value, target)

    def modify(self, fn: Callable[[A], A], target: S) -> S:
        return self._setter(fn(self._getter(target)), target)

    def compose[B](self, other: Lens[A, B], /) -> Lens[S, B]:
        """Focus deeper: `other` is applied inside this lens's focus."""

        def getter(target: S) -> B:
            return other.get(self.get(target))

        def setter(value: B, target: S) -> S:
            return self.put(other.put(value, self.get(target)), target)

        return Lens(getter, setter)

    def __truediv__[B](self, other: Lens[A, B]) -> Lens[S, B]:
        """`filters_lens / active_lens` reads as a path."""
        return self.compose(other)


def lens[S, A](getter: Callable[[S], A], setter: Callable[[A, S], S]) -> Lens[S, A]:
    return Lens(getter, setter)


def prop_lens(key: Hashable) -> Lens[typing.Any, typing.Any]:
    """Lens onto a dict key (or object attribute for reads)."""
    return Lens(lambda target: get(target, key), lambda value, target: assoc(key, value, target))


def _put_index(index: int, value: typing.Any, target: typing.Any) -> list[typing.Any]:
    copied = list(target or [])
    position = index + len(copied) if index < 0 else index
    if position < 0:
        raise IndexError(f"index {index} out of range for length {len(copied)}")
    return assoc(position, value, copied)


def index_lens(index: int) -> Lens[typing.Any, typing.Any]:
    """Lens onto a list index; negative indexes count from the end."""
    return Lens(lambda target: get(target, index), lambda value, target: _put_index(index, value, target))


def path_lens(keys: Path) -> Lens[typing.Any, typing.Any]:
    """
    Lens onto a nested path; ints select list indexes, anything else dict keys.

    Example:
        active_filters = path_lens(["filters", "active"])
        view(active_filters, {"filters": {"active": [1]}})  # [1]
    """
    lenses = [index_lens(key) if isinstance(key, int) else prop_lens(key) for key in keys]
    if not lenses:
        return Lens(lambda target: target, lambda value, _: value)
    return compose_lenses(*lenses)


def compose_lenses(*lenses: Lens[typing.Any, typing.Any]) -> Lens[typing.Any, typing.Any]:
    """Outermost lens first."""
    if not lenses:
        raise ValueError("compose_lenses requires at least one lens")
    first, *rest = lenses
    for inner in rest:
        first = first.compose(inner)
    return first


@curry
def view[S, A](lens: Lens[S, A], target: S) -> A:
    return lens.get(target)


@curry
def set[S, A](lens: Lens[S, A], value: A, target: S) -> S:
    return lens.put(value, target)


@curry
def over[S, A](lens: Lens[S, A], fn: Callable[[A], A], target: S) -> S:
    return lens.modify(fn, target)


__all__ = (
    "Lens",
    "compose_lenses",
    "index_lens",
    "lens",
    "over",
    "path_lens",
    "prop_lens",
    "set",
    "view",
)
