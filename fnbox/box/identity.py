"""
Identity (a.k.a. Box) - the smallest useful functor.

It does nothing but hold a value and let functions be applied to it in a
chain, which makes it a good first step away from nested calls:

    Identity.of("  spongebob  ").map(str.strip).map(str.upper).fold(list)
"""

from __future__ import annotations

import typing
from collections.abc import Callable

from .._helpers import dump


class Identity[T]:
    """
    Functor/monad holding a single value.

    Laws:
    - Identity: m.map(lambda x: x) == m
    - Composition: m.map(f).map(g) == m.map(lambda x: g(f(x)))
    - Left identity: Identity.of(a).chain(f) == f(a)
    - Right identity: m.chain(Identity.of) == m
    """

    __slots__ = ("_value",)
    __match_args__ = ("value",)

    def __init__(self, value: T, /) -> None:
        self._value = value

    @staticmethod
    def of[V](value: V) -> Identity[V]:
        return Identity(value)

    @property
    def value(self) -> T:
        return self._value

    def map[U](self, f: Callable[[T], U], /) -> Identity[U]:
        """Apply `f` to the inner value and re-wrap the result."""
        return Identity(f(self._value))

    def chain[U](self, f: Callable[[T], Identity[U]], /) -> Identity[U]:
        """Apply a function that already returns an Identity."""
        return f(self._value)

    def ap[U](self, fn_box: Identity[Callable[[T], U]], /) -> Identity[U]:
        return Identity(fn_box.value(self._value))

    def fold[U](self, f: Callable[[T], U], /) -> U:
        """Leave the box: apply `f` and return its raw result."""
        return f(self._value)

    def inspect(self) -> str:
        return f"Identity({dump(self._value)})"

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Identity) and self._value == other._value

    def __hash__(self) -> int:
        return hash((Identity, self._value))

    def __repr__(self) -> str:
        return self.inspect()


# Otherwise known as Box
Box = Identity

__all__ = ("Box", "Identity")
