"""
Transducers: reducer composition.

`mapping` and `filtering` turn a step function into another step function,
so a whole map/filter chain runs in a single pass over the input. Compose
them with `compose`; data flows through the steps left to right.

    xform = compose(R.filtering(has_x), R.mapping(add_y))
    R.into([], xform, rows)
"""

from __future__ import annotations

import typing
from collections.abc import Callable, Iterable

from .._types import Predicate, Reducer, Transducer
from ..curry import curry


class Reduced[Acc]:
    """Accumulator wrapper that stops a transduction early."""

    __slots__ = ("value",)
    __match_args__ = ("value",)

    def __init__(self, value: Acc) -> None:
        self.value = value

    def __repr__(self) -> str:
        return f"Reduced({self.value!r})"


def mapping[Acc, A, B](fn: Callable[[A], B]) -> Transducer[Acc, A, B]:
    def xform(step: Reducer[Acc, B]) -> Reducer[Acc, A]:
        def reducer(acc: Acc, x: A) -> Acc:
            return step(acc, fn(x))

        return reducer

    return xform


def filtering[Acc, A](pred: Predicate[A]) -> Transducer[Acc, A, A]:
    def xform(step: Reducer[Acc, A]) -> Reducer[Acc, A]:
        def reducer(acc: Acc, x: A) -> Acc:
            return step(acc, x) if pred(x) else acc

        return reducer

    return xform


def taking[Acc, A](n: int) -> Transducer[Acc, A, A]:
    """Pass through the first `n` elements, then stop."""

    def xform(step: Reducer[Acc, A]) -> Reducer[Acc, A]:
        remaining = n

        def reducer(acc: Acc, x: A) -> typing.Any:
            nonlocal remaining
            if remaining <= 0:
                return Reduced(acc)
            remaining -= 1
            result = step(acc, x)
            if remaining == 0 and not isinstance(result, Reduced):
                return Reduced(result)
            return result

        return reducer

    return xform


@curry
def transduce[Acc, A, B](
    xform: Transducer[Acc, A, B],
    step: Reducer[Acc, B],
    initial: Acc,
    xs: Iterable[A],
) -> Acc:
    reducer = xform(step)
    acc: typing.Any = initial
    for x in xs:
        acc = reducer(acc, x)
        if isinstance(acc, Reduced):
            return acc.value
    return acc


def _append_step(acc: list[typing.Any], x: typing.Any) -> list[typing.Any]:
    acc.append(x)
    return acc


def _assoc_step(acc: dict[typing.Any, typing.Any], pair: typing.Any) -> dict[typing.Any, typing.Any]:
    key, value = pair
    acc[key] = value
    return acc


def _concat_step(acc: str, x: typing.Any) -> str:
    return acc + str(x)


@curry
def into(acc: typing.Any, xform: Transducer[typing.Any, typing.Any, typing.Any], xs: Iterable[typing.Any]) -> typing.Any:
    """
    Transduce `xs` into a copy of `acc`.

    Lists collect elements, dicts collect (key, value) pairs, strings concatenate.
    """
    if isinstance(acc, list):
        return transduce(xform, _append_step, list(acc), xs)
    if isinstance(acc, dict):
        return transduce(xform, _assoc_step, dict(acc), xs)
    if isinstance(acc, str):
        return transduce(xform, _concat_step, acc, xs)
    raise TypeError(f"Cannot transduce into {type(acc).__name__}")


__all__ = ("Reduced", "filtering", "into", "mapping", "taking", "transduce")
