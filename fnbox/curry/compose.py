"""Function composition: pipe (left to right) and compose (right to left)."""

from __future__ import annotations

import typing
from collections.abc import Callable

from .curry import curry


def pipe(*fns: Callable[..., typing.Any]) -> Callable[..., typing.Any]:
    """
    Left-to-right composition.

    The first function may take any arguments, the rest must be unary.

    Example:
        calc = pipe(R.add(3), R.multiply(3), R.divide(__, 2))
        calc(5)  # 12.0
    """
    if not fns:
        raise ValueError("pipe requires at least one function")
    first, *rest = fns

    def piped(*args: typing.Any, **kwargs: typing.Any) -> typing.Any:
        result = first(*args, **kwargs)
        for fn in rest:
            result = fn(result)
        return result

    return piped


def compose(*fns: Callable[..., typing.Any]) -> Callable[..., typing.Any]:
    """Right-to-left composition: compose(f, g)(x) == f(g(x))."""
    if not fns:
        raise ValueError("compose requires at least one function")
    return pipe(*reversed(fns))


@curry
def flip[A, B, R](fn: Callable[[A, B], R], b: B, a: A) -> R:
    """Call `fn` with its first two arguments swapped."""
    return fn(a, b)


@curry
def tap[T](fn: Callable[[T], typing.Any], x: T) -> T:
    """Run `fn` for its side effect and pass `x` through."""
    fn(x)
    return x


@curry
def converge[R](
    after: Callable[..., R],
    branches: typing.Sequence[Callable[..., typing.Any]],
    x: typing.Any,
) -> R:
    """Feed `x` to every branch, then pass the results to `after`."""
    return after(*(branch(x) for branch in branches))


__all__ = ("compose", "converge", "flip", "pipe", "tap")
