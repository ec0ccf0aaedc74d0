"""
Currying with placeholder support.

A curried function collects positional arguments across calls until it has
enough of them, then calls the wrapped function. `__` reserves a slot to be
filled by a later call.
"""

from __future__ import annotations

import inspect
import typing
from collections.abc import Callable
from functools import wraps


class Placeholder:
    """Marker for an argument slot that a later call fills in."""

    __slots__ = ()
    _instance: typing.ClassVar[Placeholder | None] = None

    def __new__(cls) -> Placeholder:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "__"


__ = Placeholder()


def arity_of(fn: Callable[..., typing.Any]) -> int:
    """
    Number of required positional parameters of `fn`.

    Raises TypeError when the signature cannot be inspected (some builtins);
    use `curry_n` with an explicit arity in that case.
    """
    try:
        signature = inspect.signature(fn)
    except (TypeError, ValueError) as exc:
        raise TypeError(
            f"Cannot infer arity of {fn!r}, use curry_n(arity, fn)"
        ) from exc

    positional = (
        inspect.Parameter.POSITIONAL_ONLY,
        inspect.Parameter.POSITIONAL_OR_KEYWORD,
    )
    return sum(
        1
        for param in signature.parameters.values()
        if param.kind in positional and param.default is inspect.Parameter.empty
    )


def _fill(
    received: tuple[typing.Any, ...],
    args: tuple[typing.Any, ...],
) -> tuple[typing.Any, ...]:
    # Placeholders consume new args first, leftovers are appended.
    pending = iter(args)
    combined: list[typing.Any] = []
    for value in received:
        if value is __:
            combined.append(next(pending, __))
        else:
            combined.append(value)
    combined.extend(pending)
    return tuple(combined)


def _curried[R](
    fn: Callable[..., R],
    arity: int,
    received: tuple[typing.Any, ...],
    received_kwargs: dict[str, typing.Any],
) -> Callable[..., typing.Any]:
    @wraps(fn)
    def curried(*args: typing.Any, **kwargs: typing.Any) -> typing.Any:
        combined = _fill(received, args)
        merged_kwargs = {**received_kwargs, **kwargs}
        head = combined[:arity]
        if len(head) == arity and not any(value is __ for value in head):
            extra = tuple(value for value in combined[arity:] if value is not __)
            return fn(*head, *extra, **merged_kwargs)
        return _curried(fn, arity, combined, merged_kwargs)

    return curried


def curry_n[R](arity: int, fn: Callable[..., R]) -> Callable[..., typing.Any]:
    """
    Curry `fn` with an explicit arity.

    Example:
        add3 = curry_n(3, lambda *xs: sum(xs))
        add3(1)(2)(3)  # 6
    """
    if arity < 0:
        raise ValueError(f"arity must be non-negative, got {arity}")
    return _curried(fn, arity, (), {})


def curry[R](fn: Callable[..., R]) -> Callable[..., typing.Any]:
    """
    Curry `fn` using the number of its required positional parameters.

    Example:
        @curry
        def add(a, b):
            return a + b

        add(1)(2)      # 3
        add(1, 2)      # 3
        add(__, 2)(1)  # 3
    """
    return curry_n(arity_of(fn), fn)


__all__ = ("Placeholder", "__", "arity_of", "curry", "curry_n")
