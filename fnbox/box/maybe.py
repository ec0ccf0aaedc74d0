"""
Maybe - short-circuiting over missing values.

A computation either has a value (`Just`) or it has not (`Nothing`). Once a
step produces `Nothing`, every later `map`/`chain` is skipped, which replaces
ladders of `if x is None` checks:

    (
        Maybe.from_empty(prices)
        .chain(safe_head)
        .chain(safe_prop("value"))
        .map(R.divide(__, 100))
        .or_some(0)
    )
"""

from __future__ import annotations

import abc
import typing
from collections.abc import Callable, Sequence

from kungfu import Error, Ok, Result

from .._errors import EmptyMaybeError
from .._types import Predicate
from ..ops.lists import is_empty
from ..ops.objects import get

if typing.TYPE_CHECKING:
    from .either import Either


class Maybe[T](abc.ABC):
    """
    Base of `Just` and `Nothing`.

    Monadic laws:
    - Left identity: Maybe.of(a).chain(f) == f(a)
    - Right identity: m.chain(Maybe.of) == m
    - Associativity: m.chain(f).chain(g) == m.chain(lambda x: f(x).chain(g))
    """

    __slots__ = ()

    # Constructors

    @staticmethod
    def of[V](value: V) -> Maybe[V]:
        return Just(value)

    @staticmethod
    def just[V](value: V) -> Maybe[V]:
        return Just(value)

    @staticmethod
    def nothing() -> Maybe[typing.Any]:
        return Nothing()

    @staticmethod
    def from_nullable[V](value: V | None) -> Maybe[V]:
        """None becomes Nothing, anything else Just."""
        return Nothing() if value is None else Just(value)

    @staticmethod
    def from_falsy[V](value: V) -> Maybe[V]:
        """Falsy values (None, 0, "", [], False...) become Nothing."""
        return Just(value) if value else Nothing()

    @staticmethod
    def from_empty[V](value: V | None) -> Maybe[V]:
        """None and empty strings/collections become Nothing. 0 and False stay Just."""
        if value is None or is_empty(value):
            return Nothing()
        return Just(value)

    # Queries

    @abc.abstractmethod
    def is_just(self) -> bool: ...

    def is_nothing(self) -> bool:
        return not self.is_just()

    def is_some(self) -> bool:
        return self.is_just()

    def is_none(self) -> bool:
        return self.is_nothing()

    # Functor / monad

    @abc.abstractmethod
    def map[U](self, f: Callable[[T], U], /) -> Maybe[U]: ...

    @abc.abstractmethod
    def chain[U](self, f: Callable[[T], Maybe[U]], /) -> Maybe[U]: ...

    def bind[U](self, f: Callable[[T], Maybe[U]], /) -> Maybe[U]:
        return self.chain(f)

    flat_map = bind

    def ap[U](self, fn_maybe: Maybe[Callable[[T], U]], /) -> Maybe[U]:
        """Apply a wrapped function to the wrapped value."""
        return fn_maybe.chain(self.map)

    def filter(self, pred: Predicate[T], /) -> Maybe[T]:
        return self.chain(lambda value: Just(value) if pred(value) else Nothing())

    # Exits

    @abc.abstractmethod
    def cata[U](self, if_nothing: Callable[[], U], if_just: Callable[[T], U], /) -> U: ...

    def fold[U](self, default: U, f: Callable[[T], U], /) -> U:
        return self.cata(lambda: default, f)

    def or_some(self, default: T, /) -> T:
        return self.cata(lambda: default, lambda value: value)

    or_just = or_some

    def or_else_run(self, thunk: Callable[[], T], /) -> T:
        """Like `or_some`, but the default is only computed for Nothing."""
        return self.cata(thunk, lambda value: value)

    def or_else(self, other: Maybe[T], /) -> Maybe[T]:
        return self.cata(lambda: other, lambda _: self)

    @abc.abstractmethod
    def some(self) -> T:
        """The inner value. Raises EmptyMaybeError for Nothing."""

    def to_list(self) -> list[T]:
        return self.cata(list, lambda value: [value])

    def to_either[E](self, failure: E, /) -> Either[E, T]:
        from .either import Left, Right

        return self.cata(lambda: Left(failure), Right)

    def to_result[E](self, error: E, /) -> Result[T, E]:
        """Convert to a kungfu Result, Nothing becomes Error(error)."""
        return self.cata(lambda: Error(error), Ok)


class Just[T](Maybe[T]):
    __slots__ = ("_value",)
    __match_args__ = ("value",)

    def __init__(self, value: T, /) -> None:
        self._value = value

    @property
    def value(self) -> T:
        return self._value

    def is_just(self) -> bool:
        return True

    def map[U](self, f: Callable[[T], U], /) -> Maybe[U]:
        return Just(f(self._value))

    def chain[U](self, f: Callable[[T], Maybe[U]], /) -> Maybe[U]:
        return f(self._value)

    def cata[U](self, if_nothing: Callable[[], U], if_just: Callable[[T], U], /) -> U:
        return if_just(self._value)

    def some(self) -> T:
        return self._value

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Just) and self._value == other._value

    def __hash__(self) -> int:
        return hash((Just, self._value))

    def __repr__(self) -> str:
        return f"Just({self._value!r})"


class Nothing(Maybe[typing.Any]):
    __slots__ = ()
    __match_args__ = ()

    def is_just(self) -> bool:
        return False

    # Will keep returning Nothing
    def map[U](self, f: Callable[[typing.Any], U], /) -> Maybe[U]:
        return self

    def chain[U](self, f: Callable[[typing.Any], Maybe[U]], /) -> Maybe[U]:
        return self

    def cata[U](self, if_nothing: Callable[[], U], if_just: Callable[[typing.Any], U], /) -> U:
        return if_nothing()

    def some(self) -> typing.NoReturn:
        raise EmptyMaybeError()

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Nothing)

    def __hash__(self) -> int:
        return hash(Nothing)

    def __repr__(self) -> str:
        return "Nothing()"


# Helpers


def safe[T](pred: Predicate[T]) -> Callable[[T], Maybe[T]]:
    """Just when `pred` holds, Nothing otherwise."""

    def check(value: T) -> Maybe[T]:
        return Just(value) if pred(value) else Nothing()

    return check


def safe_after[T, U](pred: Predicate[U], fn: Callable[[T], U]) -> Callable[[T], Maybe[U]]:
    """Run `fn`, then keep its result only when `pred` holds."""
    check = safe(pred)

    def run(value: T) -> Maybe[U]:
        return check(fn(value))

    return run


def to_maybe[T](value: T) -> Maybe[T]:
    return Maybe.from_falsy(value)


def safe_head[T](xs: Sequence[T] | None) -> Maybe[T]:
    """First element of a non-empty list, Nothing otherwise (including a None head)."""
    if not isinstance(xs, (list, tuple)) or len(xs) == 0:
        return Nothing()
    return Maybe.from_nullable(xs[0])


def safe_prop(key: typing.Hashable) -> Callable[[typing.Any], Maybe[typing.Any]]:
    def read(obj: typing.Any) -> Maybe[typing.Any]:
        return Maybe.from_nullable(get(obj, key))

    return read


__all__ = (
    "Just",
    "Maybe",
    "Nothing",
    "safe",
    "safe_after",
    "safe_head",
    "safe_prop",
    "to_maybe",
)
