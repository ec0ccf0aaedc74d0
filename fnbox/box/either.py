"""
Either - branching with two tracks.

`Right` carries a success and keeps flowing through `map`/`chain`; `Left`
carries a failure and jumps straight to the end of the pipeline, where
`fold` decides what to do with either side:

    (
        Either.of(values)
        .chain(require_prop("id"))
        .chain(try_catch(get_customer_meta))
        .fold(lambda error: error, lambda customer: customer)
    )
"""

from __future__ import annotations

import abc
import typing
from collections.abc import Callable, Hashable

from kungfu import Error, Ok, Result

from .._errors import EitherProjectionError
from ..ops.objects import get

if typing.TYPE_CHECKING:
    from .maybe import Maybe


class Either[E, T](abc.ABC):
    """
    Base of `Left` and `Right`.

    Monadic laws:
    - Left identity: Either.of(a).chain(f) == f(a)
    - Right identity: m.chain(Either.of) == m
    - Associativity: m.chain(f).chain(g) == m.chain(lambda x: f(x).chain(g))
    """

    __slots__ = ("_value",)

    def __init__(self, value: typing.Any, /) -> None:
        self._value = value

    @property
    def value(self) -> typing.Any:
        return self._value

    # Constructors

    @staticmethod
    def of[V](value: V) -> Either[typing.Any, V]:
        return Right(value)

    @staticmethod
    def right[V](value: V) -> Either[typing.Any, V]:
        return Right(value)

    @staticmethod
    def left[F](value: F) -> Either[F, typing.Any]:
        return Left(value)

    @staticmethod
    def from_nullable[F, V](value: V | None, left_value: F) -> Either[F, V]:
        return Left(left_value) if value is None else Right(value)

    @staticmethod
    def from_result[F, V](result: Result[V, F]) -> Either[F, V]:
        """Convert a kungfu Result: Ok -> Right, Error -> Left."""
        match result:
            case Ok(value):
                return Right(value)
            case Error(error):
                return Left(error)
        raise TypeError(f"Expected a Result, got {result!r}")

    # Queries

    @abc.abstractmethod
    def is_right(self) -> bool: ...

    def is_left(self) -> bool:
        return not self.is_right()

    # Functor / monad

    def map[U](self, f: Callable[[T], U], /) -> Either[E, U]:
        return Right(f(self._value)) if self.is_right() else typing.cast(Either[E, U], self)

    def left_map[F](self, f: Callable[[E], F], /) -> Either[F, T]:
        return Left(f(self._value)) if self.is_left() else typing.cast(Either[F, T], self)

    def bimap[F, U](self, on_left: Callable[[E], F], on_right: Callable[[T], U], /) -> Either[F, U]:
        return Right(on_right(self._value)) if self.is_right() else Left(on_left(self._value))

    def chain[U](self, f: Callable[[T], Either[E, U]], /) -> Either[E, U]:
        return f(self._value) if self.is_right() else typing.cast(Either[E, U], self)

    def bind[U](self, f: Callable[[T], Either[E, U]], /) -> Either[E, U]:
        return self.chain(f)

    flat_map = bind

    def ap[U](self, fn_either: Either[E, Callable[[T], U]], /) -> Either[E, U]:
        return fn_either.chain(self.map)

    def or_else[F](self, f: Callable[[E], Either[F, T]], /) -> Either[F, T]:
        """Chain on the left track: give a failure a chance to recover."""
        return f(self._value) if self.is_left() else typing.cast(Either[F, T], self)

    def swap(self) -> Either[T, E]:
        return Left(self._value) if self.is_right() else Right(self._value)

    # Exits

    def fold[U](self, on_left: Callable[[E], U], on_right: Callable[[T], U], /) -> U:
        return on_right(self._value) if self.is_right() else on_left(self._value)

    cata = fold

    def get_or_else(self, default: T, /) -> T:
        return self._value if self.is_right() else default

    def right_value(self) -> T:
        """Success value. Raises EitherProjectionError on a Left."""
        if self.is_right():
            return self._value
        raise EitherProjectionError("Right")

    def left_value(self) -> E:
        """Failure value. Raises EitherProjectionError on a Right."""
        if self.is_left():
            return self._value
        raise EitherProjectionError("Left")

    def to_maybe(self) -> Maybe[T]:
        from .maybe import Just, Nothing

        return Just(self._value) if self.is_right() else Nothing()

    def to_result(self) -> Result[T, E]:
        """Convert to a kungfu Result: Right -> Ok, Left -> Error."""
        return Ok(self._value) if self.is_right() else Error(self._value)

    def __eq__(self, other: object) -> bool:
        return type(other) is type(self) and self._value == typing.cast(Either[E, T], other)._value

    def __hash__(self) -> int:
        return hash((type(self), self._value))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._value!r})"


class Right[T](Either[typing.Any, T]):
    __slots__ = ()
    __match_args__ = ("value",)

    def is_right(self) -> bool:
        return True


class Left[E](Either[E, typing.Any]):
    __slots__ = ()
    __match_args__ = ("value",)

    # Notice `map` and `chain` never run functions on this track
    def is_right(self) -> bool:
        return False


# Helpers


def try_catch[T](fn: Callable[..., T]) -> Callable[..., Either[Exception, T]]:
    """
    Turn an exception-raising function into one returning Either.

    Example:
        safe_meta = try_catch(get_customer_meta)
        safe_meta(None)  # Left(ValueError("ID is missing"))

    NOTE: Catches Exception subclasses only, like `L.catching` does for Result.
    """

    def attempted(*args: typing.Any, **kwargs: typing.Any) -> Either[Exception, T]:
        try:
            return Right(fn(*args, **kwargs))
        except Exception as exc:
            return Left(exc)

    return attempted


def attempt[T](thunk: Callable[[], T]) -> Either[Exception, T]:
    """Run `thunk` now, Right with its value or Left with the exception."""
    return try_catch(thunk)()


def require_prop(key: Hashable) -> Callable[[typing.Any], Either[str, typing.Any]]:
    """Right with `obj[key]`, or Left("<key> is required") when it is missing or falsy."""

    def read(obj: typing.Any) -> Either[str, typing.Any]:
        value = get(obj, key)
        return Right(value) if value else Left(f"{key} is required")

    return read


__all__ = (
    "Either",
    "Left",
    "Right",
    "attempt",
    "require_prop",
    "try_catch",
)
