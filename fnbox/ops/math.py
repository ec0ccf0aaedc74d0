"""Curried arithmetic."""

from __future__ import annotations

import typing

from ..curry import curry

type Num = typing.Any


@curry
def add(a: Num, b: Num) -> Num:
    return a + b


@curry
def subtract(a: Num, b: Num) -> Num:
    return a - b


@curry
def multiply(a: Num, b: Num) -> Num:
    return a * b


@curry
def divide(a: Num, b: Num) -> Num:
    """a / b. Use `divide(__, 2)` to halve."""
    return a / b


@curry
def mod(a: Num, b: Num) -> Num:
    """Remainder of `b` divided by `a`, so `mod(2)` reads as "remainder by 2"."""
    return b % a


def inc(x: Num) -> Num:
    return x + 1


def dec(x: Num) -> Num:
    return x - 1


def negate(x: Num) -> Num:
    return -x


__all__ = ("add", "dec", "divide", "inc", "mod", "multiply", "negate", "subtract")
