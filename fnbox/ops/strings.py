"""String helpers, data-last and curried."""

from __future__ import annotations

import re
import typing
from collections.abc import Callable, Iterable

from ..curry import curry

type Pattern = str | re.Pattern[str]


@curry
def split(sep: Pattern, s: str) -> list[str]:
    """
    Split `s` on `sep`.

    An empty separator splits into characters, a compiled pattern splits on
    regex matches.
    """
    if isinstance(sep, re.Pattern):
        return sep.split(s)
    if sep == "":
        return list(s)
    return s.split(sep)


@curry
def join(sep: str, xs: Iterable[typing.Any]) -> str:
    return sep.join(str(x) for x in xs)


def trim(s: str) -> str:
    return s.strip()


def to_upper(s: str) -> str:
    return s.upper()


def to_lower(s: str) -> str:
    return s.lower()


@curry
def test(pattern: Pattern, s: str) -> bool:
    """
    True when `pattern` matches anywhere in `s`.

    Flags travel with a compiled pattern: `test(re.compile("q", re.I))`.
    """
    return re.search(pattern, s) is not None


@curry
def replace(
    pattern: Pattern,
    replacement: str | Callable[[re.Match[str]], str],
    s: str,
) -> str:
    """Replace every literal occurrence, or every regex match for a compiled pattern."""
    if isinstance(pattern, re.Pattern):
        return pattern.sub(replacement, s)
    if callable(replacement):
        return re.sub(re.escape(pattern), replacement, s)
    return s.replace(pattern, replacement)


_SEPARATED = re.compile(r"[-_]([a-z])")


def camel_case(s: str) -> str:
    """snake_case / kebab-case to camelCase: "a_one" -> "aOne"."""
    return _SEPARATED.sub(lambda match: match.group(1).upper(), s)


__all__ = (
    "camel_case",
    "join",
    "replace",
    "split",
    "test",
    "to_lower",
    "to_upper",
    "trim",
)
