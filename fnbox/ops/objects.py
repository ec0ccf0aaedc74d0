"""
Dict helpers, data-last and curried.

Lookups are forgiving: a missing key, an out-of-range index or a None in the
middle of a path all read as None. Writers return fresh copies.
"""

from __future__ import annotations

import typing
from collections.abc import Callable, Hashable, Iterable, Mapping, Sequence

from .._types import Path, Predicate
from ..curry import curry, when
from .lists import map as map_list


def get(obj: typing.Any, key: Hashable) -> typing.Any:
    """Read one key or index from a dict, list or object, None when absent."""
    if obj is None:
        return None
    if isinstance(obj, Mapping):
        return obj.get(key)
    if isinstance(obj, Sequence) and not isinstance(obj, str) and isinstance(key, int):
        return obj[key] if -len(obj) <= key < len(obj) else None
    if isinstance(key, str):
        return getattr(obj, key, None)
    return None


@curry
def prop(key: Hashable, obj: typing.Any) -> typing.Any:
    return get(obj, key)


@curry
def prop_or(default: typing.Any, key: Hashable, obj: typing.Any) -> typing.Any:
    value = get(obj, key)
    return default if value is None else value


@curry
def prop_eq(key: Hashable, value: typing.Any, obj: typing.Any) -> bool:
    return get(obj, key) == value


@curry
def path(keys: Path, obj: typing.Any) -> typing.Any:
    """
    Read a nested value.

    Example:
        path(["general", "observations"], values)
    """
    current = obj
    for key in keys:
        current = get(current, key)
        if current is None:
            return None
    return current


@curry
def path_or(default: typing.Any, keys: Path, obj: typing.Any) -> typing.Any:
    value = path(keys, obj)
    return default if value is None else value


@curry
def path_satisfies(pred: Predicate[typing.Any], keys: Path, obj: typing.Any) -> bool:
    return bool(pred(path(keys, obj)))


@curry
def where(spec: Mapping[Hashable, Predicate[typing.Any]], obj: typing.Any) -> bool:
    """True when every predicate in `spec` holds for the matching key of `obj`."""
    if obj is None:
        return False
    return all(pred(get(obj, key)) for key, pred in spec.items())


def _as_dict(obj: typing.Any) -> dict[typing.Any, typing.Any]:
    return dict(obj) if isinstance(obj, Mapping) else {}


@curry
def merge_left(a: Mapping[typing.Any, typing.Any], b: typing.Any) -> dict[typing.Any, typing.Any]:
    """Merge two dicts, keys of `a` win. A non-dict `b` counts as empty."""
    return {**_as_dict(b), **_as_dict(a)}


@curry
def merge_right(a: typing.Any, b: Mapping[typing.Any, typing.Any]) -> dict[typing.Any, typing.Any]:
    """Merge two dicts, keys of `b` win."""
    return {**_as_dict(a), **_as_dict(b)}


def merge_all(dicts: Iterable[Mapping[typing.Any, typing.Any]]) -> dict[typing.Any, typing.Any]:
    merged: dict[typing.Any, typing.Any] = {}
    for d in dicts:
        merged.update(d)
    return merged


def to_pairs(obj: Mapping[typing.Any, typing.Any]) -> list[tuple[typing.Any, typing.Any]]:
    return list(obj.items())


def from_pairs(pairs: Iterable[tuple[typing.Any, typing.Any]]) -> dict[typing.Any, typing.Any]:
    return dict(pairs)


def keys(obj: Mapping[typing.Any, typing.Any]) -> list[typing.Any]:
    return list(obj.keys())


def values(obj: Mapping[typing.Any, typing.Any]) -> list[typing.Any]:
    return list(obj.values())


@curry
def assoc(key: Hashable, value: typing.Any, obj: typing.Any) -> typing.Any:
    """Copy of `obj` with `key` set. Lists take int keys and grow with None as needed."""
    if isinstance(key, int) and isinstance(obj, (list, tuple)):
        copied = list(obj)
        if key >= len(copied):
            copied.extend([None] * (key + 1 - len(copied)))
        copied[key] = value
        return copied
    return {**_as_dict(obj), key: value}


@curry
def assoc_path(keys: Path, value: typing.Any, obj: typing.Any) -> typing.Any:
    """Copy of `obj` with a nested value set, creating dicts (or lists for int keys) on the way."""
    if len(keys) == 0:
        return value
    key, *rest = keys
    child = get(obj, key)
    if rest and child is None:
        child = [] if isinstance(rest[0], int) else {}
    return assoc(key, assoc_path(rest, value, child), obj)


@curry
def dissoc(key: Hashable, obj: Mapping[typing.Any, typing.Any]) -> dict[typing.Any, typing.Any]:
    return {k: v for k, v in obj.items() if k != key}


@curry
def pick(names: Iterable[Hashable], obj: Mapping[typing.Any, typing.Any]) -> dict[typing.Any, typing.Any]:
    wanted = list(names)
    return {k: v for k, v in obj.items() if k in wanted}


@curry
def omit(names: Iterable[Hashable], obj: Mapping[typing.Any, typing.Any]) -> dict[typing.Any, typing.Any]:
    unwanted = list(names)
    return {k: v for k, v in obj.items() if k not in unwanted}


@curry
def merge_when(
    pred: Predicate[typing.Any],
    obj: Mapping[typing.Any, typing.Any],
    xs: typing.Any,
) -> typing.Any:
    """
    Merge `obj` into every element (or dict value) that satisfies `pred`.

    Example:
        merge_when(R.prop_eq("a", 3), {"d": 3}, rows)
    """
    return map_list(when(pred, merge_left(obj)), xs)


def reduce_nodes(
    fn: Callable[[typing.Any, typing.Any], Mapping[typing.Any, typing.Any]],
) -> Callable[[typing.Any], typing.Any]:
    """
    Build a recursive rewriter for nested dicts and lists.

    `fn(key, value)` returns the dict fragment that replaces each entry;
    fragments are merged in order. Lists are rewritten element-wise, other
    values are returned untouched.
    """

    def rewrite(data: typing.Any) -> typing.Any:
        if isinstance(data, list):
            return [rewrite(item) for item in data]
        if isinstance(data, Mapping):
            return merge_all(fn(key, value) for key, value in data.items())
        return data

    return rewrite


@curry
def map_keys(fn: Callable[[typing.Any], typing.Any], data: typing.Any) -> typing.Any:
    """
    Rename keys at every depth.

    Example:
        map_keys(R.camel_case, {"a_one": [{"b_two": {}}]})
        # {"aOne": [{"bTwo": {}}]}
    """

    def rename(key: typing.Any, value: typing.Any) -> dict[typing.Any, typing.Any]:
        return {fn(key): convert(value)}

    convert = reduce_nodes(rename)
    return convert(data)


__all__ = (
    "assoc",
    "assoc_path",
    "dissoc",
    "from_pairs",
    "get",
    "keys",
    "map_keys",
    "merge_all",
    "merge_left",
    "merge_right",
    "merge_when",
    "omit",
    "path",
    "path_or",
    "path_satisfies",
    "pick",
    "prop",
    "prop_eq",
    "prop_or",
    "reduce_nodes",
    "to_pairs",
    "values",
    "where",
)
