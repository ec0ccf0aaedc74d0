"""
Ramda-style data helpers.

Every helper takes its data last and is curried, so partial application
builds the pipeline and the data arrives at the end:

    from fnbox import ops as R

    is_last_in_stock = pipe(R.last, R.prop("in_stock"))
"""

from .lists import (
    adjust,
    append,
    chain,
    drop,
    filter,
    find,
    find_index,
    flatten,
    group_by,
    has_value,
    head,
    init,
    is_empty,
    last,
    length,
    map,
    nth,
    prepend,
    range_,
    reduce,
    reject,
    remove,
    reverse,
    sort_by,
    sum,
    sum_by,
    tail,
    take,
    uniq,
    update,
    zip_obj,
)
from .math import add, dec, divide, inc, mod, multiply, negate, subtract
from .objects import (
    assoc,
    assoc_path,
    dissoc,
    from_pairs,
    get,
    keys,
    map_keys,
    merge_all,
    merge_left,
    merge_right,
    merge_when,
    omit,
    path,
    path_or,
    path_satisfies,
    pick,
    prop,
    prop_eq,
    prop_or,
    reduce_nodes,
    to_pairs,
    values,
    where,
)
from .strings import camel_case, join, replace, split, test, to_lower, to_upper, trim
from .transduce import Reduced, filtering, into, mapping, taking, transduce

# Re-exported so `R.pipe`, `R.equals`, ... read like the rest of the namespace
from ..curry import (
    __,
    all_pass,
    any_pass,
    both,
    complement,
    compose,
    curry,
    default_to,
    equals,
    flip,
    if_else,
    pipe,
    tap,
    unless,
    when,
)
from .._helpers import always, identity, trace

__all__ = (
    # Lists
    "adjust",
    "append",
    "chain",
    "drop",
    "filter",
    "find",
    "find_index",
    "flatten",
    "group_by",
    "has_value",
    "head",
    "init",
    "is_empty",
    "last",
    "length",
    "map",
    "nth",
    "prepend",
    "range_",
    "reduce",
    "reject",
    "remove",
    "reverse",
    "sort_by",
    "sum",
    "sum_by",
    "tail",
    "take",
    "uniq",
    "update",
    "zip_obj",
    # Math
    "add",
    "dec",
    "divide",
    "inc",
    "mod",
    "multiply",
    "negate",
    "subtract",
    # Objects
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
    # Strings
    "camel_case",
    "join",
    "replace",
    "split",
    "test",
    "to_lower",
    "to_upper",
    "trim",
    # Transducers
    "Reduced",
    "filtering",
    "into",
    "mapping",
    "taking",
    "transduce",
    # Function helpers
    "__",
    "all_pass",
    "always",
    "any_pass",
    "both",
    "complement",
    "compose",
    "curry",
    "default_to",
    "equals",
    "flip",
    "identity",
    "if_else",
    "pipe",
    "tap",
    "trace",
    "unless",
    "when",
)
