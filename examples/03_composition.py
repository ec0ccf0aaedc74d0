from __future__ import annotations

from _infra import banner

from fnbox import compose, ops as R, pipe, trace

# Data last: the mapper arrives first, the list at the end
sum_by = R.sum_by

# Composing compositions
to_upper_and_split = pipe(R.to_upper, R.split(""))
map_upper_and_split = R.map(to_upper_and_split)
filter_o = R.filter(R.equals("O"))
filter_last_word_split = pipe(map_upper_and_split, R.flatten, filter_o)


# Transduction: one pass through the data
def has_x(obj: dict) -> bool:
    return bool(obj["x"])


def add_y(obj: dict) -> dict:
    return {**obj, "y": "kapow"}


transduce_xy = R.into([], compose(R.filtering(has_x), R.mapping(add_y)))

# Real world: deleting a row
get_observations = R.path(["general", "observations"])


def remove_observation(index: int, values: dict) -> list:
    return pipe(get_observations, R.default_to([]), R.remove(index, 1))(values)


# Real world: validating a nested address
has_value = R.complement(R.is_empty)
validation = R.where({"country": has_value, "postcode": has_value})
has_address = R.path_satisfies(lambda address: address is not None and validation(address), ["collection", "address"])

# Real world: renaming keys at every depth
convert_key_names = R.map_keys(R.camel_case)


def main() -> None:
    banner("03_composition: pipe + transduce + real world")

    nums = [{"a": 2}, {"a": 4}, {"a": 6}, {"a": 8}, {"a": 100}, {"a": 1}]
    trace(sum_by(R.prop("a"), nums))
    trace(sum_by(lambda obj: obj["a"] * 2, nums))
    trace(sum_by(R.identity, [2, 4, 6, 8, 100, 100]))

    my_words = ["hello", "world", "goodbye"]
    trace(map_upper_and_split(my_words))
    trace(filter_last_word_split(my_words))

    trace(transduce_xy([{"x": "boom"}, {"x": False}, {"x": "splat"}]))

    values = {"general": {"observations": ["first", "second", "third"]}}
    trace(remove_observation(1, values))

    trace(has_address({"collection": {"address": {"country": "UK", "postcode": "BN1"}}}))
    trace(has_address({"collection": {"address": {"country": "UK", "postcode": ""}}}))

    convert_obj = {
        "a_one": {},
        "b_one": [{"a_two": {}, "b_two": [{"a_three": {}, "b_three": [{}]}]}],
        "c_one": [{"a_two": {}, "b_two": [{}]}],
        "d_one": {},
    }
    trace(convert_key_names(convert_obj))


if __name__ == "__main__":
    main()
