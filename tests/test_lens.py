import pytest

from fnbox import lens as L
from fnbox import ops as R
from fnbox import pipe


@pytest.fixture
def state():
    return {"filters": {"active": [{"badger": "ss"}]}, "tags": ["a", "b", "c"]}


def test_view_set_over_path(state):
    active = L.path_lens(["filters", "active"])

    assert L.view(active, state) == [{"badger": "ss"}]
    assert L.set(active, [], state) == {"filters": {"active": []}, "tags": ["a", "b", "c"]}
    assert L.over(active, R.append("x"), state)["filters"]["active"] == [{"badger": "ss"}, "x"]


def test_writes_never_mutate(state):
    active = L.path_lens(["filters", "active"])
    L.set(active, [], state)
    L.over(L.index_lens(0), R.to_upper, state["tags"])

    assert state == {"filters": {"active": [{"badger": "ss"}]}, "tags": ["a", "b", "c"]}


def test_has_filters(state):
    active = L.path_lens(["filters", "active"])
    has_filters = pipe(L.view(active), R.complement(R.is_empty))
    set_filters = L.set(active)

    assert has_filters(state)
    assert not has_filters(set_filters([], state))


def test_lens_laws(state):
    lenses = [
        L.prop_lens("tags"),
        L.index_lens(1) / L.prop_lens("x"),
        L.path_lens(["filters", "active", 0, "badger"]),
    ]
    targets = [state, [{"x": 1}, {"x": 2}], state]

    for lens, target in zip(lenses, targets):
        # get-put
        assert L.set(lens, L.view(lens, target), target) == target
        # put-get
        assert L.view(lens, L.set(lens, "new", target)) == "new"
        # put-put
        assert L.set(lens, "b", L.set(lens, "a", target)) == L.set(lens, "b", target)


def test_index_lens_negative_and_path_with_index(state):
    assert L.view(L.index_lens(-1), state["tags"]) == "c"
    assert L.set(L.index_lens(-1), "z", state["tags"]) == ["a", "b", "z"]
    assert L.view(L.path_lens(["tags", 1]), state) == "b"


def test_missing_path_views_none_and_set_creates_it():
    deep = L.path_lens(["a", "b", 0])

    assert L.view(deep, {}) is None
    assert L.set(deep, 1, {}) == {"a": {"b": [1]}}


def test_custom_lens_and_composition():
    celsius = L.lens(lambda f: (f - 32) * 5 / 9, lambda c, _: c * 9 / 5 + 32)
    reading = L.compose_lenses(L.prop_lens("temp"), celsius)

    assert L.view(reading, {"temp": 212}) == 100
    assert L.set(reading, 0, {"temp": 212}) == {"temp": 32}
    assert L.over(reading, R.add(10), {"temp": 32}) == {"temp": 50}


def test_empty_path_lens_focuses_whole_target():
    whole = L.path_lens([])
    assert L.view(whole, {"a": 1}) == {"a": 1}
    assert L.set(whole, 5, {"a": 1}) == 5

    with pytest.raises(ValueError):
        L.compose_lenses()


def test_setting_a_missing_key_writes_it():
    x = L.prop_lens("x")

    assert L.view(x, {}) is None
    assert L.set(x, L.view(x, {}), {}) == {"x": None}
    assert L.set(x, 1, {}) == {"x": 1}
