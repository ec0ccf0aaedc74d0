from __future__ import annotations

from _infra import banner

from fnbox import lens as L, ops as R, pipe, trace

# Pure function module
has_value = R.complement(R.is_empty)
active_filter_lens = L.path_lens(["filters", "active"])

get_filters = L.view(active_filter_lens)
has_filters = pipe(get_filters, has_value)
set_filters = L.set(active_filter_lens)


def main() -> None:
    banner("02_lenses: view + set + over on immutable state")

    state = {"filters": {"active": [{"badger": "ss"}]}}

    trace(get_filters(state))
    trace(has_filters(state))

    cleared = set_filters([], state)
    trace(cleared)
    trace(has_filters(cleared))
    # The original is untouched
    trace(state)

    counter = L.path_lens(["stats", "clicks"])
    trace(L.over(counter, R.inc, {"stats": {"clicks": 41}}))

    rows = [{"a": n, "b": n, "c": n} for n in range(1, 6)]
    trace(R.find(R.prop_eq("a", 3), rows))
    trace(R.merge_when(R.prop_eq("a", 3), {"d": 3, "e": 3, "f": 3}, rows))
    trace(R.merge_when(R.equals(3), {"d": 3, "e": 3, "f": 3}, rows[2]))


if __name__ == "__main__":
    main()
