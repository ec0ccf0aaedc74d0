from __future__ import annotations

from _infra import banner

from fnbox import Either, Identity, Maybe, __, ops as R, pipe, require_prop, safe, safe_after, trace, try_catch

# The base (functor)
reverse_text = pipe(R.split(""), R.reverse, R.join(""))


def trim_reverse_surname(name: str) -> str:
    return (
        Identity.of(name)
        .map(R.trim)
        .map(R.split(" "))
        .map(R.adjust(1, reverse_text))
        .fold(R.join(" "))
    )


# Handling None (Maybe)
def is_dict(x: object) -> bool:
    return isinstance(x, dict)


def is_number(x: object) -> bool:
    return isinstance(x, (int, float)) and not isinstance(x, bool) and x == x


safe_head = safe_after(is_dict, R.head)


def safe_prop(key: str):
    return safe_after(is_number, R.prop(key))


def get_head_prop_to_decimal(x: object) -> Maybe[float]:
    return (
        Maybe.from_empty(x)
        .chain(safe(lambda v: isinstance(v, list)))
        .chain(safe_head)
        .chain(safe_prop("value"))
        .map(R.divide(__, 100))
    )


# Train tracks (Either)
def get_customer_meta(customer_id: int) -> dict:
    if not customer_id:
        raise ValueError("ID is missing")
    return {"id": customer_id, "name": "Henry", "address": {}, "phone": "01273111222"}


def get_customer(values: dict | None) -> Either:
    return Either.of(values).chain(require_prop("id")).chain(try_catch(get_customer_meta))


def main() -> None:
    banner("04_functor_maybe_either: Identity + Maybe + Either")

    trace(trim_reverse_surname("  spongebob stnaperauqs  "))

    samples = {
        "null": None,
        "string": "",
        "empty": [],
        "missing": [{"wrong": "field"}],
        "prices": [{"value": 15500}, {"value": 0}, {"value": 200}],
    }
    for label, sample in samples.items():
        trace({label: get_head_prop_to_decimal(sample).or_some(0)})

    trace(get_customer({"id": 12345}).fold(str, R.identity))
    trace(get_customer({}).fold(str, R.identity))


if __name__ == "__main__":
    main()
