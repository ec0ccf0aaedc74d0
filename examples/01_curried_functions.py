from __future__ import annotations

import re

from _infra import banner

from fnbox import complement, curry, ops as R, pipe, trace


# Curried function
words = R.split(" ")

# Curried composition
sentences = R.map(words)

# Cognitive load
filter_qs = R.filter(R.test(re.compile("q", re.IGNORECASE)))

# Input shape (unary): divide_by(2, multiply_by_3(add(3, 5)))
calc = pipe(R.add(3), R.multiply(3), R.divide(2))

# Generalise
is_last_in_stock = pipe(R.last, R.prop("in_stock"))


# Breaking it down: remainder -> equals
@curry
def mod(a: int, b: int) -> int:
    return b % a


@curry
def eq(a: object, b: object) -> bool:
    return a == b


is_odd = pipe(mod(2), eq(1))
is_even = complement(is_odd)


def main() -> None:
    banner("01_curried_functions: curry + pipe + data last")

    phrase = "Jingle bells Batman smells"
    phrases = ["Jingle bells Batman smells", "Robin laid an egg"]
    q_list = ["quarry", "camel", "quackers", "bacon", "over", "qualified"]
    cameras = [
        {"model_name": "Canon EOS 5D", "in_stock": True, "price": 123},
        {"model_name": "Canon EOS 5D", "in_stock": False, "price": 456},
        {"model_name": "Canon EOS 5D", "in_stock": True, "price": 789},
    ]

    trace(words(phrase))
    trace(sentences(phrases))
    trace(filter_qs(q_list))
    trace(calc(5))
    trace(is_last_in_stock(cameras))
    trace([is_odd(n) for n in range(4)])
    trace([is_even(n) for n in range(4)])


if __name__ == "__main__":
    main()
