import re

import pytest

from fnbox import __, complement, compose, curry, curry_n, pipe
from fnbox import ops as R
from fnbox.curry import arity_of, converge, flip, if_else, tap, unless, when


@curry
def add3(a, b, c):
    return a + b + c


def test_curry_collects_arguments_across_calls():
    assert add3(1)(2)(3) == 6
    assert add3(1, 2)(3) == 6
    assert add3(1)(2, 3) == 6
    assert add3(1, 2, 3) == 6


def test_curry_without_arguments_returns_equivalent_function():
    assert add3()(1)()(2, 3) == 6


def test_curry_keeps_name_and_doc():
    @curry
    def documented(a, b):
        """Adds things."""
        return a + b

    assert documented.__name__ == "documented"
    assert documented.__doc__ == "Adds things."
    assert documented(1).__name__ == "documented"


def test_placeholder_fills_later():
    subtract = curry(lambda a, b: a - b)
    assert subtract(__, 2)(10) == 8
    assert add3(__, __, "c")("a", "b") == "abc"
    assert add3(__, "b")("a")("c") == "abc"


def test_extra_arguments_are_passed_through():
    collect = curry_n(2, lambda *xs: xs)
    assert collect(1)(2, 3) == (1, 2, 3)


def test_arity_ignores_defaults_and_kwargs():
    def fn(a, b, c=3, *, d=4):
        return a + b + c + d

    assert arity_of(fn) == 2
    assert curry(fn)(1)(2) == 10
    assert curry(fn)(1, d=10)(2) == 16


def test_zero_arity_calls_immediately():
    assert curry(lambda: 42)() == 42


def test_curry_n_rejects_negative_arity():
    with pytest.raises(ValueError):
        curry_n(-1, print)


def test_pipe_runs_left_to_right():
    calc = pipe(R.add(3), R.multiply(3), R.divide(__, 2))
    assert calc(5) == 12


def test_pipe_first_function_takes_many_arguments():
    assert pipe(lambda a, b: a + b, str)(1, 2) == "3"


def test_compose_runs_right_to_left():
    assert compose(R.inc, R.multiply(2))(5) == 11


def test_compose_requires_functions():
    with pytest.raises(ValueError):
        pipe()
    with pytest.raises(ValueError):
        compose()


def test_words_and_sentences():
    words = R.split(" ")
    sentences = R.map(words)

    assert words("Jingle bells Batman smells") == ["Jingle", "bells", "Batman", "smells"]
    assert sentences(["Robin laid an egg", "hi"]) == [["Robin", "laid", "an", "egg"], ["hi"]]


def test_filter_qs():
    filter_qs = R.filter(R.test(re.compile("q", re.IGNORECASE)))
    q_list = ["quarry", "camel", "quackers", "bacon", "over", "Qualified"]

    assert filter_qs(q_list) == ["quarry", "quackers", "Qualified"]


def test_is_last_in_stock():
    cameras = [
        {"model_name": "Canon EOS 5D", "in_stock": True, "price": 123},
        {"model_name": "Canon EOS 5D", "in_stock": False, "price": 456},
    ]
    is_last_in_stock = pipe(R.last, R.prop("in_stock"))

    assert is_last_in_stock(cameras) is False


def test_is_odd_is_even_from_remainder_and_equals():
    is_odd = pipe(R.mod(2), R.equals(1))
    is_even = complement(is_odd)

    assert [is_odd(n) for n in range(5)] == [False, True, False, True, False]
    assert [is_even(n) for n in range(5)] == [True, False, True, False, True]


def test_branching_helpers():
    double_evens = when(lambda n: n % 2 == 0, R.multiply(2))
    assert R.map(double_evens, [1, 2, 3, 4]) == [1, 4, 3, 8]

    assert unless(R.equals(0), R.negate, 5) == -5
    assert unless(R.equals(0), R.negate, 0) == 0

    sign = if_else(lambda n: n >= 0, R.always("+"), R.always("-"))
    assert sign(-3) == "-"


def test_flip_tap_converge():
    assert flip(lambda a, b: a - b)(1, 10) == 9

    seen = []
    assert tap(seen.append, 7) == 7
    assert seen == [7]

    average = converge(lambda total, count: total / count, [sum, len])
    assert average([1, 2, 3, 6]) == 3
