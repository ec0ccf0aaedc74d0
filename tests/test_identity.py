from fnbox import Box, Identity, __, pipe
from fnbox import ops as R


def f(x):
    return x + 1


def g(x):
    return x * 2


def test_functor_laws():
    m = Identity.of(3)

    assert m.map(lambda x: x) == m
    assert m.map(f).map(g) == m.map(lambda x: g(f(x)))


def test_monad_laws():
    m = Identity.of(3)
    lifted = lambda x: Identity.of(f(x))

    assert Identity.of(3).chain(lifted) == lifted(3)
    assert m.chain(Identity.of) == m


def test_fold_unwraps():
    assert Box.of("hello world").map(str.upper).map(list).map(R.reverse).fold(R.join("")) == "DLROW OLLEH"


def test_trim_reverse_surname():
    reverse_text = pipe(R.split(""), R.reverse, R.join(""))

    def trim_reverse_surname(name):
        return (
            Identity.of(name)
            .map(R.trim)
            .map(R.split(" "))
            .map(R.adjust(1, reverse_text))
            .fold(R.join(" "))
        )

    assert trim_reverse_surname("  spongebob stnaperauqs  ") == "spongebob squarepants"


def test_inspect_and_match():
    box = Identity.of({"a": 1})

    assert repr(box) == 'Identity({"a": 1})'
    match box:
        case Identity(value):
            assert value == {"a": 1}


def test_ap():
    assert Identity.of(2).ap(Identity.of(R.multiply(__, 10))) == Identity.of(20)
