import pytest
from certes import (
    A, B, C, I, K, V, T, Th,
    apply, compose, flip, identity, constant, pair, apply_to, noop,
)


def add(a):
    return lambda b: a + b


def divide(a):
    return lambda b: a / b


class TestCombinatorLaws:
    """Test each combinator against its defining equation"""

    def test_apply(self):
        assert apply(lambda a: a + 6)(3) == 9

    def test_compose_right_to_left(self):
        inc = lambda x: x + 1
        double = lambda x: x * 2
        assert compose(inc)(double)(5) == 11, "compose(f)(g)(x) should be f(g(x))"
        assert compose(double)(inc)(5) == 12

    def test_flip(self):
        assert flip(divide)(2)(10) == 5
        assert flip(add)("a")("b") == "ba"

    def test_flip_twice_is_original(self):
        assert flip(flip(divide))(10)(2) == divide(10)(2)

    def test_identity(self):
        obj = object()
        assert identity(obj) is obj

    @pytest.mark.parametrize("ignored", [None, 0, "x", [1, 2], object()])
    def test_constant_ignores_second_argument(self, ignored):
        assert constant(7)(ignored) == 7

    def test_pair(self):
        assert pair(6)(7)(lambda a: lambda b: a * b) == 42
        assert pair("x")("y")(add) == "xy"

    def test_apply_to(self):
        assert apply_to(6)(lambda x: x * 2) == 12

    def test_apply_to_with_many_functions(self):
        six = apply_to(6)
        assert [six(f) for f in (str, lambda x: x + 1, lambda x: -x)] == ["6", 7, -6]


class TestAliases:
    """Test that single-letter names and descriptive aliases are the same function"""

    @pytest.mark.parametrize("short,long", [
        (A, apply), (B, compose), (C, flip), (I, identity),
        (K, constant), (V, pair), (T, apply_to), (Th, apply_to),
    ])
    def test_alias(self, short, long):
        assert short is long


class TestNoop:
    """Test the do-nothing helper"""

    def test_without_argument(self):
        assert noop() is None

    def test_with_argument(self):
        items = [1, 2]
        assert noop(items) is None
        assert items == [1, 2]

    def test_as_callback(self):
        handler = noop
        for message in ("a", "b"):
            handler(message)
