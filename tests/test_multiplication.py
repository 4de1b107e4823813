"""
Tests for multiply and power.
"""

import logging

import pytest

from prefix_code import JoinFailureError
from tree_pair import TreePair, identity, identity_on, multiply, power

X0 = "{11000,10100,0 1 2}"
FIRST = "{11110000111010000,11101000110100100,0 1 2 5 4 3 6 8 7}"
SECOND = "{11001101000,11101000100,5 1 2 4 0 3}"


def minimised(x: TreePair) -> TreePair:
    y = x.copy()
    y.minimise()
    return y


def inverse_of(x: TreePair) -> TreePair:
    y = x.copy()
    y.invert()
    return y


class TestMultiply:
    def test_product(self):
        """Composition of a 9-leaf and a 6-leaf element of V."""
        product = multiply(
            TreePair.from_dfs("01", FIRST), TreePair.from_dfs("01", SECOND)
        )
        expected = (
            "{D: [0000 0], [0001 1], [001 2], [01 3], [1000 4], [10010 5], "
            "[10011 6], [101 7], [11 8] || "
            "R: [0000 8], [0001 7], [0010 5], [0011 4], [01 6], [100 0], "
            "[1010 1], [1011 2], [11 3]}"
        )
        assert product.full_string() == expected
        product.minimise()
        assert product.full_string() == expected

    def test_operands_untouched(self):
        first = TreePair.from_dfs("01", FIRST)
        second = TreePair.from_dfs("01", SECOND)
        multiply(first, second)
        assert first == TreePair.from_dfs("01", FIRST)
        assert second == TreePair.from_dfs("01", SECOND)

    def test_square_of_x0(self):
        x0 = TreePair.from_dfs("01", X0)
        assert multiply(x0, x0).full_string() == (
            "{D: [000 0], [001 1], [01 2], [1 3] || "
            "R: [0 0], [10 1], [110 2], [111 3]}"
        )

    def test_inverse_gives_identity(self):
        for dfs in (X0, FIRST, SECOND):
            x = TreePair.from_dfs("01", dfs)
            assert minimised(multiply(x, inverse_of(x))) == identity("01")
            assert minimised(multiply(inverse_of(x), x)) == identity("01")

    def test_identity(self):
        x = TreePair.from_dfs("01", SECOND)
        assert minimised(multiply(identity("01"), x)) == minimised(x)
        assert minimised(multiply(x, identity("01"))) == minimised(x)
        assert minimised(multiply(power(x, 0), x)) == minimised(x)
        assert minimised(multiply(x, power(x, 0))) == minimised(x)

    def test_associative(self):
        a = TreePair.from_dfs("01", FIRST)
        b = TreePair.from_dfs("01", SECOND)
        c = TreePair.from_dfs("01", "{11000,10100,1 2 0}")
        left = multiply(multiply(a, b), c)
        right = multiply(a, multiply(b, c))
        assert minimised(left) == minimised(right)

    def test_ternary(self):
        x = TreePair.from_dfs("012", "{1010000,1100000,2 0 1 4 3}")
        assert minimised(multiply(x, inverse_of(x))) == identity("012")

    def test_mismatched_alphabets(self):
        with pytest.raises(JoinFailureError):
            multiply(TreePair("01"), TreePair("ab"))

    def test_trace(self, caplog):
        trace = logging.getLogger("multiply-trace")
        x0 = TreePair.from_dfs("01", X0)
        with caplog.at_level(logging.DEBUG, logger="multiply-trace"):
            traced = multiply(x0, x0, trace=trace)
        messages = [r.getMessage() for r in caplog.records if r.name == "multiply-trace"]
        assert any(m.startswith("Join of first range") for m in messages)
        assert any(m.startswith("Expanded second") for m in messages)
        assert traced == multiply(x0, x0)


class TestPower:
    def test_zero(self):
        x = TreePair.from_dfs("01", X0)
        assert power(x, 0) == identity_on(x.range)
        assert minimised(power(x, 0)) == identity("01")

    def test_one(self):
        x = TreePair.from_dfs("01", SECOND)
        assert minimised(power(x, 1)) == minimised(x)

    def test_square(self):
        x0 = TreePair.from_dfs("01", X0)
        assert power(x0, 2) == multiply(x0, x0)

    def test_negative(self):
        x0 = TreePair.from_dfs("01", X0)
        assert power(x0, -1).full_string() == (
            "{D: [0 0], [10 1], [11 2] || R: [00 0], [01 1], [1 2]}"
        )
        assert minimised(multiply(power(x0, -3), power(x0, 3))) == identity("01")

    def test_matches_repeated_multiply(self):
        x = TreePair.from_dfs("01", FIRST)
        expected = x
        for _ in range(2):
            expected = multiply(x, expected)
        assert minimised(power(x, 3)) == minimised(expected)

    def test_argument_untouched(self):
        x = TreePair.from_dfs("01", FIRST)
        power(x, 2)
        power(x, -2)
        assert x == TreePair.from_dfs("01", FIRST)
