"""
Tests for the DFS triple and canonical string parsers.
"""

import pytest

from prefix_code import MalformedEncodingError, PermutationMismatchError
from tree_pair import (
    TreePair,
    parse_dfs_triple,
    parse_full_string,
    parse_leaves,
)


class TestDfsTriple:
    def test_fields(self):
        assert parse_dfs_triple("{11000,10100,1 2 0}") == ("11000", "10100", (1, 2, 0))

    def test_whitespace(self):
        assert parse_dfs_triple(" {11000, 10100, 1 2 0} ") == (
            "11000",
            "10100",
            (1, 2, 0),
        )

    def test_single_leaf(self):
        assert parse_dfs_triple("{0,0,0}") == ("0", "0", (0,))

    @pytest.mark.parametrize(
        "text",
        [
            "{11000,10100}",
            "{11000,10100,1 2 0,3}",
            "11000,10100,1 2 0}",
            "{11000,10100,1 2 0",
            "{11000,10100,1 2 b}",
        ],
    )
    def test_malformed(self, text):
        with pytest.raises(MalformedEncodingError):
            parse_dfs_triple(text)


class TestFullString:
    def test_sides(self):
        domain, range_ = parse_full_string(
            "{D: [00 0], [01 1], [1 2] || R: [0 2], [10 0], [11 1]}"
        )
        assert domain == {"00": 0, "01": 1, "1": 2}
        assert range_ == {"0": 2, "10": 0, "11": 1}

    def test_root_leaf(self):
        assert parse_full_string("{D: [ 0] || R: [ 0]}") == ({"": 0}, {"": 0})

    def test_leaves(self):
        assert parse_leaves("[a 1], [b 0]") == {"a": 1, "b": 0}

    @pytest.mark.parametrize(
        "text",
        [
            "D: [ 0] || R: [ 0]",
            "{D: [ 0] R: [ 0]}",
            "{D: [ 0] || R: [ 0] || R: [ 0]}",
            "{X: [ 0] || R: [ 0]}",
            "{D: || R: [ 0]}",
            "{D: [0 zero] || R: [ 0]}",
            "{D: [0 0], [0 1] || R: [ 0]}",
        ],
    )
    def test_malformed(self, text):
        with pytest.raises(MalformedEncodingError):
            parse_full_string(text)


class TestFromFullString:
    def test_round_trip(self):
        text = (
            "{D: [0000 0], [0001 1], [001 2], [01 3], [10000 4], [10001 5], "
            "[10010 6], [10011 7], [101 8], [11 9] || "
            "R: [0000 9], [0001 8], [0010 6], [0011 4], [010 3], [011 7], "
            "[100 0], [1010 1], [1011 2], [11 5]}"
        )
        assert TreePair.from_full_string("01", text).full_string() == text

    def test_ternary(self):
        x = TreePair.from_dfs("abc", "{1000,1000,2 0 1}")
        assert TreePair.from_full_string("abc", str(x)) == x

    def test_not_a_prefix_code(self):
        with pytest.raises(MalformedEncodingError):
            TreePair.from_full_string("01", "{D: [0 0], [10 1] || R: [0 0], [1 1]}")

    def test_bad_labels(self):
        with pytest.raises(PermutationMismatchError):
            TreePair.from_full_string("01", "{D: [0 0], [1 1] || R: [0 0], [1 5]}")

    def test_sizes_differ(self):
        with pytest.raises(PermutationMismatchError):
            TreePair.from_full_string(
                "01", "{D: [0 0], [1 1] || R: [0 0], [10 1], [11 2]}"
            )
