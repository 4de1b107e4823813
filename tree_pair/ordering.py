"""
Deterministic total preorder on tree pairs, for sorting and tests.

Pairs compare by leaf count first, then by canonical string. This has no
group-theoretic meaning.
"""

from tree_pair.pair import TreePair


def sort_key(x: TreePair) -> tuple[int, str]:
    return x.size(), x.full_string()


def less_equal(a: TreePair, b: TreePair) -> bool:
    return sort_key(a) <= sort_key(b)


__all__ = [
    "sort_key",
    "less_equal",
]
