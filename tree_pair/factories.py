"""
Factory functions for creating tree pairs.

Functions:
    identity(alphabet)                      - The trivial pair
    identity_on(code)                       - Identity with both sides a copy of `code`
    random_prefix_code(alphabet, n, rng)    - Code grown by n random leaf splits
    random_tree_pair(alphabet, n, rng, ...) - Random element of F, T or V
"""

from __future__ import annotations

import random
from typing import Literal

from constants import DEFAULT_ALPHABET
from prefix_code import Alphabet, PrefixCode
from tree_pair.pair import TreePair


def identity(alphabet: str | Alphabet = DEFAULT_ALPHABET) -> TreePair:
    return TreePair(alphabet)


def identity_on(code: PrefixCode) -> TreePair:
    """Identity element drawn on `code`, labels in dictionary order."""
    natural = PrefixCode.from_leaves(code.alphabet, code.leaves())
    return TreePair.from_codes(natural, natural)


def random_prefix_code(
    alphabet: str | Alphabet, splits: int, rng: random.Random | None = None
) -> PrefixCode:
    """
    Grows a code from the root by splitting a uniformly chosen leaf `splits` times.

    The result has 1 + splits * (k - 1) leaves, labelled in dictionary order.
    """
    rng = rng or random.Random()
    code = PrefixCode(alphabet)
    for _ in range(splits):
        code.expand_at(rng.choice(code.leaves()))
    return PrefixCode.from_leaves(code.alphabet, code.leaves())


def random_tree_pair(
    alphabet: str | Alphabet = DEFAULT_ALPHABET,
    splits: int = 3,
    rng: random.Random | None = None,
    group: Literal["F", "T", "V"] = "V",
) -> TreePair:
    """
    Draws a random, generally unreduced, tree pair.

    Both trees get `splits` random splits. The leaf correspondence is order
    preserving for "F", a random rotation for "T" and a random permutation
    for "V".
    """
    rng = rng or random.Random()
    domain = random_prefix_code(alphabet, splits, rng)
    range_ = random_prefix_code(alphabet, splits, rng)
    pair = TreePair.from_codes(domain, range_, copy=False)

    n = pair.size()
    if group == "F":
        return pair
    if group == "T":
        shift = rng.randrange(n)
        pair.apply_perm_range([(label + shift) % n for label in range(n)])
        return pair
    if group == "V":
        perm = list(range(n))
        rng.shuffle(perm)
        pair.apply_perm_range(perm)
        return pair
    raise ValueError(f"Unknown group {group!r}, expected 'F', 'T' or 'V'")


__all__ = [
    "identity",
    "identity_on",
    "random_prefix_code",
    "random_tree_pair",
]
