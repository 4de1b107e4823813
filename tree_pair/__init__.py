"""
Tree pairs: the combinatorial model of R. Thompson's groups F, T and V.

An element is a pair of complete prefix codes (domain and range) of equal size
over one alphabet, with a bijection between their leaves carried by labels.
F is the set of order-preserving pairs, T the cyclic rotations, V everything.

Key Features:
- Construction from an alphabet, expansion lists, DFS triples or canonical strings
- Expansion and reduction at carets, with the range following the domain
- Minimisation to the unique reduced representative
- Multiplication through the join of the shared boundary, powers, inversion
- Membership tests for F, T and V, and a deterministic sort order

Example Usage:
    >>> from tree_pair import TreePair, multiply
    >>> x = TreePair.from_dfs("01", "{11000,10100,1 2 0}")
    >>> x.in_t(), x.in_f()
    (True, False)
    >>> y = multiply(x, x)
    >>> y.minimise()
"""

from __future__ import annotations

# Tree pairs
from tree_pair.pair import TreePair

# Text forms
from tree_pair.parsing import (
    parse_dfs_triple,
    parse_full_string,
    parse_leaves,
)

# Factories
from tree_pair.factories import (
    identity,
    identity_on,
    random_prefix_code,
    random_tree_pair,
)

# Composition
from tree_pair.multiplication import multiply, power

# Ordering
from tree_pair.ordering import less_equal, sort_key

__all__ = [
    # Tree pairs
    "TreePair",
    # Text forms
    "parse_dfs_triple",
    "parse_full_string",
    "parse_leaves",
    # Factories
    "identity",
    "identity_on",
    "random_prefix_code",
    "random_tree_pair",
    # Composition
    "multiply",
    "power",
    # Ordering
    "less_equal",
    "sort_key",
]
