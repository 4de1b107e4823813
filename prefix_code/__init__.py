"""
Prefix codes: labelled complete k-ary trees over an ordered alphabet.

This package is the single-tree layer underneath tree pairs. A prefix code is
a set of words such that no word is a prefix of another and every internal node
has all k children; each leaf carries a distinct label in [0, size).

Features:
- Expansion along a path and reduction of exposed carets, labels kept contiguous
- Label <-> leaf lookups, permutations in dictionary order
- Join (coarsest common refinement) and meet (finest common coarsening)
- Depth-first-search shape encoding with a stack-depth validity check

Example Usage:
    >>> from prefix_code import PrefixCode, dfs_to_prefix_code
    >>> code = dfs_to_prefix_code("01", "11000")
    >>> str(code)
    '[00 0], [01 1], [1 2]'
    >>> code.exposed_carets()
    ('0',)
"""

from __future__ import annotations

# Errors
from prefix_code.errors import (
    ArityMismatchError,
    InvalidAlphabetError,
    JoinFailureError,
    MalformedEncodingError,
    PermutationMismatchError,
    TreePairError,
)

# Alphabets
from prefix_code.alphabet import Alphabet

# Permutation arithmetic
from prefix_code.permutations import (
    PermutationLike,
    as_permutation,
    inverse,
    is_rotation,
)

# Codes
from prefix_code.code import PrefixCode

# DFS codec
from prefix_code.dfs import (
    check_dfs,
    dfs_to_prefix_code,
    prefix_code_to_dfs,
    valid_dfs,
)

__all__ = [
    # Errors
    "ArityMismatchError",
    "InvalidAlphabetError",
    "JoinFailureError",
    "MalformedEncodingError",
    "PermutationMismatchError",
    "TreePairError",
    # Alphabets
    "Alphabet",
    # Permutations
    "PermutationLike",
    "as_permutation",
    "inverse",
    "is_rotation",
    # Codes
    "PrefixCode",
    # DFS
    "check_dfs",
    "dfs_to_prefix_code",
    "prefix_code_to_dfs",
    "valid_dfs",
]
