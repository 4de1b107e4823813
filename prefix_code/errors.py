"""
Exception taxonomy for prefix codes and tree pairs.

    TreePairError               - Base class
    ├── InvalidAlphabetError    - Empty alphabet, single symbol or repeated symbols
    ├── MalformedEncodingError  - Bad DFS triple, DFS string or canonical string
    │   └── ArityMismatchError  - Marker counts do not describe a k-ary tree
    ├── PermutationMismatchError - Not a bijection on the current label set
    └── JoinFailureError        - Codes over different alphabets reached a join

Structural misses (reducing at something that is not an exposed caret, expanding
at or above an internal node) are ordinary outcomes and are reported as booleans.
"""


class TreePairError(Exception):
    """Base class for every error raised by prefix codes and tree pairs."""


class InvalidAlphabetError(TreePairError, ValueError):
    pass


class MalformedEncodingError(TreePairError, ValueError):
    pass


class ArityMismatchError(MalformedEncodingError):
    pass


class PermutationMismatchError(TreePairError, ValueError):
    pass


class JoinFailureError(TreePairError, RuntimeError):
    """Raised when codes over different alphabets are joined or met.

    This signals a programming error upstream: mismatched alphabets should never
    reach composition.
    """


__all__ = [
    "TreePairError",
    "InvalidAlphabetError",
    "MalformedEncodingError",
    "ArityMismatchError",
    "PermutationMismatchError",
    "JoinFailureError",
]
