"""
Depth-first-search encoding of prefix-code shapes.

A DFS string lists the nodes of a k-ary tree in preorder, children visited in
alphabet order: INTERNAL_MARKER ("1") for an internal node, LEAF_MARKER ("0")
for a leaf. Decoded leaves are labelled in dictionary order.

Validity is a stack-depth count: start with one open slot, each internal
marker opens k-1 more, each leaf marker closes one. The count may reach zero
only on the final character and must be zero there.

Functions:
    check_dfs(arity, dfs)             - Raise on an invalid string
    valid_dfs(arity, dfs)             - Boolean form of check_dfs
    dfs_to_prefix_code(alphabet, dfs) - Decode into a fresh PrefixCode
    prefix_code_to_dfs(code)          - Encode a code's shape
"""

from __future__ import annotations

import logging

from constants import INTERNAL_MARKER, LEAF_MARKER
from prefix_code.alphabet import Alphabet
from prefix_code.code import PrefixCode
from prefix_code.errors import ArityMismatchError, MalformedEncodingError
from utils.algorithms.tree import depth_first_preorder

logger = logging.getLogger(__name__)


def check_dfs(arity: int, dfs: str) -> None:
    """
    Raises:
        MalformedEncodingError: empty string, foreign characters, or the open
            slot count reaching zero before the end.
        ArityMismatchError: the marker counts cannot describe an arity-ary
            tree (slots left open at the end).
    """
    if arity < 2:
        raise ArityMismatchError(f"Arity must be at least 2, got {arity}")
    if not dfs:
        raise MalformedEncodingError("Tree description by DFS cannot be empty")

    open_slots = 1
    last = len(dfs) - 1
    for i, marker in enumerate(dfs):
        if marker == INTERNAL_MARKER:
            open_slots += arity - 1
        elif marker == LEAF_MARKER:
            open_slots -= 1
            if open_slots == 0 and i < last:
                raise MalformedEncodingError(
                    f"DFS {dfs!r} closes the tree at position {i}, "
                    f"leaving {last - i} trailing markers"
                )
        else:
            raise MalformedEncodingError(
                f"DFS {dfs!r} has character {marker!r} at position {i}; "
                f"expected {INTERNAL_MARKER!r} or {LEAF_MARKER!r}"
            )

    if open_slots != 0:
        internal = dfs.count(INTERNAL_MARKER)
        raise ArityMismatchError(
            f"DFS {dfs!r} has {internal} internal and {len(dfs) - internal} leaf "
            f"markers; a {arity}-ary tree with {internal} internal nodes "
            f"has {(arity - 1) * internal + 1} leaves"
        )


def valid_dfs(arity: int, dfs: str) -> bool:
    try:
        check_dfs(arity, dfs)
    except MalformedEncodingError as e:
        logger.debug(f"Rejected DFS: {e}")
        return False
    return True


def dfs_to_prefix_code(alphabet: str | Alphabet, dfs: str) -> PrefixCode:
    """Decodes a DFS string into a new code labelled in dictionary order."""
    alpha = Alphabet.of(alphabet)
    check_dfs(alpha.arity, dfs)

    leaves: list[str] = []
    pending = [""]
    for marker in dfs:
        node = pending.pop()
        if marker == INTERNAL_MARKER:
            pending.extend(reversed(alpha.children(node)))
        else:
            leaves.append(node)
    return PrefixCode.from_leaves(alpha, leaves)


def prefix_code_to_dfs(code: PrefixCode) -> str:
    """Encodes the shape of a code; labels are not part of the string."""
    return "".join(
        INTERNAL_MARKER if code.is_internal(node) else LEAF_MARKER
        for node in depth_first_preorder(code.children, "")
    )


__all__ = [
    "check_dfs",
    "valid_dfs",
    "dfs_to_prefix_code",
    "prefix_code_to_dfs",
]
