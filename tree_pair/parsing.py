"""
Parsing of the two text forms of a tree pair.

- parse_dfs_triple:   "{<domain DFS>,<range DFS>,<p0 p1 ... p(n-1)>}"
- parse_full_string: "{D: [<path> <label>], ... || R: [<path> <label>], ...}"

Both only check the surface syntax; shape and label validation happen when the
pieces are turned into prefix codes.
"""

from __future__ import annotations

import logging
import re

from constants import (
    DFS_CLOSE,
    DFS_FIELD_SEPARATOR,
    DFS_OPEN,
    DOMAIN_TAG,
    LEAF_SEPARATOR,
    PERMUTATION_SEPARATOR,
    RANGE_TAG,
    SIDE_SEPARATOR,
)
from prefix_code.errors import MalformedEncodingError

logger = logging.getLogger(__name__)

LEAF_PATTERN = re.compile(r"\[(\S*) (\d+)\]")


def parse_dfs_triple(text: str) -> tuple[str, str, tuple[int, ...]]:
    """
    Splits a DFS triple into its domain DFS, range DFS and permutation.

    Raises:
        MalformedEncodingError: not exactly three fields, missing braces, or a
            permutation entry that is not an integer.
    """
    fields = text.strip().split(DFS_FIELD_SEPARATOR)
    if len(fields) != 3:
        raise MalformedEncodingError(
            f"{text!r} does not have three fields between commas"
        )
    domain_dfs, range_dfs, perm_field = (f.strip() for f in fields)
    if not domain_dfs.startswith(DFS_OPEN) or not perm_field.endswith(DFS_CLOSE):
        raise MalformedEncodingError(
            f"{text!r} must start with {DFS_OPEN!r} and end with {DFS_CLOSE!r}"
        )
    domain_dfs = domain_dfs.removeprefix(DFS_OPEN)
    perm_field = perm_field.removesuffix(DFS_CLOSE)

    try:
        perm = tuple(int(v) for v in perm_field.split(PERMUTATION_SEPARATOR) if v)
    except ValueError as e:
        raise MalformedEncodingError(
            f"Bad permutation {perm_field!r} in {text!r}"
        ) from e

    logger.debug(f"DFS triple: domain={domain_dfs} range={range_dfs} perm={perm}")
    return domain_dfs, range_dfs, perm


def parse_leaves(side: str) -> dict[str, int]:
    """Parses "[<path> <label>], ..." into a path -> label mapping."""
    side = side.strip()
    if not side:
        raise MalformedEncodingError("A side of a tree pair cannot be empty")

    leaves: dict[str, int] = {}
    for item in side.split(LEAF_SEPARATOR):
        match = LEAF_PATTERN.fullmatch(item.strip())
        if match is None:
            raise MalformedEncodingError(f"Cannot read leaf {item!r}")
        path, label = match.group(1), int(match.group(2))
        if path in leaves:
            raise MalformedEncodingError(f"Leaf {path!r} is listed twice")
        leaves[path] = label
    return leaves


def parse_full_string(text: str) -> tuple[dict[str, int], dict[str, int]]:
    """
    Splits a canonical string into domain and range path -> label mappings.

    The root leaf is written with an empty path: "[ 0]".
    """
    body = text.strip()
    if not (body.startswith("{") and body.endswith("}")):
        raise MalformedEncodingError(f"{text!r} must be enclosed in braces")
    sides = body[1:-1].split(SIDE_SEPARATOR.strip())
    if len(sides) != 2:
        raise MalformedEncodingError(
            f"{text!r} must have exactly one {SIDE_SEPARATOR.strip()!r}"
        )

    domain_side, range_side = (s.strip() for s in sides)
    if not domain_side.startswith(DOMAIN_TAG) or not range_side.startswith(RANGE_TAG):
        raise MalformedEncodingError(
            f"{text!r} must tag its sides {DOMAIN_TAG!r} and {RANGE_TAG!r}"
        )
    return (
        parse_leaves(domain_side.removeprefix(DOMAIN_TAG)),
        parse_leaves(range_side.removeprefix(RANGE_TAG)),
    )


__all__ = [
    "LEAF_PATTERN",
    "parse_dfs_triple",
    "parse_leaves",
    "parse_full_string",
]
