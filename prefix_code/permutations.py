"""
Permutation arithmetic on label sets [0, n).

A permutation is accepted either as a mapping label -> label or as a sequence
indexed by label, and is normalised to a numpy integer array `p` with
`p[label] = image`.

Functions:
    as_permutation(perm, n) - Validate and normalise a bijection on [0, n)
    inverse(perm)           - Inverse permutation as a dict
    is_rotation(seq, ref)   - Is `seq` a cyclic rotation of `ref`
"""

from collections.abc import Mapping, Sequence
from typing import TypeAlias

import numpy as np

from prefix_code.errors import PermutationMismatchError

PermutationLike: TypeAlias = Mapping[int, int] | Sequence[int] | np.ndarray


def as_permutation(perm: PermutationLike, n: int) -> np.ndarray:
    """
    Normalises `perm` to an array and checks it is a bijection on [0, n).

    Raises:
        PermutationMismatchError: wrong size, labels outside [0, n), or repeats.
    """
    if isinstance(perm, Mapping):
        if len(perm) != n or set(perm) != set(range(n)):
            raise PermutationMismatchError(
                f"Permutation keys {sorted(perm)} are not the label set [0, {n})"
            )
        images = np.asarray([perm[label] for label in range(n)])
    else:
        images = np.asarray(perm)
        if images.ndim != 1 or images.shape[0] != n:
            raise PermutationMismatchError(
                f"Permutation of length {images.size} does not act on {n} labels"
            )

    if n and not np.issubdtype(images.dtype, np.integer):
        raise PermutationMismatchError(
            f"Permutation {images.tolist()} has non-integer labels"
        )
    images = images.astype(np.int64)

    if not np.array_equal(np.sort(images), np.arange(n)):
        raise PermutationMismatchError(
            f"Permutation {images.tolist()} is not a bijection on [0, {n})"
        )
    return images


def inverse(perm: PermutationLike) -> dict[int, int]:
    """Returns the inverse of a permutation, as a label -> label dict."""
    images = as_permutation(perm, len(perm))
    return {label: int(preimage) for label, preimage in enumerate(np.argsort(images))}


def is_rotation(seq: Sequence[int], ref: Sequence[int]) -> bool:
    """
    True if `seq` is a cyclic rotation of `ref`.

    Scans the doubled sequence `seq + seq` for a window equal to `ref`, starting
    where `ref[0]` occurs. Labels are distinct, so at most one start is possible
    and the scan touches no more than 2n positions.
    """
    n = len(ref)
    if len(seq) != n:
        return False
    if n == 0:
        return True

    doubled = np.concatenate([np.asarray(seq), np.asarray(seq)])
    target = np.asarray(ref)
    for start in np.flatnonzero(doubled[:n] == target[0]):
        if np.array_equal(doubled[start : start + n], target):
            return True
    return False


__all__ = [
    "PermutationLike",
    "as_permutation",
    "inverse",
    "is_rotation",
]
