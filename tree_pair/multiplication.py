"""
Composition of tree pairs.

multiply(first, second) is the element "apply first, then second". Both
operands are refined until the range of `first` and the domain of `second`
are the same code, the join of the two, and the labels of `second` are then
matched to those of `first` on that shared boundary.

Operands are never mutated: both functions work on copies.
"""

from __future__ import annotations

import logging

from tree_pair.factories import identity_on
from tree_pair.pair import TreePair

logger = logging.getLogger(__name__)


def multiply(
    first: TreePair, second: TreePair, trace: logging.Logger | None = None
) -> TreePair:
    """
    Returns the product `first` then `second`.

    Args:
        first: Element applied first.
        second: Element applied second.
        trace: Logger receiving DEBUG traces of the intermediate pairs;
            defaults to this module's logger.

    Raises:
        JoinFailureError: the operands are over different alphabets.
    """
    trace = trace or logger
    first = first.copy()
    second = second.copy()
    first.reset_labels()
    second.reset_labels()

    boundary = first.range.join(second.domain)
    if trace.isEnabledFor(logging.DEBUG):
        trace.debug(f"first: {first}")
        trace.debug(f"second: {second}")
        trace.debug(f"Join of first range and second domain: {boundary}")

    # Splitting the parent of each boundary leaf makes that leaf a leaf of both
    # sides; parents that are already internal are left alone.
    for leaf in boundary.leaves():
        if leaf:
            first.expand_range_at(leaf[:-1])
            second.expand_domain_at(leaf[:-1])

    if trace.isEnabledFor(logging.DEBUG):
        trace.debug(f"Expanded first: {first}")
        trace.debug(f"Expanded second: {second}")

    second.permute_labels(first.range.permutation())
    return TreePair.from_codes(first.domain, second.range, copy=False)


def power(x: TreePair, n: int) -> TreePair:
    """
    Returns x**n.

    n == 0 gives an identity pair whose sides are copies of x's range; n < 0
    uses the inverse of x. Computed iteratively as x * (x * (... * id)),
    with x minimised once up front.
    """
    base = x.copy()
    if n < 0:
        base.invert()
        base.reset_labels()
        n = -n
    if n == 0:
        return identity_on(base.range)

    base.minimise()
    result = identity_on(base.range)
    for _ in range(n):
        result = multiply(base, result)
    return result


__all__ = [
    "multiply",
    "power",
]
