"""
Tree traversal utilities.

Traversals:
    depth_first_preorder(after, root) - DFS yielding parent before children

`after` returns the children of a node; leaves return an empty iterator.
Traversals are iterative, so deep trees do not hit the recursion limit.
"""

from typing import Callable, Iterator, TypeVar

T = TypeVar("T")


def depth_first_preorder(
    after: Callable[[T], Iterator[T]], root: T | None
) -> Iterator[T]:
    """Yields parent before children, depth-first."""
    if root is None:
        return
    stack = [root]
    while stack:
        current = stack.pop()
        yield current
        children = list(after(current))
        stack.extend(reversed(children))


__all__ = [
    "depth_first_preorder",
]
