"""
Labelled complete prefix codes.

A PrefixCode is the leaf set of a finite rooted k-ary tree over an Alphabet,
every internal node having exactly k children. Each leaf carries a distinct
integer label in [0, size), so a code also describes a bijection between its
leaves (in dictionary order) and the labels: its *permutation*.

Mutations:
    expand_at(path)  - Split leaves along `path` until it roots an exposed caret
    reduce_at(path)  - Collapse an exposed caret whose labels run l, l+1, ...
    apply_perm(perm) - Relabel every leaf l -> perm[l]

Both structural mutations keep labels contiguous: splitting the leaf labelled l
gives its children l, l+1, ..., l+k-1 and shifts every larger label up by k-1;
collapsing does the reverse.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping

from constants import LEAF_SEPARATOR
from prefix_code.alphabet import Alphabet
from prefix_code.errors import (
    JoinFailureError,
    MalformedEncodingError,
    PermutationMismatchError,
)
from prefix_code.permutations import PermutationLike, as_permutation


class PrefixCode:
    """Mutable labelled complete prefix code over a fixed alphabet."""

    __slots__ = ("_alphabet", "_labels", "_leaves", "_internal")

    def __init__(self, alphabet: str | Alphabet) -> None:
        self._alphabet = Alphabet.of(alphabet)
        self._labels: dict[str, int] = {"": 0}  # leaf path -> label
        self._leaves: dict[int, str] = {0: ""}  # label -> leaf path
        self._internal: set[str] = set()

    @classmethod
    def from_leaves(
        cls, alphabet: str | Alphabet, leaves: Iterable[str] | Mapping[str, int]
    ) -> PrefixCode:
        """
        Builds a code from its leaf paths.

        A mapping path -> label keeps the given labels; any other iterable is
        labelled in dictionary order.

        Raises:
            MalformedEncodingError: the paths are not a complete prefix code.
            PermutationMismatchError: given labels are not exactly [0, size).
        """
        code = cls(alphabet)
        alpha = code._alphabet
        paths = list(leaves)
        for path in paths:
            alpha.check_path(path)
        if not paths:
            raise MalformedEncodingError("A prefix code needs at least one leaf")
        if len(set(paths)) != len(paths):
            raise MalformedEncodingError(f"Repeated leaves in {paths}")

        internal = {path[:i] for path in paths for i in range(len(path))}
        leaf_set = set(paths)
        if internal & leaf_set:
            raise MalformedEncodingError(
                f"Leaves {sorted(internal & leaf_set)} are prefixes of other leaves"
            )
        for node in internal:
            for child in alpha.children(node):
                if child not in internal and child not in leaf_set:
                    raise MalformedEncodingError(
                        f"Node {node!r} is missing its child {child!r}"
                    )

        if isinstance(leaves, Mapping):
            labels = dict(leaves)
            if sorted(labels.values()) != list(range(len(labels))):
                raise PermutationMismatchError(
                    f"Labels {sorted(labels.values())} are not [0, {len(labels)})"
                )
        else:
            labels = {
                path: i for i, path in enumerate(sorted(paths, key=alpha.sort_key))
            }

        code._labels = labels
        code._leaves = {label: path for path, label in labels.items()}
        code._internal = internal
        return code

    # Queries

    @property
    def alphabet(self) -> Alphabet:
        return self._alphabet

    def size(self) -> int:
        return len(self._labels)

    def __len__(self) -> int:
        return len(self._labels)

    def code(self) -> dict[str, int]:
        """Copy of the leaf path -> label map."""
        return dict(self._labels)

    def leaves(self) -> tuple[str, ...]:
        """Leaf paths in dictionary order."""
        return tuple(sorted(self._labels, key=self._alphabet.sort_key))

    def internal_nodes(self) -> tuple[str, ...]:
        return tuple(sorted(self._internal, key=self._alphabet.sort_key))

    def is_leaf(self, path: str) -> bool:
        return path in self._labels

    def is_internal(self, path: str) -> bool:
        return path in self._internal

    def label_at_leaf(self, path: str) -> int | None:
        return self._labels.get(path)

    def leaf_at_label(self, label: int) -> str | None:
        return self._leaves.get(label)

    def get_prefix_of(self, path: str) -> str | None:
        """The unique leaf that is a prefix of `path` (possibly `path` itself).

        None when `path` lies at or above an internal node.
        """
        for i in range(len(path) + 1):
            if path[:i] in self._labels:
                return path[:i]
        return None

    def permutation(self) -> tuple[int, ...]:
        """Labels listed in dictionary order of leaves."""
        return tuple(self._labels[leaf] for leaf in self.leaves())

    def exposed_carets(self) -> tuple[str, ...]:
        """Internal nodes all of whose children are leaves, in dictionary order."""
        carets = (node for node in self._internal if self.is_exposed_caret(node))
        return tuple(sorted(carets, key=self._alphabet.sort_key))

    def is_exposed_caret(self, node: str) -> bool:
        return node in self._internal and all(
            child in self._labels for child in self._alphabet.children(node)
        )

    def children(self, node: str) -> Iterator[str]:
        """Children of an internal node; a leaf has none."""
        if node in self._internal:
            yield from self._alphabet.children(node)

    # Mutations

    def _split(self, leaf: str) -> None:
        label = self._labels.pop(leaf)
        shift = self._alphabet.arity - 1
        self._relabel(lambda old: old + shift if old > label else old)
        for i, child in enumerate(self._alphabet.children(leaf)):
            self._labels[child] = label + i
        self._internal.add(leaf)
        self._leaves = {lab: path for path, lab in self._labels.items()}

    def _relabel(self, f) -> None:
        self._labels = {path: f(label) for path, label in self._labels.items()}

    def expand_at(self, path: str) -> bool:
        """
        Expands minimally so that `path` becomes the root of an exposed caret.

        Returns False, leaving the code untouched, if `path` is at or above an
        internal node.
        """
        self._alphabet.check_path(path)
        node = self.get_prefix_of(path)
        if node is None:
            return False
        while True:
            self._split(node)
            if node == path:
                return True
            node = path[: len(node) + 1]

    def reduce_at(self, path: str) -> bool:
        """
        Collapses the exposed caret at `path` into a single leaf.

        Only done when its children, in alphabet order, carry the labels
        l, l+1, ..., l+k-1; the new leaf gets label l.
        """
        self._alphabet.check_path(path)
        if path not in self._internal:
            return False
        kids = self._alphabet.children(path)
        labels = [self._labels.get(child) for child in kids]
        if labels[0] is None or labels != list(range(labels[0], labels[0] + len(kids))):
            return False

        first = labels[0]
        shift = self._alphabet.arity - 1
        for child in kids:
            del self._labels[child]
        self._relabel(lambda old: old - shift if old > first else old)
        self._labels[path] = first
        self._internal.discard(path)
        self._leaves = {lab: p for p, lab in self._labels.items()}
        return True

    def apply_perm(self, perm: PermutationLike) -> None:
        """Relabels each leaf l -> perm[l]. Raises PermutationMismatchError."""
        images = as_permutation(perm, self.size())
        self._relabel(lambda old: int(images[old]))
        self._leaves = {lab: p for p, lab in self._labels.items()}

    def swap_labels(self, a: str, b: str) -> bool:
        """Exchanges the labels of leaves `a` and `b`."""
        if a not in self._labels or b not in self._labels:
            return False
        self._labels[a], self._labels[b] = self._labels[b], self._labels[a]
        self._leaves[self._labels[a]] = a
        self._leaves[self._labels[b]] = b
        return True

    # Lattice operations

    def _check_same_alphabet(self, other: PrefixCode, operation: str) -> None:
        if self._alphabet != other._alphabet:
            raise JoinFailureError(
                f"Cannot {operation} codes over alphabets "
                f"{self._alphabet.symbols!r} and {other._alphabet.symbols!r}"
            )

    def _from_internal(self, internal: set[str]) -> PrefixCode:
        if not internal:
            return PrefixCode(self._alphabet)
        leaves = {
            child
            for node in internal
            for child in self._alphabet.children(node)
            if child not in internal
        }
        return PrefixCode.from_leaves(self._alphabet, leaves)

    def join(self, other: PrefixCode) -> PrefixCode:
        """
        Coarsest common refinement: every leaf of the result lies under a leaf
        of each operand. Labels are in dictionary order.

        Raises:
            JoinFailureError: the codes are over different alphabets.
        """
        self._check_same_alphabet(other, "join")
        return self._from_internal(self._internal | other._internal)

    def meet(self, other: PrefixCode) -> PrefixCode:
        """Finest common coarsening: both operands refine the result."""
        self._check_same_alphabet(other, "meet")
        return self._from_internal(self._internal & other._internal)

    # Copies and comparisons

    def copy(self) -> PrefixCode:
        clone = PrefixCode(self._alphabet)
        clone._labels = dict(self._labels)
        clone._leaves = dict(self._leaves)
        clone._internal = set(self._internal)
        return clone

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PrefixCode):
            return NotImplemented
        return self._alphabet == other._alphabet and self._labels == other._labels

    __hash__ = None  # type: ignore[assignment]

    def same_shape(self, other: PrefixCode) -> bool:
        """Equal leaf sets, labels ignored."""
        return self._labels.keys() == other._labels.keys()

    def __str__(self) -> str:
        return LEAF_SEPARATOR.join(
            f"[{leaf} {self._labels[leaf]}]" for leaf in self.leaves()
        )

    def __repr__(self) -> str:
        return f"PrefixCode({self._alphabet.symbols!r}, {str(self)!r})"


__all__ = ["PrefixCode"]
