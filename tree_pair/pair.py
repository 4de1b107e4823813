"""
Tree pairs: elements of R. Thompson's groups F, T and V.

A TreePair couples a domain and a range PrefixCode over one alphabet, of equal
size. The domain leaf labelled l is sent to the range leaf labelled l. Labels
are a gauge: relabelling both sides by the same permutation leaves the element
unchanged, and reset_labels() fixes the gauge so the domain reads 0, 1, ...,
n-1 in dictionary order.

Range-side operations are the domain-side ones conjugated by invert():
swap the codes, run the domain algorithm, swap back.

Mutating methods change the receiver in place; copy() first to keep the
original.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from constants import DEFAULT_ALPHABET, DOMAIN_TAG, RANGE_TAG, SIDE_SEPARATOR
from prefix_code import (
    Alphabet,
    InvalidAlphabetError,
    MalformedEncodingError,
    PermutationLike,
    PermutationMismatchError,
    PrefixCode,
    as_permutation,
    dfs_to_prefix_code,
    inverse,
    is_rotation,
    prefix_code_to_dfs,
)
from tree_pair.parsing import parse_dfs_triple, parse_full_string

logger = logging.getLogger(__name__)


class TreePair:
    """A domain and range prefix code of equal size with a leaf bijection."""

    __slots__ = ("_domain", "_range")

    def __init__(self, alphabet: str | Alphabet = DEFAULT_ALPHABET) -> None:
        alpha = Alphabet.of(alphabet)
        self._domain = PrefixCode(alpha)
        self._range = PrefixCode(alpha)

    # Construction

    @classmethod
    def from_codes(
        cls, domain: PrefixCode, range_: PrefixCode, copy: bool = True
    ) -> TreePair:
        """
        Wraps two codes into a pair, copying them unless `copy` is False.

        Raises:
            InvalidAlphabetError: the codes use different alphabets.
            PermutationMismatchError: the codes differ in size.
        """
        if domain.alphabet != range_.alphabet:
            raise InvalidAlphabetError(
                f"Domain alphabet {domain.alphabet} differs from range alphabet {range_.alphabet}"
            )
        if domain.size() != range_.size():
            raise PermutationMismatchError(
                f"Domain has {domain.size()} leaves but range has {range_.size()}"
            )
        pair = cls.__new__(cls)
        pair._domain = domain.copy() if copy else domain
        pair._range = range_.copy() if copy else range_
        return pair

    @classmethod
    def from_dfs(cls, alphabet: str | Alphabet, dfs: str) -> TreePair:
        """Builds a pair from a DFS triple such as "{11000,10100,1 2 0}"."""
        pair = cls(alphabet)
        pair.decode_dfs(dfs)
        return pair

    @classmethod
    def from_expansions(
        cls,
        alphabet: str | Alphabet,
        domain_expansions: Iterable[str] = (),
        range_expansions: Iterable[str] = (),
    ) -> TreePair:
        """Expands the trivial pair at each domain path, then each range path."""
        pair = cls(alphabet)
        for path in domain_expansions:
            pair.expand_domain_at(path)
        for path in range_expansions:
            pair.expand_range_at(path)
        return pair

    @classmethod
    def from_full_string(cls, alphabet: str | Alphabet, text: str) -> TreePair:
        """Inverse of full_string()."""
        alpha = Alphabet.of(alphabet)
        domain_leaves, range_leaves = parse_full_string(text)
        return cls.from_codes(
            PrefixCode.from_leaves(alpha, domain_leaves),
            PrefixCode.from_leaves(alpha, range_leaves),
            copy=False,
        )

    def decode_dfs(self, dfs: str) -> None:
        """
        Replaces both codes with those described by a DFS triple.

        The range leaf of dictionary rank r receives label perm[r]. On any
        error the pair is left unmodified.

        Raises:
            MalformedEncodingError: bad triple syntax, bad DFS string, or the
                two trees differ in size.
            ArityMismatchError: a DFS string does not describe a k-ary tree.
            PermutationMismatchError: perm is not a bijection on the leaves.
        """
        domain_dfs, range_dfs, perm = parse_dfs_triple(dfs)
        alpha = self.alphabet
        domain = dfs_to_prefix_code(alpha, domain_dfs)
        range_ = dfs_to_prefix_code(alpha, range_dfs)
        if domain.size() != range_.size():
            raise MalformedEncodingError(
                f"{dfs!r} describes a domain of {domain.size()} leaves "
                f"and a range of {range_.size()}"
            )
        range_.apply_perm(perm)
        self._domain, self._range = domain, range_

    def to_dfs(self) -> str:
        """DFS triple of this element, with the domain labelled in natural order."""
        normal = self.copy()
        normal.reset_labels()
        perm = " ".join(str(label) for label in normal._range.permutation())
        return (
            f"{{{prefix_code_to_dfs(normal._domain)},"
            f"{prefix_code_to_dfs(normal._range)},{perm}}}"
        )

    def copy(self) -> TreePair:
        return TreePair.from_codes(self._domain, self._range)

    # Queries

    @property
    def alphabet(self) -> Alphabet:
        return self._domain.alphabet

    @property
    def domain(self) -> PrefixCode:
        """The live domain code."""
        return self._domain

    @property
    def range(self) -> PrefixCode:
        """The live range code."""
        return self._range

    def size(self) -> int:
        return self._domain.size()

    def __len__(self) -> int:
        return self._domain.size()

    def exposed_carets(self) -> tuple[str, ...]:
        return self._domain.exposed_carets()

    def full_string(self) -> str:
        return (
            f"{{{DOMAIN_TAG} {self._domain}{SIDE_SEPARATOR}{RANGE_TAG} {self._range}}}"
        )

    def __str__(self) -> str:
        return self.full_string()

    def __repr__(self) -> str:
        return f"TreePair({self.alphabet.symbols!r}, {self.full_string()!r})"

    def equals(self, other: TreePair) -> bool:
        """Combinatorial equality; minimise both first to compare group elements."""
        return self.full_string() == other.full_string()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TreePair):
            return NotImplemented
        return self.equals(other)

    __hash__ = None  # type: ignore[assignment]

    # Labels

    def apply_perm_domain(self, perm: PermutationLike) -> None:
        self._domain.apply_perm(perm)

    def apply_perm_range(self, perm: PermutationLike) -> None:
        self._range.apply_perm(perm)

    def permute_labels(self, perm: PermutationLike) -> None:
        """Relabels both sides by `perm`; the element is unchanged."""
        images = as_permutation(perm, self.size())
        self._domain.apply_perm(images)
        self._range.apply_perm(images)

    def reset_labels(self) -> None:
        """Relabels both sides so the domain reads 0, 1, ..., n-1."""
        self.permute_labels(inverse(self._domain.permutation()))

    def swap_labels_at_domain(self, a: str, b: str) -> bool:
        return self._domain.swap_labels(a, b)

    def swap_labels_at_range(self, a: str, b: str) -> bool:
        return self._range.swap_labels(a, b)

    # Structure

    def invert(self) -> None:
        """Swaps domain and range. Labels are not reset."""
        self._domain, self._range = self._range, self._domain

    def expand_domain_at(self, path: str) -> bool:
        """
        Expands the domain so `path` roots an exposed caret, and the range at
        the corresponding place so the element is unchanged.

        Returns False, changing nothing, if `path` is at or above an internal
        domain node.
        """
        self.alphabet.check_path(path)
        leaf = self._domain.get_prefix_of(path)
        if leaf is None:
            return False
        image = self._range.leaf_at_label(self._domain.label_at_leaf(leaf))
        suffix = path[len(leaf) :]
        self._domain.expand_at(path)
        self._range.expand_at(image + suffix)
        return True

    def expand_range_at(self, path: str) -> bool:
        self.invert()
        try:
            return self.expand_domain_at(path)
        finally:
            self.invert()

    def reduce_domain_at(self, path: str) -> bool:
        """
        Collapses the exposed domain caret at `path` together with its image.

        The image of the caret's leaves must itself be an exposed range caret,
        labelled l, l+1, ..., l+k-1 in alphabet order. Labels are always reset,
        whether or not a reduction happens.
        """
        self.reset_labels()
        if not self._domain.is_exposed_caret(path):
            return False

        alpha = self.alphabet
        first_label = self._domain.label_at_leaf(path + alpha[0])
        image = self._range.leaf_at_label(first_label)
        if not image:
            return False

        range_root = image[:-1]
        for offset, child in enumerate(alpha.children(range_root)):
            if self._range.label_at_leaf(child) != first_label + offset:
                return False

        self._domain.reduce_at(path)
        self._range.reduce_at(range_root)
        self.reset_labels()
        logger.debug(f"Reduced domain caret {path!r} against range caret {range_root!r}")
        return True

    def reduce_range_at(self, path: str) -> bool:
        self.invert()
        try:
            return self.reduce_domain_at(path)
        finally:
            self.invert()
            self.reset_labels()

    def minimise(self) -> None:
        """
        Reduces to the unique minimal representative of the element.

        Sweeps the domain's exposed carets until a full sweep reduces nothing.
        Domain labels end in natural order.
        """
        self.reset_labels()
        reduced = True
        while reduced:
            reduced = False
            for caret in self._domain.exposed_carets():
                if self.reduce_domain_at(caret):
                    reduced = True

    minimize = minimise

    # Classification

    def in_f(self) -> bool:
        """Order-preserving leaf correspondence."""
        return self._domain.permutation() == self._range.permutation()

    def in_t(self) -> bool:
        """Leaf correspondence is a cyclic rotation."""
        return is_rotation(self._range.permutation(), self._domain.permutation())

    def in_v(self) -> bool:
        return True


__all__ = ["TreePair"]
