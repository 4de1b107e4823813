"""
Ordered alphabets for prefix codes.

An Alphabet is a frozen, ordered set of k >= 2 single-character symbols,
none of them whitespace or a delimiter of the text forms.
Paths (node addresses) are plain strings over those symbols, the root being "".
Dictionary order on paths compares symbol ranks position by position, a proper
prefix sorting before its extensions.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from constants import RESERVED_SYMBOLS
from prefix_code.errors import InvalidAlphabetError


@dataclass(frozen=True)
class Alphabet:
    """Ordered symbol set shared by every code in a computation."""

    symbols: str
    _ranks: dict[str, int] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        if not isinstance(self.symbols, str) or not self.symbols:
            raise InvalidAlphabetError("Alphabet cannot be empty")
        if len(set(self.symbols)) != len(self.symbols):
            raise InvalidAlphabetError(
                f"Alphabet {self.symbols!r} contains repeated symbols"
            )
        if len(self.symbols) < 2:
            raise InvalidAlphabetError(
                f"Alphabet {self.symbols!r} needs at least two symbols"
            )
        reserved = [s for s in self.symbols if s.isspace() or s in RESERVED_SYMBOLS]
        if reserved:
            raise InvalidAlphabetError(
                f"Alphabet {self.symbols!r} uses reserved symbols {reserved}"
            )
        object.__setattr__(
            self, "_ranks", {s: i for i, s in enumerate(self.symbols)}
        )

    @classmethod
    def of(cls, alphabet: str | Alphabet) -> Alphabet:
        """Coerces a symbol string into an Alphabet."""
        if isinstance(alphabet, Alphabet):
            return alphabet
        return cls(alphabet)

    @property
    def arity(self) -> int:
        return len(self.symbols)

    def __len__(self) -> int:
        return len(self.symbols)

    def __iter__(self):
        return iter(self.symbols)

    def __getitem__(self, index: int) -> str:
        return self.symbols[index]

    def __str__(self) -> str:
        return self.symbols

    def rank(self, symbol: str) -> int:
        return self._ranks[symbol]

    def children(self, path: str) -> tuple[str, ...]:
        """The k children of a node, in alphabet order."""
        return tuple(path + s for s in self.symbols)

    def sort_key(self, path: str) -> tuple[int, ...]:
        """Key realising dictionary order on paths."""
        return tuple(self._ranks[s] for s in path)

    def check_path(self, path: str) -> str:
        """Returns the path unchanged, or raises ValueError on foreign symbols."""
        if not isinstance(path, str):
            raise TypeError(f"Path must be a string, got {type(path).__name__}")
        for s in path:
            if s not in self._ranks:
                raise ValueError(
                    f"Path {path!r} uses symbol {s!r} outside alphabet {self.symbols!r}"
                )
        return path


__all__ = ["Alphabet"]
