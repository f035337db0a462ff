"""
Module: inventory

Purpose:
    Provides the LetterInventory dataclass - how many tiles of each letter
    A-Z to print. Every letter of the alphabet is always present, and all
    counts are non-negative integers.

Key Functions:
    - LetterInventory.default(): Reference tile distribution
    - LetterInventory.empty(): All counts zero
    - LetterInventory.with_counts(): Copy with some counts replaced
    - LetterInventory.total_tiles(): Tile total including spares

Dependencies:
    - dataclasses (std)
    - types (std)

Used By:
    - builder.sequence: Tile sequence expansion
    - builder.config: SheetConfig
    - core.utils.serialization: Settings file loading
"""

from __future__ import annotations

import string
from dataclasses import dataclass
from types import MappingProxyType
from typing import Iterator, Mapping, Tuple


ALPHABET: Tuple[str, ...] = tuple(string.ascii_uppercase)

DEFAULT_LETTER_COUNTS: Mapping[str, int] = MappingProxyType({
    "A": 217, "B": 22, "C": 27, "D": 27, "E": 126,
    "F": 3, "G": 9, "H": 24, "I": 90, "J": 21,
    "K": 19, "L": 93, "M": 47, "N": 110, "O": 54,
    "P": 8, "Q": 1, "R": 53, "S": 60, "T": 48,
    "U": 20, "V": 18, "W": 3, "X": 14, "Y": 31,
    "Z": 3,
})


@dataclass(frozen=True)
class LetterInventory:
    """
    Tile count per letter (immutable).

    Counts must already be normalized: callers clamp raw input with
    ``common.normalize.clamp_count`` before building an inventory.

    Attributes:
        counts: Read-only mapping of every letter A-Z to its count

    Invariants:
        - keys are exactly the 26 upper-case letters
        - every count is a non-negative int

    Example:
        >>> inv = LetterInventory.empty().with_counts({"A": 1})
        >>> inv["A"], inv["B"]
        (1, 0)
        >>> inv.total_tiles(spares=2)
        53
    """

    counts: Mapping[str, int]

    def __post_init__(self) -> None:
        """Validate and freeze counts on construction."""
        normalized = {key.upper(): value for key, value in self.counts.items()}
        if len(normalized) != len(self.counts):
            raise ValueError("Duplicate letters in inventory (case-insensitive)")
        unknown = sorted(set(normalized) - set(ALPHABET))
        if unknown:
            raise ValueError(f"Unknown letters in inventory: {unknown}")
        missing = sorted(set(ALPHABET) - set(normalized))
        if missing:
            raise ValueError(f"Missing letters in inventory: {missing}")
        for letter, value in normalized.items():
            if isinstance(value, bool) or not isinstance(value, int):
                raise ValueError(f"Count for {letter} must be an int: {value!r}")
            if value < 0:
                raise ValueError(f"Count for {letter} cannot be negative: {value}")

        ordered = {letter: normalized[letter] for letter in ALPHABET}
        object.__setattr__(self, "counts", MappingProxyType(ordered))

    # ─────────────────────────────────────────────────────────────────────────
    # Factory Methods
    # ─────────────────────────────────────────────────────────────────────────

    @classmethod
    def default(cls) -> LetterInventory:
        """Reference distribution (1148 tiles before spares)."""
        return cls(dict(DEFAULT_LETTER_COUNTS))

    @classmethod
    def empty(cls) -> LetterInventory:
        """Inventory with every count set to zero."""
        return cls({letter: 0 for letter in ALPHABET})

    def with_counts(self, overrides: Mapping[str, int]) -> LetterInventory:
        """
        Return a copy with some counts replaced.

        Args:
            overrides: Letter -> count (letters are case-insensitive)

        Returns:
            New LetterInventory; this one is unchanged

        Raises:
            ValueError: If an override names a non-letter or is negative
        """
        merged = dict(self.counts)
        for letter, value in overrides.items():
            key = letter.upper()
            if key not in merged:
                raise ValueError(f"Unknown letter: {letter!r}")
            merged[key] = value
        return LetterInventory(merged)

    # ─────────────────────────────────────────────────────────────────────────
    # Queries
    # ─────────────────────────────────────────────────────────────────────────

    def __getitem__(self, letter: str) -> int:
        return self.counts[letter.upper()]

    def __iter__(self) -> Iterator[str]:
        return iter(self.counts)

    def __len__(self) -> int:
        return len(self.counts)

    def items(self):
        return self.counts.items()

    @property
    def base_total(self) -> int:
        """Sum of all counts, without spares."""
        return sum(self.counts.values())

    def total_tiles(self, spares: int = 0) -> int:
        """Total number of tiles once ``spares`` is added to every letter."""
        return self.base_total + spares * len(self.counts)

    def to_dict(self) -> dict[str, int]:
        """Plain dict copy, ordered A-Z."""
        return dict(self.counts)
