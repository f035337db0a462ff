"""
Module: scores

Purpose:
    The fixed point value of every letter tile. The table is read-only
    and shared for the lifetime of the process.

Key Functions:
    - score_for(): Point value of a single letter

Dependencies:
    - types (std)

Used By:
    - builder.layout.paginator: Scores attached to each placement
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping, Optional


SCORE_TABLE: Mapping[str, int] = MappingProxyType({
    "A": 1, "B": 3, "C": 3, "D": 2, "E": 1,
    "F": 4, "G": 2, "H": 4, "I": 1, "J": 8,
    "K": 5, "L": 1, "M": 3, "N": 1, "O": 1,
    "P": 3, "Q": 10, "R": 1, "S": 1, "T": 1,
    "U": 1, "V": 4, "W": 4, "X": 8, "Y": 4,
    "Z": 10,
})


def score_for(letter: str, scores: Mapping[str, int] = SCORE_TABLE) -> Optional[int]:
    """
    Look up the point value for a letter.

    Args:
        letter: Tile letter (case-insensitive). Empty string for a blank cell.
        scores: Score table to use

    Returns:
        Point value, or None for a blank cell or a letter not in the table

    Example:
        >>> score_for("q")
        10
        >>> score_for("") is None
        True
    """
    if not letter:
        return None
    return scores.get(letter.upper())
