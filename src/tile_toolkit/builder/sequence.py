"""
Module: builder.sequence

Purpose:
    Expand a letter inventory into the ordered sequence of physical tiles.

Key Functions:
    - build_sequence(): Inventory + spares -> tile sequence
    - letter_runs(): Collapse a sequence back into (letter, count) runs

Algorithm:
    1. Sort letters ascending (upper-cased code point order)
    2. For each letter, append count + spares copies

Dependencies:
    - core.models.inventory: LetterInventory

Used By:
    - builder.controller: Main build controller
"""

from __future__ import annotations

import itertools
import logging
from typing import List, Sequence, Tuple

from tile_toolkit.core.models.inventory import LetterInventory

logger = logging.getLogger(__name__)

TileSequence = Tuple[str, ...]


def build_sequence(inventory: LetterInventory, spares: int = 0) -> TileSequence:
    """
    Build the full tile sequence, grouped by letter A-Z.

    Each letter contributes one contiguous run of ``count + spares`` tiles.
    Letters whose run length is zero do not appear at all.

    Args:
        inventory: Normalized letter counts
        spares: Extra tiles per letter (non-negative)

    Returns:
        Tuple of single-letter strings, one per tile

    Example:
        >>> inv = LetterInventory.empty().with_counts({"B": 1, "A": 2})
        >>> build_sequence(inv)
        ('A', 'A', 'B')
    """
    tiles: List[str] = []
    for letter, count in sorted(inventory.items(), key=lambda item: item[0].upper()):
        tiles.extend(itertools.repeat(letter, count + spares))

    logger.debug(f"Built sequence of {len(tiles)} tiles ({spares} spares per letter)")
    return tuple(tiles)


def letter_runs(sequence: Sequence[str]) -> List[Tuple[str, int]]:
    """
    Collapse a tile sequence into consecutive (letter, run length) pairs.

    Example:
        >>> letter_runs(("A", "A", "B"))
        [('A', 2), ('B', 1)]
    """
    return [(letter, len(list(group))) for letter, group in itertools.groupby(sequence)]
