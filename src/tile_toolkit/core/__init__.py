"""
Tile Toolkit Core Package

Data models (letter inventory, score table) and settings-file utilities.
These models are the single source of truth for letter counts and point
values; the builder never hard-codes either.
"""

from .models import ALPHABET, LetterInventory, SCORE_TABLE, score_for

__all__ = [
    "ALPHABET",
    "LetterInventory",
    "SCORE_TABLE",
    "score_for",
]
