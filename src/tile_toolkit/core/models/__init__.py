"""
Core Models Package

Immutable data models shared by the builder and the CLI.

All models in this package are frozen. A new instance is created for any
change, so a configuration snapshot can be passed through the pipeline
without being mutated along the way.
"""

from .inventory import ALPHABET, DEFAULT_LETTER_COUNTS, LetterInventory
from .scores import SCORE_TABLE, score_for

__all__ = [
    "ALPHABET",
    "DEFAULT_LETTER_COUNTS",
    "LetterInventory",
    "SCORE_TABLE",
    "score_for",
]
