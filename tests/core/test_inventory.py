"""
Unit tests for LetterInventory and the score table.
"""

import pytest

from tile_toolkit.core.models import (
    ALPHABET,
    DEFAULT_LETTER_COUNTS,
    LetterInventory,
    SCORE_TABLE,
    score_for,
)


class TestLetterInventory:
    """Tests for LetterInventory dataclass."""

    def test_default_when_created_then_sums_to_reference_total(self):
        """Default distribution has 1148 tiles."""
        # Act
        inv = LetterInventory.default()

        # Assert
        assert inv.base_total == 1148
        assert inv["A"] == 217
        assert inv["Z"] == 3

    def test_empty_when_created_then_every_letter_zero(self):
        """Empty inventory covers A-Z with zero counts."""
        inv = LetterInventory.empty()

        assert len(inv) == 26
        assert list(inv) == list(ALPHABET)
        assert inv.base_total == 0

    def test_init_when_keys_lowercase_then_normalized_and_ordered(self):
        """Lower-case keys are accepted and stored upper-case A-Z."""
        # Arrange
        counts = {letter.lower(): 1 for letter in reversed(ALPHABET)}

        # Act
        inv = LetterInventory(counts)

        # Assert
        assert list(inv) == list(ALPHABET)
        assert inv["q"] == 1

    def test_init_when_letter_missing_then_raises_error(self):
        """Every letter must be present exactly once."""
        counts = dict(DEFAULT_LETTER_COUNTS)
        del counts["Q"]

        with pytest.raises(ValueError, match="Missing letters"):
            LetterInventory(counts)

    def test_init_when_unknown_key_then_raises_error(self):
        """Non-letter keys are rejected."""
        counts = dict(DEFAULT_LETTER_COUNTS)
        counts["?"] = 2

        with pytest.raises(ValueError, match="Unknown letters"):
            LetterInventory(counts)

    def test_init_when_duplicate_case_then_raises_error(self):
        """'a' and 'A' together are a duplicate."""
        counts = dict(DEFAULT_LETTER_COUNTS)
        counts["a"] = 1

        with pytest.raises(ValueError, match="Duplicate"):
            LetterInventory(counts)

    def test_init_when_negative_count_then_raises_error(self):
        """Counts must already be clamped."""
        with pytest.raises(ValueError, match="cannot be negative"):
            LetterInventory.empty().with_counts({"B": -1})

    def test_init_when_non_int_count_then_raises_error(self):
        """Strings are not counts; callers normalize first."""
        with pytest.raises(ValueError, match="must be an int"):
            LetterInventory.empty().with_counts({"B": "3"})

    def test_with_counts_when_called_then_source_unchanged(self):
        """with_counts returns a copy."""
        # Arrange
        base = LetterInventory.empty()

        # Act
        updated = base.with_counts({"e": 4})

        # Assert
        assert updated["E"] == 4
        assert base["E"] == 0

    def test_with_counts_when_unknown_letter_then_raises_error(self):
        with pytest.raises(ValueError, match="Unknown letter"):
            LetterInventory.empty().with_counts({"1": 4})

    def test_to_dict_when_called_then_plain_ordered_copy(self):
        # Arrange
        inv = LetterInventory.empty().with_counts({"q": 2})

        # Act
        counts = inv.to_dict()
        counts["Q"] = 9

        # Assert
        assert type(counts) is dict
        assert list(counts) == list(ALPHABET)
        assert inv["Q"] == 2

    def test_total_tiles_when_spares_then_adds_spares_per_letter(self):
        """Default 1148 + 26 x 2 spares = 1200."""
        assert LetterInventory.default().total_tiles(spares=2) == 1200

    def test_total_tiles_when_reference_inventory_then_1197(self, reference_inventory):
        assert reference_inventory.base_total == 1145
        assert reference_inventory.total_tiles(spares=2) == 1197

    def test_counts_when_mutated_then_raises(self):
        """Counts mapping is read-only."""
        inv = LetterInventory.empty()

        with pytest.raises(TypeError):
            inv.counts["A"] = 5


class TestScoreTable:
    """Tests for the fixed score table."""

    def test_table_when_loaded_then_covers_alphabet(self):
        assert set(SCORE_TABLE) == set(ALPHABET)
        assert all(value > 0 for value in SCORE_TABLE.values())

    @pytest.mark.parametrize("letter,expected", [
        ("A", 1), ("D", 2), ("K", 5), ("J", 8), ("Q", 10), ("z", 10),
    ])
    def test_score_for_when_letter_then_table_value(self, letter, expected):
        assert score_for(letter) == expected

    def test_score_for_when_blank_then_none(self):
        assert score_for("") is None

    def test_table_when_mutated_then_raises(self):
        with pytest.raises(TypeError):
            SCORE_TABLE["A"] = 5
