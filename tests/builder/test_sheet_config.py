"""
Unit tests for SheetConfig.
"""

import pytest

from tile_toolkit.builder import OUTPUT_FORMATS, SheetConfig
from tile_toolkit.core.models import LetterInventory


class TestSheetConfig:
    """Tests for SheetConfig dataclass."""

    def test_init_when_defaults_then_reference_sheet(self):
        # Act
        config = SheetConfig()

        # Assert
        assert config.spares == 2
        assert config.formats == ("svg",)
        assert config.geometry.tiles_per_page == 70
        assert config.total_tiles == 1200

    def test_total_tiles_when_custom_inventory_then_counts_plus_spares(self, single_a_inventory):
        config = SheetConfig(inventory=single_a_inventory, spares=1)

        assert config.total_tiles == 1 + 26

    def test_init_when_all_formats_then_valid(self):
        config = SheetConfig(formats=OUTPUT_FORMATS)

        assert set(config.formats) == {"svg", "html", "pdf", "png"}

    @pytest.mark.parametrize("kwargs,message", [
        ({"spares": -1}, "spares must be non-negative"),
        ({"formats": ()}, "At least one output format is required"),
        ({"formats": ("svg", "docx")}, "Unknown output formats"),
        ({"dpi": 0}, "dpi must be positive"),
        ({"stem": "a/b"}, "stem must be a plain file name"),
        ({"stem": ""}, "stem must be a plain file name"),
    ])
    def test_init_when_invalid_then_raises_error(self, kwargs, message):
        with pytest.raises(ValueError, match=message):
            SheetConfig(**kwargs)

    def test_init_when_frozen_then_immutable(self):
        config = SheetConfig(inventory=LetterInventory.empty())

        with pytest.raises(AttributeError):
            config.spares = 5
