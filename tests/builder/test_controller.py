"""
Tests for the build controller.
"""

import logging

import pytest

from tile_toolkit.builder import (
    OUTPUT_FORMATS,
    BuildError,
    BuildResult,
    SheetConfig,
    build_sheets,
    render_sheets,
)
from tile_toolkit.builder.layout import GridGeometry
from tile_toolkit.core.models import LetterInventory


class TestRenderSheets:
    """Tests for render_sheets()."""

    def test_when_defaults_then_1200_tiles_on_18_pages(self):
        """Default counts, 2 spares, 25mm tiles."""
        # Act
        result = render_sheets(SheetConfig())

        # Assert
        assert isinstance(result, BuildResult)
        assert result.total_tiles == 1200
        assert result.page_count == 18
        assert result.drawings[-1].tile_count == 10
        assert result.outputs == {}

    def test_when_reference_inventory_then_1197_tiles_last_page_47(self, reference_inventory):
        result = render_sheets(SheetConfig(inventory=reference_inventory, spares=2))

        assert result.total_tiles == 1197
        assert result.page_count == 18
        assert result.drawings[-1].tile_count == 47

    def test_when_rendered_then_sequence_shared_with_layout(self):
        result = render_sheets(SheetConfig(spares=0))

        letters = "".join(page.letters for page in result.layout.pages)
        assert letters == "".join(result.sequence)
        assert sum(length for _, length in result.runs) == result.total_tiles

    def test_when_tile_size_changes_then_page_count_does_not(self):
        small = render_sheets(SheetConfig(geometry=GridGeometry(tile_size_mm=10)))
        large = render_sheets(SheetConfig(geometry=GridGeometry(tile_size_mm=40)))

        assert small.page_count == large.page_count == 18
        assert large.drawings[0].width_mm == 40 * 10 + 20


class TestBuildSheets:
    """Tests for build_sheets()."""

    def test_when_all_formats_then_every_sink_writes(self, tmp_path):
        # Arrange
        inventory = LetterInventory.empty().with_counts({"A": 75})
        config = SheetConfig(
            inventory=inventory,
            spares=0,
            output_dir=tmp_path,
            formats=OUTPUT_FORMATS,
            dpi=30,
        )

        # Act
        result = build_sheets(config)

        # Assert
        assert result.page_count == 2
        assert [p.name for p in result.outputs["svg"]] == ["tiles-page-01.svg", "tiles-page-02.svg"]
        assert result.outputs["html"] == [tmp_path / "tiles.html"]
        assert result.outputs["pdf"] == [tmp_path / "tiles.pdf"]
        assert len(result.outputs["png"]) == 2
        for paths in result.outputs.values():
            assert all(path.exists() for path in paths)

    def test_when_stem_given_then_used_for_file_names(self, tmp_path, single_a_inventory):
        config = SheetConfig(
            inventory=single_a_inventory,
            spares=0,
            output_dir=tmp_path,
            formats=("pdf",),
            stem="club",
        )

        result = build_sheets(config)

        assert result.outputs == {"pdf": [tmp_path / "club.pdf"]}

    def test_when_nothing_to_print_then_warns_and_still_writes(self, tmp_path):
        """All-zero counts and zero spares give no pages, not an error."""
        config = SheetConfig(
            inventory=LetterInventory.empty(),
            spares=0,
            output_dir=tmp_path,
            formats=("svg", "html"),
        )

        result = build_sheets(config)

        assert result.page_count == 0
        assert result.outputs["svg"] == []
        assert (tmp_path / "tiles.html").exists()
        assert any("No tiles to print" in w for w in result.warnings)

    def test_when_output_dir_is_a_file_then_raises_build_error(self, tmp_path, single_a_inventory):
        # Arrange
        blocker = tmp_path / "blocker"
        blocker.write_text("not a directory", encoding="utf-8")
        config = SheetConfig(
            inventory=single_a_inventory,
            spares=0,
            output_dir=blocker,
            formats=("svg",),
        )

        # Act & Assert
        with pytest.raises(BuildError, match="Failed to write svg output"):
            build_sheets(config)

    def test_when_debug_logging_then_letter_counts_logged(self, tmp_path, single_a_inventory, caplog):
        caplog.set_level(logging.DEBUG, logger="tile_toolkit.builder.controller")
        config = SheetConfig(inventory=single_a_inventory, spares=0, output_dir=tmp_path)

        build_sheets(config)

        assert "Letter counts: {'A': 1, 'B': 0" in caplog.text
