"""
Unit tests for layout models.
"""

from tile_toolkit.builder.layout import GridGeometry, LayoutResult, PagePlan, TilePlacement


def _cell(index: int, letter: str = "", score=None) -> TilePlacement:
    return TilePlacement(index=index, row=0, column=index, x=index * 25, y=0, letter=letter, score=score)


class TestTilePlacement:
    """Tests for TilePlacement dataclass."""

    def test_is_blank_when_no_letter_then_true(self):
        assert _cell(0).is_blank
        assert not _cell(0, "A", 1).is_blank


class TestPagePlan:
    """Tests for PagePlan dataclass."""

    def test_counts_when_mixed_cells_then_correct(self):
        # Arrange
        page = PagePlan(index=0, placements=(_cell(0, "A", 1), _cell(1, "B", 3), _cell(2)))

        # Act & Assert
        assert page.tile_count == 2
        assert page.blank_count == 1
        assert page.letters == "AB"
        assert [p.letter for p in page.tiles] == ["A", "B"]


class TestLayoutResult:
    """Tests for LayoutResult dataclass."""

    def test_totals_when_pages_then_summed(self):
        pages = (
            PagePlan(index=0, placements=(_cell(0, "A", 1), _cell(1, "A", 1))),
            PagePlan(index=1, placements=(_cell(0, "Z", 10), _cell(1))),
        )

        result = LayoutResult(pages=pages, geometry=GridGeometry())

        assert result.page_count == 2
        assert result.total_tiles == 3
        assert result.warnings == []
