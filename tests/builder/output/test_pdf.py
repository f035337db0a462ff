"""
Tests for ReportLab PDF output.

Uses pypdf to inspect generated PDFs.
"""

import pytest

from tile_toolkit.builder import build_sequence, render_pages
from tile_toolkit.builder.layout import GridGeometry, OriginPolicy
from tile_toolkit.builder.output import render_to_pdf
from tile_toolkit.core.models import LetterInventory

PdfReader = pytest.importorskip("pypdf").PdfReader

PT_PER_MM = 72 / 25.4
TOLERANCE_PT = 1.0


def _page_size_pt(page):
    return float(page.mediabox.width), float(page.mediabox.height)


class TestRenderToPdf:
    """Tests for render_to_pdf()."""

    def test_when_default_inventory_then_one_pdf_page_per_layout_page(self, tmp_path, default_geometry):
        # Arrange
        drawings = render_pages(build_sequence(LetterInventory.default(), 2), default_geometry)

        # Act
        path = render_to_pdf(drawings, tmp_path / "tiles.pdf")

        # Assert
        reader = PdfReader(path)
        assert len(reader.pages) == 18

    def test_when_padded_then_page_matches_drawing_size(self, tmp_path, default_geometry):
        """270 x 195 mm drawing -> same physical page size."""
        drawings = render_pages(("A",), default_geometry)

        reader = PdfReader(render_to_pdf(drawings, tmp_path / "one.pdf"))

        width, height = _page_size_pt(reader.pages[0])
        assert width == pytest.approx(270 * PT_PER_MM, abs=TOLERANCE_PT)
        assert height == pytest.approx(195 * PT_PER_MM, abs=TOLERANCE_PT)

    def test_when_centered_then_letter_landscape_page(self, tmp_path):
        geometry = GridGeometry(origin=OriginPolicy.CENTERED)
        drawings = render_pages(("A",), geometry)

        reader = PdfReader(render_to_pdf(drawings, tmp_path / "letter.pdf"))

        width, height = _page_size_pt(reader.pages[0])
        assert width == pytest.approx(792, abs=TOLERANCE_PT)
        assert height == pytest.approx(612, abs=TOLERANCE_PT)

    def test_when_rendered_then_letters_and_scores_in_text(self, tmp_path, default_geometry):
        drawings = render_pages(("Q", "Z"), default_geometry)

        reader = PdfReader(render_to_pdf(drawings, tmp_path / "qz.pdf"))

        text = reader.pages[0].extract_text()
        assert "Q" in text
        assert "Z" in text
        assert "10" in text

    def test_when_title_given_then_stored_in_metadata(self, tmp_path, default_geometry):
        drawings = render_pages(("A",), default_geometry)

        reader = PdfReader(render_to_pdf(drawings, tmp_path / "t.pdf", title="Club Set"))

        assert reader.metadata.title == "Club Set"

    def test_when_no_drawings_then_single_blank_page(self, tmp_path, caplog):
        path = render_to_pdf((), tmp_path / "empty.pdf")

        reader = PdfReader(path)
        assert len(reader.pages) == 1
        assert "Empty layout" in caplog.text
