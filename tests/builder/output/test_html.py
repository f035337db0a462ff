"""
Unit tests for the HTML print document.
"""

from tile_toolkit.builder import render_pages
from tile_toolkit.builder.output import build_print_html, write_print_html


class TestBuildPrintHtml:
    """Tests for build_print_html()."""

    def test_when_two_pages_then_two_sections_with_headings(self, default_geometry):
        # Arrange
        drawings = render_pages(("A",) * 80, default_geometry)

        # Act
        html = build_print_html(drawings, title="Club Set")

        # Assert
        assert html.count('<section class="page"') == 2
        assert "<h2>Page 1</h2>" in html
        assert "<h2>Page 2</h2>" in html
        assert "<title>Club Set</title>" in html
        assert html.count("<svg ") == 2

    def test_when_printed_then_page_breaks_and_hidden_headings(self, default_geometry):
        html = build_print_html(render_pages(("A",), default_geometry))

        assert "page-break-after: always" in html
        assert "@media print" in html
        assert "display: none" in html

    def test_when_title_has_markup_then_escaped(self):
        html = build_print_html((), title="<Tiles & Co>")

        assert "<title>&lt;Tiles &amp; Co&gt;</title>" in html
        assert '<section class="page"' not in html


class TestWritePrintHtml:
    """Tests for write_print_html()."""

    def test_when_written_then_file_contains_document(self, tmp_path, default_geometry):
        drawings = render_pages(("B",), default_geometry)
        target = tmp_path / "nested" / "tiles.html"

        path = write_print_html(drawings, target, title="Letter Tiles")

        assert path == target
        assert path.read_text(encoding="utf-8") == build_print_html(drawings, "Letter Tiles")

    def test_when_no_drawings_then_logs_warning(self, tmp_path, caplog):
        write_print_html((), tmp_path / "empty.html")

        assert "No pages to print" in caplog.text
