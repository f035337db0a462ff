"""
Module: builder.output

Purpose:
    Page drawings and the sinks that write them.
    render_pages() produces SVG drawings; every other sink consumes them.

Key Functions:
    - render_pages(): Tile sequence -> PageDrawings
    - write_svg_pages(): One SVG file per page
    - write_print_html(): One HTML print document
    - render_to_pdf(): One PDF (ReportLab)
    - render_to_png(): PNG previews (Pillow)

Used By:
    - builder.controller: Pipeline orchestration
"""

from .svg import PageDrawing, render_layout, render_page_svg, render_pages, write_svg_pages
from .html import build_print_html, write_print_html
from .pdf import render_to_pdf
from .raster import render_page_image, render_to_png

__all__ = [
    "PageDrawing",
    "render_pages",
    "render_layout",
    "render_page_svg",
    "write_svg_pages",
    "build_print_html",
    "write_print_html",
    "render_to_pdf",
    "render_page_image",
    "render_to_png",
]
