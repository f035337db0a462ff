"""
Module: builder.output.html

Purpose:
    Write all tile pages into one HTML print document. Opening the file
    in a browser and printing it yields one sheet per page at true size.

Key Functions:
    - build_print_html(): Document markup
    - write_print_html(): Write the document to disk

Dependencies:
    - builder.output.svg: PageDrawing

Used By:
    - builder.controller: Pipeline orchestration
"""

from __future__ import annotations

import logging
from html import escape
from pathlib import Path
from typing import Sequence

from .svg import PageDrawing

logger = logging.getLogger(__name__)

_STYLE = """\
@page {
  size: landscape;
  margin: 0;
}
body {
  margin: 0;
  font-family: Helvetica, Arial, sans-serif;
}
.page {
  break-after: page;
  page-break-after: always;
}
.page:last-child {
  break-after: auto;
  page-break-after: auto;
}
.page svg {
  display: block;
}
@media print {
  h1, h2 {
    display: none;
  }
}
"""


def build_print_html(drawings: Sequence[PageDrawing], title: str = "Letter Tiles") -> str:
    """
    Build the print document with a "Page N" heading per drawing.

    Headings are hidden when printing so each sheet carries only tiles.
    """
    sections = []
    for drawing in drawings:
        sections.append(
            f'<section class="page" data-index="{drawing.index}">\n'
            f"<h2>Page {drawing.index + 1}</h2>\n"
            f"{drawing.svg}"
            f"</section>\n"
        )

    safe_title = escape(title)
    return (
        "<!DOCTYPE html>\n"
        "<html>\n"
        "<head>\n"
        '<meta charset="utf-8">\n'
        f"<title>{safe_title}</title>\n"
        f"<style>\n{_STYLE}</style>\n"
        "</head>\n"
        "<body>\n"
        f"<h1>{safe_title}</h1>\n"
        f"{''.join(sections)}"
        "</body>\n"
        "</html>\n"
    )


def write_print_html(
    drawings: Sequence[PageDrawing],
    output_path: Path,
    *,
    title: str = "Letter Tiles",
) -> Path:
    """
    Write the print document.

    Args:
        drawings: Rendered pages
        output_path: Target .html file
        title: Document title

    Returns:
        Path written

    Raises:
        OSError: If the file cannot be written
    """
    if not drawings:
        logger.warning("No pages to print, writing empty document")

    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(build_print_html(drawings, title), encoding="utf-8")

    logger.info(f"Wrote print view with {len(drawings)} pages to {output_path}")
    return output_path
