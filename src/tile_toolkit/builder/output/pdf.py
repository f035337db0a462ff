"""
Module: builder.output.pdf

Purpose:
    Render tile pages to PDF using ReportLab.
    Each PageDrawing becomes one PDF page of the same physical size,
    with every tile drawn at its layout position.

Key Functions:
    - render_to_pdf(): Main rendering function

Dependencies:
    - reportlab: PDF generation
    - builder.output.svg: PageDrawing

Used By:
    - builder.controller: Pipeline orchestration
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Sequence, Tuple

from reportlab.lib.units import mm
from reportlab.pdfgen import canvas

from tile_toolkit.builder.layout import LETTER_LANDSCAPE_MM, TilePlacement

from .style import (
    LETTER_FONT_RATIO,
    SCORE_FONT_RATIO,
    SCORE_POSITION_RATIO,
    TILE_FILL_RGB,
    TILE_STROKE_MM,
    TILE_STROKE_RGB,
)
from .svg import PageDrawing

logger = logging.getLogger(__name__)

FONT_NAME = "Helvetica"
# Half the Helvetica cap height, used to center glyphs vertically
CAP_HEIGHT_CENTER = 0.359
LINE_JOIN_ROUND = 1


def render_to_pdf(
    drawings: Sequence[PageDrawing],
    output_path: Path,
    *,
    title: str = "Letter Tiles",
    empty_page_size_mm: Tuple[float, float] = LETTER_LANDSCAPE_MM,
) -> Path:
    """
    Render page drawings to a PDF file.

    Page size is taken from each drawing, so 1 mm in the layout is 1 mm
    on paper when printed at 100% scale.

    Args:
        drawings: Rendered pages
        output_path: Path to write PDF
        title: PDF document title
        empty_page_size_mm: Page size used when there are no drawings

    Returns:
        Path written

    Raises:
        OSError: If PDF cannot be written

    Example:
        >>> render_to_pdf(drawings, Path("output/tiles.pdf"))
    """
    if not drawings:
        logger.warning("Empty layout, creating empty PDF")

    output_path.parent.mkdir(parents=True, exist_ok=True)

    if drawings:
        first_size = (drawings[0].width_mm * mm, drawings[0].height_mm * mm)
    else:
        first_size = (empty_page_size_mm[0] * mm, empty_page_size_mm[1] * mm)

    c = canvas.Canvas(str(output_path), pagesize=first_size)
    c.setTitle(title)

    for drawing in drawings:
        c.setPageSize((drawing.width_mm * mm, drawing.height_mm * mm))
        _render_page(c, drawing)
        c.showPage()

    if not drawings:
        c.showPage()

    c.save()

    logger.info(f"Rendered {len(drawings)} pages to {output_path}")
    return output_path


def _render_page(c: canvas.Canvas, drawing: PageDrawing) -> None:
    """
    Render a single page to the canvas.

    Args:
        c: ReportLab canvas
        drawing: Page to draw
    """
    page_height_pt = drawing.height_mm * mm
    size_mm = drawing.geometry.tile_size_mm

    for placement in drawing.plan.placements:
        if placement.is_blank and not drawing.geometry.draw_blank_cells:
            continue
        _draw_tile(c, placement, size_mm, page_height_pt)


def _draw_tile(
    c: canvas.Canvas,
    placement: TilePlacement,
    size_mm: float,
    page_height_pt: float,
) -> None:
    """
    Draw one tile: square, centered letter, score toward the bottom right.

    Args:
        c: ReportLab canvas
        placement: Cell to draw
        size_mm: Tile edge length
        page_height_pt: Page height for Y coordinate transformation
    """
    size_pt = size_mm * mm
    x_pt = placement.x * mm
    y_pt = _transform_y(page_height_pt, placement.y, size_mm)

    c.saveState()
    c.setStrokeColorRGB(*_unit_rgb(TILE_STROKE_RGB))
    c.setLineWidth(TILE_STROKE_MM * mm)
    c.setLineJoin(LINE_JOIN_ROUND)

    if placement.is_blank:
        c.rect(x_pt, y_pt, size_pt, size_pt, stroke=1, fill=0)
        c.restoreState()
        return

    c.setFillColorRGB(*_unit_rgb(TILE_FILL_RGB))
    c.rect(x_pt, y_pt, size_pt, size_pt, stroke=1, fill=1)

    c.setFillColorRGB(0, 0, 0)
    letter_size = size_pt * LETTER_FONT_RATIO
    c.setFont(FONT_NAME, letter_size)
    c.drawCentredString(
        x_pt + size_pt / 2,
        y_pt + size_pt / 2 - letter_size * CAP_HEIGHT_CENTER,
        placement.letter,
    )

    if placement.score is not None:
        score_size = size_pt * SCORE_FONT_RATIO
        c.setFont(FONT_NAME, score_size)
        # Score center sits SCORE_POSITION_RATIO down from the tile top
        c.drawCentredString(
            x_pt + size_pt * SCORE_POSITION_RATIO,
            y_pt + size_pt * (1 - SCORE_POSITION_RATIO) - score_size * CAP_HEIGHT_CENTER,
            str(placement.score),
        )

    c.restoreState()


def _unit_rgb(rgb: Tuple[int, int, int]) -> Tuple[float, float, float]:
    return (rgb[0] / 255, rgb[1] / 255, rgb[2] / 255)


def _transform_y(page_height_pt: float, y_mm_top: float, height_mm: float) -> float:
    """
    Convert a top-down mm Y coordinate to bottom-up PDF points.

    Args:
        page_height_pt: Page height in points
        y_mm_top: Y position of the element's top edge, from the page top
        height_mm: Height of element in mm

    Returns:
        Y position of the element's bottom edge, from the page bottom
    """
    return page_height_pt - (y_mm_top + height_mm) * mm
