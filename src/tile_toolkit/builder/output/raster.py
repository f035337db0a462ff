"""
Module: builder.output.raster

Purpose:
    Rasterize tile pages to PNG previews with Pillow. Useful for a quick
    look at a layout; the SVG and PDF outputs remain the print masters.

Key Functions:
    - render_page_image(): One page as a PIL Image
    - render_to_png(): Write every page as a PNG file

Dependencies:
    - PIL: Image drawing
    - builder.output.svg: PageDrawing

Used By:
    - builder.controller: Pipeline orchestration
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Sequence

from PIL import Image, ImageDraw, ImageFont

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

DEFAULT_DPI = 150
MM_PER_INCH = 25.4


def _mm_to_px(value_mm: float, dpi: int) -> int:
    """
    Convert millimetres to pixels.

    Args:
        value_mm: Length in mm
        dpi: Dots per inch

    Returns:
        Length in whole pixels
    """
    return int(round(value_mm * dpi / MM_PER_INCH))


def render_page_image(drawing: PageDrawing, dpi: int = DEFAULT_DPI) -> Image.Image:
    """
    Draw one page on a white RGB canvas.

    Args:
        drawing: Page to rasterize
        dpi: Output resolution

    Returns:
        PIL Image sized to the drawing at ``dpi``
    """
    width_px = _mm_to_px(drawing.width_mm, dpi)
    height_px = _mm_to_px(drawing.height_mm, dpi)
    img = Image.new("RGB", (width_px, height_px), color="white")
    draw = ImageDraw.Draw(img)

    geometry = drawing.geometry
    size_px = _mm_to_px(geometry.tile_size_mm, dpi)
    stroke_px = max(1, _mm_to_px(TILE_STROKE_MM, dpi))
    letter_font = ImageFont.load_default(size=max(1, int(size_px * LETTER_FONT_RATIO)))
    score_font = ImageFont.load_default(size=max(1, int(size_px * SCORE_FONT_RATIO)))

    for placement in drawing.plan.placements:
        if placement.is_blank and not geometry.draw_blank_cells:
            continue

        x0 = _mm_to_px(placement.x, dpi)
        y0 = _mm_to_px(placement.y, dpi)
        box = [x0, y0, x0 + size_px, y0 + size_px]

        if placement.is_blank:
            draw.rectangle(box, outline=TILE_STROKE_RGB, width=stroke_px)
            continue

        draw.rectangle(box, fill=TILE_FILL_RGB, outline=TILE_STROKE_RGB, width=stroke_px)
        draw.text(
            (x0 + size_px / 2, y0 + size_px / 2),
            placement.letter,
            fill="black",
            font=letter_font,
            anchor="mm",
        )
        if placement.score is not None:
            draw.text(
                (x0 + size_px * SCORE_POSITION_RATIO, y0 + size_px * SCORE_POSITION_RATIO),
                str(placement.score),
                fill="black",
                font=score_font,
                anchor="mm",
            )

    return img


def render_to_png(
    drawings: Sequence[PageDrawing],
    output_dir: Path,
    stem: str = "tiles",
    *,
    dpi: int = DEFAULT_DPI,
) -> List[Path]:
    """
    Write each page as ``<stem>-page-NN.png``.

    Args:
        drawings: Rendered pages
        output_dir: Directory to write into (created if missing)
        stem: File name prefix
        dpi: Output resolution (also stored in the PNG metadata)

    Returns:
        Paths written, in page order

    Raises:
        OSError: If an image cannot be written
    """
    output_dir.mkdir(parents=True, exist_ok=True)

    paths: List[Path] = []
    for drawing in drawings:
        path = output_dir / f"{stem}-page-{drawing.index + 1:02d}.png"
        render_page_image(drawing, dpi).save(path, format="PNG", dpi=(dpi, dpi))
        paths.append(path)

    logger.info(f"Wrote {len(paths)} PNG previews at {dpi} DPI to {output_dir}")
    return paths
