"""
Module: builder.output.svg

Purpose:
    Render tile pages as standalone SVG drawings at true physical scale
    (1 drawing unit = 1 mm) and write them to disk.

Key Functions:
    - render_pages(): Tile sequence -> one PageDrawing per page
    - render_layout(): LayoutResult -> PageDrawings
    - render_page_svg(): Markup for a single PagePlan
    - write_svg_pages(): Write drawings as .svg files

Dependencies:
    - builder.layout: paginate, GridGeometry, PagePlan
    - builder.output.style: Tile appearance

Used By:
    - builder.controller: Pipeline orchestration
    - builder.output.html, pdf, raster: Consume PageDrawings
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import List, Mapping, Sequence
from xml.sax.saxutils import escape

from tile_toolkit.builder.layout import GridGeometry, LayoutResult, PagePlan, TilePlacement, paginate
from tile_toolkit.core.models.scores import SCORE_TABLE

from .style import (
    FONT_FAMILY,
    LETTER_FONT_RATIO,
    SCORE_FONT_RATIO,
    SCORE_POSITION_RATIO,
    TILE_FILL_RGB,
    TILE_STROKE_MM,
    fmt,
    rgb_css,
)

logger = logging.getLogger(__name__)

SVG_NS = "http://www.w3.org/2000/svg"


@dataclass(frozen=True)
class PageDrawing:
    """
    One rendered page.

    Attributes:
        index: Page number (0-indexed)
        svg: Standalone SVG document
        width_mm: Physical drawing width
        height_mm: Physical drawing height
        plan: Layout the drawing was made from
        geometry: Geometry of the render pass
    """
    index: int
    svg: str
    width_mm: float
    height_mm: float
    plan: PagePlan
    geometry: GridGeometry

    @property
    def tile_count(self) -> int:
        """Visible tiles on this page."""
        return self.plan.tile_count


def render_pages(
    sequence: Sequence[str],
    geometry: GridGeometry,
    scores: Mapping[str, int] = SCORE_TABLE,
) -> tuple[PageDrawing, ...]:
    """
    Lay out a tile sequence and render every page.

    Args:
        sequence: Tile letters in print order
        geometry: Grid geometry for all pages
        scores: Score table for the letters

    Returns:
        Tuple of PageDrawings, empty when the sequence is empty

    Example:
        >>> drawings = render_pages(("A",), GridGeometry())
        >>> drawings[0].width_mm, drawings[0].tile_count
        (270, 1)
    """
    return render_layout(paginate(sequence, geometry, scores))


def render_layout(layout: LayoutResult) -> tuple[PageDrawing, ...]:
    """Render each PagePlan of an existing layout."""
    width_mm, height_mm = layout.geometry.drawing_size_mm
    return tuple(
        PageDrawing(
            index=page.index,
            svg=render_page_svg(page, layout.geometry),
            width_mm=width_mm,
            height_mm=height_mm,
            plan=page,
            geometry=layout.geometry,
        )
        for page in layout.pages
    )


def render_page_svg(page: PagePlan, geometry: GridGeometry) -> str:
    """
    Render a single page as an SVG document.

    The root element carries width/height in mm and a viewBox of the same
    extent, so the file prints at true size.

    Args:
        page: Page plan with one placement per cell
        geometry: Grid geometry

    Returns:
        SVG markup
    """
    width_mm, height_mm = geometry.drawing_size_mm
    parts: List[str] = [
        f'<svg xmlns="{SVG_NS}" width="{fmt(width_mm)}mm" height="{fmt(height_mm)}mm" '
        f'viewBox="0 0 {fmt(width_mm)} {fmt(height_mm)}" font-family="{FONT_FAMILY}">\n'
    ]

    for placement in page.placements:
        if placement.is_blank and not geometry.draw_blank_cells:
            continue
        parts.append(_tile_svg(placement, geometry.tile_size_mm))

    parts.append("</svg>\n")
    return "".join(parts)


def _tile_svg(placement: TilePlacement, size: float) -> str:
    """Markup for one tile group, positioned with a translate."""
    head = f'  <g transform="translate({fmt(placement.x)},{fmt(placement.y)})"'
    rect_attrs = (
        f'width="{fmt(size)}" height="{fmt(size)}" stroke="black" '
        f'stroke-width="{fmt(TILE_STROKE_MM)}" stroke-linejoin="round"'
    )

    if placement.is_blank:
        return (
            f'{head} class="tile blank">\n'
            f'    <rect {rect_attrs} fill="none"/>\n'
            f'  </g>\n'
        )

    score_xy = fmt(size * SCORE_POSITION_RATIO)
    score = "" if placement.score is None else str(placement.score)
    return (
        f'{head} class="tile">\n'
        f'    <rect {rect_attrs} fill="{rgb_css(TILE_FILL_RGB)}"/>\n'
        f'    <text x="{fmt(size / 2)}" y="{fmt(size / 2)}" text-anchor="middle" '
        f'dominant-baseline="central" class="letter" '
        f'font-size="{fmt(size * LETTER_FONT_RATIO)}">{escape(placement.letter)}</text>\n'
        f'    <text x="{score_xy}" y="{score_xy}" text-anchor="middle" '
        f'dominant-baseline="central" class="score" '
        f'font-size="{fmt(size * SCORE_FONT_RATIO)}">{score}</text>\n'
        f'  </g>\n'
    )


def write_svg_pages(
    drawings: Sequence[PageDrawing],
    output_dir: Path,
    stem: str = "tiles",
) -> List[Path]:
    """
    Write each drawing to ``<stem>-page-NN.svg``.

    Args:
        drawings: Rendered pages
        output_dir: Directory to write into (created if missing)
        stem: File name prefix

    Returns:
        Paths written, in page order

    Raises:
        OSError: If a file cannot be written
    """
    output_dir.mkdir(parents=True, exist_ok=True)

    paths: List[Path] = []
    for drawing in drawings:
        path = output_dir / f"{stem}-page-{drawing.index + 1:02d}.svg"
        path.write_text(drawing.svg, encoding="utf-8")
        paths.append(path)

    logger.info(f"Wrote {len(paths)} SVG pages to {output_dir}")
    return paths
