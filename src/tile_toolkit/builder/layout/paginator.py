"""
Module: builder.layout.paginator

Purpose:
    Split a tile sequence into fixed-size pages and place every tile
    on its grid cell.

Key Functions:
    - paginate(): Main pagination function
    - page_count_for(): Pages needed for a number of tiles

Algorithm:
    1. tiles_per_page = rows * columns
    2. Page p takes sequence[p * tiles_per_page : (p + 1) * tiles_per_page]
    3. Local index i sits at row i // columns, column i % columns
    4. Cells past the end of the sequence (final page only) are blank

Dependencies:
    - builder.layout.models: TilePlacement, PagePlan, LayoutResult
    - builder.layout.config: GridGeometry
    - core.models.scores: Score lookup

Used By:
    - builder.output.svg: render_pages()
    - builder.controller: Main build controller
"""

from __future__ import annotations

import logging
from typing import List, Mapping, Sequence

from tile_toolkit.core.models.scores import SCORE_TABLE, score_for

from .config import GridGeometry
from .models import LayoutResult, PagePlan, TilePlacement

logger = logging.getLogger(__name__)


def page_count_for(tile_count: int, tiles_per_page: int) -> int:
    """Ceiling division: pages needed to hold ``tile_count`` tiles."""
    if tile_count <= 0:
        return 0
    return -(-tile_count // tiles_per_page)


def paginate(
    sequence: Sequence[str],
    geometry: GridGeometry,
    scores: Mapping[str, int] = SCORE_TABLE,
) -> LayoutResult:
    """
    Arrange tiles onto pages.

    The sequence is only sliced, never rebuilt, so callers compute it once
    per configuration and pass it in.

    Args:
        sequence: Tile letters in print order
        geometry: Grid geometry shared by every page
        scores: Score table for the letters

    Returns:
        LayoutResult with one PagePlan per page (empty for an empty sequence)

    Example:
        >>> result = paginate(("A",), GridGeometry())
        >>> result.page_count, result.pages[0].tile_count
        (1, 1)
    """
    per_page = geometry.tiles_per_page
    pages: List[PagePlan] = []
    warnings: List[str] = []

    for page_index in range(page_count_for(len(sequence), per_page)):
        offset = page_index * per_page
        squares_on_page = min(per_page, len(sequence) - offset)

        placements = []
        for i in range(per_page):
            row, column = divmod(i, geometry.columns)
            x, y = geometry.cell_origin(i)
            letter = sequence[offset + i] if i < squares_on_page else ""
            score = score_for(letter, scores)
            if letter and score is None:
                warnings.append(f"No score for letter {letter!r} on page {page_index + 1}")
            placements.append(TilePlacement(
                index=i,
                row=row,
                column=column,
                x=x,
                y=y,
                letter=letter,
                score=score,
            ))

        pages.append(PagePlan(index=page_index, placements=tuple(placements)))
        logger.debug(f"Page {page_index + 1}: {squares_on_page} tiles")

    for message in warnings:
        logger.warning(message)

    logger.info(f"Paginated {len(sequence)} tiles onto {len(pages)} pages")

    return LayoutResult(pages=tuple(pages), geometry=geometry, warnings=warnings)
