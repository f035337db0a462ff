"""
Module: builder.layout.models

Purpose:
    Data models for tile page layout.
    Immutable dataclasses representing placed tiles and pages.

Key Classes:
    - TilePlacement: One grid cell with its letter and score
    - PagePlan: Complete page layout
    - LayoutResult: Final layout output

Dependencies:
    - dataclasses (std)
    - builder.layout.config: GridGeometry

Used By:
    - builder.layout.paginator: Creates PagePlans
    - builder.output: Draws PagePlans
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from .config import GridGeometry


@dataclass(frozen=True)
class TilePlacement:
    """
    A grid cell positioned on a page.

    Attributes:
        index: Page-local cell index (row-major)
        row: Grid row (0 = top)
        column: Grid column (0 = left)
        x: Left edge in mm
        y: Top edge in mm
        letter: Tile letter, "" for a blank cell
        score: Point value, None for a blank cell

    Example:
        >>> cell = TilePlacement(0, 0, 0, 10, 10, "A", 1)
        >>> cell.is_blank
        False
    """

    index: int
    row: int
    column: int
    x: float
    y: float
    letter: str = ""
    score: Optional[int] = None

    @property
    def is_blank(self) -> bool:
        """True when the cell holds no tile."""
        return not self.letter


@dataclass(frozen=True)
class PagePlan:
    """
    Complete layout plan for a single page.

    Holds one placement per grid cell, so ``len(placements)`` always equals
    the geometry's tiles per page. Only the final page has blank cells.

    Attributes:
        index: Page number (0-indexed)
        placements: Tuple of TilePlacements in row-major order
    """

    index: int
    placements: tuple[TilePlacement, ...]

    @property
    def tiles(self) -> tuple[TilePlacement, ...]:
        """Placements that carry a letter."""
        return tuple(p for p in self.placements if not p.is_blank)

    @property
    def tile_count(self) -> int:
        """Number of visible tiles on this page."""
        return sum(1 for p in self.placements if not p.is_blank)

    @property
    def blank_count(self) -> int:
        """Number of empty cells on this page."""
        return len(self.placements) - self.tile_count

    @property
    def letters(self) -> str:
        """Letters on this page in cell order."""
        return "".join(p.letter for p in self.placements)


@dataclass(frozen=True)
class LayoutResult:
    """
    Final layout output.

    Attributes:
        pages: Tuple of PagePlans
        geometry: Geometry shared by every page
        warnings: List of warning messages

    Example:
        >>> result = LayoutResult(pages=(), geometry=GridGeometry())
        >>> result.page_count
        0
    """

    pages: tuple[PagePlan, ...]
    geometry: GridGeometry
    warnings: list[str] = field(default_factory=list)

    @property
    def page_count(self) -> int:
        """Number of pages in layout."""
        return len(self.pages)

    @property
    def total_tiles(self) -> int:
        """Total number of visible tiles across all pages."""
        return sum(p.tile_count for p in self.pages)
