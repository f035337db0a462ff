"""
Module: builder.layout.config

Purpose:
    Grid geometry for tile pages.
    Defines tile size, grid shape, page size and where the grid sits.

Key Classes:
    - GridGeometry: Immutable grid configuration
    - OriginPolicy: How the grid origin is chosen

Dependencies:
    - dataclasses (std)

Used By:
    - builder.layout.paginator: Cell placement
    - builder.output: Drawing sizes
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Tuple

from tile_toolkit.common.normalize import DEFAULT_TILE_SIZE_MM


# Landscape page sizes in millimetres (width, height)
LETTER_LANDSCAPE_MM = (279.4, 215.9)
A4_LANDSCAPE_MM = (297.0, 210.0)

PAGE_SIZES_MM: Dict[str, Tuple[float, float]] = {
    "letter": LETTER_LANDSCAPE_MM,
    "a4": A4_LANDSCAPE_MM,
}

DEFAULT_ROWS = 7
DEFAULT_COLUMNS = 10
DEFAULT_PADDING_MM = 10


class OriginPolicy(str, Enum):
    """
    Where the top-left tile is placed.

    PADDED: grid offset by ``padding_mm``; the drawing is grid + padding.
    CENTERED: grid centered on a fixed page of ``page_width_mm`` x ``page_height_mm``.
    """
    PADDED = "padded"
    CENTERED = "centered"


@dataclass(frozen=True)
class GridGeometry:
    """
    Configuration for tile page layout (immutable).

    One GridGeometry is used for every page of a render pass.

    Attributes:
        tile_size_mm: Edge length of one square tile
        rows: Tile rows per page
        columns: Tile columns per page
        origin: Grid origin policy
        padding_mm: Space around the grid (PADDED only)
        page_width_mm: Fixed page width (CENTERED only)
        page_height_mm: Fixed page height (CENTERED only)
        draw_blank_cells: Outline empty cells on the last page

    Example:
        >>> geometry = GridGeometry()
        >>> geometry.tiles_per_page
        70
        >>> geometry.drawing_size_mm
        (270, 195)
    """

    tile_size_mm: float = DEFAULT_TILE_SIZE_MM
    rows: int = DEFAULT_ROWS
    columns: int = DEFAULT_COLUMNS

    origin: OriginPolicy = OriginPolicy.PADDED
    padding_mm: float = DEFAULT_PADDING_MM
    page_width_mm: float = LETTER_LANDSCAPE_MM[0]
    page_height_mm: float = LETTER_LANDSCAPE_MM[1]

    draw_blank_cells: bool = True

    def __post_init__(self) -> None:
        """Validate configuration on construction."""
        if self.tile_size_mm <= 0:
            raise ValueError(f"tile_size_mm must be positive: {self.tile_size_mm}")
        if self.rows <= 0:
            raise ValueError(f"rows must be positive: {self.rows}")
        if self.columns <= 0:
            raise ValueError(f"columns must be positive: {self.columns}")
        if self.padding_mm < 0:
            raise ValueError(f"padding_mm must be non-negative: {self.padding_mm}")
        if not isinstance(self.origin, OriginPolicy):
            object.__setattr__(self, "origin", OriginPolicy(self.origin))
        if self.origin is OriginPolicy.CENTERED:
            if self.grid_width_mm > self.page_width_mm:
                raise ValueError(
                    f"Grid exceeds page width: {self.grid_width_mm}mm > {self.page_width_mm}mm"
                )
            if self.grid_height_mm > self.page_height_mm:
                raise ValueError(
                    f"Grid exceeds page height: {self.grid_height_mm}mm > {self.page_height_mm}mm"
                )

    @property
    def tiles_per_page(self) -> int:
        """Number of grid cells on one page."""
        return self.rows * self.columns

    @property
    def grid_width_mm(self) -> float:
        return self.columns * self.tile_size_mm

    @property
    def grid_height_mm(self) -> float:
        return self.rows * self.tile_size_mm

    @property
    def drawing_size_mm(self) -> Tuple[float, float]:
        """(width, height) of one page drawing."""
        if self.origin is OriginPolicy.CENTERED:
            return (self.page_width_mm, self.page_height_mm)
        return (
            self.grid_width_mm + 2 * self.padding_mm,
            self.grid_height_mm + 2 * self.padding_mm,
        )

    @property
    def grid_origin_mm(self) -> Tuple[float, float]:
        """(x, y) of the top-left corner of the first cell."""
        if self.origin is OriginPolicy.CENTERED:
            return (
                (self.page_width_mm - self.grid_width_mm) / 2,
                (self.page_height_mm - self.grid_height_mm) / 2,
            )
        return (self.padding_mm, self.padding_mm)

    def cell_origin(self, index: int) -> Tuple[float, float]:
        """
        Top-left corner of the cell at a page-local index.

        Cells fill row by row: index 0 is top-left, index ``columns`` starts
        the second row.
        """
        row, col = divmod(index, self.columns)
        start_x, start_y = self.grid_origin_mm
        return (start_x + col * self.tile_size_mm, start_y + row * self.tile_size_mm)
