"""
Module: builder.layout

Purpose:
    Page layout for letter tiles.
    Converts a tile sequence into positioned grid cells, page by page.

Key Functions:
    - paginate(): Arrange tiles onto pages

Key Classes:
    - GridGeometry: Configuration for the tile grid
    - TilePlacement: One positioned cell
    - PagePlan: Single page layout plan
    - LayoutResult: All pages

Used By:
    - builder.output: Page drawings
    - builder.controller: Main build controller
"""

from .config import (
    A4_LANDSCAPE_MM,
    LETTER_LANDSCAPE_MM,
    PAGE_SIZES_MM,
    GridGeometry,
    OriginPolicy,
)
from .models import TilePlacement, PagePlan, LayoutResult
from .paginator import paginate, page_count_for

__all__ = [
    # Config
    "GridGeometry",
    "OriginPolicy",
    "PAGE_SIZES_MM",
    "LETTER_LANDSCAPE_MM",
    "A4_LANDSCAPE_MM",
    # Models
    "TilePlacement",
    "PagePlan",
    "LayoutResult",
    # Functions
    "paginate",
    "page_count_for",
]
