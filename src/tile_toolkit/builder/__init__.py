"""
Module: builder

Purpose:
    Letter tile sheet pipeline: expands letter counts into tiles, lays
    them out on fixed grids, and renders print-ready pages.

Key Functions:
    - build_sequence(): Inventory + spares -> tile sequence
    - paginate(): Tile sequence -> page plans
    - render_pages(): Tile sequence -> SVG page drawings
    - build_sheets(): Main entry point, writes outputs

Key Classes:
    - SheetConfig: Configuration for building
    - GridGeometry: Grid and page geometry
    - BuildResult: Build output

Dependencies:
    - reportlab: PDF output
    - PIL: PNG previews
    - tile_toolkit.core.models: LetterInventory, SCORE_TABLE

Used By:
    - tile_toolkit.cli: `letters` subcommand
"""

from .config import OUTPUT_FORMATS, SheetConfig
from .sequence import build_sequence, letter_runs
from .layout import GridGeometry, OriginPolicy, paginate
from .output import PageDrawing, render_pages
from .controller import build_sheets, render_sheets, BuildResult, BuildError

__all__ = [
    # Config
    "SheetConfig",
    "OUTPUT_FORMATS",
    "GridGeometry",
    "OriginPolicy",
    # Sequence
    "build_sequence",
    "letter_runs",
    # Layout / render
    "paginate",
    "render_pages",
    "PageDrawing",
    # Controller
    "build_sheets",
    "render_sheets",
    "BuildResult",
    "BuildError",
]
