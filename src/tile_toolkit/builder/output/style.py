"""
Module: builder.output.style

Purpose:
    Shared tile appearance so every sink (SVG, PDF, PNG) draws the
    same tile. Sizes are ratios of the tile edge length.

Used By:
    - builder.output.svg
    - builder.output.pdf
    - builder.output.raster
"""

from __future__ import annotations

TILE_FILL_RGB = (231, 203, 155)
TILE_STROKE_RGB = (0, 0, 0)
TILE_STROKE_MM = 0.5

LETTER_FONT_RATIO = 0.6
SCORE_FONT_RATIO = 0.2
# Score text is centered on (0.8, 0.8) of the tile
SCORE_POSITION_RATIO = 0.8

FONT_FAMILY = "Helvetica, Arial, sans-serif"


def fmt(n: float) -> str:
    """Format a coordinate for markup: at most 3 decimals, no trailing zeros."""
    text = f"{n:.3f}".rstrip("0").rstrip(".")
    return "0" if text in ("", "-0") else text


def rgb_css(rgb: tuple[int, int, int]) -> str:
    return f"rgb({rgb[0]},{rgb[1]},{rgb[2]})"
