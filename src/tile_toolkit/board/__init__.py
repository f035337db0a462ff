"""
Module: board

Purpose:
    Board template tiling, independent of the letter tile pipeline.
    Cuts a pre-drawn board SVG into squares and lays them out for printing.
"""

from .template import (
    BoardConfig,
    BoardTemplate,
    TemplateError,
    build_board,
    load_template,
    parse_template,
    tile_template,
    write_board,
)

__all__ = [
    "BoardConfig",
    "BoardTemplate",
    "TemplateError",
    "build_board",
    "load_template",
    "parse_template",
    "tile_template",
    "write_board",
]
