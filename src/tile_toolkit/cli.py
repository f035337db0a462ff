"""
Command-line interface for the Tile Toolkit.

Subcommands:
    letters  Build letter tile sheets (SVG, HTML, PDF, PNG)
    board    Tile a board template SVG onto a printable page

Raw option values go through ``common.normalize``, so a mistyped count
becomes 0 instead of aborting.
"""

from __future__ import annotations

import argparse
import logging
from pathlib import Path
from typing import Optional, Sequence

from tile_toolkit import __version__
from tile_toolkit.board import BoardConfig, TemplateError, build_board
from tile_toolkit.builder import (
    OUTPUT_FORMATS,
    BuildError,
    GridGeometry,
    OriginPolicy,
    SheetConfig,
    build_sheets,
)
from tile_toolkit.builder.layout import PAGE_SIZES_MM
from tile_toolkit.common import ConfigError, clamp_count, clamp_tile_size, parse_count_overrides
from tile_toolkit.core.models import LetterInventory
from tile_toolkit.core.utils import SheetSettings, load_sheet_settings

logger = logging.getLogger("tile_toolkit")


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="tile-toolkit",
        description="Generate printable letter tiles and board sheets",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    sub = parser.add_subparsers(dest="command", required=True)

    letters = sub.add_parser("letters", help="Build letter tile sheets")
    letters.add_argument("--config", type=Path, help="JSON settings file (letters, spares, tile_size_mm)")
    letters.add_argument("--empty", action="store_true", help="Start from all-zero letter counts")
    letters.add_argument(
        "--count", action="append", default=[], metavar="L=N",
        help="Set the count for one letter (repeatable), e.g. --count Q=2",
    )
    letters.add_argument("--spares", help="Spare tiles per letter (default 2)")
    letters.add_argument("--tile-size", help="Tile edge in mm (default 25)")
    letters.add_argument(
        "--origin", choices=[p.value for p in OriginPolicy], default=OriginPolicy.PADDED.value,
        help="padded: grid plus padding; centered: grid centered on --page-size",
    )
    letters.add_argument("--page-size", choices=sorted(PAGE_SIZES_MM), default="letter")
    letters.add_argument(
        "--no-blank-cells", action="store_true",
        help="Do not outline empty cells on the last page",
    )
    letters.add_argument(
        "--format", dest="formats", action="append", choices=OUTPUT_FORMATS,
        help="Output format (repeatable, default svg)",
    )
    letters.add_argument("--output", type=Path, help="Output directory")
    letters.add_argument("--stem", default="tiles", help="Output file name prefix")
    letters.add_argument("--dpi", type=int, default=150, help="PNG preview resolution")
    letters.add_argument("--title", default="Letter Tiles", help="HTML/PDF document title")

    board = sub.add_parser("board", help="Tile a board template for printing")
    board.add_argument("template", type=Path, help="Board template SVG")
    board.add_argument("--output", type=Path, help="Output SVG (default board-print.svg beside template)")

    return parser


def sheet_config_from_args(args: argparse.Namespace) -> SheetConfig:
    """
    Turn parsed `letters` options into a SheetConfig.

    Precedence: command-line options, then the settings file, then defaults.

    Raises:
        ConfigError: If the settings file or a --count pair is invalid
        ValueError: If the resulting geometry or config is invalid
    """
    settings = load_sheet_settings(args.config) if args.config else SheetSettings()

    inventory = LetterInventory.empty() if args.empty else settings.inventory
    overrides = parse_count_overrides(args.count)
    if overrides:
        inventory = inventory.with_counts(overrides)

    spares = settings.spares if args.spares is None else clamp_count(args.spares)
    tile_size = settings.tile_size_mm if args.tile_size is None else clamp_tile_size(args.tile_size)
    page_width, page_height = PAGE_SIZES_MM[args.page_size]

    geometry = GridGeometry(
        tile_size_mm=tile_size,
        origin=OriginPolicy(args.origin),
        page_width_mm=page_width,
        page_height_mm=page_height,
        draw_blank_cells=not args.no_blank_cells,
    )

    return SheetConfig(
        inventory=inventory,
        spares=spares,
        geometry=geometry,
        output_dir=args.output,
        formats=tuple(dict.fromkeys(args.formats or ["svg"])),
        stem=args.stem,
        dpi=args.dpi,
        title=args.title,
    )


def _run_letters(args: argparse.Namespace) -> int:
    config = sheet_config_from_args(args)
    result = build_sheets(config)

    print(f"Total tiles: {result.total_tiles}")
    print(f"Pages: {result.page_count}")
    if result.drawings:
        last = result.drawings[-1]
        print(f"Last page: {last.tile_count} tiles")
    for name, paths in result.outputs.items():
        for path in paths:
            print(f"[{name}] {path}")
    return 0


def _run_board(args: argparse.Namespace) -> int:
    path = build_board(BoardConfig(template_path=args.template, output_path=args.output))
    print(f"[board] {path}")
    return 0


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Entry point for the `tile-toolkit` console script."""
    parser = _build_parser()
    args = parser.parse_args(list(argv) if argv is not None else None)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(message)s",
    )

    try:
        if args.command == "letters":
            return _run_letters(args)
        return _run_board(args)
    except (ConfigError, BuildError, TemplateError, ValueError) as e:
        logger.error(f"Error: {e}")
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
