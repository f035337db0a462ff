"""
Module: builder.controller

Purpose:
    Orchestrate the complete tile sheet pipeline.
    Sequence → Paginate → Render → Write

Key Functions:
    - render_sheets(): Pure part of the pipeline, no file output
    - build_sheets(): Main entry point, runs every requested sink

Key Classes:
    - BuildResult: Complete build result
    - BuildError: Exception for build failures

Dependencies:
    - builder.sequence: Tile sequence expansion
    - builder.layout: Pagination
    - builder.output: Drawings and sinks

Used By:
    - cli: `letters` subcommand
"""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, Dict, List, Sequence, Tuple

from .config import SheetConfig
from .layout import LayoutResult, paginate
from .output import (
    PageDrawing,
    render_layout,
    render_to_pdf,
    render_to_png,
    write_print_html,
    write_svg_pages,
)
from .sequence import TileSequence, build_sequence, letter_runs

logger = logging.getLogger(__name__)

DEFAULT_OUTPUT_DIR = Path("tiles_output")


class BuildError(Exception):
    """Error during build pipeline."""
    pass


@dataclass(frozen=True)
class BuildResult:
    """
    Complete build result (immutable).

    Attributes:
        sequence: Tile sequence the pages were built from
        layout: Page layout
        drawings: Rendered pages
        outputs: Format name -> files written
        runs: (letter, tile count) per letter present
        warnings: Any warnings during build

    Example:
        >>> result = build_sheets(config)
        >>> print(f"Generated {result.page_count} pages with {result.total_tiles} tiles")
    """
    sequence: TileSequence
    layout: LayoutResult
    drawings: Tuple[PageDrawing, ...]
    outputs: Dict[str, List[Path]] = field(default_factory=dict)
    runs: List[Tuple[str, int]] = field(default_factory=list)
    warnings: Tuple[str, ...] = ()

    @property
    def total_tiles(self) -> int:
        return len(self.sequence)

    @property
    def page_count(self) -> int:
        return self.layout.page_count


def render_sheets(config: SheetConfig) -> BuildResult:
    """
    Build the sequence once, paginate it and render every page.

    No files are written; ``outputs`` is empty.

    Args:
        config: Sheet configuration

    Returns:
        BuildResult without outputs
    """
    sequence = build_sequence(config.inventory, config.spares)
    layout = paginate(sequence, config.geometry)
    drawings = render_layout(layout)

    return BuildResult(
        sequence=sequence,
        layout=layout,
        drawings=drawings,
        runs=letter_runs(sequence),
        warnings=tuple(layout.warnings),
    )


def build_sheets(config: SheetConfig) -> BuildResult:
    """
    Build tile sheets from start to finish.

    Pipeline:
    1. Expand inventory + spares into the tile sequence
    2. Paginate onto fixed grids
    3. Render SVG drawings
    4. Run each requested sink (svg, html, pdf, png)

    Args:
        config: Sheet configuration

    Returns:
        BuildResult with written paths

    Raises:
        BuildError: If an output cannot be written

    Example:
        >>> config = SheetConfig(output_dir=Path("out"), formats=("pdf",))
        >>> result = build_sheets(config)
        >>> result.outputs["pdf"]
        [PosixPath('out/tiles.pdf')]
    """
    start_time = time.perf_counter()
    logger.info(
        f"Starting build: {config.total_tiles} tiles "
        f"({config.inventory.base_total} + {config.spares} spares per letter), "
        f"{config.geometry.tile_size_mm}mm tiles"
    )
    logger.debug(f"Letter counts: {config.inventory.to_dict()}")

    result = render_sheets(config)
    warnings = list(result.warnings)

    if not result.drawings:
        warnings.append("No tiles to print: every count and spares is zero")
        logger.warning(warnings[-1])

    output_dir = config.output_dir or DEFAULT_OUTPUT_DIR
    outputs: Dict[str, List[Path]] = {}

    for name in config.formats:
        sink = _SINKS[name]
        try:
            outputs[name] = sink(result.drawings, output_dir, config)
        except OSError as e:
            raise BuildError(f"Failed to write {name} output to {output_dir}: {e}") from e

    elapsed = time.perf_counter() - start_time
    logger.info(f"Built {result.page_count} pages in {elapsed:.2f}s")

    return BuildResult(
        sequence=result.sequence,
        layout=result.layout,
        drawings=result.drawings,
        outputs=outputs,
        runs=result.runs,
        warnings=tuple(warnings),
    )


# ─────────────────────────────────────────────────────────────────────────────
# Sinks
# ─────────────────────────────────────────────────────────────────────────────

_Sink = Callable[[Sequence[PageDrawing], Path, SheetConfig], List[Path]]


def _svg_sink(drawings: Sequence[PageDrawing], output_dir: Path, config: SheetConfig) -> List[Path]:
    return write_svg_pages(drawings, output_dir, config.stem)


def _html_sink(drawings: Sequence[PageDrawing], output_dir: Path, config: SheetConfig) -> List[Path]:
    path = output_dir / f"{config.stem}.html"
    return [write_print_html(drawings, path, title=config.title)]


def _pdf_sink(drawings: Sequence[PageDrawing], output_dir: Path, config: SheetConfig) -> List[Path]:
    path = output_dir / f"{config.stem}.pdf"
    return [render_to_pdf(
        drawings,
        path,
        title=config.title,
        empty_page_size_mm=config.geometry.drawing_size_mm,
    )]


def _png_sink(drawings: Sequence[PageDrawing], output_dir: Path, config: SheetConfig) -> List[Path]:
    return render_to_png(drawings, output_dir, config.stem, dpi=config.dpi)


_SINKS: Dict[str, _Sink] = {
    "svg": _svg_sink,
    "html": _html_sink,
    "pdf": _pdf_sink,
    "png": _png_sink,
}
