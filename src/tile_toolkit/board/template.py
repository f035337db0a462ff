"""
Module: board.template

Purpose:
    Re-tile a pre-drawn board template into printable squares. The template
    is an SVG whose internal coordinate system (its viewBox) is divided into
    fixed-size sub-squares; each sub-square is printed as one physical cell
    of a grid on a landscape page.

Key Functions:
    - load_template(): Read and parse a template SVG
    - parse_template(): Parse template markup
    - tile_template(): Build the printable page SVG
    - build_board(): Load, tile and write in one step

Key Classes:
    - BoardTemplate: Parsed template
    - BoardConfig: Grid, cell and page constants
    - TemplateError: Unreadable or malformed template

Dependencies:
    - xml.etree (std): Template parsing
    - builder.output.style: Coordinate formatting

Used By:
    - cli: `board` subcommand
"""

from __future__ import annotations

import logging
import re
import xml.etree.ElementTree as ET
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional, Tuple

from tile_toolkit.builder.output.style import fmt

logger = logging.getLogger(__name__)

SVG_NS = "http://www.w3.org/2000/svg"
XLINK_NS = "http://www.w3.org/1999/xlink"

ET.register_namespace("", SVG_NS)
ET.register_namespace("xlink", XLINK_NS)

# Template coordinate system used when the file has no viewBox
DEFAULT_VIEWBOX: Tuple[float, float, float, float] = (0.0, 0.0, 3300.0, 2550.0)
SYMBOL_ID = "board"

# Root <svg> attributes that describe the viewport rather than the drawing
_ROOT_ONLY_ATTRS = frozenset({
    "id", "x", "y", "width", "height", "viewBox", "preserveAspectRatio", "version",
})


class TemplateError(Exception):
    """Board template could not be read or parsed."""
    pass


@dataclass(frozen=True)
class BoardTemplate:
    """
    Parsed board template.

    Attributes:
        view_box: (min_x, min_y, width, height) in template units
        content: Root children in a <g> carrying the root's presentation attributes
        source: File the template was read from, if any
    """
    view_box: Tuple[float, float, float, float]
    content: str
    source: Optional[Path] = None


@dataclass(frozen=True)
class BoardConfig:
    """
    Board tiling configuration (immutable).

    Defaults print a 7 x 10 grid of 25 mm cells on US Letter landscape.

    Attributes:
        template_path: Template SVG to tile
        output_path: Where to write the page SVG
        rows: Grid rows
        columns: Grid columns
        source_square: Sub-square edge in template units
        cell_size_mm: Printed cell edge
        page_width_mm: Page width
        page_height_mm: Page height
        margin_mm: Page margin on every side
    """

    template_path: Optional[Path] = None
    output_path: Optional[Path] = None

    rows: int = 7
    columns: int = 10
    source_square: float = 330

    cell_size_mm: float = 25
    page_width_mm: float = 279.4
    page_height_mm: float = 215.9
    margin_mm: float = 12.7

    def __post_init__(self) -> None:
        """Validate configuration on construction."""
        if self.rows <= 0 or self.columns <= 0:
            raise ValueError(f"Grid must be at least 1x1: {self.rows}x{self.columns}")
        if self.source_square <= 0:
            raise ValueError(f"source_square must be positive: {self.source_square}")
        if self.cell_size_mm <= 0:
            raise ValueError(f"cell_size_mm must be positive: {self.cell_size_mm}")
        if self.columns * self.cell_size_mm > self.printable_width_mm:
            raise ValueError("Board grid exceeds printable page width")
        if self.rows * self.cell_size_mm > self.printable_height_mm:
            raise ValueError("Board grid exceeds printable page height")

    @property
    def cell_count(self) -> int:
        return self.rows * self.columns

    @property
    def printable_width_mm(self) -> float:
        return self.page_width_mm - 2 * self.margin_mm

    @property
    def printable_height_mm(self) -> float:
        return self.page_height_mm - 2 * self.margin_mm

    @property
    def grid_origin_mm(self) -> Tuple[float, float]:
        """Grid is centered horizontally and sits on the top margin."""
        grid_width = self.columns * self.cell_size_mm
        x = self.margin_mm + (self.printable_width_mm - grid_width) / 2
        return (x, self.margin_mm)


# ─────────────────────────────────────────────────────────────────────────────
# Loading
# ─────────────────────────────────────────────────────────────────────────────

def load_template(path: Path) -> BoardTemplate:
    """
    Read and parse a template SVG file.

    Args:
        path: Template file

    Returns:
        BoardTemplate

    Raises:
        TemplateError: If the file cannot be read or parsed
    """
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as e:
        raise TemplateError(f"Failed to read template {path}: {e}") from e

    template = parse_template(text, source=path)
    logger.info(f"Loaded board template {path.name} (viewBox {_view_box_attr(template.view_box)})")
    return template


def parse_template(text: str, source: Optional[Path] = None) -> BoardTemplate:
    """
    Parse template markup.

    The root must be an <svg> element. Its viewBox defines the template
    coordinate system; without one DEFAULT_VIEWBOX is assumed.

    Raises:
        TemplateError: If the markup is not an SVG document or the viewBox is malformed
    """
    try:
        root = ET.fromstring(text)
    except ET.ParseError as e:
        raise TemplateError(f"Template is not valid XML: {e}") from e

    if _local_name(root.tag) != "svg":
        raise TemplateError(f"Template root must be <svg>, got <{_local_name(root.tag)}>")

    raw_view_box = root.get("viewBox")
    if raw_view_box is None:
        logger.warning(f"Template has no viewBox, assuming {_view_box_attr(DEFAULT_VIEWBOX)}")
        view_box = DEFAULT_VIEWBOX
    else:
        view_box = _parse_view_box(raw_view_box)

    # Root presentation attributes (fill, style, class, font-*) still apply
    # to the drawing, so they move onto a wrapping <g>.
    group = ET.Element(
        f"{{{SVG_NS}}}g",
        {key: value for key, value in root.attrib.items() if key not in _ROOT_ONLY_ATTRS},
    )
    group.extend(root)
    content = ET.tostring(group, encoding="unicode")
    return BoardTemplate(view_box=view_box, content=content, source=source)


def _parse_view_box(raw: str) -> Tuple[float, float, float, float]:
    parts = [p for p in re.split(r"[\s,]+", raw.strip()) if p]
    if len(parts) != 4:
        raise TemplateError(f"viewBox must have 4 numbers: {raw!r}")
    try:
        min_x, min_y, width, height = (float(p) for p in parts)
    except ValueError as e:
        raise TemplateError(f"viewBox is not numeric: {raw!r}") from e
    if width <= 0 or height <= 0:
        raise TemplateError(f"viewBox must have positive size: {raw!r}")
    return (min_x, min_y, width, height)


def _local_name(tag: str) -> str:
    return tag.rsplit("}", 1)[-1]


def _view_box_attr(view_box: Tuple[float, float, float, float]) -> str:
    return " ".join(fmt(v) for v in view_box)


# ─────────────────────────────────────────────────────────────────────────────
# Tiling
# ─────────────────────────────────────────────────────────────────────────────

def tile_template(template: BoardTemplate, config: BoardConfig) -> str:
    """
    Build the printable page.

    Cell (row, col) shows the template region starting at
    (col * source_square, row * source_square), offset by the viewBox
    origin, scaled into a ``cell_size_mm`` square. The page SVG uses
    1 unit = 1 mm.

    Args:
        template: Parsed template
        config: Grid, cell and page constants

    Returns:
        SVG markup for one page
    """
    vx, vy, vw, vh = template.view_box
    start_x, start_y = config.grid_origin_mm
    square = config.source_square
    cell = fmt(config.cell_size_mm)

    needed_w = config.columns * square
    needed_h = config.rows * square
    if needed_w > vw or needed_h > vh:
        logger.warning(
            f"Template is {fmt(vw)}x{fmt(vh)} units but the grid covers "
            f"{fmt(needed_w)}x{fmt(needed_h)}; outer cells will be partly empty"
        )

    parts: List[str] = [
        f'<svg xmlns="{SVG_NS}" xmlns:xlink="{XLINK_NS}" '
        f'width="{fmt(config.page_width_mm)}mm" height="{fmt(config.page_height_mm)}mm" '
        f'viewBox="0 0 {fmt(config.page_width_mm)} {fmt(config.page_height_mm)}">\n',
        "  <defs>\n",
        f'    <symbol id="{SYMBOL_ID}" viewBox="{_view_box_attr(template.view_box)}" '
        f'preserveAspectRatio="xMidYMid slice">\n',
        f"{template.content}\n",
        "    </symbol>\n",
        "  </defs>\n",
    ]

    for index in range(config.cell_count):
        row, col = divmod(index, config.columns)
        x = start_x + col * config.cell_size_mm
        y = start_y + row * config.cell_size_mm
        src_x = vx + col * square
        src_y = vy + row * square
        parts.append(
            f'  <svg class="board-cell" data-index="{index}" '
            f'x="{fmt(x)}" y="{fmt(y)}" width="{cell}" height="{cell}" '
            f'viewBox="{fmt(src_x)} {fmt(src_y)} {fmt(square)} {fmt(square)}">\n'
            f'    <use href="#{SYMBOL_ID}" xlink:href="#{SYMBOL_ID}" '
            f'x="{fmt(vx)}" y="{fmt(vy)}" width="{fmt(vw)}" height="{fmt(vh)}"/>\n'
            f"  </svg>\n"
        )

    parts.append("</svg>\n")
    return "".join(parts)


def write_board(template: BoardTemplate, config: BoardConfig, output_path: Path) -> Path:
    """
    Write the tiled page SVG.

    Raises:
        OSError: If the file cannot be written
    """
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(tile_template(template, config), encoding="utf-8")
    origin = template.source.name if template.source else "inline template"
    logger.info(f"Wrote {config.cell_count} board cells from {origin} to {output_path}")
    return output_path


def build_board(config: BoardConfig) -> Path:
    """
    Load the configured template, tile it and write the page.

    Args:
        config: Board configuration with template_path set

    Returns:
        Path written (``output_path`` or ``board-print.svg`` beside the template)

    Raises:
        TemplateError: If the template is missing, unreadable or cannot be written out
    """
    if config.template_path is None:
        raise TemplateError("No board template given")

    template = load_template(config.template_path)
    output_path = config.output_path or config.template_path.with_name("board-print.svg")
    try:
        return write_board(template, config, output_path)
    except OSError as e:
        raise TemplateError(f"Failed to write board page {output_path}: {e}") from e
