"""
Module: builder.config

Purpose:
    Configuration dataclass for the letter sheet pipeline. Immutable
    configuration with validation on construction.

Key Classes:
    - SheetConfig: Main configuration for building tile sheets

Dependencies:
    - dataclasses (std)
    - pathlib (std)

Used By:
    - builder.controller: Main build controller
    - cli: Built from command-line options
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional, Tuple

from tile_toolkit.common.normalize import DEFAULT_SPARES
from tile_toolkit.core.models.inventory import LetterInventory

from .layout.config import GridGeometry

OUTPUT_FORMATS: Tuple[str, ...] = ("svg", "html", "pdf", "png")


@dataclass(frozen=True)
class SheetConfig:
    """
    Configuration for building tile sheets (immutable).

    The caller owns this snapshot; the builder never mutates it.

    Attributes:
        inventory: Tile count per letter
        spares: Extra tiles added to every letter
        geometry: Tile size, grid shape and origin policy
        output_dir: Output directory for generated files
        formats: Output sinks to run, any of OUTPUT_FORMATS
        stem: File name prefix for outputs
        dpi: PNG preview resolution
        title: Title for the HTML and PDF documents

    Example:
        >>> config = SheetConfig(
        ...     inventory=LetterInventory.default(),
        ...     spares=2,
        ...     formats=("svg", "pdf"),
        ... )
    """

    inventory: LetterInventory = field(default_factory=LetterInventory.default)
    spares: int = DEFAULT_SPARES
    geometry: GridGeometry = field(default_factory=GridGeometry)

    # Output
    output_dir: Optional[Path] = None
    formats: Tuple[str, ...] = ("svg",)
    stem: str = "tiles"
    dpi: int = 150
    title: str = "Letter Tiles"

    def __post_init__(self) -> None:
        """Validate configuration on construction."""
        if self.spares < 0:
            raise ValueError(f"spares must be non-negative: {self.spares}")
        if not self.formats:
            raise ValueError("At least one output format is required")
        unknown = [f for f in self.formats if f not in OUTPUT_FORMATS]
        if unknown:
            raise ValueError(f"Unknown output formats: {unknown}")
        if self.dpi <= 0:
            raise ValueError(f"dpi must be positive: {self.dpi}")
        if not self.stem or "/" in self.stem or "\\" in self.stem:
            raise ValueError(f"stem must be a plain file name: {self.stem!r}")

    @property
    def total_tiles(self) -> int:
        """Tiles the build will produce."""
        return self.inventory.total_tiles(self.spares)
