"""
Serialization Utilities

Reads sheet settings (letter counts, spares, tile size) from JSON.

Settings files are read-only input: the toolkit never writes them back.
Every value passes through ``common.normalize`` so a hand-edited file with
a typo degrades to a zero count instead of aborting the build.

File format (all keys optional):

    {
        "letters": {"A": 9, "B": 2, ...},
        "spares": 2,
        "tile_size_mm": 25
    }

A present "letters" object replaces the default distribution; letters it
does not mention are set to 0.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from tile_toolkit.common.normalize import (
    DEFAULT_SPARES,
    DEFAULT_TILE_SIZE_MM,
    ConfigError,
    clamp_count,
    clamp_tile_size,
)

from ..models.inventory import ALPHABET, LetterInventory

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SheetSettings:
    """
    User-editable settings read from a file.

    Attributes:
        inventory: Letter counts
        spares: Spare tiles added to every letter
        tile_size_mm: Tile edge length in millimetres
    """
    inventory: LetterInventory = field(default_factory=LetterInventory.default)
    spares: int = DEFAULT_SPARES
    tile_size_mm: int = DEFAULT_TILE_SIZE_MM


# ─────────────────────────────────────────────────────────────────────────────
# Settings Deserialization
# ─────────────────────────────────────────────────────────────────────────────

def settings_from_dict(data: dict[str, Any]) -> SheetSettings:
    """
    Build SheetSettings from a parsed JSON object.

    Args:
        data: Dictionary from JSON

    Returns:
        SheetSettings with every value normalized

    Raises:
        ConfigError: If the top level or "letters" is not an object
    """
    if not isinstance(data, dict):
        raise ConfigError(f"Settings must be a JSON object, got {type(data).__name__}")

    inventory = LetterInventory.default()
    letters = data.get("letters")
    if letters is not None:
        if not isinstance(letters, dict):
            raise ConfigError("'letters' must be an object of LETTER: COUNT")
        inventory = _inventory_from_payload(letters)

    return SheetSettings(
        inventory=inventory,
        spares=clamp_count(data.get("spares", DEFAULT_SPARES)),
        tile_size_mm=clamp_tile_size(data.get("tile_size_mm", DEFAULT_TILE_SIZE_MM)),
    )


def load_sheet_settings(path: Path) -> SheetSettings:
    """
    Load sheet settings from a JSON file.

    Args:
        path: Path to settings file

    Returns:
        SheetSettings

    Raises:
        ConfigError: If the file cannot be read or is not valid JSON
    """
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        raise ConfigError(f"Settings file is corrupted: {path}: {e}") from e
    except OSError as e:
        raise ConfigError(f"Failed to read settings: {path}: {e}") from e

    settings = settings_from_dict(data)
    logger.info(
        f"Loaded settings from {path}: "
        f"{settings.inventory.base_total} tiles, {settings.spares} spares"
    )
    return settings


def _inventory_from_payload(letters: dict[str, Any]) -> LetterInventory:
    """Normalize a letters object into a full A-Z inventory."""
    counts = {letter: 0 for letter in ALPHABET}
    for key, raw in letters.items():
        letter = str(key).strip().upper()
        if letter not in counts:
            logger.warning(f"Ignoring unknown letter in settings: {key!r}")
            continue
        counts[letter] = clamp_count(raw)
    return LetterInventory(counts)
