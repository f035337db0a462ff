"""
Module: common.normalize

Purpose:
    Input normalization at the configuration boundary. Raw user values
    (CLI strings, JSON numbers, anything else) are turned into the safe
    integers the core expects. Nothing past this boundary validates counts.

Key Functions:
    - parse_leading_int(): Lenient integer parse ("12abc" -> 12)
    - clamp_count(): Letter counts and spares, invalid -> 0
    - clamp_tile_size(): Tile size in mm, invalid -> default, minimum 1
    - parse_count_overrides(): "A=5" style CLI overrides

Dependencies:
    - re (std)

Used By:
    - core.utils.serialization: Settings file loading
    - cli: Command-line options
"""

from __future__ import annotations

import math
import re
from typing import Any, Dict, Iterable, Optional

DEFAULT_TILE_SIZE_MM = 25
DEFAULT_SPARES = 2

_LEADING_INT_RE = re.compile(r"^\s*([+-]?\d+)")


class ConfigError(Exception):
    """Invalid configuration input that cannot be clamped to a default."""
    pass


def parse_leading_int(value: Any) -> Optional[int]:
    """
    Parse the leading integer of a value.

    Strings are read up to the first non-digit, floats are truncated
    toward zero. Anything else yields None.

    Args:
        value: Raw input value

    Returns:
        Parsed integer, or None if no integer could be read

    Example:
        >>> parse_leading_int(" 12abc")
        12
        >>> parse_leading_int("2.7")
        2
        >>> parse_leading_int("x") is None
        True
    """
    if isinstance(value, bool):
        return int(value)
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        if math.isnan(value) or math.isinf(value):
            return None
        return int(value)
    if isinstance(value, str):
        match = _LEADING_INT_RE.match(value)
        if match:
            return int(match.group(1))
    return None


def clamp_count(value: Any) -> int:
    """
    Normalize a letter count or spare count.

    Unparseable input becomes 0 and negative values clamp to 0.

    Example:
        >>> clamp_count("7"), clamp_count(""), clamp_count(-3)
        (7, 0, 0)
    """
    parsed = parse_leading_int(value)
    if parsed is None:
        return 0
    return max(0, parsed)


def clamp_tile_size(value: Any, default: int = DEFAULT_TILE_SIZE_MM) -> int:
    """
    Normalize a tile size in millimetres.

    An unparseable value or a parsed 0 falls back to ``default``;
    negative values clamp to 1.

    Example:
        >>> clamp_tile_size("30"), clamp_tile_size("0"), clamp_tile_size(-4)
        (30, 25, 1)
    """
    parsed = parse_leading_int(value)
    if not parsed:
        parsed = default
    return max(1, parsed)


def parse_count_overrides(pairs: Iterable[str]) -> Dict[str, int]:
    """
    Parse ``LETTER=COUNT`` pairs from the command line.

    Letters are case-insensitive. Counts go through clamp_count, so
    ``A=oops`` sets A to 0 rather than failing.

    Args:
        pairs: Strings like "A=5"

    Returns:
        Dict of upper-case letter -> count (later pairs win)

    Raises:
        ConfigError: If a pair has no "=" or the key is not a single letter A-Z
    """
    overrides: Dict[str, int] = {}
    for pair in pairs:
        if "=" not in pair:
            raise ConfigError(f"Expected LETTER=COUNT, got {pair!r}")
        key, _, raw = pair.partition("=")
        letter = key.strip().upper()
        if len(letter) != 1 or not ("A" <= letter <= "Z"):
            raise ConfigError(f"Not a letter A-Z: {key!r}")
        overrides[letter] = clamp_count(raw)
    return overrides
