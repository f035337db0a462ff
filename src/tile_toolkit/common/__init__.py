"""Common utilities shared across the toolkit."""

from __future__ import annotations

from .normalize import (
    DEFAULT_SPARES,
    DEFAULT_TILE_SIZE_MM,
    ConfigError,
    clamp_count,
    clamp_tile_size,
    parse_count_overrides,
    parse_leading_int,
)

__all__ = [
    "DEFAULT_SPARES",
    "DEFAULT_TILE_SIZE_MM",
    "ConfigError",
    "clamp_count",
    "clamp_tile_size",
    "parse_count_overrides",
    "parse_leading_int",
]
