"""
Core Utilities Package

Settings-file loading for the letter sheet builder.
"""

from .serialization import SheetSettings, load_sheet_settings, settings_from_dict

__all__ = [
    "SheetSettings",
    "load_sheet_settings",
    "settings_from_dict",
]
