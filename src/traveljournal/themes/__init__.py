"""Built-in journal themes and style resolution."""

from traveljournal.themes.presets import (
    DEFAULT_THEME,
    PASSPORT_THEME,
    RETRO_THEME,
    SYSTEM_THEMES,
    get_system_theme,
)
from traveljournal.themes.resolver import badge_style, resolve_block_style, resolve_font

__all__ = [
    "DEFAULT_THEME",
    "PASSPORT_THEME",
    "RETRO_THEME",
    "SYSTEM_THEMES",
    "badge_style",
    "get_system_theme",
    "resolve_block_style",
    "resolve_font",
]
