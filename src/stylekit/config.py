"""
Default theme configuration for stylekit.

Builders created without an explicit color provider use the default theme,
chosen from the environment once per process:

    STYLEKIT_THEME_FILE: path to a theme file (see stylekit.loader.load_theme).
                         Takes precedence when set.
    STYLEKIT_THEME:      name of a built-in preset (default: water-wellness).

An invalid theme file fails loudly on first use, before anything renders.
Call ``reset_default_theme()`` after changing the environment (tests do).
"""

from __future__ import annotations

import logging
import os
from functools import lru_cache

from .loader import load_theme
from .palette import Palette
from .resolver import ColorResolver
from .themes import DEFAULT_THEME, resolve_theme

logger = logging.getLogger(__name__)

THEME_ENV_VAR = "STYLEKIT_THEME"
THEME_FILE_ENV_VAR = "STYLEKIT_THEME_FILE"


def get_theme_name() -> str:
    """Preset name from STYLEKIT_THEME, or the default preset."""
    return os.environ.get(THEME_ENV_VAR, "").strip() or DEFAULT_THEME


@lru_cache(maxsize=1)
def get_default_palette() -> Palette:
    """
    Palette for the configured default theme.

    Raises:
        PaletteLoadError: If STYLEKIT_THEME_FILE points at an invalid file
    """
    theme_file = os.environ.get(THEME_FILE_ENV_VAR, "").strip()
    if theme_file:
        logger.debug("Loading default theme from %s", theme_file)
        return load_theme(theme_file)
    return resolve_theme(get_theme_name())


@lru_cache(maxsize=1)
def get_default_resolver() -> ColorResolver:
    """Shared resolver over the default palette."""
    return ColorResolver(get_default_palette())


def reset_default_theme() -> None:
    """Forget the cached default theme so the environment is re-read."""
    get_default_palette.cache_clear()
    get_default_resolver.cache_clear()
