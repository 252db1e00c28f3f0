"""
stylekit: semantic design tokens and chainable class builders.

Components ask for intent ("primary button", "caption text", "raised
card") and get back a deterministic utility class string resolved against
the active theme palette.

Usage:
    from stylekit import ColorResolver, TextStyles, resolve_theme

    resolver = ColorResolver(resolve_theme("jupiter"))
    TextStyles(resolver).title().primary().classes()
"""

from ._version import get_version
from .assembler import assemble, split_classes
from .builders import (
    ButtonStyles,
    CardStyles,
    InteractiveStyles,
    LayoutStyles,
    ProductStyles,
    SelectionStyles,
    StateStyles,
    StyleBuilder,
    TextStyles,
)
from .config import get_default_palette, get_default_resolver, reset_default_theme
from .errors import PaletteError, PaletteLoadError, StylekitError
from .loader import (
    load_palette,
    load_theme,
    palette_from_json,
    palette_from_yaml,
    palette_to_json,
    palette_to_yaml,
    save_palette,
)
from .palette import Palette
from .resolver import ColorProvider, ColorResolver
from .themes import (
    DEFAULT_THEME,
    THEME_PRESETS,
    get_theme_preset,
    list_theme_presets,
    resolve_theme,
)
from .tokens import Token, TokenCategory, tokens_in

__version__ = get_version()

__all__ = [
    "__version__",
    # Tokens and palettes
    "Token",
    "TokenCategory",
    "tokens_in",
    "Palette",
    # Resolution
    "ColorProvider",
    "ColorResolver",
    "assemble",
    "split_classes",
    # Themes
    "DEFAULT_THEME",
    "THEME_PRESETS",
    "get_theme_preset",
    "list_theme_presets",
    "resolve_theme",
    "get_default_palette",
    "get_default_resolver",
    "reset_default_theme",
    # Persistence
    "load_palette",
    "save_palette",
    "load_theme",
    "palette_to_json",
    "palette_from_json",
    "palette_to_yaml",
    "palette_from_yaml",
    # Builders
    "StyleBuilder",
    "TextStyles",
    "ButtonStyles",
    "CardStyles",
    "LayoutStyles",
    "StateStyles",
    "SelectionStyles",
    "ProductStyles",
    "InteractiveStyles",
    # Errors
    "StylekitError",
    "PaletteError",
    "PaletteLoadError",
]
