"""
Built-in theme presets for stylekit.

Resolves the final palette by merging:
1. Base preset (by name)
2. Caller overrides (highest precedence)

Available presets:
- water-wellness: Default blue/green wellness palette
- water-wellness-dark: Dark variant derived from water-wellness
- jupiter: Planetary orange with tech blue
- llasi: Minimalist luxury monochrome
- psychedelic: High-energy neon on black
"""

from __future__ import annotations

import logging
from collections.abc import Mapping

from .palette import Palette

logger = logging.getLogger(__name__)

DEFAULT_THEME = "water-wellness"


WATER_WELLNESS_THEME = Palette(
    # Brand
    primary="water-blue-500",
    secondary="water-green-500",
    accent="cyan-500",
    # Semantic
    success="green-500",
    warning="amber-500",
    error="red-500",
    info="blue-500",
    # Neutral
    surface="white",
    background="gray-50",
    foreground="gray-900",
    border="gray-200",
    # Text
    text_primary="gray-900",
    text_secondary="gray-600",
    text_tertiary="gray-400",
    text_inverse="white",
    # Interactive
    interactive="water-blue-500",
    interactive_hover="water-blue-600",
    interactive_active="water-blue-700",
    interactive_disabled="gray-300",
)

WATER_WELLNESS_DARK_THEME = WATER_WELLNESS_THEME.with_overrides(
    surface="gray-800",
    background="gray-900",
    foreground="gray-50",
    border="gray-700",
    text_primary="gray-50",
    text_secondary="gray-300",
    text_tertiary="gray-500",
    text_inverse="gray-900",
    interactive_hover="water-blue-400",
    interactive_disabled="gray-600",
)

JUPITER_THEME = Palette(
    primary="jupiter-orange-500",  # #FF6B35
    secondary="jupiter-blue-500",  # #4A90E2
    accent="jupiter-blue-400",
    success="green-500",
    warning="amber-500",
    error="red-500",
    info="jupiter-blue-500",
    surface="jupiter-gray-50",
    background="white",
    foreground="jupiter-gray-900",
    border="jupiter-gray-200",
    text_primary="jupiter-gray-900",
    text_secondary="jupiter-gray-700",
    text_tertiary="jupiter-gray-500",
    text_inverse="white",
    interactive="jupiter-orange-500",
    interactive_hover="jupiter-orange-600",
    interactive_active="jupiter-orange-700",
    interactive_disabled="jupiter-gray-300",
)

LLASI_THEME = Palette(
    primary="slate-900",  # Deep charcoal
    secondary="slate-600",  # Soft gray
    accent="neutral-400",
    success="emerald-600",
    warning="amber-600",
    error="red-600",  # Sale red
    info="blue-600",
    surface="white",
    background="amber-50",  # Warm cream
    foreground="slate-50",
    border="slate-200",
    text_primary="slate-900",
    text_secondary="slate-600",
    text_tertiary="slate-400",
    text_inverse="white",
    interactive="slate-900",
    interactive_hover="black",
    interactive_active="black",
    interactive_disabled="slate-300",
)

PSYCHEDELIC_THEME = Palette(
    primary="fuchsia-500",
    secondary="lime-400",
    accent="cyan-400",
    success="emerald-400",
    warning="orange-400",
    error="rose-400",
    info="violet-400",
    surface="slate-900",
    background="black",
    foreground="white",
    border="purple-500",
    text_primary="white",
    text_secondary="gray-200",
    text_tertiary="gray-400",
    text_inverse="black",
    interactive="fuchsia-500",
    interactive_hover="fuchsia-400",
    interactive_active="fuchsia-600",
    interactive_disabled="gray-600",
)


THEME_PRESETS: dict[str, Palette] = {
    "water-wellness": WATER_WELLNESS_THEME,
    "water-wellness-dark": WATER_WELLNESS_DARK_THEME,
    "jupiter": JUPITER_THEME,
    "llasi": LLASI_THEME,
    "psychedelic": PSYCHEDELIC_THEME,
}


def list_theme_presets() -> list[str]:
    """Names of the built-in presets."""
    return list(THEME_PRESETS)


def get_theme_preset(name: str) -> Palette | None:
    """Get a built-in preset by name, or None if it does not exist."""
    return THEME_PRESETS.get(name.strip().lower())


def resolve_theme(
    preset_name: str = DEFAULT_THEME,
    overrides: Mapping[str, str] | None = None,
) -> Palette:
    """
    Resolve the final palette from a preset plus overrides.

    Args:
        preset_name: Name of the base preset
        overrides: Token name -> value, applied on top of the preset

    Returns:
        Final Palette with all overrides applied

    Raises:
        PaletteError: If an override names an unknown token or empties a value
    """
    base = get_theme_preset(preset_name)
    if base is None:
        logger.warning(
            "Unknown theme preset %r, falling back to %r", preset_name, DEFAULT_THEME
        )
        base = THEME_PRESETS[DEFAULT_THEME]

    if not overrides:
        return base

    return base.with_overrides(lambda draft: {**draft, **overrides})
