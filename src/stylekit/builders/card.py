"""
Card styles builder.

Presets cover the common card roles:

    content_card      static content, subtle shadow
    interactive_card  clickable, lifts on hover
    hero_card         branded gradient, floating
    glass_card        frosted glass over imagery
    minimal_card      flat and transparent
"""

from __future__ import annotations

from typing import Self

from ..patterns.card import (
    ELEVATION_ALIASES,
    INTERACTION_ALIASES,
    SPACING_ALIASES,
    SURFACE_ALIASES,
    CardElevation,
    CardInteraction,
    CardPattern,
    CardSpacing,
    CardSurface,
)
from ..resolver import ColorProvider
from .base import StyleBuilder


class CardStyles(StyleBuilder[CardPattern]):
    pattern_class = CardPattern
    flag_setters = frozenset({"selected"})

    # Elevation

    def elevation(self, elevation: CardElevation) -> Self:
        return self._set("elevation", elevation)

    def elevation_str(self, elevation: str) -> Self:
        return self._set_from_string("elevation", elevation, ELEVATION_ALIASES)

    def flat(self) -> Self:
        return self.elevation(CardElevation.FLAT)

    def raised(self) -> Self:
        return self.elevation(CardElevation.RAISED)

    def floating(self) -> Self:
        return self.elevation(CardElevation.FLOATING)

    # Surface

    def surface(self, surface: CardSurface) -> Self:
        return self._set("surface", surface)

    def surface_str(self, surface: str) -> Self:
        return self._set_from_string("surface", surface, SURFACE_ALIASES)

    def branded(self) -> Self:
        return self.surface(CardSurface.BRANDED)

    def glass(self) -> Self:
        return self.surface(CardSurface.GLASS)

    # Spacing

    def spacing(self, spacing: CardSpacing) -> Self:
        return self._set("spacing", spacing)

    def spacing_str(self, spacing: str) -> Self:
        return self._set_from_string("spacing", spacing, SPACING_ALIASES)

    def compact(self) -> Self:
        return self.spacing(CardSpacing.COMPACT)

    def spacious(self) -> Self:
        return self.spacing(CardSpacing.SPACIOUS)

    # Interaction

    def interaction(self, interaction: CardInteraction) -> Self:
        return self._set("interaction", interaction)

    def interaction_str(self, interaction: str) -> Self:
        return self._set_from_string("interaction", interaction, INTERACTION_ALIASES)

    def hoverable(self) -> Self:
        return self.interaction(CardInteraction.HOVERABLE)

    def clickable(self) -> Self:
        return self.interaction(CardInteraction.CLICKABLE)

    def selectable(self) -> Self:
        return self.interaction(CardInteraction.SELECTABLE)

    def selected(self, selected: bool = True) -> Self:
        return self._set("selected", bool(selected))

    def aria_attributes(self) -> dict[str, str]:
        return self._pattern.aria_attributes()


def card_styles(colors: ColorProvider | None = None) -> CardStyles:
    return CardStyles(colors)


def content_card(colors: ColorProvider | None = None) -> CardStyles:
    return CardStyles(colors)


def interactive_card(colors: ColorProvider | None = None) -> CardStyles:
    return CardStyles(colors).raised().clickable()


def hero_card(colors: ColorProvider | None = None) -> CardStyles:
    return CardStyles(colors).floating().branded().spacious()


def glass_card(colors: ColorProvider | None = None) -> CardStyles:
    return CardStyles(colors).raised().glass().hoverable()


def minimal_card(colors: ColorProvider | None = None) -> CardStyles:
    return CardStyles(colors).flat().surface(CardSurface.TRANSPARENT).compact()


def card_classes_from_strings(
    colors: ColorProvider | None = None,
    elevation: str = "subtle",
    surface: str = "standard",
    spacing: str = "standard",
    interaction: str = "static",
) -> str:
    """Render card classes from plain strings; unknown strings are ignored."""
    return (
        CardStyles(colors)
        .elevation_str(elevation)
        .surface_str(surface)
        .spacing_str(spacing)
        .interaction_str(interaction)
        .classes()
    )
