"""
Card pattern: elevation, surface, padding, interaction and selection.

Hover elevation is a derived group. It only appears on hoverable or
clickable cards and its shade depends on the resting elevation, so it is
recomputed whenever either axis changes.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum

from ..tokens import Token
from .base import Pattern, aliases_for


class CardElevation(StrEnum):
    FLAT = "flat"
    SUBTLE = "subtle"
    RAISED = "raised"
    FLOATING = "floating"
    MODAL = "modal"


class CardSurface(StrEnum):
    STANDARD = "standard"
    ELEVATED = "elevated"
    BRANDED = "branded"
    GLASS = "glass"
    DARK = "dark"
    TRANSPARENT = "transparent"


class CardSpacing(StrEnum):
    NONE = "none"
    COMPACT = "compact"
    STANDARD = "standard"
    COMFORTABLE = "comfortable"
    SPACIOUS = "spacious"


class CardInteraction(StrEnum):
    STATIC = "static"
    HOVERABLE = "hoverable"
    CLICKABLE = "clickable"
    SELECTABLE = "selectable"
    DRAGGABLE = "draggable"


CARD_BASE = "rounded-lg border transition-all duration-300"

ELEVATION_CLASSES: dict[CardElevation, str] = {
    CardElevation.FLAT: "shadow-none",
    CardElevation.SUBTLE: "shadow-sm",
    CardElevation.RAISED: "shadow-md",
    CardElevation.FLOATING: "shadow-lg",
    CardElevation.MODAL: "shadow-2xl",
}

HOVER_ELEVATION_CLASSES: dict[CardElevation, str] = {
    CardElevation.SUBTLE: "hover:shadow-md",
    CardElevation.RAISED: "hover:shadow-lg",
    CardElevation.FLOATING: "hover:shadow-xl",
}

SPACING_CLASSES: dict[CardSpacing, str] = {
    CardSpacing.NONE: "p-0",
    CardSpacing.COMPACT: "p-3",
    CardSpacing.STANDARD: "p-5",
    CardSpacing.COMFORTABLE: "p-6",
    CardSpacing.SPACIOUS: "p-8",
}

_FOCUS_RING = "focus:outline-none focus:ring-2 focus:ring-offset-2"

INTERACTION_CLASSES: dict[CardInteraction, str] = {
    CardInteraction.STATIC: "",
    CardInteraction.HOVERABLE: "hover:scale-101 hover:shadow-sm",
    CardInteraction.CLICKABLE: f"cursor-pointer hover:scale-105 active:scale-95 {_FOCUS_RING}",
    CardInteraction.SELECTABLE: f"cursor-pointer hover:scale-101 {_FOCUS_RING}",
    CardInteraction.DRAGGABLE: "cursor-move hover:scale-105 active:scale-95",
}

# Surfaces that do not follow the palette.
FIXED_SURFACE_CLASSES: dict[CardSurface, str] = {
    CardSurface.GLASS: "bg-white/10 backdrop-blur-md border-white/20 text-white",
    CardSurface.DARK: "bg-gray-900 border-gray-700 text-white",
    CardSurface.TRANSPARENT: "bg-transparent border-transparent",
}

ELEVATION_ALIASES = aliases_for(
    CardElevation,
    none=CardElevation.FLAT,
    low=CardElevation.SUBTLE,
    standard=CardElevation.RAISED,
    high=CardElevation.FLOATING,
    highest=CardElevation.MODAL,
)
SURFACE_ALIASES = aliases_for(
    CardSurface,
    white=CardSurface.STANDARD,
    theme=CardSurface.BRANDED,
    clear=CardSurface.TRANSPARENT,
)
SPACING_ALIASES = aliases_for(
    CardSpacing,
    sm=CardSpacing.COMPACT,
    md=CardSpacing.STANDARD,
    lg=CardSpacing.COMFORTABLE,
    xl=CardSpacing.SPACIOUS,
)
INTERACTION_ALIASES = aliases_for(
    CardInteraction,
    none=CardInteraction.STATIC,
    hover=CardInteraction.HOVERABLE,
    click=CardInteraction.CLICKABLE,
    select=CardInteraction.SELECTABLE,
    drag=CardInteraction.DRAGGABLE,
)


@dataclass(frozen=True)
class CardPattern(Pattern):
    elevation: CardElevation = CardElevation.SUBTLE
    surface: CardSurface = CardSurface.STANDARD
    spacing: CardSpacing = CardSpacing.STANDARD
    interaction: CardInteraction = CardInteraction.STATIC
    selected: bool = False

    AXES = (
        "base",
        "elevation",
        "surface",
        "spacing",
        "interaction",
        "selection",
        "hover_elevation",
    )
    DEPENDENTS = {
        "elevation": ("elevation", "hover_elevation"),
        "interaction": ("interaction", "hover_elevation"),
        "selected": ("selection",),
    }

    @property
    def is_interactive(self) -> bool:
        return self.interaction is not CardInteraction.STATIC

    def aria_attributes(self) -> dict[str, str]:
        """Role and selection hints for interactive cards."""
        attrs: dict[str, str] = {}
        if self.interaction is CardInteraction.CLICKABLE:
            attrs["role"] = "button"
            attrs["tabindex"] = "0"
        elif self.interaction is CardInteraction.SELECTABLE:
            attrs["role"] = "option"
            attrs["tabindex"] = "0"
            attrs["aria-selected"] = "true" if self.selected else "false"
        return attrs

    def _base_fragments(self) -> list[str]:
        return [CARD_BASE]

    def _elevation_fragments(self) -> list[str]:
        return [ELEVATION_CLASSES[self.elevation]]

    def _surface_fragments(self) -> list[str]:
        colors = self.colors
        if self.surface in FIXED_SURFACE_CLASSES:
            return [FIXED_SURFACE_CLASSES[self.surface]]
        if self.surface is CardSurface.BRANDED:
            primary = colors.resolve_color(Token.PRIMARY)
            secondary = colors.resolve_color(Token.SECONDARY)
            return [
                f"bg-gradient-to-br from-{primary}/80 to-{secondary}/80 border-white/10",
                colors.text_class(Token.TEXT_INVERSE),
            ]
        background = Token.SURFACE if self.surface is CardSurface.STANDARD else Token.BACKGROUND
        return [
            colors.bg_class(background),
            colors.text_class(Token.TEXT_PRIMARY),
            colors.border_class(Token.BORDER),
        ]

    def _spacing_fragments(self) -> list[str]:
        return [SPACING_CLASSES[self.spacing]]

    def _interaction_fragments(self) -> list[str]:
        return [INTERACTION_CLASSES[self.interaction]]

    def _selection_fragments(self) -> list[str]:
        if not self.selected:
            return []
        return ["ring-2 ring-offset-2", self.colors.ring_class(Token.PRIMARY)]

    def _hover_elevation_fragments(self) -> list[str]:
        if self.interaction not in (CardInteraction.HOVERABLE, CardInteraction.CLICKABLE):
            return []
        hover = HOVER_ELEVATION_CLASSES.get(self.elevation)
        return [hover] if hover else []
