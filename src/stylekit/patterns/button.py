"""
Button pattern: variant, size, interaction state and layout flags.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum

from ..tokens import Token
from .base import SIZE_ALIASES as SHARED_SIZE_ALIASES
from .base import Pattern, Size, aliases_for


class ButtonVariant(StrEnum):
    PRIMARY = "primary"
    SECONDARY = "secondary"
    SUCCESS = "success"
    WARNING = "warning"
    ERROR = "error"
    GHOST = "ghost"
    LINK = "link"


class ButtonState(StrEnum):
    DEFAULT = "default"
    HOVER = "hover"
    ACTIVE = "active"
    DISABLED = "disabled"
    LOADING = "loading"


BUTTON_BASE = (
    "inline-flex items-center justify-center font-medium transition-colors "
    "duration-200 disabled:opacity-50 disabled:cursor-not-allowed"
)

SIZE_CLASSES: dict[Size, str] = {
    Size.XS: "px-2 py-1 text-xs rounded",
    Size.SM: "px-3 py-1.5 text-sm rounded",
    Size.MD: "px-4 py-2 text-sm rounded-md",
    Size.LG: "px-6 py-3 text-base rounded-md",
    Size.XL: "px-8 py-4 text-lg rounded-lg",
}

STATE_CLASSES: dict[ButtonState, str] = {
    ButtonState.DEFAULT: "",
    ButtonState.HOVER: "hover:scale-105",
    ButtonState.ACTIVE: "active:scale-95",
    ButtonState.DISABLED: "opacity-50 cursor-not-allowed",
    ButtonState.LOADING: "cursor-wait",
}

# Semantic variants share one shape; only the palette token and hover shade differ.
_SEMANTIC_VARIANTS: dict[ButtonVariant, tuple[Token, str]] = {
    ButtonVariant.SUCCESS: (Token.SUCCESS, "hover:bg-green-600"),
    ButtonVariant.WARNING: (Token.WARNING, "hover:bg-amber-600"),
    ButtonVariant.ERROR: (Token.ERROR, "hover:bg-red-600"),
}

FULL_WIDTH_CLASS = "w-full"
ICON_SPACING_CLASS = "space-x-2"

VARIANT_ALIASES = aliases_for(
    ButtonVariant,
    outline=ButtonVariant.SECONDARY,
    danger=ButtonVariant.ERROR,
)
SIZE_ALIASES = dict(SHARED_SIZE_ALIASES)
STATE_ALIASES = aliases_for(ButtonState, normal=ButtonState.DEFAULT)


@dataclass(frozen=True)
class ButtonPattern(Pattern):
    variant: ButtonVariant = ButtonVariant.PRIMARY
    size: Size = Size.MD
    state: ButtonState = ButtonState.DEFAULT
    full_width: bool = False
    with_icon: bool = False

    AXES = ("base", "size", "variant", "state", "width", "icon")
    DEPENDENTS = {"full_width": ("width",), "with_icon": ("icon",)}

    @property
    def is_disabled(self) -> bool:
        return self.state is ButtonState.DISABLED

    @property
    def is_loading(self) -> bool:
        return self.state is ButtonState.LOADING

    def aria_attributes(self) -> dict[str, str]:
        """ARIA hints matching the interaction state."""
        attrs: dict[str, str] = {}
        if self.is_disabled:
            attrs["aria-disabled"] = "true"
        if self.is_loading:
            attrs["aria-busy"] = "true"
        return attrs

    def _base_fragments(self) -> list[str]:
        return [BUTTON_BASE]

    def _size_fragments(self) -> list[str]:
        return [SIZE_CLASSES[self.size]]

    def _variant_fragments(self) -> list[str]:
        colors = self.colors
        if self.variant is ButtonVariant.PRIMARY:
            return [
                colors.bg_class(Token.PRIMARY),
                colors.text_class(Token.TEXT_INVERSE),
                f"hover:{colors.bg_class(Token.INTERACTIVE_HOVER)}",
            ]
        if self.variant is ButtonVariant.SECONDARY:
            return [
                colors.bg_class(Token.SURFACE),
                colors.text_class(Token.TEXT_PRIMARY),
                colors.border_class(Token.BORDER),
                "border",
            ]
        if self.variant in _SEMANTIC_VARIANTS:
            token, hover = _SEMANTIC_VARIANTS[self.variant]
            return [colors.bg_class(token), colors.text_class(Token.TEXT_INVERSE), hover]
        if self.variant is ButtonVariant.GHOST:
            return [
                "bg-transparent",
                colors.text_class(Token.TEXT_PRIMARY),
                f"hover:{colors.bg_class(Token.BACKGROUND)}",
            ]
        return ["bg-transparent", colors.text_class(Token.PRIMARY), "hover:underline"]

    def _state_fragments(self) -> list[str]:
        return [STATE_CLASSES[self.state]]

    def _width_fragments(self) -> list[str]:
        return [FULL_WIDTH_CLASS] if self.full_width else []

    def _icon_fragments(self) -> list[str]:
        return [ICON_SPACING_CLASS] if self.with_icon else []
