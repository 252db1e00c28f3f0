"""
Button styles builder.
"""

from __future__ import annotations

from typing import Self

from ..patterns.base import Size
from ..patterns.button import (
    SIZE_ALIASES,
    STATE_ALIASES,
    VARIANT_ALIASES,
    ButtonPattern,
    ButtonState,
    ButtonVariant,
)
from ..resolver import ColorProvider
from .base import StyleBuilder


class ButtonStyles(StyleBuilder[ButtonPattern]):
    pattern_class = ButtonPattern
    flag_setters = frozenset({"full_width", "with_icon"})

    def variant(self, variant: ButtonVariant) -> Self:
        return self._set("variant", variant)

    def variant_str(self, variant: str) -> Self:
        return self._set_from_string("variant", variant, VARIANT_ALIASES)

    def primary(self) -> Self:
        return self.variant(ButtonVariant.PRIMARY)

    def secondary(self) -> Self:
        return self.variant(ButtonVariant.SECONDARY)

    def success(self) -> Self:
        return self.variant(ButtonVariant.SUCCESS)

    def warning(self) -> Self:
        return self.variant(ButtonVariant.WARNING)

    def error(self) -> Self:
        return self.variant(ButtonVariant.ERROR)

    def danger(self) -> Self:
        return self.variant(ButtonVariant.ERROR)

    def ghost(self) -> Self:
        return self.variant(ButtonVariant.GHOST)

    def link(self) -> Self:
        return self.variant(ButtonVariant.LINK)

    def size(self, size: Size) -> Self:
        return self._set("size", size)

    def size_str(self, size: str) -> Self:
        return self._set_from_string("size", size, SIZE_ALIASES)

    def small(self) -> Self:
        return self.size(Size.SM)

    def large(self) -> Self:
        return self.size(Size.LG)

    def state(self, state: ButtonState) -> Self:
        return self._set("state", state)

    def state_str(self, state: str) -> Self:
        return self._set_from_string("state", state, STATE_ALIASES)

    def disabled(self) -> Self:
        return self.state(ButtonState.DISABLED)

    def loading(self) -> Self:
        return self.state(ButtonState.LOADING)

    def full_width(self, enabled: bool = True) -> Self:
        return self._set("full_width", bool(enabled))

    def with_icon(self, enabled: bool = True) -> Self:
        return self._set("with_icon", bool(enabled))

    def aria_attributes(self) -> dict[str, str]:
        return self._pattern.aria_attributes()


def button_styles(colors: ColorProvider | None = None) -> ButtonStyles:
    return ButtonStyles(colors)


def primary_button(colors: ColorProvider | None = None) -> ButtonStyles:
    return ButtonStyles(colors).primary()


def secondary_button(colors: ColorProvider | None = None) -> ButtonStyles:
    return ButtonStyles(colors).secondary()


def danger_button(colors: ColorProvider | None = None) -> ButtonStyles:
    return ButtonStyles(colors).danger()


def ghost_button(colors: ColorProvider | None = None) -> ButtonStyles:
    return ButtonStyles(colors).ghost()


def button_classes_from_strings(
    colors: ColorProvider | None = None,
    variant: str = "primary",
    size: str = "md",
    state: str = "default",
    full_width: bool = False,
) -> str:
    """Render button classes from plain strings; unknown strings are ignored."""
    return (
        ButtonStyles(colors)
        .variant_str(variant)
        .size_str(size)
        .state_str(state)
        .full_width(full_width)
        .classes()
    )
