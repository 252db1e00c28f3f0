"""
Interactive styles builder.

Usage:
    (
        InteractiveStyles(resolver)
        .input()
        .focusable()
        .on_hover("shadow-md")
        .on_disabled("opacity-50 cursor-not-allowed")
        .classes()
    )

``on_hover``, ``on_focus``, ``on_active`` and ``on_disabled`` add classes
under that pseudo-class and accumulate across calls. Every other setter
replaces its previous value.
"""

from __future__ import annotations

from typing import Self

from ..assembler import split_classes
from ..patterns.interactive import (
    INTENSITY_ALIASES,
    KIND_ALIASES,
    STATE_ALIASES,
    InteractionIntensity,
    InteractiveKind,
    InteractivePattern,
    InteractiveState,
)
from ..resolver import ColorProvider
from ..tokens import Token
from .base import StyleBuilder


class InteractiveStyles(StyleBuilder[InteractivePattern]):
    pattern_class = InteractivePattern
    flag_setters = frozenset({"hoverable", "focusable", "pressable"})

    # Kind

    def kind(self, kind: InteractiveKind) -> Self:
        return self._set("kind", kind)

    def kind_str(self, kind: str) -> Self:
        return self._set_from_string("kind", kind, KIND_ALIASES)

    def generic(self) -> Self:
        return self.kind(InteractiveKind.ELEMENT)

    def input(self) -> Self:
        return self.kind(InteractiveKind.INPUT)

    def primary(self) -> Self:
        return self.kind(InteractiveKind.PRIMARY_BUTTON)

    def secondary(self) -> Self:
        return self.kind(InteractiveKind.SECONDARY_BUTTON)

    def ghost(self) -> Self:
        return self.kind(InteractiveKind.GHOST_BUTTON)

    # Behaviour

    def hoverable(self, enabled: bool = True) -> Self:
        return self._set("hoverable", bool(enabled))

    def focusable(self, enabled: bool = True) -> Self:
        return self._set("focusable", bool(enabled))

    def pressable(self, enabled: bool = True) -> Self:
        return self._set("pressable", bool(enabled))

    def intensity(self, intensity: InteractionIntensity) -> Self:
        return self._set("intensity", intensity)

    def intensity_str(self, intensity: str) -> Self:
        return self._set_from_string("intensity", intensity, INTENSITY_ALIASES)

    def gentle(self) -> Self:
        return self.intensity(InteractionIntensity.GENTLE)

    def prominent(self) -> Self:
        return self.intensity(InteractionIntensity.PROMINENT)

    # State

    def state(self, state: InteractiveState) -> Self:
        return self._set("state", state)

    def state_str(self, state: str) -> Self:
        return self._set_from_string("state", state, STATE_ALIASES)

    def focused(self) -> Self:
        return self.state(InteractiveState.FOCUSED)

    def pressed(self) -> Self:
        return self.state(InteractiveState.ACTIVE)

    def disabled(self) -> Self:
        return self.state(InteractiveState.DISABLED)

    def loading(self) -> Self:
        return self.state(InteractiveState.LOADING)

    # Pseudo-class classes

    def base_classes(self, classes: str) -> Self:
        return self._extend("base_extra", classes)

    def on_hover(self, classes: str) -> Self:
        return self._extend("hover_extra", classes)

    def on_focus(self, classes: str) -> Self:
        return self._extend("focus_extra", classes)

    def on_active(self, classes: str) -> Self:
        return self._extend("active_extra", classes)

    def on_disabled(self, classes: str) -> Self:
        return self._extend("disabled_extra", classes)

    def hover_border_primary(self) -> Self:
        return self.on_hover(self.colors.border_class(Token.PRIMARY))

    def hover_darken(self) -> Self:
        return self.on_hover(self.colors.bg_class(Token.INTERACTIVE_HOVER))

    def focus_ring_primary(self) -> Self:
        ring = self.colors.ring_class(Token.PRIMARY)
        return self.on_focus(f"outline-none ring-2 ring-offset-2 {ring}")

    def _extend(self, axis: str, classes: str) -> Self:
        added = split_classes(classes)
        if not added:
            return self
        current: tuple[str, ...] = getattr(self._pattern, axis)
        return self._set(axis, (*current, *added))

    def aria_attributes(self) -> dict[str, str]:
        return self._pattern.aria_attributes()


def interactive_element(colors: ColorProvider | None = None) -> InteractiveStyles:
    return InteractiveStyles(colors).hoverable().focusable().pressable()


def interactive_input(colors: ColorProvider | None = None) -> InteractiveStyles:
    return (
        InteractiveStyles(colors)
        .input()
        .hover_border_primary()
        .on_hover("shadow-md")
        .focus_ring_primary()
        .on_disabled("opacity-50 cursor-not-allowed")
    )


def interactive_button(colors: ColorProvider | None = None) -> InteractiveStyles:
    return (
        InteractiveStyles(colors)
        .primary()
        .hoverable()
        .focusable()
        .pressable()
        .hover_darken()
        .on_disabled("opacity-50 cursor-not-allowed")
    )
