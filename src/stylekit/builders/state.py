"""
State styles builder for empty, loading, error and other placeholder views.
"""

from __future__ import annotations

from typing import Self

from ..patterns.base import Size
from ..patterns.state import (
    ACTION_ALIASES,
    ALIGNMENT_ALIASES,
    INTENT_ALIASES,
    LOADING_ALIASES,
    PROMINENCE_ALIASES,
    SIZE_ALIASES,
    LoadingVariant,
    StateAction,
    StateAlignment,
    StateIntent,
    StatePattern,
    StateProminence,
)
from ..resolver import ColorProvider
from .base import StyleBuilder


class StateStyles(StyleBuilder[StatePattern]):
    pattern_class = StatePattern
    flag_setters = frozenset({"fullscreen"})

    # Intent

    def intent(self, intent: StateIntent) -> Self:
        return self._set("intent", intent)

    def intent_str(self, intent: str) -> Self:
        return self._set_from_string("intent", intent, INTENT_ALIASES)

    def informational(self) -> Self:
        return self.intent(StateIntent.INFORMATIONAL)

    def loading(self) -> Self:
        return self.intent(StateIntent.LOADING)

    def success(self) -> Self:
        return self.intent(StateIntent.SUCCESS)

    def warning(self) -> Self:
        return self.intent(StateIntent.WARNING)

    def error(self) -> Self:
        return self.intent(StateIntent.ERROR)

    def empty(self) -> Self:
        return self.intent(StateIntent.EMPTY)

    # Prominence and action (semantic only, no classes)

    def prominence(self, prominence: StateProminence) -> Self:
        return self._set("prominence", prominence)

    def prominence_str(self, prominence: str) -> Self:
        return self._set_from_string("prominence", prominence, PROMINENCE_ALIASES)

    def action(self, action: StateAction) -> Self:
        return self._set("action", action)

    def action_str(self, action: str) -> Self:
        return self._set_from_string("action", action, ACTION_ALIASES)

    # Layout

    def size(self, size: Size) -> Self:
        return self._set("size", size)

    def size_str(self, size: str) -> Self:
        return self._set_from_string("size", size, SIZE_ALIASES)

    def alignment(self, alignment: StateAlignment) -> Self:
        return self._set("alignment", alignment)

    def alignment_str(self, alignment: str) -> Self:
        return self._set_from_string("alignment", alignment, ALIGNMENT_ALIASES)

    def fullscreen(self, enabled: bool = True) -> Self:
        return self._set("fullscreen", bool(enabled))

    # Loading indicator

    def loading_variant(self, variant: LoadingVariant | None) -> Self:
        return self._set("loading", variant)

    def loading_variant_str(self, variant: str) -> Self:
        return self._set_from_string("loading", variant, LOADING_ALIASES)

    def spinner(self) -> Self:
        return self.loading_variant(LoadingVariant.SPINNER)

    def skeleton(self) -> Self:
        return self.loading_variant(LoadingVariant.SKELETON)

    # Template hints

    def suggested_icon(self) -> str:
        return self._pattern.suggested_icon()

    def suggested_action_text(self) -> str | None:
        return self._pattern.suggested_action_text()

    def content_size_classes(self) -> str:
        return self._pattern.content_size_classes()

    def description_size_classes(self) -> str:
        return self._pattern.description_size_classes()

    def icon_size_classes(self) -> str:
        return self._pattern.icon_size_classes()

    def loader_size_classes(self) -> str:
        return self._pattern.loader_size_classes()

    def aria_attributes(self) -> dict[str, str]:
        return self._pattern.aria_attributes()


def state_styles(colors: ColorProvider | None = None) -> StateStyles:
    return StateStyles(colors)


def loading_state_styles(colors: ColorProvider | None = None) -> StateStyles:
    return StateStyles(colors).loading().spinner().action(StateAction.NONE)


def empty_state_styles(colors: ColorProvider | None = None) -> StateStyles:
    return StateStyles(colors).empty().action(StateAction.OPTIONAL)


def error_state_styles(colors: ColorProvider | None = None) -> StateStyles:
    return (
        StateStyles(colors)
        .error()
        .prominence(StateProminence.PROMINENT)
        .action(StateAction.RECOMMENDED)
    )


def success_state_styles(colors: ColorProvider | None = None) -> StateStyles:
    return StateStyles(colors).success()


def state_classes_from_strings(
    colors: ColorProvider | None = None,
    intent: str = "informational",
    prominence: str = "standard",
    size: str = "md",
    alignment: str = "center",
    loading_variant: str | None = None,
    fullscreen: bool = False,
) -> str:
    """Render state classes from plain strings; unknown strings are ignored."""
    builder = (
        StateStyles(colors)
        .intent_str(intent)
        .prominence_str(prominence)
        .size_str(size)
        .alignment_str(alignment)
        .fullscreen(fullscreen)
    )
    if loading_variant is not None:
        builder.loading_variant_str(loading_variant)
    return builder.classes()
