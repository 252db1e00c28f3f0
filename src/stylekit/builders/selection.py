"""
Selection styles builder.

``classes()`` renders the per-option item classes, including any custom
classes. ``container_classes()`` and ``count_classes()`` render the group
wrapper and the count badge.
"""

from __future__ import annotations

from typing import Self

from ..patterns.base import Size
from ..patterns.selection import (
    BEHAVIOR_ALIASES,
    DISPLAY_ALIASES,
    INTERACTION_ALIASES,
    LAYOUT_ALIASES,
    SIZE_ALIASES,
    STATE_ALIASES,
    SelectionBehavior,
    SelectionDisplay,
    SelectionInteraction,
    SelectionLayout,
    SelectionPattern,
    SelectionState,
)
from ..resolver import ColorProvider
from .base import StyleBuilder


class SelectionStyles(StyleBuilder[SelectionPattern]):
    pattern_class = SelectionPattern
    flag_setters = frozenset({"with_counts", "with_clear_all"})

    def behavior(self, behavior: SelectionBehavior) -> Self:
        return self._set("behavior", behavior)

    def behavior_str(self, behavior: str) -> Self:
        return self._set_from_string("behavior", behavior, BEHAVIOR_ALIASES)

    def state(self, state: SelectionState) -> Self:
        return self._set("state", state)

    def state_str(self, state: str) -> Self:
        return self._set_from_string("state", state, STATE_ALIASES)

    def selected(self) -> Self:
        return self.state(SelectionState.SELECTED)

    def unselected(self) -> Self:
        return self.state(SelectionState.UNSELECTED)

    def disabled(self) -> Self:
        return self.state(SelectionState.DISABLED)

    def display(self, display: SelectionDisplay) -> Self:
        return self._set("display", display)

    def display_str(self, display: str) -> Self:
        return self._set_from_string("display", display, DISPLAY_ALIASES)

    def layout(self, layout: SelectionLayout) -> Self:
        return self._set("layout", layout)

    def layout_str(self, layout: str) -> Self:
        return self._set_from_string("layout", layout, LAYOUT_ALIASES)

    def size(self, size: Size) -> Self:
        return self._set("size", size)

    def size_str(self, size: str) -> Self:
        return self._set_from_string("size", size, SIZE_ALIASES)

    def interaction(self, interaction: SelectionInteraction) -> Self:
        return self._set("interaction", interaction)

    def interaction_str(self, interaction: str) -> Self:
        return self._set_from_string("interaction", interaction, INTERACTION_ALIASES)

    def with_counts(self, enabled: bool = True) -> Self:
        return self._set("show_counts", bool(enabled))

    def with_clear_all(self, enabled: bool = True) -> Self:
        return self._set("show_clear_all", bool(enabled))

    # Template hints

    def allows_multiple(self) -> bool:
        return self._pattern.is_multi_select

    def is_interactive(self) -> bool:
        return self._pattern.is_interactive

    def has_counts(self) -> bool:
        return self._pattern.show_counts

    def has_clear_all(self) -> bool:
        """Whether the template should render a "clear all" control."""
        return self._pattern.show_clear_all

    # Other outputs

    def item_classes(self) -> str:
        return self.classes()

    def container_classes(self) -> str:
        return self._pattern.container_classes()

    def count_classes(self) -> str:
        return self._pattern.count_classes()

    def aria_attributes(self) -> dict[str, str]:
        return self._pattern.aria_attributes()

    def container_aria_attributes(self) -> dict[str, str]:
        return self._pattern.container_aria_attributes()


def selection_styles(colors: ColorProvider | None = None) -> SelectionStyles:
    return SelectionStyles(colors)


def filter_selection_styles(colors: ColorProvider | None = None) -> SelectionStyles:
    return (
        SelectionStyles(colors)
        .behavior(SelectionBehavior.SINGLE)
        .display(SelectionDisplay.BUTTON)
        .layout(SelectionLayout.HORIZONTAL)
        .interaction(SelectionInteraction.STANDARD)
        .with_counts()
    )


def chip_selection_styles(colors: ColorProvider | None = None) -> SelectionStyles:
    return (
        SelectionStyles(colors)
        .behavior(SelectionBehavior.MULTIPLE)
        .display(SelectionDisplay.CHIP)
        .layout(SelectionLayout.INLINE)
        .interaction(SelectionInteraction.SUBTLE)
        .with_clear_all()
    )


def tab_selection_styles(colors: ColorProvider | None = None) -> SelectionStyles:
    return (
        SelectionStyles(colors)
        .behavior(SelectionBehavior.SINGLE)
        .display(SelectionDisplay.TAB)
        .layout(SelectionLayout.HORIZONTAL)
        .interaction(SelectionInteraction.STANDARD)
    )


def selection_classes_from_strings(
    colors: ColorProvider | None = None,
    behavior: str = "single",
    state: str = "unselected",
    display: str = "button",
    layout: str = "horizontal",
    size: str = "md",
    interaction: str = "standard",
    show_counts: bool = False,
) -> tuple[str, str]:
    """
    Render selection classes from plain strings.

    Returns:
        (container classes, item classes)
    """
    builder = (
        SelectionStyles(colors)
        .behavior_str(behavior)
        .state_str(state)
        .display_str(display)
        .layout_str(layout)
        .size_str(size)
        .interaction_str(interaction)
        .with_counts(show_counts)
    )
    return builder.container_classes(), builder.item_classes()
