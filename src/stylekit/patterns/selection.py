"""
Selection pattern: filter groups, chip sets, tab strips and option lists.

A selection renders three things. Item classes are the main output and go
on each option. Container classes wrap the group. Count classes style the
optional badge beside an option.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum

from ..assembler import assemble
from ..tokens import Token
from .base import SIZE_ALIASES as SHARED_SIZE_ALIASES
from .base import Pattern, Size, aliases_for


class SelectionBehavior(StrEnum):
    NONE = "none"
    SINGLE = "single"
    MULTIPLE = "multiple"
    TOGGLE = "toggle"


class SelectionState(StrEnum):
    UNSELECTED = "unselected"
    SELECTED = "selected"
    PARTIAL = "partial"
    DISABLED = "disabled"


class SelectionDisplay(StrEnum):
    BUTTON = "button"
    CHIP = "chip"
    LIST_ITEM = "list-item"
    CARD = "card"
    TAB = "tab"


class SelectionLayout(StrEnum):
    HORIZONTAL = "horizontal"
    VERTICAL = "vertical"
    GRID = "grid"
    DROPDOWN = "dropdown"
    INLINE = "inline"


class SelectionInteraction(StrEnum):
    SUBTLE = "subtle"
    STANDARD = "standard"
    PROMINENT = "prominent"


CONTAINER_BASE = "selection-pattern"
ITEM_BASE = "selection-item"
COUNT_BASE = "ml-2 px-2 py-0.5 text-xs rounded-full"

LAYOUT_CLASSES: dict[SelectionLayout, str] = {
    SelectionLayout.HORIZONTAL: "flex flex-row gap-2 items-center",
    SelectionLayout.VERTICAL: "flex flex-col gap-2",
    SelectionLayout.GRID: "grid grid-cols-auto gap-2",
    SelectionLayout.DROPDOWN: "relative",
    SelectionLayout.INLINE: "flex flex-wrap gap-2 items-center",
}

GAP_CLASSES: dict[Size, str] = {
    Size.XS: "gap-1",
    Size.SM: "gap-1.5",
    Size.MD: "gap-2",
    Size.LG: "gap-3",
    Size.XL: "gap-4",
}

_TRANSITION = "transition-all duration-200"

DISPLAY_CLASSES: dict[SelectionDisplay, str] = {
    SelectionDisplay.BUTTON: f"inline-flex items-center justify-center font-medium rounded-md {_TRANSITION}",
    SelectionDisplay.CHIP: f"inline-flex items-center rounded-full {_TRANSITION}",
    SelectionDisplay.LIST_ITEM: f"flex items-center w-full px-3 py-2 {_TRANSITION}",
    SelectionDisplay.CARD: f"flex flex-col items-center p-4 rounded-lg border {_TRANSITION}",
    SelectionDisplay.TAB: f"flex items-center px-4 py-2 border-b-2 {_TRANSITION}",
}

# Only buttons and chips scale their padding; other displays use the fallback.
ITEM_SIZE_CLASSES: dict[SelectionDisplay, dict[Size, str]] = {
    SelectionDisplay.BUTTON: {
        Size.XS: "px-2 py-1 text-xs",
        Size.SM: "px-3 py-1.5 text-sm",
        Size.MD: "px-4 py-2 text-base",
        Size.LG: "px-6 py-3 text-lg",
        Size.XL: "px-8 py-4 text-xl",
    },
    SelectionDisplay.CHIP: {
        Size.XS: "px-2 py-0.5 text-xs",
        Size.SM: "px-3 py-1 text-sm",
        Size.MD: "px-3 py-1.5 text-base",
        Size.LG: "px-4 py-2 text-lg",
        Size.XL: "px-6 py-3 text-xl",
    },
}
DEFAULT_ITEM_SIZE = "px-4 py-2 text-base"

# (background, text, border) per state.
STATE_TOKENS: dict[SelectionState, tuple[Token, Token, Token]] = {
    SelectionState.UNSELECTED: (Token.SURFACE, Token.TEXT_PRIMARY, Token.BORDER),
    SelectionState.SELECTED: (Token.PRIMARY, Token.TEXT_INVERSE, Token.PRIMARY),
    SelectionState.PARTIAL: (Token.BACKGROUND, Token.PRIMARY, Token.PRIMARY),
    SelectionState.DISABLED: (
        Token.INTERACTIVE_DISABLED,
        Token.TEXT_TERTIARY,
        Token.INTERACTIVE_DISABLED,
    ),
}

BEHAVIOR_ALIASES = aliases_for(SelectionBehavior)
STATE_ALIASES = aliases_for(
    SelectionState,
    inactive=SelectionState.UNSELECTED,
    active=SelectionState.SELECTED,
)
DISPLAY_ALIASES = aliases_for(
    SelectionDisplay,
    list=SelectionDisplay.LIST_ITEM,
    list_item=SelectionDisplay.LIST_ITEM,
)
LAYOUT_ALIASES = aliases_for(SelectionLayout)
SIZE_ALIASES = dict(SHARED_SIZE_ALIASES)
INTERACTION_ALIASES = aliases_for(SelectionInteraction)


@dataclass(frozen=True)
class SelectionPattern(Pattern):
    behavior: SelectionBehavior = SelectionBehavior.SINGLE
    state: SelectionState = SelectionState.UNSELECTED
    display: SelectionDisplay = SelectionDisplay.BUTTON
    layout: SelectionLayout = SelectionLayout.HORIZONTAL
    size: Size = Size.MD
    interaction: SelectionInteraction = SelectionInteraction.STANDARD
    show_counts: bool = False
    show_clear_all: bool = False

    AXES = ("base", "display", "size", "state", "interaction")
    DEPENDENTS = {
        "display": ("display", "size"),
        "state": ("state", "interaction"),
        "behavior": (),
        "layout": (),
        "show_counts": (),
        "show_clear_all": (),
    }

    @property
    def is_multi_select(self) -> bool:
        return self.behavior in (SelectionBehavior.MULTIPLE, SelectionBehavior.TOGGLE)

    @property
    def is_interactive(self) -> bool:
        return (
            self.behavior is not SelectionBehavior.NONE
            and self.state is not SelectionState.DISABLED
        )

    def container_classes(self) -> str:
        """Classes for the element wrapping every option."""
        return assemble([[CONTAINER_BASE, LAYOUT_CLASSES[self.layout], GAP_CLASSES[self.size]]])

    def count_classes(self) -> str:
        """Classes for the count badge, or "" when counts are hidden."""
        if not self.show_counts:
            return ""
        if self.state is SelectionState.SELECTED:
            colors = [self.colors.bg_class(Token.PRIMARY), self.colors.text_class(Token.TEXT_INVERSE)]
        else:
            colors = [
                self.colors.bg_class(Token.BACKGROUND),
                self.colors.text_class(Token.TEXT_SECONDARY),
            ]
        return assemble([[COUNT_BASE, *colors]])

    def container_aria_attributes(self) -> dict[str, str]:
        role = "tablist" if self.display is SelectionDisplay.TAB else "listbox"
        attrs = {"role": role}
        if self.is_multi_select and role == "listbox":
            attrs["aria-multiselectable"] = "true"
        return attrs

    def aria_attributes(self) -> dict[str, str]:
        """Per-option hints."""
        role = "tab" if self.display is SelectionDisplay.TAB else "option"
        attrs = {"role": role}
        if self.state is SelectionState.SELECTED:
            attrs["aria-selected"] = "true"
        elif self.state is SelectionState.PARTIAL:
            attrs["aria-checked"] = "mixed"
        else:
            attrs["aria-selected"] = "false"
        if self.state is SelectionState.DISABLED:
            attrs["aria-disabled"] = "true"
        return attrs

    def _base_fragments(self) -> list[str]:
        return [ITEM_BASE]

    def _display_fragments(self) -> list[str]:
        return [DISPLAY_CLASSES[self.display]]

    def _size_fragments(self) -> list[str]:
        sizes = ITEM_SIZE_CLASSES.get(self.display)
        return [sizes[self.size] if sizes else DEFAULT_ITEM_SIZE]

    def _state_fragments(self) -> list[str]:
        bg, text, border = STATE_TOKENS[self.state]
        return [
            self.colors.bg_class(bg),
            self.colors.text_class(text),
            self.colors.border_class(border),
        ]

    def _interaction_fragments(self) -> list[str]:
        if self.state is SelectionState.DISABLED:
            return ["cursor-not-allowed"]
        colors = self.colors
        unselected = self.state is SelectionState.UNSELECTED
        fragments = ["cursor-pointer"]
        if self.interaction is SelectionInteraction.SUBTLE:
            fragments.append("hover:opacity-80")
        elif self.interaction is SelectionInteraction.STANDARD:
            if unselected:
                fragments.append(f"hover:{colors.bg_class(Token.BACKGROUND)}")
                fragments.append(f"hover:{colors.border_class(Token.INTERACTIVE)}")
            fragments.append("hover:scale-105 active:scale-95")
        else:
            if unselected:
                fragments.append(f"hover:{colors.bg_class(Token.INTERACTIVE)}")
                fragments.append(f"hover:{colors.text_class(Token.TEXT_INVERSE)}")
            fragments.append("hover:scale-110 active:scale-90 shadow-lg hover:shadow-xl")
        return fragments
