"""
State pattern: empty, loading, error, success, warning and informational
placeholders.

Besides classes, a state exposes read-only hints for the template: an icon
name, an action label, and size classes for its title, description, icon
and loading indicator.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum

from ..tokens import Token
from .base import SIZE_ALIASES as SHARED_SIZE_ALIASES
from .base import Pattern, Size, aliases_for


class StateIntent(StrEnum):
    INFORMATIONAL = "informational"
    LOADING = "loading"
    SUCCESS = "success"
    WARNING = "warning"
    ERROR = "error"
    EMPTY = "empty"


class StateProminence(StrEnum):
    SUBTLE = "subtle"
    STANDARD = "standard"
    PROMINENT = "prominent"


class StateAlignment(StrEnum):
    LEFT = "left"
    CENTER = "center"
    RIGHT = "right"


class StateAction(StrEnum):
    NONE = "none"
    OPTIONAL = "optional"
    RECOMMENDED = "recommended"
    REQUIRED = "required"


class LoadingVariant(StrEnum):
    SPINNER = "spinner"
    DOTS = "dots"
    PULSE = "pulse"
    BARS = "bars"
    SKELETON = "skeleton"


STATE_BASE = "state-pattern"
FULLSCREEN_CLASSES = "min-h-screen justify-center"

ALIGNMENT_CLASSES: dict[StateAlignment, str] = {
    StateAlignment.LEFT: "flex flex-col items-start text-left",
    StateAlignment.CENTER: "flex flex-col items-center text-center",
    StateAlignment.RIGHT: "flex flex-col items-end text-right",
}

SPACING_CLASSES: dict[Size, str] = {
    Size.XS: "px-4 py-8",
    Size.SM: "px-6 py-12",
    Size.MD: "px-8 py-16",
    Size.LG: "px-12 py-20",
    Size.XL: "px-16 py-24",
}

# Intents with fixed colors; the rest follow the palette.
FIXED_INTENT_CLASSES: dict[StateIntent, str] = {
    StateIntent.SUCCESS: "text-green-600 bg-green-50",
    StateIntent.WARNING: "text-orange-600 bg-orange-50",
    StateIntent.ERROR: "text-red-600 bg-red-50",
}

INTENT_TEXT_TOKENS: dict[StateIntent, Token] = {
    StateIntent.INFORMATIONAL: Token.TEXT_PRIMARY,
    StateIntent.LOADING: Token.PRIMARY,
    StateIntent.EMPTY: Token.TEXT_SECONDARY,
}

LOADING_CLASSES: dict[LoadingVariant, str] = {
    LoadingVariant.SPINNER: "animate-spin border-4 border-t-transparent rounded-full",
    LoadingVariant.DOTS: "animate-bounce rounded-full",
    LoadingVariant.PULSE: "animate-pulse rounded-full",
    LoadingVariant.BARS: "animate-pulse rounded-sm",
    LoadingVariant.SKELETON: "animate-pulse rounded",
}

ICONS: dict[StateIntent, str] = {
    StateIntent.INFORMATIONAL: "info",
    StateIntent.LOADING: "loader",
    StateIntent.SUCCESS: "check-circle",
    StateIntent.WARNING: "alert-triangle",
    StateIntent.ERROR: "alert-circle",
    StateIntent.EMPTY: "inbox",
}

ACTION_TEXT: dict[tuple[StateIntent, StateAction], str] = {
    (StateIntent.ERROR, StateAction.RECOMMENDED): "Try Again",
    (StateIntent.EMPTY, StateAction.OPTIONAL): "Refresh",
    (StateIntent.EMPTY, StateAction.RECOMMENDED): "Add Item",
    (StateIntent.WARNING, StateAction.REQUIRED): "Take Action",
}

CONTENT_SIZE_CLASSES: dict[Size, str] = {
    Size.XS: "text-lg",
    Size.SM: "text-xl",
    Size.MD: "text-2xl",
    Size.LG: "text-3xl",
    Size.XL: "text-4xl",
}

DESCRIPTION_SIZE_CLASSES: dict[Size, str] = {
    Size.XS: "text-sm",
    Size.SM: "text-base",
    Size.MD: "text-lg",
    Size.LG: "text-xl",
    Size.XL: "text-2xl",
}

ICON_SIZE_CLASSES: dict[Size, str] = {
    Size.XS: "w-8 h-8",
    Size.SM: "w-12 h-12",
    Size.MD: "w-16 h-16",
    Size.LG: "w-20 h-20",
    Size.XL: "w-24 h-24",
}

LOADER_SIZE_CLASSES: dict[LoadingVariant, dict[Size, str]] = {
    LoadingVariant.SPINNER: {
        Size.XS: "w-6 h-6",
        Size.SM: "w-8 h-8",
        Size.MD: "w-12 h-12",
        Size.LG: "w-16 h-16",
        Size.XL: "w-20 h-20",
    },
    LoadingVariant.DOTS: {
        Size.XS: "w-2 h-2",
        Size.SM: "w-3 h-3",
        Size.MD: "w-4 h-4",
        Size.LG: "w-5 h-5",
        Size.XL: "w-6 h-6",
    },
}
DEFAULT_LOADER_SIZE = "w-8 h-8"

INTENT_ALIASES = aliases_for(
    StateIntent,
    info=StateIntent.INFORMATIONAL,
    warn=StateIntent.WARNING,
)
PROMINENCE_ALIASES = aliases_for(StateProminence)
SIZE_ALIASES = dict(SHARED_SIZE_ALIASES)
ALIGNMENT_ALIASES = aliases_for(StateAlignment)
ACTION_ALIASES = aliases_for(StateAction)
LOADING_ALIASES = aliases_for(LoadingVariant)


@dataclass(frozen=True)
class StatePattern(Pattern):
    intent: StateIntent = StateIntent.INFORMATIONAL
    prominence: StateProminence = StateProminence.STANDARD
    size: Size = Size.MD
    alignment: StateAlignment = StateAlignment.CENTER
    action: StateAction = StateAction.NONE
    loading: LoadingVariant | None = None
    fullscreen: bool = False

    AXES = ("base", "alignment", "fullscreen", "size", "intent", "loading")
    DEPENDENTS = {"prominence": (), "action": ()}

    @property
    def requires_action(self) -> bool:
        return self.action is StateAction.REQUIRED

    @property
    def is_interactive(self) -> bool:
        return self.action is not StateAction.NONE

    def suggested_icon(self) -> str:
        return ICONS[self.intent]

    def suggested_action_text(self) -> str | None:
        return ACTION_TEXT.get((self.intent, self.action))

    def content_size_classes(self) -> str:
        return CONTENT_SIZE_CLASSES[self.size]

    def description_size_classes(self) -> str:
        return DESCRIPTION_SIZE_CLASSES[self.size]

    def icon_size_classes(self) -> str:
        return ICON_SIZE_CLASSES[self.size]

    def loader_size_classes(self) -> str:
        sizes = LOADER_SIZE_CLASSES.get(self.loading) if self.loading else None
        return sizes[self.size] if sizes else DEFAULT_LOADER_SIZE

    def aria_attributes(self) -> dict[str, str]:
        """Live-region hints: errors are alerts, everything else a status."""
        attrs = {"role": "alert" if self.intent is StateIntent.ERROR else "status"}
        if self.intent is StateIntent.LOADING or self.loading is not None:
            attrs["aria-busy"] = "true"
        return attrs

    def _base_fragments(self) -> list[str]:
        return [STATE_BASE]

    def _alignment_fragments(self) -> list[str]:
        return [ALIGNMENT_CLASSES[self.alignment]]

    def _fullscreen_fragments(self) -> list[str]:
        return [FULLSCREEN_CLASSES] if self.fullscreen else []

    def _size_fragments(self) -> list[str]:
        return [SPACING_CLASSES[self.size]]

    def _intent_fragments(self) -> list[str]:
        if self.intent in FIXED_INTENT_CLASSES:
            return [FIXED_INTENT_CLASSES[self.intent]]
        return [
            self.colors.text_class(INTENT_TEXT_TOKENS[self.intent]),
            self.colors.bg_class(Token.BACKGROUND),
        ]

    def _loading_fragments(self) -> list[str]:
        return [LOADING_CLASSES[self.loading]] if self.loading is not None else []
