"""
Interactive pattern: hover, focus, press and disabled behaviour for any
clickable element.

Two sources feed each pseudo-class group. Semantic flags (hoverable,
focusable, pressable) pick effects from the intensity tables, and extra
classes given by the caller are prefixed with the pseudo-class
(``shadow-md`` on hover becomes ``hover:shadow-md``). The current state
then decides which semantic effects still apply; a disabled element keeps
its extras but loses hover and press effects.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum

from ..tokens import Token
from .base import Pattern, aliases_for


class InteractiveKind(StrEnum):
    ELEMENT = "element"
    INPUT = "input"
    PRIMARY_BUTTON = "primary-button"
    SECONDARY_BUTTON = "secondary-button"
    GHOST_BUTTON = "ghost-button"


class InteractiveState(StrEnum):
    DEFAULT = "default"
    HOVER = "hover"
    ACTIVE = "active"
    FOCUSED = "focused"
    DISABLED = "disabled"
    LOADING = "loading"


class InteractionIntensity(StrEnum):
    GENTLE = "gentle"
    STANDARD = "standard"
    PROMINENT = "prominent"


PSEUDO_CLASSES = ("hover", "focus", "active", "disabled")

TRANSITION = "transition-all duration-200 ease-in-out"
_BUTTON_BASE = (
    "inline-flex items-center justify-center px-4 py-2 font-medium rounded-md transition-colors"
)
INPUT_BASE = "w-full px-4 py-3 rounded-md transition-colors focus:outline-none"

HOVER_EFFECTS: dict[InteractionIntensity, str] = {
    InteractionIntensity.GENTLE: "hover:scale-101 hover:shadow-sm",
    InteractionIntensity.STANDARD: "hover:scale-105 hover:shadow-md",
    InteractionIntensity.PROMINENT: "hover:scale-110 hover:shadow-lg",
}

PRESS_EFFECTS: dict[InteractionIntensity, str] = {
    InteractionIntensity.GENTLE: "active:scale-100",
    InteractionIntensity.STANDARD: "active:scale-95",
    InteractionIntensity.PROMINENT: "active:scale-95",
}

FOCUS_RING = "focus:outline-none focus:ring-2 focus:ring-offset-2"

STATE_CLASSES: dict[InteractiveState, str] = {
    InteractiveState.DISABLED: "opacity-50 pointer-events-none",
    InteractiveState.LOADING: "opacity-75",
}

KIND_ALIASES = aliases_for(
    InteractiveKind,
    primary=InteractiveKind.PRIMARY_BUTTON,
    button=InteractiveKind.PRIMARY_BUTTON,
    secondary=InteractiveKind.SECONDARY_BUTTON,
    ghost=InteractiveKind.GHOST_BUTTON,
    field=InteractiveKind.INPUT,
)
STATE_ALIASES = aliases_for(
    InteractiveState,
    hovered=InteractiveState.HOVER,
    pressed=InteractiveState.ACTIVE,
    focus=InteractiveState.FOCUSED,
    busy=InteractiveState.LOADING,
)
INTENSITY_ALIASES = aliases_for(
    InteractionIntensity,
    subtle=InteractionIntensity.GENTLE,
    normal=InteractionIntensity.STANDARD,
    strong=InteractionIntensity.PROMINENT,
)


def with_pseudo_class(pseudo: str, classes: tuple[str, ...]) -> list[str]:
    """
    Prefix each class with ``pseudo:`` unless it already carries it.

    Examples:
        >>> with_pseudo_class("hover", ("shadow-md", "hover:scale-105"))
        ['hover:shadow-md', 'hover:scale-105']
    """
    prefix = f"{pseudo}:"
    return [c if c.startswith(prefix) else f"{prefix}{c}" for c in classes]


@dataclass(frozen=True)
class InteractivePattern(Pattern):
    kind: InteractiveKind = InteractiveKind.ELEMENT
    state: InteractiveState = InteractiveState.DEFAULT
    intensity: InteractionIntensity = InteractionIntensity.STANDARD
    hoverable: bool = False
    focusable: bool = False
    pressable: bool = False
    base_extra: tuple[str, ...] = ()
    hover_extra: tuple[str, ...] = ()
    focus_extra: tuple[str, ...] = ()
    active_extra: tuple[str, ...] = ()
    disabled_extra: tuple[str, ...] = ()

    AXES = ("base", "transition", "cursor", "hover", "focus", "active", "disabled", "state")
    DEPENDENTS = {
        "kind": ("base",),
        "base_extra": ("base",),
        "state": ("cursor", "hover", "focus", "active", "state"),
        "intensity": ("hover", "active"),
        "hoverable": ("transition", "cursor", "hover"),
        "focusable": ("transition", "focus"),
        "pressable": ("transition", "cursor", "active"),
        "hover_extra": ("hover",),
        "focus_extra": ("focus",),
        "active_extra": ("active",),
        "disabled_extra": ("disabled",),
    }

    @property
    def is_interactive(self) -> bool:
        return self.hoverable or self.focusable or self.pressable

    @property
    def is_disabled(self) -> bool:
        return self.state is InteractiveState.DISABLED

    def aria_attributes(self) -> dict[str, str]:
        attrs: dict[str, str] = {}
        if self.is_disabled:
            attrs["aria-disabled"] = "true"
        elif self.state is InteractiveState.LOADING:
            attrs["aria-busy"] = "true"
        elif self.state is InteractiveState.ACTIVE and self.pressable:
            attrs["aria-pressed"] = "true"
        return attrs

    def _base_fragments(self) -> list[str]:
        colors = self.colors
        kind = self.kind
        if kind is InteractiveKind.INPUT:
            base = [
                INPUT_BASE,
                "border",
                colors.border_class(Token.BORDER),
                colors.bg_class(Token.SURFACE),
            ]
        elif kind is InteractiveKind.PRIMARY_BUTTON:
            base = [
                _BUTTON_BASE,
                colors.bg_class(Token.PRIMARY),
                colors.text_class(Token.TEXT_INVERSE),
            ]
        elif kind is InteractiveKind.SECONDARY_BUTTON:
            base = [
                _BUTTON_BASE,
                "border",
                colors.bg_class(Token.SURFACE),
                colors.text_class(Token.TEXT_PRIMARY),
                colors.border_class(Token.BORDER),
            ]
        elif kind is InteractiveKind.GHOST_BUTTON:
            base = [_BUTTON_BASE, "bg-transparent", colors.text_class(Token.TEXT_PRIMARY)]
        else:
            base = []
        return [*base, *self.base_extra]

    def _transition_fragments(self) -> list[str]:
        return [TRANSITION] if self.is_interactive else []

    def _cursor_fragments(self) -> list[str]:
        if self.is_disabled:
            return ["cursor-not-allowed"]
        if self.state is InteractiveState.LOADING:
            return ["cursor-wait"]
        if self.hoverable or self.pressable:
            return ["cursor-pointer"]
        return []

    def _hover_fragments(self) -> list[str]:
        fragments = []
        if self.hoverable and not self.is_disabled:
            fragments.append(HOVER_EFFECTS[self.intensity])
        return [*fragments, *with_pseudo_class("hover", self.hover_extra)]

    def _focus_fragments(self) -> list[str]:
        fragments = []
        if self.focusable:
            fragments += [FOCUS_RING, f"focus:{self.colors.ring_class(Token.PRIMARY)}"]
            if self.state is InteractiveState.FOCUSED:
                fragments += ["ring-2 ring-offset-2", self.colors.ring_class(Token.PRIMARY)]
        return [*fragments, *with_pseudo_class("focus", self.focus_extra)]

    def _active_fragments(self) -> list[str]:
        fragments = []
        if self.pressable and not self.is_disabled:
            fragments.append(PRESS_EFFECTS[self.intensity])
        return [*fragments, *with_pseudo_class("active", self.active_extra)]

    def _disabled_fragments(self) -> list[str]:
        return with_pseudo_class("disabled", self.disabled_extra)

    def _state_fragments(self) -> list[str]:
        return [STATE_CLASSES.get(self.state, "")]
