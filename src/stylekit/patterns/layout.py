"""
Layout pattern: dividers, padding, flex direction and alignment for the
regions inside a component (card header, body, footer and the like).
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum

from ..tokens import Token
from .base import Pattern, aliases_for


class LayoutDivider(StrEnum):
    NONE = "none"
    TOP = "top"
    BOTTOM = "bottom"
    LEFT = "left"
    RIGHT = "right"


class LayoutSpacing(StrEnum):
    NONE = "none"
    XS = "xs"
    SM = "sm"
    MD = "md"
    LG = "lg"
    XL = "xl"
    XL2 = "2xl"


class LayoutDirection(StrEnum):
    VERTICAL = "vertical"
    HORIZONTAL = "horizontal"


class LayoutAlignment(StrEnum):
    START = "start"
    CENTER = "center"
    END = "end"
    BETWEEN = "between"
    AROUND = "around"
    EVENLY = "evenly"


DIVIDER_SIDES: dict[LayoutDivider, str] = {
    LayoutDivider.TOP: "border-t",
    LayoutDivider.BOTTOM: "border-b",
    LayoutDivider.LEFT: "border-l",
    LayoutDivider.RIGHT: "border-r",
}

SPACING_CLASSES: dict[LayoutSpacing, str] = {
    LayoutSpacing.NONE: "",
    LayoutSpacing.XS: "p-1",
    LayoutSpacing.SM: "p-2",
    LayoutSpacing.MD: "p-4",
    LayoutSpacing.LG: "p-6",
    LayoutSpacing.XL: "p-8",
    LayoutSpacing.XL2: "p-12",
}

DIRECTION_CLASSES: dict[LayoutDirection, str] = {
    LayoutDirection.VERTICAL: "flex flex-col",
    LayoutDirection.HORIZONTAL: "flex flex-row",
}

ALIGNMENT_CLASSES: dict[LayoutAlignment, str] = {
    LayoutAlignment.START: "items-start justify-start",
    LayoutAlignment.CENTER: "items-center justify-center",
    LayoutAlignment.END: "items-end justify-end",
    LayoutAlignment.BETWEEN: "items-center justify-between",
    LayoutAlignment.AROUND: "items-center justify-around",
    LayoutAlignment.EVENLY: "items-center justify-evenly",
}

DIVIDER_ALIASES = aliases_for(LayoutDivider)
SPACING_ALIASES = aliases_for(LayoutSpacing)
DIRECTION_ALIASES = aliases_for(
    LayoutDirection,
    column=LayoutDirection.VERTICAL,
    row=LayoutDirection.HORIZONTAL,
)
ALIGNMENT_ALIASES = aliases_for(LayoutAlignment)


@dataclass(frozen=True)
class LayoutPattern(Pattern):
    divider: LayoutDivider = LayoutDivider.NONE
    spacing: LayoutSpacing = LayoutSpacing.MD
    direction: LayoutDirection | None = None
    alignment: LayoutAlignment | None = None

    AXES = ("divider", "spacing", "direction", "alignment")

    def _divider_fragments(self) -> list[str]:
        if self.divider is LayoutDivider.NONE:
            return []
        return [DIVIDER_SIDES[self.divider], self.colors.border_class(Token.BORDER)]

    def _spacing_fragments(self) -> list[str]:
        return [SPACING_CLASSES[self.spacing]]

    def _direction_fragments(self) -> list[str]:
        return [DIRECTION_CLASSES[self.direction]] if self.direction is not None else []

    def _alignment_fragments(self) -> list[str]:
        return [ALIGNMENT_CLASSES[self.alignment]] if self.alignment is not None else []
