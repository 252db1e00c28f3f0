"""
Layout styles builder, for regions inside a component.
"""

from __future__ import annotations

from typing import Self

from ..patterns.layout import (
    ALIGNMENT_ALIASES,
    DIRECTION_ALIASES,
    DIVIDER_ALIASES,
    SPACING_ALIASES,
    LayoutAlignment,
    LayoutDirection,
    LayoutDivider,
    LayoutPattern,
    LayoutSpacing,
)
from ..resolver import ColorProvider
from .base import StyleBuilder


class LayoutStyles(StyleBuilder[LayoutPattern]):
    pattern_class = LayoutPattern

    def divider(self, divider: LayoutDivider) -> Self:
        return self._set("divider", divider)

    def divider_str(self, divider: str) -> Self:
        return self._set_from_string("divider", divider, DIVIDER_ALIASES)

    def spacing(self, spacing: LayoutSpacing) -> Self:
        return self._set("spacing", spacing)

    def spacing_str(self, spacing: str) -> Self:
        return self._set_from_string("spacing", spacing, SPACING_ALIASES)

    def direction(self, direction: LayoutDirection) -> Self:
        return self._set("direction", direction)

    def direction_str(self, direction: str) -> Self:
        return self._set_from_string("direction", direction, DIRECTION_ALIASES)

    def vertical(self) -> Self:
        return self.direction(LayoutDirection.VERTICAL)

    def horizontal(self) -> Self:
        return self.direction(LayoutDirection.HORIZONTAL)

    def alignment(self, alignment: LayoutAlignment) -> Self:
        return self._set("alignment", alignment)

    def alignment_str(self, alignment: str) -> Self:
        return self._set_from_string("alignment", alignment, ALIGNMENT_ALIASES)


def layout_styles(colors: ColorProvider | None = None) -> LayoutStyles:
    return LayoutStyles(colors)


def card_header_styles(colors: ColorProvider | None = None) -> LayoutStyles:
    return LayoutStyles(colors).divider(LayoutDivider.BOTTOM).spacing(LayoutSpacing.MD)


def card_content_styles(colors: ColorProvider | None = None) -> LayoutStyles:
    return LayoutStyles(colors).spacing(LayoutSpacing.MD).custom("space-y-4")


def card_footer_styles(colors: ColorProvider | None = None) -> LayoutStyles:
    return (
        LayoutStyles(colors)
        .divider(LayoutDivider.TOP)
        .spacing(LayoutSpacing.MD)
        .horizontal()
        .alignment(LayoutAlignment.BETWEEN)
    )


def layout_classes_from_strings(
    colors: ColorProvider | None = None,
    divider: str = "none",
    spacing: str = "md",
    direction: str | None = None,
    alignment: str | None = None,
) -> str:
    """Render layout classes from plain strings; unknown strings are ignored."""
    builder = LayoutStyles(colors).divider_str(divider).spacing_str(spacing)
    if direction is not None:
        builder.direction_str(direction)
    if alignment is not None:
        builder.alignment_str(alignment)
    return builder.classes()
