"""
Text styles builder.

Hierarchy sets the defaults; size, weight and color refine them:

    TextStyles(resolver).title().primary().classes()
    TextStyles(resolver).caption().element()  # "span"
"""

from __future__ import annotations

import logging
from typing import Self

from ..patterns.base import lookup
from ..patterns.typography import (
    ALIGNMENT_ALIASES,
    COLOR_ALIASES,
    ELEMENT_ALIASES,
    HIERARCHY_ALIASES,
    HIERARCHY_PRESETS,
    OVERFLOW_ALIASES,
    SIZE_ALIASES,
    WEIGHT_ALIASES,
    TypographyAlignment,
    TypographyColor,
    TypographyElement,
    TypographyHierarchy,
    TypographyOverflow,
    TypographyPattern,
    TypographySize,
    TypographyWeight,
)
from ..resolver import ColorProvider
from .base import StyleBuilder

logger = logging.getLogger(__name__)


class TextStyles(StyleBuilder[TypographyPattern]):
    """Chainable builder for text: hierarchy first, then refinements."""

    pattern_class = TypographyPattern

    # Hierarchy

    def hierarchy(self, hierarchy: TypographyHierarchy) -> Self:
        return self._set("hierarchy", hierarchy)

    def hierarchy_str(self, hierarchy: str) -> Self:
        return self._set_from_string("hierarchy", hierarchy, HIERARCHY_ALIASES)

    def title(self) -> Self:
        return self.hierarchy(TypographyHierarchy.TITLE)

    def heading(self) -> Self:
        return self.hierarchy(TypographyHierarchy.HEADING)

    def subheading(self) -> Self:
        return self.hierarchy(TypographyHierarchy.SUBHEADING)

    def h4(self) -> Self:
        return self.hierarchy(TypographyHierarchy.H4)

    def body(self) -> Self:
        return self.hierarchy(TypographyHierarchy.BODY)

    def body_large(self) -> Self:
        return self.hierarchy(TypographyHierarchy.BODY_LARGE)

    def body_small(self) -> Self:
        return self.hierarchy(TypographyHierarchy.BODY_SMALL)

    def caption(self) -> Self:
        return self.hierarchy(TypographyHierarchy.CAPTION)

    def overline(self) -> Self:
        return self.hierarchy(TypographyHierarchy.OVERLINE)

    def code(self) -> Self:
        return self.hierarchy(TypographyHierarchy.CODE)

    # Size and weight

    def size(self, size: TypographySize) -> Self:
        return self._set("size", size)

    def size_str(self, size: str) -> Self:
        return self._set_from_string("size", size, SIZE_ALIASES)

    def weight(self, weight: TypographyWeight) -> Self:
        return self._set("weight", weight)

    def weight_str(self, weight: str) -> Self:
        return self._set_from_string("weight", weight, WEIGHT_ALIASES)

    def bold(self) -> Self:
        return self.weight(TypographyWeight.BOLD)

    def semibold(self) -> Self:
        return self.weight(TypographyWeight.SEMIBOLD)

    def medium(self) -> Self:
        return self.weight(TypographyWeight.MEDIUM)

    def light(self) -> Self:
        return self.weight(TypographyWeight.LIGHT)

    # Color

    def color(self, color: TypographyColor) -> Self:
        return self._set("color", color)

    def color_str(self, color: str) -> Self:
        return self._set_from_string("color", color, COLOR_ALIASES)

    def primary(self) -> Self:
        return self.color(TypographyColor.PRIMARY)

    def muted(self) -> Self:
        return self.color(TypographyColor.MUTED)

    # Alignment

    def alignment(self, alignment: TypographyAlignment) -> Self:
        return self._set("alignment", alignment)

    def alignment_str(self, alignment: str) -> Self:
        return self._set_from_string("alignment", alignment, ALIGNMENT_ALIASES)

    def center(self) -> Self:
        return self.alignment(TypographyAlignment.CENTER)

    # Overflow

    def overflow(self, overflow: TypographyOverflow) -> Self:
        if overflow is TypographyOverflow.CLAMP and self._pattern.clamp_lines is None:
            logger.debug("Clamp overflow needs a line count; use clamp()")
            return self
        return self._update(overflow=overflow)

    def overflow_str(self, overflow: str) -> Self:
        choice = lookup(OVERFLOW_ALIASES, overflow)
        if choice is None:
            logger.debug("TextStyles: ignoring unknown overflow value %r", overflow)
            return self
        return self.overflow(choice)

    def truncate(self) -> Self:
        return self.overflow(TypographyOverflow.TRUNCATE)

    def clamp(self, lines: int) -> Self:
        """Clamp to ``lines`` lines. Emits no class; see ``clamp_style()``."""
        if isinstance(lines, bool) or not isinstance(lines, int) or lines < 1:
            logger.debug("Ignoring invalid clamp line count %r", lines)
            return self
        return self._update(overflow=TypographyOverflow.CLAMP, clamp_lines=lines)

    def clamp_style(self) -> str | None:
        """Inline CSS for clamped text, or None when not clamped."""
        return self._pattern.clamp_style()

    # Element

    def as_element(self, element: TypographyElement) -> Self:
        return self._set("element", element)

    def as_element_str(self, element: str) -> Self:
        return self._set_from_string("element", element, ELEMENT_ALIASES)

    def element(self) -> str:
        """HTML tag to render this text with."""
        return self._pattern.element_tag()


# =============================================================================
# Convenience functions
# =============================================================================


def text_styles(colors: ColorProvider | None = None) -> TextStyles:
    return TextStyles(colors)


def title_styles(colors: ColorProvider | None = None) -> TextStyles:
    return TextStyles(colors).title()


def heading_styles(colors: ColorProvider | None = None) -> TextStyles:
    return TextStyles(colors).heading()


def body_styles(colors: ColorProvider | None = None) -> TextStyles:
    return TextStyles(colors).body()


def caption_styles(colors: ColorProvider | None = None) -> TextStyles:
    return TextStyles(colors).caption()


def text_classes_from_strings(
    colors: ColorProvider | None = None,
    hierarchy: str = "body",
    size: str | None = None,
    weight: str | None = None,
    color: str | None = None,
    alignment: str | None = None,
) -> str:
    """
    Render text classes from plain strings in one call.

    Unknown strings are ignored, leaving that axis at its default.
    """
    builder = TextStyles(colors).hierarchy_str(hierarchy)
    if size is not None:
        builder.size_str(size)
    if weight is not None:
        builder.weight_str(weight)
    if color is not None:
        builder.color_str(color)
    if alignment is not None:
        builder.alignment_str(alignment)
    return builder.classes()


def text_element_from_hierarchy(hierarchy: str) -> str:
    """HTML tag for a hierarchy name; unknown names give "p"."""
    choice = lookup(HIERARCHY_ALIASES, hierarchy) or TypographyHierarchy.BODY
    return HIERARCHY_PRESETS[choice].element

