"""
Typography pattern: text hierarchy, sizing, weight and color.

Hierarchy drives the defaults. Each level carries a preset size, weight,
intrinsic classes, automatic color and element. An explicitly chosen size
or weight replaces the preset value no matter which was set first.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum

from ..tokens import Token
from .base import Pattern, aliases_for


class TypographyHierarchy(StrEnum):
    TITLE = "title"
    HEADING = "heading"
    SUBHEADING = "subheading"
    H4 = "h4"
    BODY = "body"
    BODY_LARGE = "body-large"
    BODY_SMALL = "body-small"
    CAPTION = "caption"
    OVERLINE = "overline"
    CODE = "code"


class TypographySize(StrEnum):
    XS = "xs"
    SM = "sm"
    MD = "md"
    LG = "lg"
    XL = "xl"
    XL2 = "2xl"
    XL3 = "3xl"
    XL4 = "4xl"


class TypographyWeight(StrEnum):
    LIGHT = "light"
    NORMAL = "normal"
    MEDIUM = "medium"
    SEMIBOLD = "semibold"
    BOLD = "bold"
    EXTRABOLD = "extrabold"


class TypographyColor(StrEnum):
    AUTO = "auto"
    PRIMARY = "primary"
    SECONDARY = "secondary"
    ACCENT = "accent"
    MUTED = "muted"
    DISABLED = "disabled"
    WHITE = "white"
    BLACK = "black"
    SUCCESS = "success"
    WARNING = "warning"
    ERROR = "error"
    INFO = "info"


class TypographyAlignment(StrEnum):
    LEFT = "left"
    CENTER = "center"
    RIGHT = "right"
    JUSTIFY = "justify"


class TypographyOverflow(StrEnum):
    NORMAL = "normal"
    TRUNCATE = "truncate"
    CLAMP = "clamp"


class TypographyElement(StrEnum):
    AUTO = "auto"
    H1 = "h1"
    H2 = "h2"
    H3 = "h3"
    H4 = "h4"
    H5 = "h5"
    H6 = "h6"
    P = "p"
    SPAN = "span"
    DIV = "div"


@dataclass(frozen=True)
class HierarchyPreset:
    """Defaults a hierarchy level brings with it."""

    size: TypographySize
    weight: TypographyWeight | None
    classes: tuple[str, ...] = ()
    color: Token = Token.TEXT_PRIMARY
    element: str = "p"


_TIGHT = ("tracking-tight",)

HIERARCHY_PRESETS: dict[TypographyHierarchy, HierarchyPreset] = {
    TypographyHierarchy.TITLE: HierarchyPreset(
        TypographySize.XL4, TypographyWeight.BOLD, _TIGHT, element="h1"
    ),
    TypographyHierarchy.HEADING: HierarchyPreset(
        TypographySize.XL3, TypographyWeight.BOLD, _TIGHT, element="h2"
    ),
    TypographyHierarchy.SUBHEADING: HierarchyPreset(
        TypographySize.XL2, TypographyWeight.BOLD, _TIGHT, element="h3"
    ),
    TypographyHierarchy.H4: HierarchyPreset(
        TypographySize.XL, TypographyWeight.BOLD, _TIGHT, element="h4"
    ),
    TypographyHierarchy.BODY: HierarchyPreset(TypographySize.MD, TypographyWeight.NORMAL),
    TypographyHierarchy.BODY_LARGE: HierarchyPreset(
        TypographySize.LG, TypographyWeight.NORMAL
    ),
    TypographyHierarchy.BODY_SMALL: HierarchyPreset(
        TypographySize.SM, TypographyWeight.NORMAL
    ),
    TypographyHierarchy.CAPTION: HierarchyPreset(
        TypographySize.SM,
        TypographyWeight.MEDIUM,
        color=Token.TEXT_SECONDARY,
        element="span",
    ),
    TypographyHierarchy.OVERLINE: HierarchyPreset(
        TypographySize.XS,
        TypographyWeight.MEDIUM,
        ("uppercase", "tracking-wider"),
        color=Token.TEXT_TERTIARY,
        element="span",
    ),
    # Code keeps the surrounding weight.
    TypographyHierarchy.CODE: HierarchyPreset(
        TypographySize.SM,
        None,
        ("font-mono", "bg-gray-100", "px-1", "py-0.5", "rounded"),
        element="code",
    ),
}

TYPOGRAPHY_BASE = "leading-relaxed"

SIZE_CLASSES: dict[TypographySize, str] = {
    TypographySize.XS: "text-xs",
    TypographySize.SM: "text-sm",
    TypographySize.MD: "text-base",
    TypographySize.LG: "text-lg",
    TypographySize.XL: "text-xl",
    TypographySize.XL2: "text-2xl",
    TypographySize.XL3: "text-3xl",
    TypographySize.XL4: "text-4xl",
}

WEIGHT_CLASSES: dict[TypographyWeight, str] = {
    weight: f"font-{weight.value}" for weight in TypographyWeight
}

COLOR_TOKENS: dict[TypographyColor, Token] = {
    TypographyColor.PRIMARY: Token.PRIMARY,
    TypographyColor.SECONDARY: Token.SECONDARY,
    TypographyColor.ACCENT: Token.ACCENT,
    TypographyColor.MUTED: Token.TEXT_SECONDARY,
    TypographyColor.DISABLED: Token.INTERACTIVE_DISABLED,
    TypographyColor.WHITE: Token.TEXT_INVERSE,
    TypographyColor.BLACK: Token.FOREGROUND,
    TypographyColor.SUCCESS: Token.SUCCESS,
    TypographyColor.WARNING: Token.WARNING,
    TypographyColor.ERROR: Token.ERROR,
    TypographyColor.INFO: Token.INFO,
}

ALIGNMENT_CLASSES: dict[TypographyAlignment, str] = {
    alignment: f"text-{alignment.value}" for alignment in TypographyAlignment
}


# =============================================================================
# String aliases
# =============================================================================

HIERARCHY_ALIASES = aliases_for(
    TypographyHierarchy,
    body_large=TypographyHierarchy.BODY_LARGE,
    body_small=TypographyHierarchy.BODY_SMALL,
    h1=TypographyHierarchy.TITLE,
    h2=TypographyHierarchy.HEADING,
    h3=TypographyHierarchy.SUBHEADING,
)
SIZE_ALIASES = aliases_for(TypographySize, base=TypographySize.MD)
WEIGHT_ALIASES = aliases_for(TypographyWeight, regular=TypographyWeight.NORMAL)
COLOR_ALIASES = aliases_for(TypographyColor, danger=TypographyColor.ERROR)
ALIGNMENT_ALIASES = aliases_for(TypographyAlignment)
OVERFLOW_ALIASES = aliases_for(TypographyOverflow)
ELEMENT_ALIASES = aliases_for(TypographyElement)


def clamp_style(lines: int) -> str:
    """Inline CSS that clamps text to ``lines`` lines."""
    return (
        f"display: -webkit-box; -webkit-line-clamp: {lines}; "
        "-webkit-box-orient: vertical; overflow: hidden;"
    )


@dataclass(frozen=True)
class TypographyPattern(Pattern):
    hierarchy: TypographyHierarchy = TypographyHierarchy.BODY
    size: TypographySize | None = None
    weight: TypographyWeight | None = None
    color: TypographyColor = TypographyColor.AUTO
    alignment: TypographyAlignment | None = None
    overflow: TypographyOverflow = TypographyOverflow.NORMAL
    clamp_lines: int | None = None
    element: TypographyElement = TypographyElement.AUTO

    AXES = ("base", "hierarchy", "size", "weight", "color", "alignment", "overflow")
    DEPENDENTS = {
        "hierarchy": ("hierarchy", "size", "weight", "color"),
        "clamp_lines": ("overflow",),
        "element": (),
    }

    @property
    def preset(self) -> HierarchyPreset:
        return HIERARCHY_PRESETS[self.hierarchy]

    @property
    def effective_size(self) -> TypographySize:
        return self.size if self.size is not None else self.preset.size

    @property
    def effective_weight(self) -> TypographyWeight | None:
        return self.weight if self.weight is not None else self.preset.weight

    @property
    def color_token(self) -> Token:
        if self.color is TypographyColor.AUTO:
            return self.preset.color
        return COLOR_TOKENS[self.color]

    def element_tag(self) -> str:
        """HTML tag for this text: explicit element, else the hierarchy's."""
        if self.element is not TypographyElement.AUTO:
            return self.element.value
        return self.preset.element

    def clamp_style(self) -> str | None:
        if self.overflow is TypographyOverflow.CLAMP and self.clamp_lines:
            return clamp_style(self.clamp_lines)
        return None

    def _base_fragments(self) -> list[str]:
        return [TYPOGRAPHY_BASE]

    def _hierarchy_fragments(self) -> list[str]:
        return list(self.preset.classes)

    def _size_fragments(self) -> list[str]:
        return [SIZE_CLASSES[self.effective_size]]

    def _weight_fragments(self) -> list[str]:
        weight = self.effective_weight
        return [WEIGHT_CLASSES[weight]] if weight is not None else []

    def _color_fragments(self) -> list[str]:
        return [self.colors.text_class(self.color_token)]

    def _alignment_fragments(self) -> list[str]:
        return [ALIGNMENT_CLASSES[self.alignment]] if self.alignment is not None else []

    def _overflow_fragments(self) -> list[str]:
        if self.overflow is TypographyOverflow.TRUNCATE:
            return ["truncate"]
        return []
