"""
Semantic patterns.

A pattern is an immutable set of axis values for one kind of component,
plus the tables that turn those values into fragment groups. Builders in
``stylekit.builders`` wrap patterns with a chainable, mutable API.
"""

from .base import SIZE_ALIASES, Pattern, Size, aliases_for, lookup
from .button import ButtonPattern, ButtonState, ButtonVariant
from .card import (
    CardElevation,
    CardInteraction,
    CardPattern,
    CardSpacing,
    CardSurface,
)
from .interactive import (
    InteractionIntensity,
    InteractiveKind,
    InteractivePattern,
    InteractiveState,
)
from .layout import (
    LayoutAlignment,
    LayoutDirection,
    LayoutDivider,
    LayoutPattern,
    LayoutSpacing,
)
from .product import (
    ProductAction,
    ProductAvailability,
    ProductBadge,
    ProductDisplay,
    ProductImage,
    ProductInfo,
    ProductInteraction,
    ProductPattern,
    ProductPrice,
    ProductProminence,
    ProductVariant,
)
from .selection import (
    SelectionBehavior,
    SelectionDisplay,
    SelectionInteraction,
    SelectionLayout,
    SelectionPattern,
    SelectionState,
)
from .state import (
    LoadingVariant,
    StateAction,
    StateAlignment,
    StateIntent,
    StatePattern,
    StateProminence,
)
from .typography import (
    HIERARCHY_PRESETS,
    HierarchyPreset,
    TypographyAlignment,
    TypographyColor,
    TypographyElement,
    TypographyHierarchy,
    TypographyOverflow,
    TypographyPattern,
    TypographySize,
    TypographyWeight,
)

__all__ = [
    # Base
    "Pattern",
    "Size",
    "SIZE_ALIASES",
    "aliases_for",
    "lookup",
    # Typography
    "TypographyPattern",
    "TypographyHierarchy",
    "TypographySize",
    "TypographyWeight",
    "TypographyColor",
    "TypographyAlignment",
    "TypographyOverflow",
    "TypographyElement",
    "HierarchyPreset",
    "HIERARCHY_PRESETS",
    # Button
    "ButtonPattern",
    "ButtonVariant",
    "ButtonState",
    # Card
    "CardPattern",
    "CardElevation",
    "CardSurface",
    "CardSpacing",
    "CardInteraction",
    # Layout
    "LayoutPattern",
    "LayoutDivider",
    "LayoutSpacing",
    "LayoutDirection",
    "LayoutAlignment",
    # State
    "StatePattern",
    "StateIntent",
    "StateProminence",
    "StateAlignment",
    "StateAction",
    "LoadingVariant",
    # Selection
    "SelectionPattern",
    "SelectionBehavior",
    "SelectionState",
    "SelectionDisplay",
    "SelectionLayout",
    "SelectionInteraction",
    # Product
    "ProductPattern",
    "ProductDisplay",
    "ProductInteraction",
    "ProductAvailability",
    "ProductProminence",
    "ProductImage",
    "ProductInfo",
    "ProductPrice",
    "ProductVariant",
    "ProductAction",
    "ProductBadge",
    # Interactive
    "InteractivePattern",
    "InteractiveKind",
    "InteractiveState",
    "InteractionIntensity",
]
