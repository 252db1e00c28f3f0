"""
Chainable style builders, one per semantic pattern.

Each builder takes an optional ColorProvider; without one it uses the
default theme from ``stylekit.config``.
"""

from .base import StyleBuilder
from .button import (
    ButtonStyles,
    button_classes_from_strings,
    button_styles,
    danger_button,
    ghost_button,
    primary_button,
    secondary_button,
)
from .card import (
    CardStyles,
    card_classes_from_strings,
    card_styles,
    content_card,
    glass_card,
    hero_card,
    interactive_card,
    minimal_card,
)
from .interactive import (
    InteractiveStyles,
    interactive_button,
    interactive_element,
    interactive_input,
)
from .layout import (
    LayoutStyles,
    card_content_styles,
    card_footer_styles,
    card_header_styles,
    layout_classes_from_strings,
    layout_styles,
)
from .product import (
    ProductStyles,
    featured_product_styles,
    product_classes_from_strings,
    product_preview_styles,
    product_showcase_styles,
    product_styles,
    product_tile_styles,
)
from .selection import (
    SelectionStyles,
    chip_selection_styles,
    filter_selection_styles,
    selection_classes_from_strings,
    selection_styles,
    tab_selection_styles,
)
from .state import (
    StateStyles,
    empty_state_styles,
    error_state_styles,
    loading_state_styles,
    state_classes_from_strings,
    state_styles,
    success_state_styles,
)
from .text import (
    TextStyles,
    body_styles,
    caption_styles,
    heading_styles,
    text_classes_from_strings,
    text_element_from_hierarchy,
    text_styles,
    title_styles,
)

# Builder per kind name, used by the CLI.
BUILDERS: dict[str, type[StyleBuilder]] = {
    "text": TextStyles,
    "button": ButtonStyles,
    "card": CardStyles,
    "layout": LayoutStyles,
    "state": StateStyles,
    "selection": SelectionStyles,
    "product": ProductStyles,
    "interactive": InteractiveStyles,
}

__all__ = [
    "StyleBuilder",
    "BUILDERS",
    # Text
    "TextStyles",
    "text_styles",
    "title_styles",
    "heading_styles",
    "body_styles",
    "caption_styles",
    "text_classes_from_strings",
    "text_element_from_hierarchy",
    # Button
    "ButtonStyles",
    "button_styles",
    "primary_button",
    "secondary_button",
    "danger_button",
    "ghost_button",
    "button_classes_from_strings",
    # Card
    "CardStyles",
    "card_styles",
    "content_card",
    "interactive_card",
    "hero_card",
    "glass_card",
    "minimal_card",
    "card_classes_from_strings",
    # Layout
    "LayoutStyles",
    "layout_styles",
    "card_header_styles",
    "card_content_styles",
    "card_footer_styles",
    "layout_classes_from_strings",
    # State
    "StateStyles",
    "state_styles",
    "loading_state_styles",
    "empty_state_styles",
    "error_state_styles",
    "success_state_styles",
    "state_classes_from_strings",
    # Selection
    "SelectionStyles",
    "selection_styles",
    "filter_selection_styles",
    "chip_selection_styles",
    "tab_selection_styles",
    "selection_classes_from_strings",
    # Product
    "ProductStyles",
    "product_styles",
    "featured_product_styles",
    "product_tile_styles",
    "product_showcase_styles",
    "product_preview_styles",
    "product_classes_from_strings",
    # Interactive
    "InteractiveStyles",
    "interactive_element",
    "interactive_input",
    "interactive_button",
]
