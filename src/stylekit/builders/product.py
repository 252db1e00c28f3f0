"""
Product card styles builder.

``classes()`` renders the card element, including custom classes. The
child wrappers (image, info, actions, badges) and the padded container
come from their own methods and never carry custom classes.

Presets:

    featured_product_styles   featured display, prominent colors
    product_tile_styles       compact tile, basic info
    product_showcase_styles   large showcase, detailed info
    product_preview_styles    quick-view preview, minimal info
"""

from __future__ import annotations

from typing import Self

from ..patterns.product import (
    ACTION_ALIASES,
    AVAILABILITY_ALIASES,
    BADGE_ALIASES,
    DISPLAY_ALIASES,
    IMAGE_ALIASES,
    INFO_ALIASES,
    INTERACTION_ALIASES,
    PRICE_ALIASES,
    PROMINENCE_ALIASES,
    VARIANT_ALIASES,
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
from ..resolver import ColorProvider
from .base import StyleBuilder


class ProductStyles(StyleBuilder[ProductPattern]):
    pattern_class = ProductPattern

    # Display

    def display(self, display: ProductDisplay) -> Self:
        return self._set("display", display)

    def display_str(self, display: str) -> Self:
        return self._set_from_string("display", display, DISPLAY_ALIASES)

    def list_item(self) -> Self:
        return self.display(ProductDisplay.LIST_ITEM)

    def featured(self) -> Self:
        return self.display(ProductDisplay.FEATURED)

    def tile(self) -> Self:
        return self.display(ProductDisplay.TILE)

    def showcase(self) -> Self:
        return self.display(ProductDisplay.SHOWCASE)

    def preview(self) -> Self:
        return self.display(ProductDisplay.PREVIEW)

    # Interaction

    def interaction(self, interaction: ProductInteraction) -> Self:
        return self._set("interaction", interaction)

    def interaction_str(self, interaction: str) -> Self:
        return self._set_from_string("interaction", interaction, INTERACTION_ALIASES)

    def focused(self) -> Self:
        return self.interaction(ProductInteraction.FOCUSED)

    def selected(self) -> Self:
        return self.interaction(ProductInteraction.SELECTED)

    def loading(self) -> Self:
        return self.interaction(ProductInteraction.LOADING)

    def disabled(self) -> Self:
        return self.interaction(ProductInteraction.DISABLED)

    # Availability

    def availability(self, availability: ProductAvailability) -> Self:
        return self._set("availability", availability)

    def availability_str(self, availability: str) -> Self:
        return self._set_from_string("availability", availability, AVAILABILITY_ALIASES)

    def available(self) -> Self:
        return self.availability(ProductAvailability.AVAILABLE)

    def out_of_stock(self) -> Self:
        return self.availability(ProductAvailability.OUT_OF_STOCK)

    def backorder(self) -> Self:
        return self.availability(ProductAvailability.BACKORDER)

    def discontinued(self) -> Self:
        return self.availability(ProductAvailability.DISCONTINUED)

    def limited(self) -> Self:
        return self.availability(ProductAvailability.LIMITED)

    # Prominence

    def prominence(self, prominence: ProductProminence) -> Self:
        return self._set("prominence", prominence)

    def prominence_str(self, prominence: str) -> Self:
        return self._set_from_string("prominence", prominence, PROMINENCE_ALIASES)

    def subtle(self) -> Self:
        return self.prominence(ProductProminence.SUBTLE)

    def prominent(self) -> Self:
        return self.prominence(ProductProminence.PROMINENT)

    def hero(self) -> Self:
        return self.prominence(ProductProminence.HERO)

    # Image, info, price and variants

    def image(self, image: ProductImage) -> Self:
        return self._set("image", image)

    def image_str(self, image: str) -> Self:
        return self._set_from_string("image", image, IMAGE_ALIASES)

    def info(self, info: ProductInfo) -> Self:
        return self._set("info", info)

    def info_str(self, info: str) -> Self:
        return self._set_from_string("info", info, INFO_ALIASES)

    def price(self, price: ProductPrice) -> Self:
        return self._set("price", price)

    def price_str(self, price: str) -> Self:
        return self._set_from_string("price", price, PRICE_ALIASES)

    def variant(self, variant: ProductVariant | None) -> Self:
        return self._set("variant", variant)

    def variant_str(self, variant: str) -> Self:
        return self._set_from_string("variant", variant, VARIANT_ALIASES)

    # Actions and badges

    def action(self, action: ProductAction) -> Self:
        """Add an action; one already present keeps its position."""
        if action in self._pattern.actions:
            return self
        return self._set("actions", (*self._pattern.actions, action))

    def action_str(self, action: str) -> Self:
        choice = self._choose("action", action, ACTION_ALIASES)
        return self if choice is None else self.action(choice)

    def only_actions(self, *actions: ProductAction) -> Self:
        """Replace the action list, dropping duplicates."""
        return self._set("actions", tuple(dict.fromkeys(actions)))

    def badge(self, badge: ProductBadge) -> Self:
        if badge in self._pattern.badges:
            return self
        return self._set("badges", (*self._pattern.badges, badge))

    def badge_str(self, badge: str) -> Self:
        choice = self._choose("badge", badge, BADGE_ALIASES)
        return self if choice is None else self.badge(choice)

    def custom_badge(self, text: str) -> Self:
        """Add a free-text badge. Blank text is ignored."""
        text = text.strip()
        if not text:
            return self
        return self._set("custom_badges", (*self._pattern.custom_badges, text))

    def sale_badge(self) -> Self:
        return self.badge(ProductBadge.SALE)

    def new_badge(self) -> Self:
        return self.badge(ProductBadge.NEW)

    # Template hints

    def actions(self) -> tuple[ProductAction, ...]:
        return self._pattern.actions

    def badges(self) -> tuple[str, ...]:
        return self._pattern.badge_labels

    def is_available(self) -> bool:
        return self._pattern.is_available

    # Other outputs

    def container_classes(self) -> str:
        return self._pattern.container_classes()

    def image_classes(self) -> str:
        return self._pattern.image_classes()

    def info_classes(self) -> str:
        return self._pattern.info_classes()

    def actions_classes(self) -> str:
        return self._pattern.actions_classes()

    def badges_classes(self) -> str:
        return self._pattern.badges_classes()

    def aria_attributes(self) -> dict[str, str]:
        return self._pattern.aria_attributes()


def product_styles(colors: ColorProvider | None = None) -> ProductStyles:
    return ProductStyles(colors)


def featured_product_styles(colors: ColorProvider | None = None) -> ProductStyles:
    return ProductStyles(colors).featured().prominent()


def product_tile_styles(colors: ColorProvider | None = None) -> ProductStyles:
    return ProductStyles(colors).tile().info(ProductInfo.BASIC)


def product_showcase_styles(colors: ColorProvider | None = None) -> ProductStyles:
    return ProductStyles(colors).showcase().info(ProductInfo.DETAILED)


def product_preview_styles(colors: ColorProvider | None = None) -> ProductStyles:
    return ProductStyles(colors).preview().info(ProductInfo.MINIMAL)


def product_classes_from_strings(
    colors: ColorProvider | None = None,
    display: str = "list-item",
    availability: str = "available",
    prominence: str = "standard",
    image: str = "standard",
    interaction: str = "default",
) -> dict[str, str]:
    """
    Render every product output from plain strings.

    Returns:
        Mapping of output name (container, image, info, actions, badges)
        to class string.
    """
    builder = (
        ProductStyles(colors)
        .display_str(display)
        .availability_str(availability)
        .prominence_str(prominence)
        .image_str(image)
        .interaction_str(interaction)
    )
    return {
        "container": builder.container_classes(),
        "image": builder.image_classes(),
        "info": builder.info_classes(),
        "actions": builder.actions_classes(),
        "badges": builder.badges_classes(),
    }
