"""
Product pattern: commerce cards for listings, tiles and showcases.

The card itself is the main output. Image, info, actions and badge
wrappers are rendered separately because they sit on child elements, and
their sizing follows the display axis.

Actions and badges accumulate rather than override: adding one keeps the
ones already present, in insertion order, without duplicates.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum

from ..assembler import assemble
from ..tokens import Token
from .base import Pattern, aliases_for


class ProductDisplay(StrEnum):
    LIST_ITEM = "list-item"
    FEATURED = "featured"
    TILE = "tile"
    SHOWCASE = "showcase"
    PREVIEW = "preview"


class ProductInteraction(StrEnum):
    DEFAULT = "default"
    FOCUSED = "focused"
    SELECTED = "selected"
    LOADING = "loading"
    DISABLED = "disabled"


class ProductAvailability(StrEnum):
    AVAILABLE = "available"
    OUT_OF_STOCK = "out-of-stock"
    BACKORDER = "backorder"
    DISCONTINUED = "discontinued"
    LIMITED = "limited"


class ProductProminence(StrEnum):
    SUBTLE = "subtle"
    STANDARD = "standard"
    PROMINENT = "prominent"
    HERO = "hero"


class ProductImage(StrEnum):
    STANDARD = "standard"
    SQUARE = "square"
    WIDE = "wide"
    PORTRAIT = "portrait"
    CIRCLE = "circle"


class ProductInfo(StrEnum):
    MINIMAL = "minimal"
    BASIC = "basic"
    EXTENDED = "extended"
    DETAILED = "detailed"


class ProductPrice(StrEnum):
    STANDARD = "standard"
    WITH_COMPARE = "with-compare"
    RANGE = "range"
    WITH_DISCOUNT = "with-discount"
    ON_SALE = "on-sale"


class ProductVariant(StrEnum):
    DROPDOWN = "dropdown"
    BUTTONS = "buttons"
    SWATCHES = "swatches"
    LIST = "list"
    RADIO = "radio"


class ProductAction(StrEnum):
    ADD_TO_CART = "add-to-cart"
    QUICK_VIEW = "quick-view"
    COMPARE = "compare"
    WISHLIST = "wishlist"
    SHARE = "share"
    VIEW_DETAILS = "view-details"


class ProductBadge(StrEnum):
    SALE = "sale"
    NEW = "new"
    FEATURED = "featured"
    BEST_SELLER = "best-seller"
    LIMITED = "limited"
    OUT_OF_STOCK = "out-of-stock"


CARD_BASE = "product-card"
IMAGE_BASE = "product-image"
INFO_BASE = "product-info"
ACTIONS_BASE = "product-actions flex items-center"
BADGES_BASE = "product-badges absolute top-2 right-2 flex flex-col gap-1"

# Modifier suffixes; states with no entry add nothing.
DISPLAY_MODIFIERS: dict[ProductDisplay, str] = {
    ProductDisplay.LIST_ITEM: "list",
    ProductDisplay.FEATURED: "featured",
    ProductDisplay.TILE: "tile",
    ProductDisplay.SHOWCASE: "showcase",
    ProductDisplay.PREVIEW: "preview",
}

INTERACTION_MODIFIERS: dict[ProductInteraction, str] = {
    ProductInteraction.FOCUSED: "focused",
    ProductInteraction.SELECTED: "selected",
    ProductInteraction.LOADING: "loading",
    ProductInteraction.DISABLED: "disabled",
}

AVAILABILITY_MODIFIERS: dict[ProductAvailability, str] = {
    ProductAvailability.OUT_OF_STOCK: "out-of-stock",
    ProductAvailability.BACKORDER: "backorder",
    ProductAvailability.DISCONTINUED: "discontinued",
    ProductAvailability.LIMITED: "limited",
}

PROMINENCE_MODIFIERS: dict[ProductProminence, str] = {
    ProductProminence.SUBTLE: "subtle",
    ProductProminence.PROMINENT: "prominent",
    ProductProminence.HERO: "hero",
}

PROMINENCE_BACKGROUNDS: dict[ProductProminence, Token] = {
    ProductProminence.HERO: Token.PRIMARY,
    ProductProminence.PROMINENT: Token.SECONDARY,
}

IMAGE_ASPECT_CLASSES: dict[ProductImage, str] = {
    ProductImage.STANDARD: "aspect-[4/3]",
    ProductImage.SQUARE: "aspect-square",
    ProductImage.WIDE: "aspect-[16/9]",
    ProductImage.PORTRAIT: "aspect-[3/4]",
    ProductImage.CIRCLE: "aspect-square rounded-full",
}

IMAGE_SIZE_CLASSES: dict[ProductDisplay, str] = {
    ProductDisplay.LIST_ITEM: "h-48 w-48",
    ProductDisplay.FEATURED: "h-64 w-64",
    ProductDisplay.TILE: "h-40 w-40",
    ProductDisplay.SHOWCASE: "h-80 w-80",
    ProductDisplay.PREVIEW: "h-32 w-32",
}

PADDING_CLASSES: dict[ProductDisplay, str] = {
    ProductDisplay.LIST_ITEM: "p-4",
    ProductDisplay.FEATURED: "p-6",
    ProductDisplay.TILE: "p-3",
    ProductDisplay.SHOWCASE: "p-8",
    ProductDisplay.PREVIEW: "p-2",
}

STACK_CLASSES: dict[ProductDisplay, str] = {
    ProductDisplay.LIST_ITEM: "space-y-3",
    ProductDisplay.FEATURED: "space-y-4",
    ProductDisplay.TILE: "space-y-2",
    ProductDisplay.SHOWCASE: "space-y-6",
    ProductDisplay.PREVIEW: "space-y-1",
}

ACTION_GAP_CLASSES: dict[ProductDisplay, str] = {
    ProductDisplay.TILE: "gap-2",
    ProductDisplay.PREVIEW: "gap-1",
}
DEFAULT_ACTION_GAP = "gap-3"

DISPLAY_ALIASES = aliases_for(
    ProductDisplay,
    list=ProductDisplay.LIST_ITEM,
    list_item=ProductDisplay.LIST_ITEM,
)
INTERACTION_ALIASES = aliases_for(
    ProductInteraction,
    focus=ProductInteraction.FOCUSED,
    active=ProductInteraction.SELECTED,
)
AVAILABILITY_ALIASES = aliases_for(
    ProductAvailability,
    out_of_stock=ProductAvailability.OUT_OF_STOCK,
    sold_out=ProductAvailability.OUT_OF_STOCK,
    in_stock=ProductAvailability.AVAILABLE,
)
PROMINENCE_ALIASES = aliases_for(ProductProminence)
IMAGE_ALIASES = aliases_for(ProductImage, round=ProductImage.CIRCLE)
INFO_ALIASES = aliases_for(ProductInfo)
PRICE_ALIASES = aliases_for(
    ProductPrice,
    with_compare=ProductPrice.WITH_COMPARE,
    compare=ProductPrice.WITH_COMPARE,
    with_discount=ProductPrice.WITH_DISCOUNT,
    discount=ProductPrice.WITH_DISCOUNT,
    on_sale=ProductPrice.ON_SALE,
    sale=ProductPrice.ON_SALE,
)
VARIANT_ALIASES = aliases_for(
    ProductVariant,
    select=ProductVariant.DROPDOWN,
    swatch=ProductVariant.SWATCHES,
)
ACTION_ALIASES = aliases_for(
    ProductAction,
    add_to_cart=ProductAction.ADD_TO_CART,
    cart=ProductAction.ADD_TO_CART,
    quick_view=ProductAction.QUICK_VIEW,
    quickview=ProductAction.QUICK_VIEW,
    view_details=ProductAction.VIEW_DETAILS,
    details=ProductAction.VIEW_DETAILS,
)
BADGE_ALIASES = aliases_for(
    ProductBadge,
    best_seller=ProductBadge.BEST_SELLER,
    bestseller=ProductBadge.BEST_SELLER,
    out_of_stock=ProductBadge.OUT_OF_STOCK,
)


@dataclass(frozen=True)
class ProductPattern(Pattern):
    display: ProductDisplay = ProductDisplay.LIST_ITEM
    interaction: ProductInteraction = ProductInteraction.DEFAULT
    availability: ProductAvailability = ProductAvailability.AVAILABLE
    prominence: ProductProminence = ProductProminence.STANDARD
    image: ProductImage = ProductImage.STANDARD
    info: ProductInfo = ProductInfo.BASIC
    price: ProductPrice = ProductPrice.STANDARD
    variant: ProductVariant | None = None
    actions: tuple[ProductAction, ...] = (ProductAction.ADD_TO_CART,)
    badges: tuple[ProductBadge, ...] = ()
    custom_badges: tuple[str, ...] = ()

    AXES = ("base", "display", "interaction", "availability", "prominence", "color")
    DEPENDENTS = {
        "availability": ("availability", "color"),
        "prominence": ("prominence", "color"),
        "image": (),
        "info": (),
        "price": (),
        "variant": (),
        "actions": (),
        "badges": (),
        "custom_badges": (),
    }

    @property
    def is_available(self) -> bool:
        return self.availability is ProductAvailability.AVAILABLE

    @property
    def badge_labels(self) -> tuple[str, ...]:
        """Known badges by value, then custom badge text."""
        return tuple(badge.value for badge in self.badges) + self.custom_badges

    def container_classes(self) -> str:
        """Card classes plus display-dependent padding and stacking."""
        layout = [PADDING_CLASSES[self.display], STACK_CLASSES[self.display]]
        return assemble([*self.all_fragments().values(), layout])

    def image_classes(self) -> str:
        return assemble(
            [[IMAGE_BASE, IMAGE_ASPECT_CLASSES[self.image], IMAGE_SIZE_CLASSES[self.display]]]
        )

    def info_classes(self) -> str:
        return assemble([[INFO_BASE, STACK_CLASSES[self.display]]])

    def actions_classes(self) -> str:
        gap = ACTION_GAP_CLASSES.get(self.display, DEFAULT_ACTION_GAP)
        return assemble([[ACTIONS_BASE, gap]])

    def badges_classes(self) -> str:
        return assemble([[BADGES_BASE]])

    def aria_attributes(self) -> dict[str, str]:
        attrs: dict[str, str] = {}
        if self.interaction is ProductInteraction.SELECTED:
            attrs["aria-selected"] = "true"
        if self.interaction is ProductInteraction.LOADING:
            attrs["aria-busy"] = "true"
        if self.interaction is ProductInteraction.DISABLED or not self.is_available:
            attrs["aria-disabled"] = "true"
        return attrs

    def _base_fragments(self) -> list[str]:
        return [CARD_BASE]

    def _display_fragments(self) -> list[str]:
        return [f"{CARD_BASE}--{DISPLAY_MODIFIERS[self.display]}"]

    def _interaction_fragments(self) -> list[str]:
        modifier = INTERACTION_MODIFIERS.get(self.interaction)
        return [f"{CARD_BASE}--{modifier}"] if modifier else []

    def _availability_fragments(self) -> list[str]:
        modifier = AVAILABILITY_MODIFIERS.get(self.availability)
        return [f"{CARD_BASE}--{modifier}"] if modifier else []

    def _prominence_fragments(self) -> list[str]:
        modifier = PROMINENCE_MODIFIERS.get(self.prominence)
        return [f"{CARD_BASE}--{modifier}"] if modifier else []

    def _color_fragments(self) -> list[str]:
        # Unavailable products mute their text instead of taking a background.
        if not self.is_available:
            return [self.colors.text_class(Token.INTERACTIVE_DISABLED)]
        background = PROMINENCE_BACKGROUNDS.get(self.prominence, Token.SURFACE)
        return [self.colors.bg_class(background)]
