"""
Unit tests for ProductStyles.
"""

import pytest

from stylekit.builders.product import (
    ProductStyles,
    featured_product_styles,
    product_classes_from_strings,
    product_preview_styles,
    product_showcase_styles,
    product_tile_styles,
)
from stylekit.patterns import (
    ProductAction,
    ProductAvailability,
    ProductBadge,
    ProductDisplay,
    ProductImage,
    ProductInfo,
    ProductPrice,
    ProductVariant,
)


def classes_of(text: str) -> set[str]:
    return set(text.split())


class TestCardClasses:
    def test_defaults(self, resolver):
        assert ProductStyles(resolver).classes() == "bg-tk-surface product-card product-card--list"

    @pytest.mark.parametrize(
        "display, modifier",
        [
            (ProductDisplay.FEATURED, "product-card--featured"),
            (ProductDisplay.TILE, "product-card--tile"),
            (ProductDisplay.SHOWCASE, "product-card--showcase"),
            (ProductDisplay.PREVIEW, "product-card--preview"),
        ],
    )
    def test_display_modifier(self, resolver, display, modifier):
        classes = classes_of(ProductStyles(resolver).display(display).classes())
        assert modifier in classes
        assert "product-card--list" not in classes

    @pytest.mark.parametrize("method", ["focused", "selected", "loading", "disabled"])
    def test_interaction_modifier(self, resolver, method):
        styles = getattr(ProductStyles(resolver), method)()
        assert f"product-card--{method}" in classes_of(styles.classes())

    def test_hero_takes_primary_background(self, resolver):
        classes = classes_of(ProductStyles(resolver).hero().classes())
        assert {"product-card--hero", "bg-tk-primary"} <= classes
        assert "bg-tk-surface" not in classes

    def test_prominent_takes_secondary_background(self, resolver):
        assert "bg-tk-secondary" in classes_of(ProductStyles(resolver).prominent().classes())

    def test_subtle_keeps_surface(self, resolver):
        classes = classes_of(ProductStyles(resolver).subtle().classes())
        assert {"product-card--subtle", "bg-tk-surface"} <= classes

    @pytest.mark.parametrize(
        "availability",
        [
            ProductAvailability.OUT_OF_STOCK,
            ProductAvailability.BACKORDER,
            ProductAvailability.DISCONTINUED,
            ProductAvailability.LIMITED,
        ],
    )
    def test_unavailable_mutes_text(self, resolver, availability):
        classes = classes_of(ProductStyles(resolver).hero().availability(availability).classes())
        assert f"product-card--{availability.value}" in classes
        assert "text-tk-interactive-disabled" in classes
        assert "bg-tk-primary" not in classes

    def test_restocking_restores_background(self, resolver):
        styles = ProductStyles(resolver).hero().out_of_stock().available()
        assert styles.classes() == ProductStyles(resolver).hero().classes()

    def test_custom_classes_go_on_card_only(self, resolver):
        styles = ProductStyles(resolver).custom("shop-card")
        assert "shop-card" in classes_of(styles.classes())
        assert "shop-card" not in classes_of(styles.container_classes())


class TestChildOutputs:
    @pytest.mark.parametrize(
        "display, padding, stack",
        [
            (ProductDisplay.LIST_ITEM, "p-4", "space-y-3"),
            (ProductDisplay.FEATURED, "p-6", "space-y-4"),
            (ProductDisplay.TILE, "p-3", "space-y-2"),
            (ProductDisplay.SHOWCASE, "p-8", "space-y-6"),
            (ProductDisplay.PREVIEW, "p-2", "space-y-1"),
        ],
    )
    def test_container_follows_display(self, resolver, display, padding, stack):
        styles = ProductStyles(resolver).display(display)
        container = classes_of(styles.container_classes())
        assert {padding, stack} | classes_of(styles.classes()) <= container
        assert classes_of(styles.info_classes()) == {"product-info", stack}

    @pytest.mark.parametrize(
        "image, expected",
        [
            (ProductImage.STANDARD, {"aspect-[4/3]"}),
            (ProductImage.SQUARE, {"aspect-square"}),
            (ProductImage.WIDE, {"aspect-[16/9]"}),
            (ProductImage.PORTRAIT, {"aspect-[3/4]"}),
            (ProductImage.CIRCLE, {"aspect-square", "rounded-full"}),
        ],
    )
    def test_image_aspect(self, resolver, image, expected):
        classes = classes_of(ProductStyles(resolver).image(image).image_classes())
        assert {"product-image", "h-48", "w-48"} | expected == classes

    def test_image_size_follows_display(self, resolver):
        classes = classes_of(ProductStyles(resolver).showcase().image_classes())
        assert {"h-80", "w-80"} <= classes

    def test_image_does_not_touch_card(self, resolver):
        assert (
            ProductStyles(resolver).image(ProductImage.CIRCLE).classes()
            == ProductStyles(resolver).classes()
        )

    @pytest.mark.parametrize(
        "display, gap",
        [(ProductDisplay.TILE, "gap-2"), (ProductDisplay.PREVIEW, "gap-1"), (ProductDisplay.FEATURED, "gap-3")],
    )
    def test_actions_gap(self, resolver, display, gap):
        classes = classes_of(ProductStyles(resolver).display(display).actions_classes())
        assert classes == {"product-actions", "flex", "items-center", gap}

    def test_badges_position(self, resolver):
        classes = classes_of(ProductStyles(resolver).badges_classes())
        assert {"product-badges", "absolute", "top-2", "right-2", "flex-col", "gap-1"} <= classes


class TestActionsAndBadges:
    def test_default_action(self, resolver):
        assert ProductStyles(resolver).actions() == (ProductAction.ADD_TO_CART,)

    def test_actions_accumulate_without_duplicates(self, resolver):
        styles = (
            ProductStyles(resolver)
            .action(ProductAction.WISHLIST)
            .action(ProductAction.ADD_TO_CART)
            .action_str("quickview")
        )
        assert styles.actions() == (
            ProductAction.ADD_TO_CART,
            ProductAction.WISHLIST,
            ProductAction.QUICK_VIEW,
        )

    def test_only_actions_replaces(self, resolver):
        styles = ProductStyles(resolver).only_actions(ProductAction.SHARE, ProductAction.SHARE)
        assert styles.actions() == (ProductAction.SHARE,)

    def test_badges(self, resolver):
        styles = (
            ProductStyles(resolver)
            .sale_badge()
            .badge_str("Bestseller")
            .sale_badge()
            .custom_badge("  Staff pick ")
            .custom_badge("   ")
        )
        assert styles.badges() == ("sale", "best-seller", "Staff pick")

    def test_badges_and_actions_emit_no_card_classes(self, resolver):
        styles = ProductStyles(resolver).new_badge().action(ProductAction.COMPARE)
        assert styles.classes() == ProductStyles(resolver).classes()

    def test_template_axes(self, resolver):
        styles = (
            ProductStyles(resolver)
            .price_str("on_sale")
            .variant_str("swatch")
            .info_str("detailed")
        )
        assert styles.pattern.price is ProductPrice.ON_SALE
        assert styles.pattern.variant is ProductVariant.SWATCHES
        assert styles.pattern.info is ProductInfo.DETAILED
        assert styles.variant(None).pattern.variant is None


class TestHints:
    def test_availability(self, resolver):
        assert ProductStyles(resolver).is_available() is True
        assert ProductStyles(resolver).discontinued().is_available() is False

    def test_aria(self, resolver):
        assert ProductStyles(resolver).aria_attributes() == {}
        assert ProductStyles(resolver).selected().aria_attributes() == {"aria-selected": "true"}
        assert ProductStyles(resolver).loading().aria_attributes() == {"aria-busy": "true"}
        assert ProductStyles(resolver).out_of_stock().aria_attributes() == {"aria-disabled": "true"}

    def test_string_aliases(self, resolver):
        assert (
            ProductStyles(resolver).availability_str(" Sold_Out ").pattern.availability
            is ProductAvailability.OUT_OF_STOCK
        )
        assert ProductStyles(resolver).display_str("list").pattern.display is ProductDisplay.LIST_ITEM
        assert ProductStyles(resolver).image_str("round").pattern.image is ProductImage.CIRCLE


class TestConvenience:
    def test_featured(self, resolver):
        classes = classes_of(featured_product_styles(resolver).classes())
        assert {"product-card--featured", "product-card--prominent", "bg-tk-secondary"} <= classes

    def test_tile(self, resolver):
        styles = product_tile_styles(resolver)
        assert styles.pattern.display is ProductDisplay.TILE
        assert styles.pattern.info is ProductInfo.BASIC

    def test_showcase(self, resolver):
        assert product_showcase_styles(resolver).pattern.info is ProductInfo.DETAILED

    def test_preview(self, resolver):
        styles = product_preview_styles(resolver)
        assert styles.pattern.info is ProductInfo.MINIMAL
        assert "h-32" in classes_of(styles.image_classes())

    def test_from_strings(self, resolver):
        outputs = product_classes_from_strings(
            resolver, display="tile", availability="limited", image="square"
        )
        assert set(outputs) == {"container", "image", "info", "actions", "badges"}
        assert {"product-card--tile", "product-card--limited", "p-3"} <= classes_of(outputs["container"])
        assert "aspect-square" in classes_of(outputs["image"])
        assert "gap-2" in classes_of(outputs["actions"])

    def test_from_strings_ignores_unknown(self, resolver):
        assert product_classes_from_strings(resolver, display="carousel") == (
            product_classes_from_strings(resolver)
        )
