"""
Unit tests for CardStyles.
"""

import pytest

from stylekit.builders.card import (
    CardStyles,
    card_classes_from_strings,
    content_card,
    glass_card,
    hero_card,
    interactive_card,
    minimal_card,
)
from stylekit.patterns import CardElevation, CardInteraction, CardSurface


def classes_of(builder: CardStyles) -> set[str]:
    return set(builder.classes().split())


class TestCardDefaults:
    def test_defaults(self, resolver):
        classes = classes_of(CardStyles(resolver))
        assert {"rounded-lg", "border", "transition-all", "duration-300"} <= classes
        assert {"shadow-sm", "p-5"} <= classes
        assert {"bg-tk-surface", "text-tk-text-primary", "border-tk-border"} <= classes
        assert not [c for c in classes if c.startswith("hover:")]


class TestSurfaces:
    def test_elevated(self, resolver):
        classes = classes_of(CardStyles(resolver).surface(CardSurface.ELEVATED))
        assert "bg-tk-background" in classes
        assert "bg-tk-surface" not in classes

    def test_branded_gradient_uses_palette(self, resolver):
        classes = classes_of(CardStyles(resolver).branded())
        assert {
            "bg-gradient-to-br",
            "from-tk-primary/80",
            "to-tk-secondary/80",
            "border-white/10",
            "text-tk-text-inverse",
        } <= classes

    def test_glass(self, resolver):
        classes = classes_of(CardStyles(resolver).glass())
        assert {"bg-white/10", "backdrop-blur-md"} <= classes
        assert "bg-tk-surface" not in classes

    @pytest.mark.parametrize(
        "alias, surface",
        [("white", CardSurface.STANDARD), ("theme", CardSurface.BRANDED), ("clear", CardSurface.TRANSPARENT)],
    )
    def test_surface_aliases(self, resolver, alias, surface):
        assert (
            CardStyles(resolver).surface_str(alias).classes()
            == CardStyles(resolver).surface(surface).classes()
        )


class TestHoverElevation:
    """Hover shadow depends on both interaction and resting elevation."""

    @pytest.mark.parametrize(
        "elevation, hover",
        [
            (CardElevation.SUBTLE, "hover:shadow-md"),
            (CardElevation.RAISED, "hover:shadow-lg"),
            (CardElevation.FLOATING, "hover:shadow-xl"),
        ],
    )
    def test_clickable(self, resolver, elevation, hover):
        assert hover in classes_of(CardStyles(resolver).elevation(elevation).clickable())

    def test_flat_has_no_hover_elevation(self, resolver):
        classes = classes_of(CardStyles(resolver).flat().clickable())
        assert not {"hover:shadow-md", "hover:shadow-lg", "hover:shadow-xl"} & classes

    def test_static_has_no_hover_elevation(self, resolver):
        assert "hover:shadow-lg" not in classes_of(CardStyles(resolver).raised())

    def test_retracted_when_interaction_changes(self, resolver):
        styles = CardStyles(resolver).raised().clickable()
        assert "hover:shadow-lg" in classes_of(styles)
        styles.interaction(CardInteraction.STATIC)
        assert "hover:shadow-lg" not in classes_of(styles)
        assert "cursor-pointer" not in classes_of(styles)

    def test_follows_elevation_change(self, resolver):
        styles = CardStyles(resolver).clickable().raised().floating()
        classes = classes_of(styles)
        assert "hover:shadow-xl" in classes
        assert "hover:shadow-lg" not in classes
        assert "shadow-md" not in classes


class TestInteractionAndSelection:
    def test_clickable_aria(self, resolver):
        assert CardStyles(resolver).clickable().aria_attributes() == {
            "role": "button",
            "tabindex": "0",
        }

    def test_selectable_aria(self, resolver):
        styles = CardStyles(resolver).selectable().selected()
        assert styles.aria_attributes()["aria-selected"] == "true"
        assert styles.selected(False).aria_attributes()["aria-selected"] == "false"

    def test_selected_ring(self, resolver):
        classes = classes_of(CardStyles(resolver).selected())
        assert {"ring-2", "ring-offset-2", "ring-tk-primary"} <= classes

    def test_unselected_removes_ring(self, resolver):
        classes = classes_of(CardStyles(resolver).selected().selected(False))
        assert "ring-tk-primary" not in classes

    @pytest.mark.parametrize(
        "alias, interaction",
        [("click", CardInteraction.CLICKABLE), ("drag", CardInteraction.DRAGGABLE), ("none", CardInteraction.STATIC)],
    )
    def test_interaction_aliases(self, resolver, alias, interaction):
        assert (
            CardStyles(resolver).interaction_str(alias).classes()
            == CardStyles(resolver).interaction(interaction).classes()
        )

    def test_elevation_aliases(self, resolver):
        assert "shadow-2xl" in classes_of(CardStyles(resolver).elevation_str("highest"))
        assert "shadow-none" in classes_of(CardStyles(resolver).elevation_str("none"))


class TestConvenience:
    def test_presets(self, resolver):
        assert "shadow-sm" in classes_of(content_card(resolver))
        assert {"shadow-md", "cursor-pointer", "hover:shadow-lg"} <= classes_of(interactive_card(resolver))
        assert {"shadow-lg", "p-8", "from-tk-primary/80"} <= classes_of(hero_card(resolver))
        assert "backdrop-blur-md" in classes_of(glass_card(resolver))
        assert {"shadow-none", "bg-transparent", "p-3"} <= classes_of(minimal_card(resolver))

    def test_from_strings(self, resolver):
        classes = set(card_classes_from_strings(resolver, "raised", "elevated", "lg", "hover").split())
        assert {"shadow-md", "bg-tk-background", "p-6", "hover:shadow-lg"} <= classes
