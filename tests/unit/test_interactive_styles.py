"""
Unit tests for InteractiveStyles.
"""

import pytest

from stylekit.builders.interactive import (
    InteractiveStyles,
    interactive_button,
    interactive_element,
    interactive_input,
)
from stylekit.patterns import InteractionIntensity, InteractiveKind, InteractiveState
from stylekit.patterns.interactive import with_pseudo_class


def classes_of(text: str) -> set[str]:
    return set(text.split())


class TestBehaviourFlags:
    def test_plain_element_is_empty(self, resolver):
        assert InteractiveStyles(resolver).classes() == ""

    def test_hoverable(self, resolver):
        classes = classes_of(InteractiveStyles(resolver).hoverable().classes())
        assert {"transition-all", "duration-200", "ease-in-out", "cursor-pointer"} <= classes
        assert {"hover:scale-105", "hover:shadow-md"} <= classes

    def test_focusable_adds_ring_without_pointer(self, resolver):
        classes = classes_of(InteractiveStyles(resolver).focusable().classes())
        assert {"focus:outline-none", "focus:ring-2", "focus:ring-offset-2", "focus:ring-tk-primary"} <= classes
        assert "cursor-pointer" not in classes

    def test_pressable(self, resolver):
        classes = classes_of(InteractiveStyles(resolver).pressable().classes())
        assert {"cursor-pointer", "active:scale-95"} <= classes

    @pytest.mark.parametrize(
        "intensity, hover, press",
        [
            (InteractionIntensity.GENTLE, {"hover:scale-101", "hover:shadow-sm"}, "active:scale-100"),
            (InteractionIntensity.STANDARD, {"hover:scale-105", "hover:shadow-md"}, "active:scale-95"),
            (InteractionIntensity.PROMINENT, {"hover:scale-110", "hover:shadow-lg"}, "active:scale-95"),
        ],
    )
    def test_intensity(self, resolver, intensity, hover, press):
        styles = InteractiveStyles(resolver).hoverable().pressable().intensity(intensity)
        classes = classes_of(styles.classes())
        assert hover | {press} <= classes

    def test_turning_flags_off_restores_plain(self, resolver):
        styles = InteractiveStyles(resolver).hoverable().focusable().pressable()
        styles.hoverable(False).focusable(False).pressable(False)
        assert styles.classes() == ""


class TestStates:
    def test_disabled_drops_hover_and_press(self, resolver):
        classes = classes_of(
            InteractiveStyles(resolver).hoverable().pressable().disabled().classes()
        )
        assert {"cursor-not-allowed", "opacity-50", "pointer-events-none"} <= classes
        assert "cursor-pointer" not in classes
        assert not [c for c in classes if c.startswith(("hover:", "active:"))]

    def test_loading(self, resolver):
        classes = classes_of(InteractiveStyles(resolver).hoverable().loading().classes())
        assert {"cursor-wait", "opacity-75"} <= classes
        assert "cursor-pointer" not in classes

    def test_focused_shows_ring_when_focusable(self, resolver):
        classes = classes_of(InteractiveStyles(resolver).focusable().focused().classes())
        assert {"ring-2", "ring-offset-2", "ring-tk-primary"} <= classes
        unfocusable = classes_of(InteractiveStyles(resolver).focused().classes())
        assert "ring-2" not in unfocusable

    def test_enabling_again_restores_effects(self, resolver):
        styles = InteractiveStyles(resolver).hoverable().disabled().state(InteractiveState.DEFAULT)
        assert styles.classes() == InteractiveStyles(resolver).hoverable().classes()

    def test_aria(self, resolver):
        assert InteractiveStyles(resolver).aria_attributes() == {}
        assert InteractiveStyles(resolver).disabled().aria_attributes() == {"aria-disabled": "true"}
        assert InteractiveStyles(resolver).loading().aria_attributes() == {"aria-busy": "true"}
        assert InteractiveStyles(resolver).pressable().pressed().aria_attributes() == {
            "aria-pressed": "true"
        }

    def test_state_aliases(self, resolver):
        assert InteractiveStyles(resolver).state_str("busy").pattern.state is InteractiveState.LOADING
        assert InteractiveStyles(resolver).kind_str("ghost").pattern.kind is InteractiveKind.GHOST_BUTTON


class TestPseudoClassGroups:
    def test_prefixes(self):
        assert with_pseudo_class("focus", ("ring-2", "focus:ring-offset-2")) == [
            "focus:ring-2",
            "focus:ring-offset-2",
        ]

    def test_extras_accumulate(self, resolver):
        styles = InteractiveStyles(resolver).on_hover("shadow-md").on_hover(" underline  ")
        assert styles.fragments()["hover"] == ("hover:shadow-md", "hover:underline")

    @pytest.mark.parametrize("method, group", [
        ("on_focus", "focus"),
        ("on_active", "active"),
        ("on_disabled", "disabled"),
    ])
    def test_each_group(self, resolver, method, group):
        styles = getattr(InteractiveStyles(resolver), method)("opacity-80")
        assert styles.fragments()[group] == (f"{group}:opacity-80",)

    def test_blank_extras_ignored(self, resolver):
        styles = InteractiveStyles(resolver)
        before = styles.pattern
        styles.on_hover("   ").base_classes("")
        assert styles.pattern == before

    def test_extras_survive_disabled_state(self, resolver):
        classes = classes_of(
            InteractiveStyles(resolver).on_hover("underline").on_disabled("opacity-50").disabled().classes()
        )
        assert {"hover:underline", "disabled:opacity-50"} <= classes

    def test_base_classes(self, resolver):
        assert InteractiveStyles(resolver).base_classes("px-2 py-1").classes() == "px-2 py-1"

    def test_color_helpers(self, resolver):
        classes = classes_of(
            InteractiveStyles(resolver).hover_border_primary().hover_darken().focus_ring_primary().classes()
        )
        assert {"hover:border-tk-primary", "hover:bg-tk-interactive-hover"} <= classes
        assert {"focus:outline-none", "focus:ring-2", "focus:ring-tk-primary"} <= classes


class TestKinds:
    def test_input_base(self, resolver):
        classes = classes_of(InteractiveStyles(resolver).input().classes())
        assert {"w-full", "px-4", "py-3", "border", "border-tk-border", "bg-tk-surface"} <= classes

    def test_primary(self, resolver):
        classes = classes_of(InteractiveStyles(resolver).primary().classes())
        assert {"inline-flex", "bg-tk-primary", "text-tk-text-inverse"} <= classes

    def test_secondary(self, resolver):
        classes = classes_of(InteractiveStyles(resolver).secondary().classes())
        assert {"border", "bg-tk-surface", "text-tk-text-primary", "border-tk-border"} <= classes

    def test_ghost(self, resolver):
        classes = classes_of(InteractiveStyles(resolver).ghost().classes())
        assert {"bg-transparent", "text-tk-text-primary"} <= classes
        assert "bg-tk-primary" not in classes

    def test_kind_change_replaces_base_keeps_extras(self, resolver):
        styles = InteractiveStyles(resolver).base_classes("tracking-wide").primary().ghost()
        classes = classes_of(styles.classes())
        assert "bg-tk-primary" not in classes
        assert {"bg-transparent", "tracking-wide"} <= classes


class TestConvenience:
    def test_element(self, resolver):
        classes = classes_of(interactive_element(resolver).classes())
        assert {"cursor-pointer", "hover:scale-105", "active:scale-95", "focus:ring-2"} <= classes

    def test_input(self, resolver):
        classes = classes_of(interactive_input(resolver).classes())
        assert {"w-full", "hover:border-tk-primary", "hover:shadow-md"} <= classes
        assert {"focus:ring-tk-primary", "disabled:opacity-50", "disabled:cursor-not-allowed"} <= classes

    def test_button(self, resolver):
        classes = classes_of(interactive_button(resolver).classes())
        assert {"bg-tk-primary", "hover:bg-tk-interactive-hover", "active:scale-95"} <= classes
        assert "disabled:opacity-50" in classes
