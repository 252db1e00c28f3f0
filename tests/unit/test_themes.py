"""
Unit tests for built-in theme presets.
"""

import logging

import pytest

from stylekit import Palette, PaletteError, Token
from stylekit.themes import (
    DEFAULT_THEME,
    JUPITER_THEME,
    THEME_PRESETS,
    WATER_WELLNESS_DARK_THEME,
    WATER_WELLNESS_THEME,
    get_theme_preset,
    list_theme_presets,
    resolve_theme,
)


class TestThemePresets:
    """Tests for preset definitions."""

    def test_list_theme_presets(self):
        presets = list_theme_presets()
        assert presets == [
            "water-wellness",
            "water-wellness-dark",
            "jupiter",
            "llasi",
            "psychedelic",
        ]

    def test_default_is_registered(self):
        assert DEFAULT_THEME in THEME_PRESETS

    @pytest.mark.parametrize("name", list(THEME_PRESETS))
    def test_presets_are_complete(self, name: str):
        palette = THEME_PRESETS[name]
        assert isinstance(palette, Palette)
        for token in Token:
            assert palette.resolve(token)

    def test_get_theme_preset(self):
        assert get_theme_preset("jupiter") is JUPITER_THEME

    def test_get_theme_preset_normalises_name(self):
        assert get_theme_preset("  Jupiter ") is JUPITER_THEME

    def test_get_theme_preset_unknown(self):
        assert get_theme_preset("nonexistent") is None

    def test_dark_variant_derived_from_light(self):
        assert WATER_WELLNESS_DARK_THEME.primary == WATER_WELLNESS_THEME.primary
        assert WATER_WELLNESS_DARK_THEME.background != WATER_WELLNESS_THEME.background


class TestResolveTheme:
    """Tests for resolve_theme()."""

    def test_default(self):
        assert resolve_theme() is WATER_WELLNESS_THEME

    def test_named(self):
        assert resolve_theme("jupiter") is JUPITER_THEME

    def test_unknown_falls_back_with_warning(self, caplog):
        with caplog.at_level(logging.WARNING, logger="stylekit.themes"):
            palette = resolve_theme("nonexistent")
        assert palette is WATER_WELLNESS_THEME
        assert "nonexistent" in caplog.text

    def test_overrides(self):
        palette = resolve_theme("jupiter", {"primary": "indigo-600", Token.ACCENT: "pink-400"})
        assert palette.primary == "indigo-600"
        assert palette.accent == "pink-400"
        assert palette.secondary == JUPITER_THEME.secondary
        assert JUPITER_THEME.primary == "jupiter-orange-500"

    def test_unknown_override_token(self):
        with pytest.raises(PaletteError):
            resolve_theme("jupiter", {"glow": "yellow-300"})
