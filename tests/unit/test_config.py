"""
Unit tests for environment-driven default theme selection.
"""

import pytest

from stylekit import PaletteLoadError, TextStyles
from stylekit.config import (
    THEME_ENV_VAR,
    THEME_FILE_ENV_VAR,
    get_default_palette,
    get_default_resolver,
    get_theme_name,
    reset_default_theme,
)
from stylekit.themes import JUPITER_THEME, LLASI_THEME, WATER_WELLNESS_THEME


class TestDefaultTheme:
    """Tests for STYLEKIT_THEME / STYLEKIT_THEME_FILE handling."""

    def test_default_without_env(self):
        assert get_theme_name() == "water-wellness"
        assert get_default_palette() is WATER_WELLNESS_THEME

    def test_theme_name_from_env(self, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setenv(THEME_ENV_VAR, "jupiter")
        assert get_default_palette() is JUPITER_THEME

    def test_blank_env_uses_default(self, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setenv(THEME_ENV_VAR, "   ")
        assert get_theme_name() == "water-wellness"

    def test_theme_file_takes_precedence(self, monkeypatch: pytest.MonkeyPatch, tmp_path):
        path = tmp_path / "theme.yaml"
        path.write_text("preset: llasi\n")
        monkeypatch.setenv(THEME_ENV_VAR, "jupiter")
        monkeypatch.setenv(THEME_FILE_ENV_VAR, str(path))
        assert get_default_palette() == LLASI_THEME

    def test_invalid_theme_file_fails_loudly(self, monkeypatch: pytest.MonkeyPatch, tmp_path):
        monkeypatch.setenv(THEME_FILE_ENV_VAR, str(tmp_path / "absent.yaml"))
        with pytest.raises(PaletteLoadError):
            get_default_resolver()

    def test_cached_until_reset(self, monkeypatch: pytest.MonkeyPatch):
        first = get_default_resolver()
        monkeypatch.setenv(THEME_ENV_VAR, "jupiter")
        assert get_default_resolver() is first
        reset_default_theme()
        assert get_default_resolver().palette is JUPITER_THEME

    def test_builders_use_default_resolver(self, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setenv(THEME_ENV_VAR, "jupiter")
        classes = TextStyles().primary().classes().split()
        assert "text-jupiter-orange-500" in classes
