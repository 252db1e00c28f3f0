"""Shared pytest fixtures for stylekit tests."""

import pytest

from stylekit import ColorResolver, Palette, Token, reset_default_theme
from stylekit.config import THEME_ENV_VAR, THEME_FILE_ENV_VAR
from stylekit.themes import WATER_WELLNESS_THEME


def make_palette_values(**overrides: str) -> dict[str, str]:
    """One distinct value per token ("tk-<token>"), plus overrides."""
    values = {token.value: f"tk-{token.value.replace('_', '-')}" for token in Token}
    values.update(overrides)
    return values


@pytest.fixture
def make_values():
    """Factory for complete token -> value mappings with chosen overrides."""
    return make_palette_values


@pytest.fixture
def palette_values() -> dict[str, str]:
    """Complete token -> value mapping with a distinct value per token."""
    return make_palette_values()


@pytest.fixture
def palette(palette_values: dict[str, str]) -> Palette:
    """Palette whose values make every token easy to spot in output."""
    return Palette(**palette_values)


@pytest.fixture
def resolver(palette: Palette) -> ColorResolver:
    return ColorResolver(palette)


@pytest.fixture
def theme_resolver() -> ColorResolver:
    """Resolver over the default built-in theme."""
    return ColorResolver(WATER_WELLNESS_THEME)


@pytest.fixture(autouse=True)
def clean_theme_env(monkeypatch: pytest.MonkeyPatch):
    """Isolate every test from STYLEKIT_* variables and the cached default."""
    monkeypatch.delenv(THEME_ENV_VAR, raising=False)
    monkeypatch.delenv(THEME_FILE_ENV_VAR, raising=False)
    reset_default_theme()
    yield
    reset_default_theme()
