"""
Palette persistence for stylekit.

Palettes round-trip through JSON or YAML. A serialized palette is a flat
mapping of token name -> value and must contain every registered token.

Theme files may instead extend a preset:

    preset: jupiter
    overrides:
      primary: indigo-600

File format is chosen by suffix: .json, .yaml or .yml.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

import yaml

from .errors import PaletteError, PaletteLoadError
from .palette import Palette
from .themes import get_theme_preset

logger = logging.getLogger(__name__)

JSON_SUFFIXES = frozenset({".json"})
YAML_SUFFIXES = frozenset({".yaml", ".yml"})


# =============================================================================
# Text formats
# =============================================================================


def palette_to_json(palette: Palette, indent: int | None = 2) -> str:
    """Serialize a palette to JSON (token name -> value, registry order)."""
    return json.dumps(palette.to_dict(), indent=indent)


def palette_from_json(text: str) -> Palette:
    """
    Deserialize a palette from JSON.

    Raises:
        PaletteLoadError: If the JSON is malformed or the palette incomplete
    """
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise PaletteLoadError(f"Invalid JSON: {e}") from e
    return _palette_from_data(data)


def palette_to_yaml(palette: Palette) -> str:
    """Serialize a palette to YAML (token name -> value, registry order)."""
    return yaml.safe_dump(palette.to_dict(), sort_keys=False, default_flow_style=False)


def palette_from_yaml(text: str) -> Palette:
    """
    Deserialize a palette from YAML.

    Raises:
        PaletteLoadError: If the YAML is malformed or the palette incomplete
    """
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise PaletteLoadError(f"Invalid YAML: {e}") from e
    return _palette_from_data(data)


def _palette_from_data(data: Any, path: Path | None = None) -> Palette:
    if not isinstance(data, dict):
        raise PaletteLoadError(
            f"Expected a mapping of token names to values, got {type(data).__name__}",
            path=path,
        )
    try:
        return Palette.from_mapping(data)
    except PaletteError as e:
        raise PaletteLoadError(
            e.message, path=path, missing=e.missing, unknown=e.unknown
        ) from e


# =============================================================================
# Files
# =============================================================================


def _read_document(path: Path) -> Any:
    suffix = path.suffix.lower()
    if suffix not in JSON_SUFFIXES | YAML_SUFFIXES:
        raise PaletteLoadError(
            f"Unsupported file type {suffix!r} (expected .json, .yaml or .yml)", path=path
        )
    try:
        content = path.read_text(encoding="utf-8")
    except OSError as e:
        raise PaletteLoadError(f"Cannot read file: {e}", path=path) from e

    try:
        if suffix in JSON_SUFFIXES:
            return json.loads(content)
        return yaml.safe_load(content)
    except json.JSONDecodeError as e:
        raise PaletteLoadError(f"Invalid JSON: {e}", path=path) from e
    except yaml.YAMLError as e:
        raise PaletteLoadError(f"Invalid YAML: {e}", path=path) from e


def load_palette(path: Path | str) -> Palette:
    """
    Load a complete palette from a JSON or YAML file.

    Raises:
        PaletteLoadError: If the file is missing, malformed or incomplete
    """
    path = Path(path)
    palette = _palette_from_data(_read_document(path), path=path)
    logger.debug("Loaded palette from %s", path)
    return palette


def save_palette(path: Path | str, palette: Palette) -> Path:
    """
    Save a palette as JSON or YAML, chosen by file suffix.

    Returns:
        Path to the written file
    """
    path = Path(path)
    suffix = path.suffix.lower()
    if suffix in JSON_SUFFIXES:
        content = palette_to_json(palette) + "\n"
    elif suffix in YAML_SUFFIXES:
        content = palette_to_yaml(palette)
    else:
        raise PaletteLoadError(
            f"Unsupported file type {suffix!r} (expected .json, .yaml or .yml)", path=path
        )
    path.write_text(content, encoding="utf-8")
    logger.debug("Saved palette to %s", path)
    return path


def load_theme(path: Path | str) -> Palette:
    """
    Load a theme file: either a full palette, or a preset plus overrides.

    Raises:
        PaletteLoadError: If the file is invalid, names an unknown preset,
            or the resulting palette is incomplete
    """
    path = Path(path)
    data = _read_document(path)

    if not isinstance(data, dict) or "preset" not in data:
        return _palette_from_data(data, path=path)

    extra = set(data) - {"preset", "overrides"}
    if extra:
        raise PaletteLoadError(
            f"Unexpected keys in theme file: {', '.join(sorted(extra))}", path=path
        )

    preset_name = data["preset"]
    base = get_theme_preset(preset_name) if isinstance(preset_name, str) else None
    if base is None:
        raise PaletteLoadError(f"Unknown theme preset: {preset_name!r}", path=path)

    overrides = data.get("overrides") or {}
    if not isinstance(overrides, dict):
        raise PaletteLoadError("'overrides' must be a mapping", path=path)

    try:
        palette = base.with_overrides(lambda draft: {**draft, **overrides})
    except PaletteError as e:
        raise PaletteLoadError(
            e.message, path=path, missing=e.missing, unknown=e.unknown
        ) from e

    logger.debug("Loaded theme %r with %d override(s) from %s", preset_name, len(overrides), path)
    return palette
