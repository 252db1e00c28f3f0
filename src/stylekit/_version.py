"""Version lookup for stylekit."""

from __future__ import annotations

import tomllib
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as distribution_version
from pathlib import Path

DISTRIBUTION = "semantic-stylekit"
FALLBACK_VERSION = "0.0.0"

# src/stylekit/_version.py -> repository root
PYPROJECT = Path(__file__).resolve().parents[2] / "pyproject.toml"


def _source_tree_version(pyproject: Path) -> str | None:
    """Version declared in a source checkout's pyproject.toml, if it is ours."""
    try:
        with pyproject.open("rb") as f:
            project = tomllib.load(f).get("project", {})
    except (OSError, tomllib.TOMLDecodeError):
        return None
    if project.get("name") != DISTRIBUTION:
        return None
    return project.get("version")


def get_version() -> str:
    """
    Installed distribution version, else the checkout's pyproject.toml.

    Returns FALLBACK_VERSION when neither is available.
    """
    try:
        return distribution_version(DISTRIBUTION)
    except PackageNotFoundError:
        return _source_tree_version(PYPROJECT) or FALLBACK_VERSION
