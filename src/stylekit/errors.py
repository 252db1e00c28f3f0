"""
Error types for stylekit palette construction and loading.

Only theme setup can fail. Resolving tokens, building class strings and
assembling them are total over well-formed inputs.
"""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path


class StylekitError(Exception):
    """Base exception for all stylekit errors."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class PaletteError(StylekitError, ValueError):
    """
    Raised when a palette cannot be constructed.

    Examples:
    - A registered token has no value
    - A key does not name a registered token
    - A token value is empty
    """

    def __init__(
        self,
        message: str,
        missing: Iterable[str] = (),
        unknown: Iterable[str] = (),
    ):
        self.missing = tuple(missing)
        self.unknown = tuple(unknown)
        super().__init__(message)


class PaletteLoadError(PaletteError):
    """
    Raised when a palette or theme file cannot be loaded.

    Examples:
    - File does not exist or is unreadable
    - Malformed JSON or YAML
    - Document decodes to an incomplete palette
    - Theme file names an unknown preset
    """

    def __init__(
        self,
        message: str,
        path: Path | None = None,
        missing: Iterable[str] = (),
        unknown: Iterable[str] = (),
    ):
        self.path = path
        if path is not None:
            message = f"{path}: {message}"
        super().__init__(message, missing=missing, unknown=unknown)
