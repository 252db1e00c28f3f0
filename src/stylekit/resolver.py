"""
Color resolution: tokens -> palette values -> utility classes.

``ColorProvider`` is the capability patterns depend on. ``ColorResolver``
is the standard implementation backed by one Palette.
"""

from __future__ import annotations

import logging
from typing import Protocol, runtime_checkable

from .palette import Palette
from .tokens import Token

logger = logging.getLogger(__name__)

TEXT_PREFIX = "text-"
BG_PREFIX = "bg-"
BORDER_PREFIX = "border-"
RING_PREFIX = "ring-"


@runtime_checkable
class ColorProvider(Protocol):
    """Anything that can turn a token into utility classes."""

    def resolve_color(self, token: Token) -> str: ...

    def text_class(self, token: Token) -> str: ...

    def bg_class(self, token: Token) -> str: ...

    def border_class(self, token: Token) -> str: ...

    def ring_class(self, token: Token) -> str: ...


class ColorResolver:
    """
    Resolves tokens against a single palette.

    Output is a pure function of (palette, token, prefix). The resolver holds
    no other state, so one instance can be shared by any number of builders.

    Prefixing rule: a value that already starts with the prefix being
    applied is returned unchanged (``"text-sky-500"`` stays
    ``"text-sky-500"`` for ``text_class``). Nothing is stripped, and values
    carrying a different prefix are templated as-is.
    """

    __slots__ = ("_palette",)

    def __init__(self, palette: Palette):
        self._palette = palette

    @property
    def palette(self) -> Palette:
        return self._palette

    def resolve_color(self, token: Token) -> str:
        return self._palette.resolve(token)

    def text_class(self, token: Token) -> str:
        return self._prefixed(TEXT_PREFIX, token)

    def bg_class(self, token: Token) -> str:
        return self._prefixed(BG_PREFIX, token)

    def border_class(self, token: Token) -> str:
        return self._prefixed(BORDER_PREFIX, token)

    def ring_class(self, token: Token) -> str:
        return self._prefixed(RING_PREFIX, token)

    def _prefixed(self, prefix: str, token: Token) -> str:
        value = self._palette.resolve(token)
        if value.startswith(prefix):
            logger.debug(
                "Token %s value %r already carries prefix %r; not re-prefixing",
                str(token),
                value,
                prefix,
            )
            return value
        return f"{prefix}{value}"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ColorResolver):
            return NotImplemented
        return self._palette == other._palette

    def __hash__(self) -> int:
        return hash(self._palette)

    def __repr__(self) -> str:
        return f"ColorResolver(primary={self._palette.primary!r})"
