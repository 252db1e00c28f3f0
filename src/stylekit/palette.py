"""
Palette: the concrete value for every semantic token in one theme.

A Palette is an immutable value. Completeness is checked when it is built:
every registered token must map to a non-empty string, and no other keys
are accepted. Derived themes (dark mode, brand variants) are produced with
``with_overrides``, which copies the base palette instead of mutating it.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from .errors import PaletteError
from .tokens import Token

PaletteMutator = Callable[[dict[Token, str]], Mapping[Token | str, str] | None]


def _value(description: str) -> Any:
    # One color reference per token; inner whitespace would split into two classes.
    return Field(min_length=1, pattern=r"^\S+$", description=description)


class Palette(BaseModel):
    """
    Token -> value mapping for one theme.

    Values are color-scale references understood by the CSS framework,
    e.g. "blue-500" or "white". The resolver adds the utility prefix.

    Example:
        Palette.from_mapping({Token.PRIMARY: "blue-500", ...})
        palette.with_overrides(primary="indigo-600")
    """

    model_config = ConfigDict(frozen=True, extra="forbid", str_strip_whitespace=True)

    # Brand
    primary: str = _value("Main brand color")
    secondary: str = _value("Secondary brand color")
    accent: str = _value("Accent brand color")

    # Semantic state
    success: str = _value("Success state")
    warning: str = _value("Warning state")
    error: str = _value("Error state")
    info: str = _value("Informational state")

    # Neutral
    surface: str = _value("Card and panel surface")
    background: str = _value("Page background")
    foreground: str = _value("Default foreground")
    border: str = _value("Default border")

    # Text
    text_primary: str = _value("Body and heading text")
    text_secondary: str = _value("Muted text")
    text_tertiary: str = _value("Subdued text such as overlines")
    text_inverse: str = _value("Text on brand or dark backgrounds")

    # Interactive
    interactive: str = _value("Interactive element at rest")
    interactive_hover: str = _value("Interactive element on hover")
    interactive_active: str = _value("Interactive element while pressed")
    interactive_disabled: str = _value("Disabled interactive element")

    def resolve(self, token: Token | str) -> str:
        """Return the value assigned to a token."""
        return getattr(self, Token(token).value)

    def to_dict(self) -> dict[str, str]:
        """Token name -> value, in registry order."""
        return {token.value: self.resolve(token) for token in Token}

    @classmethod
    def from_mapping(cls, mapping: Mapping[Token | str, Any]) -> Palette:
        """
        Build a palette from a mapping keyed by Token or token name.

        String keys are normalised: case-insensitive, "-" accepted for "_".

        Raises:
            PaletteError: If any token is missing, any key is unknown, or
                any value is empty or not a string.
        """
        values: dict[str, Any] = {}
        unknown: list[str] = []
        for key, value in mapping.items():
            name = _normalise_key(key)
            if name is None:
                unknown.append(str(key))
                continue
            values[name] = value

        missing = [token.value for token in Token if token.value not in values]
        if missing or unknown:
            parts = []
            if missing:
                parts.append(f"missing tokens: {', '.join(missing)}")
            if unknown:
                parts.append(f"unknown tokens: {', '.join(sorted(unknown))}")
            raise PaletteError(
                f"Invalid palette ({'; '.join(parts)})", missing=missing, unknown=unknown
            )

        try:
            return cls(**values)
        except ValidationError as e:
            bad = sorted({str(err["loc"][0]) for err in e.errors() if err["loc"]})
            raise PaletteError(f"Invalid palette values for: {', '.join(bad)}") from e

    def with_overrides(
        self,
        mutator: PaletteMutator | None = None,
        /,
        **values: str,
    ) -> Palette:
        """
        Derive a new palette from this one.

        The mutator receives a mutable ``dict[Token, str]`` copy of this
        palette. It may edit the dict in place or return a replacement
        mapping. Keyword values are applied afterwards. This palette is
        never modified.

        Args:
            mutator: Optional callable applied to the draft copy
            **values: Token name -> new value

        Returns:
            A new, fully validated Palette

        Raises:
            PaletteError: If the result is not a complete, valid palette
        """
        draft: dict[Token | str, str] = {token: self.resolve(token) for token in Token}
        if mutator is not None:
            replaced = mutator(draft)  # type: ignore[arg-type]
            if replaced is not None:
                draft = dict(replaced)
        draft.update(values)
        return Palette.from_mapping(draft)


def _normalise_key(key: Token | str) -> str | None:
    if isinstance(key, Token):
        return key.value
    if not isinstance(key, str):
        return None
    name = key.strip().lower().replace("-", "_")
    try:
        return Token(name).value
    except ValueError:
        return None
