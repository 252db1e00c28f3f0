"""
Semantic color token registry.

Tokens name design concepts (brand, state, neutral, text, interactive)
independently of any concrete value. The set is closed: palettes must
supply a value for every member and nothing else.
"""

from enum import StrEnum


class TokenCategory(StrEnum):
    """Groupings of the token registry."""

    BRAND = "brand"
    SEMANTIC = "semantic"
    NEUTRAL = "neutral"
    TEXT = "text"
    INTERACTIVE = "interactive"


class Token(StrEnum):
    """Semantic color tokens.

    Values double as palette field names and as keys in serialized palettes.
    """

    # Brand
    PRIMARY = "primary"
    SECONDARY = "secondary"
    ACCENT = "accent"

    # Semantic state
    SUCCESS = "success"
    WARNING = "warning"
    ERROR = "error"
    INFO = "info"

    # Neutral
    SURFACE = "surface"
    BACKGROUND = "background"
    FOREGROUND = "foreground"
    BORDER = "border"

    # Text
    TEXT_PRIMARY = "text_primary"
    TEXT_SECONDARY = "text_secondary"
    TEXT_TERTIARY = "text_tertiary"
    TEXT_INVERSE = "text_inverse"

    # Interactive states
    INTERACTIVE = "interactive"
    INTERACTIVE_HOVER = "interactive_hover"
    INTERACTIVE_ACTIVE = "interactive_active"
    INTERACTIVE_DISABLED = "interactive_disabled"

    @property
    def category(self) -> TokenCategory:
        return TOKEN_CATEGORIES[self]


TOKEN_CATEGORIES: dict[Token, TokenCategory] = {
    Token.PRIMARY: TokenCategory.BRAND,
    Token.SECONDARY: TokenCategory.BRAND,
    Token.ACCENT: TokenCategory.BRAND,
    Token.SUCCESS: TokenCategory.SEMANTIC,
    Token.WARNING: TokenCategory.SEMANTIC,
    Token.ERROR: TokenCategory.SEMANTIC,
    Token.INFO: TokenCategory.SEMANTIC,
    Token.SURFACE: TokenCategory.NEUTRAL,
    Token.BACKGROUND: TokenCategory.NEUTRAL,
    Token.FOREGROUND: TokenCategory.NEUTRAL,
    Token.BORDER: TokenCategory.NEUTRAL,
    Token.TEXT_PRIMARY: TokenCategory.TEXT,
    Token.TEXT_SECONDARY: TokenCategory.TEXT,
    Token.TEXT_TERTIARY: TokenCategory.TEXT,
    Token.TEXT_INVERSE: TokenCategory.TEXT,
    Token.INTERACTIVE: TokenCategory.INTERACTIVE,
    Token.INTERACTIVE_HOVER: TokenCategory.INTERACTIVE,
    Token.INTERACTIVE_ACTIVE: TokenCategory.INTERACTIVE,
    Token.INTERACTIVE_DISABLED: TokenCategory.INTERACTIVE,
}


def tokens_in(category: TokenCategory | str) -> list[Token]:
    """List the tokens of one category, in registry order.

    Examples:
        >>> tokens_in("brand")
        [<Token.PRIMARY: 'primary'>, <Token.SECONDARY: 'secondary'>, <Token.ACCENT: 'accent'>]
    """
    category = TokenCategory(category)
    return [token for token in Token if TOKEN_CATEGORIES[token] is category]
