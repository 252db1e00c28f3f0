"""
Unit tests for the token registry.
"""

import pytest

from stylekit.tokens import TOKEN_CATEGORIES, Token, TokenCategory, tokens_in


class TestTokenRegistry:
    """Tests for the closed Token enumeration."""

    def test_registry_has_nineteen_tokens(self):
        assert len(list(Token)) == 19

    def test_accent_is_registered(self):
        """Accent belongs to the brand group alongside primary and secondary."""
        assert Token("accent") is Token.ACCENT
        assert Token.ACCENT.category is TokenCategory.BRAND

    def test_values_are_snake_case_identifiers(self):
        for token in Token:
            assert token.value.isidentifier()
            assert token.value == token.value.lower()

    @pytest.mark.parametrize("token", list(Token))
    def test_every_token_has_a_category(self, token: Token):
        assert token in TOKEN_CATEGORIES
        assert isinstance(token.category, TokenCategory)

    def test_unknown_token_rejected(self):
        with pytest.raises(ValueError):
            Token("tertiary")


class TestTokensIn:
    """Tests for category lookup."""

    def test_brand(self):
        assert tokens_in(TokenCategory.BRAND) == [Token.PRIMARY, Token.SECONDARY, Token.ACCENT]

    def test_accepts_string(self):
        assert tokens_in("text") == [
            Token.TEXT_PRIMARY,
            Token.TEXT_SECONDARY,
            Token.TEXT_TERTIARY,
            Token.TEXT_INVERSE,
        ]

    def test_categories_partition_registry(self):
        seen = [token for category in TokenCategory for token in tokens_in(category)]
        assert sorted(seen) == sorted(Token)
        assert len(seen) == len(set(seen))

    def test_unknown_category(self):
        with pytest.raises(ValueError):
            tokens_in("decorative")
