"""
Tests for the SceneScript lexer.

Covers token classification, positions, string escapes, keyword
reclassification and the rejection of unrecognized characters.
"""

import pytest

from scenescript.exceptions.core import LexError
from scenescript.parsing.lexer import Token, TokenType, tokenize


def types_of(text: str) -> list[TokenType]:
    return [token.type for token in tokenize(text)]


class TestBasicTokens:
    """Tests for token classification."""

    def test_empty_input_yields_single_end(self):
        """Empty text produces exactly one END token."""
        tokens = tokenize("")
        assert tokens == [Token(TokenType.END, "", 0)]

    def test_whitespace_only_yields_single_end(self):
        tokens = tokenize("  \t\n ")
        assert len(tokens) == 1
        assert tokens[0].type is TokenType.END

    def test_invocation_tokens(self):
        assert types_of('move(x: 1, name = "a")') == [
            TokenType.IDENTIFIER,
            TokenType.OPEN_PAREN,
            TokenType.IDENTIFIER,
            TokenType.COLON,
            TokenType.NUMBER,
            TokenType.COMMA,
            TokenType.IDENTIFIER,
            TokenType.EQUALS,
            TokenType.STRING,
            TokenType.CLOSE_PAREN,
            TokenType.END,
        ]

    def test_punctuation_and_operators(self):
        assert types_of("{};+-*/") == [
            TokenType.OPEN_BRACE,
            TokenType.CLOSE_BRACE,
            TokenType.SEMICOLON,
            TokenType.PLUS,
            TokenType.MINUS,
            TokenType.MULTIPLY,
            TokenType.DIVIDE,
            TokenType.END,
        ]

    def test_arrow_is_one_token(self):
        tokens = tokenize("a->b")
        assert [t.type for t in tokens] == [
            TokenType.IDENTIFIER,
            TokenType.ARROW,
            TokenType.IDENTIFIER,
            TokenType.END,
        ]
        assert tokens[1].value == "->"

    def test_positions_are_source_offsets(self):
        tokens = tokenize("ab  (12")
        assert [t.position for t in tokens] == [0, 4, 5, 7]


class TestIdentifiersAndKeywords:
    """Tests for identifier scanning and keyword reclassification."""

    def test_identifier_with_digits_and_underscores(self):
        tokens = tokenize("_elem_2")
        assert tokens[0] == Token(TokenType.IDENTIFIER, "_elem_2", 0)

    @pytest.mark.parametrize("word", ["true", "false", "null"])
    def test_reserved_words_are_keywords(self, word):
        assert tokenize(word)[0].type is TokenType.KEYWORD

    def test_keywords_are_case_sensitive(self):
        assert tokenize("True")[0].type is TokenType.IDENTIFIER

    def test_keyword_prefix_is_identifier(self):
        assert tokenize("trueish")[0].type is TokenType.IDENTIFIER


class TestNumbers:
    """Tests for numeric literals."""

    @pytest.mark.parametrize("literal", ["0", "42", "3.14", "10."])
    def test_number_literals(self, literal):
        tokens = tokenize(literal)
        assert tokens[0] == Token(TokenType.NUMBER, literal, 0)

    def test_negative_number_is_minus_then_number(self):
        assert types_of("-2.5") == [TokenType.MINUS, TokenType.NUMBER, TokenType.END]

    def test_second_decimal_point_is_rejected(self):
        """Only one decimal point belongs to a number; a stray '.' is not a token."""
        with pytest.raises(LexError):
            tokenize("1.2.3")


class TestStrings:
    """Tests for quoted string literals."""

    def test_double_and_single_quotes(self):
        assert tokenize('"circle"')[0] == Token(TokenType.STRING, "circle", 0)
        assert tokenize("'square'")[0] == Token(TokenType.STRING, "square", 0)

    def test_other_quote_inside_string(self):
        assert tokenize("\"it's\"")[0].value == "it's"

    def test_escape_sequences(self):
        assert tokenize(r'"a\"b\\c\nd"')[0].value == 'a"b\\c\nd'

    def test_semicolon_inside_string(self):
        tokens = tokenize('"a;b"')
        assert tokens[0].value == "a;b"
        assert len(tokens) == 2

    def test_unterminated_string_is_rejected(self):
        with pytest.raises(LexError) as exc_info:
            tokenize('name("abc')
        assert exc_info.value.position == 5


class TestLexErrors:
    """Unrecognized characters are rejected, never skipped."""

    @pytest.mark.parametrize("text,position", [("a @ b", 2), ("f(x: 1)#", 7), ("$", 0)])
    def test_unrecognized_character(self, text, position):
        with pytest.raises(LexError) as exc_info:
            tokenize(text)
        assert exc_info.value.position == position
        assert exc_info.value.character == text[position]


class TestTokenCountBound:
    """The token sequence never exceeds input length + 1."""

    @pytest.mark.parametrize(
        "text", ["", "a", "(((", 'f(a: "x", b: 1.5)', "a;b;c", "x->y"]
    )
    def test_bound(self, text):
        tokens = tokenize(text)
        assert len(tokens) <= len(text) + 1
        assert tokens[-1].type is TokenType.END
        assert sum(t.type is TokenType.END for t in tokens) == 1
