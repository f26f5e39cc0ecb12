"""
Lexer for the SceneScript command language.

Converts raw command text into a finite token sequence terminated by an END
token. Characters that no token rule accepts are rejected with a LexError
instead of being skipped.
"""

import logging
from enum import Enum

from attrs import frozen

from scenescript.exceptions.core import LexError

logger = logging.getLogger(__name__)


class TokenType(Enum):
    """Kind of a lexical token."""

    END = "end"
    IDENTIFIER = "identifier"
    NUMBER = "number"
    STRING = "string"
    OPEN_PAREN = "("
    CLOSE_PAREN = ")"
    OPEN_BRACE = "{"
    CLOSE_BRACE = "}"
    COMMA = ","
    COLON = ":"
    EQUALS = "="
    SEMICOLON = ";"
    ARROW = "->"
    PLUS = "+"
    MINUS = "-"
    MULTIPLY = "*"
    DIVIDE = "/"
    KEYWORD = "keyword"


@frozen
class Token:
    type: TokenType
    value: str
    position: int = 0


KEYWORDS = frozenset({"true", "false", "null"})

SINGLE_CHAR_TOKENS = {
    "(": TokenType.OPEN_PAREN,
    ")": TokenType.CLOSE_PAREN,
    "{": TokenType.OPEN_BRACE,
    "}": TokenType.CLOSE_BRACE,
    ",": TokenType.COMMA,
    ":": TokenType.COLON,
    "=": TokenType.EQUALS,
    ";": TokenType.SEMICOLON,
    "+": TokenType.PLUS,
    "-": TokenType.MINUS,
    "*": TokenType.MULTIPLY,
    "/": TokenType.DIVIDE,
}

QUOTE_CHARS = ('"', "'")

ESCAPES = {"n": "\n", "t": "\t", "\\": "\\", '"': '"', "'": "'"}


def is_identifier_start(char: str) -> bool:
    return char == "_" or (char.isascii() and char.isalpha())


def is_identifier_char(char: str) -> bool:
    return is_identifier_start(char) or is_digit(char)


def is_digit(char: str) -> bool:
    return "0" <= char <= "9"


def get_keyword_type(word: str) -> TokenType:
    """Classify an identifier spelling as KEYWORD or IDENTIFIER."""
    return TokenType.KEYWORD if word in KEYWORDS else TokenType.IDENTIFIER


class Tokenizer:
    """Single-pass scanner over one input string."""

    def __init__(self, text: str):
        self.text = text
        self.pos = 0

    def tokenize(self) -> list[Token]:
        """
        Scan the whole input.

        Returns:
            Tokens in source order, always ending with exactly one END token

        Raises:
            LexError: On an unrecognized character or an unterminated string
        """
        tokens = []
        text = self.text

        while True:
            self._skip_whitespace()
            if self.pos >= len(text):
                break

            start = self.pos
            char = text[start]

            if is_identifier_start(char):
                tokens.append(self._scan_word())
            elif is_digit(char):
                tokens.append(self._scan_number())
            elif char in QUOTE_CHARS:
                tokens.append(self._scan_string())
            elif char == "-" and text.startswith("->", start):
                self.pos += 2
                tokens.append(Token(TokenType.ARROW, "->", start))
            elif char in SINGLE_CHAR_TOKENS:
                self.pos += 1
                tokens.append(Token(SINGLE_CHAR_TOKENS[char], char, start))
            else:
                raise LexError(start, char)

        tokens.append(Token(TokenType.END, "", len(text)))
        logger.debug("Tokenized %d characters into %d tokens", len(text), len(tokens))
        return tokens

    def _skip_whitespace(self) -> None:
        while self.pos < len(self.text) and self.text[self.pos].isspace():
            self.pos += 1

    def _scan_word(self) -> Token:
        start = self.pos
        while self.pos < len(self.text) and is_identifier_char(self.text[self.pos]):
            self.pos += 1
        word = self.text[start : self.pos]
        return Token(get_keyword_type(word), word, start)

    def _scan_number(self) -> Token:
        start = self.pos
        seen_point = False
        while self.pos < len(self.text):
            char = self.text[self.pos]
            if is_digit(char):
                self.pos += 1
            elif char == "." and not seen_point:
                seen_point = True
                self.pos += 1
            else:
                break
        return Token(TokenType.NUMBER, self.text[start : self.pos], start)

    def _scan_string(self) -> Token:
        start = self.pos
        quote = self.text[start]
        self.pos += 1
        chars = []

        while self.pos < len(self.text):
            char = self.text[self.pos]
            if char == quote:
                self.pos += 1
                return Token(TokenType.STRING, "".join(chars), start)
            if char == "\\" and self.pos + 1 < len(self.text):
                escaped = self.text[self.pos + 1]
                # Unknown escapes are kept verbatim
                chars.append(ESCAPES.get(escaped, "\\" + escaped))
                self.pos += 2
                continue
            chars.append(char)
            self.pos += 1

        raise LexError(start, quote, reason="Unterminated string literal")


def tokenize(text: str) -> list[Token]:
    """
    Convenience function to tokenize a command string.

    Params:
        text: Raw command text

    Returns:
        Token sequence terminated by an END token

    Raises:
        LexError: If the text contains a character no token rule accepts
    """
    return Tokenizer(text).tokenize()
