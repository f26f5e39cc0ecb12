"""
SceneScript parsing components.

This package provides the lexer and the invocation parser.
"""

from scenescript.parsing.lexer import Token, Tokenizer, TokenType, tokenize
from scenescript.parsing.parser import (
    CommandParser,
    ParsedInvocation,
    parse_command,
    parse_commands,
    split_statements,
)

__all__ = [
    "CommandParser",
    "ParsedInvocation",
    "Token",
    "TokenType",
    "Tokenizer",
    "parse_command",
    "parse_commands",
    "split_statements",
    "tokenize",
]
