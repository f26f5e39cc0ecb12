"""
Parser for SceneScript command invocations.

This module provides a recursive-descent parser over the lexer's token stream.
It recognizes the invocation grammar::

    invocation = identifier "(" [ argument { "," argument } ] ")" ;
    argument   = identifier ( ":" | "=" ) value ;
    value      = number | string | boolean | "null" ;

Parsing never raises to the caller: malformed input yields a ParsedInvocation
whose ``valid`` flag is False and whose ``error`` describes the problem.
Whether the named command exists is not checked here.
"""

import logging
from dataclasses import dataclass, field

from scenescript.core.types import ParameterMap, Value
from scenescript.core.values import format_value
from scenescript.exceptions.core import (
    CommandSyntaxError,
    ErrorContext,
    ErrorKind,
    LexError,
    SceneScriptError,
)
from scenescript.parsing.lexer import QUOTE_CHARS, Token, TokenType, tokenize

logger = logging.getLogger(__name__)

STATEMENT_SEPARATOR = ";"

# Tokens that close an argument; seeing one where a value belongs means it is missing
VALUE_TERMINATORS = frozenset(
    {TokenType.CLOSE_PAREN, TokenType.COMMA, TokenType.SEMICOLON, TokenType.END}
)


@dataclass
class ParsedInvocation:
    """
    Represents one parsed command invocation.

    Params:
        command_name: Name of the invoked command
        parameters: Mapping from parameter name to parsed value
        valid: False if the text did not form a well-shaped invocation
        error: Diagnostic message when the invocation is invalid
        error_kind: LEX or SYNTAX when the invocation is invalid
        source: The command text this invocation was parsed from
    """

    command_name: str = ""
    parameters: ParameterMap = field(default_factory=dict)
    valid: bool = False
    error: str | None = None
    error_kind: ErrorKind | None = None
    source: str = ""

    def __str__(self) -> str:
        """Return a string representation of the invocation."""
        if not self.valid:
            return f"<invalid: {self.error}>"
        args = ", ".join(
            f"{name}: {format_value(value)}" for name, value in self.parameters.items()
        )
        return f"{self.command_name}({args})"


def split_statements(text: str) -> list[str]:
    """
    Split text on semicolons that are not inside string literals.

    Empty and whitespace-only segments are dropped, so a trailing semicolon is
    optional.

    Params:
        text: Batch command text

    Returns:
        Statement texts in source order, stripped of surrounding whitespace
    """
    segments = []
    current = []
    quote_char = None
    escaped = False

    for char in text:
        if quote_char is not None:
            current.append(char)
            if escaped:
                escaped = False
            elif char == "\\":
                escaped = True
            elif char == quote_char:
                quote_char = None
            continue

        if char in QUOTE_CHARS:
            quote_char = char
            current.append(char)
        elif char == STATEMENT_SEPARATOR:
            segments.append("".join(current))
            current = []
        else:
            current.append(char)

    segments.append("".join(current))
    return [segment.strip() for segment in segments if segment.strip()]


class CommandParser:
    """
    Recursive-descent parser for command invocations.

    A single forward cursor walks the token list with one token of lookahead;
    the parser never backtracks.

    Params:
        lenient_values: When True, a value token that is not a literal degrades
            to null; when False it is a syntax error
    """

    def __init__(self, lenient_values: bool = True):
        self.lenient_values = lenient_values
        self.tokens: list[Token] = []
        self.current = 0

    def parse_command(self, text: str) -> ParsedInvocation:
        """
        Parse a single command invocation.

        Params:
            text: Command text such as ``name(a: 1, b: "x")``

        Returns:
            ParsedInvocation, with valid set to False on lexing or syntax errors
        """
        try:
            self.tokens = tokenize(text)
        except LexError as e:
            return self._invalid(text, e)
        self.current = 0

        try:
            name, parameters = self._parse_invocation()
            # A single trailing separator is tolerated
            self.match(TokenType.SEMICOLON)
            if not self.check(TokenType.END):
                token = self.peek()
                raise CommandSyntaxError(
                    f"Unexpected {token.value!r} after invocation", token.position
                )
        except CommandSyntaxError as e:
            return self._invalid(text, e)

        return ParsedInvocation(
            command_name=name, parameters=parameters, valid=True, source=text
        )

    def parse_commands(self, text: str) -> list[ParsedInvocation]:
        """
        Parse a semicolon-separated batch of invocations.

        Each statement is parsed independently; a malformed statement yields an
        invalid ParsedInvocation and parsing continues with the next one.

        Params:
            text: Batch command text

        Returns:
            One ParsedInvocation per non-empty statement, in source order
        """
        return [self.parse_command(segment) for segment in split_statements(text)]

    # Cursor primitives

    def peek(self, offset: int = 0) -> Token:
        index = min(self.current + offset, len(self.tokens) - 1)
        return self.tokens[index]

    def advance(self) -> Token:
        token = self.peek()
        if token.type is not TokenType.END:
            self.current += 1
        return token

    def check(self, token_type: TokenType) -> bool:
        return self.peek().type is token_type

    def match(self, token_type: TokenType) -> bool:
        if self.check(token_type):
            self.advance()
            return True
        return False

    def expect(self, token_type: TokenType, description: str) -> Token:
        """Consume a token of the given type or raise a syntax error."""
        if self.check(token_type):
            return self.advance()
        token = self.peek()
        found = "end of input" if token.type is TokenType.END else repr(token.value)
        raise CommandSyntaxError(f"Expected {description}, found {found}", token.position)

    # Grammar rules

    def _parse_invocation(self) -> tuple[str, ParameterMap]:
        name = self.parse_identifier("command name")
        self.expect(TokenType.OPEN_PAREN, "'(' after command name")

        parameters: ParameterMap = {}
        if not self.check(TokenType.CLOSE_PAREN):
            while True:
                self._parse_argument(parameters)
                if not self.match(TokenType.COMMA):
                    break

        self.expect(TokenType.CLOSE_PAREN, "')' to close argument list")
        return name, parameters

    def _parse_argument(self, parameters: ParameterMap) -> None:
        name_token = self.peek()
        name = self.parse_identifier("parameter name")
        if not (self.match(TokenType.COLON) or self.match(TokenType.EQUALS)):
            token = self.peek()
            raise CommandSyntaxError(
                f"Expected ':' or '=' after parameter '{name}'", token.position
            )
        if name in parameters:
            raise CommandSyntaxError(
                f"Duplicate parameter '{name}'", name_token.position
            )
        parameters[name] = self.parse_value(name)

    def parse_identifier(self, description: str = "identifier") -> str:
        return self.expect(TokenType.IDENTIFIER, description).value

    def parse_number(self) -> float:
        return float(self.expect(TokenType.NUMBER, "number").value)

    def parse_string(self) -> str:
        return self.expect(TokenType.STRING, "string").value

    def parse_value(self, parameter: str = "") -> Value:
        """
        Parse a value, dispatching on the current token's kind.

        Params:
            parameter: Name of the parameter being parsed, for diagnostics

        Returns:
            The parsed value; tokens that are not literals degrade to null
            when lenient_values is set

        Raises:
            CommandSyntaxError: If the value is missing, or not a literal in
                strict mode
        """
        token = self.peek()

        if token.type is TokenType.NUMBER:
            return self.parse_number()
        if token.type is TokenType.STRING:
            return self.parse_string()
        if token.type is TokenType.MINUS and self.peek(1).type is TokenType.NUMBER:
            self.advance()
            return -self.parse_number()
        if token.type is TokenType.KEYWORD:
            self.advance()
            if token.value == "true":
                return True
            if token.value == "false":
                return False
            return None

        if token.type in VALUE_TERMINATORS:
            raise CommandSyntaxError(
                f"Expected value for parameter '{parameter}'", token.position
            )
        if not self.lenient_values:
            raise CommandSyntaxError(
                f"Invalid value {token.value!r} for parameter '{parameter}'",
                token.position,
            )

        self.advance()
        logger.debug(
            "Value token %r for parameter '%s' is not a literal, using null",
            token.value,
            parameter,
        )
        return None

    def _invalid(self, text: str, error: SceneScriptError) -> ParsedInvocation:
        position = getattr(error, "position", None)
        location = ErrorContext(command_text=text, position=position).format_location()
        message = f"{error}\n{location}" if location else str(error)
        logger.debug("Failed to parse %r: %s", text, error)
        return ParsedInvocation(
            valid=False,
            error=message,
            error_kind=error.kind,
            source=text,
        )


def parse_command(text: str, lenient_values: bool = True) -> ParsedInvocation:
    """
    Convenience function to parse a single command string.

    Params:
        text: The command string to parse
        lenient_values: Whether non-literal value tokens degrade to null

    Returns:
        ParsedInvocation, invalid when the text is malformed
    """
    parser = CommandParser(lenient_values=lenient_values)
    return parser.parse_command(text)


def parse_commands(text: str, lenient_values: bool = True) -> list[ParsedInvocation]:
    """
    Convenience function to parse a semicolon-separated batch.

    Params:
        text: The batch text to parse
        lenient_values: Whether non-literal value tokens degrade to null

    Returns:
        One ParsedInvocation per statement
    """
    parser = CommandParser(lenient_values=lenient_values)
    return parser.parse_commands(text)
