"""
Exception classes for SceneScript processing.

This module defines specific exception types for the error conditions that can
occur while lexing, parsing, validating and executing commands. They are raised
internally and converted into failing command results at the public API.
"""

from dataclasses import dataclass
from enum import Enum


class ErrorKind(Enum):
    """Category of a failure reported through a command result."""

    LEX = "lex"
    SYNTAX = "syntax"
    UNKNOWN_COMMAND = "unknown_command"
    VALIDATION = "validation"
    EXECUTION = "execution"


@dataclass
class ErrorContext:
    """
    Source location information for error messages.

    Params:
        command_text: The command text that caused the error
        position: Character offset of the offending input within command_text
    """

    command_text: str | None = None
    position: int | None = None

    def format_location(self) -> str:
        """
        Format the location as the command line with a caret under the offset.

        Returns:
            Formatted location string, empty when nothing is known
        """
        lines = []

        if self.command_text is not None:
            lines.append(f"  command: {self.command_text}")
            if self.position is not None:
                caret_offset = len("  command: ") + self.position
                lines.append(" " * caret_offset + "^")
        elif self.position is not None:
            lines.append(f"  at offset {self.position}")

        return "\n".join(lines)


class SceneScriptError(Exception):
    """Base exception for all SceneScript errors."""

    kind: ErrorKind = ErrorKind.EXECUTION


class LexError(SceneScriptError):
    """Raised when the input contains a character no token rule accepts."""

    kind = ErrorKind.LEX

    def __init__(self, position: int, character: str, reason: str | None = None):
        """
        Initialize the exception.

        Params:
            position: Offset of the offending character
            character: The offending character
            reason: Optional explanation replacing the default message
        """
        self.position = position
        self.character = character
        message = reason or f"Unexpected character {character!r}"
        super().__init__(f"{message} at offset {position}")


class CommandSyntaxError(SceneScriptError):
    """Raised when a token sequence does not form a well-shaped invocation."""

    kind = ErrorKind.SYNTAX

    def __init__(self, message: str, position: int | None = None):
        """
        Initialize the exception.

        Params:
            message: Description of the malformed shape
            position: Offset of the token where parsing stopped
        """
        self.position = position
        if position is not None:
            message = f"{message} at offset {position}"
        super().__init__(message)


class UnknownCommandError(SceneScriptError):
    """Raised when an invocation names a command the registry does not hold."""

    kind = ErrorKind.UNKNOWN_COMMAND

    def __init__(self, command_name: str):
        """
        Initialize the exception.

        Params:
            command_name: The unresolved command name
        """
        self.command_name = command_name
        super().__init__(f"Unknown command '{command_name}'")


class ParameterValidationError(SceneScriptError):
    """Raised when supplied parameters do not satisfy a command's schema."""

    kind = ErrorKind.VALIDATION

    def __init__(self, command_name: str, parameter: str, reason: str):
        """
        Initialize the exception.

        Params:
            command_name: Command whose schema was violated
            parameter: Offending parameter name
            reason: Why the parameter is invalid
        """
        self.command_name = command_name
        self.parameter = parameter
        self.reason = reason
        super().__init__(f"Parameter '{parameter}' of '{command_name}' {reason}")


class CommandExecutionError(SceneScriptError):
    """Raised by a command when its domain operation cannot be carried out."""

    kind = ErrorKind.EXECUTION

    def __init__(self, command_name: str, reason: str):
        """
        Initialize the exception.

        Params:
            command_name: Command that failed
            reason: Description of the domain failure
        """
        self.command_name = command_name
        self.reason = reason
        super().__init__(f"{command_name}: {reason}")
