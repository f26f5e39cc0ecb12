"""
SceneScript exception classes.

This package provides all exception types used throughout SceneScript for
consistent error handling and reporting.
"""

from scenescript.exceptions.core import (
    CommandExecutionError,
    CommandSyntaxError,
    ErrorContext,
    ErrorKind,
    LexError,
    ParameterValidationError,
    SceneScriptError,
    UnknownCommandError,
)

__all__ = [
    "SceneScriptError",
    "CommandExecutionError",
    "CommandSyntaxError",
    "ErrorContext",
    "ErrorKind",
    "LexError",
    "ParameterValidationError",
    "UnknownCommandError",
]
