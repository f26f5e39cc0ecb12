"""
SceneScript command interface, validation, registry and built-in commands.
"""

from scenescript.commands.base import CommandResult, Parameter, SceneCommand, format_help
from scenescript.commands.builtin import (
    BUILTIN_COMMANDS,
    CreateElementCommand,
    DeleteElementCommand,
    GetPropertyCommand,
    SetPropertyCommand,
    TransformCommand,
    create_default_registry,
)
from scenescript.commands.registry import CommandRegistry
from scenescript.commands.validation import check_parameters, fill_defaults

__all__ = [
    "BUILTIN_COMMANDS",
    "CommandRegistry",
    "CommandResult",
    "CreateElementCommand",
    "DeleteElementCommand",
    "GetPropertyCommand",
    "Parameter",
    "SceneCommand",
    "SetPropertyCommand",
    "TransformCommand",
    "check_parameters",
    "create_default_registry",
    "fill_defaults",
    "format_help",
]
