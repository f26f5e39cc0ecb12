"""
SceneScript - a small embedded command language for scripting scene elements.

Command text is tokenized, parsed into invocations with named parameters,
validated against each command's parameter schema and dispatched to a
registered command that mutates an execution context.
"""

from importlib.metadata import version

from scenescript.commands import (
    CommandRegistry,
    CommandResult,
    Parameter,
    SceneCommand,
    create_default_registry,
)
from scenescript.execution import CommandContext, CommandExecutor, ExecutorConfig
from scenescript.parsing import ParsedInvocation, parse_command, parse_commands, tokenize

__version__ = version("scenescript")

__all__ = [
    "__version__",
    "CommandContext",
    "CommandExecutor",
    "CommandRegistry",
    "CommandResult",
    "ExecutorConfig",
    "Parameter",
    "ParsedInvocation",
    "SceneCommand",
    "create_default_registry",
    "parse_command",
    "parse_commands",
    "tokenize",
]
