"""
SceneScript execution components.

This package provides the execution context, executor configuration and the
executor that drives parsing, validation and dispatch.
"""

from scenescript.execution.config import ExecutorConfig
from scenescript.execution.context import CommandContext, element_key
from scenescript.execution.executor import CommandExecutor

__all__ = [
    "CommandContext",
    "CommandExecutor",
    "ExecutorConfig",
    "element_key",
]
