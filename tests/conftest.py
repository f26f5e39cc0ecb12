"""
Shared test fixtures for the scenescript test suite.
"""

import pytest

from scenescript.commands.builtin import create_default_registry
from scenescript.execution.context import CommandContext
from scenescript.execution.executor import CommandExecutor


@pytest.fixture
def registry():
    """Registry holding the built-in commands."""
    return create_default_registry()


@pytest.fixture
def context():
    """Fresh execution context without an active scene."""
    return CommandContext()


@pytest.fixture
def executor(registry):
    """Executor over the built-in registry with default configuration."""
    return CommandExecutor(registry)
