"""
Registry for SceneScript commands.

The registry owns the mapping from command name to command instance. It is
built and populated by its owner and handed to the executor; there is no
global registry.
"""

import logging
from collections.abc import Iterator
from typing import Any

from scenescript.commands.base import SceneCommand

logger = logging.getLogger(__name__)


class CommandRegistry:
    """Registry mapping command names to commands.

    Commands are stored under the name they report. Registering a second command
    under an existing name replaces the first (last write wins). The registry
    keeps ownership; lookups hand out shared references.
    """

    def __init__(self, commands: list[SceneCommand] | None = None):
        self._commands: dict[str, SceneCommand] = {}
        for command in commands or []:
            self.register(command)

    def register(self, command: SceneCommand) -> None:
        """
        Register a command under its own name.

        Params:
            command: Command instance to store
        """
        name = command.get_name()
        if name in self._commands:
            logger.debug(
                "Replacing command '%s' (%s -> %s)",
                name,
                type(self._commands[name]).__name__,
                type(command).__name__,
            )
        self._commands[name] = command

    def unregister(self, name: str) -> bool:
        """
        Remove a command.

        Returns:
            True if a command was removed, False if none was registered
        """
        return self._commands.pop(name, None) is not None

    def get(self, name: str) -> SceneCommand | None:
        """
        Get a command by name.

        Returns:
            The registered command, or None if the name is unknown
        """
        return self._commands.get(name)

    def has(self, name: str) -> bool:
        return name in self._commands

    def list_names(self) -> list[str]:
        """List registered command names, each exactly once."""
        return list(self._commands)

    def clear(self) -> None:
        self._commands.clear()

    def describe(self) -> list[dict[str, Any]]:
        """Export the schemas of all registered commands."""
        return [command.describe() for command in self._commands.values()]

    def __contains__(self, name: object) -> bool:
        return name in self._commands

    def __len__(self) -> int:
        return len(self._commands)

    def __iter__(self) -> Iterator[SceneCommand]:
        return iter(list(self._commands.values()))
