"""
Execution context for SceneScript commands.

The context is session-scoped state shared by every invocation run against it:
a flat variable mapping and an optional active scene id. Built-in commands keep
scene elements in the variable mapping under ``element.<id>.<property>`` keys.
"""

from collections.abc import Iterator

from scenescript.core.types import Value

ELEMENT_PREFIX = "element"


def element_key(element_id: str, prop: str) -> str:
    """Return the variable key holding one property of an element."""
    return f"{ELEMENT_PREFIX}.{element_id}.{prop}"


def element_prefix(element_id: str) -> str:
    return f"{ELEMENT_PREFIX}.{element_id}."


class CommandContext:
    """Mutable state shared across invocations within one session.

    Variables persist until removed or cleared by the owner; nothing is reset
    between invocations.
    """

    def __init__(self, scene_id: str | None = None):
        self._variables: dict[str, Value] = {}
        self._scene_id = scene_id

    def set_variable(self, name: str, value: Value) -> None:
        self._variables[name] = value

    def get_variable(self, name: str, default: Value = None) -> Value:
        """
        Get a variable's value.

        A stored null and an absent variable both return ``default``; use
        ``has_variable`` to tell them apart.
        """
        return self._variables.get(name, default)

    def has_variable(self, name: str) -> bool:
        return name in self._variables

    def remove_variable(self, name: str) -> bool:
        """
        Remove one variable.

        Returns:
            True if the variable existed
        """
        if name in self._variables:
            del self._variables[name]
            return True
        return False

    def remove_prefix(self, prefix: str) -> int:
        """
        Remove every variable whose name starts with prefix.

        Returns:
            Number of variables removed
        """
        doomed = [name for name in self._variables if name.startswith(prefix)]
        for name in doomed:
            del self._variables[name]
        return len(doomed)

    def variable_names(self, prefix: str = "") -> Iterator[str]:
        return (name for name in list(self._variables) if name.startswith(prefix))

    def clear_variables(self) -> None:
        self._variables.clear()

    @property
    def scene_id(self) -> str | None:
        return self._scene_id

    def set_scene_id(self, scene_id: str) -> None:
        self._scene_id = scene_id

    def clear_scene_id(self) -> None:
        self._scene_id = None

    # Element helpers used by the built-in commands

    def has_element(self, element_id: str) -> bool:
        return element_key(element_id, "type") in self._variables

    def element_ids(self) -> list[str]:
        """List ids of existing elements."""
        ids = []
        for name in self._variables:
            parts = name.split(".")
            if len(parts) >= 3 and parts[0] == ELEMENT_PREFIX and parts[-1] == "type":
                ids.append(".".join(parts[1:-1]))
        return ids

    def element_properties(self, element_id: str) -> dict[str, Value]:
        """Return a snapshot of an element's properties keyed by property name."""
        prefix = element_prefix(element_id)
        return {
            name[len(prefix) :]: value
            for name, value in self._variables.items()
            if name.startswith(prefix)
        }
