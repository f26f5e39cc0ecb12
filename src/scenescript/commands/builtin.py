"""
Built-in scene commands.

Elements are stored in the execution context under ``element.<id>.<property>``
keys. The element id is the name given at creation; an element exists while its
``type`` property is present.
"""

import logging

from scenescript.commands.base import CommandResult, Parameter, SceneCommand
from scenescript.commands.registry import CommandRegistry
from scenescript.core.types import ParameterMap, ReadOnlyParameterMap
from scenescript.core.values import format_value, to_number
from scenescript.exceptions.core import CommandExecutionError, ErrorKind
from scenescript.execution.context import CommandContext, element_key, element_prefix

logger = logging.getLogger(__name__)

TRANSFORM_OPERATIONS = ("move", "rotate", "scale")

AXES = ("x", "y", "z")


def _require_element(command: SceneCommand, context: CommandContext, element_id: str) -> None:
    if not context.has_element(element_id):
        raise CommandExecutionError(command.name, f"Element '{element_id}' does not exist")


def _check_key_part(
    command: SceneCommand, params: ReadOnlyParameterMap, parameter: str
) -> CommandResult:
    """Reject a parameter that cannot be used as one segment of a dotted variable key."""
    value = params[parameter]
    if not value or "." in value:
        return CommandResult.failure(
            f"Parameter '{parameter}' of '{command.name}' must be non-empty and contain no '.'",
            ErrorKind.VALIDATION,
        )
    return CommandResult.ok()


class CreateElementCommand(SceneCommand):
    description = "Create a new scene element"

    def get_parameters(self) -> list[Parameter]:
        return [
            Parameter(name="type", type="string", description="Element type"),
            Parameter(name="name", type="string", description="Element name"),
            Parameter(name="x", type="number", required=False, default=0.0, description="X coordinate"),
            Parameter(name="y", type="number", required=False, default=0.0, description="Y coordinate"),
        ]

    def validate_parameters(self, params: ReadOnlyParameterMap) -> CommandResult:
        result = super().validate_parameters(params)
        if not result:
            return result
        # Ids become part of dotted variable keys
        return _check_key_part(self, params, "name")

    def execute(self, params: ReadOnlyParameterMap, context: CommandContext) -> CommandResult:
        element_id = params["name"]
        if context.has_element(element_id):
            raise CommandExecutionError(self.name, f"Element '{element_id}' already exists")

        properties = {
            "type": params["type"],
            "name": element_id,
            "x": params["x"],
            "y": params["y"],
            "z": 0.0,
        }
        for axis in AXES:
            properties[f"rotation_{axis}"] = 0.0
            properties[f"scale_{axis}"] = 1.0
        if context.scene_id is not None:
            properties["scene"] = context.scene_id

        for prop, value in properties.items():
            context.set_variable(element_key(element_id, prop), value)

        return CommandResult.ok(f"Created {params['type']} '{element_id}'", element_id)


class DeleteElementCommand(SceneCommand):
    description = "Delete a scene element"

    def get_parameters(self) -> list[Parameter]:
        return [Parameter(name="id", type="string", description="Element ID")]

    def execute(self, params: ReadOnlyParameterMap, context: CommandContext) -> CommandResult:
        element_id = params["id"]
        _require_element(self, context, element_id)
        removed = context.remove_prefix(element_prefix(element_id))
        logger.debug("Deleted element '%s' (%d properties)", element_id, removed)
        return CommandResult.ok(f"Deleted element '{element_id}'", element_id)


class SetPropertyCommand(SceneCommand):
    description = "Set a property of a scene element"

    def get_parameters(self) -> list[Parameter]:
        return [
            Parameter(name="id", type="string", description="Element ID"),
            Parameter(name="property", type="string", description="Property name"),
            Parameter(name="value", type="any", description="Property value"),
        ]

    def validate_parameters(self, params: ReadOnlyParameterMap) -> CommandResult:
        result = super().validate_parameters(params)
        if not result:
            return result
        return _check_key_part(self, params, "property")

    def execute(self, params: ReadOnlyParameterMap, context: CommandContext) -> CommandResult:
        element_id = params["id"]
        prop = params["property"]
        _require_element(self, context, element_id)

        value = params["value"]
        context.set_variable(element_key(element_id, prop), value)
        return CommandResult.ok(f"Set {element_id}.{prop} = {format_value(value)}", value)


class GetPropertyCommand(SceneCommand):
    description = "Get a property of a scene element"

    def get_parameters(self) -> list[Parameter]:
        return [
            Parameter(name="id", type="string", description="Element ID"),
            Parameter(name="property", type="string", description="Property name"),
        ]

    def validate_parameters(self, params: ReadOnlyParameterMap) -> CommandResult:
        result = super().validate_parameters(params)
        if not result:
            return result
        return _check_key_part(self, params, "property")

    def execute(self, params: ReadOnlyParameterMap, context: CommandContext) -> CommandResult:
        element_id = params["id"]
        prop = params["property"]
        _require_element(self, context, element_id)

        key = element_key(element_id, prop)
        if not context.has_variable(key):
            raise CommandExecutionError(
                self.name, f"Element '{element_id}' has no property '{prop}'"
            )
        value = context.get_variable(key)
        return CommandResult.ok(f"{element_id}.{prop} = {format_value(value)}", value)


class TransformCommand(SceneCommand):
    """Move, rotate or scale an element.

    move adds x/y/z to the position, rotate adds x/y/z degrees to the rotation
    and scale multiplies the scale factors. Omitted scale factors default to 1.
    """

    description = "Apply transformation to an element"

    def get_parameters(self) -> list[Parameter]:
        return [
            Parameter(name="id", type="string", description="Element ID"),
            Parameter(
                name="operation",
                type="string",
                description="Transform operation (move, rotate, scale)",
            ),
            Parameter(name="x", type="number", required=False, default=0.0, description="X parameter"),
            Parameter(name="y", type="number", required=False, default=0.0, description="Y parameter"),
            Parameter(name="z", type="number", required=False, default=0.0, description="Z parameter"),
        ]

    def validate_parameters(self, params: ReadOnlyParameterMap) -> CommandResult:
        result = super().validate_parameters(params)
        if not result:
            return result
        operation = params["operation"]
        if operation not in TRANSFORM_OPERATIONS:
            return CommandResult.failure(
                f"Parameter 'operation' of '{self.name}' must be one of "
                f"{', '.join(TRANSFORM_OPERATIONS)}, got {format_value(operation)}",
                ErrorKind.VALIDATION,
            )
        return result

    def apply_defaults(self, params: ReadOnlyParameterMap) -> ParameterMap:
        if params.get("operation") != "scale":
            return super().apply_defaults(params)
        filled = dict(params)
        for axis in AXES:
            filled.setdefault(axis, 1.0)
        return filled

    def execute(self, params: ReadOnlyParameterMap, context: CommandContext) -> CommandResult:
        element_id = params["id"]
        operation = params["operation"]
        _require_element(self, context, element_id)

        # Read every axis before writing so a failure leaves the element untouched
        updates = {}
        for axis in AXES:
            amount = params[axis]
            if operation == "move":
                key = element_key(element_id, axis)
                updates[key] = self._number(context, key, 0.0) + amount
            elif operation == "rotate":
                key = element_key(element_id, f"rotation_{axis}")
                updates[key] = self._number(context, key, 0.0) + amount
            else:
                key = element_key(element_id, f"scale_{axis}")
                updates[key] = self._number(context, key, 1.0) * amount

        for key, value in updates.items():
            context.set_variable(key, value)

        x, y, z = (params[axis] for axis in AXES)
        return CommandResult.ok(
            f"Applied {operation}({format_value(x)}, {format_value(y)}, {format_value(z)}) "
            f"to '{element_id}'"
        )

    def _number(self, context: CommandContext, key: str, fallback: float) -> float:
        if not context.has_variable(key):
            return fallback
        number = to_number(context.get_variable(key))
        if number is None:
            raise CommandExecutionError(
                self.name, f"Property '{key}' is not numeric and cannot be transformed"
            )
        return number


BUILTIN_COMMANDS: tuple[type[SceneCommand], ...] = (
    CreateElementCommand,
    DeleteElementCommand,
    SetPropertyCommand,
    GetPropertyCommand,
    TransformCommand,
)


def create_default_registry() -> CommandRegistry:
    """Create a registry holding one instance of every built-in command."""
    return CommandRegistry([command_class() for command_class in BUILTIN_COMMANDS])
