"""
Command interface for SceneScript.

A command declares its parameter schema and implements ``execute``. Validation
and default-filling have schema-driven default implementations that concrete
commands may override.
"""

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any

from attrs import frozen
from inflection import underscore
from pydantic import BaseModel, ConfigDict, field_validator

from scenescript.core.types import ParameterMap, ReadOnlyParameterMap, Value, ValueType
from scenescript.core.values import format_value
from scenescript.exceptions.core import ErrorKind, SceneScriptError

if TYPE_CHECKING:
    from scenescript.execution.context import CommandContext


class Parameter(BaseModel):
    """
    Declared parameter of a command.

    Params:
        name: Parameter name, unique within one command's schema
        type: Declared type: "number", "string", "bool" or "any"
        required: Whether the parameter must be supplied
        default: Value used when an optional parameter is omitted
        description: Human-readable description for help text
    """

    model_config = ConfigDict(frozen=True)

    name: str
    type: ValueType = "any"
    required: bool = True
    default: float | bool | str | None = None
    description: str = ""

    @field_validator("name")
    @classmethod
    def _check_name(cls, value: str) -> str:
        if not value.isidentifier():
            raise ValueError(f"Invalid parameter name: {value!r}")
        return value


@frozen
class CommandResult:
    """
    Outcome of validating or executing a command.

    Params:
        success: Whether the operation succeeded
        message: Human-readable message
        return_value: Optional value produced by the command
        error: Failure category when success is False
    """

    success: bool = True
    message: str = ""
    return_value: Value = None
    error: ErrorKind | None = None

    @classmethod
    def ok(cls, message: str = "", value: Value = None) -> "CommandResult":
        return cls(True, message, value)

    @classmethod
    def failure(cls, message: str, error: ErrorKind = ErrorKind.EXECUTION) -> "CommandResult":
        return cls(False, message, None, error)

    @classmethod
    def from_error(cls, error: SceneScriptError) -> "CommandResult":
        """Build a failing result from a SceneScript exception."""
        return cls.failure(str(error), error.kind)

    def __bool__(self) -> bool:
        return self.success


class SceneCommand(ABC):
    """
    Base class for commands.

    Subclasses provide ``description``, ``get_parameters`` and ``execute``. The
    command name defaults to the snake_case class name without a ``Command``
    suffix, so ``CreateElementCommand`` is invoked as ``create_element``.
    Instances are shared across invocations and must not keep per-call state.
    """

    name: str = ""
    description: str = ""

    def __init_subclass__(cls, **kwargs):
        super().__init_subclass__(**kwargs)
        if not cls.__dict__.get("name"):
            base = cls.__name__.removesuffix("Command")
            cls.name = underscore(base)

    def get_name(self) -> str:
        return self.name

    def get_description(self) -> str:
        return self.description

    @abstractmethod
    def get_parameters(self) -> list[Parameter]:
        """Return the declared parameter schema."""

    @abstractmethod
    def execute(
        self, params: ReadOnlyParameterMap, context: "CommandContext"
    ) -> CommandResult:
        """
        Run the command.

        Params:
            params: Validated parameters with defaults already applied
            context: Execution context to read and mutate

        Returns:
            Result of the operation

        Raises:
            CommandExecutionError: On a domain failure
        """

    def validate_parameters(self, params: ReadOnlyParameterMap) -> CommandResult:
        """
        Validate supplied parameters against the schema.

        Returns:
            Successful result, or a failing result naming the offending parameter
        """
        from scenescript.commands.validation import check_parameters

        try:
            check_parameters(self.name, self.get_parameters(), params)
        except SceneScriptError as e:
            return CommandResult.from_error(e)
        return CommandResult.ok()

    def apply_defaults(self, params: ReadOnlyParameterMap) -> ParameterMap:
        """Return a copy of params with omitted optional parameters filled in."""
        from scenescript.commands.validation import fill_defaults

        return fill_defaults(self.get_parameters(), params)

    def describe(self) -> dict[str, Any]:
        """Export the command's schema as plain data."""
        return {
            "name": self.name,
            "description": self.description,
            "parameters": [p.model_dump() for p in self.get_parameters()],
        }


def format_help(command: SceneCommand) -> str:
    """
    Render help text for a command from its schema.

    Params:
        command: Command to describe

    Returns:
        Multi-line help text with a usage line and one line per parameter
    """
    parameters = command.get_parameters()
    usage_args = ", ".join(
        f"{p.name}: {p.type}" if p.required else f"[{p.name}: {p.type}]"
        for p in parameters
    )
    lines = [f"{command.name}({usage_args})"]
    if command.description:
        lines.append(f"  {command.description}")
    for p in parameters:
        detail = "required" if p.required else f"default {format_value(p.default)}"
        lines.append(f"    {p.name} ({p.type}, {detail}): {p.description}")
    return "\n".join(lines)
