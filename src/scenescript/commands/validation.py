"""
Schema-driven parameter validation for SceneScript commands.

This module contains the default validation and default-filling contract that
every command inherits unless it overrides them.
"""

from collections.abc import Iterable

from scenescript.commands.base import Parameter
from scenescript.core.types import ParameterMap, ReadOnlyParameterMap
from scenescript.core.values import matches_type, type_name
from scenescript.exceptions.core import ParameterValidationError


def check_parameters(
    command_name: str,
    schema: Iterable[Parameter],
    params: ReadOnlyParameterMap,
    strict: bool = False,
) -> None:
    """
    Validate supplied parameters against a command's schema.

    Required parameters must be present and every supplied parameter whose
    declared type is not "any" must match it. Names absent from the schema are
    accepted unless strict is set.

    Params:
        command_name: Command being validated, for error messages
        schema: Declared parameters of the command
        params: Supplied parameters
        strict: Reject parameter names that are not in the schema

    Raises:
        ParameterValidationError: On the first violation found
    """
    declared = {}
    for parameter in schema:
        declared[parameter.name] = parameter

        if parameter.name not in params:
            if parameter.required:
                raise ParameterValidationError(command_name, parameter.name, "is required")
            continue

        value = params[parameter.name]
        if parameter.type != "any" and not matches_type(value, parameter.type):
            raise ParameterValidationError(
                command_name,
                parameter.name,
                f"must be {parameter.type}, got {type_name(value)}",
            )

    if strict:
        unknown = [name for name in params if name not in declared]
        if unknown:
            raise ParameterValidationError(
                command_name, unknown[0], "is not a declared parameter"
            )


def fill_defaults(schema: Iterable[Parameter], params: ReadOnlyParameterMap) -> ParameterMap:
    """
    Return a copy of params with omitted optional parameters set to their defaults.

    Params:
        schema: Declared parameters of the command
        params: Supplied parameters

    Returns:
        New parameter mapping; supplied values are never replaced
    """
    filled = dict(params)
    for parameter in schema:
        if parameter.name not in filled and not parameter.required:
            filled[parameter.name] = parameter.default
    return filled
