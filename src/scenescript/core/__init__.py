"""
Core value model and type definitions for SceneScript.
"""

from scenescript.core.types import ParameterMap, Value, ValueType
from scenescript.core.values import (
    format_value,
    from_bool,
    from_number,
    from_string,
    matches_type,
    to_bool,
    to_number,
    to_string,
    to_value,
    type_name,
)

__all__ = [
    "ParameterMap",
    "Value",
    "ValueType",
    "format_value",
    "from_bool",
    "from_number",
    "from_string",
    "matches_type",
    "to_bool",
    "to_number",
    "to_string",
    "to_value",
    "type_name",
]
