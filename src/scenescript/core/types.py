"""
Core type definitions for the SceneScript command language.

This module contains the type aliases shared by the lexer, parser, command
layer and executor.
"""

from collections.abc import Mapping
from typing import Literal

# A value is exactly one of: null, number, text or boolean
Value = None | float | str | bool

ValueType = Literal["number", "string", "bool", "any"]

ParameterMap = dict[str, Value]

ReadOnlyParameterMap = Mapping[str, Value]

VALUE_TYPES: frozenset[str] = frozenset({"number", "string", "bool", "any"})
