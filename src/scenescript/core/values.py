"""
Value model for the SceneScript command language.

Values are plain Python objects: ``None`` (null), ``float`` (number), ``str``
(text) and ``bool``. The helpers here classify values and perform explicit,
non-raising conversions between the four kinds. A failed conversion returns
``None`` rather than raising.
"""

import math
import re

from scenescript.core.types import Value

# Whole-text decimal numeral: optional sign, digits with an optional fraction
DECIMAL_PATTERN = re.compile(r"[+-]?(?:\d+(?:\.\d*)?|\.\d+)")

TRUE_LITERAL = "true"
FALSE_LITERAL = "false"
NULL_LITERAL = "null"


def to_value(obj: object) -> Value:
    """
    Normalize a Python object into a SceneScript value.

    Params:
        obj: Object to normalize; ``int`` is widened to ``float``

    Returns:
        The equivalent value

    Raises:
        TypeError: If the object is not representable as a value
    """
    if obj is None or isinstance(obj, (bool, str, float)):
        return obj
    if isinstance(obj, int):
        return float(obj)
    raise TypeError(f"Cannot represent {type(obj).__name__} as a value: {obj!r}")


def type_name(value: Value) -> str:
    """Return the kind of a value: "null", "number", "string" or "bool"."""
    if value is None:
        return "null"
    # bool must be checked before numbers, it is an int subclass
    if isinstance(value, bool):
        return "bool"
    if isinstance(value, (int, float)):
        return "number"
    if isinstance(value, str):
        return "string"
    raise TypeError(f"Not a value: {value!r}")


def matches_type(value: Value, declared: str) -> bool:
    """
    Check whether a value's intrinsic kind satisfies a declared parameter type.

    No coercion is attempted: the text "5" does not match "number".

    Params:
        value: Value to check
        declared: One of "number", "string", "bool" or "any"

    Returns:
        True if declared is "any" or equals the value's kind
    """
    if declared == "any":
        return True
    return type_name(value) == declared


def format_number(number: float) -> str:
    """Format a number without insignificant trailing zeros."""
    if math.isfinite(number) and float(number).is_integer():
        return str(int(number))
    return repr(float(number))


def to_string(value: Value) -> str | None:
    """
    Convert a value to text.

    Returns:
        Text form of the value, or None for null
    """
    if value is None:
        return None
    if isinstance(value, bool):
        return TRUE_LITERAL if value else FALSE_LITERAL
    if isinstance(value, (int, float)):
        return format_number(value)
    return value


def to_number(value: Value) -> float | None:
    """
    Convert a value to a number.

    Text converts only when the entire text is a decimal numeral. Booleans
    convert to 1.0 and 0.0.

    Returns:
        The number, or None when the value has no numeric reading
    """
    if value is None:
        return None
    if isinstance(value, bool):
        return 1.0 if value else 0.0
    if isinstance(value, (int, float)):
        return float(value)
    if not DECIMAL_PATTERN.fullmatch(value):
        return None
    return float(value)


def to_bool(value: Value) -> bool | None:
    """
    Convert a value to a boolean.

    Numbers are true when nonzero. Only the exact texts "true" and "false"
    convert from text.

    Returns:
        The boolean, or None when the value has no boolean reading
    """
    if value is None:
        return None
    if isinstance(value, bool):
        return value
    if isinstance(value, (int, float)):
        return value != 0
    if value == TRUE_LITERAL:
        return True
    if value == FALSE_LITERAL:
        return False
    return None


def from_string(text: str) -> Value:
    """Create a text value."""
    return str(text)


def from_number(number: float) -> Value:
    """Create a numeric value."""
    return float(number)


def from_bool(flag: bool) -> Value:
    """Create a boolean value."""
    return bool(flag)


def format_value(value: Value) -> str:
    """Render a value for messages: null as ``null`` and text quoted."""
    if value is None:
        return NULL_LITERAL
    if isinstance(value, str):
        return f'"{value}"'
    return to_string(value)
