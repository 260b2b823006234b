"""
Value classification helpers used by the matcher.
"""

import enum
import math
import numbers
from typing import Any, Callable


def is_array(value: Any) -> bool:
    return isinstance(value, list)


def is_object(value: Any) -> bool:
    """Plain object check: a dict, never a list or None."""
    return isinstance(value, dict)


def is_nan(value: Any) -> bool:
    return isinstance(value, float) and math.isnan(value)


def is_number(value: Any) -> bool:
    """Real numbers excluding bool and NaN. Infinities count as numbers."""
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        return False
    return not is_nan(value)


def is_boolean(value: Any) -> bool:
    return isinstance(value, bool)


def is_string(value: Any) -> bool:
    return isinstance(value, str)


def is_function(value: Any) -> bool:
    return callable(value)


def is_symbol(value: Any) -> bool:
    """Enum members stand in for symbols: named, unique constants."""
    return isinstance(value, enum.Enum)


def is_constructor(value: Any) -> bool:
    return isinstance(value, type)


def in_object(key: Any, container: Any) -> bool:
    """Check membership of a key in a dict or an index in a list."""
    if isinstance(container, dict):
        return key in container
    if isinstance(container, (list, tuple)) and isinstance(key, int):
        return 0 <= key < len(container)
    return False


def to_shallow_object(obj: dict, mapper: Callable[[Any], Any]) -> dict:
    """Copy a dict, applying mapper to each value."""
    return {key: mapper(value) for key, value in obj.items()}


def typename(value: Any) -> str:
    if value is None:
        return "None"
    if is_constructor(value):
        return f"class {value.__name__}"
    return type(value).__name__
