"""
Field Readers

Strict accessors used by ``from_dict`` constructors. Values are checked,
never coerced.
"""

from typing import Any, Dict, Optional


def require_int(data: Dict[str, Any], key: str) -> int:
    value = data[key]
    # bool is an int subclass but never a valid identifier
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"'{key}' must be an integer, got {type(value).__name__}")
    return value


def require_str(data: Dict[str, Any], key: str) -> str:
    value = data[key]
    if not isinstance(value, str):
        raise TypeError(f"'{key}' must be a string, got {type(value).__name__}")
    return value


def optional_str(data: Dict[str, Any], key: str) -> Optional[str]:
    if data.get(key) is None:
        return None
    return require_str(data, key)


def optional_float(data: Dict[str, Any], key: str) -> Optional[float]:
    value = data.get(key)
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise TypeError(f"'{key}' must be a number, got {type(value).__name__}")
    return float(value)
