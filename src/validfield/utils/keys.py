"""
Contains the functions which convert field identifiers and parameter keys to the string form validators expect.
"""
from enum import Enum
from typing import Any, Mapping

from validfield.errors import InvalidArgumentError


def field_name(field: Any) -> str:
    """
    Returns the string form of a field. Strings are returned unchanged, enum members are converted to their name.
    Any other type raises an InvalidArgumentError.
    """
    if isinstance(field, Enum):
        return field.name
    if isinstance(field, str):
        return field
    raise InvalidArgumentError(f"Field keys must be strings or enum members, got {type(field).__name__}: {field!r}")


def normalize_keys(value: Any) -> Any:
    """
    If `value` is a mapping a new dict is returned with all keys converted by `field_name` and all values
    normalized recursively. Any other value is returned unchanged.
    """
    if isinstance(value, Mapping):
        return {field_name(key): normalize_keys(item) for key, item in value.items()}
    return value
