"""Primitive value checks shared by the JSON decoders."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

INTEGER_MIN = -(2**63)
INTEGER_MAX = 2**63 - 1


class DeserializeError(ValueError):
    """Raised when a JSON value does not have the expected shape."""


def _describe(value: Any) -> str:
    if value is None:
        return "null"
    if isinstance(value, bool):
        return f"boolean `{str(value).lower()}`"
    return f"{type(value).__name__} {value!r}"


def _missing(name: str) -> DeserializeError:
    return DeserializeError(f"missing field `{name}`")


def _invalid(name: str, expected: str, value: Any) -> DeserializeError:
    return DeserializeError(
        f"invalid type for field `{name}`: expected {expected}, got {_describe(value)}"
    )


def _is_integer(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _check_integer(name: str, value: Any) -> int:
    if not _is_integer(value):
        raise _invalid(name, "an integer", value)
    if not INTEGER_MIN <= value <= INTEGER_MAX:
        raise DeserializeError(f"field `{name}`: integer {value} out of range")
    return value


def parse_true(value: Any) -> bool:
    """Accept only the JSON literal ``true``."""
    if value is True:
        return True
    raise DeserializeError(f"invalid value: {_describe(value)}, expected true")


def require_mapping(value: Any, what: str) -> Mapping[str, Any]:
    """Return ``value`` if it is a JSON object, otherwise raise."""
    if not isinstance(value, Mapping):
        raise DeserializeError(f"invalid type: expected {what}, got {_describe(value)}")
    return value


def require_int(data: Mapping[str, Any], name: str) -> int:
    """Return the required integer field ``name``."""
    if name not in data:
        raise _missing(name)
    return _check_integer(name, data[name])


def optional_int(data: Mapping[str, Any], name: str) -> int | None:
    """Return the integer field ``name``, or None when absent or null."""
    value = data.get(name)
    return None if value is None else _check_integer(name, value)


def require_str(data: Mapping[str, Any], name: str) -> str:
    """Return the required string field ``name``."""
    if name not in data:
        raise _missing(name)
    value = data[name]
    if not isinstance(value, str):
        raise _invalid(name, "a string", value)
    return value


def optional_str(data: Mapping[str, Any], name: str) -> str | None:
    """Return the string field ``name``, or None when absent or null."""
    if data.get(name) is None:
        return None
    return require_str(data, name)


def require_bool(data: Mapping[str, Any], name: str) -> bool:
    """Return the required boolean field ``name``."""
    if name not in data:
        raise _missing(name)
    value = data[name]
    if not isinstance(value, bool):
        raise _invalid(name, "a boolean", value)
    return value


def optional_bool(data: Mapping[str, Any], name: str) -> bool | None:
    """Return the boolean field ``name``, or None when absent or null."""
    if data.get(name) is None:
        return None
    return require_bool(data, name)


def require_float(data: Mapping[str, Any], name: str) -> float:
    """Return the required numeric field ``name`` as a float."""
    if name not in data:
        raise _missing(name)
    value = data[name]
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise _invalid(name, "a number", value)
    return float(value)