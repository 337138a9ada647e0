"""Conversion of 8-bit unsigned integers to and from YAML data."""

from __future__ import annotations

from typing import Any

_UINT8_MIN = 0
_UINT8_MAX = 255


def uint8_from_yaml(node: Any) -> int:
    """Read an unsigned 8-bit integer, raising ValueError when out of range."""
    if isinstance(node, bool) or not isinstance(node, (int, str)):
        raise TypeError(f"Value '{node}' is not an integer.")
    try:
        value = int(node)
    except ValueError as err:
        raise ValueError(f"Value '{node}' is not an integer.") from err
    if value > _UINT8_MAX:
        raise ValueError(f"Value '{value}' overflows storage max of '{_UINT8_MAX}'.")
    if value < _UINT8_MIN:
        raise ValueError(f"Value '{value}' underflows storage min of '{_UINT8_MIN}'.")
    return value


def uint8_to_yaml(name: str, value: int) -> dict[str, int]:
    """Write an unsigned 8-bit integer as a number under ``name``."""
    return {name: int(value)}