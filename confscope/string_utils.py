"""String helpers for namespaces, printing and wrapping."""

from __future__ import annotations

import re
from collections.abc import Iterable, Mapping, Sequence
from typing import Any

INVALID_FIELD = "<Invalid Field>"

_FLOAT_DETECTOR = re.compile(r"[+-]?[0-9]*[.][0-9]+")


def print_center(text: str, width: int = 80, symbol: str = "=") -> str:
    """Center ``text`` padded by spaces within a line of ``symbol``."""
    first = max((width - len(text) - 2) // 2, 0)
    result = symbol * first + " " + text + " "
    return result + symbol * max(width - len(result), 0)


def split_namespace(text: str, delimiter: str = "/") -> list[str]:
    """Split a namespace into its non-empty parts."""
    if not text:
        return []
    return [part for part in text.split(delimiter) if part]


def join_namespaces(namespaces: Iterable[str], delimiter: str = "/") -> str:
    """Join namespace parts with the delimiter."""
    return delimiter.join(namespaces)


def join_namespace(namespace_1: str, namespace_2: str, delimiter: str = "/") -> str:
    """Join two namespaces into one uniformly formatted namespace."""
    parts = split_namespace(namespace_1, delimiter) + split_namespace(namespace_2, delimiter)
    return join_namespaces(parts, delimiter)


def _scalar_text(data: Any) -> str:
    if isinstance(data, bool):
        return "true" if data else "false"
    if isinstance(data, float):
        return repr(data)
    return str(data)


def scalar_to_string(data: Any, reformat_float: bool = False) -> str:
    """Render a scalar; optionally reformat floats with six significant digits."""
    orig = _scalar_text(data)
    if not reformat_float or not _FLOAT_DETECTOR.search(orig):
        return orig
    try:
        value = float(data)
    except (TypeError, ValueError):
        return orig
    return f"{value:g}"


def data_to_string(data: Any, reformat_float: bool = False) -> str:
    """Render nested data (mappings, sequences, scalars) on one line."""
    if data is None:
        return INVALID_FIELD
    if isinstance(data, Mapping):
        items = ", ".join(
            f"{data_to_string(key, reformat_float)}: {data_to_string(value, reformat_float)}"
            for key, value in data.items()
        )
        return "{" + items + "}"
    if isinstance(data, Sequence) and not isinstance(data, (str, bytes)):
        return "[" + ", ".join(data_to_string(item, reformat_float) for item in data) + "]"
    return scalar_to_string(data, reformat_float)


def find_all_substrings(text: str, substring: str) -> list[int]:
    """Return every (possibly overlapping) start position of ``substring``."""
    positions = []
    pos = text.find(substring)
    while pos != -1:
        positions.append(pos)
        pos = text.find(substring, pos + 1)
    return positions


def prune_trailing_whitespace(text: str) -> str:
    return text.rstrip(" ")


def prune_leading_whitespace(text: str) -> str:
    return text.lstrip(" ")


def prune_whitespace(text: str) -> str:
    return text.strip(" ")


def wrap_string(text: str, width: int = 80, indent: int = 0, indent_first_line: bool = True) -> str:
    """Wrap text to ``width`` columns, indenting continuation lines by ``indent``."""
    length = width - indent if width >= indent else len(text)

    if indent_first_line:
        result = " " * indent
        remaining = text
    else:
        head = min(indent, len(text))
        result = text[:head]
        remaining = text[head:]

    if not remaining:
        return prune_trailing_whitespace(result)

    is_first_line = True
    while remaining:
        next_line = remaining[:length]
        remaining = remaining[len(next_line):]

        if not is_first_line:
            # Drop leading spaces, refilling the line from what remains.
            while next_line.startswith(" "):
                next_line = next_line[1:]
                if remaining:
                    next_line += remaining[0]
                    remaining = remaining[1:]

        next_line = prune_trailing_whitespace(next_line)
        if not next_line:
            return result

        if not is_first_line:
            result += "\n" + " " * indent
        is_first_line = False
        result += next_line

    return result