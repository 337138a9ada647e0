"""Per-thread visitor that carries meta data between configs and their declarations."""

from __future__ import annotations

import threading
from enum import Enum, auto
from types import TracebackType
from typing import Any

from confscope.checks import Check, CheckBase
from confscope.meta_data import MetaData
from confscope.string_utils import split_namespace

FACTORY_TYPE_PARAM_NAME = "type"


class Mode(Enum):
    """Which operation a visitor performs on the data."""

    GET = auto()
    GET_DEFAULTS = auto()
    SET = auto()
    CHECK = auto()


class NoVisitorError(RuntimeError):
    """Raised when the active visitor is requested but none is active."""


_local = threading.local()


def _stack() -> list[Visitor]:
    stack = getattr(_local, "visitors", None)
    if stack is None:
        stack = []
        _local.visitors = stack
    return stack


class Visitor:
    """Collects or applies config data while a config declaration runs.

    Visitors are activated as context managers. Each thread keeps its own
    stack of active visitors, so nested visits always use the latest one.
    """

    def __init__(self, mode: Mode, name_space: str = "", field_name: str = "") -> None:
        self.mode = Mode(mode)
        self.name_space = name_space
        self.data = MetaData(field_name=field_name)
        # Stack of user-opened namespaces, managed by the namespacing helpers.
        self.open_namespaces: list[Any] = []
        # Base configs already visited, to avoid duplicates in diamond inheritance.
        self.visited_base_configs: set[str] = set()

    def __enter__(self) -> Visitor:
        _stack().append(self)
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        stack = _stack()
        if stack and stack[-1] is self:
            stack.pop()
        elif self in stack:
            stack.remove(self)


def has_instance() -> bool:
    """True if a visitor is active in the current thread."""
    return bool(_stack())


def instance() -> Visitor:
    """Return the innermost active visitor of the current thread."""
    stack = _stack()
    if not stack:
        raise NoVisitorError(
            "Visitor instance was accessed but no visitor was created before. "
            "Visitor instance should only be accessed from within a visitor."
        )
    return stack[-1]


def visit_name(name: str) -> None:
    """Set the config name unless one was already set."""
    visitor = instance()
    if not visitor.data.name:
        visitor.data.name = name


def visit_check(check: CheckBase) -> None:
    """Record a copy of the check when the visitor collects checks."""
    visitor = instance()
    if visitor.mode is Mode.CHECK:
        visitor.data.checks.append(check.clone())


def _move_down_namespace(node: Any, name_space: str) -> Any:
    for part in reversed(split_namespace(name_space)):
        node = {part: node}
    return node


def _merge(target: dict[str, Any], source: dict[str, Any]) -> None:
    for key, value in source.items():
        existing = target.get(key)
        if isinstance(existing, dict) and isinstance(value, dict):
            _merge(existing, value)
        else:
            target[key] = value


def _lookup_namespace(node: Any, name_space: str) -> Any:
    for part in split_namespace(name_space):
        if not isinstance(node, dict) or part not in node:
            return {}
        node = node[part]
    return node


def visit_virtual_config(is_set: bool, is_optional: bool, type_name: str) -> Any | None:
    """Handle a virtual config field for the active visitor.

    In check mode the validity of the virtual config is recorded as a check;
    in get mode the type is written back to the data; in set mode the data
    under the current namespace is returned to initialize the config.
    """
    visitor = instance()
    visitor.data.is_virtual_config = True

    if visitor.mode is Mode.CHECK:
        if not is_set and not is_optional:
            field_name = f"'{visitor.data.field_name}' " if visitor.data.field_name else ""
            visitor.data.checks.append(
                Check(False, f"Virtual config {field_name}is not set and not marked optional")
            )
        else:
            visitor.data.checks.append(Check(True, ""))

    if visitor.mode is Mode.GET and is_set:
        type_node = _move_down_namespace({FACTORY_TYPE_PARAM_NAME: type_name}, visitor.name_space)
        _merge(visitor.data.data, type_node)

    if visitor.mode is Mode.SET:
        return _lookup_namespace(visitor.data.data, visitor.name_space)

    return None