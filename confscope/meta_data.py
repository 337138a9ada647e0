"""Data collected about a config while visiting it."""

from __future__ import annotations

from collections.abc import Callable, Iterator
from dataclasses import dataclass, field
from typing import Any

from confscope.checks import CheckBase


@dataclass
class FieldInfo:
    """Information about a single field of a config."""

    name: str
    unit: str = ""
    value: Any = None
    was_parsed: bool = False
    is_default: bool = False


@dataclass
class MetaData:
    """Everything known about a config and, recursively, its sub-configs."""

    name: str = ""
    field_name: str = ""
    is_virtual_config: bool = False
    data: dict[str, Any] = field(default_factory=dict)
    field_infos: list[FieldInfo] = field(default_factory=list)
    errors: list[str] = field(default_factory=list)
    checks: list[CheckBase] = field(default_factory=list)
    sub_configs: list[MetaData] = field(default_factory=list)

    def walk(self) -> Iterator[MetaData]:
        """Yield this meta data and all sub-configs, depth first, parents first."""
        yield self
        for sub_config in self.sub_configs:
            yield from sub_config.walk()

    def has_errors(self) -> bool:
        """True if this config or any sub-config recorded an error."""
        return any(meta.errors for meta in self.walk())

    def has_missing(self) -> bool:
        """True if any field of this config or its sub-configs was not parsed."""
        return any(
            not info.was_parsed for meta in self.walk() for info in meta.field_infos
        )

    def perform_on_all(self, func: Callable[[MetaData], Any]) -> None:
        """Call ``func`` on this meta data and every sub-config."""
        for meta in self.walk():
            func(meta)


def has_no_invalid_checks(data: MetaData) -> bool:
    """True if every check in the meta data tree is valid."""
    return all(check.valid() for meta in data.walk() for check in meta.checks)