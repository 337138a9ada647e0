"""Validity checks attached to config fields."""

from __future__ import annotations

import copy
import operator
from abc import ABC, abstractmethod
from collections.abc import Iterable
from enum import Enum
from typing import Any, Callable


def _format(value: Any) -> str:
    """Format a value the way checks report it."""
    if isinstance(value, bool):
        return "1" if value else "0"
    if isinstance(value, float):
        return f"{value:g}"
    return str(value)


class CheckBase(ABC):
    """A single check with a validity flag and an explanatory message."""

    @abstractmethod
    def valid(self) -> bool: ...

    @abstractmethod
    def message(self) -> str: ...

    def name(self) -> str:
        return ""

    def clone(self) -> CheckBase:
        return copy.copy(self)

    def __bool__(self) -> bool:
        return self.valid()


class Check(CheckBase):
    """A check whose outcome is already known."""

    def __init__(self, valid: bool, message: str) -> None:
        self._valid = bool(valid)
        self._message = message

    def valid(self) -> bool:
        return self._valid

    def message(self) -> str:
        return self._message


class CompareMode(Enum):
    """Binary comparison, valued by its symbol."""

    GT = ">"
    GE = ">="
    LT = "<"
    LE = "<="
    EQ = "=="
    NE = "!="

    def __call__(self, lhs: Any, rhs: Any) -> bool:
        return _OPERATORS[self](lhs, rhs)


_OPERATORS: dict[CompareMode, Callable[[Any, Any], bool]] = {
    CompareMode.GT: operator.gt,
    CompareMode.GE: operator.ge,
    CompareMode.LT: operator.lt,
    CompareMode.LE: operator.le,
    CompareMode.EQ: operator.eq,
    CompareMode.NE: operator.ne,
}


class BinaryCheck(CheckBase):
    """Compares a parameter against a reference value."""

    def __init__(self, param: Any, value: Any, mode: CompareMode, name: str = "") -> None:
        self.param = param
        self.value = value
        self.mode = CompareMode(mode)
        self._name = name

    def valid(self) -> bool:
        return self.mode(self.param, self.value)

    def message(self) -> str:
        return f"param {self.mode.value} {_format(self.value)} (is: '{_format(self.param)}')"

    def name(self) -> str:
        return self._name


class CheckRange(CheckBase):
    """Checks that a parameter lies within bounds."""

    def __init__(
        self,
        param: Any,
        lower: Any,
        upper: Any,
        name: str = "",
        lower_inclusive: bool = True,
        upper_inclusive: bool = True,
    ) -> None:
        self.param = param
        self.lower = lower
        self.upper = upper
        self._name = name
        self.lower_inclusive = lower_inclusive
        self.upper_inclusive = upper_inclusive

    def valid(self) -> bool:
        lower_ok = self.param >= self.lower if self.lower_inclusive else self.param > self.lower
        upper_ok = self.param <= self.upper if self.upper_inclusive else self.param < self.upper
        return lower_ok and upper_ok

    def message(self) -> str:
        opening = "[" if self.lower_inclusive else "("
        closing = "]" if self.upper_inclusive else ")"
        return (
            f"param within {opening}{_format(self.lower)}, {_format(self.upper)}{closing}"
            f" (is: '{_format(self.param)}')"
        )

    def name(self) -> str:
        return self._name


class CheckIsOneOf(CheckBase):
    """Checks that a parameter equals one of the candidates."""

    def __init__(self, param: Any, candidates: Iterable[Any], name: str = "") -> None:
        self.param = param
        self.candidates = list(candidates)
        self._name = name

    def valid(self) -> bool:
        return any(self.param == candidate for candidate in self.candidates)

    def message(self) -> str:
        listed = ", ".join(f"'{_format(candidate)}'" for candidate in self.candidates)
        return f"param must be one of [{listed}] (is: '{_format(self.param)}')"

    def name(self) -> str:
        return self._name