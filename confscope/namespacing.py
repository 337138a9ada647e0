"""Sub-namespaces for getting and setting config fields within the active visitor."""

from __future__ import annotations

from collections.abc import Callable
from types import TracebackType
from typing import Any

from confscope.logger import log_warning
from confscope.string_utils import join_namespace
from confscope.visitor import has_instance, instance


class NameSpace:
    """Enters a sub-namespace of the active visitor until it is exited or closed.

    The namespace is entered on construction. Used as a context manager, it
    is closed when the block ends.
    """

    def __init__(self, name_space: str) -> None:
        self.sub_ns = name_space
        self.previous_ns = ""
        self.is_open = False
        self.enter()

    def enter(self) -> None:
        """Re-enter this sub-namespace; it must have been exited before."""
        if self.is_open:
            log_warning("NameSpace.enter() called on already open namespace.")
            return
        visitor = instance()
        self.previous_ns = visitor.name_space
        visitor.name_space = join_namespace(self.previous_ns, self.sub_ns)
        self.is_open = True

    def exit(self) -> None:
        """Exit this sub-namespace and return to the namespace it was entered from."""
        if not self.is_open:
            log_warning("NameSpace.exit() called on already closed namespace.")
            return
        visitor = instance()
        if not visitor.name_space.startswith(self.previous_ns):
            # Still valid namespace behaviour, but not what the user intended.
            log_warning("NameSpace.exit() called on namespace that was implicitly closed.")
            return
        # Exiting out of order simply closes all namespaces opened later.
        visitor.name_space = self.previous_ns
        self.is_open = False

    def close(self) -> None:
        """Exit the namespace if it is still open and a visitor is active."""
        if self.is_open and has_instance():
            self.exit()

    def __enter__(self) -> NameSpace:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()


class OpenNameSpace:
    """A namespace kept open on a visitor's stack, lockable while visiting."""

    def __init__(self, name_space: str) -> None:
        self._locks = 0
        self.ns = NameSpace(name_space)

    def is_locked(self) -> bool:
        return self._locks > 0

    def _lock(self) -> None:
        self._locks += 1

    def _unlock(self) -> None:
        if self._locks > 0:
            self._locks -= 1


def _pop(stack: list[OpenNameSpace]) -> None:
    stack.pop().ns.close()


def _pop_unlocked(stack: list[OpenNameSpace]) -> None:
    while stack and not stack[-1].is_locked():
        _pop(stack)


def perform_with_guarded_namespaces(
    stack: list[OpenNameSpace], operation: Callable[[], Any]
) -> None:
    """Run ``operation`` with all namespaces in ``stack`` protected from removal.

    Afterwards, every trailing namespace that is no longer locked is closed.
    """
    guarded = list(stack)
    for open_ns in guarded:
        open_ns._lock()
    try:
        operation()
    finally:
        for open_ns in guarded:
            open_ns._unlock()
        _pop_unlocked(stack)


def enter_namespace(name_space: str) -> None:
    """Enter a sub-namespace that stays open until exited or cleared."""
    instance().open_namespaces.append(OpenNameSpace(name_space))


def exit_namespace() -> None:
    """Undo the last call to ``enter_namespace``."""
    stack = instance().open_namespaces
    if not stack:
        log_warning("exit_namespace() called on empty namespace stack.")
        return
    if not stack[-1].is_locked():
        _pop(stack)


def clear_namespaces() -> None:
    """Exit all sub-namespaces entered with ``enter_namespace`` in this scope."""
    _pop_unlocked(instance().open_namespaces)


def switch_namespace(name_space: str) -> None:
    """Exit the last entered sub-namespace and enter ``name_space`` instead."""
    exit_namespace()
    enter_namespace(name_space)


def current_namespace() -> str:
    """Return the namespace currently used for getting or setting params."""
    return instance().name_space