"""Process-wide logging hook with pluggable logger implementations."""

from __future__ import annotations

from enum import Enum


class Severity(Enum):
    """Severity of a logged message."""

    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    FATAL = "fatal"


_SEVERITY_NAMES = {
    Severity.INFO: "Info",
    Severity.WARNING: "Warning",
    Severity.ERROR: "Error",
    Severity.FATAL: "Fatal",
}


def severity_to_string(severity: Severity) -> str:
    """Return the display name of a severity, or 'UNKNOWN'."""
    return _SEVERITY_NAMES.get(severity, "UNKNOWN")


class FatalError(RuntimeError):
    """Raised when a fatal message reaches a logger that does not stop the program itself."""

    def __init__(self, message: str) -> None:
        super().__init__(f"FATAL: {message}")
        self.log_message = message


class Logger:
    """Base logger: discards all messages but raises on fatal ones.

    Subclasses override ``log_impl``; implementations are expected to stop
    execution on fatal messages.
    """

    def log_impl(self, severity: Severity, message: str) -> None:
        if severity is Severity.FATAL:
            raise FatalError(message)


_current: Logger | None = None


def set_logger(logger: Logger | None) -> None:
    """Install a logger for all subsequent messages. ``None`` is ignored."""
    global _current
    if logger is not None:
        _current = logger


def _dispatch(severity: Severity, message: str) -> None:
    global _current
    if _current is None:
        _current = Logger()
    _current.log_impl(severity, message)


def log(severity: Severity, message: str) -> None:
    """Send a message with the given severity to the installed logger."""
    _dispatch(severity, message)


def log_info(message: str) -> None:
    _dispatch(Severity.INFO, message)


def log_warning(message: str) -> None:
    _dispatch(Severity.WARNING, message)


def log_error(message: str) -> None:
    _dispatch(Severity.ERROR, message)


def log_fatal(message: str) -> None:
    _dispatch(Severity.FATAL, message)