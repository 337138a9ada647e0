import pytest

from confscope.logger import (
    FatalError,
    Logger,
    Severity,
    log,
    log_error,
    log_fatal,
    log_info,
    log_warning,
    set_logger,
    severity_to_string,
)


class RecordingLogger(Logger):
    def __init__(self):
        self.messages = []

    def log_impl(self, severity, message):
        self.messages.append((severity, message))


@pytest.fixture
def recorder():
    logger = RecordingLogger()
    set_logger(logger)
    yield logger
    set_logger(Logger())


@pytest.mark.parametrize(
    "severity, expected",
    [
        (Severity.INFO, "Info"),
        (Severity.WARNING, "Warning"),
        (Severity.ERROR, "Error"),
        (Severity.FATAL, "Fatal"),
    ],
)
def test_severity_names(severity, expected):
    assert severity_to_string(severity) == expected


def test_unknown_severity_name():
    assert severity_to_string("nonsense") == "UNKNOWN"


def test_default_logger_raises_on_fatal():
    set_logger(Logger())
    with pytest.raises(FatalError) as info:
        log_fatal("boom")
    assert str(info.value) == "FATAL: boom"
    assert info.value.log_message == "boom"


def test_default_logger_raises_through_generic_log():
    set_logger(Logger())
    with pytest.raises(FatalError):
        log(Severity.FATAL, "stop")


def test_messages_are_dispatched_to_installed_logger(recorder):
    log_info("a")
    log_warning("b")
    log_error("c")
    log_fatal("d")
    log(Severity.WARNING, "e")
    assert recorder.messages == [
        (Severity.INFO, "a"),
        (Severity.WARNING, "b"),
        (Severity.ERROR, "c"),
        (Severity.FATAL, "d"),
        (Severity.WARNING, "e"),
    ]


def test_setting_none_keeps_previous_logger(recorder):
    set_logger(None)
    log_warning("still here")
    assert recorder.messages == [(Severity.WARNING, "still here")]


def test_replacing_logger_redirects_messages(recorder):
    other = RecordingLogger()
    set_logger(other)
    log_error("x")
    assert recorder.messages == []
    assert other.messages == [(Severity.ERROR, "x")]