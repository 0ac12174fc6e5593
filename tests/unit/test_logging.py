"""Unit tests for backport.logging."""

import logging

import pytest
from rich.logging import RichHandler

from backport import errors
from backport import logging as backport_logging
from backport.shims import copy_of

# pylint: disable=magic-value-comparison,redefined-outer-name


@pytest.fixture
def package_logger():
    """Yield the backport logger and strip any console handler afterwards."""
    yield logging.getLogger(backport_logging.PACKAGE_LOGGER)
    backport_logging.disable()


def console_handlers(logger: logging.Logger) -> list[logging.Handler]:
    """Return the handlers installed by backport_logging.enable."""
    return [h for h in logger.handlers if isinstance(h, RichHandler)]


class TestOperationFilter:
    """Tests for the OperationFilter."""

    @staticmethod
    def test_keeps_explicit_operation():
        record = logging.LogRecord(
            "backport.shims", logging.DEBUG, "", 1, "m", None, None
        )
        record.operation = "copy_of"
        assert backport_logging.OperationFilter().filter(record) is True
        assert record.operation == "copy_of"

    @staticmethod
    def test_falls_back_to_function_name():
        record = logging.LogRecord(
            "backport.x", logging.DEBUG, "", 1, "m", None, None, func="helper"
        )
        backport_logging.OperationFilter().filter(record)
        assert record.operation == "helper"


def test_console_handler_format_and_level():
    """The handler formats records as [operation] message."""
    handler = backport_logging.config_console_handler(level=logging.INFO, color=False)
    assert handler.level == logging.INFO
    assert handler.console.color_system is None
    assert any(isinstance(f, backport_logging.OperationFilter) for f in handler.filters)
    fmt = handler.formatter._fmt  # pylint: disable=protected-access
    assert fmt == "[%(operation)s] %(message)s"


@pytest.mark.parametrize(
    "value, expected",
    [("DEBUG", logging.DEBUG), ("info", logging.INFO), (" Warning ", logging.WARNING)],
)
def test_parse_level(value, expected):
    """Level names are parsed case-insensitively."""
    assert backport_logging.parse_level(value) == expected


def test_parse_level_invalid_raises():
    """Unknown level names raise InvalidLogLevelError, a ValueError."""
    with pytest.raises(errors.InvalidLogLevelError, match="Invalid log level: 'LOUD'"):
        backport_logging.parse_level("LOUD")
    assert issubclass(errors.InvalidLogLevelError, ValueError)


def test_enable_installs_single_handler(package_logger):
    """Repeated enable calls replace the handler instead of stacking."""
    backport_logging.enable(logging.INFO, color=False)
    backport_logging.enable(logging.DEBUG, color=False)
    assert len(console_handlers(package_logger)) == 1
    assert package_logger.level == logging.DEBUG


def test_disable_removes_handler(package_logger):
    """disable removes the console handler and resets the level."""
    backport_logging.enable(color=False)
    backport_logging.disable()
    assert not console_handlers(package_logger)
    assert package_logger.level == logging.NOTSET
    assert any(isinstance(h, logging.NullHandler) for h in package_logger.handlers)


def test_shim_records_reach_console(package_logger, capsys):
    """With logging enabled, each shim call prints its operation and message."""
    backport_logging.enable(color=False)
    copy_of([1, 2, 3], 5)
    err = capsys.readouterr().err
    assert "[copy_of] copied 3 of 3 elements into 5" in err


class TestConfigureFromEnv:
    """Tests for configure_from_env."""

    @staticmethod
    @pytest.mark.parametrize("environ", [{}, {"BACKPORT_LOG_LEVEL": ""}])
    def test_unset_does_nothing(package_logger, environ):
        assert backport_logging.configure_from_env(environ) is None
        assert not console_handlers(package_logger)

    @staticmethod
    def test_level_enables_console(package_logger):
        handler = backport_logging.configure_from_env({"BACKPORT_LOG_LEVEL": "debug"})
        assert handler in package_logger.handlers
        assert package_logger.level == logging.DEBUG

    @staticmethod
    def test_invalid_level_raises(package_logger):
        with pytest.raises(errors.InvalidLogLevelError):
            backport_logging.configure_from_env({"BACKPORT_LOG_LEVEL": "LOUD"})
        assert not console_handlers(package_logger)

    @staticmethod
    def test_reads_process_environment(package_logger, monkeypatch):
        monkeypatch.setenv("BACKPORT_LOG_LEVEL", "INFO")
        backport_logging.configure_from_env()
        assert package_logger.level == logging.INFO
