"""Opt-in console logging for the backport shims.

Each shim emits one DEBUG record per call, tagged with the operation that
produced it. By default those records stop at the ``NullHandler`` attached to
the package logger. Setting ``BACKPORT_LOG_LEVEL`` (e.g. ``DEBUG``) before the
package is imported, or calling :func:`enable`, attaches a Rich console handler
to the ``backport`` logger that renders them as::

    DEBUG    [copy_of] copied 3 of 3 elements into 5

Only the ``backport`` logger is touched; the root logger and third-party
loggers keep whatever configuration the application gave them.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from typing import Literal, TypeAlias

from rich.console import Console
from rich.logging import RichHandler

from backport.errors import InvalidLogLevelError

# pylint: disable=too-few-public-methods

PACKAGE_LOGGER = "backport"
LOG_LEVEL_ENV = "BACKPORT_LOG_LEVEL"  # pragma: no mutate
CONSOLE_FORMAT = "[%(operation)s] %(message)s"  # pragma: no mutate

ColorSystem: TypeAlias = Literal["auto", "standard", "256", "truecolor", "windows"]


class OperationFilter(logging.Filter):
    """Make sure every record carries an ``operation`` attribute.

    Shim records set it through ``extra``; any other record falls back to the
    name of the function that logged it.
    """

    def filter(self, record: logging.LogRecord) -> bool:
        if not hasattr(record, "operation"):
            record.operation = record.funcName
        return True


class _ConsoleHandler(RichHandler):
    """RichHandler subclass so :func:`enable` can find its own handler again."""


def config_console_handler(
    level: int = logging.DEBUG, color: bool = True
) -> RichHandler:
    """Build the Rich console handler used for backport records.

    Args:
        level: Minimum level the handler emits.
        color: Enable color output when True.

    Returns:
        RichHandler: A stderr handler formatting records as
        ``[operation] message``.
    """
    color_system: ColorSystem | None = "auto" if color else None
    console = Console(color_system=color_system, stderr=True)

    handler = _ConsoleHandler(
        level=level,
        console=console,
        show_time=False,
        show_path=False,
        rich_tracebacks=True,
    )
    handler.setFormatter(logging.Formatter(fmt=CONSOLE_FORMAT))
    handler.addFilter(OperationFilter())
    return handler


def parse_level(value: str) -> int:
    """Convert a level name such as ``"debug"`` to its numeric value.

    Raises:
        InvalidLogLevelError: If ``value`` is not a standard level name.
    """
    level = logging.getLevelName(value.strip().upper())
    if not isinstance(level, int):
        raise InvalidLogLevelError(value)
    return level


def enable(level: int = logging.DEBUG, color: bool = True) -> RichHandler:
    """Route backport records at ``level`` and above to the console.

    Calling this again replaces the previously installed console handler, so
    the package logger never holds more than one.
    """
    disable()
    handler = config_console_handler(level=level, color=color)
    package_logger = logging.getLogger(PACKAGE_LOGGER)
    package_logger.addHandler(handler)
    package_logger.setLevel(level)
    return handler


def disable() -> None:
    """Remove the console handler installed by :func:`enable`, if any."""
    package_logger = logging.getLogger(PACKAGE_LOGGER)
    for handler in list(package_logger.handlers):
        if isinstance(handler, _ConsoleHandler):
            package_logger.removeHandler(handler)
            handler.close()
    package_logger.setLevel(logging.NOTSET)


def configure_from_env(environ: Mapping[str, str] | None = None) -> RichHandler | None:
    """Enable console logging when ``BACKPORT_LOG_LEVEL`` is set.

    Args:
        environ: Environment to read; defaults to ``os.environ``.

    Returns:
        The installed handler, or None when the variable is unset or empty.

    Raises:
        InvalidLogLevelError: If the variable holds an unknown level name.
    """
    environ = os.environ if environ is None else environ
    if not (value := environ.get(LOG_LEVEL_ENV, "").strip()):
        return None
    return enable(parse_level(value))
