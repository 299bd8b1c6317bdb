"""Loggers for service processes: console when interactive, OS log otherwise."""

import logging
import logging.handlers
import queue
import sys
from pathlib import Path
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler

ErrorSink = Optional["queue.Queue[BaseException]"]


class _ErrorSinkMixin:
    """Send handler failures to an error queue instead of printing them."""

    errors: ErrorSink = None

    def handleError(self, record: logging.LogRecord) -> None:
        exc = sys.exc_info()[1]
        if self.errors is not None and exc is not None:
            try:
                self.errors.put_nowait(exc)
            except queue.Full:
                pass
            return
        super().handleError(record)  # type: ignore[misc]


class _SysLogHandler(_ErrorSinkMixin, logging.handlers.SysLogHandler):
    pass


class _NTEventLogHandler(_ErrorSinkMixin, logging.handlers.NTEventLogHandler):
    pass


class Logger:
    """Leveled logger handed to the workload.

    Messages use %-style arguments, like the standard logging module.
    """

    def __init__(self, logger: logging.Logger):
        self._logger = logger

    @property
    def handlers(self) -> list[logging.Handler]:
        return self._logger.handlers

    def error(self, msg: str, *args) -> None:
        self._logger.error(msg, *args)

    def warning(self, msg: str, *args) -> None:
        self._logger.warning(msg, *args)

    def info(self, msg: str, *args) -> None:
        self._logger.info(msg, *args)


def _new_logger(name: str, handler: logging.Handler) -> logging.Logger:
    # Detached from the logging manager so repeated calls never stack handlers
    logger = logging.Logger(name, logging.INFO)
    logger.propagate = False
    logger.addHandler(handler)
    return logger


def console_logger(name: str = "osservice") -> Logger:
    """Logger writing to stderr, used when running in a terminal."""
    handler = RichHandler(console=Console(stderr=True), show_path=False)
    return Logger(_new_logger(name, handler))


def _syslog_address() -> str | tuple[str, int]:
    for candidate in ("/dev/log", "/var/run/syslog", "/var/run/log"):
        if Path(candidate).exists():
            return candidate
    return ("localhost", logging.handlers.SYSLOG_UDP_PORT)


def system_logger(name: str, errors: ErrorSink = None) -> Logger:
    """Logger forwarding to the native OS log (syslog, or the Windows event log).

    Args:
        name: Service name used as the log identity
        errors: Optional queue receiving exceptions raised while emitting records

    Raises:
        OSError: If the system log cannot be reached
    """
    handler: logging.Handler
    if sys.platform == "win32":
        handler = _NTEventLogHandler(name)
    else:
        handler = _SysLogHandler(address=_syslog_address())
        handler.ident = f"{name}: "
    handler.errors = errors  # type: ignore[attr-defined]
    handler.setFormatter(logging.Formatter("%(message)s"))
    return Logger(_new_logger(name, handler))
