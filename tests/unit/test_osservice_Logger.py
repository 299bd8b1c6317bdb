"""Unit tests for service loggers."""

import importlib
import logging
import queue
import sys

import pytest
from rich.logging import RichHandler

from osservice._darwin._Impl import _Impl
from osservice.Logger import Logger, _SysLogHandler, console_logger, system_logger

# The package re-exports the Logger class under the module's name
LOGGER_MODULE = importlib.import_module("osservice.Logger")


def test_console_logger_uses_rich_handler():
    logger = console_logger("worker")
    assert isinstance(logger, Logger)
    assert len(logger.handlers) == 1
    assert isinstance(logger.handlers[0], RichHandler)


def test_repeated_loggers_do_not_stack_handlers():
    console_logger("worker")
    assert len(console_logger("worker").handlers) == 1


def test_logger_formats_percent_arguments():
    records = []

    class _Capture(logging.Handler):
        def emit(self, record):
            records.append(record)

    inner = logging.Logger("capture")
    inner.addHandler(_Capture())
    logger = Logger(inner)

    logger.info("processed %d jobs", 3)
    logger.warning("queue %s is slow", "default")
    logger.error("failed")

    assert [r.getMessage() for r in records] == ["processed 3 jobs", "queue default is slow", "failed"]
    assert [r.levelno for r in records] == [logging.INFO, logging.WARNING, logging.ERROR]


def test_service_logger_console_when_interactive(workload, make_config, monkeypatch):
    monkeypatch.setattr("osservice._AbstractImpl.is_interactive", lambda: True)
    logger = _Impl(workload, make_config()).logger()
    assert isinstance(logger.handlers[0], RichHandler)


@pytest.mark.skipif(sys.platform == "win32", reason="syslog handler")
def test_service_logger_system_when_managed(workload, make_config, monkeypatch):
    monkeypatch.setattr("osservice._AbstractImpl.is_interactive", lambda: False)
    monkeypatch.setattr(LOGGER_MODULE, "_syslog_address", lambda: ("127.0.0.1", 9))
    logger = _Impl(workload, make_config()).logger()
    handler = logger.handlers[0]
    assert isinstance(handler, _SysLogHandler)
    assert handler.ident == "com.example.worker: "
    handler.close()


@pytest.mark.skipif(sys.platform == "win32", reason="syslog handler")
def test_emit_failures_go_to_error_queue(monkeypatch):
    monkeypatch.setattr(LOGGER_MODULE, "_syslog_address", lambda: ("127.0.0.1", 9))
    errors: "queue.Queue[BaseException]" = queue.Queue()
    logger = system_logger("worker", errors)
    handler = logger.handlers[0]

    def broken_format(record):
        raise ValueError("cannot format")

    monkeypatch.setattr(handler, "format", broken_format)
    logger.error("boom")

    assert isinstance(errors.get_nowait(), ValueError)
    handler.close()
