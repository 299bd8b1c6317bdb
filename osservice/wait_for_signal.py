"""Block until the process is asked to terminate."""

import queue
import signal
import sys
import threading
from collections.abc import Iterator
from contextlib import contextmanager

from .logging_config import get_logger

logger = get_logger("wait_for_signal")


def termination_signals() -> list[signal.Signals]:
    """Signals that request a service to stop on this platform."""
    signals = [signal.SIGINT, signal.SIGTERM]
    if sys.platform == "win32":
        signals.append(signal.SIGBREAK)  # type: ignore[attr-defined]
    return signals


@contextmanager
def catch_termination_signals() -> Iterator["queue.SimpleQueue[int]"]:
    """Route termination signals into a queue while the block runs.

    Handlers post into a SimpleQueue, whose put() is reentrant, so a signal
    delivered at any point after entry is kept until it is consumed. The
    previous handlers are restored on exit.

    Raises:
        RuntimeError: If called outside the main thread, where Python cannot install signal handlers
    """
    if threading.current_thread() is not threading.main_thread():
        raise RuntimeError(
            "Waiting for termination signals requires the main thread; "
            "set the RunWait option to run a service from another thread"
        )

    received: "queue.SimpleQueue[int]" = queue.SimpleQueue()

    def handle(signum, _frame):
        received.put(signum)

    previous = {sig: signal.signal(sig, handle) for sig in termination_signals()}
    try:
        yield received
    finally:
        for sig, handler in previous.items():
            signal.signal(sig, handler)


def next_signal(received: "queue.SimpleQueue[int]", poll_interval: float = 0.5) -> signal.Signals:
    """Block until a signal caught by `catch_termination_signals` arrives."""
    while True:
        # Windows does not interrupt blocking waits for signals, so wake up periodically
        try:
            signum = received.get(timeout=poll_interval)
            break
        except queue.Empty:
            continue

    sig = signal.Signals(signum)
    logger.info(f"Received {sig.name}")
    return sig


def wait_for_signal(poll_interval: float = 0.5) -> signal.Signals:
    """Wait for a termination signal and return it. Must be called from the main thread."""
    with catch_termination_signals() as received:
        return next_signal(received, poll_interval)
