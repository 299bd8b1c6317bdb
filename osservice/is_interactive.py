"""Detect whether the process was started from a user session."""

import os
import sys
from functools import lru_cache


@lru_cache(maxsize=None)
def is_interactive() -> bool:
    """Return True unless the process was launched by the service manager.

    Computed on first call and cached for the lifetime of the process.
    On POSIX a service process is a direct child of PID 1 (launchd, init or
    the system systemd instance); systemd user services are recognized by the
    INVOCATION_ID it exports. On Windows a service has no console on stdin.
    """
    if sys.platform == "win32":
        return sys.stdin is not None and sys.stdin.isatty()
    if "INVOCATION_ID" in os.environ:
        return False
    return os.getppid() != 1
