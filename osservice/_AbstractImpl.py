"""Abstract base class for service implementations (system service installers)."""

import os
import sys
import time
from abc import ABC, abstractmethod
from collections.abc import Callable
from pathlib import Path
from typing import TYPE_CHECKING, Any

from .Config import Config
from .is_interactive import is_interactive
from .Logger import ErrorSink, Logger, console_logger, system_logger
from .Options import Options
from .Status import Status
from .wait_for_signal import catch_termination_signals, next_signal

if TYPE_CHECKING:
    from .Interface import Interface

# Pause between stop and start so managers that reuse a control socket settle
RESTART_SETTLE_SECS = 0.05


class _AbstractImpl(ABC):
    """Abstract base class for platform-specific service implementations.

    A service binds a config and a workload to one service manager. It keeps
    no state between calls: every operation re-derives the current state from
    the manager.
    """

    platform_name: str = ""

    def __init__(self, workload: "Interface", config: Config):
        self.workload = workload
        self.config = config
        self.user_service = config.option.get_bool(Options.USER_SERVICE, Options.USER_SERVICE_DEFAULT)

    @property
    def name(self) -> str:
        return self.config.name

    @property
    def option(self) -> Options:
        return self.config.option

    def __str__(self) -> str:
        return self.config.display_name or self.config.name

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.config.name!r} user={self.user_service}>"

    def platform(self) -> str:
        return self.platform_name

    def program(self) -> list[str]:
        """Leading argv that starts the program, before the configured arguments.

        The configured executable when set. Otherwise the running program:
        `python -m <module>` when started as a module, the script itself when
        it is directly executable (console scripts), the interpreter followed
        by the script when it is not, else the bare interpreter.
        """
        if self.config.executable:
            return [str(Path(self.config.executable).expanduser().resolve())]
        main_spec = getattr(sys.modules.get("__main__"), "__spec__", None)
        if main_spec is not None and main_spec.name:
            return [sys.executable, "-m", main_spec.name.removesuffix(".__main__")]
        script = Path(sys.argv[0]).resolve() if sys.argv and sys.argv[0] else None
        if script is not None and script.is_file():
            if os.access(script, os.X_OK):
                return [str(script)]
            return [sys.executable, str(script)]
        return [sys.executable]

    def command_line(self) -> list[str]:
        """Full argv the service manager launches."""
        return [*self.program(), *self.config.arguments]

    def exec_path(self) -> str:
        """Absolute path of the executable the service manager launches."""
        return self.program()[0]

    @abstractmethod
    def install(self) -> None:
        """Register the service with the manager.

        Raises:
            AlreadyInstalledError: If the service is already registered
        """

    @abstractmethod
    def uninstall(self) -> None:
        """Stop the service if possible, then remove its registration.

        Succeeds when the service is not installed.
        """

    @abstractmethod
    def status(self) -> Status:
        """Report whether the service runs.

        Raises:
            NotInstalledError: If the service is unknown to the manager and not installed
            ManagerCommandError: If the manager could not be queried
        """

    @abstractmethod
    def start(self) -> None:
        """Start the service via the manager."""

    @abstractmethod
    def stop(self) -> None:
        """Stop the service via the manager."""

    def restart(self) -> None:
        self.stop()
        time.sleep(RESTART_SETTLE_SECS)
        self.start()

    def run(self) -> None:
        """Run the workload until a termination signal arrives.

        Calls the workload's start hook, waits (for a signal, or through the
        RunWait option), then calls its stop hook exactly once. If start
        raises, stop is not called.

        Raises:
            RuntimeError: If no RunWait option is set and this is not the main thread;
                the workload is not started
        """
        if Options.RUN_WAIT in self.option:
            self._run_until(self.option.get_func(Options.RUN_WAIT, lambda: None))
            return
        # Handlers are in place before start; signals sent while starting stay queued
        with catch_termination_signals() as received:
            self._run_until(lambda: next_signal(received))

    def _run_until(self, wait: Callable[[], Any]) -> None:
        self.workload.start(self)
        wait()
        self.workload.stop(self)

    def logger(self, errors: ErrorSink = None) -> Logger:
        """Console logger when interactive, otherwise the system logger."""
        if is_interactive():
            return console_logger(self.config.name)
        return self.system_logger(errors)

    def system_logger(self, errors: ErrorSink = None) -> Logger:
        return system_logger(self.config.name, errors)
