"""Registry selecting the one service system active for this process."""

import sys
import threading
from collections.abc import Iterable
from typing import TYPE_CHECKING

from ._AbstractImpl import _AbstractImpl
from ._AbstractSystem import _AbstractSystem
from ._darwin._System import _System as _DarwinSystem
from ._freebsd._System import _System as _FreeBSDSystem
from ._systemd._System import _System as _SystemdSystem
from ._sysv._System import _System as _SysvSystem
from ._windows._System import _System as _WindowsSystem
from .Config import Config
from .logging_config import get_logger
from .ServiceError import NoSystemError, SystemAlreadyChosenError

if TYPE_CHECKING:
    from .Interface import Interface

logger = get_logger("registry")


class SystemRegistry:
    """Candidate systems in priority order, and the one chosen among them.

    The active system is picked lazily by the first candidate whose
    `detect()` is true, or pinned with `choose()`. Once chosen it never
    changes.
    """

    def __init__(self, candidates: Iterable[_AbstractSystem]):
        self._candidates = tuple(candidates)
        self._chosen: _AbstractSystem | None = None
        self._lock = threading.Lock()

    @property
    def candidates(self) -> tuple[_AbstractSystem, ...]:
        return self._candidates

    def available(self) -> list[_AbstractSystem]:
        """Every candidate that detects as usable on this platform."""
        return [system for system in self._candidates if system.detect()]

    def choose(self, system: _AbstractSystem) -> None:
        """Pin the active system.

        Raises:
            SystemAlreadyChosenError: If a different system is already active
        """
        with self._lock:
            if self._chosen is not None and self._chosen is not system:
                raise SystemAlreadyChosenError(f"Service system already chosen: {self._chosen}")
            self._chosen = system

    def chosen(self) -> _AbstractSystem:
        """The active system, detecting it on first use.

        Raises:
            NoSystemError: If no candidate matches the running platform
        """
        with self._lock:
            if self._chosen is None:
                for system in self._candidates:
                    if system.detect():
                        logger.debug(f"Detected service system {system}")
                        self._chosen = system
                        break
                else:
                    raise NoSystemError(f"No service system detected for platform {sys.platform!r}")
            return self._chosen

    def new(self, workload: "Interface", config: Config) -> _AbstractImpl:
        return self.chosen().new(workload, config)


_REGISTRY = SystemRegistry(
    [
        _DarwinSystem(),
        _SystemdSystem(),
        _SysvSystem(),
        _FreeBSDSystem(),
        _WindowsSystem(),
    ]
)


def default_registry() -> SystemRegistry:
    return _REGISTRY


def chosen_system() -> _AbstractSystem:
    """The service system for the running platform."""
    return _REGISTRY.chosen()


def choose_system(system: _AbstractSystem) -> None:
    """Override detection with an explicit system. Must happen before first use."""
    _REGISTRY.choose(system)


def available_systems() -> list[_AbstractSystem]:
    return _REGISTRY.available()


def platform() -> str:
    """Name of the active service system, e.g. "linux-systemd"."""
    return str(_REGISTRY.chosen())


def new(workload: "Interface", config: Config) -> _AbstractImpl:
    """Create a service for `workload` on the active system.

    Raises:
        NoSystemError: If no system matches the running platform
        InvalidOptionError: If an option value is invalid
    """
    return _REGISTRY.new(workload, config)
