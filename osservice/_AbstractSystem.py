"""Abstract base class for service manager families."""

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

from ._AbstractImpl import _AbstractImpl
from .Config import Config
from .is_interactive import is_interactive
from .Options import Options
from .ServiceError import InvalidOptionError

if TYPE_CHECKING:
    from .Interface import Interface


class _AbstractSystem(ABC):
    """One OS service manager family (launchd, systemd, ...).

    Stateless: detection, interactivity and a factory for services bound to
    this manager.
    """

    name: str = ""
    impl_class: type[_AbstractImpl]
    supports_user_service: bool = True

    def __str__(self) -> str:
        return self.name

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.name!r}>"

    @abstractmethod
    def detect(self) -> bool:
        """Whether the running OS uses this service manager."""

    def interactive(self) -> bool:
        """Whether the process runs in a user session rather than under the manager."""
        return is_interactive()

    def new(self, workload: "Interface", config: Config) -> _AbstractImpl:
        """Build a service bound to this manager. Performs no I/O.

        Raises:
            InvalidOptionError: If an option has the wrong type or is unsupported here
        """
        config.option.validate()
        if not self.supports_user_service and config.option.get_bool(
            Options.USER_SERVICE, Options.USER_SERVICE_DEFAULT
        ):
            raise InvalidOptionError(f"{self.name} does not support user services")
        return self.impl_class(workload, config)
