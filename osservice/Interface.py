"""Contract for the program run by a service."""

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from ._AbstractImpl import _AbstractImpl


class Interface(Protocol):
    """Workload hooks called by `Service.run()`.

    Both hooks signal failure by raising.
    """

    def start(self, service: "_AbstractImpl") -> None:
        """Begin work and return promptly; long running work belongs on another thread."""
        ...

    def stop(self, service: "_AbstractImpl") -> None:
        """Request shutdown and return; may block briefly to drain work."""
        ...
