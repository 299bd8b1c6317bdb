"""Service run status."""

from enum import Enum


class Status(Enum):
    """Run status of a service as reported by its manager."""

    UNKNOWN = "unknown"
    RUNNING = "running"
    STOPPED = "stopped"
