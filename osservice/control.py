"""Dispatch a named lifecycle action to a service."""

from ._AbstractImpl import _AbstractImpl
from .ServiceError import ServiceError

CONTROL_ACTIONS = ("start", "stop", "restart", "install", "uninstall")


def control(service: _AbstractImpl, action: str) -> None:
    """Run `action` (one of CONTROL_ACTIONS) on `service`.

    Raises:
        ValueError: If the action is unknown
        ServiceError: If the action fails; the original error is chained
    """
    if action not in CONTROL_ACTIONS:
        raise ValueError(f"Unknown action {action!r} (valid actions: {list(CONTROL_ACTIONS)})")
    try:
        getattr(service, action)()
    except Exception as exc:
        raise ServiceError(f"Failed to {action} {service}: {exc}") from exc
