"""Open-ended service options with typed accessors."""

from collections.abc import Callable, Iterator, Mapping
from typing import Any

from .ServiceError import InvalidOptionError


class Options(Mapping[str, Any]):
    """Read-only mapping of option name to value.

    Platform behavior (user vs system scope, keep-alive, custom templates,
    run-wait override, ...) is controlled through these options. Values are
    only type-checked when read or when `validate()` is called, so building a
    config never fails on an option the running platform does not use.
    """

    USER_SERVICE = "UserService"
    KEEP_ALIVE = "KeepAlive"
    RUN_AT_LOAD = "RunAtLoad"
    SESSION_CREATE = "SessionCreate"
    LAUNCHD_CONFIG = "LaunchdConfig"
    SYSTEMD_SCRIPT = "SystemdScript"
    SYSV_SCRIPT = "SysvScript"
    RC_SCRIPT = "RCScript"
    RESTART = "Restart"
    RUN_WAIT = "RunWait"

    USER_SERVICE_DEFAULT = False
    KEEP_ALIVE_DEFAULT = True
    RUN_AT_LOAD_DEFAULT = False
    SESSION_CREATE_DEFAULT = False
    RESTART_DEFAULT = "always"

    # Expected value type of every recognized option
    _TYPES: dict[str, type | str] = {
        USER_SERVICE: bool,
        KEEP_ALIVE: bool,
        RUN_AT_LOAD: bool,
        SESSION_CREATE: bool,
        LAUNCHD_CONFIG: str,
        SYSTEMD_SCRIPT: str,
        SYSV_SCRIPT: str,
        RC_SCRIPT: str,
        RESTART: str,
        RUN_WAIT: "callable",
    }

    def __init__(self, values: Mapping[str, Any] | None = None):
        self._values: dict[str, Any] = dict(values or {})

    def __getitem__(self, name: str) -> Any:
        return self._values[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def __repr__(self) -> str:
        return f"Options({self._values!r})"

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Options):
            return self._values == other._values
        if isinstance(other, Mapping):
            return self._values == dict(other)
        return NotImplemented

    def __hash__(self) -> int:
        return hash(tuple(sorted((k, repr(v)) for k, v in self._values.items())))

    def validate(self) -> None:
        """Check every recognized option present has a value of the expected type.

        Raises:
            InvalidOptionError: If a recognized option holds a value of the wrong type
        """
        for name, expected in self._TYPES.items():
            if name not in self._values:
                continue
            value = self._values[name]
            if expected == "callable":
                if not callable(value):
                    raise InvalidOptionError(f"Option {name!r} must be callable, got {type(value).__name__}")
            elif not isinstance(value, expected):  # type: ignore[arg-type]
                raise InvalidOptionError(
                    f"Option {name!r} must be {expected.__name__}, got {type(value).__name__}"  # type: ignore[union-attr]
                )

    def get_bool(self, name: str, default: bool) -> bool:
        value = self._values.get(name, default)
        if not isinstance(value, bool):
            raise InvalidOptionError(f"Option {name!r} must be bool, got {type(value).__name__}")
        return value

    def get_int(self, name: str, default: int) -> int:
        value = self._values.get(name, default)
        if isinstance(value, bool) or not isinstance(value, int):
            raise InvalidOptionError(f"Option {name!r} must be int, got {type(value).__name__}")
        return value

    def get_string(self, name: str, default: str) -> str:
        value = self._values.get(name, default)
        if not isinstance(value, str):
            raise InvalidOptionError(f"Option {name!r} must be str, got {type(value).__name__}")
        return value

    def get_func(self, name: str, default: Callable[[], Any]) -> Callable[[], Any]:
        value = self._values.get(name, default)
        if not callable(value):
            raise InvalidOptionError(f"Option {name!r} must be callable, got {type(value).__name__}")
        return value
