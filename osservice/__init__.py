"""Run a program as a native OS service (launchd, systemd, SysV, rc.d, Windows SCM)."""

from ._AbstractImpl import _AbstractImpl as Service
from ._AbstractSystem import _AbstractSystem as System
from .Config import Config
from .control import CONTROL_ACTIONS, control
from .Interface import Interface
from .Logger import Logger
from .Options import Options
from .ServiceError import (
    AlreadyInstalledError,
    HomeDirectoryUnavailableError,
    InvalidOptionError,
    ManagerCommandError,
    NoSystemError,
    NotInstalledError,
    ServiceError,
    SystemAlreadyChosenError,
    TemplateError,
)
from .Status import Status
from .SystemRegistry import available_systems, choose_system, chosen_system, new, platform

__all__ = [
    "AlreadyInstalledError",
    "CONTROL_ACTIONS",
    "Config",
    "HomeDirectoryUnavailableError",
    "Interface",
    "InvalidOptionError",
    "Logger",
    "ManagerCommandError",
    "NoSystemError",
    "NotInstalledError",
    "Options",
    "Service",
    "ServiceError",
    "Status",
    "System",
    "SystemAlreadyChosenError",
    "TemplateError",
    "available_systems",
    "choose_system",
    "chosen_system",
    "control",
    "new",
    "platform",
]
