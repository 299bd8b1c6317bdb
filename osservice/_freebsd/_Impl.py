"""FreeBSD service implementation - installs an rc.d script."""

import re
from pathlib import Path
from typing import Any

from .. import run_command
from .._DescriptorImpl import _DescriptorImpl
from ..Options import Options
from ..ServiceError import InvalidOptionError
from ._TEMPLATE import RC_SCRIPT

_PID_RE = re.compile(r"is running as pid ([0-9]+)")


class _Impl(_DescriptorImpl):
    """rc.d script under /usr/local/etc/rc.d, controlled through service(8).

    The `one*` verbs are used so start/stop work whether or not the service
    is enabled in rc.conf; RunAtLoad sets the script's default for the
    `<name>_enable` variable.
    """

    platform_name = "freebsd-rcd"
    descriptor_mode = 0o755

    def _user_descriptor_dir(self, home: Path) -> Path:
        raise InvalidOptionError("rc.d does not support user services")

    def _system_descriptor_dir(self) -> Path:
        return Path("/usr/local/etc/rc.d")

    def _template_source(self) -> str:
        return self.option.get_string(Options.RC_SCRIPT, "") or RC_SCRIPT

    def _template_data(self, command: list[str]) -> dict[str, Any]:
        data = super()._template_data(command)
        data["RcName"] = re.sub(r"[^A-Za-z0-9_]", "_", self.config.name)
        return data

    def _status_command(self) -> list[str]:
        return ["service", self.config.name, "onestatus"]

    def _is_running(self, output: str) -> bool:
        return _PID_RE.search(output) is not None

    def _is_unknown_service(self, result: run_command.CommandResult) -> bool:
        output = result.output.lower()
        return "is not running" in output or "does not exist" in output

    def _start_command(self) -> list[str]:
        return ["service", self.config.name, "onestart"]

    def _stop_command(self) -> list[str]:
        return ["service", self.config.name, "onestop"]
