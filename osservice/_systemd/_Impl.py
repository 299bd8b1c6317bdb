"""Linux service implementation - installs a systemd unit."""

import re
from pathlib import Path
from typing import Any

from .. import run_command
from .._DescriptorImpl import _DescriptorImpl
from ..Options import Options
from ._TEMPLATE import SYSTEMD_SCRIPT

_ACTIVE_RE = re.compile(r"Active: active \(running\)")
_PID_RE = re.compile(r"Main PID: ([0-9]+)")

# systemctl status: 3 = unit inactive, 4 = no such unit
_EXIT_INACTIVE = 3
_EXIT_NO_SUCH_UNIT = 4


class _Impl(_DescriptorImpl):
    """systemd service, system-wide or in the user's manager (`systemctl --user`).

    Install writes the unit and runs `daemon-reload` so systemd sees it, and
    `enable`s it when RunAtLoad is set; the unit is only started by `start`.
    """

    platform_name = "linux-systemd"

    def _user_descriptor_dir(self, home: Path) -> Path:
        return home / ".config" / "systemd" / "user"

    def _system_descriptor_dir(self) -> Path:
        return Path("/etc/systemd/system")

    def _descriptor_filename(self) -> str:
        return self._unit_name()

    def _unit_name(self) -> str:
        return f"{self.config.name}.service"

    def _systemctl(self, *args: str) -> list[str]:
        if self.user_service:
            return ["systemctl", "--user", *args]
        return ["systemctl", *args]

    def _template_source(self) -> str:
        return self.option.get_string(Options.SYSTEMD_SCRIPT, "") or SYSTEMD_SCRIPT

    def _template_data(self, command: list[str]) -> dict[str, Any]:
        data = super()._template_data(command)
        data["Restart"] = self.option.get_string(Options.RESTART, "always" if data["KeepAlive"] else "no")
        return data

    def _status_command(self) -> list[str]:
        return self._systemctl("status", self._unit_name())

    def _is_running(self, output: str) -> bool:
        return _ACTIVE_RE.search(output) is not None and _PID_RE.search(output) is not None

    def _is_unknown_service(self, result: run_command.CommandResult) -> bool:
        if result.exit_code in (_EXIT_INACTIVE, _EXIT_NO_SUCH_UNIT):
            return True
        return "could not be found" in result.output.lower()

    def _start_command(self) -> list[str]:
        return self._systemctl("start", self._unit_name())

    def _stop_command(self) -> list[str]:
        return self._systemctl("stop", self._unit_name())

    def _after_install(self) -> None:
        run_command.run(*self._systemctl("daemon-reload"))
        if self.option.get_bool(Options.RUN_AT_LOAD, Options.RUN_AT_LOAD_DEFAULT):
            run_command.run(*self._systemctl("enable", self._unit_name()))

    def _before_remove(self) -> None:
        run_command.run(*self._systemctl("disable", self._unit_name()))

    def _after_uninstall(self) -> None:
        run_command.run(*self._systemctl("daemon-reload"))
