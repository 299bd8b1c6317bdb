"""Linux service implementation - installs a SysV init script."""

import re
import shutil
from pathlib import Path

from .. import run_command
from .._DescriptorImpl import _DescriptorImpl
from ..Options import Options
from ..ServiceError import InvalidOptionError
from ._TEMPLATE import SYSV_SCRIPT

_PID_RE = re.compile(r"is running, pid ([0-9]+)")

# LSB status exit code for "program is not running"
_EXIT_NOT_RUNNING = 3


class _Impl(_DescriptorImpl):
    """SysV init script driven through service(8).

    Install writes the script and, when RunAtLoad is set, links it into the
    default runlevels with update-rc.d or chkconfig.
    """

    platform_name = "linux-sysv"
    descriptor_mode = 0o755

    def _user_descriptor_dir(self, home: Path) -> Path:
        raise InvalidOptionError("SysV init does not support user services")

    def _system_descriptor_dir(self) -> Path:
        return Path("/etc/init.d")

    def _template_source(self) -> str:
        return self.option.get_string(Options.SYSV_SCRIPT, "") or SYSV_SCRIPT

    def _status_command(self) -> list[str]:
        return ["service", self.config.name, "status"]

    def _is_running(self, output: str) -> bool:
        return _PID_RE.search(output) is not None

    def _is_unknown_service(self, result: run_command.CommandResult) -> bool:
        if result.exit_code == _EXIT_NOT_RUNNING:
            return True
        return "unrecognized service" in result.output.lower()

    def _start_command(self) -> list[str]:
        return ["service", self.config.name, "start"]

    def _stop_command(self) -> list[str]:
        return ["service", self.config.name, "stop"]

    def _after_install(self) -> None:
        if not self.option.get_bool(Options.RUN_AT_LOAD, Options.RUN_AT_LOAD_DEFAULT):
            return
        if shutil.which("update-rc.d"):
            run_command.run("update-rc.d", self.config.name, "defaults")
        else:
            run_command.run("chkconfig", "--add", self.config.name)

    def _before_remove(self) -> None:
        if shutil.which("update-rc.d"):
            run_command.run("update-rc.d", "-f", self.config.name, "remove")
        elif shutil.which("chkconfig"):
            run_command.run("chkconfig", "--del", self.config.name)
