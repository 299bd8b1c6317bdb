"""macOS service implementation - installs a launchd agent or daemon."""

import re
from pathlib import Path

from ..run_command import CommandResult
from .._DescriptorImpl import _DescriptorImpl
from ..Options import Options
from ._TEMPLATE import LAUNCHD_CONFIG

_PID_RE = re.compile(r'"PID" = ([0-9]+);')


class _Impl(_DescriptorImpl):
    """launchd service.

    Install only writes the plist; `start` loads it with launchctl, which
    also launches the program when RunAtLoad or KeepAlive is set.
    """

    platform_name = "darwin-launchd"

    def _user_descriptor_dir(self, home: Path) -> Path:
        return home / "Library" / "LaunchAgents"

    def _system_descriptor_dir(self) -> Path:
        return Path("/Library/LaunchDaemons")

    def _descriptor_filename(self) -> str:
        return f"{self.config.name}.plist"

    def _template_source(self) -> str:
        return self.option.get_string(Options.LAUNCHD_CONFIG, "") or LAUNCHD_CONFIG

    def _status_command(self) -> list[str]:
        return ["launchctl", "list", self.config.name]

    def _is_running(self, output: str) -> bool:
        return _PID_RE.search(output) is not None

    def _is_unknown_service(self, result: CommandResult) -> bool:
        # launchctl exits 113 with "Could not find service" for unloaded labels
        return result.exit_code == 113 or "could not find service" in result.output.lower()

    def _start_command(self) -> list[str]:
        return ["launchctl", "load", str(self.descriptor_path())]

    def _stop_command(self) -> list[str]:
        return ["launchctl", "unload", str(self.descriptor_path())]
