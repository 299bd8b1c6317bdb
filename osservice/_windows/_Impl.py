"""Windows service implementation - registers the program with the SCM via sc.exe."""

import re
import subprocess

from .. import run_command
from .._AbstractImpl import _AbstractImpl
from ..logging_config import get_logger
from ..Options import Options
from ..ServiceError import AlreadyInstalledError, ManagerCommandError, NotInstalledError
from ..Status import Status

logger = get_logger("service")

_STATE_RE = re.compile(r"STATE\s*:\s*\d+\s+(\w+)")

# ERROR_SERVICE_DOES_NOT_EXIST
_EXIT_NO_SUCH_SERVICE = 1060

_RESTART_ACTIONS = "restart/60000/restart/60000/restart/60000"


class _Impl(_AbstractImpl):
    """Service registered in the Windows SCM.

    The SCM registration is the descriptor: there is no file to render.
    RunAtLoad maps to an automatic start type, KeepAlive to restart-on-failure
    actions.
    """

    platform_name = "windows-service"

    def _sc(self, *args: str) -> list[str]:
        return ["sc.exe", *args]

    def _query(self) -> run_command.CommandResult:
        return run_command.run_with_output(*self._sc("query", self.config.name))

    def bin_path(self) -> str:
        return subprocess.list2cmdline(self.command_line())

    def is_installed(self) -> bool:
        result = self._query()
        if result.exit_code == _EXIT_NO_SUCH_SERVICE:
            return False
        if result.exit_code != 0:
            raise ManagerCommandError(self._sc("query", self.config.name), result.exit_code, result.output)
        return True

    def install(self) -> None:
        if self.is_installed():
            raise AlreadyInstalledError(self.config.name)

        start_type = "auto" if self.option.get_bool(Options.RUN_AT_LOAD, Options.RUN_AT_LOAD_DEFAULT) else "demand"
        args = [
            "create",
            self.config.name,
            "binPath=",
            self.bin_path(),
            "DisplayName=",
            self.config.display_name or self.config.name,
            "start=",
            start_type,
        ]
        if self.config.dependencies:
            args += ["depend=", "/".join(self.config.dependencies)]
        if self.config.user_name:
            args += ["obj=", self.config.user_name]
        run_command.run(*self._sc(*args))

        try:
            if self.config.description:
                run_command.run(*self._sc("description", self.config.name, self.config.description))
            if self.option.get_bool(Options.KEEP_ALIVE, Options.KEEP_ALIVE_DEFAULT):
                run_command.run(*self._sc("failure", self.config.name, "reset=", "0", "actions=", _RESTART_ACTIONS))
        except BaseException:
            run_command.run_with_output(*self._sc("delete", self.config.name))
            raise
        logger.info(f"Installed {self.config.name} in the service control manager")

    def uninstall(self) -> None:
        try:
            self.stop()
        except Exception as exc:
            logger.debug(f"Ignoring stop failure during uninstall of {self.config.name}: {exc}")

        result = run_command.run_with_output(*self._sc("delete", self.config.name))
        if result.exit_code == _EXIT_NO_SUCH_SERVICE:
            logger.debug(f"{self.config.name} already uninstalled")
            return
        if result.exit_code != 0:
            raise ManagerCommandError(self._sc("delete", self.config.name), result.exit_code, result.output)
        logger.info(f"Uninstalled {self.config.name} from the service control manager")

    def status(self) -> Status:
        result = self._query()
        if result.exit_code == _EXIT_NO_SUCH_SERVICE:
            raise NotInstalledError(self.config.name)
        if result.exit_code != 0:
            raise ManagerCommandError(self._sc("query", self.config.name), result.exit_code, result.output)

        match = _STATE_RE.search(result.output)
        if match is None:
            return Status.UNKNOWN
        if match.group(1) == "RUNNING":
            return Status.RUNNING
        return Status.STOPPED

    def start(self) -> None:
        run_command.run(*self._sc("start", self.config.name))

    def stop(self) -> None:
        run_command.run(*self._sc("stop", self.config.name))
