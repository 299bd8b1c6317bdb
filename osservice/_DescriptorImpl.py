"""Service lifecycle for managers driven by a descriptor file on disk."""

import os
import tempfile
from abc import abstractmethod
from pathlib import Path
from typing import Any

from . import run_command
from ._AbstractImpl import _AbstractImpl
from .get_home_dir import get_home_dir
from .logging_config import get_logger
from .Options import Options
from .render_template import render_template
from .ServiceError import AlreadyInstalledError, ManagerCommandError, NotInstalledError
from .Status import Status

logger = get_logger("service")


class _DescriptorImpl(_AbstractImpl):
    """Base for launchd, systemd, SysV and rc.d services.

    The descriptor file is the install state: install writes it, uninstall
    removes it, nothing else touches it. Subclasses say where it lives, how
    it is rendered and which manager commands act on it.
    """

    descriptor_mode: int = 0o644

    @abstractmethod
    def _user_descriptor_dir(self, home: Path) -> Path:
        """Directory holding per-user descriptors."""

    @abstractmethod
    def _system_descriptor_dir(self) -> Path:
        """Directory holding system-wide descriptors."""

    def _descriptor_filename(self) -> str:
        return self.config.name

    @abstractmethod
    def _template_source(self) -> str:
        """Custom template from the options, or the built-in default."""

    def _template_data(self, command: list[str]) -> dict[str, Any]:
        opt = self.option
        return {
            "Name": self.config.name,
            "DisplayName": self.config.display_name,
            "Description": self.config.description,
            "UserName": self.config.user_name,
            "Path": command[0],
            "Arguments": command[1:],
            "WorkingDirectory": self.config.working_directory,
            "Dependencies": list(self.config.dependencies),
            "EnvVars": dict(self.config.env_vars),
            "UserService": self.user_service,
            "KeepAlive": opt.get_bool(Options.KEEP_ALIVE, Options.KEEP_ALIVE_DEFAULT),
            "RunAtLoad": opt.get_bool(Options.RUN_AT_LOAD, Options.RUN_AT_LOAD_DEFAULT),
            "SessionCreate": opt.get_bool(Options.SESSION_CREATE, Options.SESSION_CREATE_DEFAULT),
        }

    @abstractmethod
    def _status_command(self) -> list[str]:
        """Manager command whose output reveals whether the service runs."""

    @abstractmethod
    def _is_running(self, output: str) -> bool:
        """Whether the status command output shows a live process."""

    @abstractmethod
    def _is_unknown_service(self, result: run_command.CommandResult) -> bool:
        """Whether a failed status command is the manager's normal "not running / not found" answer."""

    @abstractmethod
    def _start_command(self) -> list[str]:
        """Manager command that loads/starts the service."""

    @abstractmethod
    def _stop_command(self) -> list[str]:
        """Manager command that unloads/stops the service."""

    def _after_install(self) -> None:
        """Tell the manager about a freshly written descriptor, where it must be told."""

    def _before_remove(self) -> None:
        """Unregister the descriptor before it is deleted, where the manager keeps links to it."""

    def _after_uninstall(self) -> None:
        """Let the manager forget a removed descriptor, where it caches them."""

    def descriptor_path(self) -> Path:
        """Resolve where the descriptor lives for this service.

        Raises:
            HomeDirectoryUnavailableError: For user services when no home directory is known
        """
        if self.user_service:
            return self._user_descriptor_dir(get_home_dir()) / self._descriptor_filename()
        return self._system_descriptor_dir() / self._descriptor_filename()

    def is_installed(self) -> bool:
        return self.descriptor_path().exists()

    def render(self) -> str:
        """Render the descriptor text for this service.

        Raises:
            TemplateError: If the template is invalid or references a missing field
        """
        return render_template(self._template_source(), self._template_data(self.command_line()))

    def install(self) -> None:
        """Write the service descriptor.

        Raises:
            AlreadyInstalledError: If a descriptor already exists (it is left untouched)
            TemplateError: If the descriptor cannot be rendered
            OSError: If the descriptor cannot be written
            ManagerCommandError: If the manager rejects the new descriptor; it is removed again
        """
        path = self.descriptor_path()
        if path.exists():
            raise AlreadyInstalledError(str(path))

        if self.user_service:
            path.parent.mkdir(mode=0o700, parents=True, exist_ok=True)

        content = self.render()
        _write_exclusive(path, content, self.descriptor_mode)
        try:
            self._after_install()
        except BaseException:
            path.unlink(missing_ok=True)
            raise
        logger.info(f"Installed {self.config.name} at {path}")

    def uninstall(self) -> None:
        """Stop the service if possible and delete its descriptor.

        Raises:
            OSError: If the descriptor exists but cannot be removed
        """
        try:
            self.stop()
        except Exception as exc:
            logger.debug(f"Ignoring stop failure during uninstall of {self.config.name}: {exc}")

        path = self.descriptor_path()
        if not path.exists():
            logger.debug(f"No descriptor at {path}; {self.config.name} already uninstalled")
            return

        try:
            self._before_remove()
        except Exception as exc:
            logger.debug(f"Ignoring unregister failure for {self.config.name}: {exc}")

        try:
            path.unlink()
        except FileNotFoundError:
            return
        logger.info(f"Uninstalled {self.config.name} from {path}")

        try:
            self._after_uninstall()
        except Exception as exc:
            logger.debug(f"Ignoring manager reload failure for {self.config.name}: {exc}")

    def status(self) -> Status:
        command = self._status_command()
        result = run_command.run_with_output(*command)
        if self._is_running(result.output):
            return Status.RUNNING
        if result.exit_code != 0 and not self._is_unknown_service(result):
            raise ManagerCommandError(command, result.exit_code, result.output)

        if self.descriptor_path().exists():
            return Status.STOPPED
        raise NotInstalledError(self.config.name)

    def start(self) -> None:
        run_command.run(*self._start_command())

    def stop(self) -> None:
        run_command.run(*self._stop_command())


def _write_exclusive(path: Path, content: str, mode: int) -> None:
    """Write a complete file at `path`, failing if one appears there first.

    Raises:
        AlreadyInstalledError: If `path` exists when the file is linked into place
    """
    fd, tmp_name = tempfile.mkstemp(dir=path.parent, prefix=f".{path.name}.", suffix=".tmp")
    tmp_path = Path(tmp_name)
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as f:
            f.write(content)
        tmp_path.chmod(mode)
        try:
            os.link(tmp_path, path)
        except FileExistsError:
            raise AlreadyInstalledError(str(path)) from None
    finally:
        tmp_path.unlink(missing_ok=True)
