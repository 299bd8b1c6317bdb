"""Run service manager commands."""

import subprocess
from dataclasses import dataclass

from .logging_config import get_logger
from .ServiceError import ManagerCommandError

logger = get_logger("run_command")


@dataclass(frozen=True)
class CommandResult:
    """Outcome of a manager command."""

    exit_code: int
    output: str
    """Combined stdout and stderr."""


def run_with_output(name: str, *args: str) -> CommandResult:
    """Run a command and capture its exit code and output.

    A non-zero exit is not an error here; callers interpret it.

    Raises:
        ManagerCommandError: If the command could not be launched at all
    """
    command = [name, *args]
    logger.debug(f"Running: {' '.join(command)}")
    try:
        result = subprocess.run(command, capture_output=True, text=True, check=False)
    except OSError as exc:
        raise ManagerCommandError(command, -1, str(exc)) from exc
    output = (result.stdout or "") + (result.stderr or "")
    logger.debug(f"{name} exited with {result.returncode}")
    return CommandResult(exit_code=result.returncode, output=output)


def run(name: str, *args: str) -> None:
    """Run a command, raising if it fails.

    Raises:
        ManagerCommandError: If the command cannot be launched or exits non-zero
    """
    result = run_with_output(name, *args)
    if result.exit_code != 0:
        raise ManagerCommandError([name, *args], result.exit_code, result.output)
