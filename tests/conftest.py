"""Shared pytest configuration and fixtures for all tests."""

from pathlib import Path

import pytest

from osservice.Config import Config
from osservice.is_interactive import is_interactive
from osservice.run_command import CommandResult


def pytest_configure(config):
    config.addinivalue_line("markers", "unit: fast tests with the service manager stubbed")
    config.addinivalue_line("markers", "integration: tests against a real service manager")


def pytest_collection_modifyitems(config, items):
    """Automatically apply markers based on test file location."""
    for item in items:
        path_str = str(item.fspath)
        if "/unit/" in path_str:
            item.add_marker(pytest.mark.unit)
        elif "/integration/" in path_str:
            item.add_marker(pytest.mark.integration)


# =============================================================================
# Helpers
# =============================================================================


class Workload:
    """Workload recording the hooks it receives."""

    def __init__(self, start_error: Exception | None = None, stop_error: Exception | None = None):
        self.calls: list[str] = []
        self.start_error = start_error
        self.stop_error = stop_error

    def start(self, service) -> None:
        self.calls.append("start")
        if self.start_error is not None:
            raise self.start_error

    def stop(self, service) -> None:
        self.calls.append("stop")
        if self.stop_error is not None:
            raise self.stop_error


class FakeManager:
    """Stand-in for the service manager commands.

    Responses are matched by command prefix, most recently added first;
    unmatched commands succeed with no output.
    """

    def __init__(self):
        self.calls: list[list[str]] = []
        self._responses: list[tuple[tuple[str, ...], CommandResult]] = []

    def respond(self, *prefix: str, exit_code: int = 0, output: str = "") -> None:
        self._responses.insert(0, (prefix, CommandResult(exit_code=exit_code, output=output)))

    def __call__(self, name: str, *args: str) -> CommandResult:
        command = (name, *args)
        self.calls.append(list(command))
        for prefix, result in self._responses:
            if command[: len(prefix)] == prefix:
                return result
        return CommandResult(exit_code=0, output="")

    def verbs(self) -> list[str]:
        """The manager subcommands called so far, e.g. ["stop", "start"]."""
        return [self._verb(call) for call in self.calls]

    @staticmethod
    def _verb(call: list[str]) -> str:
        if call[0] == "service":
            return call[2]
        args = [a for a in call[1:] if not a.startswith("--")]
        return args[0] if args else ""


def _make_config(**overrides) -> Config:
    values = {
        "name": "com.example.worker",
        "display_name": "Example Worker",
        "description": "Processes example jobs",
        "executable": "/opt/example/bin/worker",
        "arguments": ["--queue", "default"],
    }
    values.update(overrides)
    return Config(**values)


# =============================================================================
# Fixtures
# =============================================================================


@pytest.fixture
def home(tmp_path: Path, monkeypatch) -> Path:
    """Isolated HOME for user-scope descriptors."""
    home_dir = tmp_path / "home"
    home_dir.mkdir()
    monkeypatch.setenv("HOME", str(home_dir))
    return home_dir


@pytest.fixture
def manager(monkeypatch) -> FakeManager:
    """Replace manager command execution with a FakeManager."""
    fake = FakeManager()
    monkeypatch.setattr("osservice.run_command.run_with_output", fake)
    return fake


@pytest.fixture
def workload() -> Workload:
    return Workload()


@pytest.fixture
def make_workload():
    """Factory for workloads whose hooks raise."""
    return Workload


@pytest.fixture
def make_config():
    """Factory for service configs; keyword arguments override the defaults."""
    return _make_config


@pytest.fixture(autouse=True)
def _reset_interactive_cache():
    is_interactive.cache_clear()
    yield
    is_interactive.cache_clear()


@pytest.fixture
def no_settle(monkeypatch):
    """Skip the restart settling pause."""
    monkeypatch.setattr("osservice._AbstractImpl.RESTART_SETTLE_SECS", 0)
