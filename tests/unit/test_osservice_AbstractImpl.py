"""Unit tests for resolving the program a service launches."""

import plistlib
import subprocess
import sys
from pathlib import Path
from types import SimpleNamespace

import pytest

from osservice._darwin._Impl import _Impl as _LaunchdImpl
from osservice._windows._Impl import _Impl as _WindowsImpl


@pytest.fixture
def running(monkeypatch):
    """Pretend the current process was started as `argv`, optionally via -m."""

    def set_running(argv, module=None):
        spec = SimpleNamespace(name=module) if module else None
        monkeypatch.setattr(sys.modules["__main__"], "__spec__", spec)
        monkeypatch.setattr(sys, "argv", argv)

    return set_running


@pytest.fixture
def script(tmp_path):
    path = tmp_path / "myservice.py"
    path.write_text("print('working')\n", encoding="utf-8")
    path.chmod(0o644)
    return path


def _unconfigured(workload, make_config, cls=_LaunchdImpl):
    return cls(workload, make_config(executable="", arguments=["--queue", "default"]))


def test_configured_executable_wins(workload, make_config, running, script):
    running([str(script)])
    service = _LaunchdImpl(workload, make_config(executable="/opt/example/bin/worker"))

    assert service.program() == [str(Path("/opt/example/bin/worker").resolve())]
    assert service.command_line()[1:] == ["--queue", "default"]


def test_module_runs_through_interpreter(workload, make_config, running, script):
    running([str(script)], module="myservice.__main__")
    service = _unconfigured(workload, make_config)

    assert service.command_line() == [sys.executable, "-m", "myservice", "--queue", "default"]


@pytest.mark.skipif(sys.platform == "win32", reason="execute permission bits")
def test_executable_script_runs_directly(workload, make_config, running, script):
    script.chmod(0o755)
    running([str(script)])
    service = _unconfigured(workload, make_config)

    assert service.program() == [str(script.resolve())]
    assert service.exec_path() == str(script.resolve())


@pytest.mark.skipif(sys.platform == "win32", reason="execute permission bits")
def test_plain_script_runs_through_interpreter(workload, make_config, running, script):
    running([str(script)])
    service = _unconfigured(workload, make_config)

    assert service.command_line() == [sys.executable, str(script.resolve()), "--queue", "default"]
    assert service.exec_path() == sys.executable


def test_no_script_falls_back_to_interpreter(workload, make_config, running):
    running(["-c"])
    service = _unconfigured(workload, make_config)

    assert service.command_line() == [sys.executable, "--queue", "default"]


@pytest.mark.skipif(sys.platform == "win32", reason="execute permission bits")
def test_plist_launches_script(workload, make_config, running, script):
    running([str(script)])
    plist = plistlib.loads(_unconfigured(workload, make_config).render().encode("utf-8"))

    assert plist["ProgramArguments"] == [sys.executable, str(script.resolve()), "--queue", "default"]


@pytest.mark.skipif(sys.platform == "win32", reason="execute permission bits")
def test_windows_bin_path_includes_script(workload, make_config, running, script):
    running([str(script)])
    service = _unconfigured(workload, make_config, _WindowsImpl)

    assert service.bin_path() == subprocess.list2cmdline(
        [sys.executable, str(script.resolve()), "--queue", "default"]
    )
