"""Unit tests for service system selection."""

import pytest

from osservice._AbstractSystem import _AbstractSystem
from osservice._darwin._Impl import _Impl as _DarwinImpl
from osservice.ServiceError import NoSystemError, SystemAlreadyChosenError
from osservice.SystemRegistry import SystemRegistry, default_registry


class _FakeSystem(_AbstractSystem):
    impl_class = _DarwinImpl

    def __init__(self, name: str, detected: bool):
        self.name = name
        self.detected = detected
        self.detect_calls = 0

    def detect(self) -> bool:
        self.detect_calls += 1
        return self.detected


def test_first_detected_candidate_wins():
    first = _FakeSystem("first", False)
    second = _FakeSystem("second", True)
    third = _FakeSystem("third", True)
    registry = SystemRegistry([first, second, third])

    assert registry.chosen() is second
    assert third.detect_calls == 0


def test_detection_runs_once():
    system = _FakeSystem("only", True)
    registry = SystemRegistry([system])

    registry.chosen()
    registry.chosen()

    assert system.detect_calls == 1


def test_no_candidate_detected():
    registry = SystemRegistry([_FakeSystem("a", False), _FakeSystem("b", False)])
    with pytest.raises(NoSystemError):
        registry.chosen()


def test_available_lists_every_detected_candidate():
    a, b, c = _FakeSystem("a", True), _FakeSystem("b", False), _FakeSystem("c", True)
    assert SystemRegistry([a, b, c]).available() == [a, c]


def test_choose_overrides_detection():
    detected = _FakeSystem("detected", True)
    pinned = _FakeSystem("pinned", False)
    registry = SystemRegistry([detected, pinned])

    registry.choose(pinned)

    assert registry.chosen() is pinned
    assert detected.detect_calls == 0


def test_choose_is_final():
    a, b = _FakeSystem("a", True), _FakeSystem("b", True)
    registry = SystemRegistry([a, b])
    registry.chosen()

    registry.choose(a)
    with pytest.raises(SystemAlreadyChosenError):
        registry.choose(b)
    assert registry.chosen() is a


def test_new_uses_chosen_system(workload, make_config):
    registry = SystemRegistry([_FakeSystem("fake", True)])
    service = registry.new(workload, make_config())
    assert isinstance(service, _DarwinImpl)
    assert service.workload is workload


def test_default_candidates_in_priority_order():
    names = [system.name for system in default_registry().candidates]
    assert names == ["darwin-launchd", "linux-systemd", "linux-sysv", "freebsd-rcd", "windows-service"]
