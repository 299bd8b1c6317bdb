"""systemd service system."""

import sys
from pathlib import Path

from .._AbstractSystem import _AbstractSystem
from ._Impl import _Impl


class _System(_AbstractSystem):
    """Linux with systemd as PID 1."""

    name = "linux-systemd"
    impl_class = _Impl

    def detect(self) -> bool:
        return sys.platform.startswith("linux") and Path("/run/systemd/system").is_dir()
