"""SysV init service system."""

import sys
from pathlib import Path

from .._AbstractSystem import _AbstractSystem
from ._Impl import _Impl


class _System(_AbstractSystem):
    """Linux booted with a SysV-style init."""

    name = "linux-sysv"
    impl_class = _Impl
    supports_user_service = False

    def detect(self) -> bool:
        if not sys.platform.startswith("linux"):
            return False
        return Path("/etc/init.d").is_dir() and not Path("/run/systemd/system").is_dir()
