"""Windows service system."""

import sys

from .._AbstractSystem import _AbstractSystem
from ._Impl import _Impl


class _System(_AbstractSystem):
    """Windows Service Control Manager."""

    name = "windows-service"
    impl_class = _Impl
    supports_user_service = False

    def detect(self) -> bool:
        return sys.platform == "win32"
