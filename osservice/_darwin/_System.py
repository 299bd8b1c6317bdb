"""launchd service system."""

import sys

from .._AbstractSystem import _AbstractSystem
from ._Impl import _Impl


class _System(_AbstractSystem):
    """macOS launchd."""

    name = "darwin-launchd"
    impl_class = _Impl

    def detect(self) -> bool:
        return sys.platform == "darwin"
