"""FreeBSD rc.d service system."""

import sys

from .._AbstractSystem import _AbstractSystem
from ._Impl import _Impl


class _System(_AbstractSystem):
    """FreeBSD rc.d."""

    name = "freebsd-rcd"
    impl_class = _Impl
    supports_user_service = False

    def detect(self) -> bool:
        return sys.platform.startswith("freebsd")
