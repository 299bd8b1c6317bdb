"""Resolve the home directory of the invoking user."""

import os
from pathlib import Path

from .ServiceError import HomeDirectoryUnavailableError


def get_home_dir() -> Path:
    """Get the home directory of the current user.

    Checks the HOME environment variable first (USERPROFILE on Windows), then
    falls back to the password database.

    Raises:
        HomeDirectoryUnavailableError: If no home directory can be resolved
    """
    home_env = os.environ.get("HOME") or os.environ.get("USERPROFILE")
    if home_env:
        return Path(home_env)

    try:
        import pwd

        home = pwd.getpwuid(os.getuid()).pw_dir
    except (ImportError, KeyError):
        home = ""
    if not home:
        raise HomeDirectoryUnavailableError()
    return Path(home)
