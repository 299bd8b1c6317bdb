"""SysV init backend (Linux without systemd)."""
