"""rc.d backend (FreeBSD)."""
