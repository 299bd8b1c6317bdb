"""systemd backend (Linux)."""
