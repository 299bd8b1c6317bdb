"""launchd backend (macOS)."""
