"""Windows Service Control Manager backend."""
