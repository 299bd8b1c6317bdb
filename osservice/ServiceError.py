"""Exception hierarchy for service management."""


class ServiceError(Exception):
    """Base class for every failure raised by osservice."""


class AlreadyInstalledError(ServiceError):
    """A descriptor already exists where install would write one."""

    def __init__(self, path: str):
        super().__init__(f"Init already exists: {path}")
        self.path = path


class NotInstalledError(ServiceError):
    """The service manager has no record of the service and no descriptor exists."""

    def __init__(self, name: str):
        super().__init__(f"Service is not installed: {name}")
        self.name = name


class TemplateError(ServiceError):
    """Rendering the service descriptor failed."""


class ManagerCommandError(ServiceError):
    """A service manager command failed.

    Attributes:
        command: The argv that was executed
        exit_code: Process exit code, or -1 if the command could not be launched
        output: Combined stdout and stderr of the command
    """

    def __init__(self, command: list[str], exit_code: int, output: str = ""):
        message = f"{' '.join(command)} failed with exit code {exit_code}"
        if output.strip():
            message += f": {output.strip()}"
        super().__init__(message)
        self.command = command
        self.exit_code = exit_code
        self.output = output


class HomeDirectoryUnavailableError(ServiceError):
    """The home directory of the invoking user could not be determined."""

    def __init__(self):
        super().__init__("User home directory not found.")


class InvalidOptionError(ServiceError):
    """An option value has the wrong type or is not supported by the system."""


class NoSystemError(ServiceError):
    """No service system matches the running platform."""


class SystemAlreadyChosenError(ServiceError):
    """A system was chosen for the registry after one was already active."""
