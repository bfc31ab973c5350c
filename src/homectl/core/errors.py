"""
Error types raised by the core layer
Commands catch HomectlError and turn it into a non-zero exit
"""


class HomectlError(Exception):
    """Base class for all homectl errors"""

    # Errors that should be followed by the usage line
    show_usage = False


class UnknownServiceError(HomectlError):
    """Service token is neither 'all' nor a known group"""

    show_usage = True

    def __init__(self, service: str, valid=()):
        message = f"Unknown service: {service}"
        if valid:
            message += f" (expected one of: {', '.join(valid)})"
        super().__init__(message)
        self.service = service


class MissingServiceError(HomectlError):
    """Command needs an explicitly named group"""

    show_usage = True


class MissingDirectoryError(HomectlError):
    """Directory of a named group does not exist"""

    def __init__(self, group: str, path):
        super().__init__(f"Service directory '{group}' not found ({path})")
        self.group = group
        self.path = path


class ComposeError(HomectlError):
    """Compose tool could not be executed"""


class DockerUnavailableError(HomectlError):
    """Docker daemon is not reachable"""


class ConfigError(HomectlError):
    """Settings file is invalid"""


class SetupError(HomectlError):
    """Setup could not create the directory tree"""
