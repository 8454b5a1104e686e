"""
air.utils.exceptions
====================

Custom exceptions for configuration resolution.
"""

class CoreException(Exception):
    """Base exception for all air errors."""
    pass

class ConfigurationError(CoreException):
    """Error while resolving the configuration."""
    pass

class ConfigFileNotFoundError(ConfigurationError):
    """An explicitly requested configuration file could not be read."""

    def __init__(self, path: str, reason: str = "file not found"):
        self.path = path
        self.reason = reason
        super().__init__(f"cannot read config file {path}: {reason}")

class ConfigParseError(ConfigurationError):
    """An explicitly requested configuration file is malformed."""

    def __init__(self, path: str, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"malformed config file {path}: {reason}")

class PathResolutionError(ConfigurationError):
    """A configured path could not be made absolute."""
    pass
