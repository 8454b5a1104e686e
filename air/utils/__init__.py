"""
Utility functions and classes.

Shared exceptions and logging helpers used across the package.
"""

from air.utils.exceptions import (
    CoreException, ConfigurationError, ConfigFileNotFoundError,
    ConfigParseError, PathResolutionError
)
from air.utils.logging import configure_logging

__all__ = [
    'CoreException',
    'ConfigurationError',
    'ConfigFileNotFoundError',
    'ConfigParseError',
    'PathResolutionError',
    'configure_logging',
]
