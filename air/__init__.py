"""
air package initialization.

This module re-exports the configuration entry points used by the rest of
the tool.
"""
import logging

__version__ = "0.1.0"

logger = logging.getLogger(__name__)

# --------------------------------------------------------------------------- #
# Config components                                                           #
# --------------------------------------------------------------------------- #
from air.config import Configuration, ConfigLoader, default_config, resolve_config
from air.utils.exceptions import ConfigurationError

__all__ = [
    'Configuration',
    'ConfigLoader',
    'ConfigurationError',
    'default_config',
    'resolve_config',
]
