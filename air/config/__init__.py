"""
Configuration handling for air.

This package loads `.air.conf`, falls back to built-in defaults and
normalizes paths before the configuration is handed to the watcher,
builder, runner and logger:
- Defaults → document (merged field by field, or strict)
- Root made absolute, exclusion entries cleaned
- Derived paths exposed on the frozen ``Configuration``
"""

from air.config.defaults import DEFAULT_CONFIG, DEFAULT_CONFIG_FILE
from air.config.settings import (
    BuildConfig,
    ColorConfig,
    Configuration,
    COLOR_ROLES,
    default_config,
)
from air.config.paths import clean_path, expand_path, normalize_config
from air.config.loader import (
    ConfigLoader,
    ConfigLookup,
    Found,
    NotProvided,
    conventional_config_path,
    locate_config,
    read_config,
    resolve_config,
)

__all__ = [
    'DEFAULT_CONFIG',
    'DEFAULT_CONFIG_FILE',
    'BuildConfig',
    'ColorConfig',
    'Configuration',
    'COLOR_ROLES',
    'default_config',
    'clean_path',
    'expand_path',
    'normalize_config',
    'ConfigLoader',
    'ConfigLookup',
    'Found',
    'NotProvided',
    'conventional_config_path',
    'locate_config',
    'read_config',
    'resolve_config',
]
