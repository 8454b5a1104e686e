"""Default configuration values for air.

Defines the baseline configuration used when no `.air.conf` is found in the
working directory. Keys follow the on-disk document layout so a parsed
document can be merged over them directly.
"""

from __future__ import annotations

import copy
from typing import Any, Dict

# Conventional config file looked up in the working directory
DEFAULT_CONFIG_FILE = ".air.conf"

# Used whenever a document leaves tmp_dir empty
DEFAULT_TMP_DIR = "tmp"

# Default configuration dictionary
DEFAULT_CONFIG: Dict[str, Any] = {
    # -------------------------------------------------------------------------
    # Directories
    # -------------------------------------------------------------------------
    "root": ".",
    "watch_dir": "",       # Empty means watch root itself
    "tmp_dir": DEFAULT_TMP_DIR,

    # -------------------------------------------------------------------------
    # Build Configuration
    # -------------------------------------------------------------------------
    "build": {
        "bin": "tmp/main",
        "cmd": "go build -o ./tmp/main main.go",
        "log": "build-errors.log",       # Written under tmp_dir
        "include_ext": ["go", "tpl", "tmpl", "html"],
        "exclude_dir": ["assets", "tmp", "vendor"],
        "delay": 1000,                   # Milliseconds
    },

    # -------------------------------------------------------------------------
    # Log colors per component
    # -------------------------------------------------------------------------
    "color": {
        "main": "magenta",
        "watcher": "cyan",
        "build": "yellow",
        "runner": "green",
        "app": "white",
    },
}


def default_config_dict() -> Dict[str, Any]:
    """Return a private deep copy of ``DEFAULT_CONFIG``."""
    return copy.deepcopy(DEFAULT_CONFIG)
