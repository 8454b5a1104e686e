"""Path utilities for configuration normalization.

Expands the configured root to an absolute path, cleans exclusion entries,
and provides the join/clean helpers the accessor layer builds on.
"""
from __future__ import annotations

import logging
import os
from typing import TYPE_CHECKING, Optional

from air.config.defaults import DEFAULT_TMP_DIR
from air.utils.exceptions import PathResolutionError

if TYPE_CHECKING:
    from air.config.settings import Configuration

logger = logging.getLogger(__name__)


def current_dir() -> Optional[str]:
    """Return the process working directory, or None if it cannot be determined."""
    try:
        return os.getcwd()
    except OSError as exc:
        logger.debug("Working directory unavailable: %s", exc)
        return None


def clean_path(path: str) -> str:
    """Collapse redundant separators and `.`/`..` segments.

    An empty path cleans to ``"."``.
    """
    return os.path.normpath(path)


def join_path(base: str, *parts: str) -> str:
    """Join *parts* onto *base* and clean the result.

    Absolute parts are placed under *base*: their drive and leading
    separators are dropped.
    """
    separators = os.sep + (os.altsep or "")
    relative = [os.path.splitdrive(part)[1].lstrip(separators) for part in parts]
    return clean_path(os.path.join(base, *relative))


def expand_path(path: str, cwd: Optional[str] = None) -> str:
    """Expand *path* to a clean absolute path.

    A leading ``~`` is replaced by the home directory. Relative paths are
    resolved against *cwd*, falling back to the process working directory.

    Raises:
        PathResolutionError: If a relative path is given and no working
            directory can be determined.
    """
    expanded = os.path.expanduser(path)
    if os.path.isabs(expanded):
        return clean_path(expanded)

    base = cwd if cwd is not None else current_dir()
    if base is None:
        raise PathResolutionError(f"cannot resolve '{path}': working directory unavailable")
    return join_path(os.path.abspath(base), expanded)


def normalize_config(config: "Configuration", cwd: Optional[str] = None) -> "Configuration":
    """Return a normalized copy of *config*.

    * ``root`` becomes absolute
    * an empty ``tmp_dir`` becomes ``"tmp"``
    * every ``build.exclude_dir`` entry is cleaned, order and duplicates kept

    Normalizing an already-normalized value returns an equal value.
    """
    root = expand_path(config.root, cwd)
    tmp_dir = config.tmp_dir or DEFAULT_TMP_DIR
    exclude_dir = tuple(clean_path(entry) for entry in config.build.exclude_dir)

    build = config.build.model_copy(update={"exclude_dir": exclude_dir})
    return config.model_copy(update={"root": root, "tmp_dir": tmp_dir, "build": build})
