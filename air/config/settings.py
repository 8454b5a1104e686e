# air/config/settings.py
"""
Typed configuration model for air.

* Mirrors the layout of the `.air.conf` document (root, dirs, [build], [color])
* Exposes the resolved values through frozen Pydantic models
* Provides the derived paths and durations the watcher, builder, runner
  and logger consume
"""

from __future__ import annotations

import os
from datetime import timedelta
from typing import Dict, Tuple

from pydantic import BaseModel, ConfigDict, Field

from air.config.defaults import default_config_dict
from air.config.paths import clean_path, join_path

# Fixed logical roles that carry a log color
COLOR_ROLES: Tuple[str, ...] = ("main", "watcher", "build", "runner", "app")

# Largest delay a timedelta can hold
MAX_DELAY_MS = timedelta.max // timedelta(milliseconds=1)


# --------------------------------------------------------------------------- #
# Pydantic models                                                             #
# --------------------------------------------------------------------------- #


class BuildConfig(BaseModel):
    model_config = ConfigDict(frozen=True, extra="ignore")

    bin: str = Field(default="", description="Binary produced by the build, relative to root")
    cmd: str = Field(default="", description="Shell command that builds the binary")
    log: str = Field(default="", description="Build error log file name, placed under tmp_dir")
    include_ext: Tuple[str, ...] = Field(default=(), description="Watched file extensions")
    exclude_dir: Tuple[str, ...] = Field(default=(), description="Directory names skipped by the watcher")
    delay: int = Field(default=0, ge=0, le=MAX_DELAY_MS, strict=True, description="Rebuild delay in milliseconds")

    def watches_ext(self, ext: str) -> bool:
        """Return True if files with extension *ext* (with or without dot) are watched."""
        return ext.lstrip(".") in self.include_ext

    def excludes_dir(self, name: str) -> bool:
        """Return True if directory *name* is excluded from watching."""
        return clean_path(name) in self.exclude_dir


class ColorConfig(BaseModel):
    model_config = ConfigDict(frozen=True, extra="ignore")

    # Color names are passed through to the logger as-is.
    main: str = ""
    watcher: str = ""
    build: str = ""
    runner: str = ""
    app: str = ""


class Configuration(BaseModel):
    model_config = ConfigDict(frozen=True, extra="ignore")

    root: str = ""
    watch_dir: str = ""
    tmp_dir: str = ""
    build: BuildConfig = Field(default_factory=BuildConfig)
    color: ColorConfig = Field(default_factory=ColorConfig)

    # ---- derived paths --------------------------------------------------- #
    def watch_root(self) -> str:
        """Directory the watcher starts from."""
        if self.watch_dir:
            return self.full_path(self.watch_dir)
        return self.root

    def build_log_path(self) -> str:
        return join_path(self.tmp_path(), self.build.log)

    def build_delay(self) -> timedelta:
        return timedelta(milliseconds=self.build.delay)

    def full_path(self, path: str) -> str:
        return join_path(self.root, path)

    def bin_path(self) -> str:
        return join_path(self.root, self.build.bin)

    def tmp_path(self) -> str:
        return join_path(self.root, self.tmp_dir)

    def relative_path(self, path: str) -> str:
        """
        Express *path* relative to root.

        Returns an empty string when no relative path exists, e.g. when only
        one of the two is absolute or they sit on different drives.
        """
        if os.path.isabs(path) != os.path.isabs(self.root):
            return ""
        try:
            return os.path.relpath(path, self.root)
        except ValueError:
            return ""

    # ---- colors ---------------------------------------------------------- #
    def color_info(self) -> Dict[str, str]:
        """Map each logical role to its configured color name."""
        return {role: getattr(self.color, role) for role in COLOR_ROLES}


# --------------------------------------------------------------------------- #
# Default provider                                                            #
# --------------------------------------------------------------------------- #


def default_config() -> Configuration:
    """Build the built-in configuration used when no document is found."""
    return Configuration.model_validate(default_config_dict())
