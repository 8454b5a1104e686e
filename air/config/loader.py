"""
air.config.loader
=================

Resolves the configuration used by the watcher, builder and runner:

1. An explicit path supplied by the caller (failures are fatal)
2. Otherwise `.air.conf` in the working directory (failures fall back)
3. Otherwise the built-in defaults from :pymod:`air.config.defaults`

Parsed documents are merged over the defaults field by field unless strict
mode is requested, then normalized by :func:`air.config.paths.normalize_config`.
"""

from __future__ import annotations

import logging
import os
import tomllib
from dataclasses import dataclass
from typing import Any, Dict, Optional, Union

import yaml
from pydantic import ValidationError

from air.config.defaults import DEFAULT_CONFIG, DEFAULT_CONFIG_FILE
from air.config.paths import current_dir, normalize_config
from air.config.settings import Configuration, default_config
from air.utils.exceptions import ConfigFileNotFoundError, ConfigParseError, ConfigurationError

logger = logging.getLogger(__name__)

YAML_SUFFIXES = (".yaml", ".yml")


# --------------------------------------------------------------------------- #
# Lookup result                                                               #
# --------------------------------------------------------------------------- #


@dataclass(frozen=True)
class Found:
    """A config file the caller asked for. Read failures are fatal."""

    path: str


@dataclass(frozen=True)
class NotProvided:
    """The caller gave no path. The conventional file is optional."""


ConfigLookup = Union[Found, NotProvided]


def locate_config(path: str = "") -> ConfigLookup:
    """Classify the caller's *path* argument."""
    if path:
        return Found(path=path)
    return NotProvided()


def conventional_config_path(cwd: Optional[str] = None) -> Optional[str]:
    """Return `.air.conf` in *cwd* (or the working directory), or None if unknown."""
    base = cwd if cwd is not None else current_dir()
    if base is None:
        return None
    return os.path.join(base, DEFAULT_CONFIG_FILE)


# --------------------------------------------------------------------------- #
# Helpers                                                                     #
# --------------------------------------------------------------------------- #


def _deep_merge(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    """Recursively merge *override* into *base* (override wins)."""
    result: Dict[str, Any] = {**base}
    for k, v in override.items():
        if (
            k in result
            and isinstance(result[k], dict)
            and isinstance(v, dict)
        ):
            result[k] = _deep_merge(result[k], v)
        else:
            result[k] = v
    return result


def _parse_document(path: str, text: str) -> Dict[str, Any]:
    """Parse *text* as YAML or TOML depending on the file suffix."""
    if path.lower().endswith(YAML_SUFFIXES):
        try:
            data = yaml.safe_load(text)
            if data is None:
                data = {}
        except yaml.YAMLError as exc:
            raise ConfigParseError(path, str(exc)) from exc
    else:
        try:
            data = tomllib.loads(text)
        except tomllib.TOMLDecodeError as exc:
            raise ConfigParseError(path, str(exc)) from exc

    if not isinstance(data, dict):
        raise ConfigParseError(path, "top level must be a table")
    return data


def read_config(path: str, merge_defaults: bool = True) -> Configuration:
    """
    Read and parse the document at *path* into a (not yet normalized)
    ``Configuration``.

    Raises:
        ConfigFileNotFoundError: The file is missing or unreadable.
        ConfigParseError: The file is not valid TOML/YAML or has values of
            the wrong type.
    """
    try:
        with open(path, "rb") as fh:
            raw = fh.read()
    except FileNotFoundError as exc:
        raise ConfigFileNotFoundError(path) from exc
    except OSError as exc:
        raise ConfigFileNotFoundError(path, exc.strerror or str(exc)) from exc

    try:
        text = raw.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise ConfigParseError(path, f"not valid UTF-8: {exc}") from exc

    data = _parse_document(path, text)
    if merge_defaults:
        data = _deep_merge(DEFAULT_CONFIG, data)

    try:
        return Configuration.model_validate(data)
    except ValidationError as exc:
        raise ConfigParseError(path, str(exc)) from exc


# --------------------------------------------------------------------------- #
# Public loader                                                               #
# --------------------------------------------------------------------------- #


class ConfigLoader:
    """
    Resolves a normalized ``Configuration``.

    *cwd* replaces the process working directory both for the conventional
    file lookup and for resolving a relative ``root``.
    """

    def __init__(self, cwd: Optional[str] = None, merge_defaults: bool = True) -> None:
        self._cwd = cwd
        self._merge_defaults = merge_defaults

    def resolve(self, path: str = "") -> Configuration:
        """
        Return the effective configuration for *path*.

        An empty *path* looks for `.air.conf` in the working directory and
        falls back to the defaults if it is missing or invalid.
        """
        lookup = locate_config(path)

        if isinstance(lookup, Found):
            config = read_config(lookup.path, self._merge_defaults)
            logger.info("Using config file %s", lookup.path)
            return normalize_config(config, self._cwd)

        conventional = conventional_config_path(self._cwd)
        if conventional is None:
            logger.debug("Working directory unknown, using default configuration")
            return default_config()

        try:
            config = read_config(conventional, self._merge_defaults)
        except ConfigurationError as exc:
            logger.debug("No usable %s (%s), using default configuration", conventional, exc)
            config = default_config()
        else:
            logger.info("Using config file %s", conventional)

        return normalize_config(config, self._cwd)


def resolve_config(path: str = "", cwd: Optional[str] = None, *, merge_defaults: bool = True) -> Configuration:
    """Shortcut for ``ConfigLoader(cwd, merge_defaults).resolve(path)``."""
    return ConfigLoader(cwd=cwd, merge_defaults=merge_defaults).resolve(path)
