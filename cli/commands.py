"""Typer CLI for inspecting the resolved air configuration.

Every command resolves the configuration exactly as the watcher, builder and
runner would and prints it, so a `.air.conf` can be checked before starting
the tool.
"""

from __future__ import annotations

import logging
from typing import Optional

import typer
from rich.console import Console
from rich.table import Table

from air.config import ConfigLoader, Configuration
from air.utils.exceptions import ConfigurationError
from air.utils.logging import configure_logging

console = Console()

# --------------------------------------------------------------------------- #
# Typer app, entry-point is exposed in pyproject.toml as "air-config"        #
# --------------------------------------------------------------------------- #
app = typer.Typer(help="Inspect the configuration air resolves for a project.")


@app.callback()
def _root_options(
    log_level: str = typer.Option(
        "WARNING",
        "--log-level",
        help="Logging level (DEBUG, INFO, WARNING, ERROR).",
        show_default=True,
        case_sensitive=False,
    ),
):
    """Shared option processed before any sub-command executes."""
    configure_logging(level=getattr(logging, log_level.upper(), logging.WARNING))


# Options shared by every command
_CONFIG_OPTION = typer.Option(
    "", "--config", "-c", help="Config file to load. Defaults to .air.conf in the working directory."
)
_CWD_OPTION = typer.Option(
    None, "--cwd", help="Directory used instead of the current working directory."
)
_STRICT_OPTION = typer.Option(
    False, "--strict", help="Do not fill keys missing from the file with defaults."
)


def _load(config: str, cwd: Optional[str], strict: bool) -> Configuration:
    """Resolve the configuration or exit with the error message."""
    try:
        return ConfigLoader(cwd=cwd, merge_defaults=not strict).resolve(config)
    except ConfigurationError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)


# --------------------------------------------------------------------------- #
# show: the full resolved configuration                                       #
# --------------------------------------------------------------------------- #
@app.command("show")
def show(
    config: str = _CONFIG_OPTION,
    cwd: Optional[str] = _CWD_OPTION,
    strict: bool = _STRICT_OPTION,
):
    """Print every resolved configuration value."""
    cfg = _load(config, cwd, strict)

    table = Table(title="air configuration")
    table.add_column("Key", style="bold")
    table.add_column("Value")
    table.add_row("root", cfg.root)
    table.add_row("watch_dir", cfg.watch_dir)
    table.add_row("tmp_dir", cfg.tmp_dir)
    table.add_row("build.bin", cfg.build.bin)
    table.add_row("build.cmd", cfg.build.cmd)
    table.add_row("build.log", cfg.build.log)
    table.add_row("build.include_ext", ", ".join(cfg.build.include_ext))
    table.add_row("build.exclude_dir", ", ".join(cfg.build.exclude_dir))
    table.add_row("build.delay", f"{cfg.build.delay} ms")
    for role, color in cfg.color_info().items():
        table.add_row(f"color.{role}", color)
    console.print(table)


# --------------------------------------------------------------------------- #
# paths: derived paths consumed by watcher/builder/runner                     #
# --------------------------------------------------------------------------- #
@app.command("paths")
def paths(
    config: str = _CONFIG_OPTION,
    cwd: Optional[str] = _CWD_OPTION,
    strict: bool = _STRICT_OPTION,
):
    """Print the derived paths and the rebuild delay."""
    cfg = _load(config, cwd, strict)
    typer.echo(f"watch root: {cfg.watch_root()}")
    typer.echo(f"tmp path:   {cfg.tmp_path()}")
    typer.echo(f"bin path:   {cfg.bin_path()}")
    typer.echo(f"build log:  {cfg.build_log_path()}")
    typer.echo(f"delay:      {cfg.build_delay().total_seconds():g}s")


# --------------------------------------------------------------------------- #
# colors: role to color-name mapping                                          #
# --------------------------------------------------------------------------- #
@app.command("colors")
def colors(
    config: str = _CONFIG_OPTION,
    cwd: Optional[str] = _CWD_OPTION,
    strict: bool = _STRICT_OPTION,
):
    """Print the log color configured for each component."""
    cfg = _load(config, cwd, strict)
    for role, color in cfg.color_info().items():
        typer.echo(f"{role}: {color}")
