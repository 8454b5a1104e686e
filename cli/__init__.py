"""
Command-line interface for inspecting air configuration.

The Typer application lives in `cli.commands`.
"""

from .commands import app


def main() -> None:
    """Entry point for CLI package.

    Runs the Typer application defined in cli.commands.
    """
    app()


if __name__ == "__main__":
    main()
