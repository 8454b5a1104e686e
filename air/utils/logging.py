import logging
from logging import Handler

from rich.console import Console
from rich.logging import RichHandler

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging(level: int = logging.INFO, use_rich: bool = True, console: Console | None = None) -> None:
    """
    Configure root logging for the application.
    """
    handlers: list[Handler]
    if use_rich:
        handlers = [RichHandler(console=console, show_time=True, show_level=True, show_path=False)]
        fmt = "%(message)s"
    else:
        handlers = [logging.StreamHandler()]
        fmt = LOG_FORMAT
    logging.basicConfig(level=level, format=fmt, handlers=handlers, force=True)