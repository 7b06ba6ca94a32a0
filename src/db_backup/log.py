"""Logging setup for the command-line entry point."""

import logging

from rich.console import Console
from rich.logging import RichHandler

LOG_FORMAT = "%(message)s"


def configure_logging(verbose: bool = False, console: Console | None = None) -> None:
    """Route ``db_backup`` log records through a rich handler.

    Args:
        verbose: Log DEBUG records (subprocess commands, skipped files).
        console: Console to render on (default: a new stderr console).
    """
    handler = RichHandler(
        console=console or Console(stderr=True),
        show_path=False,
        markup=False,
        rich_tracebacks=True,
    )
    handler.setFormatter(logging.Formatter(LOG_FORMAT))

    logger = logging.getLogger("db_backup")
    logger.handlers = [handler]
    logger.setLevel(logging.DEBUG if verbose else logging.INFO)
    logger.propagate = False
