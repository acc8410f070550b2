"""Logging setup shared by every metac module.

Modules call ``get_logger(__name__)``; the CLI calls ``configure_logging``
once to attach a rich handler to the package logger.
"""

import logging
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler

ROOT_LOGGER_NAME = "metac"


def get_logger(name: str) -> logging.Logger:
    """Return a logger living under the ``metac`` namespace."""
    if name != ROOT_LOGGER_NAME and not name.startswith(ROOT_LOGGER_NAME + "."):
        name = f"{ROOT_LOGGER_NAME}.{name}"
    return logging.getLogger(name)


def configure_logging(
    verbose: bool = False, quiet: bool = False, console: Optional[Console] = None
) -> logging.Logger:
    """
    Configure the package logger for console output.

    Args:
        verbose: Show debug messages
        quiet: Only show errors
        console: Rich console to log to (defaults to stderr)

    Returns:
        The configured package logger
    """
    if quiet:
        level = logging.ERROR
    elif verbose:
        level = logging.DEBUG
    else:
        level = logging.WARNING

    logger = logging.getLogger(ROOT_LOGGER_NAME)
    logger.setLevel(level)

    # Replace handlers from a previous call
    for handler in list(logger.handlers):
        if isinstance(handler, RichHandler):
            logger.removeHandler(handler)

    handler = RichHandler(
        console=console or Console(stderr=True),
        show_time=False,
        show_path=verbose,
        markup=False,
    )
    handler.setFormatter(logging.Formatter("%(message)s"))
    logger.addHandler(handler)

    return logger
