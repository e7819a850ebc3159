"""Define utility functions to simplify logging to the CLI."""

import logging

from rich.console import Console

logger = logging.getLogger(__name__)
console = Console()


def log_info(message: str) -> None:
    """Log the given string to standard output."""
    logger.info(message)


def log_debug(message: str) -> None:
    """Log the given string at debug level."""
    logger.debug(message)
