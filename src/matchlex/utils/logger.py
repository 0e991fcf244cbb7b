"""Minimal logging utilities for matchlex.

Provides a simple get_logger function that wraps the standard library logging.
The library never installs handlers; applications configure output.

Example:
    >>> from matchlex.utils.logger import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.debug("Scanning %d characters", 42)
"""

from __future__ import annotations

import logging


def get_logger(name: str) -> logging.Logger:
    """Get a logger for the given name.

    Returns a standard library logger with the "matchlex." prefix.

    Args:
        name: Logger name (typically __name__)

    Returns:
        logging.Logger instance

    Example:
        >>> logger = get_logger("mymodule")
        >>> logger.name
        'matchlex.mymodule'
    """
    if not (name == "matchlex" or name.startswith("matchlex.")):
        name = f"matchlex.{name}"
    return logging.getLogger(name)
