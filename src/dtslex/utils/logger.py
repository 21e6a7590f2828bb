"""Minimal logging utilities for dtslex.

Provides a simple get_logger function that wraps the standard library logging.

Example:
    >>> from dtslex.utils.logger import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.debug("re-tokenizing from line %d", 5)
"""

from __future__ import annotations

import logging


def get_logger(name: str) -> logging.Logger:
    """Get a logger for the given name.

    Returns a standard library logger with the "dtslex." prefix.

    Args:
        name: Logger name (typically __name__)

    Returns:
        logging.Logger instance

    Example:
        >>> logger = get_logger("mymodule")
        >>> logger.name
        'dtslex.mymodule'
    """
    if not (name == "dtslex" or name.startswith("dtslex.")):
        name = f"dtslex.{name}"
    return logging.getLogger(name)
