"""Minimal logging utilities for Escaner.

Provides a simple get_logger function that wraps the standard library logging.
Escaner never installs handlers; applications decide where records go.

Example:
    >>> from escaner.utils.logger import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.debug("Recognizing token")
"""

from __future__ import annotations

import logging


def get_logger(name: str) -> logging.Logger:
    """Get a logger for the given name.

    Returns a standard library logger with the "escaner." prefix.

    Args:
        name: Logger name (typically __name__)

    Returns:
        logging.Logger instance

    Example:
        >>> logger = get_logger("mymodule")
        >>> logger.name
        'escaner.mymodule'
    """
    if not (name == "escaner" or name.startswith("escaner.")):
        name = f"escaner.{name}"
    return logging.getLogger(name)
