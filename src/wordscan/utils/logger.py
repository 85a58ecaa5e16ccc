"""Minimal logging utilities for wordscan.

Provides a simple get_logger function that wraps the standard library logging.

Example:
    >>> from wordscan.utils.logger import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.debug("Scanning %d chars", 42)
"""

from __future__ import annotations

import logging


def get_logger(name: str) -> logging.Logger:
    """Get a logger for the given name.

    Returns a standard library logger with the "wordscan." prefix.

    Args:
        name: Logger name (typically __name__)

    Example:
        >>> logger = get_logger("mymodule")
        >>> logger.name
        'wordscan.mymodule'
    """
    if not (name == "wordscan" or name.startswith("wordscan.")):
        name = f"wordscan.{name}"
    return logging.getLogger(name)
