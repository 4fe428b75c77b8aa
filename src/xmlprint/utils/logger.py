"""Minimal logging utilities for xmlprint.

Provides a simple get_logger function that wraps the standard library logging.

Example:
    >>> from xmlprint.utils.logger import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.debug("Printing document")
"""

from __future__ import annotations

import logging


def get_logger(name: str) -> logging.Logger:
    """Get a logger for the given name.

    Returns a standard library logger with the "xmlprint." prefix.

    Args:
        name: Logger name (typically __name__)

    Returns:
        logging.Logger instance

    Example:
        >>> logger = get_logger("mymodule")
        >>> logger.name
        'xmlprint.mymodule'
    """
    if not (name == "xmlprint" or name.startswith("xmlprint.")):
        name = f"xmlprint.{name}"
    return logging.getLogger(name)
