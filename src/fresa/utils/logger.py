"""Minimal logging utilities for Fresa.

Example:
    >>> from fresa.utils.logger import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.debug("Tokenizing program")
"""

from __future__ import annotations

import logging


def get_logger(name: str) -> logging.Logger:
    """Get a logger for the given name.

    Returns a standard library logger with the "fresa." prefix.

    Args:
        name: Logger name (typically __name__)

    Returns:
        logging.Logger instance

    Example:
        >>> get_logger("mymodule").name
        'fresa.mymodule'
    """
    if not (name == "fresa" or name.startswith("fresa.")):
        name = f"fresa.{name}"
    return logging.getLogger(name)
