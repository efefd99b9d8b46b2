"""Minimal logging utilities for modeline.

Example:
    >>> from modeline.utils.logger import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.debug("Scanned %d line(s)", 12)
"""

from __future__ import annotations

import logging


def get_logger(name: str) -> logging.Logger:
    """Get a logger for the given name.

    Returns a standard library logger with the "modeline." prefix.

    Args:
        name: Logger name (typically __name__)

    Returns:
        logging.Logger instance

    Example:
        >>> logger = get_logger("scanner")
        >>> logger.name
        'modeline.scanner'
    """
    if not (name == "modeline" or name.startswith("modeline.")):
        name = f"modeline.{name}"
    return logging.getLogger(name)
