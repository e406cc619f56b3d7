"""Minimal logging utilities for briefdown.

Provides a simple get_logger function that wraps the standard library logging.
The library only emits records; configuring handlers is left to the caller.

Example:
    >>> from briefdown.utils.logger import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.debug("Classifying briefing")
"""

from __future__ import annotations

import logging


def get_logger(name: str) -> logging.Logger:
    """Get a logger namespaced under "briefdown.".

    Args:
        name: Logger name (typically __name__)

    Returns:
        logging.Logger instance

    Example:
        >>> get_logger("renderers").name
        'briefdown.renderers'
    """
    if not (name == "briefdown" or name.startswith("briefdown.")):
        name = f"briefdown.{name}"
    return logging.getLogger(name)
