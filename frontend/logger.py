"""
Logging helpers for the script frontend.

Wraps the standard library logging module so every logger lives under the
``frontend`` namespace. The library never installs handlers; applications
configure logging themselves.

Example:
    >>> from frontend.logger import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.debug("scanning %s", "main.script")
"""

import logging


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger for the given name, prefixed with ``frontend.``.

    Example:
        >>> get_logger("mymodule").name
        'frontend.mymodule'
    """
    if not (name == "frontend" or name.startswith("frontend.")):
        name = f"frontend.{name}"
    return logging.getLogger(name)
