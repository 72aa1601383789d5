"""Logging helpers for marcas.

Every module logs under the ``marcas`` namespace. The parser only emits
DEBUG records (discarded markers, unclosed code and custom openers), so the
package root carries a NullHandler and stays silent unless the application
configures logging.

Example:
    >>> import logging
    >>> logging.basicConfig(level=logging.DEBUG)
    >>> from marcas import parse
    >>> root = parse("** unmatched")  # logs "Discarding unmatched bold marker ..."
"""

from __future__ import annotations

import logging

ROOT_LOGGER_NAME = "marcas"

logging.getLogger(ROOT_LOGGER_NAME).addHandler(logging.NullHandler())


def get_logger(name: str) -> logging.Logger:
    """Get a logger inside the marcas namespace.

    Args:
        name: Logger name (typically __name__)

    Returns:
        ``logging.getLogger(name)``, with ``"marcas."`` prepended when name
        is outside the namespace

    Example:
        >>> get_logger("mymodule").name
        'marcas.mymodule'
    """
    if name != ROOT_LOGGER_NAME and not name.startswith(ROOT_LOGGER_NAME + "."):
        name = f"{ROOT_LOGGER_NAME}.{name}"
    return logging.getLogger(name)


__all__ = [
    "ROOT_LOGGER_NAME",
    "get_logger",
]
