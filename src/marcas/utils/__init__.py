"""Utility modules for marcas.

Provides:
- logger: get_logger and the package logger namespace
"""

from marcas.utils.logger import ROOT_LOGGER_NAME, get_logger

__all__ = [
    "ROOT_LOGGER_NAME",
    "get_logger",
]
