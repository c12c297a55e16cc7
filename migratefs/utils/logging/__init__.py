"""Logging utilities package.

Logging setup, factory, and helper functions.
"""

from migratefs.utils.logging.logger_factory import LoggerFactory, get_cached_logger

__all__ = [
    "LoggerFactory",
    "get_cached_logger",
]
