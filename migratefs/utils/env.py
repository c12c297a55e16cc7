"""Module: env.py

Author: Michael Economou
Date: 2026-10-05

Bounded access to environment variables.
"""

from __future__ import annotations

import os

from migratefs.config import MAX_PATH_ENV_SIZE
from migratefs.utils.logging.logger_factory import get_cached_logger

logger = get_cached_logger(__name__)


def env_exists(name: str) -> bool:
    """Return True if the environment variable is set, even to an empty value."""
    return name in os.environ


def get_env_copy(name: str, capacity: int = MAX_PATH_ENV_SIZE) -> str | None:
    """Return a copy of an environment variable's value.

    Args:
        name: Variable name.
        capacity: Size limit in bytes; values of capacity bytes or more are
            refused rather than truncated.

    Returns:
        The value, or None when unset or too long (logged).

    """
    value = os.environ.get(name)
    if value is None:
        logger.error("Failed to get value for environment variable '%s', which is unset", name)
        return None

    value_size = len(os.fsencode(value))
    if value_size >= capacity:
        logger.error(
            "Failed to copy value stored in %s environment variable, "
            "which is %d bytes long, only %d bytes are supported",
            name,
            value_size,
            capacity - 1,
        )
        return None

    return value


def get_env_copy_with_fallback(
    name: str, fallback: str, capacity: int = MAX_PATH_ENV_SIZE
) -> str | None:
    """Like get_env_copy(), returning fallback when the variable is unset."""
    if not env_exists(name):
        return fallback

    return get_env_copy(name, capacity)
