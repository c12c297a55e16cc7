"""Module: directories.py

Author: Michael Economou
Date: 2026-10-07

Directory preparation built on the existence predicates.

Recursive removal and "mkdir -p" are delegated to shutil.rmtree and
os.makedirs.
"""

from __future__ import annotations

import os
import shutil

from migratefs.config import DEFAULT_DIR_MODE
from migratefs.core.existence import directory_exists
from migratefs.utils.logging.logger_factory import get_cached_logger

logger = get_cached_logger(__name__)


def remove_tree(path: str) -> bool:
    """Remove a directory and everything below it."""
    try:
        shutil.rmtree(path)
    except FileNotFoundError:
        return True
    except OSError as e:
        logger.error('Failed to remove directory "%s": %s', path, e)
        return False

    return True


def make_dirs(path: str, mode: int = DEFAULT_DIR_MODE) -> bool:
    """Create path and its missing parents, accepting an existing directory."""
    try:
        os.makedirs(path, mode=mode, exist_ok=True)
    except OSError as e:
        logger.error('Failed to create directory "%s": %s', path, e)
        return False

    return True


def ensure_empty_dir(dirname: str, mode: int = DEFAULT_DIR_MODE) -> bool:
    """Make dirname an empty directory with the given mode.

    An existing directory is removed with all its contents first.

    Returns:
        True on success.

    """
    if directory_exists(dirname) and not remove_tree(dirname):
        return False

    if not make_dirs(dirname, mode):
        logger.error('Failed to ensure empty directory "%s"', dirname)
        return False

    return True
