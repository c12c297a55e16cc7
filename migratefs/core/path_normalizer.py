"""
path_normalizer.py

Canonical form of a single file name.

Files that exist are replaced by their real path: symbolic links resolved,
double slashes and other odd constructs pruned. Files that do not exist yet,
typically configuration files created later, are passed through unchanged.
"""

from __future__ import annotations

import os
from pathlib import Path

from migratefs.config import MAX_PATH_LENGTH
from migratefs.core.existence import file_exists
from migratefs.core.path_search import path_length_ok
from migratefs.utils.logging.logger_factory import get_cached_logger

logger = get_cached_logger(__name__)


def normalize_filename(filename: str) -> str | None:
    """
    Return the real path of filename when it exists, filename itself otherwise.

    Normalizing a normalized path returns it unchanged.

    Args:
        filename (str): The file name to normalize

    Returns:
        str | None: The normalized file name, or None when an existing file
        cannot be resolved or its real path is too long
    """
    if not file_exists(filename):
        if not path_length_ok(filename):
            logger.critical(
                'File name "%s" is %d bytes long, and paths are limited to %d bytes',
                filename,
                len(os.fsencode(filename)),
                MAX_PATH_LENGTH - 1,
            )
            return None
        return filename

    try:
        real_path = str(Path(filename).resolve(strict=True))
    except (OSError, RuntimeError) as e:
        logger.critical('Failed to normalize file name "%s": %s', filename, e)
        return None

    if not path_length_ok(real_path):
        logger.critical(
            'Real path "%s" is %d bytes long, and paths are limited to %d bytes',
            real_path,
            len(os.fsencode(real_path)),
            MAX_PATH_LENGTH - 1,
        )
        return None

    if real_path != filename:
        logger.debug('Normalized "%s" to "%s"', filename, real_path, extra={"dev_only": True})

    return real_path
