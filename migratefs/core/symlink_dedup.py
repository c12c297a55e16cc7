"""Module: symlink_dedup.py

Author: Michael Economou
Date: 2026-10-06

Remove PATH search results that point to the same file on disk.

In modern Debian installations, for instance, /bin is a symbolic link to
/usr/bin, and a program installed once is found both as /bin/pg_config and
/usr/bin/pg_config. Each match is resolved to its real path and only the first
occurrence of every real path is kept. The kept entry is the resolved path
itself, so running the deduplication again gives the same result.
"""

from __future__ import annotations

import os
from pathlib import Path

from migratefs.config import MAX_PATH_LENGTH
from migratefs.core.path_search import path_length_ok
from migratefs.models.path_match_set import PathMatchSet
from migratefs.utils.logging.logger_factory import get_cached_logger

logger = get_cached_logger(__name__)


def resolve_real_path(path: str) -> str | None:
    """Resolve every symbolic link in path, which must exist.

    Returns:
        The real path, or None when it cannot be resolved (logged).

    """
    try:
        return str(Path(path).resolve(strict=True))
    except (OSError, RuntimeError) as e:
        logger.error('Failed to normalize file name "%s": %s', path, e)
        return None


def deduplicate_symlinks(results: PathMatchSet) -> PathMatchSet | None:
    """Collapse matches that resolve to the same real path.

    Args:
        results: Matches from search_path(), in PATH order.

    Returns:
        A new PathMatchSet holding the distinct real paths in order of first
        appearance, or None when any match cannot be resolved or a real path
        is too long. No partial result is returned.

    """
    dedup = PathMatchSet(capacity=results.capacity)

    for current_path in results:
        current_real_path = resolve_real_path(current_path)
        if current_real_path is None:
            return None

        if current_real_path in dedup:
            logger.debug('dedup: skipping "%s"', current_path)
            continue

        if not path_length_ok(current_real_path):
            logger.error(
                'Real path "%s" is %d bytes long, and paths are limited to %d bytes',
                current_real_path,
                len(os.fsencode(current_real_path)),
                MAX_PATH_LENGTH - 1,
            )
            return None

        if not dedup.append(current_real_path):
            logger.error(
                'Failed to record "%s": more than %d distinct matches',
                current_real_path,
                dedup.capacity,
            )
            return None

    return dedup
