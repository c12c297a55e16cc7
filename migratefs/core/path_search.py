"""Module: path_search.py

Author: Michael Economou
Date: 2026-10-06

Search the directories of a PATH-like variable for a file.

Every directory of the list is probed in order, so the same program can be
found several times (for instance /bin/tool and /usr/bin/tool when /bin is a
symbolic link to /usr/bin). See symlink_dedup for collapsing those.

Usage:
    from migratefs.core.path_search import search_path, search_path_first

    matches = search_path("pg_dump")
    pg_dump = search_path_first("pg_dump")
"""

from __future__ import annotations

import logging
import os

from migratefs.config import MAX_PATH_LENGTH, MAX_PATH_MATCHES
from migratefs.core.existence import file_exists
from migratefs.models.path_match_set import PathMatchSet
from migratefs.utils.env import get_env_copy
from migratefs.utils.logging.logger_factory import get_cached_logger

logger = get_cached_logger(__name__)


def canonicalize_path(path: str) -> str:
    """Clean up a path lexically, without touching the filesystem.

    Collapses "." and ".." components and repeated separators, and removes
    trailing separators. Symbolic links are not resolved, so "a/../b" may
    name another file than "b" on disk; that is fine for PATH candidates.
    """
    if not path:
        return path

    canonical = os.path.normpath(path)

    # POSIX keeps a leading "//" as implementation defined, we do not
    if os.sep == "/" and canonical.startswith("//"):
        canonical = "/" + canonical.lstrip("/")

    return canonical


def join_path_components(head: str, tail: str) -> str:
    """Join a directory and a file name, separating only when head is not empty.

    An empty head (an empty PATH entry) means the current directory, and
    the tail is returned as is.
    """
    if not head:
        return tail
    return f"{head}{os.sep}{tail}"


def path_in_same_directory(base_path: str, file_name: str) -> str:
    """Return the path of file_name in the directory containing base_path."""
    return canonicalize_path(join_path_components(os.path.dirname(base_path), file_name))


def path_length_ok(path: str, limit: int = MAX_PATH_LENGTH) -> bool:
    """Check that path fits in limit bytes once encoded for the OS."""
    return len(os.fsencode(path)) < limit


def search_path(
    filename: str,
    capacity: int = MAX_PATH_MATCHES,
    path_list: str | None = None,
) -> PathMatchSet | None:
    """Find every occurrence of filename in the PATH directories.

    Args:
        filename: File name to look for.
        capacity: Maximum number of matches; more is a failure.
        path_list: Separator-delimited directory list to search instead of
            the PATH environment variable.

    Returns:
        The matches in PATH order (possibly none), or None on failure
        (unset PATH, too many matches, candidate path too long).

    """
    if path_list is None:
        # Work on a copy, the environment is not ours to modify
        path_list = get_env_copy("PATH")
        if path_list is None:
            # errors have already been logged
            return None

    result = PathMatchSet(capacity=capacity)

    # An empty entry, trailing ones included, stands for the current directory
    for directory in path_list.split(os.pathsep):
        candidate = canonicalize_path(join_path_components(directory, filename))

        if not path_length_ok(candidate):
            logger.error(
                'Path "%s" is %d bytes long, paths are limited to %d bytes',
                candidate,
                len(os.fsencode(candidate)),
                MAX_PATH_LENGTH - 1,
            )
            return None

        if not file_exists(candidate):
            continue

        if not result.append(candidate):
            logger.error(
                'Failed to record "%s": found more than %d matches for "%s" in PATH',
                candidate,
                capacity,
                filename,
            )
            return None

    logger.debug('Found %d match(es) for "%s" in PATH', result.found, filename)

    return result


def search_path_first(
    filename: str, log_level: int = logging.ERROR, path_list: str | None = None
) -> str | None:
    """Return the first match of filename in PATH.

    Args:
        filename: File name to look for.
        log_level: Level of the message logged when nothing is found, so that
            callers probing for optional programs can keep it quiet.
        path_list: Directory list to search instead of PATH.

    Returns:
        The first match, or None.

    """
    paths = search_path(filename, path_list=path_list)

    if paths is None or paths.found == 0:
        logger.log(log_level, "Failed to find %s command in your PATH", filename)
        return None

    return paths.first()
