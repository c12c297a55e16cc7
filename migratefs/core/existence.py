"""Module: existence.py

Author: Michael Economou
Date: 2026-10-04

Existence and classification predicates.

probe_path() is the tri-state primitive: a path is PRESENT, ABSENT, or the
check itself failed (ERROR). The boolean helpers collapse ERROR into False
for call sites that do not need the distinction; the failure is still logged.
"""

from __future__ import annotations

import os
import stat

from migratefs.core.buffer_io import read_file
from migratefs.models.path_status import PathProbe, PathStatus
from migratefs.utils.logging.logger_factory import get_cached_logger

logger = get_cached_logger(__name__)


def probe_path(path: str) -> PathProbe:
    """Check whether path exists, telling absence apart from failure.

    Symbolic links are followed: a dangling link is ABSENT.

    Args:
        path: Path to check.

    Returns:
        PathProbe with status PRESENT, ABSENT or ERROR.

    """
    try:
        st = os.stat(path)
    except (FileNotFoundError, NotADirectoryError):
        # Not interesting: the caller figures it out, maybe then creating the file
        return PathProbe(path=path, status=PathStatus.ABSENT)
    except (OSError, ValueError) as e:
        logger.error('Failed to check if file "%s" exists: %s', path, e)
        return PathProbe(path=path, status=PathStatus.ERROR, error=e)

    return PathProbe(path=path, status=PathStatus.PRESENT, st_mode=st.st_mode)


def file_exists(path: str) -> bool:
    """Return True if path is known to exist, False when absent or on error."""
    return probe_path(path).exists


def directory_exists(path: str) -> bool:
    """Return True if path exists and is a directory."""
    probe = probe_path(path)
    if not probe.exists:
        return False

    return stat.S_ISDIR(probe.st_mode)


def file_is_empty(path: str) -> bool:
    """Return True if path exists, can be read entirely, and is empty.

    Read failures yield False; callers that need to tell an empty file from
    an unreadable one should call read_file() themselves.
    """
    if not file_exists(path):
        return False

    buffer = read_file(path)
    if buffer is None:
        # errors are logged
        return False

    return buffer.size == 0
