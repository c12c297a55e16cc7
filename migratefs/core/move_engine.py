"""Module: move_engine.py

Author: Michael Economou
Date: 2026-10-05

Move and duplicate files the way mv(1) does, without ever overwriting.

move_file() first tries an atomic rename. When source and destination live on
different filesystems the rename fails with EXDEV, and the file is duplicated
(contents, owner, group and mode) before the source is removed. Duplication is
all-or-nothing: a destination that could not be given the source's identity
is removed again.

Usage:
    from migratefs.core.move_engine import move_file

    if not move_file("/var/lib/app/state", "/backup/state"):
        ...  # errors have been logged
"""

from __future__ import annotations

import errno
import os

from migratefs.core.buffer_io import read_file, write_file
from migratefs.core.existence import file_exists
from migratefs.models.file_identity import FileIdentity
from migratefs.utils.logging.logger_factory import get_cached_logger

logger = get_cached_logger(__name__)


def move_file(source_path: str, destination_path: str) -> bool:
    """Move source_path to destination_path.

    Args:
        source_path: Existing file to move.
        destination_path: Target path, which must not exist yet.

    Returns:
        True on success, including the no-op case where both paths are equal.

    """
    if source_path == destination_path:
        logger.warning(
            'Source and destination are the same "%s", nothing to move.', source_path
        )
        return True

    if not file_exists(source_path):
        logger.error('Failed to move file, source file "%s" does not exist.', source_path)
        return False

    if file_exists(destination_path):
        logger.error(
            'Failed to move file, destination file "%s" already exists.', destination_path
        )
        return False

    # first try atomic move operation
    try:
        os.rename(source_path, destination_path)
        return True
    except OSError as e:
        if e.errno != errno.EXDEV:
            logger.error(
                'Failed to move file "%s" to "%s": %s', source_path, destination_path, e
            )
            return False

    logger.debug(
        'Moving "%s" to "%s" across filesystems, copying contents',
        source_path,
        destination_path,
    )

    if not duplicate_file(source_path, destination_path):
        # specific error is already logged
        logger.error("Canceling file move due to errors.")
        return False

    # everything is successful, we can remove the source file
    unlink_file(source_path)

    return True


def duplicate_file(source_path: str, destination_path: str) -> bool:
    """Copy source_path to a new destination_path with the same owner and mode.

    The whole source file is read into memory before anything is written.
    The destination must not exist; it is never overwritten.

    Returns:
        True on success. On failure no destination file is left behind by
        this call.

    """
    buffer = read_file(source_path)
    if buffer is None:
        # errors are logged
        return False

    if file_exists(destination_path):
        logger.error(
            "Failed to duplicate, destination file already exists : %s", destination_path
        )
        return False

    if not write_file(buffer.data, buffer.size, destination_path):
        # errors are logged in write_file, drop whatever part was written
        unlink_file(destination_path)
        return False

    if not _copy_identity(source_path, destination_path):
        unlink_file(destination_path)
        return False

    return True


def _copy_identity(source_path: str, destination_path: str) -> bool:
    """Apply the owner, group and mode of source_path to destination_path."""
    try:
        identity = FileIdentity.from_stat(os.stat(source_path))
    except OSError as e:
        logger.error(
            'Failed to get ownership and file permissions on "%s": %s', source_path, e
        )
        return False

    success = True

    try:
        os.chown(destination_path, identity.uid, identity.gid)
    except OSError as e:
        logger.error('Failed to set user and group id on "%s": %s', destination_path, e)
        success = False

    try:
        os.chmod(destination_path, identity.mode)
    except OSError as e:
        logger.error('Failed to set file permissions on "%s": %s', destination_path, e)
        success = False

    if success:
        logger.debug(
            'Applied %s from "%s" to "%s"',
            identity,
            source_path,
            destination_path,
            extra={"dev_only": True},
        )

    return success


def unlink_file(file_path: str) -> bool:
    """Remove file_path, treating an already missing file as success."""
    try:
        os.unlink(file_path)
    except (FileNotFoundError, NotADirectoryError):
        # if it didn't exist yet, good news!
        return True
    except OSError as e:
        logger.error('Failed to remove file "%s": %s', file_path, e)
        return False

    return True


def create_symbolic_link(source_path: str, target_path: str) -> bool:
    """Create target_path as a symbolic link pointing to source_path."""
    try:
        os.symlink(source_path, target_path)
    except OSError as e:
        logger.error('Failed to create symbolic link to "%s": %s', target_path, e)
        return False

    return True
