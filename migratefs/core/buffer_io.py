"""Module: buffer_io.py

Author: Michael Economou
Date: 2026-10-04

Whole-file read, write and append with explicit sizes.

Every function reports failures through the module logger and returns None or
False; nothing is raised to the caller. The size of what was read or written
is always tracked explicitly, so binary content with NUL bytes round-trips.

Usage:
    from migratefs.core.buffer_io import read_file, write_file

    if write_file(b"data", 4, "/tmp/file"):
        buffer = read_file("/tmp/file")
"""

from __future__ import annotations

import contextlib
import os
from typing import BinaryIO

from migratefs.config import DEFAULT_FILE_MODE
from migratefs.models.file_buffer import FileBuffer
from migratefs.utils.logging.logger_factory import get_cached_logger

logger = get_cached_logger(__name__)

OPEN_FLAGS_WRITE = os.O_WRONLY | os.O_TRUNC | os.O_CREAT
OPEN_FLAGS_APPEND = os.O_APPEND | os.O_RDWR | os.O_CREAT


def open_with_umask(
    file_path: str, modes: str, flags: int, umask: int = DEFAULT_FILE_MODE
) -> BinaryIO | None:
    """Open a file stream with explicit creation mode bits.

    Unlike open(), the permission bits of a newly created file are given by
    the caller instead of defaulting to 0666 filtered by the process umask.

    Args:
        file_path: File to open.
        modes: Stream mode for os.fdopen, e.g. "wb" or "ab".
        flags: os.open flags.
        umask: Mode bits used when the file is created.

    Returns:
        The open binary stream, or None on failure (logged).

    """
    try:
        fd = os.open(file_path, flags, umask)
    except (OSError, ValueError) as e:
        logger.error('Failed to open file "%s": %s', file_path, e)
        return None

    try:
        return os.fdopen(fd, modes)
    except (OSError, ValueError) as e:
        logger.error('Failed to open file "%s": %s', file_path, e)
        os.close(fd)
        return None


def write_file(data: bytes, file_size: int, file_path: str) -> bool:
    """Create or truncate file_path and write exactly file_size bytes of data.

    Args:
        data: Bytes-like content.
        file_size: Number of bytes to write from the start of data.
        file_path: Destination file, created with mode 0644.

    Returns:
        True on success.

    """
    stream = open_with_umask(file_path, "wb", OPEN_FLAGS_WRITE, DEFAULT_FILE_MODE)
    if stream is None:
        # errors have already been logged
        return False

    return _write_stream(stream, data, file_size, file_path)


def append_to_file(data: bytes, file_size: int, file_path: str) -> bool:
    """Append exactly file_size bytes of data to the end of file_path.

    The file is created with mode 0644 when missing.

    Returns:
        True on success.

    """
    stream = open_with_umask(file_path, "ab", OPEN_FLAGS_APPEND, DEFAULT_FILE_MODE)
    if stream is None:
        return False

    return _write_stream(stream, data, file_size, file_path)


def _write_stream(stream: BinaryIO, data: bytes, file_size: int, file_path: str) -> bool:
    """Write to an open stream and close it on every path."""
    if file_size < 0:
        logger.error('Failed to write file "%s": invalid size %d', file_path, file_size)
        stream.close()
        return False

    try:
        chunk = memoryview(data)[:file_size]
        written = stream.write(chunk)
    except (OSError, TypeError) as e:
        logger.error('Failed to write file "%s": %s', file_path, e)
        with contextlib.suppress(OSError):
            stream.close()
        return False

    if written is None or written < file_size:
        logger.error(
            'Failed to write file "%s": wrote %s of %d bytes', file_path, written, file_size
        )
        with contextlib.suppress(OSError):
            stream.close()
        return False

    try:
        stream.close()
    except OSError as e:
        logger.error('Failed to write file "%s": %s', file_path, e)
        return False

    return True


def read_file(file_path: str) -> FileBuffer | None:
    """Read the entire contents of file_path.

    Returns:
        A FileBuffer, or None on failure (logged).

    """
    try:
        stream = open(file_path, "rb")  # noqa: SIM115 - closed by _read_stream
    except (OSError, ValueError) as e:
        logger.error('Failed to open file "%s": %s', file_path, e)
        return None

    return _read_stream(stream, file_path)


def read_file_if_exists(file_path: str) -> FileBuffer | None:
    """Read the entire contents of file_path, quietly when it does not exist.

    A missing file still returns None, it is only kept out of the logs so that
    callers can probe for optional files without noise.

    Returns:
        A FileBuffer, or None on failure.

    """
    try:
        stream = open(file_path, "rb")  # noqa: SIM115 - closed by _read_stream
    except FileNotFoundError:
        return None
    except (OSError, ValueError) as e:
        logger.error('Failed to open file "%s": %s', file_path, e)
        return None

    return _read_stream(stream, file_path)


def _read_stream(stream: BinaryIO, file_path: str) -> FileBuffer | None:
    """Measure, rewind and read a whole stream, closing it on every path."""
    try:
        with stream:
            stream.seek(0, os.SEEK_END)
            file_size = stream.tell()
            stream.seek(0, os.SEEK_SET)

            try:
                data = stream.read(file_size)
            except MemoryError:
                logger.error("Failed to allocate %d bytes", file_size)
                logger.error('Failed to read file "%s": out of memory', file_path)
                return None
    except OSError as e:
        logger.error('Failed to read file "%s": %s', file_path, e)
        return None

    if len(data) < file_size:
        logger.error(
            'Failed to read file "%s": read %d of %d bytes', file_path, len(data), file_size
        )
        return None

    return FileBuffer(data=data, size=file_size, path=file_path)
