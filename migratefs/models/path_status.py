"""Module: path_status.py.

Author: Michael Economou
Date: 2026-10-03

Tri-state path probing results and the error taxonomy of the filesystem layer.
"""

from __future__ import annotations

import errno
from dataclasses import dataclass
from enum import Enum


class FileErrorKind(Enum):
    """Kinds of failure reported by the filesystem layer."""

    NOT_FOUND = "not_found"  # Benign, mostly kept out of the logs
    PERMISSION_DENIED = "permission_denied"
    IO_ERROR = "io_error"  # Short read/write, seek or stat failure
    ALLOCATION_FAILED = "allocation_failed"
    ALREADY_EXISTS = "already_exists"  # Destination collision
    CROSS_DEVICE = "cross_device"  # Rename fallback trigger, never surfaced
    UNRESOLVABLE = "unresolvable"  # realpath failure
    CAPACITY_EXCEEDED = "capacity_exceeded"  # Too many matches or path too long

    @classmethod
    def from_os_error(cls, error: OSError) -> FileErrorKind:
        """Classify an OSError raised by a filesystem call."""
        if error.errno in (errno.ENOENT, errno.ENOTDIR):
            return cls.NOT_FOUND
        if error.errno in (errno.EACCES, errno.EPERM):
            return cls.PERMISSION_DENIED
        if error.errno == errno.EEXIST:
            return cls.ALREADY_EXISTS
        if error.errno == errno.EXDEV:
            return cls.CROSS_DEVICE
        if error.errno in (errno.ELOOP, errno.ENAMETOOLONG):
            return cls.UNRESOLVABLE
        return cls.IO_ERROR


class PathStatus(Enum):
    """Outcome of probing a path on disk."""

    PRESENT = "present"
    ABSENT = "absent"
    ERROR = "error"


@dataclass(frozen=True)
class PathProbe:
    """Result of probing one path.

    Attributes:
        path: The probed path, as given by the caller.
        status: PRESENT, ABSENT or ERROR.
        error: The exception behind an ERROR status (an OSError, or a
            ValueError for paths the OS cannot represent), None otherwise.
        st_mode: The stat mode bits when the path is present.

    """

    path: str
    status: PathStatus
    error: OSError | ValueError | None = None
    st_mode: int | None = None

    @property
    def exists(self) -> bool:
        """True only when the path is known to be present."""
        return self.status is PathStatus.PRESENT

    @property
    def is_error(self) -> bool:
        """True when the probe itself failed."""
        return self.status is PathStatus.ERROR

    @property
    def error_kind(self) -> FileErrorKind | None:
        """Classified cause of an ERROR status."""
        if self.status is PathStatus.ABSENT:
            return FileErrorKind.NOT_FOUND
        if self.error is None:
            return None
        if isinstance(self.error, OSError):
            return FileErrorKind.from_os_error(self.error)
        return FileErrorKind.IO_ERROR
