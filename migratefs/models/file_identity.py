"""Module: file_identity.py.

Author: Michael Economou
Date: 2026-10-03

Ownership and permission bits captured from one file and reapplied to another.
"""

from __future__ import annotations

import os
import stat
from dataclasses import dataclass


@dataclass(frozen=True)
class FileIdentity:
    """Owner, group and permission mode of a file at a point in time.

    Attributes:
        uid: Owner user id.
        gid: Owner group id.
        mode: Permission bits (file type bits stripped).

    """

    uid: int
    gid: int
    mode: int

    @classmethod
    def from_stat(cls, st: os.stat_result) -> FileIdentity:
        """Build an identity from a stat result."""
        return cls(uid=st.st_uid, gid=st.st_gid, mode=stat.S_IMODE(st.st_mode))

    def matches(self, st: os.stat_result) -> bool:
        """Check whether a stat result carries this identity."""
        return self == FileIdentity.from_stat(st)

    def __str__(self) -> str:
        return f"uid={self.uid} gid={self.gid} mode={self.mode:04o}"
