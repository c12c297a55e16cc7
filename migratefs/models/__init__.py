"""Data models for migratefs.

This package contains:
- FileBuffer: Whole-file contents with an explicit size
- PathMatchSet: Ordered, bounded PATH search results
- FileIdentity: Owner, group and mode carried over by file duplication
- PathProbe / PathStatus: Tri-state existence checks
- FileErrorKind: Error taxonomy of the filesystem layer
"""

from migratefs.models.file_buffer import FileBuffer
from migratefs.models.file_identity import FileIdentity
from migratefs.models.path_match_set import PathMatchSet
from migratefs.models.path_status import FileErrorKind, PathProbe, PathStatus

__all__ = [
    "FileBuffer",
    "FileErrorKind",
    "FileIdentity",
    "PathMatchSet",
    "PathProbe",
    "PathStatus",
]
