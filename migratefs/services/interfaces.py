"""
Service protocol definitions for migratefs.

Author: Michael Economou
Date: 2026-10-08

This module defines Protocol classes that serve as interfaces for the
filesystem services used by the migration tool. Using Protocols allows for
structural subtyping and lets callers substitute in-memory fakes in tests.

All protocols are runtime-checkable, meaning isinstance() works with them.

Usage:
    from migratefs.services.interfaces import FilesystemServiceProtocol

    def prepare(fs: FilesystemServiceProtocol) -> bool:
        return fs.ensure_empty_dir("/var/lib/migration/schema")
"""

from __future__ import annotations

import os
from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from migratefs.models.file_buffer import FileBuffer
    from migratefs.models.path_match_set import PathMatchSet

__all__ = [
    "FilesystemServiceProtocol",
    "ProgramLocatorProtocol",
    "StrPath",
]

# Anything os.fspath() turns into a str path
StrPath = str | os.PathLike[str]


@runtime_checkable
class FilesystemServiceProtocol(Protocol):
    """Protocol for filesystem operations.

    Implementations report failures through their return values: False or
    None, never an exception.
    """

    def read_file(self, path: StrPath, missing_ok: bool = False) -> FileBuffer | None:
        """Read a whole file.

        Args:
            path: File to read.
            missing_ok: Do not log when the file does not exist.

        Returns:
            The file contents, or None on failure.
        """
        ...

    def write_file(self, path: StrPath, data: bytes, append: bool = False) -> bool:
        """Write (or append) all of data to path."""
        ...

    def file_exists(self, path: StrPath) -> bool:
        """Check whether path exists."""
        ...

    def directory_exists(self, path: StrPath) -> bool:
        """Check whether path is an existing directory."""
        ...

    def file_is_empty(self, path: StrPath) -> bool:
        """Check whether path is an existing, readable, empty file."""
        ...

    def move_file(self, source: StrPath, destination: StrPath) -> bool:
        """Move a file, across filesystems if needed, never overwriting."""
        ...

    def duplicate_file(self, source: StrPath, destination: StrPath) -> bool:
        """Copy a file with its owner and mode, never overwriting."""
        ...

    def delete_file(self, path: StrPath) -> bool:
        """Remove a file; a missing file counts as removed."""
        ...

    def ensure_empty_dir(self, path: StrPath) -> bool:
        """Make path an empty directory."""
        ...

    def normalize(self, path: StrPath) -> str | None:
        """Return the real path of an existing file, the path itself otherwise."""
        ...


@runtime_checkable
class ProgramLocatorProtocol(Protocol):
    """Protocol for locating programs on disk."""

    def find_program(self, name: str) -> str | None:
        """Return the first match of name in PATH."""
        ...

    def find_all_programs(self, name: str, deduplicate: bool = True) -> PathMatchSet | None:
        """Return every match of name in PATH, optionally deduplicated."""
        ...

    def get_self_path(self) -> str | None:
        """Return the absolute path of the running program."""
        ...
