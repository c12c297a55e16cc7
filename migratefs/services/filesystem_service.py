"""Filesystem operations service implementation.

Author: Michael Economou
Date: 2026-10-08

This module provides a concrete implementation of FilesystemServiceProtocol
and ProgramLocatorProtocol on top of the migratefs core functions, for
callers that prefer an injectable object over module-level functions.

Usage:
    from migratefs.services.filesystem_service import FilesystemService

    service = FilesystemService()
    if service.file_exists("/path/to/dump.sql"):
        service.move_file("/path/to/dump.sql", "/archive/dump.sql")
    pg_dump = service.find_program("pg_dump")
"""

from __future__ import annotations

import logging
import os
from typing import TYPE_CHECKING

from migratefs.config import MAX_PATH_MATCHES
from migratefs.core.buffer_io import append_to_file, read_file, read_file_if_exists, write_file
from migratefs.core.existence import directory_exists, file_exists, file_is_empty
from migratefs.core.move_engine import duplicate_file, move_file, unlink_file
from migratefs.core.path_normalizer import normalize_filename
from migratefs.core.path_search import search_path, search_path_first
from migratefs.core.self_locator import find_program_absolute_path
from migratefs.core.symlink_dedup import deduplicate_symlinks
from migratefs.services.interfaces import StrPath
from migratefs.utils.directories import ensure_empty_dir
from migratefs.utils.logging.logger_factory import get_cached_logger

if TYPE_CHECKING:
    from migratefs.models.file_buffer import FileBuffer
    from migratefs.models.path_match_set import PathMatchSet

logger = get_cached_logger(__name__)


class FilesystemService:
    """Filesystem operations service.

    Implements FilesystemServiceProtocol and ProgramLocatorProtocol.
    Paths may be given as str or os.PathLike objects.
    """

    def __init__(self, path_list: str | None = None, max_matches: int = MAX_PATH_MATCHES) -> None:
        """Initialize the filesystem service.

        Args:
            path_list: Directory list used for program lookups instead of the
                PATH environment variable.
            max_matches: Maximum number of PATH matches accepted per lookup.

        """
        self._path_list = path_list
        self._max_matches = max_matches

    def read_file(self, path: StrPath, missing_ok: bool = False) -> FileBuffer | None:
        """Read a whole file.

        Args:
            path: File to read.
            missing_ok: Do not log when the file does not exist.

        Returns:
            The file contents, or None on failure.

        """
        path = os.fspath(path)
        return read_file_if_exists(path) if missing_ok else read_file(path)

    def write_file(self, path: StrPath, data: bytes, append: bool = False) -> bool:
        """Write all of data to path, truncating it unless append is set."""
        path = os.fspath(path)
        if append:
            return append_to_file(data, len(data), path)
        return write_file(data, len(data), path)

    def file_exists(self, path: StrPath) -> bool:
        return file_exists(os.fspath(path))

    def directory_exists(self, path: StrPath) -> bool:
        return directory_exists(os.fspath(path))

    def file_is_empty(self, path: StrPath) -> bool:
        return file_is_empty(os.fspath(path))

    def move_file(self, source: StrPath, destination: StrPath) -> bool:
        """Move a file, never overwriting an existing destination."""
        return move_file(os.fspath(source), os.fspath(destination))

    def duplicate_file(self, source: StrPath, destination: StrPath) -> bool:
        """Copy a file with its owner, group and mode."""
        return duplicate_file(os.fspath(source), os.fspath(destination))

    def delete_file(self, path: StrPath) -> bool:
        """Remove a file, a missing file counts as removed."""
        return unlink_file(os.fspath(path))

    def ensure_empty_dir(self, path: StrPath) -> bool:
        return ensure_empty_dir(os.fspath(path))

    def normalize(self, path: StrPath) -> str | None:
        return normalize_filename(os.fspath(path))

    def find_program(self, name: str, log_level: int = logging.ERROR) -> str | None:
        """Return the first match of name in PATH.

        Args:
            name: Program file name.
            log_level: Level used to report a missing program.

        """
        return search_path_first(name, log_level=log_level, path_list=self._path_list)

    def find_all_programs(self, name: str, deduplicate: bool = True) -> PathMatchSet | None:
        """Return every match of name in PATH.

        Args:
            name: Program file name.
            deduplicate: Collapse matches resolving to the same file and
                return their real paths.

        Returns:
            The matches, or None on failure.

        """
        matches = search_path(name, capacity=self._max_matches, path_list=self._path_list)
        if matches is None or not deduplicate:
            return matches

        dedup = deduplicate_symlinks(matches)
        if dedup is not None:
            logger.debug(
                "Deduplicated %d match(es) for %s into %d", matches.found, name, dedup.found
            )
        return dedup

    def get_self_path(self) -> str | None:
        return find_program_absolute_path()

