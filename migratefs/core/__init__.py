"""Module: __init__.py

Author: Michael Economou
Date: 2026-10-04

Core filesystem operations: buffer I/O, existence checks, moves and
duplicates, PATH search, symlink deduplication, path normalization and
self-location.
"""

from migratefs.core.buffer_io import (
    append_to_file,
    read_file,
    read_file_if_exists,
    write_file,
)
from migratefs.core.existence import (
    directory_exists,
    file_exists,
    file_is_empty,
    probe_path,
)
from migratefs.core.move_engine import (
    create_symbolic_link,
    duplicate_file,
    move_file,
    unlink_file,
)
from migratefs.core.path_normalizer import normalize_filename
from migratefs.core.path_search import (
    canonicalize_path,
    path_in_same_directory,
    search_path,
    search_path_first,
)
from migratefs.core.self_locator import (
    find_program_absolute_path,
    get_program_absolute_path,
)
from migratefs.core.symlink_dedup import deduplicate_symlinks

__all__ = [
    "append_to_file",
    "canonicalize_path",
    "create_symbolic_link",
    "deduplicate_symlinks",
    "directory_exists",
    "duplicate_file",
    "file_exists",
    "file_is_empty",
    "find_program_absolute_path",
    "get_program_absolute_path",
    "move_file",
    "normalize_filename",
    "path_in_same_directory",
    "probe_path",
    "read_file",
    "read_file_if_exists",
    "search_path",
    "search_path_first",
    "unlink_file",
    "write_file",
]
