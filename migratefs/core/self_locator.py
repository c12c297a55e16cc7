"""Module: self_locator.py

Author: Michael Economou
Date: 2026-10-07

Find the absolute path of the running program.

The migration tool re-executes itself for sub-processes and needs its own
absolute path for that. The interactive shell only sets argv[0] to the command
as typed (often a bare name found in PATH), so the path is found in order:

1. macOS: the executable path reported by the OS (through psutil);
2. other systems: the first /proc pseudo-file linking to the executable;
3. argv[0] when it is already absolute;
4. the first match of argv[0] in PATH.

Failing all of these is not recoverable, and the process exits.
"""

from __future__ import annotations

import os
import sys

import psutil

from migratefs.config import EXIT_CODE_INTERNAL_ERROR, MAX_PATH_LENGTH, PROC_EXE_CANDIDATES
from migratefs.core.path_search import path_length_ok, search_path
from migratefs.utils.logging.logger_factory import get_cached_logger

logger = get_cached_logger(__name__)


class ProgramPathError(Exception):
    """Raised internally when introspection fails in an unexpected way."""


def _read_os_executable_path() -> str | None:
    """Ask the OS for the running executable (macOS)."""
    try:
        program = psutil.Process().exe()
    except psutil.Error as e:
        raise ProgramPathError(f"Failed to get absolute path for the program: {e}") from e

    if not program:
        return None

    if not path_length_ok(program):
        raise ProgramPathError(
            f"Failed to get absolute path for the program, absolute path requires "
            f"{len(os.fsencode(program))} bytes and paths up to {MAX_PATH_LENGTH - 1} "
            f"bytes are supported"
        )

    logger.debug('Found absolute program: "%s"', program)
    return program


def _read_proc_executable_link(candidates: tuple[str, ...] | None = None) -> str | None:
    """Read the first /proc entry linking to the running executable.

    Returns:
        The link target, or None when no candidate exists on this system.

    Raises:
        ProgramPathError: When an entry exists but cannot be read.

    """
    if candidates is None:
        candidates = PROC_EXE_CANDIDATES

    for entry in candidates:
        try:
            program = os.readlink(entry)
        except (FileNotFoundError, NotADirectoryError):
            # when the file does not exist, we try our next guess
            continue
        except OSError as e:
            raise ProgramPathError(f"Failed to get absolute path for the program: {e}") from e

        if not path_length_ok(program):
            raise ProgramPathError(
                f'Failed to get absolute path for the program, "{program}" is longer '
                f"than {MAX_PATH_LENGTH - 1} bytes"
            )

        logger.debug('Found absolute program "%s" in "%s"', program, entry)
        return program

    return None


def find_program_absolute_path(argv0: str | None = None) -> str | None:
    """Find the absolute path of the running program.

    Args:
        argv0: The name the program was invoked with, sys.argv[0] by default.

    Returns:
        The absolute path, or None when it cannot be found (logged).

    """
    if argv0 is None:
        argv0 = sys.argv[0] if sys.argv else ""

    try:
        if sys.platform == "darwin":
            program = _read_os_executable_path()
        else:
            program = _read_proc_executable_link()
    except ProgramPathError as e:
        logger.error("%s", e)
        return None

    if program is not None:
        return program

    # Now either use argv0 when that's an absolute filename, or search PATH
    if os.path.isabs(argv0):
        return argv0

    if not argv0:
        logger.error("Failed to find the program name in its arguments")
        return None

    paths = search_path(argv0)
    if paths is None or paths.found == 0:
        logger.error('Failed to find "%s" in PATH environment', argv0)
        return None

    logger.debug('Found "%s" in PATH at "%s"', argv0, paths.first())
    return paths.first()


def get_program_absolute_path(argv0: str | None = None) -> str:
    """Return the absolute path of the running program, or exit the process.

    Startup cannot continue without it, so failure ends the process with
    EXIT_CODE_INTERNAL_ERROR.
    """
    program = find_program_absolute_path(argv0)

    if program is None:
        logger.critical("Failed to determine the absolute path of the running program")
        sys.exit(EXIT_CODE_INTERNAL_ERROR)

    return program
