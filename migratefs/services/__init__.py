"""Services layer for migratefs.

Author: Michael Economou
Date: 2026-10-08

This package exposes the filesystem layer as injectable services. Callers
depend on the protocols; FilesystemService is the implementation backed by
the real filesystem.

Usage:
    from migratefs.services import FilesystemService, FilesystemServiceProtocol

Modules:
    interfaces: Protocol definitions
    filesystem_service: Filesystem and program lookup implementation
"""

from __future__ import annotations

from migratefs.services.filesystem_service import FilesystemService
from migratefs.services.interfaces import (
    FilesystemServiceProtocol,
    ProgramLocatorProtocol,
)

__all__ = [
    "FilesystemServiceProtocol",
    "ProgramLocatorProtocol",
    "FilesystemService",
]
