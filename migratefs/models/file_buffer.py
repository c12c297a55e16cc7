"""Module: file_buffer.py.

Author: Michael Economou
Date: 2026-10-03

Whole-file contents as returned by the buffer I/O functions.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class FileBuffer:
    """Entire contents of a file, with an explicit size.

    The content is binary and may contain NUL bytes; nothing is inferred from
    a terminator.

    Attributes:
        data: The bytes read from the file.
        size: Number of bytes actually read.
        path: The file the data was read from.

    """

    data: bytes
    size: int
    path: str = ""

    def __post_init__(self) -> None:
        """Check that the recorded size matches the data."""
        if self.size != len(self.data):
            raise ValueError(
                f"FileBuffer size {self.size} does not match {len(self.data)} bytes of data"
            )

    def __len__(self) -> int:
        return self.size

    def __bytes__(self) -> bytes:
        return self.data

    @property
    def is_empty(self) -> bool:
        return self.size == 0

    def text(self, encoding: str = "utf-8", errors: str = "strict") -> str:
        """Decode the buffer for callers that treat the file as text."""
        return self.data.decode(encoding, errors)
