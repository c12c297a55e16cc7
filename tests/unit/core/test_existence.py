"""
Tests for the existence and classification predicates.

Author: Michael Economou
Date: 2026-10-10
"""

from __future__ import annotations

import errno
import logging
import os
from pathlib import Path

import pytest

from migratefs.core import existence
from migratefs.core.buffer_io import write_file
from migratefs.core.existence import (
    directory_exists,
    file_exists,
    file_is_empty,
    probe_path,
)
from migratefs.models import FileErrorKind, PathStatus


class TestProbePath:
    """Tests for the tri-state probe_path."""

    def test_present_file(self, tmp_path: Path) -> None:
        target = tmp_path / "f"
        target.write_bytes(b"x")

        probe = probe_path(str(target))

        assert probe.status is PathStatus.PRESENT
        assert probe.exists
        assert probe.st_mode is not None

    def test_absent_is_not_an_error(self, tmp_path: Path, caplog) -> None:
        """Test that a missing path is ABSENT and nothing is logged."""
        caplog.set_level(logging.DEBUG)

        probe = probe_path(str(tmp_path / "missing"))

        assert probe.status is PathStatus.ABSENT
        assert not probe.is_error
        assert caplog.records == []

    def test_component_not_a_directory_is_absent(self, tmp_path: Path) -> None:
        regular = tmp_path / "regular"
        regular.write_bytes(b"")

        assert probe_path(str(regular / "child")).status is PathStatus.ABSENT

    @pytest.mark.posix_only
    def test_dangling_symlink_is_absent(self, tmp_path: Path) -> None:
        link = tmp_path / "dangling"
        link.symlink_to(tmp_path / "nowhere")

        assert probe_path(str(link)).status is PathStatus.ABSENT

    def test_stat_failure_is_an_error(self, tmp_path: Path, monkeypatch, caplog) -> None:
        """Test that a failing check is reported apart from absence."""

        def _stat(path):
            raise PermissionError(errno.EACCES, "Permission denied", path)

        monkeypatch.setattr(existence.os, "stat", _stat)

        probe = probe_path(str(tmp_path / "locked"))

        assert probe.status is PathStatus.ERROR
        assert probe.error_kind is FileErrorKind.PERMISSION_DENIED
        assert "Failed to check if file" in caplog.text

    def test_embedded_nul_is_an_error(self, caplog) -> None:
        probe = probe_path("bad\0name")

        assert probe.status is PathStatus.ERROR
        assert isinstance(probe.error, ValueError)
        assert probe.error_kind is FileErrorKind.IO_ERROR


class TestFileExists:
    """Tests for file_exists."""

    def test_file_and_directory_both_exist(self, tmp_path: Path) -> None:
        target = tmp_path / "f"
        target.write_bytes(b"")

        assert file_exists(str(target))
        assert file_exists(str(tmp_path))

    def test_missing(self, tmp_path: Path) -> None:
        assert not file_exists(str(tmp_path / "missing"))

    def test_error_collapses_to_false(self, monkeypatch, caplog) -> None:
        def _stat(path):
            raise OSError(errno.EIO, "Input/output error", path)

        monkeypatch.setattr(existence.os, "stat", _stat)

        assert file_exists("/some/where") is False
        assert "Input/output error" in caplog.text


class TestDirectoryExists:
    """Tests for directory_exists."""

    def test_directory(self, tmp_path: Path) -> None:
        assert directory_exists(str(tmp_path))

    def test_regular_file_is_not_a_directory(self, tmp_path: Path) -> None:
        target = tmp_path / "f"
        target.write_bytes(b"")

        assert not directory_exists(str(target))

    def test_missing(self, tmp_path: Path) -> None:
        assert not directory_exists(str(tmp_path / "missing"))

    def test_single_stat_call(self, tmp_path: Path, monkeypatch) -> None:
        """Test that the classification reuses the mode from the existence probe."""
        calls = []
        real_stat = os.stat

        def _stat(path, *args, **kwargs):
            calls.append(path)
            return real_stat(path, *args, **kwargs)

        monkeypatch.setattr(existence.os, "stat", _stat)

        assert directory_exists(str(tmp_path)) is True
        assert calls == [str(tmp_path)]

    @pytest.mark.posix_only
    def test_symlink_to_directory(self, tmp_path: Path) -> None:
        real = tmp_path / "real"
        real.mkdir()
        link = tmp_path / "link"
        link.symlink_to(real, target_is_directory=True)

        assert directory_exists(str(link))


class TestFileIsEmpty:
    """Tests for file_is_empty."""

    def test_empty(self, tmp_path: Path) -> None:
        target = tmp_path / "empty"
        target.write_bytes(b"")

        assert file_is_empty(str(target))

    def test_zero_byte_write_is_empty(self, tmp_path: Path) -> None:
        """Test that a new file written with 0 bytes reads back as empty."""
        target = str(tmp_path / "zero")

        assert write_file(b"", 0, target) is True
        assert file_is_empty(target)

    def test_not_empty(self, tmp_path: Path) -> None:
        target = tmp_path / "full"
        target.write_bytes(b"\x00")

        assert not file_is_empty(str(target))

    def test_missing_is_not_empty(self, tmp_path: Path) -> None:
        assert not file_is_empty(str(tmp_path / "missing"))

    def test_unreadable_is_not_empty(self, tmp_path: Path, caplog) -> None:
        """Test that a path that cannot be read (a directory) yields False."""
        assert not file_is_empty(str(tmp_path))
        assert "Failed to" in caplog.text
