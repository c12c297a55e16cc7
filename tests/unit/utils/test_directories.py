"""
Tests for directory preparation helpers.

Author: Michael Economou
Date: 2026-10-12
"""

from __future__ import annotations

import os
import stat
from pathlib import Path

import pytest

from migratefs.utils import directories
from migratefs.utils.directories import ensure_empty_dir, make_dirs, remove_tree


class TestEnsureEmptyDir:
    """Tests for ensure_empty_dir."""

    def test_creates_missing_directory_with_parents(self, tmp_path: Path) -> None:
        target = tmp_path / "a" / "b" / "c"

        assert ensure_empty_dir(str(target)) is True
        assert target.is_dir()

    def test_empties_existing_directory(self, tmp_path: Path) -> None:
        target = tmp_path / "work"
        (target / "nested").mkdir(parents=True)
        (target / "nested" / "file").write_bytes(b"x")
        (target / "top").write_bytes(b"y")

        assert ensure_empty_dir(str(target)) is True
        assert list(target.iterdir()) == []

    @pytest.mark.posix_only
    def test_mode_is_applied(self, tmp_path: Path) -> None:
        target = tmp_path / "private"
        old_umask = os.umask(0)
        try:
            assert ensure_empty_dir(str(target), 0o750) is True
        finally:
            os.umask(old_umask)

        assert stat.S_IMODE(target.stat().st_mode) == 0o750

    def test_removal_failure_fails(self, tmp_path: Path, monkeypatch) -> None:
        target = tmp_path / "work"
        target.mkdir()
        monkeypatch.setattr(directories, "remove_tree", lambda path: False)

        assert ensure_empty_dir(str(target)) is False

    def test_path_is_a_file(self, tmp_path: Path, caplog) -> None:
        """Test that a regular file in the way makes directory creation fail."""
        target = tmp_path / "file"
        target.write_bytes(b"")

        assert ensure_empty_dir(str(target)) is False
        assert "Failed to ensure empty directory" in caplog.text


class TestRemoveTree:
    """Tests for remove_tree."""

    def test_missing_is_success(self, tmp_path: Path) -> None:
        assert remove_tree(str(tmp_path / "missing")) is True

    def test_file_fails(self, tmp_path: Path, caplog) -> None:
        target = tmp_path / "file"
        target.write_bytes(b"")

        assert remove_tree(str(target)) is False
        assert "Failed to remove directory" in caplog.text


class TestMakeDirs:
    """Tests for make_dirs."""

    def test_existing_directory_is_accepted(self, tmp_path: Path) -> None:
        assert make_dirs(str(tmp_path)) is True
