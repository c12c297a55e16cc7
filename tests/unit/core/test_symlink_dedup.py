"""
Tests for symlink deduplication of PATH matches.

Author: Michael Economou
Date: 2026-10-11
"""

from __future__ import annotations

import logging
import os
from pathlib import Path

import pytest

from migratefs.core.symlink_dedup import deduplicate_symlinks, resolve_real_path
from migratefs.models import PathMatchSet

pytestmark = pytest.mark.posix_only


class TestDeduplicateSymlinks:
    """Tests for deduplicate_symlinks."""

    def test_symlinked_directory_collapses(self, symlinked_bin, caplog) -> None:
        """Test the /bin -> /usr/bin layout: one program, one entry."""
        caplog.set_level(logging.DEBUG)
        bin_link, usr_bin = symlinked_bin
        real_tool = os.path.realpath(usr_bin / "tool")
        results = PathMatchSet(matches=[str(bin_link / "tool"), str(usr_bin / "tool")])

        dedup = deduplicate_symlinks(results)

        assert dedup is not None
        assert dedup.to_list() == [real_tool]
        assert "dedup: skipping" in caplog.text

    def test_distinct_files_are_kept_in_order(self, tmp_path: Path, make_program) -> None:
        second = make_program(tmp_path / "b")
        first = make_program(tmp_path / "a")
        results = PathMatchSet(matches=[str(second), str(first)])

        dedup = deduplicate_symlinks(results)

        assert dedup.to_list() == [os.path.realpath(second), os.path.realpath(first)]

    def test_capacity_is_kept(self, tmp_path: Path, make_program) -> None:
        program = make_program(tmp_path)
        results = PathMatchSet(capacity=7, matches=[str(program)])

        assert deduplicate_symlinks(results).capacity == 7

    def test_empty_input(self) -> None:
        dedup = deduplicate_symlinks(PathMatchSet())

        assert dedup is not None
        assert dedup.found == 0

    def test_idempotent(self, symlinked_bin) -> None:
        """Test that deduplicating a deduplicated set changes nothing."""
        bin_link, usr_bin = symlinked_bin
        results = PathMatchSet(matches=[str(bin_link / "tool"), str(usr_bin / "tool")])

        once = deduplicate_symlinks(results)
        twice = deduplicate_symlinks(once)

        assert twice == once

    def test_file_symlink_collapses(self, tmp_path: Path, make_program) -> None:
        program = make_program(tmp_path / "real")
        alias_dir = tmp_path / "alias"
        alias_dir.mkdir()
        (alias_dir / "tool").symlink_to(program)
        results = PathMatchSet(matches=[str(alias_dir / "tool"), str(program)])

        assert deduplicate_symlinks(results).to_list() == [os.path.realpath(program)]

    def test_unresolvable_entry_fails_whole_call(
        self, tmp_path: Path, make_program, caplog
    ) -> None:
        """Test that no partial result is returned when an entry disappeared."""
        program = make_program(tmp_path / "a")
        results = PathMatchSet(matches=[str(program), str(tmp_path / "vanished" / "tool")])

        assert deduplicate_symlinks(results) is None
        assert "Failed to normalize file name" in caplog.text


class TestResolveRealPath:
    """Tests for resolve_real_path."""

    def test_resolves_links(self, symlinked_bin) -> None:
        bin_link, usr_bin = symlinked_bin

        assert resolve_real_path(str(bin_link / "tool")) == os.path.realpath(usr_bin / "tool")

    def test_missing_is_none(self, tmp_path: Path) -> None:
        assert resolve_real_path(str(tmp_path / "missing")) is None

    def test_symlink_loop_is_none(self, tmp_path: Path) -> None:
        loop = tmp_path / "loop"
        loop.symlink_to(loop)

        assert resolve_real_path(str(loop)) is None
