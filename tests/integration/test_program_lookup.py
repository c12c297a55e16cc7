"""
Program lookup on a merged-/usr layout, end to end.

Author: Michael Economou
Date: 2026-10-14

The layout mirrors modern Debian: /bin is a symbolic link to /usr/bin, and
PATH lists both, with an empty entry and a duplicate thrown in.
"""

from __future__ import annotations

import os

import pytest

from migratefs.core import self_locator
from migratefs.core.path_search import search_path
from migratefs.core.symlink_dedup import deduplicate_symlinks
from migratefs.services import FilesystemService

pytestmark = pytest.mark.posix_only


@pytest.fixture
def merged_usr(tmp_path, symlinked_bin, make_program, path_env, monkeypatch):
    """PATH of <tmp>/bin, <tmp>/usr/bin, <tmp>/opt/bin and an empty entry."""
    bin_link, usr_bin = symlinked_bin
    opt_bin = tmp_path / "opt" / "bin"
    make_program(opt_bin, "tool")
    monkeypatch.chdir(tmp_path)
    path_env(bin_link, usr_bin, "", opt_bin, usr_bin)
    return bin_link, usr_bin, opt_bin


class TestMergedUsrLookup:
    """Search and deduplicate programs found through symlinked directories."""

    def test_raw_search_lists_every_occurrence(self, merged_usr) -> None:
        bin_link, usr_bin, opt_bin = merged_usr

        matches = search_path("tool")

        assert matches.to_list() == [
            str(bin_link / "tool"),
            str(usr_bin / "tool"),
            str(opt_bin / "tool"),
            str(usr_bin / "tool"),
        ]

    def test_dedup_keeps_one_entry_per_file(self, merged_usr) -> None:
        _bin_link, usr_bin, opt_bin = merged_usr

        dedup = deduplicate_symlinks(search_path("tool"))

        assert dedup.to_list() == [
            os.path.realpath(usr_bin / "tool"),
            os.path.realpath(opt_bin / "tool"),
        ]

    def test_service_agrees_with_core(self, merged_usr) -> None:
        service = FilesystemService()

        assert service.find_all_programs("tool") == deduplicate_symlinks(search_path("tool"))
        assert service.find_program("tool") == search_path("tool").first()

    def test_self_locator_falls_back_to_path(self, merged_usr, monkeypatch) -> None:
        """Test that a bare argv[0] resolves through PATH when /proc is unavailable."""
        bin_link, _usr_bin, _opt_bin = merged_usr
        monkeypatch.setattr(self_locator.sys, "platform", "linux")
        monkeypatch.setattr(self_locator, "PROC_EXE_CANDIDATES", ())

        assert self_locator.find_program_absolute_path("tool") == str(bin_link / "tool")
