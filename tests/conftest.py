"""
Module: conftest.py

Author: Michael Economou
Date: 2026-10-10

Global pytest configuration and fixtures for the migratefs test suite.
Provides markers for POSIX-only and root-only tests, and helpers to build
fake program directories and PATH values.
"""

import logging
import os
import stat
import sys

# Add project root to sys.path so 'migratefs' can be imported without install
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

import pytest


def pytest_configure(config):
    """Configure pytest with custom settings."""
    config.addinivalue_line("markers", "posix_only: test relies on POSIX filesystem semantics")
    config.addinivalue_line("markers", "root_only: test needs to run as root")


def pytest_collection_modifyitems(session, config, items):
    """Skip tests whose platform requirements are not met."""
    _ = session
    _ = config

    is_posix = os.name == "posix"
    is_root = is_posix and os.geteuid() == 0

    skip_posix = pytest.mark.skip(reason="POSIX filesystem semantics required")
    skip_root = pytest.mark.skip(reason="Must run as root")

    for item in items:
        if "posix_only" in item.keywords and not is_posix:
            item.add_marker(skip_posix)
        if "root_only" in item.keywords and not is_root:
            item.add_marker(skip_root)


@pytest.fixture
def make_program():
    """Factory fixture creating an executable file in a directory."""

    def _make(directory, name="tool", content=b"#!/bin/sh\nexit 0\n"):
        directory.mkdir(parents=True, exist_ok=True)
        program = directory / name
        program.write_bytes(content)
        program.chmod(program.stat().st_mode | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)
        return program

    return _make


@pytest.fixture
def path_env(monkeypatch):
    """Set the PATH environment variable to the given directories."""

    def _set(*directories):
        value = os.pathsep.join(str(d) for d in directories)
        monkeypatch.setenv("PATH", value)
        return value

    return _set


@pytest.fixture
def symlinked_bin(tmp_path, make_program):
    """Debian-like layout: <tmp>/bin is a symbolic link to <tmp>/usr/bin.

    Returns:
        tuple: (bin_link, usr_bin) directories, with "tool" installed once.

    """
    usr_bin = tmp_path / "usr" / "bin"
    make_program(usr_bin, "tool")
    bin_link = tmp_path / "bin"
    bin_link.symlink_to(usr_bin, target_is_directory=True)
    return bin_link, usr_bin


@pytest.fixture
def restore_root_logger():
    """Put the root logger back the way the test runner configured it."""
    root = logging.getLogger()
    level = root.level
    handlers = list(root.handlers)
    yield root
    for handler in list(root.handlers):
        if handler not in handlers:
            root.removeHandler(handler)
            handler.close()
    root.setLevel(level)
