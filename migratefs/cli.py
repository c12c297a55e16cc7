"""
Module: cli.py

Author: Michael Economou
Date: 2026-10-09

Command line entry point for migratefs.

Exposes the filesystem layer for shell scripts and for checking a host
before a migration runs: which programs are found in PATH, what a
configuration path normalizes to, and safe moves and copies.

Functions:
    main: Parses arguments, configures logging and runs a subcommand.
"""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence

from migratefs.config import (
    APP_NAME,
    APP_VERSION,
    EXIT_CODE_FAILURE,
    EXIT_CODE_QUIT,
)
from migratefs.core.move_engine import duplicate_file, move_file
from migratefs.core.path_normalizer import normalize_filename
from migratefs.core.path_search import search_path
from migratefs.core.self_locator import get_program_absolute_path
from migratefs.core.symlink_dedup import deduplicate_symlinks
from migratefs.utils.logging.init_logging import init_logging


def cmd_which(args: argparse.Namespace) -> int:
    """Print the matches of a program in PATH."""
    matches = search_path(args.name)
    if matches is None:
        return EXIT_CODE_FAILURE

    if not args.no_dedup:
        matches = deduplicate_symlinks(matches)
        if matches is None:
            return EXIT_CODE_FAILURE

    if matches.found == 0:
        print(f"{args.name}: not found in PATH", file=sys.stderr)
        return EXIT_CODE_FAILURE

    for match in matches if args.all else [matches.first()]:
        print(match)

    return EXIT_CODE_QUIT


def cmd_normalize(args: argparse.Namespace) -> int:
    """Print the normalized form of a path."""
    normalized = normalize_filename(args.path)
    if normalized is None:
        return EXIT_CODE_FAILURE

    print(normalized)
    return EXIT_CODE_QUIT


def cmd_move(args: argparse.Namespace) -> int:
    """Move a file without overwriting."""
    return EXIT_CODE_QUIT if move_file(args.source, args.destination) else EXIT_CODE_FAILURE


def cmd_copy(args: argparse.Namespace) -> int:
    """Copy a file with its owner and mode, without overwriting."""
    return EXIT_CODE_QUIT if duplicate_file(args.source, args.destination) else EXIT_CODE_FAILURE


def cmd_self(_args: argparse.Namespace) -> int:
    """Print the absolute path of the running program."""
    print(get_program_absolute_path())
    return EXIT_CODE_QUIT


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser with one subparser per command."""
    parser = argparse.ArgumentParser(
        prog=APP_NAME,
        description="Defensive filesystem utilities for database migrations",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
    migratefs which pg_dump --all
    migratefs normalize ~/.config/migration.ini
    migratefs move /tmp/dump.sql /mnt/backup/dump.sql
        """,
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {APP_VERSION}")
    parser.add_argument(
        "-v", "--verbose", action="count", default=0, help="More output, repeat for debug"
    )
    parser.add_argument("-q", "--quiet", action="store_true", help="Only log errors")
    parser.add_argument("--log-dir", default=None, help="Also write rotating log files here")

    subparsers = parser.add_subparsers(dest="command", required=True)

    which = subparsers.add_parser("which", help="Find a program in PATH")
    which.add_argument("name")
    which.add_argument("--all", action="store_true", help="Print every match, not the first")
    which.add_argument(
        "--no-dedup", action="store_true", help="Keep matches that resolve to the same file"
    )
    which.set_defaults(func=cmd_which)

    normalize = subparsers.add_parser("normalize", help="Print the real path of a file")
    normalize.add_argument("path")
    normalize.set_defaults(func=cmd_normalize)

    move = subparsers.add_parser("move", help="Move a file, across filesystems if needed")
    move.add_argument("source")
    move.add_argument("destination")
    move.set_defaults(func=cmd_move)

    copy = subparsers.add_parser("copy", help="Copy a file with its owner and mode")
    copy.add_argument("source")
    copy.add_argument("destination")
    copy.set_defaults(func=cmd_copy)

    self_path = subparsers.add_parser("self", help="Print the path of the running program")
    self_path.set_defaults(func=cmd_self)

    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Main function for command-line interface."""
    parser = build_parser()
    args = parser.parse_args(argv)

    verbosity = -1 if args.quiet else args.verbose
    init_logging(APP_NAME, verbosity=verbosity, log_dir=args.log_dir)

    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
