"""
Module: logger_setup.py

Author: Michael Economou
Date: 2026-10-02

logger_setup.py
This module provides the ConfigureLogger class for setting up logging for the
migratefs command line. INFO and higher go to the console (stderr, so that
command output on stdout stays parseable), ERROR and higher optionally go to
a rotating log file, and DEBUG+ to a debug log file when enabled.
"""

import contextlib
import logging
import os
import sys
from datetime import datetime

from migratefs.config import (
    LOG_CONSOLE_FORMAT,
    LOG_CONSOLE_LEVEL,
    LOG_DEBUG_FILE_BACKUP_COUNT,
    LOG_DEBUG_FILE_ENABLED,
    LOG_DEBUG_FILE_MAX_BYTES,
    LOG_FILE_BACKUP_COUNT,
    LOG_FILE_LEVEL,
    LOG_FILE_MAX_BYTES,
    LOG_TO_CONSOLE,
    LOG_TO_FILE,
)
from migratefs.utils.logging.logger_file_helper import add_file_handler
from migratefs.utils.logging.logger_helper import DevOnlyFilter

_OWNED_HANDLER_ATTR = "_migratefs_owned"


class ConfigureLogger:
    """
    Configures application-wide logging on the root logger.

    Handlers installed by a previous ConfigureLogger are replaced, handlers
    installed by anybody else (test runners, embedding applications) are left
    untouched.
    """

    def __init__(
        self,
        log_name: str = "migratefs",
        log_dir: str | None = None,
        console_level: int | None = None,
        file_level: int | None = None,
        log_to_file: bool | None = None,
    ):
        """
        Initializes and configures the root logger.

        Args:
            log_name (str): Base name for the log files.
            log_dir (str, optional): Directory to store log files. File logging
                is skipped when no directory is given.
            console_level (int, optional): Level for the console handler,
                defaults to LOG_CONSOLE_LEVEL.
            file_level (int, optional): Level for the log file, defaults to
                LOG_FILE_LEVEL.
            log_to_file (bool, optional): Overrides LOG_TO_FILE.
        """
        if console_level is None:
            console_level = getattr(logging, LOG_CONSOLE_LEVEL, logging.INFO)
        if file_level is None:
            file_level = getattr(logging, LOG_FILE_LEVEL, logging.ERROR)
        if log_to_file is None:
            log_to_file = LOG_TO_FILE

        self.logger = logging.getLogger()
        self.logger.setLevel(logging.DEBUG)  # Accept everything; handlers filter levels
        self._remove_owned_handlers()

        if LOG_TO_CONSOLE:
            self._setup_console_handler(console_level)

        if log_to_file and log_dir:
            timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
            handler = add_file_handler(
                logger=self.logger,
                log_path=os.path.join(log_dir, f"{log_name}_{timestamp}.log"),
                level=file_level,
                max_bytes=LOG_FILE_MAX_BYTES,
                backup_count=LOG_FILE_BACKUP_COUNT,
            )
            setattr(handler, _OWNED_HANDLER_ATTR, True)

            if LOG_DEBUG_FILE_ENABLED:
                handler = add_file_handler(
                    logger=self.logger,
                    log_path=os.path.join(log_dir, f"{log_name}_debug_{timestamp}.log"),
                    level=logging.DEBUG,
                    max_bytes=LOG_DEBUG_FILE_MAX_BYTES,
                    backup_count=LOG_DEBUG_FILE_BACKUP_COUNT,
                )
                setattr(handler, _OWNED_HANDLER_ATTR, True)

    def _remove_owned_handlers(self):
        for handler in list(self.logger.handlers):
            if getattr(handler, _OWNED_HANDLER_ATTR, False):
                self.logger.removeHandler(handler)
                handler.close()

    def _setup_console_handler(self, level: int):
        """Sets up console handler with UTF-8-safe formatting and DevOnlyFilter."""
        console_handler = logging.StreamHandler(sys.stderr)

        with contextlib.suppress(AttributeError, ValueError):
            console_handler.stream.reconfigure(encoding="utf-8")

        console_handler.setLevel(level)
        console_handler.addFilter(DevOnlyFilter())
        console_handler.setFormatter(logging.Formatter(LOG_CONSOLE_FORMAT))
        setattr(console_handler, _OWNED_HANDLER_ATTR, True)
        self.logger.addHandler(console_handler)
