"""Module: init_logging.py.

Author: Michael Economou
Date: 2026-10-02

init_logging.py
Single entry point to initialize logging for the command line.
Functions:
init_logging(app_name, verbosity, log_dir): Configures the root logger.
"""

import logging

from migratefs.utils.logging.logger_factory import get_cached_logger
from migratefs.utils.logging.logger_setup import ConfigureLogger

_VERBOSITY_LEVELS = {
    -1: logging.ERROR,
    0: logging.WARNING,
    1: logging.INFO,
    2: logging.DEBUG,
}


def init_logging(
    app_name: str = "migratefs", verbosity: int = 0, log_dir: str | None = None
) -> logging.Logger:
    """Initializes logging for the application.

    Args:
        app_name (str): The base name for log files.
        verbosity (int): -1 for quiet, 0 for warnings, 1 for info, 2+ for debug.
        log_dir (str, optional): Directory for rotating log files. When given,
            file logging is enabled.

    Returns:
        logging.Logger: The logger for this module.

    """
    level = _VERBOSITY_LEVELS.get(max(-1, min(verbosity, 2)), logging.WARNING)
    ConfigureLogger(
        log_name=app_name,
        log_dir=log_dir,
        console_level=level,
        log_to_file=log_dir is not None,
    )
    return get_cached_logger(__name__)
