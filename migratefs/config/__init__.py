"""Module: migratefs.config

Author: Michael Economou
Date: 2026-10-02

Configuration package for migratefs.

This package organizes configuration into logical modules:
- app: Application info, logging settings, exit codes
- limits: Path length and match limits, default file and directory modes

All settings are re-exported from this module:
    from migratefs.config import MAX_PATH_LENGTH, LOG_CONSOLE_LEVEL
"""

from migratefs.config.app import *  # noqa: F401, F403
from migratefs.config.limits import *  # noqa: F401, F403
