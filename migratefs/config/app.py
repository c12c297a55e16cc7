"""Module: migratefs.config.app

Author: Michael Economou
Date: 2026-10-02

Application-level configuration: app info, logging settings, exit codes.
"""

# =====================================
# APPLICATION INFORMATION
# =====================================

APP_NAME = "migratefs"
APP_VERSION = "0.4.0"
APP_AUTHOR = "Michael Economou"

# =====================================
# LOGGING CONFIGURATION
# =====================================

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
LOG_CONSOLE_FORMAT = "[%(levelname)s] %(message)s"

# Console logging
LOG_TO_CONSOLE = True
LOG_CONSOLE_LEVEL = "INFO"

# File logging (off by default for a command line tool)
LOG_TO_FILE = False
LOG_FILE_LEVEL = "ERROR"
LOG_FILE_MAX_BYTES = 1_000_000  # 1MB per file
LOG_FILE_BACKUP_COUNT = 3

# Debug file logging
LOG_DEBUG_FILE_ENABLED = False
LOG_DEBUG_FILE_MAX_BYTES = 2_000_000  # 2MB per debug file
LOG_DEBUG_FILE_BACKUP_COUNT = 3

# Development logging settings
SHOW_DEV_ONLY_IN_CONSOLE = False

# =====================================
# EXIT CODES
# =====================================

EXIT_CODE_QUIT = 0
EXIT_CODE_FAILURE = 1
EXIT_CODE_BAD_ARGS = 2
EXIT_CODE_INTERNAL_ERROR = 12
