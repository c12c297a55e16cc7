"""Module: migratefs.config.limits

Author: Michael Economou
Date: 2026-10-02

Fixed numeric limits and default modes used by the filesystem layer.
"""

# =====================================
# PATH LIMITS
# =====================================

# Longest path (in bytes, encoded) that the layer accepts or produces
MAX_PATH_LENGTH = 1024

# Maximum number of matches recorded by a single PATH search
MAX_PATH_MATCHES = 1024

# Maximum size of the PATH environment variable copy
MAX_PATH_ENV_SIZE = 4096

# =====================================
# FILE MODES
# =====================================

DEFAULT_FILE_MODE = 0o644
DEFAULT_DIR_MODE = 0o700

# =====================================
# SELF-LOCATION
# =====================================

# Pseudo-files linking to the running executable, probed in order
PROC_EXE_CANDIDATES = (
    "/proc/self/exe",  # Linux
    "/proc/curproc/file",  # FreeBSD
    "/proc/self/path/a.out",  # Solaris
)
