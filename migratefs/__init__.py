"""migratefs: defensive filesystem utilities for database migration tooling.

Moves, duplicates, inspects and locates files and executables on POSIX-like
systems, reporting failures through logging and return values.
"""

from migratefs.config import APP_VERSION

__version__ = APP_VERSION
