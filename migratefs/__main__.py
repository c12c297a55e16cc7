#!/usr/bin/env python3
"""
Module: migratefs.__main__

This module allows the migratefs package to be executed as a module using:
    python -m migratefs
"""

import sys

from migratefs.cli import main

if __name__ == "__main__":
    sys.exit(main())
