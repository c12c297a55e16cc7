"""Utility helpers for migratefs: logging, environment access, directories."""
