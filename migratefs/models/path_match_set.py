"""Module: path_match_set.py.

Author: Michael Economou
Date: 2026-10-03

Ordered, capacity-bounded collection of paths found by a PATH search.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from migratefs.config import MAX_PATH_MATCHES


class PathMatchSet:
    """Paths in search order, with a fixed upper bound on their number.

    Appending beyond the capacity is refused rather than truncated, so a
    caller can never mistake a partial result for a complete one.

    Attributes:
        capacity: Maximum number of entries.

    """

    def __init__(self, capacity: int = MAX_PATH_MATCHES, matches: Iterable[str] = ()):
        """Create a match set.

        Args:
            capacity: Maximum number of entries.
            matches: Initial entries, in order.

        Raises:
            ValueError: If capacity is not positive or the initial entries
                do not fit.

        """
        if capacity <= 0:
            raise ValueError(f"PathMatchSet capacity must be positive, got {capacity}")

        self.capacity = capacity
        self._matches: list[str] = []

        for match in matches:
            if not self.append(match):
                raise ValueError(f"More than {capacity} initial matches given")

    @property
    def found(self) -> int:
        """Number of valid entries."""
        return len(self._matches)

    @property
    def is_full(self) -> bool:
        return len(self._matches) >= self.capacity

    def append(self, path: str) -> bool:
        """Append a path at the end.

        Returns:
            False when the set is already at capacity, True otherwise.

        """
        if self.is_full:
            return False
        self._matches.append(path)
        return True

    def first(self) -> str | None:
        """Return the first match, or None when empty."""
        return self._matches[0] if self._matches else None

    def to_list(self) -> list[str]:
        return list(self._matches)

    def __len__(self) -> int:
        return len(self._matches)

    def __iter__(self) -> Iterator[str]:
        return iter(self._matches)

    def __getitem__(self, index: int) -> str:
        return self._matches[index]

    def __contains__(self, path: object) -> bool:
        return path in self._matches

    def __eq__(self, other: object) -> bool:
        if isinstance(other, PathMatchSet):
            return self._matches == other._matches
        return NotImplemented

    def __repr__(self) -> str:
        return f"PathMatchSet(found={self.found}, capacity={self.capacity}, matches={self._matches!r})"
