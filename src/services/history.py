"""Bounded undo history for transformed phrases.

Updates:
    v0.1.0 - 2025-11-09 - Added capacity-bounded history with oldest-first eviction.
"""

from __future__ import annotations

import logging
from collections import deque
from typing import Deque, Optional

DEFAULT_CAPACITY = 5

logger = logging.getLogger(__name__)


class BoundedHistory:
    """Last-in-first-out record of transformed phrases with a fixed capacity.

    Entries are kept from least recent to most recent. Once a push takes the
    size past `capacity`, the least recently pushed entry is dropped so the
    history always holds the newest entries.
    """

    def __init__(self, capacity: int = DEFAULT_CAPACITY) -> None:
        """Create an empty history.

        Args:
            capacity (int): Maximum number of entries retained.

        Raises:
            ValueError: If capacity is smaller than one.
        """

        if isinstance(capacity, bool) or not isinstance(capacity, int) or capacity < 1:
            raise ValueError(f"History capacity must be a positive integer, got {capacity!r}")
        self._capacity = capacity
        self._entries: Deque[str] = deque()

    @property
    def capacity(self) -> int:
        return self._capacity

    def push(self, entry: str) -> None:
        """Record `entry` as the most recent transformation."""

        self._entries.append(entry)
        while len(self._entries) > self._capacity:
            evicted = self._entries.popleft()
            logger.debug("history_evicted", extra={"evicted": evicted})

    def pop(self) -> Optional[str]:
        """Remove and return the most recent entry.

        Returns:
            str | None: The most recent entry, or None when nothing is left to undo.
        """

        if not self._entries:
            return None
        return self._entries.pop()

    def peek(self) -> Optional[str]:
        return self._entries[-1] if self._entries else None

    def entries(self) -> list[str]:
        """Return a snapshot ordered from most recent to least recent."""

        return list(reversed(self._entries))

    def clear(self) -> None:
        self._entries.clear()

    def __len__(self) -> int:
        return len(self._entries)

    def __bool__(self) -> bool:
        return bool(self._entries)


__all__ = ["BoundedHistory", "DEFAULT_CAPACITY"]
