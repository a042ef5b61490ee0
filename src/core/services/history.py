"""Bounded in-memory history of recent results.

Most-recent-first, fixed capacity, no deduplication. Entries are immutable
and never persisted.
"""

from __future__ import annotations

from collections import deque
from typing import Iterator

from core.domain.models import HistoryEntry

HISTORY_CAPACITY = 5


class HistoryLedger:
    def __init__(self, capacity: int = HISTORY_CAPACITY) -> None:
        if capacity < 1:
            raise ValueError("capacity must be >= 1")
        self._entries: deque[HistoryEntry] = deque(maxlen=capacity)

    @property
    def capacity(self) -> int:
        return self._entries.maxlen or 0

    def record(self, entry: HistoryEntry) -> None:
        """Prepend `entry`; the oldest entry falls off beyond capacity."""

        self._entries.appendleft(entry)

    def record_value(self, value: str) -> HistoryEntry:
        entry = HistoryEntry.create(value)
        self.record(entry)
        return entry

    def entries(self) -> list[HistoryEntry]:
        """Snapshot, most recent first."""

        return list(self._entries)

    def clear(self) -> None:
        self._entries.clear()

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[HistoryEntry]:
        return iter(list(self._entries))
