"""PurpleCache Access Tracker - Per-Key Access Metadata.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from __future__ import annotations

from collections import OrderedDict
from typing import Any, Dict, ItemsView, Iterator, Optional

from purplecache.cache.entry import AccessMetadata


class AccessTracker:
    """Tracks last-access time and access frequency per live key.

    Records are kept in an OrderedDict and moved to the end on every touch,
    so iteration order is always least recently touched first. Eviction
    policies rely on this order to break ties deterministically.

    Example:
        tracker = AccessTracker()
        tracker.record_set("a", now=1.0)
        tracker.touch("a", now=2.0)
        tracker.get("a").access_frequency  # 2
    """

    def __init__(self):
        self._records: OrderedDict[str, AccessMetadata] = OrderedDict()

    def record_set(self, key: str, now: float) -> AccessMetadata:
        """Create or reset the record for a freshly written key.

        Args:
            key: Written key
            now: Current epoch seconds

        Returns:
            The new record (frequency 1)
        """
        record = AccessMetadata(last_accessed_at=now, access_frequency=1)
        self._records[key] = record
        self._records.move_to_end(key)
        return record

    def touch(self, key: str, now: float) -> AccessMetadata:
        """Record an access (move to end, bump frequency).

        Args:
            key: Accessed key
            now: Current epoch seconds

        Returns:
            The updated record
        """
        record = self._records.get(key)
        if record is None:
            return self.record_set(key, now)

        record.touch(now)
        self._records.move_to_end(key)
        return record

    def remove(self, key: str) -> bool:
        """Drop the record for ``key``.

        Returns:
            True if a record existed
        """
        return self._records.pop(key, None) is not None

    def clear(self) -> None:
        """Drop all records."""
        self._records.clear()

    def get(self, key: str) -> Optional[AccessMetadata]:
        """Get the record for ``key`` or None."""
        return self._records.get(key)

    def items(self) -> ItemsView[str, AccessMetadata]:
        """Get (key, record) pairs in recency order."""
        return self._records.items()

    def records(self) -> "OrderedDict[str, AccessMetadata]":
        """Get the ordered record mapping (read-only use)."""
        return self._records

    def to_dict(self) -> Dict[str, Dict[str, Any]]:
        """Serialize all records, preserving order."""
        return {key: record.to_dict() for key, record in self._records.items()}

    @classmethod
    def from_dict(cls, data: Dict[str, Dict[str, Any]]) -> "AccessTracker":
        """Rebuild a tracker from ``to_dict`` output."""
        tracker = cls()
        for key, raw in data.items():
            tracker._records[key] = AccessMetadata.from_dict(raw)
        return tracker

    def __contains__(self, key: str) -> bool:
        return key in self._records

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[str]:
        return iter(self._records)

    def __repr__(self) -> str:
        return f"AccessTracker(keys={len(self._records)})"


__all__ = ["AccessTracker"]
