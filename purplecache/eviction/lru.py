"""PurpleCache LRU Policy - Least Recently Used Eviction.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from __future__ import annotations

from purplecache.cache.entry import AccessMetadata
from purplecache.eviction.policy import EvictionPolicy


class LRUPolicy(EvictionPolicy):
    """Least Recently Used eviction policy.

    Evicts the key with the smallest last-access time. When timestamps tie,
    the first key in the tracker's order wins, which is the least recently
    touched one.

    Example:
        policy = LRUPolicy()
        tracker.record_set("key1", now=1.0)
        tracker.record_set("key2", now=2.0)
        policy.choose_victim(tracker.records())  # "key1"
    """

    name = "LRU"

    def score(self, record: AccessMetadata) -> float:
        return record.last_accessed_at


__all__ = ["LRUPolicy"]
