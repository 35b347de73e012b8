"""PurpleCache LFU Policy - Least Frequently Used Eviction.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from __future__ import annotations

from purplecache.cache.entry import AccessMetadata
from purplecache.eviction.policy import EvictionPolicy


class LFUPolicy(EvictionPolicy):
    """Least Frequently Used eviction policy.

    Evicts the key with the lowest access frequency.

    Properties:
    - Good for frequency-based workloads
    - Frequency resets to 1 when a key is set again
    - May keep old popular items too long
    - Ties broken by tracker order (LRU within frequency)

    Example:
        policy = LFUPolicy()
        tracker.record_set("key1", now=1.0)  # freq=1
        tracker.record_set("key2", now=2.0)  # freq=1
        tracker.touch("key1", now=3.0)       # freq=2
        policy.choose_victim(tracker.records())  # "key2"
    """

    name = "LFU"

    def score(self, record: AccessMetadata) -> float:
        return record.access_frequency


__all__ = ["LFUPolicy"]
