"""PurpleCache Eviction Policy - Abstract Eviction Interface.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Mapping, Optional

from purplecache.cache.entry import AccessMetadata
from purplecache.exceptions import InvalidConfigurationError

logger = logging.getLogger(__name__)


@dataclass
class EvictionStats:
    """Eviction policy statistics.

    Attributes:
        evictions: Number of victims chosen
    """

    evictions: int = 0


class EvictionPolicy(ABC):
    """Abstract base for eviction policies.

    A policy is stateless with respect to keys: it receives the engine's
    ordered access records and names one victim. Ties go to the first key
    encountered in the records' iteration order.

    Implementations:
    - LRU: Least Recently Used
    - LFU: Least Frequently Used
    - Delegated: storage medium evicts natively

    Example:
        policy = LRUPolicy()
        victim = policy.choose_victim(tracker.records())
    """

    name: str = ""

    def __init__(self):
        self._stats = EvictionStats()

    @abstractmethod
    def score(self, record: AccessMetadata) -> float:
        """Get the ranking value of a record; lowest is evicted first."""
        pass

    def choose_victim(self, records: Mapping[str, AccessMetadata]) -> Optional[str]:
        """Choose one key to evict.

        Args:
            records: Ordered key -> access metadata

        Returns:
            Key to evict or None if there is nothing to evict
        """
        victim: Optional[str] = None
        lowest: Optional[float] = None

        for key, record in records.items():
            value = self.score(record)
            if lowest is None or value < lowest:
                lowest = value
                victim = key

        if victim is not None:
            self._stats.evictions += 1
            logger.debug(f"{self.name} policy chose victim {victim!r}")
        return victim

    def get_stats(self) -> EvictionStats:
        """Get eviction statistics.

        Returns:
            EvictionStats instance
        """
        return self._stats

    def __repr__(self) -> str:
        return f"{type(self).__name__}(evictions={self._stats.evictions})"


def get_policy(name: str) -> EvictionPolicy:
    """Get a local eviction policy by name.

    Args:
        name: "LRU" or "LFU" (case-insensitive)

    Returns:
        EvictionPolicy instance

    Raises:
        InvalidConfigurationError: If the name is unknown
    """
    from purplecache.eviction.lfu import LFUPolicy
    from purplecache.eviction.lru import LRUPolicy

    policies = {"LRU": LRUPolicy, "LFU": LFUPolicy}
    policy_cls = policies.get(str(name).upper())
    if policy_cls is None:
        raise InvalidConfigurationError(f"Unknown eviction policy: {name!r}")
    return policy_cls()


__all__ = ["EvictionPolicy", "EvictionStats", "get_policy"]
