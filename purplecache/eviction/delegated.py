"""PurpleCache Delegated Policy - Eviction Performed by the Store.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from __future__ import annotations

from typing import Mapping, Optional

from purplecache.cache.entry import AccessMetadata
from purplecache.eviction.policy import EvictionPolicy
from purplecache.exceptions import InvalidConfigurationError

# Redis maxmemory-policy values
NATIVE_POLICIES = {
    "LRU": "allkeys-lru",
    "LFU": "allkeys-lfu",
}


class DelegatedPolicy(EvictionPolicy):
    """No-op policy for stores that evict natively.

    The engine tells the store which native policy to apply once, at
    construction; choose_victim never names a key.
    """

    def __init__(self, name: str = "LRU"):
        """Initialize policy.

        Args:
            name: "LRU" or "LFU" (case-insensitive)
        """
        super().__init__()
        self.name = str(name).upper()
        if self.name not in NATIVE_POLICIES:
            raise InvalidConfigurationError(f"Unknown eviction policy: {name!r}")

    @property
    def native_policy(self) -> str:
        """Get the store's maxmemory-policy value."""
        return NATIVE_POLICIES[self.name]

    def score(self, record: AccessMetadata) -> float:
        return 0.0

    def choose_victim(self, records: Mapping[str, AccessMetadata]) -> Optional[str]:
        return None

    def __repr__(self) -> str:
        return f"DelegatedPolicy(native={self.native_policy})"


__all__ = ["DelegatedPolicy", "NATIVE_POLICIES"]
