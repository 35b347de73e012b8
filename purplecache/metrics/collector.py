"""PurpleCache Metrics Collector - Hit/Miss Accounting.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from __future__ import annotations

import threading
from dataclasses import dataclass
from typing import Any, Dict


@dataclass
class CacheMetrics:
    """Point-in-time cache metrics.

    Attributes:
        hit_count: Gets that found a live entry
        miss_count: Gets that found nothing or an expired entry
        item_count: Current live entries (not cumulative)
        evictions: Entries removed to stay within capacity
        expirations: Expired entries removed lazily
    """

    hit_count: int = 0
    miss_count: int = 0
    item_count: int = 0
    evictions: int = 0
    expirations: int = 0

    @property
    def total_requests(self) -> int:
        """Get total get requests."""
        return self.hit_count + self.miss_count

    @property
    def hit_ratio(self) -> float:
        """Calculate hit ratio, 0.0 before any request."""
        total = self.total_requests
        return self.hit_count / total if total > 0 else 0.0

    def to_dict(self) -> Dict[str, Any]:
        """Convert to the external metrics shape.

        Returns:
            Metrics dictionary
        """
        return {
            "hitCount": self.hit_count,
            "missCount": self.miss_count,
            "hitRatio": self.hit_ratio,
            "itemCount": self.item_count,
            "evictions": self.evictions,
            "expirations": self.expirations,
        }


class MetricsCollector:
    """Collects process-lifetime cache counters.

    Counters only ever grow; there is no reset.

    Example:
        collector = MetricsCollector()
        collector.record_hit()
        collector.record_miss()

        metrics = collector.snapshot(item_count=1)
        print(f"Hit ratio: {metrics.hit_ratio:.2%}")
    """

    def __init__(self):
        self._hits = 0
        self._misses = 0
        self._evictions = 0
        self._expirations = 0
        self._lock = threading.Lock()

    def record_hit(self) -> None:
        """Record a cache hit."""
        with self._lock:
            self._hits += 1

    def record_miss(self) -> None:
        """Record a cache miss."""
        with self._lock:
            self._misses += 1

    def record_eviction(self) -> None:
        """Record an eviction."""
        with self._lock:
            self._evictions += 1

    def record_expiration(self) -> None:
        """Record a lazy expiration."""
        with self._lock:
            self._expirations += 1

    def snapshot(self, item_count: int) -> CacheMetrics:
        """Get current metrics.

        Args:
            item_count: Live entry count supplied by the engine

        Returns:
            CacheMetrics instance
        """
        with self._lock:
            return CacheMetrics(
                hit_count=self._hits,
                miss_count=self._misses,
                item_count=item_count,
                evictions=self._evictions,
                expirations=self._expirations,
            )

    def __repr__(self) -> str:
        return f"MetricsCollector(hits={self._hits}, misses={self._misses})"


__all__ = ["MetricsCollector", "CacheMetrics"]
