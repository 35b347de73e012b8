"""Tests for metrics collection.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

import threading

import pytest

from purplecache.metrics.collector import CacheMetrics, MetricsCollector


class TestCacheMetrics:
    """Tests for metric snapshots."""

    def test_hit_ratio(self):
        """Test ratio calculation."""
        metrics = CacheMetrics(hit_count=3, miss_count=1)

        assert metrics.total_requests == 4
        assert metrics.hit_ratio == 0.75

    def test_hit_ratio_without_requests(self):
        """Test ratio is zero, not an error."""
        assert CacheMetrics().hit_ratio == 0.0

    def test_to_dict(self):
        """Test external shape."""
        metrics = CacheMetrics(hit_count=1, miss_count=1, item_count=5, evictions=2)

        assert metrics.to_dict() == {
            "hitCount": 1,
            "missCount": 1,
            "hitRatio": 0.5,
            "itemCount": 5,
            "evictions": 2,
            "expirations": 0,
        }


class TestMetricsCollector:
    """Tests for the counter collector."""

    def test_snapshot(self):
        """Test counters flow into a snapshot."""
        collector = MetricsCollector()
        collector.record_hit()
        collector.record_hit()
        collector.record_miss()
        collector.record_eviction()
        collector.record_expiration()

        metrics = collector.snapshot(item_count=4)
        assert metrics.hit_count == 2
        assert metrics.miss_count == 1
        assert metrics.evictions == 1
        assert metrics.expirations == 1
        assert metrics.item_count == 4

    def test_snapshot_is_detached(self):
        """Test later counts do not change an earlier snapshot."""
        collector = MetricsCollector()
        metrics = collector.snapshot(item_count=0)
        collector.record_hit()

        assert metrics.hit_count == 0
        assert collector.snapshot(item_count=0).hit_count == 1

    def test_concurrent_updates(self):
        """Test no lost increments across threads."""
        collector = MetricsCollector()

        def worker():
            for _ in range(1000):
                collector.record_hit()
                collector.record_miss()

        threads = [threading.Thread(target=worker) for _ in range(4)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        metrics = collector.snapshot(item_count=0)
        assert metrics.hit_count == 4000
        assert metrics.miss_count == 4000


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
