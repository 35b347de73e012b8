"""Tests for eviction policies and the access tracker.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

import pytest

from purplecache.cache.metadata import AccessTracker
from purplecache.eviction.delegated import DelegatedPolicy
from purplecache.eviction.lfu import LFUPolicy
from purplecache.eviction.lru import LRUPolicy
from purplecache.eviction.policy import get_policy
from purplecache.exceptions import InvalidConfigurationError


class TestAccessTracker:
    """Tests for access metadata bookkeeping."""

    def test_set_resets_frequency(self):
        """Test that a set starts frequency at 1."""
        tracker = AccessTracker()

        tracker.record_set("key1", now=1.0)
        tracker.touch("key1", now=2.0)
        tracker.touch("key1", now=3.0)
        assert tracker.get("key1").access_frequency == 3

        tracker.record_set("key1", now=4.0)
        assert tracker.get("key1").access_frequency == 1
        assert tracker.get("key1").last_accessed_at == 4.0

    def test_touch_moves_to_end(self):
        """Test that iteration order is least recently touched first."""
        tracker = AccessTracker()

        tracker.record_set("key1", now=1.0)
        tracker.record_set("key2", now=1.0)
        tracker.record_set("key3", now=1.0)
        tracker.touch("key1", now=1.0)

        assert list(tracker) == ["key2", "key3", "key1"]

    def test_remove(self):
        """Test record removal."""
        tracker = AccessTracker()
        tracker.record_set("key1", now=1.0)

        assert tracker.remove("key1")
        assert not tracker.remove("key1")
        assert "key1" not in tracker
        assert len(tracker) == 0

    def test_dict_round_trip_keeps_order(self):
        """Test persistence form keeps recency order."""
        tracker = AccessTracker()
        tracker.record_set("b", now=1.0)
        tracker.record_set("a", now=2.0)
        tracker.touch("b", now=3.0)

        restored = AccessTracker.from_dict(tracker.to_dict())

        assert list(restored) == ["a", "b"]
        assert restored.get("b").access_frequency == 2
        assert tracker.to_dict()["a"] == {"lastAccessedAt": 2.0, "accessFrequency": 1}


class TestLRUPolicy:
    """Tests for LRU eviction policy."""

    def test_basic_eviction(self):
        """Test basic LRU eviction."""
        tracker = AccessTracker()
        tracker.record_set("key1", now=1.0)
        tracker.record_set("key2", now=2.0)
        tracker.record_set("key3", now=3.0)

        # key1 is LRU
        assert LRUPolicy().choose_victim(tracker.records()) == "key1"

    def test_access_updates_order(self):
        """Test that access updates recency."""
        tracker = AccessTracker()
        tracker.record_set("key1", now=1.0)
        tracker.record_set("key2", now=2.0)
        tracker.record_set("key3", now=3.0)

        # Access key1, making key2 the LRU
        tracker.touch("key1", now=4.0)

        assert LRUPolicy().choose_victim(tracker.records()) == "key2"

    def test_tie_goes_to_first_key(self):
        """Test identical timestamps resolve by iteration order."""
        records = {
            "b": AccessTracker().record_set("b", now=5.0),
            "a": AccessTracker().record_set("a", now=5.0),
        }

        assert LRUPolicy().choose_victim(records) == "b"

    def test_empty_is_noop(self):
        """Test no victim from no records."""
        policy = LRUPolicy()

        assert policy.choose_victim({}) is None
        assert policy.get_stats().evictions == 0

    def test_stats(self):
        """Test eviction counter."""
        tracker = AccessTracker()
        tracker.record_set("key1", now=1.0)
        policy = LRUPolicy()

        policy.choose_victim(tracker.records())
        policy.choose_victim(tracker.records())

        assert policy.get_stats().evictions == 2


class TestLFUPolicy:
    """Tests for LFU eviction policy."""

    def test_basic_eviction(self):
        """Test basic LFU eviction."""
        tracker = AccessTracker()
        tracker.record_set("key1", now=1.0)  # freq=1
        tracker.record_set("key2", now=2.0)  # freq=1
        tracker.touch("key2", now=3.0)       # freq=2

        # key1 has lower frequency
        assert LFUPolicy().choose_victim(tracker.records()) == "key1"

    def test_frequent_key_survives(self):
        """Test a hot key is never chosen over colder ones."""
        tracker = AccessTracker()
        tracker.record_set("a", now=1.0)
        tracker.record_set("b", now=2.0)
        for t in range(4):
            tracker.touch("a", now=3.0 + t)
        tracker.record_set("c", now=10.0)

        # b and c tie at 1; b was touched less recently
        assert LFUPolicy().choose_victim(tracker.records()) == "b"


class TestPolicyLookup:
    """Tests for policy selection."""

    def test_get_policy(self):
        """Test names are case-insensitive."""
        assert isinstance(get_policy("lru"), LRUPolicy)
        assert isinstance(get_policy("LFU"), LFUPolicy)

    def test_unknown_policy(self):
        """Test unknown names are rejected."""
        with pytest.raises(InvalidConfigurationError):
            get_policy("ARC")

    def test_delegated_policy(self):
        """Test delegated policy never picks a victim."""
        tracker = AccessTracker()
        tracker.record_set("key1", now=1.0)

        assert DelegatedPolicy("LRU").native_policy == "allkeys-lru"
        assert DelegatedPolicy("lfu").native_policy == "allkeys-lfu"
        assert DelegatedPolicy("LRU").choose_victim(tracker.records()) is None

        with pytest.raises(InvalidConfigurationError):
            DelegatedPolicy("MRU")


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
