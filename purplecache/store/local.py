"""PurpleCache Local Engine - Eviction, Expiry and Metrics Bookkeeping.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from __future__ import annotations

import logging
import threading
from abc import abstractmethod
from datetime import timedelta
from typing import Any, Optional

from purplecache.cache.config import EngineConfig
from purplecache.cache.entry import CacheEntry
from purplecache.cache.expiration import TTL, validate_key
from purplecache.cache.metadata import AccessTracker
from purplecache.eviction.policy import get_policy
from purplecache.exceptions import NonNumericValueError
from purplecache.metrics.collector import CacheMetrics, MetricsCollector
from purplecache.store.backend import CacheEngine, Clock, is_numeric

logger = logging.getLogger(__name__)


class LocalEngine(CacheEngine):
    """Engine that runs its own eviction and metadata tracking.

    Subclasses supply the storage medium through five primitives:
    _read_entry, _write_entry, _remove_entry, _remove_all_entries and
    _save_metadata. Everything else (lazy expiry, capacity enforcement,
    hit/miss accounting) lives here.

    Calls are serialized with an RLock within one process. Nothing guards
    against a second process sharing the same medium.
    """

    def __init__(self, config: Optional[EngineConfig] = None, clock: Optional[Clock] = None):
        super().__init__(config, clock)
        self._tracker = AccessTracker()
        self._metrics = MetricsCollector()
        self._eviction = get_policy(self.config.eviction_policy)
        self._lock = threading.RLock()

    # -- storage primitives -------------------------------------------------

    @abstractmethod
    def _read_entry(self, key: str) -> Optional[CacheEntry]:
        """Load the stored entry, expired or not."""
        pass

    @abstractmethod
    def _write_entry(self, entry: CacheEntry) -> bool:
        """Persist an entry, replacing any previous one."""
        pass

    @abstractmethod
    def _remove_entry(self, key: str) -> bool:
        """Remove a stored entry; True if one existed."""
        pass

    @abstractmethod
    def _remove_all_entries(self) -> int:
        """Remove every stored entry; returns the count removed."""
        pass

    def _save_metadata(self) -> None:
        """Persist the tracker after a mutation."""

    # -- contract -----------------------------------------------------------

    def get(self, key: str, default: Any = None) -> Any:
        validate_key(key)
        with self._lock:
            now = self._clock()
            entry = self._live_entry(key, now)

            if entry is None:
                self._metrics.record_miss()
                return default

            self._metrics.record_hit()
            self._tracker.touch(key, now)
            self._save_metadata()
            return entry.value

    def set(self, key: str, value: Any, ttl: Optional[TTL] = None) -> bool:
        validate_key(key)
        with self._lock:
            now = self._clock()
            expires_at = self._expiration.compute_expiration(ttl, now)

            # Counted even when the key already exists
            if len(self._tracker) >= self.config.max_size:
                self._evict_one()

            written = self._write_entry(CacheEntry(key=key, value=value, expires_at=expires_at))
            if written:
                self._tracker.record_set(key, now)
                self._save_metadata()
            return written

    def delete(self, key: str) -> bool:
        validate_key(key)
        with self._lock:
            return self._delete(key)

    def clear(self) -> bool:
        with self._lock:
            count = self._remove_all_entries()
            self._tracker.clear()
            self._save_metadata()
            logger.debug(f"Cleared {count} entries")
            return True

    def has(self, key: str) -> bool:
        validate_key(key)
        with self._lock:
            return self._live_entry(key, self._clock()) is not None

    def get_ttl(self, key: str) -> Optional[timedelta]:
        validate_key(key)
        with self._lock:
            now = self._clock()
            entry = self._live_entry(key, now)
            if entry is None:
                return None
            return entry.remaining(now)

    def update_ttl(self, key: str, ttl: Optional[TTL]) -> bool:
        validate_key(key)
        with self._lock:
            now = self._clock()
            expires_at = self._expiration.compute_expiration(ttl, now)
            entry = self._live_entry(key, now)
            if entry is None:
                return False

            entry.expires_at = expires_at
            return self._write_entry(entry)

    def increment(self, key: str, delta: int = 1) -> Any:
        """Add ``delta`` to a numeric value.

        A missing or expired key raises NonNumericValueError: there is no
        current value to add to.
        """
        validate_key(key)
        with self._lock:
            now = self._clock()
            entry = self._live_entry(key, now)
            if entry is None:
                raise NonNumericValueError(key, "no such key")
            if not is_numeric(entry.value):
                raise NonNumericValueError(key)

            entry.value = entry.value + delta
            self._write_entry(entry)
            self._tracker.touch(key, now)
            self._save_metadata()
            return entry.value

    def get_metrics(self) -> CacheMetrics:
        with self._lock:
            return self._metrics.snapshot(item_count=len(self._tracker))

    # -- internals ----------------------------------------------------------

    def _live_entry(self, key: str, now: float) -> Optional[CacheEntry]:
        """Get the entry if live, lazily deleting it once expired."""
        entry = self._read_entry(key)

        if entry is None:
            if self._tracker.remove(key):
                self._save_metadata()
            return None

        if entry.is_expired(now):
            self._delete(key)
            self._metrics.record_expiration()
            logger.debug(f"Expired {key!r}")
            return None

        return entry

    def _delete(self, key: str) -> bool:
        removed = self._remove_entry(key)
        if self._tracker.remove(key) or removed:
            self._save_metadata()
        return removed

    def _evict_one(self) -> Optional[str]:
        victim = self._eviction.choose_victim(self._tracker.records())
        if victim is None:
            return None

        self._delete(victim)
        self._metrics.record_eviction()
        logger.debug(f"Evicted {victim!r} ({self._eviction.name})")
        return victim


__all__ = ["LocalEngine"]
