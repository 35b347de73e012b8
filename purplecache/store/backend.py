"""PurpleCache Engine - Abstract Cache Engine Interface.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from __future__ import annotations

import logging
import numbers
import time
from abc import ABC, abstractmethod
from collections.abc import Iterable, Mapping
from datetime import timedelta
from typing import Any, Callable, Dict, Iterator, Optional, Tuple

from purplecache.cache.config import EngineConfig
from purplecache.cache.expiration import TTL, ExpirationPolicy
from purplecache.exceptions import InvalidArgumentError
from purplecache.metrics.collector import CacheMetrics

logger = logging.getLogger(__name__)

Clock = Callable[[], float]


def is_numeric(value: Any) -> bool:
    """Check if a stored value can be incremented."""
    return isinstance(value, numbers.Real) and not isinstance(value, bool)


def _ensure_iterable(value: Any, what: str) -> None:
    # a bare string is iterable but never a key collection
    if isinstance(value, (str, bytes)) or not isinstance(value, Iterable):
        raise InvalidArgumentError(f"Invalid {what} type: {type(value).__name__}")


class CacheEngine(ABC):
    """Abstract cache engine.

    Implementations provide different storage media:
    - MemoryEngine: In-process dictionary
    - FileEngine: One file per key plus a metadata side file
    - RedisEngine: Redis backend

    All engines implement the same interface for consistent usage. Bulk
    operations are built here from the single-key operations and are not
    atomic across keys.
    """

    def __init__(
        self,
        config: Optional[EngineConfig] = None,
        clock: Optional[Clock] = None,
    ):
        """Initialize engine.

        Args:
            config: Engine configuration
            clock: Source of epoch seconds
        """
        self.config = config or EngineConfig()
        self._clock = clock or time.time
        self._expiration = ExpirationPolicy(self.config.default_ttl)

    @abstractmethod
    def get(self, key: str, default: Any = None) -> Any:
        """Get value by key.

        Args:
            key: Cache key
            default: Returned on a miss

        Returns:
            Cached value or default
        """
        pass

    @abstractmethod
    def set(self, key: str, value: Any, ttl: Optional[TTL] = None) -> bool:
        """Store value, evicting one entry first if at capacity.

        Args:
            key: Cache key
            value: Value to cache
            ttl: Seconds or timedelta; None uses the default TTL

        Returns:
            True if the write succeeded
        """
        pass

    @abstractmethod
    def delete(self, key: str) -> bool:
        """Delete entry and its metadata.

        Returns:
            True if an entry was removed
        """
        pass

    @abstractmethod
    def clear(self) -> bool:
        """Remove all entries and metadata.

        Returns:
            Always True
        """
        pass

    @abstractmethod
    def has(self, key: str) -> bool:
        """Check for a live entry without touching metrics or metadata."""
        pass

    @abstractmethod
    def get_ttl(self, key: str) -> Optional[timedelta]:
        """Get remaining lifetime, or None if absent or expired."""
        pass

    @abstractmethod
    def update_ttl(self, key: str, ttl: Optional[TTL]) -> bool:
        """Recompute expiration of an existing entry.

        Returns:
            False if the key does not exist
        """
        pass

    @abstractmethod
    def increment(self, key: str, delta: int = 1) -> Any:
        """Add ``delta`` to a numeric value.

        Returns:
            New value
        """
        pass

    def decrement(self, key: str, delta: int = 1) -> Any:
        """Subtract ``delta`` from a numeric value.

        Returns:
            New value
        """
        return self.increment(key, -delta)

    @abstractmethod
    def get_metrics(self) -> CacheMetrics:
        """Get a read-only metrics snapshot."""
        pass

    def get_multiple(self, keys: Iterable, default: Any = None) -> Dict[str, Any]:
        """Get multiple values.

        Args:
            keys: Iterable of keys
            default: Value for missing keys

        Returns:
            Dict of key -> value, in input order
        """
        _ensure_iterable(keys, "keys")
        return {key: self.get(key, default) for key in keys}

    def set_multiple(self, pairs: Any, ttl: Optional[TTL] = None) -> bool:
        """Store multiple values.

        Args:
            pairs: Mapping or iterable of (key, value) pairs
            ttl: TTL for all items

        Returns:
            True only if every write succeeded
        """
        _ensure_iterable(pairs, "values")
        success = True
        for key, value in self._iter_pairs(pairs):
            if not self.set(key, value, ttl):
                success = False
        return success

    def delete_multiple(self, keys: Iterable) -> bool:
        """Delete multiple keys.

        Returns:
            True only if every key was removed
        """
        _ensure_iterable(keys, "keys")
        success = True
        for key in keys:
            if not self.delete(key):
                success = False
        return success

    @staticmethod
    def _iter_pairs(pairs: Any) -> Iterator[Tuple[Any, Any]]:
        if isinstance(pairs, Mapping):
            yield from pairs.items()
            return
        for pair in pairs:
            if not isinstance(pair, tuple) or len(pair) != 2:
                raise InvalidArgumentError(f"Expected (key, value) pair, got {pair!r}")
            yield pair

    def __contains__(self, key: str) -> bool:
        """Check if key is live."""
        return self.has(key)

    def __len__(self) -> int:
        """Get live entry count."""
        return self.get_metrics().item_count

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(max_size={self.config.max_size}, "
            f"policy={self.config.eviction_policy})"
        )


__all__ = ["CacheEngine", "Clock", "is_numeric"]
