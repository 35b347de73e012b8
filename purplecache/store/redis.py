"""PurpleCache Redis Engine - Redis-Backed Cache Engine.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from __future__ import annotations

import logging
import re
from datetime import timedelta
from typing import Any, Optional, Union

import redis
from redis.exceptions import ResponseError

from purplecache.cache.config import EngineConfig
from purplecache.cache.entry import AccessMetadata
from purplecache.cache.expiration import TTL, validate_key
from purplecache.eviction.delegated import DelegatedPolicy
from purplecache.exceptions import InvalidArgumentError, NonNumericValueError
from purplecache.metrics.collector import CacheMetrics
from purplecache.protocol.serializer import get_serializer
from purplecache.store.backend import CacheEngine, Clock, is_numeric

logger = logging.getLogger(__name__)

_INTEGER = re.compile(rb"-?[0-9]+")


class RedisEngine(CacheEngine):
    """Redis cache engine.

    Entries live under ``prefix + key`` with native millisecond expiry.
    Eviction is left to Redis: the engine sets ``maxmemory-policy`` once at
    construction (allkeys-lru or allkeys-lfu) and never picks victims itself.
    Two engines on one server with different policies race; the last one
    constructed wins.

    Access metadata is kept in one hash (``metadata_key``) with fields
    ``<key>:lastAccessed`` and ``<key>:frequency``. Hit and miss counts come
    from the server's own ``INFO stats``, so they cover every client of the
    server, not just this engine.

    Integers are stored as plain decimal text so INCRBY works on them.
    Incrementing a missing key creates a counter starting at zero with no
    expiry.

    Example:
        engine = RedisEngine(redis.Redis(host="redis.local"))
        engine.set("key", {"name": "John"}, ttl=300)
        engine.get("key")
    """

    def __init__(
        self,
        client: redis.Redis,
        config: Optional[EngineConfig] = None,
        prefix: str = "purple_cache:",
        metadata_key: str = "purple_cache_metadata",
        clock: Optional[Clock] = None,
    ):
        """Initialize Redis engine.

        Args:
            client: Connected Redis client
            config: Engine configuration
            prefix: Key prefix for entries
            metadata_key: Hash holding access metadata
            clock: Source of epoch seconds for metadata timestamps
        """
        super().__init__(config, clock)
        self._client = client
        self.prefix = prefix
        self.metadata_key = metadata_key
        self._serializer = get_serializer(self.config.serializer)
        self._eviction = DelegatedPolicy(self.config.eviction_policy)

        self._configure_eviction()

    def _configure_eviction(self) -> None:
        """Tell the server which native eviction policy to apply."""
        self._client.config_set("maxmemory-policy", self._eviction.native_policy)
        logger.info(f"Redis maxmemory-policy set to {self._eviction.native_policy}")

    def _make_key(self, key: str) -> str:
        """Make prefixed Redis key."""
        return f"{self.prefix}{key}"

    def _encode(self, value: Any) -> bytes:
        if isinstance(value, int) and not isinstance(value, bool):
            return str(value).encode("ascii")
        return self._serializer.dumps(value)

    def _decode(self, data: Union[bytes, str]) -> Any:
        if isinstance(data, str):
            data = data.encode("utf-8")
        if _INTEGER.fullmatch(data):
            return int(data)
        return self._serializer.loads(data)

    # -- metadata -----------------------------------------------------------

    def _reset_metadata(self, key: str) -> None:
        self._client.hset(
            self.metadata_key,
            mapping={f"{key}:lastAccessed": self._clock(), f"{key}:frequency": 1},
        )

    def _touch(self, key: str) -> None:
        self._client.hset(self.metadata_key, f"{key}:lastAccessed", self._clock())
        self._client.hincrby(self.metadata_key, f"{key}:frequency", 1)

    def _forget(self, key: str) -> None:
        self._client.hdel(self.metadata_key, f"{key}:lastAccessed", f"{key}:frequency")

    def get_access_metadata(self, key: str) -> Optional[AccessMetadata]:
        """Get the stored access record for ``key``, or None."""
        validate_key(key)
        last, frequency = self._client.hmget(
            self.metadata_key, [f"{key}:lastAccessed", f"{key}:frequency"]
        )
        if last is None:
            return None
        return AccessMetadata(
            last_accessed_at=float(last),
            access_frequency=int(frequency or 0),
        )

    # -- contract -----------------------------------------------------------

    def get(self, key: str, default: Any = None) -> Any:
        validate_key(key)
        data = self._client.get(self._make_key(key))

        if data is None:
            self._forget(key)
            return default

        self._touch(key)
        return self._decode(data)

    def set(self, key: str, value: Any, ttl: Optional[TTL] = None) -> bool:
        validate_key(key)
        seconds = self._expiration.to_seconds(ttl)

        if self._client.dbsize() >= self.config.max_size:
            self._evict()

        redis_key = self._make_key(key)
        ttl_ms = int(seconds * 1000)
        if ttl_ms <= 0:
            # Zero TTL: the entry is expired before anyone can read it
            self._client.delete(redis_key)
            self._forget(key)
            return True

        written = bool(self._client.psetex(redis_key, ttl_ms, self._encode(value)))
        if written:
            self._reset_metadata(key)
        return written

    def delete(self, key: str) -> bool:
        validate_key(key)
        removed = self._client.delete(self._make_key(key))
        self._forget(key)
        return removed > 0

    def clear(self) -> bool:
        keys = list(self._client.scan_iter(match=f"{self.prefix}*", count=100))
        if keys:
            self._client.delete(*keys)
        self._client.delete(self.metadata_key)
        logger.debug(f"Cleared {len(keys)} entries")
        return True

    def has(self, key: str) -> bool:
        validate_key(key)
        if self._client.exists(self._make_key(key)) > 0:
            return True
        self._forget(key)
        return False

    def get_ttl(self, key: str) -> Optional[timedelta]:
        """Get remaining lifetime.

        Returns None for missing keys and for keys without expiry
        (auto-created counters).
        """
        validate_key(key)
        ttl_ms = self._client.pttl(self._make_key(key))
        if ttl_ms is None or ttl_ms <= 0:
            return None
        return timedelta(milliseconds=ttl_ms)

    def update_ttl(self, key: str, ttl: Optional[TTL]) -> bool:
        validate_key(key)
        seconds = self._expiration.to_seconds(ttl)
        redis_key = self._make_key(key)

        if not self._client.exists(redis_key):
            self._forget(key)
            return False

        ttl_ms = int(seconds * 1000)
        if ttl_ms <= 0:
            self._client.delete(redis_key)
            self._forget(key)
            return True
        return bool(self._client.pexpire(redis_key, ttl_ms))

    def increment(self, key: str, delta: int = 1) -> Any:
        """Add ``delta`` to a stored number.

        Integers go through INCRBY. Other numbers (floats) are serialized,
        so INCRBY refuses them; those are read, added to and written back
        with their remaining expiry. That path is not atomic across clients.
        """
        validate_key(key)
        self._check_delta(delta)
        redis_key = self._make_key(key)
        try:
            value = self._client.incrby(redis_key, delta)
        except ResponseError as e:
            value = self._add_to_stored(key, redis_key, delta, e)
        self._touch(key)
        return value

    def _add_to_stored(self, key: str, redis_key: str, delta: int, error: ResponseError) -> Any:
        data = self._client.get(redis_key)
        current = self._decode(data) if data is not None else None
        if not is_numeric(current):
            raise NonNumericValueError(key) from error

        value = current + delta
        ttl_ms = self._client.pttl(redis_key)
        if ttl_ms is not None and ttl_ms > 0:
            self._client.psetex(redis_key, ttl_ms, self._encode(value))
        else:
            self._client.set(redis_key, self._encode(value))
        return value

    def get_metrics(self) -> CacheMetrics:
        """Get metrics from the server's statistics.

        hit_count/miss_count are keyspace_hits/keyspace_misses, evictions
        and expirations are evicted_keys/expired_keys. item_count counts
        only this engine's prefixed keys.
        """
        info = self._client.info("stats")
        item_count = sum(1 for _ in self._client.scan_iter(match=f"{self.prefix}*", count=100))
        return CacheMetrics(
            hit_count=int(info.get("keyspace_hits", 0)),
            miss_count=int(info.get("keyspace_misses", 0)),
            item_count=item_count,
            evictions=int(info.get("evicted_keys", 0)),
            expirations=int(info.get("expired_keys", 0)),
        )

    # -- internals ----------------------------------------------------------

    @staticmethod
    def _check_delta(delta: Any) -> None:
        if not isinstance(delta, int) or isinstance(delta, bool):
            raise InvalidArgumentError(f"Redis counters need an integer delta, got {delta!r}")

    def _evict(self) -> None:
        # DelegatedPolicy never names a victim
        logger.debug(f"At capacity ({self.config.max_size}); Redis evicts natively")

    def close(self) -> None:
        """Close the Redis connection."""
        self._client.close()

    def __repr__(self) -> str:
        return f"RedisEngine(prefix={self.prefix!r}, policy={self._eviction.native_policy})"


__all__ = ["RedisEngine"]
