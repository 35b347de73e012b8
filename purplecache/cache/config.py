"""PurpleCache Config - Engine and Connection Configuration.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from __future__ import annotations

from dataclasses import dataclass, fields
from datetime import timedelta
from typing import Any, Dict, Mapping, Optional, Union

import redis

from purplecache.exceptions import InvalidConfigurationError, InvalidTTLError
from purplecache.cache.expiration import ttl_to_seconds

EVICTION_POLICIES = ("LRU", "LFU")
SERIALIZERS = ("pickle", "json", "msgpack")

# camelCase names used by the external configuration shape
_ALIASES = {
    "defaultTtl": "default_ttl",
    "maxSize": "max_size",
    "evictionPolicy": "eviction_policy",
}


@dataclass(frozen=True)
class EngineConfig:
    """Cache engine configuration, immutable after construction.

    Attributes:
        default_ttl: TTL used when a call passes none (seconds or timedelta)
        max_size: Maximum live entries
        eviction_policy: "LRU" or "LFU"
        serializer: Value serializer name for file and redis engines
    """

    default_ttl: Union[int, timedelta] = 3600
    max_size: int = 100
    eviction_policy: str = "LRU"
    serializer: str = "pickle"

    def __post_init__(self):
        try:
            ttl_to_seconds(self.default_ttl)
        except InvalidTTLError as e:
            raise InvalidConfigurationError(f"Invalid default_ttl: {self.default_ttl!r}") from e

        if (
            not isinstance(self.max_size, int)
            or isinstance(self.max_size, bool)
            or self.max_size <= 0
        ):
            raise InvalidConfigurationError(
                f"max_size must be a positive integer, got {self.max_size!r}"
            )

        policy = str(self.eviction_policy).upper()
        if policy not in EVICTION_POLICIES:
            raise InvalidConfigurationError(
                f"Unknown eviction policy: {self.eviction_policy!r}"
            )
        object.__setattr__(self, "eviction_policy", policy)

        if self.serializer not in SERIALIZERS:
            raise InvalidConfigurationError(f"Unknown serializer: {self.serializer!r}")

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "EngineConfig":
        """Build from a mapping.

        Accepts snake_case field names and the camelCase names of the
        external configuration shape. Unrelated keys are ignored.

        Args:
            data: Configuration mapping

        Returns:
            EngineConfig instance
        """
        known = {f.name for f in fields(cls)}
        kwargs: Dict[str, Any] = {}
        for name, value in data.items():
            name = _ALIASES.get(name, name)
            if name in known and value is not None:
                kwargs[name] = value
        return cls(**kwargs)


@dataclass
class RedisConfig:
    """Redis connection configuration.

    Attributes:
        host: Redis host
        port: Redis port
        db: Redis database number
        password: Redis password
        socket_timeout: Socket timeout
        socket_connect_timeout: Connection timeout
        max_connections: Connection pool size
        prefix: Key prefix for cache entries
        metadata_key: Hash holding access metadata
    """

    host: str = "localhost"
    port: int = 6379
    db: int = 0
    password: Optional[str] = None
    socket_timeout: float = 5.0
    socket_connect_timeout: float = 5.0
    max_connections: int = 10
    prefix: str = "purple_cache:"
    metadata_key: str = "purple_cache_metadata"

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "RedisConfig":
        """Build from a mapping, ignoring unknown keys."""
        known = {f.name for f in fields(cls)}
        return cls(**{k: v for k, v in data.items() if k in known})

    def create_client(self) -> redis.Redis:
        """Create a pooled Redis client.

        Returns:
            Redis client
        """
        pool = redis.ConnectionPool(
            host=self.host,
            port=self.port,
            db=self.db,
            password=self.password,
            socket_timeout=self.socket_timeout,
            socket_connect_timeout=self.socket_connect_timeout,
            max_connections=self.max_connections,
            decode_responses=False,  # values are serialized by the engine
        )
        return redis.Redis(connection_pool=pool)


__all__ = ["EngineConfig", "RedisConfig", "EVICTION_POLICIES", "SERIALIZERS"]
