"""PurpleCache Factory - Backend Selection.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Mapping, Optional

import redis

from purplecache.cache.config import EngineConfig, RedisConfig
from purplecache.exceptions import InvalidConfigurationError
from purplecache.store.backend import CacheEngine
from purplecache.store.file import FileEngine
from purplecache.store.memory import MemoryEngine
from purplecache.store.redis import RedisEngine

logger = logging.getLogger(__name__)

BACKENDS = ("redis", "file", "memory")


def create_cache(
    backend: str,
    config: Optional[Mapping[str, Any]] = None,
    **options: Any,
) -> CacheEngine:
    """Create a cache engine.

    Args:
        backend: "redis", "file" or "memory"
        config: Configuration mapping (snake_case or camelCase keys)
        **options: Same keys as ``config``; these win on conflict

    Backend-specific keys:
        cache_dir / cacheDir: required for "file"
        redis: required for "redis"; a Redis client, a URL, or a mapping
            of RedisConfig fields

    Returns:
        Constructed engine

    Raises:
        InvalidConfigurationError: Unknown backend or missing required field

    Example:
        cache = create_cache("file", cache_dir="/tmp/cache", max_size=500)
        cache = create_cache("redis", {"redis": {"host": "localhost"}, "evictionPolicy": "LFU"})
    """
    settings: Dict[str, Any] = dict(config or {})
    settings.update(options)

    kind = str(backend).lower()
    if kind not in BACKENDS:
        raise InvalidConfigurationError(f"Invalid cache type: {backend!r}")

    engine_config = EngineConfig.from_dict(settings)

    if kind == "redis":
        return _create_redis(settings, engine_config)
    if kind == "file":
        return _create_file(settings, engine_config)
    return MemoryEngine(engine_config)


def _create_file(settings: Dict[str, Any], engine_config: EngineConfig) -> FileEngine:
    cache_dir = settings.get("cache_dir") or settings.get("cacheDir")
    if not cache_dir:
        raise InvalidConfigurationError("Cache directory is required")
    return FileEngine(cache_dir, engine_config)


def _create_redis(settings: Dict[str, Any], engine_config: EngineConfig) -> RedisEngine:
    target = settings.get("redis")
    if target is None:
        raise InvalidConfigurationError("Redis configuration is required")

    redis_config = RedisConfig()
    if isinstance(target, str):
        client = redis.Redis.from_url(target)
    elif isinstance(target, Mapping):
        redis_config = RedisConfig.from_dict(target)
        client = redis_config.create_client()
    else:
        client = target

    logger.debug(f"Creating Redis cache with prefix {redis_config.prefix!r}")
    return RedisEngine(
        client,
        engine_config,
        prefix=settings.get("prefix", redis_config.prefix),
        metadata_key=settings.get("metadata_key", redis_config.metadata_key),
    )


__all__ = ["create_cache", "BACKENDS"]
