"""PurpleCache - Storage-Agnostic Cache Engines.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.

One cache contract over three storage media:
- Memory: in-process dict
- File: one file per key plus a metadata side file
- Redis: any Redis server, with native eviction

Every engine offers TTL expiration, a bounded capacity with LRU or LFU
eviction, and hit/miss metrics.

Architecture:
    ┌─────────────────────────────────────────────────────────────────┐
    │                       PurpleCache System                        │
    ├─────────────────────────────────────────────────────────────────┤
    │  ┌─────────────────────────────────────────────────┐            │
    │  │                 create_cache()                   │  FACTORY  │
    │  └──────────────────────┬──────────────────────────┘            │
    │                         │                                       │
    │  ┌──────────────────────┴──────────────────────────┐            │
    │  │                  Cache Engines                   │            │
    │  │   ┌────────┐  ┌────────┐  ┌────────┐            │   ENGINE   │
    │  │   │ Memory │  │  File  │  │ Redis  │            │   LAYER    │
    │  │   └────────┘  └────────┘  └────────┘            │            │
    │  └──────────────────────┬──────────────────────────┘            │
    │                         │                                       │
    │  ┌─────────────┐  ┌─────┴───────┐  ┌─────────────┐              │
    │  │ Expiration  │  │  Eviction   │  │   Metrics   │   POLICY     │
    │  │  TTL → at   │  │  LRU / LFU  │  │  hit/miss   │   LAYER      │
    │  └─────────────┘  └─────────────┘  └─────────────┘              │
    └─────────────────────────────────────────────────────────────────┘

Example Usage:
    from purplecache import create_cache

    cache = create_cache("memory", max_size=2, eviction_policy="LRU")
    cache.set("user:1", {"name": "John"}, ttl=300)
    user = cache.get("user:1")

    files = create_cache("file", cache_dir="/var/cache/myapp")
    files.set_multiple({"a": 1, "b": 2})

    shared = create_cache("redis", redis={"host": "localhost"}, evictionPolicy="LFU")
    shared.increment("visits")
    print(shared.get_metrics().to_dict())
"""

__version__ = "1.0.0"
__author__ = "BlackRoad OS"

from purplecache.exceptions import (
    CacheError,
    InvalidKeyError,
    InvalidTTLError,
    InvalidArgumentError,
    InvalidConfigurationError,
    NonNumericValueError,
)
from purplecache.cache.entry import CacheEntry, AccessMetadata
from purplecache.cache.expiration import ExpirationPolicy, compute_expiration
from purplecache.cache.metadata import AccessTracker
from purplecache.cache.config import EngineConfig, RedisConfig
from purplecache.eviction.policy import EvictionPolicy, EvictionStats, get_policy
from purplecache.eviction.lru import LRUPolicy
from purplecache.eviction.lfu import LFUPolicy
from purplecache.eviction.delegated import DelegatedPolicy
from purplecache.metrics.collector import MetricsCollector, CacheMetrics
from purplecache.protocol.serializer import (
    Serializer,
    JSONSerializer,
    PickleSerializer,
    MsgPackSerializer,
)
from purplecache.store.backend import CacheEngine
from purplecache.store.memory import MemoryEngine
from purplecache.store.file import FileEngine
from purplecache.store.redis import RedisEngine
from purplecache.factory import create_cache

__all__ = [
    # Errors
    "CacheError",
    "InvalidKeyError",
    "InvalidTTLError",
    "InvalidArgumentError",
    "InvalidConfigurationError",
    "NonNumericValueError",
    # Cache
    "CacheEntry",
    "AccessMetadata",
    "AccessTracker",
    "ExpirationPolicy",
    "compute_expiration",
    "EngineConfig",
    "RedisConfig",
    # Eviction
    "EvictionPolicy",
    "EvictionStats",
    "get_policy",
    "LRUPolicy",
    "LFUPolicy",
    "DelegatedPolicy",
    # Metrics
    "MetricsCollector",
    "CacheMetrics",
    # Protocol
    "Serializer",
    "JSONSerializer",
    "PickleSerializer",
    "MsgPackSerializer",
    # Engines
    "CacheEngine",
    "MemoryEngine",
    "FileEngine",
    "RedisEngine",
    "create_cache",
]
