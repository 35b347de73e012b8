"""Cache module - Entries, expiration, access metadata and configuration."""

from purplecache.cache.entry import (
    CacheEntry,
    AccessMetadata,
)
from purplecache.cache.expiration import (
    ExpirationPolicy,
    compute_expiration,
    validate_key,
)
from purplecache.cache.metadata import AccessTracker
from purplecache.cache.config import (
    EngineConfig,
    RedisConfig,
)

__all__ = [
    "CacheEntry",
    "AccessMetadata",
    "ExpirationPolicy",
    "compute_expiration",
    "validate_key",
    "AccessTracker",
    "EngineConfig",
    "RedisConfig",
]
