"""Eviction module - Cache eviction policies."""

from purplecache.eviction.policy import (
    EvictionPolicy,
    EvictionStats,
    get_policy,
)
from purplecache.eviction.lru import LRUPolicy
from purplecache.eviction.lfu import LFUPolicy
from purplecache.eviction.delegated import DelegatedPolicy

__all__ = [
    "EvictionPolicy",
    "EvictionStats",
    "get_policy",
    "LRUPolicy",
    "LFUPolicy",
    "DelegatedPolicy",
]
