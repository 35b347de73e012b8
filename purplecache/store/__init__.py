"""Store module - Cache engines over different storage media."""

from purplecache.store.backend import CacheEngine
from purplecache.store.local import LocalEngine
from purplecache.store.memory import MemoryEngine
from purplecache.store.file import FileEngine
from purplecache.store.redis import RedisEngine

__all__ = [
    "CacheEngine",
    "LocalEngine",
    "MemoryEngine",
    "FileEngine",
    "RedisEngine",
]
