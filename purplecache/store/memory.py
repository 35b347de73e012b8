"""PurpleCache Memory Engine - In-Memory Cache Engine.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from __future__ import annotations

import logging
from typing import Dict, Optional

from purplecache.cache.config import EngineConfig
from purplecache.cache.entry import CacheEntry
from purplecache.store.backend import Clock
from purplecache.store.local import LocalEngine

logger = logging.getLogger(__name__)


class MemoryEngine(LocalEngine):
    """In-memory cache engine.

    The simplest and fastest option, keeping all entries in a dict.
    Nothing survives a process restart.

    Example:
        engine = MemoryEngine(EngineConfig(max_size=2, eviction_policy="LRU"))
        engine.set("a", 1)
        engine.get("a")
    """

    def __init__(self, config: Optional[EngineConfig] = None, clock: Optional[Clock] = None):
        """Initialize memory engine.

        Args:
            config: Engine configuration
            clock: Source of epoch seconds
        """
        super().__init__(config, clock)
        self._entries: Dict[str, CacheEntry] = {}
        logger.info(
            f"Memory cache ready (max_size={self.config.max_size}, "
            f"policy={self.config.eviction_policy})"
        )

    def _read_entry(self, key: str) -> Optional[CacheEntry]:
        return self._entries.get(key)

    def _write_entry(self, entry: CacheEntry) -> bool:
        self._entries[entry.key] = entry
        return True

    def _remove_entry(self, key: str) -> bool:
        return self._entries.pop(key, None) is not None

    def _remove_all_entries(self) -> int:
        count = len(self._entries)
        self._entries.clear()
        return count

    def __repr__(self) -> str:
        return f"MemoryEngine(entries={len(self._entries)}, max_size={self.config.max_size})"


__all__ = ["MemoryEngine"]
