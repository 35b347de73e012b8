"""PurpleCache File Engine - File-Backed Cache Engine.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from __future__ import annotations

import hashlib
import json
import logging
import os
from pathlib import Path
from typing import Optional, Union

from purplecache.cache.config import EngineConfig
from purplecache.cache.entry import CacheEntry
from purplecache.cache.metadata import AccessTracker
from purplecache.protocol.serializer import get_serializer
from purplecache.store.backend import Clock
from purplecache.store.local import LocalEngine

logger = logging.getLogger(__name__)


class FileEngine(LocalEngine):
    """File-backed cache engine.

    Persists entries to disk so they survive process restarts.

    Layout under ``cache_dir``:
    - ``<sha256(key)>.cache``: one serialized entry per key
    - ``metadata.json``: key -> {lastAccessedAt, accessFrequency}

    The metadata file is rewritten wholesale after every mutation, so each
    set/delete costs two file writes. Fine for modest write rates; an append
    log would be needed for heavy write volume.

    Example:
        engine = FileEngine("/var/cache/myapp")
        engine.set("key", "data")
        engine.get("key")
    """

    ENTRY_SUFFIX = ".cache"
    METADATA_FILE = "metadata.json"

    def __init__(
        self,
        cache_dir: Union[str, os.PathLike],
        config: Optional[EngineConfig] = None,
        clock: Optional[Clock] = None,
    ):
        """Initialize file engine.

        Args:
            cache_dir: Directory for cache files, created if absent
            config: Engine configuration
            clock: Source of epoch seconds
        """
        super().__init__(config, clock)
        self.cache_dir = Path(cache_dir)
        self.cache_dir.mkdir(parents=True, exist_ok=True)
        self.metadata_path = self.cache_dir / self.METADATA_FILE
        self._serializer = get_serializer(self.config.serializer)

        self._load_metadata()
        logger.info(f"File cache ready at {self.cache_dir} ({len(self._tracker)} entries)")

    def _get_path(self, key: str) -> Path:
        """Get entry file path for key.

        Args:
            key: Cache key

        Returns:
            File path
        """
        # Hash as filename to handle special characters
        filename = hashlib.sha256(key.encode("utf-8")).hexdigest()
        return self.cache_dir / f"{filename}{self.ENTRY_SUFFIX}"

    def _atomic_write(self, path: Path, data: bytes) -> None:
        temp_path = path.with_suffix(".tmp")
        try:
            with open(temp_path, "wb") as f:
                f.write(data)
            os.replace(temp_path, path)
        except OSError as e:
            logger.error(f"Error writing {path}: {e}")
            if temp_path.exists():
                temp_path.unlink()
            raise

    def _read_entry(self, key: str) -> Optional[CacheEntry]:
        path = self._get_path(key)
        if not path.exists():
            return None

        with open(path, "rb") as f:
            data = self._serializer.loads(f.read())

        entry = CacheEntry.from_dict(data)
        if entry.key != key:
            logger.warning(f"Hash collision on {path.name}: {entry.key!r} != {key!r}")
            return None
        return entry

    def _write_entry(self, entry: CacheEntry) -> bool:
        data = self._serializer.dumps(entry.to_dict())
        self._atomic_write(self._get_path(entry.key), data)
        return True

    def _remove_entry(self, key: str) -> bool:
        path = self._get_path(key)
        if not path.exists():
            return False
        path.unlink()
        return True

    def _remove_all_entries(self) -> int:
        count = 0
        for path in self.cache_dir.glob(f"*{self.ENTRY_SUFFIX}"):
            if path.is_file():
                path.unlink()
                count += 1
        return count

    def _load_metadata(self) -> None:
        """Reload the tracker from the metadata file, dropping stale records."""
        if not self.metadata_path.exists():
            return

        with open(self.metadata_path, "r", encoding="utf-8") as f:
            raw = json.load(f)

        tracker = AccessTracker.from_dict(raw)
        stale = [key for key in tracker if not self._get_path(key).exists()]
        for key in stale:
            tracker.remove(key)
        self._tracker = tracker

        if stale:
            logger.warning(f"Dropped {len(stale)} metadata records without entry files")
            self._save_metadata()

    def _save_metadata(self) -> None:
        data = json.dumps(self._tracker.to_dict()).encode("utf-8")
        self._atomic_write(self.metadata_path, data)

    def __repr__(self) -> str:
        return f"FileEngine(path={self.cache_dir}, entries={len(self._tracker)})"


__all__ = ["FileEngine"]
