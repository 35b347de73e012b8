"""PurpleCache Entry - Cache Entry and Access Metadata.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import timedelta
from typing import Any, Dict, Optional


@dataclass
class AccessMetadata:
    """Per-key access bookkeeping consumed by eviction policies.

    Kept alongside, never inside, the stored value.

    Attributes:
        last_accessed_at: Epoch seconds of the most recent get/set/increment/decrement
        access_frequency: Number of successful touches since the last set
    """

    last_accessed_at: float
    access_frequency: int = 1

    def touch(self, now: float) -> None:
        """Record one access at ``now``."""
        self.last_accessed_at = now
        self.access_frequency += 1

    def to_dict(self) -> Dict[str, Any]:
        """Convert to the persisted representation."""
        return {
            "lastAccessedAt": self.last_accessed_at,
            "accessFrequency": self.access_frequency,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "AccessMetadata":
        """Create from the persisted representation."""
        return cls(
            last_accessed_at=float(data["lastAccessedAt"]),
            access_frequency=int(data.get("accessFrequency", 1)),
        )


@dataclass
class CacheEntry:
    """A stored item.

    Attributes:
        key: Cache key
        value: Cached value
        expires_at: Epoch seconds after which the entry is logically absent
    """

    key: str
    value: Any
    expires_at: float

    def is_expired(self, now: float) -> bool:
        """Check if entry has expired.

        An entry whose ``expires_at`` equals ``now`` is already expired, so a
        zero TTL never survives to the next read.
        """
        return now >= self.expires_at

    def remaining(self, now: float) -> Optional[timedelta]:
        """Get remaining lifetime, or None once expired."""
        if self.is_expired(now):
            return None
        return timedelta(seconds=self.expires_at - now)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary.

        Returns:
            Dictionary representation
        """
        return {
            "key": self.key,
            "value": self.value,
            "expires_at": self.expires_at,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "CacheEntry":
        """Create from dictionary.

        Args:
            data: Dictionary data

        Returns:
            CacheEntry instance
        """
        return cls(
            key=data["key"],
            value=data["value"],
            expires_at=float(data["expires_at"]),
        )

    def __repr__(self) -> str:
        return f"CacheEntry(key={self.key!r}, expires_at={self.expires_at:.3f})"


__all__ = ["CacheEntry", "AccessMetadata"]
