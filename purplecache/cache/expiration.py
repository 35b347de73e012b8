"""PurpleCache Expiration - TTL Resolution and Key Validation.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from __future__ import annotations

from datetime import timedelta
from typing import Any, Optional, Union

from purplecache.exceptions import InvalidKeyError, InvalidTTLError

TTL = Union[int, timedelta]


def validate_key(key: Any) -> None:
    """Ensure ``key`` is a non-empty string.

    Raises:
        InvalidKeyError: If the key is not text or is empty
    """
    if not isinstance(key, str) or not key:
        raise InvalidKeyError(key)


def ttl_to_seconds(ttl: Any) -> float:
    """Convert a single TTL value to seconds.

    Accepts a non-negative ``timedelta`` or a non-negative ``int``.
    Booleans and floats are rejected.

    Raises:
        InvalidTTLError: For any other shape
    """
    if isinstance(ttl, timedelta):
        seconds = ttl.total_seconds()
        if seconds < 0:
            raise InvalidTTLError(ttl)
        return seconds
    if isinstance(ttl, int) and not isinstance(ttl, bool):
        if ttl < 0:
            raise InvalidTTLError(ttl)
        return float(ttl)
    raise InvalidTTLError(ttl)


class ExpirationPolicy:
    """Computes absolute expiration instants.

    A TTL of zero is valid and yields an entry that is already expired on
    the next read; it never means "no expiration".

    Example:
        policy = ExpirationPolicy(default_ttl=3600)
        expires_at = policy.compute_expiration(None, now=time.time())
    """

    def __init__(self, default_ttl: TTL = 3600):
        """Initialize policy.

        Args:
            default_ttl: TTL used when a call passes none
        """
        self.default_seconds = ttl_to_seconds(default_ttl)

    def to_seconds(self, ttl: Optional[TTL]) -> float:
        """Resolve a per-call TTL, falling back to the default."""
        if ttl is None:
            return self.default_seconds
        return ttl_to_seconds(ttl)

    def compute_expiration(self, ttl: Optional[TTL], now: float) -> float:
        """Get the absolute expiration instant for a TTL.

        Args:
            ttl: Per-call TTL or None
            now: Current epoch seconds

        Returns:
            Expiration instant in epoch seconds
        """
        return now + self.to_seconds(ttl)

    def __repr__(self) -> str:
        return f"ExpirationPolicy(default={self.default_seconds}s)"


def compute_expiration(ttl: Optional[TTL], default_ttl: TTL, now: float) -> float:
    """Functional form of ExpirationPolicy.compute_expiration."""
    return ExpirationPolicy(default_ttl).compute_expiration(ttl, now)


__all__ = [
    "TTL",
    "ExpirationPolicy",
    "compute_expiration",
    "ttl_to_seconds",
    "validate_key",
]
