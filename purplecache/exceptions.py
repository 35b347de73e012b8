"""PurpleCache Exceptions - Error Hierarchy.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.

Every error raised by the cache engines derives from CacheError and also
from the closest builtin, so callers may catch either.
"""

from __future__ import annotations

from typing import Any


class CacheError(Exception):
    """Base class for all cache errors."""


class InvalidKeyError(CacheError, ValueError):
    """Raised when a key is not a non-empty string."""

    def __init__(self, key: Any):
        if isinstance(key, str):
            message = "Cache key cannot be empty"
        else:
            message = f"Cache key must be a string, got {type(key).__name__}"
        super().__init__(message)
        self.key = key


class InvalidTTLError(CacheError, ValueError):
    """Raised when a TTL is neither None, a timedelta, nor a non-negative int."""

    def __init__(self, ttl: Any):
        super().__init__(f"Invalid TTL: {ttl!r}")
        self.ttl = ttl


class InvalidArgumentError(CacheError, TypeError):
    """Raised when a bulk operation receives a non-iterable input."""


class InvalidConfigurationError(CacheError, ValueError):
    """Raised for missing or invalid engine configuration."""


class NonNumericValueError(CacheError, TypeError):
    """Raised when incrementing or decrementing a non-numeric value."""

    def __init__(self, key: str, reason: str = "non-numeric value"):
        super().__init__(f"Cannot change {key!r}: {reason}")
        self.key = key


__all__ = [
    "CacheError",
    "InvalidKeyError",
    "InvalidTTLError",
    "InvalidArgumentError",
    "InvalidConfigurationError",
    "NonNumericValueError",
]
