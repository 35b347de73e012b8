"""PurpleCache Serializer - Stored Value Encoding.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.

The file engine serializes whole entries (key, value, expires_at); the
Redis engine serializes bare values, except integers which it stores as
text so server-side counters work.
"""

from __future__ import annotations

import json
import pickle
from abc import ABC, abstractmethod
from typing import Any, Callable, Dict

from purplecache.exceptions import InvalidConfigurationError


class Serializer(ABC):
    """Turns cache values into bytes and back."""

    name: str = ""

    @abstractmethod
    def dumps(self, value: Any) -> bytes:
        """Encode value.

        Args:
            value: Value to encode

        Returns:
            Encoded bytes
        """
        pass

    @abstractmethod
    def loads(self, data: bytes) -> Any:
        """Decode bytes produced by ``dumps``."""
        pass

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


class PickleSerializer(Serializer):
    """Pickle encoding, the default.

    Round-trips any picklable object. Only read cache media you trust.
    """

    name = "pickle"

    def __init__(self, protocol: int = pickle.HIGHEST_PROTOCOL):
        self.protocol = protocol

    def dumps(self, value: Any) -> bytes:
        return pickle.dumps(value, protocol=self.protocol)

    def loads(self, data: bytes) -> Any:
        return pickle.loads(data)


class JSONSerializer(Serializer):
    """UTF-8 JSON encoding.

    Keeps cache files human-readable. Tuples come back as lists and
    non-JSON types raise TypeError on write.
    """

    name = "json"

    def dumps(self, value: Any) -> bytes:
        return json.dumps(value, separators=(",", ":")).encode("utf-8")

    def loads(self, data: bytes) -> Any:
        return json.loads(data.decode("utf-8"))


class MsgPackSerializer(Serializer):
    """MessagePack encoding (``pip install purplecache[msgpack]``)."""

    name = "msgpack"

    def __init__(self):
        try:
            import msgpack
        except ImportError as e:
            raise ImportError(
                "msgpack package not installed. Run: pip install purplecache[msgpack]"
            ) from e
        self._msgpack = msgpack

    def dumps(self, value: Any) -> bytes:
        return self._msgpack.packb(value, use_bin_type=True)

    def loads(self, data: bytes) -> Any:
        return self._msgpack.unpackb(data, raw=False)


_SERIALIZERS: Dict[str, Callable[[], Serializer]] = {
    PickleSerializer.name: PickleSerializer,
    JSONSerializer.name: JSONSerializer,
    MsgPackSerializer.name: MsgPackSerializer,
}


def get_serializer(name: str = "pickle") -> Serializer:
    """Create the serializer configured for an engine.

    Args:
        name: "pickle", "json" or "msgpack"

    Returns:
        Serializer instance

    Raises:
        InvalidConfigurationError: If the name is unknown
    """
    factory = _SERIALIZERS.get(name)
    if factory is None:
        raise InvalidConfigurationError(f"Unknown serializer: {name!r}")
    return factory()


__all__ = [
    "Serializer",
    "JSONSerializer",
    "PickleSerializer",
    "MsgPackSerializer",
    "get_serializer",
]
