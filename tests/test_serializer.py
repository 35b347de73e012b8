"""Tests for value serializers.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

import pytest

from purplecache.exceptions import InvalidConfigurationError
from purplecache.protocol.serializer import (
    JSONSerializer,
    PickleSerializer,
    get_serializer,
)


class TestSerializers:
    """Tests for serializer lookup and encoding."""

    def test_default_is_pickle(self):
        """Test default serializer."""
        assert isinstance(get_serializer(), PickleSerializer)

    def test_pickle_keeps_types(self):
        """Test pickle preserves tuples and sets."""
        serializer = PickleSerializer()
        value = {"point": (1, 2), "tags": {"a", "b"}}

        assert serializer.loads(serializer.dumps(value)) == value

    def test_json_is_readable(self):
        """Test JSON output is plain text."""
        serializer = JSONSerializer()

        assert serializer.dumps({"a": [1, 2]}) == b'{"a":[1,2]}'
        assert serializer.loads(b'{"a":[1,2]}') == {"a": [1, 2]}

    def test_json_rejects_objects(self):
        """Test non-JSON values fail on write."""
        with pytest.raises(TypeError):
            JSONSerializer().dumps(object())

    def test_msgpack(self):
        """Test msgpack when installed."""
        pytest.importorskip("msgpack")
        serializer = get_serializer("msgpack")

        assert serializer.loads(serializer.dumps({"a": b"raw"})) == {"a": b"raw"}

    def test_unknown(self):
        """Test unknown serializer names."""
        with pytest.raises(InvalidConfigurationError):
            get_serializer("yaml")


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
