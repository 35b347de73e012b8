"""Shared fixtures for PurpleCache tests.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

import fnmatch

import pytest
from redis.exceptions import ResponseError

from purplecache.cache.config import EngineConfig
from purplecache.store.memory import MemoryEngine


class FakeClock:
    """Manually advanced clock."""

    def __init__(self, now=1000.0):
        self.now = now

    def __call__(self):
        return self.now

    def advance(self, seconds):
        self.now += seconds


class FakeRedis:
    """In-memory stand-in for the redis.Redis commands the engine issues.

    Expiry follows the shared ``clock`` so tests can move time forward.
    """

    def __init__(self, clock):
        self.clock = clock
        self.config = {}
        self.keyspace_hits = 0
        self.keyspace_misses = 0
        self.closed = False
        self._strings = {}
        self._hashes = {}

    @staticmethod
    def _name(name):
        return name.decode() if isinstance(name, bytes) else name

    @staticmethod
    def _bytes(value):
        if isinstance(value, bytes):
            return value
        return str(value).encode()

    def _alive(self, name):
        name = self._name(name)
        item = self._strings.get(name)
        if item is None:
            return None
        value, expires_at = item
        if expires_at is not None and expires_at <= self.clock():
            del self._strings[name]
            return None
        return item

    def config_set(self, name, value):
        self.config[name] = value
        return True

    def get(self, name):
        item = self._alive(name)
        if item is None:
            self.keyspace_misses += 1
            return None
        self.keyspace_hits += 1
        return item[0]

    def psetex(self, name, time_ms, value):
        self._strings[self._name(name)] = (self._bytes(value), self.clock() + time_ms / 1000)
        return True

    def set(self, name, value):
        self._strings[self._name(name)] = (self._bytes(value), None)
        return True

    def delete(self, *names):
        count = 0
        for name in names:
            name = self._name(name)
            if self._alive(name) is not None:
                del self._strings[name]
                count += 1
            elif self._hashes.pop(name, None) is not None:
                count += 1
        return count

    def exists(self, *names):
        return sum(1 for name in names if self._alive(name) is not None)

    def pttl(self, name):
        item = self._alive(name)
        if item is None:
            return -2
        if item[1] is None:
            return -1
        return int((item[1] - self.clock()) * 1000)

    def pexpire(self, name, time_ms):
        item = self._alive(name)
        if item is None:
            return False
        self._strings[self._name(name)] = (item[0], self.clock() + time_ms / 1000)
        return True

    def incrby(self, name, amount=1):
        item = self._alive(name)
        value, expires_at = item if item is not None else (b"0", None)
        try:
            current = int(value)
        except ValueError:
            raise ResponseError("value is not an integer or out of range")
        current += amount
        self._strings[self._name(name)] = (str(current).encode(), expires_at)
        return current

    def decrby(self, name, amount=1):
        return self.incrby(name, -amount)

    def hset(self, name, key=None, value=None, mapping=None):
        fields = dict(mapping or {})
        if key is not None:
            fields[key] = value
        target = self._hashes.setdefault(name, {})
        added = sum(1 for k in fields if k not in target)
        for k, v in fields.items():
            target[k] = self._bytes(v)
        return added

    def hincrby(self, name, key, amount=1):
        target = self._hashes.setdefault(name, {})
        current = int(target.get(key, b"0")) + amount
        target[key] = str(current).encode()
        return current

    def hdel(self, name, *keys):
        target = self._hashes.get(name, {})
        return sum(1 for k in keys if target.pop(k, None) is not None)

    def hmget(self, name, keys):
        target = self._hashes.get(name, {})
        return [target.get(k) for k in keys]

    def hgetall(self, name):
        return {k.encode(): v for k, v in self._hashes.get(name, {}).items()}

    def scan_iter(self, match=None, count=None):
        for name in list(self._strings):
            if self._alive(name) is None:
                continue
            if match is None or fnmatch.fnmatchcase(name, match):
                yield name.encode()

    def dbsize(self):
        live = sum(1 for name in list(self._strings) if self._alive(name) is not None)
        return live + len(self._hashes)

    def info(self, section=None):
        return {
            "keyspace_hits": self.keyspace_hits,
            "keyspace_misses": self.keyspace_misses,
            "evicted_keys": 0,
            "expired_keys": 0,
        }

    def close(self):
        self.closed = True


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def fake_redis(clock):
    return FakeRedis(clock)


@pytest.fixture
def memory_engine(clock):
    return MemoryEngine(EngineConfig(max_size=3), clock=clock)
