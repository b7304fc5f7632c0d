"""Unit tests for RedisCacheBackend using fakeredis."""

from __future__ import annotations

from unittest.mock import patch

import fakeredis
import pytest

from cmadash.core.config import RedisConfig
from cmadash.core.exceptions import CacheError
from cmadash.persistence.redis_backend import RedisCacheBackend


@pytest.fixture
def fake_server():
    return fakeredis.FakeServer()


@pytest.fixture
def backend(fake_server):
    with patch("redis.Redis", return_value=fakeredis.FakeRedis(server=fake_server, decode_responses=True)):
        return RedisCacheBackend(host="localhost", port=6379, db=0)


class TestGet:
    def test_returns_none_on_miss(self, backend):
        assert backend.get("nonexistent") is None

    def test_returns_stored_value(self, backend):
        backend.setex("dashboard", 30, '{"leaders": []}')
        assert backend.get("dashboard") == '{"leaders": []}'


class TestSetex:
    def test_keys_are_prefixed_and_expire(self, backend, fake_server):
        backend.setex("agency-summary", 30, "v")
        raw = fakeredis.FakeRedis(server=fake_server, decode_responses=True)
        assert raw.get("cmadash:agency-summary") == "v"
        assert 0 < raw.ttl("cmadash:agency-summary") <= 30

    def test_overwrites_existing_value(self, backend):
        backend.setex("k", 60, "old")
        backend.setex("k", 60, "new")
        assert backend.get("k") == "new"


class TestDelete:
    def test_removes_existing_key(self, backend):
        backend.setex("del_me", 60, "val")
        backend.delete("del_me")
        assert backend.get("del_me") is None

    def test_noop_on_missing_key(self, backend):
        backend.delete("never_existed")  # should not raise


class TestSharedCache:
    def test_instances_on_one_server_see_each_others_writes(self, fake_server):
        def make_client(**kwargs):
            return fakeredis.FakeRedis(server=fake_server, decode_responses=True)

        with patch("redis.Redis", side_effect=make_client):
            first = RedisCacheBackend()
            second = RedisCacheBackend()
        first.setex("dashboard", 30, "doc")
        assert second.get("dashboard") == "doc"


class TestFromConfig:
    def test_uses_configured_prefix_and_connection(self, fake_server):
        client = fakeredis.FakeRedis(server=fake_server, decode_responses=True)
        config = RedisConfig(enabled=True, host="cache.internal", port=6380, db=2, key_prefix="uat:")
        with patch("redis.Redis", return_value=client) as ctor:
            backend = RedisCacheBackend.from_config(config)
        ctor.assert_called_once_with(
            host="cache.internal", port=6380, db=2, decode_responses=True, socket_timeout=2.0,
        )
        backend.setex("dashboard", 30, "doc")
        assert client.get("uat:dashboard") == "doc"


class TestErrorWrapping:
    def _broken(self) -> RedisCacheBackend:
        b = RedisCacheBackend.__new__(RedisCacheBackend)
        b._prefix = "cmadash:"
        b._client = None  # will cause AttributeError -> CacheError
        return b

    def test_get_wraps_redis_error(self):
        with pytest.raises(CacheError):
            self._broken().get("k")

    def test_setex_wraps_redis_error(self):
        with pytest.raises(CacheError):
            self._broken().setex("k", 1, "v")

    def test_delete_wraps_redis_error(self):
        with pytest.raises(CacheError):
            self._broken().delete("k")
