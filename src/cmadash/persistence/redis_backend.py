"""Redis cache backend implementing ICacheBackend."""

from __future__ import annotations

import logging
from typing import Callable, TypeVar

import redis

from cmadash.core.config import RedisConfig
from cmadash.core.exceptions import CacheError

logger = logging.getLogger(__name__)

T = TypeVar("T")


class RedisCacheBackend:
    """Shared document cache for every API process pointed at one Redis.

    Keys are namespaced with ``key_prefix`` so the cache can share a
    database with other applications.
    """

    def __init__(self, host: str = "localhost", port: int = 6379, db: int = 0,
                 key_prefix: str = "cmadash:", socket_timeout: float | None = 2.0) -> None:
        self._prefix = key_prefix
        self._client = redis.Redis(
            host=host, port=port, db=db, decode_responses=True, socket_timeout=socket_timeout,
        )
        logger.info("Redis document cache at %s:%d/%d (prefix %r)", host, port, db, key_prefix)

    @classmethod
    def from_config(cls, config: RedisConfig) -> RedisCacheBackend:
        return cls(
            host=config.host,
            port=config.port,
            db=config.db,
            key_prefix=config.key_prefix,
            socket_timeout=config.socket_timeout,
        )

    def _run(self, op: str, key: str, fn: Callable[[str], T]) -> T:
        try:
            return fn(self._prefix + key)
        except Exception as exc:
            raise CacheError(f"Redis {op} failed for key={key!r}: {exc}") from exc

    def get(self, key: str) -> str | None:
        return self._run("GET", key, lambda k: self._client.get(k))

    def setex(self, key: str, ttl: int, value: str) -> None:
        self._run("SETEX", key, lambda k: self._client.setex(k, ttl, value))

    def delete(self, key: str) -> None:
        self._run("DELETE", key, lambda k: self._client.delete(k))
