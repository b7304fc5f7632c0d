"""Pluggable persistence backends behind Protocol interfaces."""

from __future__ import annotations

from cmadash.core.config import AppSettings
from cmadash.persistence.dynamodb_backend import DynamoDBDocumentStore
from cmadash.persistence.gateway import PersistenceGateway
from cmadash.persistence.memory_backend import MemoryCacheBackend
from cmadash.persistence.redis_backend import RedisCacheBackend


def create_persistence(settings: AppSettings | None = None) -> PersistenceGateway:
    """Create a wired-up persistence gateway from application settings.

    Redis is used for the document cache only when enabled; otherwise each
    process keeps its own in-memory cache.
    """
    if settings is None:
        settings = AppSettings()

    if settings.redis.enabled:
        cache = RedisCacheBackend.from_config(settings.redis)
    else:
        cache = MemoryCacheBackend()

    store = DynamoDBDocumentStore(
        table_suffix=settings.dynamodb.table_suffix,
        region=settings.dynamodb.region,
        endpoint_url=settings.dynamodb.endpoint_url,
    )

    return PersistenceGateway(store, cache, cache_ttl=settings.cache.ttl_seconds)
