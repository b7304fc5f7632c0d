"""Application configuration using pydantic-settings with grouped env prefixes."""

from __future__ import annotations

from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings


class DynamoDBConfig(BaseSettings):
    """DynamoDB document store configuration."""

    model_config = {"env_prefix": "CMADASH_DYNAMO_"}

    table_suffix: str = ""  # "-dev", "-uat", or "" for prod
    region: str = "us-east-1"
    endpoint_url: str | None = None  # LocalStack override


class RedisConfig(BaseSettings):
    """Shared Redis cache configuration. Disabled means per-process memory cache."""

    model_config = {"env_prefix": "CMADASH_REDIS_"}

    enabled: bool = False
    host: str = "localhost"
    port: int = 6379
    db: int = 0
    key_prefix: str = "cmadash:"
    socket_timeout: float | None = 2.0


class CacheConfig(BaseSettings):
    """Document cache configuration."""

    model_config = {"env_prefix": "CMADASH_CACHE_"}

    ttl_seconds: int = 30


class SheetsConfig(BaseSettings):
    """Published spreadsheet (CSV export) fetching."""

    model_config = {"env_prefix": "CMADASH_SHEETS_"}

    fetch_timeout: float = 20.0
    user_agent: str = "cmadash-sheet-sync/0.1"


class AppSettings(BaseSettings):
    """Root application settings aggregating all sub-configs."""

    model_config = {"env_prefix": "CMADASH_"}

    environment: Literal["dev", "uat", "prod"] = "dev"
    log_level: str = "INFO"
    default_agencies: list[str] = Field(
        default_factory=lambda: [
            "CE VISAYAS 1 DIRECT",
            "CEBU-EZ MATUNOG AGENCY",
            "CEBU-MATUNOG AGENCY",
        ]
    )

    dynamodb: DynamoDBConfig = DynamoDBConfig()
    redis: RedisConfig = RedisConfig()
    cache: CacheConfig = CacheConfig()
    sheets: SheetsConfig = SheetsConfig()
