"""Integration fixtures: a seeded LocalStack DynamoDB behind a real gateway."""

from __future__ import annotations

import os

import boto3
import pytest
from botocore.exceptions import BotoCoreError, ClientError

from cmadash.persistence.dynamodb_backend import DynamoDBDocumentStore
from cmadash.persistence.gateway import PersistenceGateway
from cmadash.persistence.memory_backend import MemoryCacheBackend
from seed_dynamodb import create_tables, seed_agencies, seed_hierarchy

LOCALSTACK_URL = os.environ.get("LOCALSTACK_URL", "http://localhost:4566")
REGION = "us-east-1"
TABLE_SUFFIX = "-inttest"


def _localstack_available() -> bool:
    client = boto3.client("dynamodb", region_name=REGION, endpoint_url=LOCALSTACK_URL)
    try:
        client.list_tables(Limit=1)
    except (BotoCoreError, ClientError):
        return False
    return True


skip_no_localstack = pytest.mark.skipif(
    not _localstack_available(),
    reason=f"LocalStack not reachable at {LOCALSTACK_URL}",
)


@pytest.fixture(scope="session")
def seeded_tables():
    """Create the cmadash tables once per session and load the seed data."""
    ddb = boto3.resource("dynamodb", region_name=REGION, endpoint_url=LOCALSTACK_URL)
    create_tables(ddb, suffix=TABLE_SUFFIX)
    seed_agencies(ddb, suffix=TABLE_SUFFIX)
    seed_hierarchy(ddb, suffix=TABLE_SUFFIX)
    return TABLE_SUFFIX


@pytest.fixture
def gateway(seeded_tables):
    store = DynamoDBDocumentStore(
        table_suffix=seeded_tables,
        region=REGION,
        endpoint_url=LOCALSTACK_URL,
    )
    return PersistenceGateway(store, MemoryCacheBackend())
