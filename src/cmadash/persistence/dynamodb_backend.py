"""DynamoDB backend implementing IDocumentStore."""

from __future__ import annotations

import logging
from datetime import datetime
from decimal import Decimal
from enum import Enum
from typing import Any

import boto3
from boto3.dynamodb.conditions import Key
from botocore.exceptions import BotoCoreError, ClientError

from cmadash.core.exceptions import StoreUnavailableError

logger = logging.getLogger(__name__)


def _encode_value(v: Any) -> Any:
    """Make a value DynamoDB-safe: floats become Decimal, datetimes ISO strings."""
    if isinstance(v, bool) or v is None:
        return v
    if isinstance(v, float):
        return Decimal(str(v))
    if isinstance(v, datetime):
        return v.isoformat()
    if isinstance(v, Enum):
        return v.value
    if isinstance(v, dict):
        return {k: _encode_value(i) for k, i in v.items()}
    if isinstance(v, (list, tuple)):
        return [_encode_value(i) for i in v]
    return v


def _encode_item(item: dict[str, Any]) -> dict[str, Any]:
    return {k: _encode_value(v) for k, v in item.items() if v is not None}


class DynamoDBDocumentStore:
    """Production IDocumentStore backed by PK/SK DynamoDB tables.

    Numbers come back as ``Decimal``; the models parse them directly.
    """

    def __init__(self, table_suffix: str = "", region: str = "us-east-1",
                 endpoint_url: str | None = None) -> None:
        self._table_suffix = table_suffix
        self._region = region
        self._endpoint_url = endpoint_url
        kwargs: dict = {"region_name": region}
        if endpoint_url:
            kwargs["endpoint_url"] = endpoint_url
        self._ddb = boto3.resource("dynamodb", **kwargs)

    def _table(self, base: str):
        return self._ddb.Table(f"{base}{self._table_suffix}")

    def _fail(self, op: str, table: str, exc: Exception) -> StoreUnavailableError:
        logger.error("DynamoDB %s on %s%s failed: %s", op, table, self._table_suffix, exc)
        return StoreUnavailableError(
            f"DynamoDB {op} failed for table {table}{self._table_suffix!s}: {exc}. "
            "Check AWS credentials, region and that the tables exist "
            "(scripts/seed_dynamodb.py creates them)."
        )

    # ---- IDocumentStore methods ----

    def get_item(self, table: str, pk: str, sk: str) -> dict[str, Any] | None:
        try:
            resp = self._table(table).get_item(Key={"PK": pk, "SK": sk})
        except (ClientError, BotoCoreError) as exc:
            raise self._fail("GetItem", table, exc) from exc
        return resp.get("Item")

    def put_item(self, table: str, item: dict[str, Any]) -> None:
        try:
            self._table(table).put_item(Item=_encode_item(item))
        except (ClientError, BotoCoreError) as exc:
            raise self._fail("PutItem", table, exc) from exc

    def delete_item(self, table: str, pk: str, sk: str) -> None:
        try:
            self._table(table).delete_item(Key={"PK": pk, "SK": sk})
        except (ClientError, BotoCoreError) as exc:
            raise self._fail("DeleteItem", table, exc) from exc

    def query_pk(self, table: str, pk: str) -> list[dict[str, Any]]:
        """All items under a partition key, following pagination."""
        tbl = self._table(table)
        kwargs: dict[str, Any] = {"KeyConditionExpression": Key("PK").eq(pk)}
        items: list[dict[str, Any]] = []
        try:
            while True:
                resp = tbl.query(**kwargs)
                items.extend(resp.get("Items", []))
                if "LastEvaluatedKey" not in resp:
                    return items
                kwargs["ExclusiveStartKey"] = resp["LastEvaluatedKey"]
        except (ClientError, BotoCoreError) as exc:
            raise self._fail("Query", table, exc) from exc

    def scan(self, table: str) -> list[dict[str, Any]]:
        tbl = self._table(table)
        kwargs: dict[str, Any] = {}
        items: list[dict[str, Any]] = []
        try:
            while True:
                resp = tbl.scan(**kwargs)
                items.extend(resp.get("Items", []))
                if "LastEvaluatedKey" not in resp:
                    return items
                kwargs["ExclusiveStartKey"] = resp["LastEvaluatedKey"]
        except (ClientError, BotoCoreError) as exc:
            raise self._fail("Scan", table, exc) from exc
