"""Create the cmadash DynamoDB tables and seed the default hierarchy.

Usage:
    python scripts/seed_dynamodb.py --endpoint-url http://localhost:4566
"""

from __future__ import annotations

import argparse
from typing import Any

import boto3

from cmadash.core.config import AppSettings
from cmadash.models.hierarchy_seed import HARDCODED_HIERARCHY
from cmadash.persistence.gateway import AGENCIES_KEY, ALL_TABLES, CONFIG_TABLE, HIERARCHY_TABLE, agency_pk


def create_tables(ddb: Any, suffix: str = "") -> None:
    """Create all cmadash tables. Skips if table already exists."""
    client = ddb.meta.client
    existing = client.list_tables().get("TableNames", [])

    for name in ALL_TABLES:
        table_name = f"{name}{suffix}"
        if table_name in existing:
            print(f"  Table {table_name} already exists, skipping")
            continue
        client.create_table(
            TableName=table_name,
            KeySchema=[
                {"AttributeName": "PK", "KeyType": "HASH"},
                {"AttributeName": "SK", "KeyType": "RANGE"},
            ],
            AttributeDefinitions=[
                {"AttributeName": "PK", "AttributeType": "S"},
                {"AttributeName": "SK", "AttributeType": "S"},
            ],
            BillingMode="PAY_PER_REQUEST",
        )
        print(f"  Created table {table_name}")


def seed_hierarchy(ddb: Any, suffix: str = "") -> int:
    """Write the built-in organizational hierarchy. Returns the entry count."""
    tbl = ddb.Table(f"{HIERARCHY_TABLE}{suffix}")
    with tbl.batch_writer() as batch:
        for entry in HARDCODED_HIERARCHY:
            batch.put_item(Item={
                "PK": agency_pk(entry.agency_name),
                "SK": f"ENTRY#{entry.doc_id}",
                **entry.model_dump(mode="json", exclude_none=True),
            })
    print(f"  Seeded {len(HARDCODED_HIERARCHY)} hierarchy entries")
    return len(HARDCODED_HIERARCHY)


def seed_agencies(ddb: Any, suffix: str = "", agencies: list[str] | None = None) -> None:
    """Store the default agency list unless one is already stored."""
    tbl = ddb.Table(f"{CONFIG_TABLE}{suffix}")
    pk, sk = AGENCIES_KEY
    if "Item" in tbl.get_item(Key={"PK": pk, "SK": sk}):
        print("  Agency list already present, skipping")
        return
    agencies = agencies if agencies is not None else AppSettings().default_agencies
    tbl.put_item(Item={"PK": pk, "SK": sk, "agencies": sorted(agencies)})
    print(f"  Seeded {len(agencies)} agencies")


def main() -> None:
    parser = argparse.ArgumentParser(description="Seed DynamoDB tables for cmadash")
    parser.add_argument("--endpoint-url", default=None, help="DynamoDB endpoint (e.g. http://localhost:4566)")
    parser.add_argument("--table-suffix", default="", help="Table name suffix (e.g. -dev)")
    parser.add_argument("--region", default="us-east-1", help="AWS region")
    parser.add_argument("--skip-hierarchy", action="store_true", help="Only create tables and agencies")
    args = parser.parse_args()

    kwargs: dict[str, Any] = {"region_name": args.region}
    if args.endpoint_url:
        kwargs["endpoint_url"] = args.endpoint_url

    ddb = boto3.resource("dynamodb", **kwargs)

    print("Creating tables...")
    create_tables(ddb, suffix=args.table_suffix)

    print("Seeding data...")
    seed_agencies(ddb, suffix=args.table_suffix)
    if not args.skip_hierarchy:
        seed_hierarchy(ddb, suffix=args.table_suffix)

    print("Done!")


if __name__ == "__main__":
    main()
