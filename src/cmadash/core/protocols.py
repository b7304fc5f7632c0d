"""Protocol interfaces for cmadash abstractions.

Inter-layer communication uses these Protocols: structural typing,
no inheritance required, easy to test with isinstance().
"""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable


# ---------------------------------------------------------------------------
# Persistence: Document Store
# ---------------------------------------------------------------------------

@runtime_checkable
class IDocumentStore(Protocol):
    """PK/SK keyed document store (DynamoDB or in-memory)."""

    def get_item(self, table: str, pk: str, sk: str) -> dict[str, Any] | None: ...

    def put_item(self, table: str, item: dict[str, Any]) -> None: ...

    def delete_item(self, table: str, pk: str, sk: str) -> None: ...

    def query_pk(self, table: str, pk: str) -> list[dict[str, Any]]: ...

    def scan(self, table: str) -> list[dict[str, Any]]: ...


# ---------------------------------------------------------------------------
# Persistence: Cache Backend
# ---------------------------------------------------------------------------

@runtime_checkable
class ICacheBackend(Protocol):
    """Redis-compatible cache interface."""

    def get(self, key: str) -> str | None: ...

    def setex(self, key: str, ttl: int, value: str) -> None: ...

    def delete(self, key: str) -> None: ...


# ---------------------------------------------------------------------------
# Sheet Fetcher
# ---------------------------------------------------------------------------

@runtime_checkable
class ISheetFetcher(Protocol):
    """Fetches the raw text of a published spreadsheet export."""

    def fetch_text(self, url: str) -> str: ...
