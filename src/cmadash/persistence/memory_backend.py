"""In-memory backends: dict-backed store and a TTL cache with an injectable clock."""

from __future__ import annotations

import copy
import time
from typing import Any, Callable


class MemoryDocumentStore:
    """Dict-backed IDocumentStore for tests and local runs."""

    def __init__(self) -> None:
        self._tables: dict[str, dict[tuple[str, str], dict[str, Any]]] = {}

    def _tbl(self, table: str) -> dict[tuple[str, str], dict[str, Any]]:
        return self._tables.setdefault(table, {})

    def get_item(self, table: str, pk: str, sk: str) -> dict[str, Any] | None:
        item = self._tbl(table).get((pk, sk))
        return copy.deepcopy(item) if item is not None else None

    def put_item(self, table: str, item: dict[str, Any]) -> None:
        self._tbl(table)[(item["PK"], item["SK"])] = copy.deepcopy(item)

    def delete_item(self, table: str, pk: str, sk: str) -> None:
        self._tbl(table).pop((pk, sk), None)

    def query_pk(self, table: str, pk: str) -> list[dict[str, Any]]:
        rows = [v for (p, s), v in sorted(self._tbl(table).items()) if p == pk]
        return copy.deepcopy(rows)

    def scan(self, table: str) -> list[dict[str, Any]]:
        return copy.deepcopy([v for _, v in sorted(self._tbl(table).items())])


class MemoryCacheBackend:
    """Per-process ICacheBackend honoring TTLs against ``clock``."""

    def __init__(self, clock: Callable[[], float] = time.monotonic) -> None:
        self._clock = clock
        self._store: dict[str, tuple[float, str]] = {}

    def get(self, key: str) -> str | None:
        entry = self._store.get(key)
        if entry is None:
            return None
        expires_at, value = entry
        if self._clock() >= expires_at:
            del self._store[key]
            return None
        return value

    def setex(self, key: str, ttl: int, value: str) -> None:
        self._store[key] = (self._clock() + ttl, value)

    def delete(self, key: str) -> None:
        self._store.pop(key, None)
