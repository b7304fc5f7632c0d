"""Shared test doubles: re-exported memory backends plus a canned sheet fetcher."""

from __future__ import annotations

from cmadash.core.exceptions import SheetFetchError
from cmadash.persistence.memory_backend import MemoryCacheBackend, MemoryDocumentStore


class FakeClock:
    """Manually advanced clock for MemoryCacheBackend."""

    def __init__(self, start: float = 1000.0) -> None:
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


class FakeSheetFetcher:
    """ISheetFetcher serving canned CSV text per URL; unknown URLs fail."""

    def __init__(self, pages: dict[str, str] | None = None) -> None:
        self.pages = dict(pages or {})
        self.requested: list[str] = []

    def fetch_text(self, url: str) -> str:
        self.requested.append(url)
        if url not in self.pages:
            raise SheetFetchError(url, "Cannot access the sheet. HTTP 404: Not Found")
        return self.pages[url]


__all__ = ["FakeClock", "FakeSheetFetcher", "MemoryCacheBackend", "MemoryDocumentStore"]
