"""cmadash exception hierarchy."""

from __future__ import annotations


class CmaDashError(Exception):
    """Base exception for all cmadash errors."""


class NotFoundError(CmaDashError):
    """Referenced entity is absent from the loaded document."""

    def __init__(self, kind: str, key: str | None = None) -> None:
        self.kind = kind
        self.key = key
        super().__init__(f"{kind} not found" if key is None else f"{kind} not found: {key}")


class SheetFetchError(CmaDashError):
    """Published sheet could not be fetched or was not CSV."""

    def __init__(self, url: str, message: str) -> None:
        self.url = url
        super().__init__(message)


class HierarchyParseError(CmaDashError):
    """Hierarchy import payload could not be parsed at all."""


class StoreUnavailableError(CmaDashError):
    """Document store is not configured or not reachable."""


class StoreTimeoutError(StoreUnavailableError):
    """A store write did not complete within its time box."""

    def __init__(self, operation: str, seconds: float) -> None:
        self.operation = operation
        self.seconds = seconds
        super().__init__(
            f"{operation} timed out after {seconds:g} seconds. "
            "Check network connectivity and store configuration."
        )


class CacheError(CmaDashError):
    """Cache backend operation failed."""
