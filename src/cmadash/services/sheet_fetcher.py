"""HTTP fetcher for published spreadsheet CSV exports."""

from __future__ import annotations

import logging

import requests

from cmadash.core.config import SheetsConfig
from cmadash.core.exceptions import SheetFetchError

logger = logging.getLogger(__name__)

_PUBLISH_HINTS = (
    "Make sure:\n"
    "1. The sheet is published to web (File > Share > Publish to web)\n"
    "2. CSV format is selected\n"
    "3. The URL is correct"
)


class SheetFetcher:
    """ISheetFetcher over a requests session. Pass ``session`` to stub the network in tests."""

    def __init__(self, config: SheetsConfig | None = None,
                 session: requests.Session | None = None) -> None:
        self._config = config or SheetsConfig()
        self._session = session or requests.Session()
        self._session.headers.update({"Accept": "text/csv", "User-Agent": self._config.user_agent})

    def fetch_text(self, url: str) -> str:
        try:
            resp = self._session.get(url, timeout=self._config.fetch_timeout, allow_redirects=True)
        except requests.exceptions.RequestException as exc:
            raise SheetFetchError(
                url,
                f"Failed to access the sheet: {exc}\n\nCommon issues:\n"
                "1. Sheet not published to web\n2. Invalid URL\n3. Network connectivity issues",
            ) from exc

        if not resp.ok:
            raise SheetFetchError(
                url, f"Cannot access the sheet. HTTP {resp.status_code}: {resp.reason}\n\n{_PUBLISH_HINTS}",
            )

        # Published exports often omit the charset; decode as UTF-8 and drop any BOM.
        text = resp.content.decode("utf-8-sig", errors="replace")
        if not text.strip():
            raise SheetFetchError(
                url,
                "The sheet appears to be empty or not accessible. "
                "Make sure the sheet is published and contains data.",
            )
        logger.debug("Fetched %d bytes from %s", len(resp.content), url)
        return text

    def close(self) -> None:
        self._session.close()
