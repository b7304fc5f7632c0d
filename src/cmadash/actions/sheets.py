"""Sheet source configuration and the full sheet sync."""

from __future__ import annotations

import logging
import time
from datetime import datetime, timezone

from cmadash.actions.base import BaseActions, action
from cmadash.core.exceptions import CmaDashError, SheetFetchError
from cmadash.core.protocols import ISheetFetcher
from cmadash.models.dashboard import DashboardDocument
from cmadash.models.results import ActionResult, SyncResult, SyncStats
from cmadash.models.sheets import SheetConfig, SheetType
from cmadash.services.agency_summary import calculate_agency_summary
from cmadash.services.comparison import find_orphan_units
from cmadash.services.sheets import ingest_agents, ingest_leaders, is_published_csv_url

logger = logging.getLogger(__name__)

INVALID_URL_MESSAGE = (
    "Invalid Google Sheets CSV URL. Must be a published CSV export URL.\n\n"
    "Valid formats:\n"
    "- https://docs.google.com/spreadsheets/d/SHEET_ID/export?format=csv&gid=0\n"
    "- https://docs.google.com/spreadsheets/d/SHEET_ID/pub?output=csv\n"
    "- https://docs.google.com/spreadsheets/d/SHEET_ID/gviz/tq?tqx=out:csv&gid=0"
)

LEADERS_REQUIRED_MESSAGE = (
    "Leaders sheet is required to calculate dashboard metrics. "
    "Please add a Leaders sheet in Settings."
)


def _no_leaders_message(headers: list[str]) -> str:
    msg = (
        "Leaders sheet returned 0 records.\n\n"
        "Please check:\n"
        "1. Sheet is published to web as CSV\n"
        "2. URL is correct\n"
        "3. Sheet contains data\n"
        "4. Column headers match expected names\n\n"
        "Expected column names:\n"
        '- Leader Name: "UM Name" or "Leader Name" or "AGENT NAME"\n'
        '- ANP: "ANP_MTD" or "ANP MTD" or "ANP"\n'
        '- Cases: "CASECNT_MTD" or "CASECNT MTD" or "Cases"\n'
    )
    if headers:
        more = "..." if len(headers) > 10 else ""
        msg += f"\n\nLeaders sheet headers found: {', '.join(headers[:10])}{more}"
    return msg


class SheetActions(BaseActions):

    def _require_fetcher(self) -> ISheetFetcher:
        if self._fetcher is None:
            raise CmaDashError("Sheet fetcher is not configured")
        return self._fetcher

    # ---- configuration ----

    @action()
    def get_sheet_configs(self) -> ActionResult:
        return ActionResult.ok(self._gateway.load_sheet_configs())

    @action()
    def add_sheet_config(self, sheet_type: SheetType | str, name: str, csv_url: str) -> ActionResult:
        """Validate the URL, prove it is reachable, then store it for ``sheet_type``."""
        sheet_type = SheetType(sheet_type)
        if not is_published_csv_url(csv_url):
            return ActionResult.fail(INVALID_URL_MESSAGE)
        self._require_fetcher().fetch_text(csv_url)

        config = SheetConfig(
            id=f"{sheet_type.value}-{int(time.time() * 1000)}",
            type=sheet_type,
            name=name,
            csv_url=csv_url,
            is_active=True,
            last_updated=datetime.now(timezone.utc),
        )
        configs = self._gateway.load_sheet_configs()
        configs.set(sheet_type, config)
        self._gateway.save_sheet_configs(configs)
        logger.info("Configured %s sheet %r", sheet_type.value, name)
        return ActionResult.ok(config)

    @action()
    def remove_sheet_config(self, sheet_type: SheetType | str) -> ActionResult:
        sheet_type = SheetType(sheet_type)
        configs = self._gateway.load_sheet_configs()
        configs.set(sheet_type, None)
        self._gateway.save_sheet_configs(configs)
        return ActionResult.ok()

    # ---- sync ----

    @action(SyncResult)
    def sync_all_sheets(self) -> SyncResult:
        """Reload leaders and agents from the configured sheets.

        Leaders replace the stored collection wholesale. Admin-set agency
        targets carry over, and the agency summary is recomputed and merged
        around any overridden fields.
        """
        fetcher = self._require_fetcher()
        configs = self._gateway.load_sheet_configs()
        leaders_cfg = configs.leaders if configs.leaders and configs.leaders.is_active else None
        agents_cfg = configs.agents if configs.agents and configs.agents.is_active else None
        if leaders_cfg is None:
            return SyncResult(success=False, error=LEADERS_REQUIRED_MESSAGE)

        warnings: list[str] = []
        errors: list[str] = []

        try:
            leaders_ingest = ingest_leaders(fetcher.fetch_text(leaders_cfg.csv_url))
        except SheetFetchError as exc:
            return SyncResult(success=False, error=f"Failed to load Leaders sheet: {exc}")
        leaders = leaders_ingest.leaders
        if not leaders:
            return SyncResult(
                success=False,
                error=_no_leaders_message(leaders_ingest.headers),
                leader_headers=leaders_ingest.headers,
            )

        agents = []
        if agents_cfg is not None:
            try:
                agents_ingest = ingest_agents(fetcher.fetch_text(agents_cfg.csv_url))
                agents = agents_ingest.agents
                if not agents:
                    msg = "Agents sheet returned 0 records. FYP and FYC will be calculated from Leaders data only."
                    if agents_ingest.headers:
                        msg += f"\nHeaders found: {', '.join(agents_ingest.headers[:8])}"
                        msg += '\nExpected: "AGENT NAME" or "Agent Name" in first few columns.'
                    warnings.append(msg)
            except SheetFetchError as exc:
                warnings.append(f"Agents sheet could not be loaded: {exc}")

        for unit in find_orphan_units(leaders, agents):
            warnings.append(f"Agents reference unit manager {unit!r}, which is not in the Leaders sheet")

        previous = self._gateway.load_dashboard(use_cache=False)
        previous_summary = self._gateway.load_agency_summary(use_cache=False)
        agency_name = leaders_ingest.agency_name or (previous_summary.agency_name if previous_summary else "")
        computed = calculate_agency_summary(leaders, agents, agency_name)

        self._gateway.clear_dashboard_cache()
        self._gateway.clear_summary_cache()

        try:
            self._gateway.save_dashboard(DashboardDocument(
                leaders=leaders,
                agents=agents,
                agency_anp_target=previous.agency_anp_target if previous else 0,
                agency_recruits_target=previous.agency_recruits_target if previous else 0,
            ))
        except CmaDashError as exc:
            errors.append(f"Failed to save data: {exc}")

        try:
            merged = previous_summary.merged_with(computed) if previous_summary else computed
            self._gateway.save_agency_summary(merged)
        except CmaDashError as exc:
            errors.append(f"Failed to save agency summary: {exc}")

        if errors:
            return SyncResult(
                success=False,
                error="Data loaded but failed to save:\n" + "\n".join(errors),
                warnings=warnings,
            )

        logger.info("Sheet sync complete: %d leaders, %d agents, %d warnings",
                    len(leaders), len(agents), len(warnings))
        return SyncResult(
            success=True,
            stats=SyncStats(leaders_count=len(leaders), agents_count=len(agents), agency_summary=True),
            warnings=warnings,
            leader_headers=leaders_ingest.headers,
        )
