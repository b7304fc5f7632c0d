"""Typed load/save of cmadash documents over an IDocumentStore + ICacheBackend."""

from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor
from concurrent.futures import TimeoutError as FuturesTimeout
from typing import TypeVar

from pydantic import BaseModel

from cmadash.core.exceptions import StoreTimeoutError
from cmadash.core.protocols import ICacheBackend, IDocumentStore
from cmadash.core.types import JsonDict
from cmadash.models.dashboard import DashboardDocument
from cmadash.models.goals import StrategicPlanningGoal
from cmadash.models.hierarchy import HierarchyEntry
from cmadash.models.sheets import SheetConfigs
from cmadash.models.summary import AgencySummary
from cmadash.models.users import UserProfile

logger = logging.getLogger(__name__)

M = TypeVar("M", bound=BaseModel)

DATA_TABLE = "cmadash-data"
CONFIG_TABLE = "cmadash-config"
HIERARCHY_TABLE = "cmadash-organizational-hierarchy"
GOALS_TABLE = "cmadash-strategic-planning-goals"
USERS_TABLE = "cmadash-users"

ALL_TABLES = (DATA_TABLE, CONFIG_TABLE, HIERARCHY_TABLE, GOALS_TABLE, USERS_TABLE)

DASHBOARD_KEY = ("DOC#dashboard", "DOC")
SUMMARY_KEY = ("DOC#agency-summary", "DOC")
SHEETS_CONFIG_KEY = ("CONFIG#sheets-config", "CONFIG")
AGENCIES_KEY = ("CONFIG#agencies", "CONFIG")

DASHBOARD_CACHE_KEY = "dashboard"
SUMMARY_CACHE_KEY = "agency-summary"

GOAL_SAVE_TIMEOUT_SECONDS = 15


def agency_pk(agency_name: str) -> str:
    return f"AGENCY#{agency_name}"


def user_pk(uid: str) -> str:
    return f"USER#{uid}"


def _to_item(pk: str, sk: str, model: BaseModel) -> JsonDict:
    return {"PK": pk, "SK": sk, **model.model_dump()}


def _from_item(model: type[M], item: JsonDict) -> M:
    data = {k: v for k, v in item.items() if k not in ("PK", "SK")}
    return model.model_validate(data)


class PersistenceGateway:
    """All reads and writes of persisted cmadash state.

    The dashboard and agency-summary documents are cached for ``cache_ttl``
    seconds. Each save refreshes its own entry; other instances only see the
    write once their entry expires unless the cache backend is shared.
    Whole documents are loaded and saved, so concurrent edits to different
    fields of the same document are last-writer-wins.
    """

    GOAL_SAVE_TIMEOUT = GOAL_SAVE_TIMEOUT_SECONDS

    def __init__(self, store: IDocumentStore, cache: ICacheBackend, cache_ttl: int = 30) -> None:
        self._store = store
        self._cache = cache
        self._cache_ttl = cache_ttl

    @property
    def store(self) -> IDocumentStore:
        return self._store

    # ---- cached documents ----

    def _load_cached(self, model: type[M], cache_key: str, key: tuple[str, str],
                     use_cache: bool) -> M | None:
        if use_cache:
            cached = self._cache.get(cache_key)
            if cached is not None:
                logger.debug("Cache hit for %s", cache_key)
                return model.model_validate_json(cached)

        item = self._store.get_item(DATA_TABLE, *key)
        if item is None:
            return None
        doc = _from_item(model, item)
        self._cache.setex(cache_key, self._cache_ttl, doc.model_dump_json())
        return doc

    def _save_cached(self, doc: BaseModel, cache_key: str, key: tuple[str, str]) -> None:
        self._store.put_item(DATA_TABLE, _to_item(*key, doc))
        self._cache.setex(cache_key, self._cache_ttl, doc.model_dump_json())

    def load_dashboard(self, use_cache: bool = True) -> DashboardDocument | None:
        return self._load_cached(DashboardDocument, DASHBOARD_CACHE_KEY, DASHBOARD_KEY, use_cache)

    def save_dashboard(self, doc: DashboardDocument) -> None:
        self._save_cached(doc, DASHBOARD_CACHE_KEY, DASHBOARD_KEY)
        logger.info("Saved dashboard: %d leaders, %d agents", len(doc.leaders), len(doc.agents))

    def clear_dashboard_cache(self) -> None:
        self._cache.delete(DASHBOARD_CACHE_KEY)

    def load_agency_summary(self, use_cache: bool = True) -> AgencySummary | None:
        return self._load_cached(AgencySummary, SUMMARY_CACHE_KEY, SUMMARY_KEY, use_cache)

    def save_agency_summary(self, summary: AgencySummary) -> None:
        self._save_cached(summary, SUMMARY_CACHE_KEY, SUMMARY_KEY)

    def clear_summary_cache(self) -> None:
        self._cache.delete(SUMMARY_CACHE_KEY)

    def ping(self) -> None:
        """One cheap config-table read; raises StoreUnavailableError when the store is down."""
        self._store.get_item(CONFIG_TABLE, *SHEETS_CONFIG_KEY)

    # ---- config documents ----

    def load_sheet_configs(self) -> SheetConfigs:
        item = self._store.get_item(CONFIG_TABLE, *SHEETS_CONFIG_KEY)
        return _from_item(SheetConfigs, item) if item else SheetConfigs()

    def save_sheet_configs(self, configs: SheetConfigs) -> None:
        self._store.put_item(CONFIG_TABLE, _to_item(*SHEETS_CONFIG_KEY, configs))

    def load_agencies(self) -> list[str] | None:
        """Stored agency list, or None when never saved."""
        item = self._store.get_item(CONFIG_TABLE, *AGENCIES_KEY)
        if item is None:
            return None
        return [str(a) for a in item.get("agencies", [])]

    def save_agencies(self, agencies: list[str]) -> None:
        pk, sk = AGENCIES_KEY
        self._store.put_item(CONFIG_TABLE, {"PK": pk, "SK": sk, "agencies": list(agencies)})

    # ---- hierarchy ----

    def list_hierarchy(self, agency_name: str) -> list[HierarchyEntry]:
        """Entries for an agency ordered by rank code, then name."""
        items = self._store.query_pk(HIERARCHY_TABLE, agency_pk(agency_name))
        entries = [_from_item(HierarchyEntry, i) for i in items]
        return sorted(entries, key=lambda e: (e.rank.value, e.name))

    def save_hierarchy_entry(self, entry: HierarchyEntry) -> str:
        self._store.put_item(
            HIERARCHY_TABLE,
            _to_item(agency_pk(entry.agency_name), f"ENTRY#{entry.doc_id}", entry),
        )
        return entry.doc_id

    def delete_hierarchy_entry(self, entry: HierarchyEntry) -> None:
        self._store.delete_item(HIERARCHY_TABLE, agency_pk(entry.agency_name), f"ENTRY#{entry.doc_id}")

    # ---- goals ----

    def save_goal(self, goal: StrategicPlanningGoal) -> str:
        """Persist a goal submission, giving up after GOAL_SAVE_TIMEOUT seconds.

        Raises:
            StoreTimeoutError: The write did not finish in time. It may still
                land later.
        """
        goal_id = goal.goal_id or goal.make_goal_id()
        goal.goal_id = goal_id
        item = _to_item(agency_pk(goal.agency_name), f"GOAL#{goal_id}", goal)

        pool = ThreadPoolExecutor(max_workers=1)
        try:
            future = pool.submit(self._store.put_item, GOALS_TABLE, item)
            try:
                future.result(timeout=self.GOAL_SAVE_TIMEOUT)
            except FuturesTimeout as exc:
                raise StoreTimeoutError("Goal save", self.GOAL_SAVE_TIMEOUT) from exc
        finally:
            pool.shutdown(wait=False)
        logger.info("Saved goal %s", goal_id)
        return goal_id

    def list_agency_goals(self, agency_name: str) -> list[StrategicPlanningGoal]:
        """Goals for an agency, newest first."""
        items = self._store.query_pk(GOALS_TABLE, agency_pk(agency_name))
        goals = [_from_item(StrategicPlanningGoal, i) for i in items]
        return sorted(goals, key=lambda g: g.submitted_at, reverse=True)

    def list_all_goals(self) -> list[StrategicPlanningGoal]:
        goals = [_from_item(StrategicPlanningGoal, i) for i in self._store.scan(GOALS_TABLE)]
        return sorted(goals, key=lambda g: g.submitted_at, reverse=True)

    def delete_goal(self, goal: StrategicPlanningGoal) -> None:
        self._store.delete_item(GOALS_TABLE, agency_pk(goal.agency_name), f"GOAL#{goal.goal_id}")

    # ---- users ----

    def get_user(self, uid: str) -> UserProfile | None:
        item = self._store.get_item(USERS_TABLE, user_pk(uid), "PROFILE")
        return _from_item(UserProfile, item) if item else None

    def save_user(self, user: UserProfile) -> None:
        self._store.put_item(USERS_TABLE, _to_item(user_pk(user.uid), "PROFILE", user))
