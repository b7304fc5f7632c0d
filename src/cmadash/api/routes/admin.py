"""Admin endpoints for sheet sources, sync, hierarchy, agencies and users."""

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends
from pydantic import BaseModel

from cmadash.actions.agencies import AgencyActions
from cmadash.actions.hierarchy import HierarchyActions
from cmadash.actions.sheets import SheetActions
from cmadash.actions.users import UserActions
from cmadash.api.deps import agency_actions, hierarchy_actions, sheet_actions, user_actions
from cmadash.models.hierarchy import HierarchyRow
from cmadash.models.results import ActionResult, BatchResult, SyncResult
from cmadash.models.sheets import SheetType
from cmadash.models.users import UserProfile

router = APIRouter(tags=["admin"])

Sheets = Annotated[SheetActions, Depends(sheet_actions)]
Hierarchy = Annotated[HierarchyActions, Depends(hierarchy_actions)]
Agencies = Annotated[AgencyActions, Depends(agency_actions)]
Users = Annotated[UserActions, Depends(user_actions)]


class NewSheet(BaseModel):
    name: str
    csv_url: str


class CsvPayload(BaseModel):
    text: str


class HierarchyImport(BaseModel):
    agency_name: str
    rows: list[HierarchyRow]


class AgencyName(BaseModel):
    name: str


# ---------- sheets ----------

@router.get("/sheets")
def get_sheet_configs(actions: Sheets) -> ActionResult:
    return actions.get_sheet_configs()


@router.put("/sheets/{sheet_type}")
def add_sheet_config(sheet_type: SheetType, body: NewSheet, actions: Sheets) -> ActionResult:
    return actions.add_sheet_config(sheet_type, body.name, body.csv_url)


@router.delete("/sheets/{sheet_type}")
def remove_sheet_config(sheet_type: SheetType, actions: Sheets) -> ActionResult:
    return actions.remove_sheet_config(sheet_type)


@router.post("/sync")
def sync_all_sheets(actions: Sheets) -> SyncResult:
    return actions.sync_all_sheets()


# ---------- hierarchy ----------

@router.post("/hierarchy/parse")
def parse_import(body: CsvPayload, actions: Hierarchy) -> ActionResult:
    return actions.parse_import(body.text)


@router.post("/hierarchy/import")
def import_hierarchy(body: HierarchyImport, actions: Hierarchy) -> BatchResult:
    return actions.import_hierarchy(body.agency_name, body.rows)


@router.post("/hierarchy/initialize")
def initialize_hardcoded_hierarchy(actions: Hierarchy) -> BatchResult:
    return actions.initialize_hardcoded_hierarchy()


@router.get("/hierarchy/{agency_name}")
def get_hierarchy(agency_name: str, actions: Hierarchy) -> ActionResult:
    return actions.get_hierarchy(agency_name)


@router.get("/hierarchy/{agency_name}/units")
def get_units(agency_name: str, actions: Hierarchy) -> ActionResult:
    return actions.get_units(agency_name)


@router.get("/hierarchy/{agency_name}/units/{unit_manager}")
def get_people_in_unit(agency_name: str, unit_manager: str, actions: Hierarchy) -> ActionResult:
    return actions.get_people_in_unit(unit_manager, agency_name)


@router.delete("/hierarchy/{agency_name}")
def clear_hierarchy_for_agency(agency_name: str, actions: Hierarchy) -> ActionResult:
    return actions.clear_hierarchy_for_agency(agency_name)


# ---------- agencies ----------

@router.get("/agencies")
def get_agencies(actions: Agencies) -> ActionResult:
    return actions.get_agencies()


@router.post("/agencies")
def add_agency(body: AgencyName, actions: Agencies) -> ActionResult:
    return actions.add_agency(body.name)


@router.put("/agencies/{agency_name}")
def rename_agency(agency_name: str, body: AgencyName, actions: Agencies) -> ActionResult:
    return actions.rename_agency(agency_name, body.name)


@router.delete("/agencies/{agency_name}")
def remove_agency(agency_name: str, actions: Agencies) -> ActionResult:
    return actions.remove_agency(agency_name)


# ---------- users ----------

@router.get("/users/{uid}")
def get_user(uid: str, actions: Users) -> ActionResult:
    return actions.get_user(uid)


@router.put("/users/{uid}")
def save_user(uid: str, body: UserProfile, actions: Users) -> ActionResult:
    body.uid = uid
    return actions.save_user(body)
