"""Shared wiring for action tests: memory persistence and a canned fetcher."""

from __future__ import annotations

from decimal import Decimal

import pytest

from cmadash.core.config import AppSettings
from cmadash.models.dashboard import Agent, DashboardDocument, Leader
from cmadash.persistence.gateway import PersistenceGateway
from tests.fakes import FakeClock, FakeSheetFetcher, MemoryCacheBackend, MemoryDocumentStore


@pytest.fixture
def settings():
    return AppSettings()


@pytest.fixture
def gateway():
    return PersistenceGateway(MemoryDocumentStore(), MemoryCacheBackend(clock=FakeClock()))


@pytest.fixture
def fetcher():
    return FakeSheetFetcher()


@pytest.fixture
def deps(settings, gateway, fetcher):
    return {"settings": settings, "gateway": gateway, "fetcher": fetcher}


@pytest.fixture
def dashboard(gateway):
    agent = Agent(id="jaycel-alcantara", name="JAYCEL ALCANTARA", um_name="UM A")
    agent.set_fyc_target(25000)
    doc = DashboardDocument(
        leaders=[
            Leader(id="um-a", name="UM A", anp_target=Decimal(1200000), recruits_target=3,
                   anp_nov_forecast=Decimal(100000), anp_dec_forecast=Decimal(50000)),
            Leader(id="um-b", name="UM B"),
        ],
        agents=[
            agent,
            Agent(id="zed", name="ZED", um_name="UM A"),
            Agent(id="amy", name="AMY", um_name="UM B"),
        ],
    )
    gateway.save_dashboard(doc)
    return doc
