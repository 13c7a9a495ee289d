"""Shared test fixtures."""

import pytest
from fastapi.testclient import TestClient

from src.core.city import ButterflyCity
from src.core.event_log import EventLog
from src.core.nudge.system import NudgeSystem
from src.core.villager.registry import VillagerRegistry
from src.main import app
from tests.helpers import FIRST_WINS, FixedRandom


@pytest.fixture()
def event_log() -> EventLog:
    return EventLog()


@pytest.fixture()
def registry() -> VillagerRegistry:
    return VillagerRegistry()


@pytest.fixture()
def nudges(event_log: EventLog) -> NudgeSystem:
    return NudgeSystem(event_log, FixedRandom(FIRST_WINS))


@pytest.fixture()
def city() -> ButterflyCity:
    return ButterflyCity(rng=FixedRandom(FIRST_WINS))


@pytest.fixture()
def client(city: ButterflyCity) -> TestClient:
    """FastAPI TestClient wired to a fresh in-memory city."""
    app.state.city = city
    yield TestClient(app)
    app.state.city = None
