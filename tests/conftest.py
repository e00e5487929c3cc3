# tests/conftest.py
import re

import pytest
from fastapi.testclient import TestClient

from repair_portal.core.config import Settings
from repair_portal.core.database import build_engine, build_session_factory
from repair_portal.main import create_app
from repair_portal.portal.client import PortalClient

UUID_V4_REGEX = re.compile(
    r"^[0-9a-f]{8}-[0-9a-f]{4}-4[0-9a-f]{3}-[89ab][0-9a-f]{3}-[0-9a-f]{12}$", re.IGNORECASE
)


@pytest.fixture
def uuid_v4():
    return UUID_V4_REGEX


@pytest.fixture
def valid_request():
    return {
        "name": "Jan de Vries",
        "address": "Keizersgracht 123, 1015 CJ Amsterdam",
        "issueType": "Plumbing",
        "priority": "High",
        "description": "The kitchen faucet has been leaking for two days.",
    }


@pytest.fixture
def alternate_request():
    return {
        "name": "Maria Jansen",
        "address": "Prinsengracht 456, 1016 HK Amsterdam",
        "issueType": "Electrical",
        "priority": "Urgent",
        "description": "Frequent power outages in the living room circuit.",
    }


@pytest.fixture
def settings():
    return Settings(DATABASE_URL="sqlite://", FRONTEND_ORIGIN="http://localhost:8501")


@pytest.fixture
def client(settings):
    # Fresh app per test: every app owns its own in-memory database
    with TestClient(create_app(settings)) as c:
        yield c


@pytest.fixture
def db():
    engine = build_engine("sqlite://")
    session = build_session_factory(engine)()
    try:
        yield session
    finally:
        session.close()
        engine.dispose()


@pytest.fixture
def portal(client):
    return PortalClient("http://testserver", session=client)


@pytest.fixture
def create_ticket(client, valid_request):
    def _create(**overrides):
        r = client.post("/api/repair-requests", json={**valid_request, **overrides})
        assert r.status_code == 201
        return r.json()["ticketId"]

    return _create


@pytest.fixture
def create_worker(client):
    def _create(name="Erik de Jong", specialization="Electrician"):
        r = client.post("/api/workers", json={"name": name, "specialization": specialization})
        assert r.status_code == 201
        return r.json()["worker"]

    return _create
