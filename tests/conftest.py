"""
Shared fixtures: every test gets its own storage file and seed document.
"""

import json

import pytest
from fastapi.testclient import TestClient

from logic.session import SessionGate
from logic.storage import LocalStorage
from logic.store import LocationStore

ADMIN_PASSWORD = "strongjasper"

SEED = {
    "locations": [
        {
            "id": 1,
            "position": [44.05, -121.31],
            "name": "Cafe",
            "description": "Espresso and pastries",
            "category": ["Food"],
            "emoji": ["☕"],
        },
        {
            "id": 2,
            "position": [44.06, -121.32],
            "name": "Bar",
            "description": "Local taps",
            "category": ["Beverages"],
            "emoji": ["🍺"],
        },
        {
            "id": 3,
            "position": [44.07, -121.33],
            "name": "Pilot Butte",
            "description": "Summit hike with a view of the bar district",
            "category": ["Activities"],
            "emoji": ["⛰️"],
        },
    ]
}


@pytest.fixture
def seed_path(tmp_path):
    path = tmp_path / "locations.json"
    path.write_text(json.dumps(SEED, ensure_ascii=False), encoding="utf-8")
    return str(path)


@pytest.fixture
def storage(tmp_path):
    return LocalStorage(str(tmp_path / "data" / "storage.json"))


@pytest.fixture
def store(storage, seed_path, tmp_path):
    return LocationStore(storage, seed_path, export_dir=str(tmp_path / "exports"))


@pytest.fixture
def gate(storage):
    return SessionGate(ADMIN_PASSWORD, "test-secret", storage)


@pytest.fixture
def client(store, gate):
    from main import app

    store.load(authenticated=gate.is_admin)
    app.state.store = store
    app.state.gate = gate
    return TestClient(app)


@pytest.fixture
def admin_client(client):
    response = client.post("/api/session/login", json={"password": ADMIN_PASSWORD})
    assert response.status_code == 200
    return client
