"""
Shared fixtures: an in-memory Motor database (mongomock-motor) and a
TestClient wired to it through the get_database dependency.
"""

import os
import uuid

import pytest

os.environ.setdefault("MONGO_URL", "mongodb://localhost:27017")
os.environ.setdefault("DB_NAME", "flightops360_test")

from fastapi.testclient import TestClient  # noqa: E402
from mongomock_motor import AsyncMongoMockClient  # noqa: E402

from database.mongodb import get_database  # noqa: E402
from server import app  # noqa: E402


@pytest.fixture
def mongo_db():
    """A fresh in-memory Motor database per test"""
    return AsyncMongoMockClient()[f"flightops360_test_{uuid.uuid4().hex}"]


@pytest.fixture
def client(mongo_db):
    async def override_get_database():
        return mongo_db

    app.dependency_overrides[get_database] = override_get_database
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def aircraft_payload():
    return {
        "tail_number": "n350fo",
        "model": "Cessna Citation CJ3",
        "is_maintenance_tracked": True,
        "tracked_component_names": ["Airframe", "Engine 1", "Engine 2", "APU", "Landing Gear"],
    }


@pytest.fixture
def trip_payload():
    return {
        "trip_number": "TRP-1001",
        "client_name": "Acme Corp",
        "aircraft_id": "N350FO",
        "legs": [
            {"origin": "KTEB", "destination": "KPBI", "passenger_count": 4},
            {"origin": "KPBI", "destination": "KTEB", "passenger_count": 4},
        ],
    }
