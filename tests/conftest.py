"""Shared fixtures: a throwaway SQLite database and an authenticated client."""

from __future__ import annotations

import os
import sys
import tempfile
from datetime import timedelta
from pathlib import Path

import pytest

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

TEST_DB_PATH = Path(tempfile.mkdtemp(prefix="volunteer-api-")) / "test.db"
os.environ["DATABASE_URL"] = f"sqlite:///{TEST_DB_PATH}"
os.environ["SECRET_KEY"] = "test-secret-key"
os.environ["PASSWORD_HASH_ROUNDS"] = "1000"
os.environ["ENVIRONMENT"] = "test"
os.environ["ALLOW_ADMIN_REGISTRATION"] = "true"

from volunteer_api.config import reset_settings_cache  # noqa: E402

reset_settings_cache()

from fastapi.testclient import TestClient  # noqa: E402

from volunteer_api.infrastructure import database  # noqa: E402
from volunteer_api.infrastructure import models  # noqa: E402,F401
from volunteer_api.utils import today_in_app_timezone  # noqa: E402

ADMIN_EMAIL = "admin@example.com"
VOLUNTEER_EMAIL = "volunteer@example.com"
PASSWORD = "Secret123!"


@pytest.fixture(autouse=True)
def reset_database():
    """Give every test an empty schema."""

    database.Base.metadata.drop_all(bind=database.engine, checkfirst=True)
    database.Base.metadata.create_all(bind=database.engine)
    yield
    database.Base.metadata.drop_all(bind=database.engine, checkfirst=True)


@pytest.fixture()
def client():
    from main import create_app

    app = create_app()
    with TestClient(app) as test_client:
        yield test_client


def register_and_login(client: TestClient, email: str, role: str = "volunteer") -> dict:
    """Create an account and return its id together with auth headers."""

    response = client.post(
        "/api/auth/register",
        json={"email": email, "password": PASSWORD, "role": role},
    )
    assert response.status_code == 201, response.text
    user_id = response.json()["data"]["id"]

    response = client.post("/api/auth/login", json={"email": email, "password": PASSWORD})
    assert response.status_code == 200, response.text
    token = response.json()["data"]["token"]
    return {"id": user_id, "headers": {"Authorization": f"Bearer {token}"}}


@pytest.fixture()
def admin(client):
    return register_and_login(client, ADMIN_EMAIL, role="admin")


@pytest.fixture()
def volunteer(client):
    return register_and_login(client, VOLUNTEER_EMAIL)


@pytest.fixture()
def admin_headers(admin):
    return admin["headers"]


@pytest.fixture()
def volunteer_headers(volunteer):
    return volunteer["headers"]


@pytest.fixture()
def tomorrow():
    return today_in_app_timezone() + timedelta(days=1)


def event_payload(event_date, **overrides) -> dict:
    payload = {
        "eventName": "Beach Cleanup",
        "eventDescription": "Pick up litter along the shore.",
        "eventLocation": "Galveston Beach",
        "requiredSkills": ["Driving"],
        "urgency": "medium",
        "eventDate": event_date.isoformat(),
        "startTime": "09:00",
        "endTime": "12:00",
    }
    payload.update(overrides)
    return payload


def profile_payload(availability, **overrides) -> dict:
    payload = {
        "fullName": "Jane Volunteer",
        "address1": "123 Main St",
        "city": "Houston",
        "state": "TX",
        "zip": "77001",
        "skills": ["Driving", "Teamwork"],
        "availability": [day.isoformat() for day in availability],
    }
    payload.update(overrides)
    return payload
