"""Tests for volunteer suggestions and assignment."""

from datetime import timedelta

import pytest

from conftest import event_payload, profile_payload, register_and_login


@pytest.fixture()
def beach_cleanup(client, admin_headers, tomorrow):
    response = client.post("/api/events", json=event_payload(tomorrow), headers=admin_headers)
    assert response.status_code == 201
    return response.json()["data"]


def _save_profile(client, account, availability, **overrides):
    response = client.post(
        "/api/profile",
        json=profile_payload(availability, **overrides),
        headers=account["headers"],
    )
    assert response.status_code == 200, response.text


def test_list_volunteers_only_includes_volunteer_accounts(client, admin, volunteer, tomorrow):
    _save_profile(client, volunteer, [tomorrow])
    _save_profile(client, admin, [tomorrow], fullName="Admin Person")

    response = client.get("/api/matching/volunteers", headers=admin["headers"])

    assert response.status_code == 200
    volunteers = response.json()["data"]
    assert [v["userId"] for v in volunteers] == [volunteer["id"]]
    assert volunteers[0]["skills"] == ["Driving", "Teamwork"]
    assert volunteers[0]["availability"] == [tomorrow.isoformat()]


def test_best_match_is_suggested_first(client, admin_headers, volunteer, beach_cleanup, tomorrow):
    _save_profile(client, volunteer, [tomorrow])
    partial = register_and_login(client, "partial@example.com")
    _save_profile(client, partial, [tomorrow + timedelta(days=5)], skills=["Driving"])
    unrelated = register_and_login(client, "unrelated@example.com")
    _save_profile(client, unrelated, [tomorrow + timedelta(days=5)], skills=["Spanish"])

    response = client.get(
        f"/api/matching/suggestions/{beach_cleanup['id']}", headers=admin_headers
    )

    assert response.status_code == 200
    suggestions = response.json()["data"]
    assert [s["userId"] for s in suggestions] == [volunteer["id"], partial["id"]]
    best = suggestions[0]
    assert best["matchScore"] == 100
    assert best["isAvailable"] is True
    assert best["assigned"] is False
    assert suggestions[1]["isAvailable"] is False


def test_suggestions_for_missing_event(client, admin_headers):
    response = client.get("/api/matching/suggestions/999", headers=admin_headers)

    assert response.status_code == 404
    assert response.json()["error"] == "Event not found"


def test_assignment_is_recorded_once(client, admin_headers, volunteer, beach_cleanup, tomorrow):
    _save_profile(client, volunteer, [tomorrow])
    payload = {"volunteerId": volunteer["id"], "eventId": beach_cleanup["id"]}

    first = client.post("/api/matching/assign", json=payload, headers=admin_headers)
    second = client.post("/api/matching/assign", json=payload, headers=admin_headers)

    assert first.status_code == 201
    record = first.json()["data"]
    assert record["status"] == "upcoming"
    assert record["eventName"] == "Beach Cleanup"
    assert record["startTime"] == "09:00:00"
    assert record["endTime"] == "12:00:00"
    assert record["eventDate"] == tomorrow.isoformat()

    assert second.status_code == 409
    assert second.json()["error"] == "Volunteer already assigned to this event"

    history = client.get("/api/history", headers=volunteer["headers"]).json()["data"]
    assert len(history) == 1

    suggestions = client.get(
        f"/api/matching/suggestions/{beach_cleanup['id']}", headers=admin_headers
    ).json()["data"]
    assert suggestions[0]["assigned"] is True


def test_assignment_notifies_volunteer(client, admin_headers, volunteer, beach_cleanup, tomorrow):
    client.post(
        "/api/matching/assign",
        json={"volunteerId": volunteer["id"], "eventId": beach_cleanup["id"]},
        headers=admin_headers,
    )

    notifications = client.get(
        "/api/notifications", headers=volunteer["headers"]
    ).json()["data"]

    assert len(notifications) == 1
    notification = notifications[0]
    assert notification["type"] == "assignment"
    assert notification["eventName"] == "Beach Cleanup"
    assert notification["read"] is False
    long_date = f"{tomorrow:%A}, {tomorrow:%B} {tomorrow.day}, {tomorrow.year}"
    assert notification["message"] == (
        f'You have an event coming up! "Beach Cleanup" on {long_date} '
        "at 9:00 AM at Galveston Beach."
    )


@pytest.mark.parametrize(
    "payload",
    [
        {},
        {"volunteerId": "abc", "eventId": 1},
        {"volunteerId": 1, "eventId": None},
        {"volunteerId": 0, "eventId": 1},
    ],
)
def test_assign_requires_valid_ids(client, admin_headers, payload):
    response = client.post("/api/matching/assign", json=payload, headers=admin_headers)

    assert response.status_code == 400
    assert response.json()["error"] == "Valid Volunteer ID and Event ID are required"


def test_assign_unknown_volunteer_or_event(client, admin_headers, volunteer, beach_cleanup):
    missing_volunteer = client.post(
        "/api/matching/assign",
        json={"volunteerId": 999, "eventId": beach_cleanup["id"]},
        headers=admin_headers,
    )
    missing_event = client.post(
        "/api/matching/assign",
        json={"volunteerId": volunteer["id"], "eventId": 999},
        headers=admin_headers,
    )

    assert missing_volunteer.status_code == 404
    assert missing_volunteer.json()["error"] == "Volunteer not found"
    assert missing_event.status_code == 404
    assert missing_event.json()["error"] == "Event not found"


def test_assign_accepts_numeric_strings(client, admin_headers, volunteer, beach_cleanup):
    response = client.post(
        "/api/matching/assign",
        json={"volunteerId": str(volunteer["id"]), "eventId": str(beach_cleanup["id"])},
        headers=admin_headers,
    )

    assert response.status_code == 201


def test_unique_constraint_rejects_duplicate_when_precheck_misses(
    client, admin_headers, volunteer, beach_cleanup, monkeypatch
):
    from volunteer_api.infrastructure.repositories import HistoryRepository

    # Simulate two requests that both passed the existence check.
    monkeypatch.setattr(HistoryRepository, "exists", lambda self, **kwargs: False)
    payload = {"volunteerId": volunteer["id"], "eventId": beach_cleanup["id"]}

    first = client.post("/api/matching/assign", json=payload, headers=admin_headers)
    second = client.post("/api/matching/assign", json=payload, headers=admin_headers)

    assert first.status_code == 201
    assert second.status_code == 409
    assert second.json()["error"] == "Volunteer already assigned to this event"

    history = client.get("/api/history", headers=volunteer["headers"]).json()["data"]
    notifications = client.get("/api/notifications", headers=volunteer["headers"]).json()["data"]
    assert len(history) == 1
    assert len(notifications) == 1
