"""Tests for participation history and notification management."""

import pytest

from conftest import event_payload, register_and_login


@pytest.fixture()
def assignment(client, admin_headers, volunteer, tomorrow):
    event = client.post(
        "/api/events", json=event_payload(tomorrow), headers=admin_headers
    ).json()["data"]
    record = client.post(
        "/api/matching/assign",
        json={"volunteerId": volunteer["id"], "eventId": event["id"]},
        headers=admin_headers,
    ).json()["data"]
    return {"event": event, "record": record}


def _notify(client, admin_headers, user_id, message="Reminder"):
    response = client.post(
        "/api/notifications",
        json={"userId": user_id, "message": message, "type": "reminder"},
        headers=admin_headers,
    )
    assert response.status_code == 201, response.text
    return response.json()["data"]


def test_volunteer_updates_own_history_status(client, volunteer_headers, assignment):
    record_id = assignment["record"]["id"]

    completed = client.put(
        f"/api/history/{record_id}", json={"status": "completed"}, headers=volunteer_headers
    )
    reopened = client.put(
        f"/api/history/{record_id}", json={"status": "upcoming"}, headers=volunteer_headers
    )

    assert completed.status_code == 200
    assert completed.json()["data"]["status"] == "completed"
    assert reopened.json()["data"]["status"] == "upcoming"


def test_history_status_is_validated(client, volunteer_headers, assignment):
    record_id = assignment["record"]["id"]

    missing = client.put(f"/api/history/{record_id}", json={}, headers=volunteer_headers)
    unknown = client.put(
        f"/api/history/{record_id}", json={"status": "paused"}, headers=volunteer_headers
    )

    assert missing.status_code == 400
    assert missing.json()["error"] == "Status is required"
    assert unknown.status_code == 400


def test_other_volunteers_cannot_touch_history(client, assignment, volunteer):
    stranger = register_and_login(client, "stranger@example.com")

    listing = client.get(
        "/api/history", params={"userId": volunteer["id"]}, headers=stranger["headers"]
    )
    update = client.put(
        f"/api/history/{assignment['record']['id']}",
        json={"status": "cancelled"},
        headers=stranger["headers"],
    )

    assert listing.status_code == 403
    assert update.status_code == 403
    assert update.json()["error"] == "You can only access your own resources"


def test_log_participation_without_notification(client, admin_headers, volunteer, tomorrow):
    event = client.post(
        "/api/events", json=event_payload(tomorrow), headers=admin_headers
    ).json()["data"]

    response = client.post(
        "/api/history",
        json={"userId": volunteer["id"], "eventId": event["id"], "status": "completed"},
        headers=admin_headers,
    )
    duplicate = client.post(
        "/api/history",
        json={"userId": volunteer["id"], "eventId": event["id"]},
        headers=admin_headers,
    )

    assert response.status_code == 201
    assert response.json()["data"]["status"] == "completed"
    assert duplicate.status_code == 409
    notifications = client.get("/api/notifications", headers=volunteer["headers"]).json()
    assert notifications["data"] == []


def test_mark_all_read(client, admin_headers, volunteer, assignment):
    _notify(client, admin_headers, volunteer["id"])
    _notify(client, admin_headers, volunteer["id"], message="Another")

    response = client.put("/api/notifications/read-all", headers=volunteer["headers"])

    assert response.status_code == 200
    assert response.json()["data"] == {"updated": 3}
    unread = client.get(
        "/api/notifications", params={"unreadOnly": "true"}, headers=volunteer["headers"]
    ).json()["data"]
    assert unread == []
    repeat = client.put("/api/notifications/read-all", headers=volunteer["headers"])
    assert repeat.json()["data"] == {"updated": 0}


def test_mark_single_notification_read(client, admin_headers, volunteer):
    notification = _notify(client, admin_headers, volunteer["id"])

    response = client.put(
        f"/api/notifications/{notification['id']}/read", headers=volunteer["headers"]
    )

    assert response.status_code == 200
    assert response.json()["data"]["read"] is True


def test_delete_notification_checks_ownership(client, admin_headers, volunteer):
    notification = _notify(client, admin_headers, volunteer["id"])
    stranger = register_and_login(client, "stranger@example.com")

    forbidden = client.delete(
        f"/api/notifications/{notification['id']}", headers=stranger["headers"]
    )
    deleted = client.delete(
        f"/api/notifications/{notification['id']}", headers=volunteer["headers"]
    )
    missing = client.delete(
        f"/api/notifications/{notification['id']}", headers=volunteer["headers"]
    )

    assert forbidden.status_code == 403
    assert deleted.status_code == 200
    assert missing.status_code == 404


def test_create_notification_validates_payload(client, admin_headers, volunteer):
    response = client.post(
        "/api/notifications",
        json={"userId": volunteer["id"], "message": " ", "type": "gossip"},
        headers=admin_headers,
    )

    assert response.status_code == 400
    assert response.json()["errors"] == [
        "Message is required",
        "Type must be one of: assignment, update, reminder, cancellation",
    ]
