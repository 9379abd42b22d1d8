"""Authentication and authorization checks shared by every router."""

from datetime import timedelta

import pytest

from volunteer_api.domain.entities import User
from volunteer_api.infrastructure.security import create_access_token, decode_access_token


@pytest.mark.parametrize(
    ("method", "path"),
    [
        ("get", "/api/events"),
        ("post", "/api/events"),
        ("get", "/api/profile"),
        ("get", "/api/matching/volunteers"),
        ("get", "/api/history"),
        ("get", "/api/notifications"),
    ],
)
def test_missing_token_is_unauthorized(client, method, path):
    response = getattr(client, method)(path)

    assert response.status_code == 401
    assert response.json() == {"ok": False, "error": "Access token required"}


def test_malformed_token_is_forbidden(client):
    response = client.get("/api/events", headers={"Authorization": "Bearer not-a-token"})

    assert response.status_code == 403
    assert response.json()["error"] == "Invalid or expired token"


def test_expired_token_is_forbidden(client, volunteer):
    user = User(id=volunteer["id"], email="volunteer@example.com", password_hash="", role="volunteer")
    token = create_access_token(user, expires_delta=timedelta(seconds=-5))

    response = client.get("/api/events", headers={"Authorization": f"Bearer {token}"})

    assert response.status_code == 403
    assert response.json()["error"] == "Invalid or expired token"


def test_token_carries_identity_claims():
    user = User(id=12, email="someone@example.com", password_hash="", role="admin")

    principal = decode_access_token(create_access_token(user))

    assert principal.user_id == 12
    assert principal.email == "someone@example.com"
    assert principal.is_admin()


def test_token_signed_with_other_secret_is_rejected():
    from jose import jwt

    token = jwt.encode({"sub": "1", "role": "admin"}, "another-secret", algorithm="HS256")

    with pytest.raises(ValueError):
        decode_access_token(token)


@pytest.mark.parametrize(
    ("method", "path"),
    [
        ("post", "/api/events"),
        ("get", "/api/matching/volunteers"),
        ("get", "/api/matching/suggestions/1"),
        ("post", "/api/matching/assign"),
        ("post", "/api/notifications"),
    ],
)
def test_volunteer_cannot_use_admin_routes(client, volunteer_headers, method, path):
    kwargs = {"json": {}} if method == "post" else {}

    response = getattr(client, method)(path, headers=volunteer_headers, **kwargs)

    assert response.status_code == 403
    assert response.json()["error"] == "Admin access required"


def test_owner_check_reads_query_parameter(client, volunteer_headers, admin):
    response = client.get(
        "/api/notifications",
        params={"userId": admin["id"]},
        headers=volunteer_headers,
    )

    assert response.status_code == 403
    assert response.json()["error"] == "You can only access your own resources"


def test_owner_check_reads_json_body(client, volunteer_headers, admin):
    response = client.post(
        "/api/history",
        json={"userId": admin["id"], "eventId": 1},
        headers=volunteer_headers,
    )

    assert response.status_code == 403


def test_admin_may_act_for_other_users(client, admin_headers, volunteer):
    response = client.get(
        "/api/notifications",
        params={"userId": volunteer["id"]},
        headers=admin_headers,
    )

    assert response.status_code == 200
    assert response.json()["data"] == []


def test_invalid_owner_id_is_rejected(client, volunteer_headers):
    response = client.get("/api/history", params={"userId": "abc"}, headers=volunteer_headers)

    assert response.status_code == 400
