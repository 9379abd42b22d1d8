"""Tests for registration, login and the current user endpoint."""

import pytest

from conftest import PASSWORD, register_and_login


def test_register_normalizes_email_and_defaults_role(client):
    response = client.post(
        "/api/auth/register",
        json={"email": "  New.User@Example.COM ", "password": PASSWORD},
    )

    assert response.status_code == 201
    body = response.json()
    assert body["ok"] is True
    assert body["data"]["email"] == "new.user@example.com"
    assert body["data"]["role"] == "volunteer"
    assert "passwordHash" not in body["data"]


def test_register_unknown_role_falls_back_to_volunteer(client):
    response = client.post(
        "/api/auth/register",
        json={"email": "someone@example.com", "password": PASSWORD, "role": "superuser"},
    )

    assert response.status_code == 201
    assert response.json()["data"]["role"] == "volunteer"


def test_register_reports_every_invalid_field(client):
    response = client.post("/api/auth/register", json={"email": "not-an-email", "password": "short"})

    assert response.status_code == 400
    body = response.json()
    assert body["ok"] is False
    assert body["errors"] == [
        "Invalid email format",
        "Password must be between 8 and 128 characters",
    ]


@pytest.mark.parametrize(
    ("length", "expected_status"),
    [(7, 400), (8, 201), (128, 201), (129, 400)],
)
def test_register_password_length_boundaries(client, length, expected_status):
    response = client.post(
        "/api/auth/register",
        json={"email": f"len{length}@example.com", "password": "x" * length},
    )

    assert response.status_code == expected_status
    if expected_status == 400:
        assert response.json()["errors"] == [
            "Password must be between 8 and 128 characters",
        ]


def test_register_duplicate_email_conflicts(client):
    payload = {"email": "dup@example.com", "password": PASSWORD}
    assert client.post("/api/auth/register", json=payload).status_code == 201

    response = client.post(
        "/api/auth/register",
        json={"email": "DUP@example.com", "password": PASSWORD},
    )

    assert response.status_code == 409
    assert response.json() == {"ok": False, "error": "Email already registered"}


def test_login_returns_token_and_user(client):
    client.post("/api/auth/register", json={"email": "login@example.com", "password": PASSWORD})

    response = client.post(
        "/api/auth/login",
        json={"email": "LOGIN@example.com", "password": PASSWORD},
    )

    assert response.status_code == 200
    data = response.json()["data"]
    assert data["token"]
    assert data["user"]["email"] == "login@example.com"
    assert data["user"]["role"] == "volunteer"


def test_login_rejects_wrong_password_and_unknown_email(client):
    client.post("/api/auth/register", json={"email": "login@example.com", "password": PASSWORD})

    wrong_password = client.post(
        "/api/auth/login", json={"email": "login@example.com", "password": "Wrong1234"}
    )
    unknown = client.post(
        "/api/auth/login", json={"email": "ghost@example.com", "password": PASSWORD}
    )

    for response in (wrong_password, unknown):
        assert response.status_code == 401
        assert response.json()["error"] == "Invalid credentials"


def test_me_returns_current_user(client):
    account = register_and_login(client, "me@example.com", role="admin")

    response = client.get("/api/auth/me", headers=account["headers"])

    assert response.status_code == 200
    data = response.json()["data"]
    assert data["id"] == account["id"]
    assert data["role"] == "admin"
    assert data["createdAt"]


def test_health_is_public(client):
    response = client.get("/health")

    assert response.status_code == 200
    assert response.json() == {"ok": True, "data": {"status": "ok"}}
