"""Tests for saving and reading the caller's profile."""

from datetime import timedelta

from conftest import profile_payload


def test_profile_is_empty_until_saved(client, volunteer_headers):
    response = client.get("/api/profile", headers=volunteer_headers)

    assert response.status_code == 200
    assert response.json()["data"] is None


def test_profile_round_trip(client, volunteer, tomorrow):
    later = tomorrow + timedelta(days=4)
    payload = profile_payload(
        [later, tomorrow, later],
        skills=["English", "Driving", "English"],
        address2="   ",
        state="tx",
    )

    saved = client.post("/api/profile", json=payload, headers=volunteer["headers"])
    fetched = client.get("/api/profile", headers=volunteer["headers"])

    assert saved.status_code == 200
    profile = fetched.json()["data"]
    assert profile["userId"] == volunteer["id"]
    assert set(profile["skills"]) == {"Driving", "English"}
    assert profile["availability"] == [tomorrow.isoformat(), later.isoformat()]
    assert profile["state"] == "TX"
    assert profile["address2"] is None


def test_profile_save_replaces_every_field(client, volunteer_headers, tomorrow):
    client.post(
        "/api/profile",
        json=profile_payload([tomorrow], preferences="Weekends"),
        headers=volunteer_headers,
    )

    client.post(
        "/api/profile",
        json=profile_payload([tomorrow], skills="Spanish"),
        headers=volunteer_headers,
    )

    profile = client.get("/api/profile", headers=volunteer_headers).json()["data"]
    assert profile["skills"] == ["Spanish"]
    assert profile["preferences"] is None


def test_profile_validation_collects_every_error(client, volunteer_headers):
    payload = {
        "fullName": "",
        "address1": "1 Main St",
        "city": "Houston",
        "state": "ZZ",
        "zip": "1234",
        "skills": [],
        "availability": [],
    }

    response = client.post("/api/profile", json=payload, headers=volunteer_headers)

    assert response.status_code == 400
    assert response.json()["errors"] == [
        "Full name is required",
        "State must be a valid 2-letter US state code",
        "Zip code must be 5 or 9 digits",
        "At least one skill must be selected.",
        "At least one availability date is required",
    ]
