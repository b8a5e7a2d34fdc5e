import pytest

PREFERENCES = {
    "theme": "dark",
    "defaultSessionMode": "deepwork",
    "ambientSound": "ocean",
    "ambientVolume": 70,
    "notifications": False,
    "autoStartBreaks": True,
}


def test_defaults_after_register(client, headers) -> None:
    response = client.get("/api/users/me/preferences", headers=headers)
    assert response.status_code == 200
    assert response.json() == {
        "theme": "system",
        "defaultSessionMode": "study",
        "ambientSound": "silence",
        "ambientVolume": 50,
        "notifications": True,
        "autoStartBreaks": True,
    }


def test_replace_preferences(client, headers) -> None:
    response = client.put("/api/users/me/preferences", json=PREFERENCES, headers=headers)
    assert response.status_code == 200
    assert response.json() == PREFERENCES
    assert client.get("/api/users/me/preferences", headers=headers).json() == PREFERENCES


@pytest.mark.parametrize("volume", [0, 100])
def test_volume_bounds_accepted(client, headers, volume) -> None:
    response = client.put(
        "/api/users/me/preferences", json={**PREFERENCES, "ambientVolume": volume}, headers=headers
    )
    assert response.status_code == 200
    assert response.json()["ambientVolume"] == volume


@pytest.mark.parametrize("volume", [-1, 101, "50", 50.5])
def test_volume_out_of_range_rejected(client, headers, volume) -> None:
    response = client.put(
        "/api/users/me/preferences", json={**PREFERENCES, "ambientVolume": volume}, headers=headers
    )
    assert response.status_code == 400
    assert response.json()["message"].startswith("ambientVolume")


@pytest.mark.parametrize("fields", [
    {"theme": "blue"},
    {"defaultSessionMode": "nap"},
    {"ambientSound": "thunder"},
    {"notifications": "yes"},
])
def test_invalid_values_rejected(client, headers, fields) -> None:
    response = client.put("/api/users/me/preferences", json={**PREFERENCES, **fields}, headers=headers)
    assert response.status_code == 400
    assert response.json()["error"] == "VALIDATION_ERROR"


def test_partial_update_rejected(client, headers) -> None:
    response = client.put("/api/users/me/preferences", json={"theme": "light"}, headers=headers)
    assert response.status_code == 400
    # 기존 값 유지
    assert client.get("/api/users/me/preferences", headers=headers).json()["theme"] == "system"


def test_requires_auth(client) -> None:
    assert client.get("/api/users/me/preferences").status_code == 401
    assert client.put("/api/users/me/preferences", json=PREFERENCES).status_code == 401


def test_preferences_are_per_user(client, headers, other_headers) -> None:
    client.put("/api/users/me/preferences", json=PREFERENCES, headers=headers)
    assert client.get("/api/users/me/preferences", headers=other_headers).json()["theme"] == "system"
