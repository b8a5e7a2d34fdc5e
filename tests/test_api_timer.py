import pytest

from conftest import bearer

STATE = {
    "isActive": True,
    "isPaused": False,
    "mode": "study",
    "phase": "work",
    "timeRemaining": 1500,
    "totalElapsed": 1500,
    "currentCycle": 1,
}


def _save(client, headers=None, **fields):
    response = client.post("/api/timer/state", json={**STATE, **fields}, headers=headers or {})
    assert response.status_code == 200, response.text
    return response.json()


def test_no_state_yet(client) -> None:
    response = client.get("/api/timer/state")
    assert response.status_code == 404
    assert response.json()["error"] == "NOT_FOUND"


def test_save_and_get(client, headers) -> None:
    assert _save(client, headers) == STATE
    response = client.get("/api/timer/state", headers=headers)
    assert response.status_code == 200
    assert response.json() == STATE


def test_save_replaces_previous_state(client) -> None:
    _save(client)
    _save(client, timeRemaining=900, currentCycle=3)
    body = client.get("/api/timer/state").json()
    assert body["timeRemaining"] == 900
    assert body["currentCycle"] == 3


@pytest.mark.parametrize("fields, field_name", [
    ({"mode": "nap"}, "mode"),
    ({"phase": "rest"}, "phase"),
    ({"timeRemaining": -1}, "timeRemaining"),
    ({"totalElapsed": 1.5}, "totalElapsed"),
    ({"currentCycle": 0}, "currentCycle"),
    ({"isActive": "true"}, "isActive"),
])
def test_invalid_state_rejected(client, fields, field_name) -> None:
    response = client.post("/api/timer/state", json={**STATE, **fields})
    assert response.status_code == 400
    body = response.json()
    assert body["error"] == "VALIDATION_ERROR"
    assert body["message"].startswith(field_name)


def test_missing_field_rejected(client) -> None:
    payload = {k: v for k, v in STATE.items() if k != "phase"}
    response = client.post("/api/timer/state", json=payload)
    assert response.status_code == 400
    assert response.json()["message"].startswith("phase")


def test_clear_is_idempotent(client, headers) -> None:
    _save(client, headers)
    assert client.delete("/api/timer/state", headers=headers).status_code == 204
    assert client.delete("/api/timer/state", headers=headers).status_code == 204
    assert client.get("/api/timer/state", headers=headers).status_code == 404


def test_guests_are_separated(client) -> None:
    _save(client, {"X-Guest-Id": "device-a"}, mode="zen")
    assert client.get("/api/timer/state", headers={"X-Guest-Id": "device-b"}).status_code == 404
    assert client.get("/api/timer/state").status_code == 404
    assert client.get("/api/timer/state", headers={"X-Guest-Id": "device-a"}).json()["mode"] == "zen"


def test_user_and_guest_are_separated(client, headers, other_headers) -> None:
    _save(client, headers, mode="deepwork")
    assert client.get("/api/timer/state").status_code == 404
    assert client.get("/api/timer/state", headers=other_headers).status_code == 404


def test_invalid_token_rejected(client) -> None:
    response = client.get("/api/timer/state", headers=bearer("bogus"))
    assert response.status_code == 401


def test_pause_and_resume(client) -> None:
    _save(client)
    paused = client.post("/api/timer/state/pause")
    assert paused.status_code == 200
    assert paused.json()["isActive"] is False
    assert paused.json()["isPaused"] is True

    resumed = client.post("/api/timer/state/resume").json()
    assert resumed["isActive"] is True
    assert resumed["isPaused"] is False
    assert client.get("/api/timer/state").json() == resumed


def test_next_phase_and_reset(client) -> None:
    _save(client, timeRemaining=0, totalElapsed=3000)

    on_break = client.post("/api/timer/state/next-phase").json()
    assert on_break["phase"] == "break"
    assert on_break["timeRemaining"] == 600
    assert on_break["isActive"] is False

    back = client.post("/api/timer/state/next-phase").json()
    assert back["phase"] == "work"
    assert back["currentCycle"] == 2
    assert back["timeRemaining"] == 3000

    fresh = client.post("/api/timer/state/reset").json()
    assert fresh == {
        "isActive": False,
        "isPaused": False,
        "mode": "study",
        "phase": "work",
        "timeRemaining": 3000,
        "totalElapsed": 0,
        "currentCycle": 1,
    }


def test_start_action(client) -> None:
    _save(client, isActive=False)
    assert client.post("/api/timer/state/start").json()["isActive"] is True


def test_unknown_action(client) -> None:
    _save(client)
    response = client.post("/api/timer/state/explode")
    assert response.status_code == 400
    assert response.json()["error"] == "VALIDATION_ERROR"


def test_action_without_state(client) -> None:
    response = client.post("/api/timer/state/start")
    assert response.status_code == 404
