import inspect
import re

from fastapi.routing import APIRoute
from fastapi.testclient import TestClient

from zenfocus.dependencies import get_backend
from zenfocus.errors import ApiError, NotFound
from zenfocus.main import app


def test_session_modes(client) -> None:
    response = client.get("/api/session-modes")
    assert response.status_code == 200

    modes = {m["id"]: m for m in response.json()}
    assert list(modes) == ["study", "deepwork", "yoga", "zen"]
    for mode in modes.values():
        assert re.match(r"^#[0-9A-Fa-f]{6}$", mode["color"])
        assert mode["name"]
        assert mode["icon"]

    assert modes["study"]["defaultWorkDuration"] == 50
    assert modes["deepwork"]["maxWorkDuration"] == 180
    assert modes["yoga"]["isCustomizable"] is False
    assert modes["yoga"]["maxWorkDuration"] is None
    assert modes["zen"]["defaultBreakDuration"] == 0


def test_root_and_health(client) -> None:
    assert client.get("/").json()["status"] == "running"
    body = client.get("/health").json()
    assert body["status"] == "healthy"
    assert body["timestamp"]


def test_unknown_route(client) -> None:
    response = client.get("/api/nothing-here")
    assert response.status_code == 404
    body = response.json()
    assert body["error"] == "NOT_FOUND"
    assert set(body) == {"error", "message"}


def test_method_not_allowed(client) -> None:
    response = client.delete("/api/session-modes")
    assert response.status_code == 405
    assert response.json()["error"] == "METHOD_NOT_ALLOWED"


def test_malformed_json(client) -> None:
    response = client.post(
        "/api/sessions",
        content=b'{"mode": "study",',
        headers={"Content-Type": "application/json"},
    )
    assert response.status_code == 400
    assert response.json()["error"] == "INVALID_JSON"


def test_non_object_body(client) -> None:
    response = client.post("/api/sessions", json=["study", 50])
    assert response.status_code == 400
    assert response.json()["error"] == "VALIDATION_ERROR"


class BrokenBackend:
    def __getattr__(self, name):
        def fail(*args, **kwargs):
            raise RuntimeError("connection refused")
        return fail


def test_unexpected_error_is_hidden() -> None:
    app.dependency_overrides[get_backend] = lambda: BrokenBackend()
    try:
        client = TestClient(app, raise_server_exceptions=False)
        response = client.post("/api/sessions", json={"mode": "study", "plannedDuration": 25})
    finally:
        app.dependency_overrides.clear()

    assert response.status_code == 500
    assert response.json() == {"error": "INTERNAL_ERROR", "message": "Internal server error"}


def test_store_endpoints_run_in_threadpool() -> None:
    api_routes = [r for r in app.routes if isinstance(r, APIRoute) and r.path.startswith("/api/")]
    assert api_routes
    for route in api_routes:
        assert not inspect.iscoroutinefunction(route.endpoint), route.path


def test_api_error_defaults_and_overrides() -> None:
    error = NotFound("없음")
    assert (error.status_code, error.error) == (404, "NOT_FOUND")

    custom = ApiError("비밀번호 오류", error="INVALID_PASSWORD", status_code=400)
    assert custom.to_dict() == {"error": "INVALID_PASSWORD", "message": "비밀번호 오류"}
    assert custom.status_code == 400
    assert ApiError("oops").status_code == 500
