import os

# 앱 import 전에 설정 (Supabase 없이 실행)
os.environ["ZENFOCUS_BACKEND"] = "memory"

import pytest
from fastapi.testclient import TestClient

from zenfocus.auth import MemoryAuth
from zenfocus.dependencies import get_auth, get_backend
from zenfocus.main import app
from zenfocus.models.database import MemoryBackend


@pytest.fixture
def backend() -> MemoryBackend:
    return MemoryBackend()


@pytest.fixture
def auth() -> MemoryAuth:
    return MemoryAuth(token_ttl_hours=1)


@pytest.fixture
def client(backend: MemoryBackend, auth: MemoryAuth):
    app.dependency_overrides[get_backend] = lambda: backend
    app.dependency_overrides[get_auth] = lambda: auth
    yield TestClient(app)
    app.dependency_overrides.clear()


def register(client: TestClient, email: str, password: str = "password123") -> dict:
    response = client.post("/api/auth/register", json={"email": email, "password": password})
    assert response.status_code == 201, response.text
    return response.json()


def bearer(token: str) -> dict:
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def user(client: TestClient) -> dict:
    return register(client, "user@example.com")


@pytest.fixture
def headers(user: dict) -> dict:
    return bearer(user["token"])


@pytest.fixture
def other_headers(client: TestClient) -> dict:
    return bearer(register(client, "other@example.com")["token"])
