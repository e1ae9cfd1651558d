"""
Shared fixtures.

  - store       : fresh MemoryStore (with the demo user) installed as the app store
  - client      : FastAPI TestClient over main.app
  - signup      : helper that registers a user and returns (user, headers)
  - auth_headers: bearer headers for a freshly signed-up user
"""

import pytest
from fastapi.testclient import TestClient

from main import app
from tripgenius.core.config_loader import settings
from tripgenius.db.memory_store import MemoryStore
from tripgenius.db.store import reset_store, seed_demo_user
from tripgenius.services import weather_service


@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch):
    # never reach real third-party services from tests
    monkeypatch.setattr(settings, "OPENWEATHER_API_KEY", "")
    monkeypatch.setattr(settings, "OPENAI_API_KEY", "")
    monkeypatch.setattr(settings, "EXCHANGERATE_API_KEY", "")
    monkeypatch.setattr(settings, "http_backoff_seconds", 0)
    weather_service.clear_cache()
    yield
    weather_service.clear_cache()


@pytest.fixture
def store():
    s = MemoryStore()
    seed_demo_user(s)
    reset_store(s)
    yield s
    reset_store(None)


@pytest.fixture
def client(store):
    return TestClient(app)


@pytest.fixture
def signup(client):
    counter = {"n": 0}

    def _signup(email=None, name="Test Traveller", password="supersecret1"):
        counter["n"] += 1
        email = email or f"traveller{counter['n']}@example.com"
        resp = client.post("/api/auth/signup", json={"email": email, "name": name, "password": password})
        assert resp.status_code == 201, resp.text
        body = resp.json()
        return body["user"], {"Authorization": f"Bearer {body['token']}"}

    return _signup


@pytest.fixture
def auth_headers(signup):
    _, headers = signup()
    return headers
