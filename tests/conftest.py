"""
Wspólne fixture'y dla testów.
"""

import pytest
from fastapi.testclient import TestClient

from app.config import settings
from app.services.users.store import InMemoryUserStore

ADMIN_EMAIL = "admin@example.com"
ADMIN_PASSWORD = "admin123"


@pytest.fixture
def store():
    """Pusty magazyn użytkowników w pamięci."""
    return InMemoryUserStore()


@pytest.fixture
def client(monkeypatch):
    """Klient HTTP aplikacji ze świeżym magazynem i domyślnym kontem admina."""
    monkeypatch.setattr(settings, "user_store_backend", "memory")
    monkeypatch.setattr(settings, "admin_enabled", True)
    monkeypatch.setattr(settings, "admin_username", "admin")
    monkeypatch.setattr(settings, "admin_email", ADMIN_EMAIL)
    monkeypatch.setattr(settings, "admin_password", ADMIN_PASSWORD)

    from main import app

    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def admin_headers(client):
    """Nagłówek Authorization z tokenem administratora."""
    response = client.post(
        "/api/auth/login",
        json={"email": ADMIN_EMAIL, "password": ADMIN_PASSWORD}
    )
    assert response.status_code == 200
    return {"Authorization": f"Bearer {response.json()['token']}"}


@pytest.fixture
def user_headers(client):
    """Nagłówek Authorization z tokenem zwykłego użytkownika."""
    response = client.post(
        "/api/auth/register",
        json={"username": "regular", "email": "regular@example.com", "password": "secret123"}
    )
    assert response.status_code == 201
    return {"Authorization": f"Bearer {response.json()['token']}"}
