"""
tests/conftest.py -- Shared test fixtures for StaffDesk tests.

This module provides:
  - client: TestClient whose lifespan builds fresh, seeded in-memory stores
  - admin_headers: Authorization header for the seeded admin account
  - member_headers: Authorization header for a freshly registered member

Each test that uses `client` gets its own app lifespan, so stores never leak
between tests.

DEBUG must be set before any auth/core import so get_settings() auto-generates
SECRET_KEY instead of raising ValueError. BCRYPT_ROUNDS is lowered so the
seed and login hashing stay fast.
"""

from __future__ import annotations

import os
from collections.abc import Generator

# CRITICAL: set before any auth/core import -- get_settings() is cached on first call.
os.environ.setdefault("DEBUG", "true")
os.environ["BCRYPT_ROUNDS"] = "4"
os.environ["SEED_DEMO_DATA"] = "true"
os.environ["SEED_ADMIN_PASSWORD"] = "adminpassword"
os.environ["CORS_ORIGINS"] = "*"

import pytest
from fastapi.testclient import TestClient

from api.main import app

ADMIN_CREDENTIALS = {"username": "admin", "password": "adminpassword"}
MEMBER_CREDENTIALS = {"username": "member1", "password": "memberpass"}


@pytest.fixture
def client() -> Generator[TestClient, None, None]:
    """Yield a TestClient over a fresh lifespan (seeded admin + two employees)."""
    with TestClient(app, raise_server_exceptions=True) as test_client:
        yield test_client


def _login(client: TestClient, credentials: dict) -> str:
    resp = client.post("/login", json=credentials)
    assert resp.status_code == 200, f"Login failed: {resp.status_code} {resp.text}"
    return resp.json()["token"]


@pytest.fixture
def admin_headers(client: TestClient) -> dict[str, str]:
    """Bearer header for the seeded admin account."""
    return {"Authorization": f"Bearer {_login(client, ADMIN_CREDENTIALS)}"}


@pytest.fixture
def member_headers(client: TestClient) -> dict[str, str]:
    """Register a member account and return its bearer header."""
    resp = client.post("/register", json=MEMBER_CREDENTIALS)
    assert resp.status_code == 201, f"Register failed: {resp.status_code} {resp.text}"
    return {"Authorization": f"Bearer {_login(client, MEMBER_CREDENTIALS)}"}
