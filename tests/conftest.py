"""
Pytest fixtures shared by the test suite.

Every test gets its own SQLite file under ``tmp_path`` with all
migrations applied, so tests never see each other's records.
"""

import random

import pytest
from fastapi.testclient import TestClient

from agency_site_api.app.core.config import settings
from agency_site_api.app.core.db import init_db


ADMIN_TOKEN = "test-admin-token"


class LowRandom(random.Random):
    """Random source whose ``randint`` always returns the lower bound."""

    def randint(self, a, b):
        return a


@pytest.fixture(autouse=True)
def temp_db(tmp_path, monkeypatch):
    """Point the store at a fresh database file for each test."""
    db_path = tmp_path / "test.db"
    monkeypatch.setattr(settings, "database_url", str(db_path))
    init_db()
    return str(db_path)


@pytest.fixture
def admin_token(monkeypatch) -> str:
    monkeypatch.setattr(settings, "admin_tokens", f"other-token,{ADMIN_TOKEN}")
    return ADMIN_TOKEN


@pytest.fixture
def admin_headers(admin_token) -> dict:
    return {"Authorization": f"Bearer {admin_token}"}


@pytest.fixture
def client():
    from agency_site_api.app.main import app

    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def low_rng() -> random.Random:
    return LowRandom(7)
