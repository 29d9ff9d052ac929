"""Shared fixtures: one app per schema variant on in-memory SQLite."""

import os

# Must be set before dbrowser.config builds its module-level settings
os.environ["DATABASE_URL"] = "sqlite+aiosqlite://"
os.environ["ENVIRONMENT"] = "development"

import pytest
from fastapi.testclient import TestClient

from dbrowser.config import Settings
from dbrowser.main import create_app

SQLITE_URL = "sqlite+aiosqlite://"


def _settings(schema_mode: str) -> Settings:
    return Settings(database_url=SQLITE_URL, schema_mode=schema_mode, environment="development")


@pytest.fixture
def client():
    """Client for the linked schema (rows keyed by users.id)."""
    with TestClient(create_app(_settings("linked"))) as test_client:
        yield test_client


@pytest.fixture
def direct_client():
    """Client for the direct schema (rows keyed by firebase_uid)."""
    with TestClient(create_app(_settings("direct"))) as test_client:
        yield test_client


@pytest.fixture
def make_user():
    """Factory posting a user through the API."""
    return _create_user


def _create_user(test_client, firebase_uid="uid-1", **fields):
    payload = {
        "firebase_uid": firebase_uid,
        "email": f"{firebase_uid}@example.com",
        "name": "D",
        "profile_image": None,
        "login_provider": "google.com",
    }
    payload.update(fields)
    response = test_client.post("/users", json=payload)
    assert response.status_code == 200
    return response.json()
