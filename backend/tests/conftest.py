"""Shared test configuration and fixtures."""

import pytest
from fastapi.testclient import TestClient

from api.router import limiter
from main import app
from services.profile_store import profile_store


@pytest.fixture(autouse=True)
def _reset_state():
    """Each test starts with an empty profile store and fresh rate limits."""
    limiter.reset()
    profile_store.clear()
    yield
    profile_store.clear()


@pytest.fixture()
def client():
    return TestClient(app)
