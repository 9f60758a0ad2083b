"""Shared fixtures for API tests."""

from __future__ import annotations

import httpx
import pytest

from wbcheck.api.app import app
from wbcheck.api.deps import get_profile_registry
from wbcheck.persistence.profile_store import ProfileRegistry


@pytest.fixture
def registry(ken, square) -> ProfileRegistry:
    return ProfileRegistry.from_profiles([ken, square])


@pytest.fixture
def test_app(registry):
    """FastAPI app serving the test registry."""
    app.dependency_overrides[get_profile_registry] = lambda: registry
    app.state.profile_registry = registry
    yield app
    app.dependency_overrides.clear()
    del app.state.profile_registry


@pytest.fixture
async def client(test_app):
    """httpx AsyncClient wired to the test app."""
    transport = httpx.ASGITransport(app=test_app)
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as c:
        yield c
