"""
API test fixtures.

Builds the real application (lifespan is not run by TestClient unless used
as a context manager) with authentication and database dependencies
overridden.

Dependencies: pytest, fastapi
System role: HTTP test harness
"""

from unittest.mock import AsyncMock, MagicMock

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from coachdesk.api.deps.auth import get_current_user
from coachdesk.boundary.db import get_async_db
from coachdesk.boundary.db.models import UserModel
from coachdesk.main import create_app


async def _fake_db():
    yield AsyncMock()


@pytest.fixture
def current_user() -> UserModel:
    """Provide an authenticated user (not persisted)."""
    return UserModel(id="coach-uid-1", email="coach@example.com", name="Casey Coach")


@pytest.fixture
def app(current_user: UserModel) -> FastAPI:
    """Create application with auth and database overridden."""
    app = create_app()
    app.dependency_overrides[get_async_db] = _fake_db
    app.dependency_overrides[get_current_user] = lambda: current_user
    yield app
    app.dependency_overrides.clear()


@pytest.fixture
def client(app: FastAPI) -> TestClient:
    """Provide TestClient for the FastAPI app."""
    return TestClient(app)


@pytest.fixture
def override_service(app: FastAPI):
    """Install an AsyncMock service for a dependency factory."""

    def _override(factory) -> MagicMock:
        service = AsyncMock()
        app.dependency_overrides[factory] = lambda: service
        return service

    return _override
