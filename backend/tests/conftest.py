"""
Roster API - Test Configuration (conftest.py)
=============================================

What:  Shared pytest fixtures for the entire test suite.
How:   pytest auto-discovers conftest.py and makes fixtures available to all tests.

Fixtures (function-scoped, created fresh for each test):
    ├── repository: Empty UserRepository
    ├── seeded_repository: UserRepository with six users (ids 1..6)
    ├── app: A new FastAPI app with its own seeded lesson stores
    └── test_client: HTTPX AsyncClient bound to that app
"""

import os

# Override settings for testing BEFORE any app imports
os.environ["LOG_LEVEL"] = "WARNING"
os.environ["SEED_DEMO_USERS"] = "true"

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from app.main import create_app
from app.services.user_repository import UserRepository


@pytest.fixture
def repository():
    """An empty store."""
    return UserRepository(label="test")


@pytest.fixture
def seeded_repository():
    """
    A store holding six users.

    Ids 1..6 in order: Alice, Bob, Carol, Dave, Erin, Frank.
    """
    return UserRepository(["Alice", "Bob", "Carol", "Dave", "Erin", "Frank"], label="test")


@pytest.fixture
def app():
    """
    A fresh application instance.

    Each test gets its own repositories, so mutations in one test never
    leak into another.
    """
    return create_app()


@pytest_asyncio.fixture
async def test_client(app):
    """
    Provides an async HTTP test client for endpoint testing.

    How:     Uses ASGITransport to route requests directly to the app.

    Usage:
        async def test_health(test_client):
            response = await test_client.get("/health")
            assert response.status_code == 200
    """
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
