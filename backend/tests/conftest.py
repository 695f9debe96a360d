"""
Shared test fixtures and utilities.

This module provides common test infrastructure used across all test modules.
Every test gets its own SQLite file database under tmp_path and its own
service container; the pizza factory is replaced by an httpx MockTransport.
"""

import asyncio
import uuid
from typing import Any, Callable

import httpx
import pytest
from fastapi.testclient import TestClient

from shared.config import Settings
from shared.database import Database
from api.app import create_app
from api.dependencies import ServiceContainer, reset_container
from modules.orders.factory import FactoryClient


# Test JWT secret (only for testing)
TEST_JWT_SECRET = "test-secret-key-for-testing-only"

TEST_FACTORY_URL = "http://factory.test"
TEST_FACTORY_KEY = "factory-test-key"

ADMIN_EMAIL = "admin@jwt.com"
ADMIN_PASSWORD = "toomanysecrets"


class FactoryStub:
    """
    Stand-in for the pizza factory.

    Records every request; answers with status/body, or raises error if set.
    """

    def __init__(self) -> None:
        self.requests: list[httpx.Request] = []
        self.status = 200
        self.body: dict[str, Any] = {
            "reportUrl": f"{TEST_FACTORY_URL}/report/1",
            "jwt": "factory-jwt",
        }
        self.error: Exception | None = None

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.error is not None:
            raise self.error
        return httpx.Response(self.status, json=self.body)


def random_name() -> str:
    return uuid.uuid4().hex[:10]


@pytest.fixture
def settings(tmp_path) -> Settings:
    """Settings pointing at a fresh database file."""
    return Settings(
        _env_file=None,
        database_url=f"sqlite+aiosqlite:///{tmp_path / 'pizza.db'}",
        jwt_secret=TEST_JWT_SECRET,
        bcrypt_rounds=4,
        factory_url=TEST_FACTORY_URL,
        factory_api_key=TEST_FACTORY_KEY,
        admin_name="Admin",
        admin_email=ADMIN_EMAIL,
        admin_password=ADMIN_PASSWORD,
    )


@pytest.fixture
def database(settings) -> Database:
    """A database with the schema already created."""
    db = Database(settings.database_url)
    asyncio.run(db.create_schema())
    return db


@pytest.fixture
def factory() -> FactoryStub:
    return FactoryStub()


@pytest.fixture
def container(settings, factory):
    """Service container wired to the test database and the factory stub."""
    container = ServiceContainer(settings)
    container.override(
        factory=FactoryClient(
            settings.factory_url,
            settings.factory_api_key,
            transport=httpx.MockTransport(factory),
        )
    )
    yield container
    reset_container()


@pytest.fixture
def client(container):
    """Test client; entering it runs startup (schema and admin seeding)."""
    app = create_app(container=container)
    with TestClient(app) as client:
        yield client


@pytest.fixture
def register(client) -> Callable[..., dict[str, Any]]:
    """Register a diner through the API and return {user, token}."""

    def _register(name: str | None = None, password: str = "diner") -> dict[str, Any]:
        name = name or random_name()
        response = client.post(
            "/api/auth",
            json={"name": name, "email": f"{name}@test.com", "password": password},
        )
        assert response.status_code == 200, response.text
        return response.json()

    return _register


@pytest.fixture
def admin_token(client) -> str:
    """Log in the seeded admin."""
    response = client.put("/api/auth", json={"email": ADMIN_EMAIL, "password": ADMIN_PASSWORD})
    assert response.status_code == 200, response.text
    return response.json()["token"]


def auth_headers(token: str) -> dict[str, str]:
    """Create authorization headers for a token."""
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def headers() -> Callable[[str], dict[str, str]]:
    return auth_headers


@pytest.fixture
def make_name() -> Callable[[], str]:
    """Factory for unique user/franchise names."""
    return random_name
