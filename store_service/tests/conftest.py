"""
Pytest configuration and fixtures for Store Service tests.
"""

import os
from typing import Any, AsyncGenerator, Callable, Dict

import pytest
import pytest_asyncio
from fastapi.testclient import TestClient

TEST_SECRET_KEY = "test-secret-key-for-testing-only"

# Set up test environment variables before importing the application
os.environ.setdefault("ENVIRONMENT", "test")
os.environ.setdefault("STORE_DATABASE_URL", "sqlite+aiosqlite:///./store_test.db")
os.environ.setdefault("SECRET_KEY", TEST_SECRET_KEY)
os.environ.setdefault("LOG_LEVEL", "WARNING")

from store_service.app.core.database import StoreServiceDatabaseManager  # noqa: E402
from store_service.app.core.setting import StoreSettings  # noqa: E402
from store_service.app.main import create_app  # noqa: E402
from store_service.app.utils.jwt_handler import JWTHandler  # noqa: E402


@pytest.fixture
def database_url(tmp_path) -> str:
    """A fresh SQLite file database per test."""
    return f"sqlite+aiosqlite:///{tmp_path / 'store.db'}"


@pytest_asyncio.fixture
async def test_database_manager(
    database_url: str,
) -> AsyncGenerator[StoreServiceDatabaseManager, None]:
    """Database manager with all tables created."""
    manager = StoreServiceDatabaseManager(database_url=database_url)
    await manager.create_tables()
    yield manager
    await manager.close()


@pytest_asyncio.fixture
async def db_session(test_database_manager) -> AsyncGenerator[Any, None]:
    """Create a test database session."""
    async with test_database_manager.async_session_maker() as session:
        yield session


@pytest.fixture
def test_settings(database_url: str) -> StoreSettings:
    return StoreSettings(
        STORE_DATABASE_URL=database_url,
        SECRET_KEY=TEST_SECRET_KEY,
        ENVIRONMENT="test",
        LOG_LEVEL="WARNING",
    )


@pytest.fixture
def client(test_settings: StoreSettings):
    """FastAPI test client running the full lifespan against a temp database."""
    with TestClient(create_app(test_settings)) as test_client:
        yield test_client


@pytest.fixture
def jwt_handler() -> JWTHandler:
    return JWTHandler(secret_key=TEST_SECRET_KEY)


@pytest.fixture
def auth_headers_for(jwt_handler: JWTHandler) -> Callable[[str], Dict[str, str]]:
    """Build bearer headers for an arbitrary username."""

    def _headers(username: str) -> Dict[str, str]:
        token = jwt_handler.encode_token({"sub": username})
        return {"Authorization": f"Bearer {token}"}

    return _headers


@pytest.fixture
def auth_headers(auth_headers_for) -> Dict[str, str]:
    return auth_headers_for("alice")
