"""Pytest configuration and fixtures."""

from collections.abc import Generator
from typing import Any

import pytest
from fastapi.testclient import TestClient

from studyhub import schemas
from studyhub.config import Settings
from studyhub.database import Database, create_db_engine
from studyhub.main import create_app
from studyhub.storage import DatabaseStorage, MemoryStorage, StorageProtocol

# Test database URL (in-memory SQLite)
TEST_DATABASE_URL = "sqlite:///:memory:"


@pytest.fixture
def test_settings() -> Settings:
    """Settings isolated from the environment and any .env file."""
    return Settings(DATABASE_URL=TEST_DATABASE_URL, ENVIRONMENT="test", _env_file=None)


@pytest.fixture
def database() -> Generator[Database, None, None]:
    """Create a fresh in-memory database for each test."""
    database = Database(create_db_engine(TEST_DATABASE_URL))
    database.create_all()
    try:
        yield database
    finally:
        database.drop_all()
        database.dispose()


@pytest.fixture
def database_storage(database: Database) -> DatabaseStorage:
    """Storage backed by the test database."""
    return DatabaseStorage(database)


@pytest.fixture
def memory_storage() -> MemoryStorage:
    """Storage kept in process memory."""
    return MemoryStorage()


@pytest.fixture(params=["database", "memory"])
def storage(request: pytest.FixtureRequest) -> StorageProtocol:
    """Every storage implementation, so contract tests run against each."""
    return request.getfixturevalue(f"{request.param}_storage")


@pytest.fixture
def test_user(storage: StorageProtocol) -> schemas.User:
    """Create a test user."""
    return storage.create_user({"username": "testuser", "password": "hashed-secret"})


@pytest.fixture
def test_study_set(storage: StorageProtocol, test_user: schemas.User) -> schemas.StudySet:
    """Create a test study set owned by the test user."""
    return storage.create_study_set(
        {
            "user_id": test_user.id,
            "title": "Cell Biology",
            "description": "Organelles and membranes",
            "category": "biology",
        }
    )


@pytest.fixture
def client(
    test_settings: Settings, database_storage: DatabaseStorage
) -> Generator[TestClient, Any, None]:
    """Create a test client backed by the test database."""
    app = create_app(settings=test_settings, storage=database_storage)

    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def api_user(database_storage: DatabaseStorage) -> schemas.User:
    """Create a user in the store behind the test client."""
    return database_storage.create_user({"username": "apiuser", "password": "hashed-secret"})


@pytest.fixture
def api_study_set(database_storage: DatabaseStorage, api_user: schemas.User) -> schemas.StudySet:
    """Create a study set owned by the API user."""
    return database_storage.create_study_set(
        {"user_id": api_user.id, "title": "World War II", "category": "history"}
    )
