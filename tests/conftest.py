"""Pytest configuration and fixtures."""

from collections.abc import Generator
from typing import Any

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.orm import Session

from fakes import FakeOrderRepository, FakeProductRepository, FakeUserRepository
from storefront import models  # noqa: F401  (registers tables on Base.metadata)
from storefront.config import Settings
from storefront.database import Base, Database
from storefront.main import create_app

# Test database URL (in-memory SQLite, one shared connection)
TEST_DATABASE_URL = "sqlite:///:memory:"


@pytest.fixture
def test_settings() -> Settings:
    """Settings pointing at an in-memory database."""
    return Settings(DATABASE_URL=TEST_DATABASE_URL, ENVIRONMENT="test")


@pytest.fixture
def database(test_settings: Settings) -> Generator[Database, None, None]:
    """Create a fresh database with all tables for each test."""
    database = Database.from_settings(test_settings)
    Base.metadata.create_all(bind=database.engine)
    try:
        yield database
    finally:
        Base.metadata.drop_all(bind=database.engine)
        database.dispose()


@pytest.fixture
def db_session(database: Database) -> Generator[Session, None, None]:
    """Create a database session for repository tests."""
    with database.session() as session:
        yield session


@pytest.fixture
def client(test_settings: Settings, database: Database) -> Generator[TestClient, Any, None]:
    """Create a test client backed by the test database."""
    app = create_app(test_settings, database=database)

    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def user_repository() -> FakeUserRepository:
    """In-memory user repository."""
    return FakeUserRepository()


@pytest.fixture
def product_repository() -> FakeProductRepository:
    """In-memory product repository."""
    return FakeProductRepository()


@pytest.fixture
def order_repository(user_repository: FakeUserRepository) -> FakeOrderRepository:
    """In-memory order repository sharing the user repository's clock."""
    return FakeOrderRepository(user_repository)
