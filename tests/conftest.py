"""
Pytest fixtures for the domain registry tests.

Each test gets a fresh SQLite in-memory database and fresh in-memory
repositories; services run against a fixed clock.
"""

from datetime import datetime, timezone

import pytest

import core.models  # noqa: F401  # registers tables on Base.metadata
from core.config import Settings
from core.db import Base, create_db_engine, create_session_factory
from core.repositories import InMemoryAccountRepository, InMemoryDomainRepository
from core.services import AccountService, DomainService

TEST_JWT_SECRET = "test-secret-key-0123456789-abcdefghijklmnop"

FIXED_NOW = datetime(2024, 1, 15, 10, 0, tzinfo=timezone.utc)


@pytest.fixture
def test_settings() -> Settings:
    return Settings(database_url="sqlite://", jwt_secret_key=TEST_JWT_SECRET, debug=False)


@pytest.fixture(scope="function")
def test_engine(test_settings):
    """Create a fresh in-memory database for each test."""
    engine = create_db_engine(test_settings.database_url, test_settings)
    Base.metadata.create_all(bind=engine)
    yield engine
    engine.dispose()


@pytest.fixture
def test_session(test_engine):
    """Get a session bound to the test database. Nothing is committed unless a test does it."""
    session = create_session_factory(test_engine)()
    try:
        yield session
    finally:
        session.rollback()
        session.close()


@pytest.fixture
def fixed_clock():
    return lambda: FIXED_NOW


@pytest.fixture
def account_repo() -> InMemoryAccountRepository:
    return InMemoryAccountRepository()


@pytest.fixture
def domain_repo() -> InMemoryDomainRepository:
    return InMemoryDomainRepository()


@pytest.fixture
def account_service(account_repo, fixed_clock) -> AccountService:
    return AccountService(account_repo, clock=fixed_clock)


@pytest.fixture
def domain_service(domain_repo, fixed_clock) -> DomainService:
    return DomainService(domain_repo, clock=fixed_clock)
