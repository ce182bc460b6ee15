from collections.abc import Iterator

import pytest
from fastapi.testclient import TestClient

from backend.app.auth.jwt import create_access_token
from backend.app.dependencies import get_account_repository, get_domain_repository
from backend.app.main import create_app
from core.db import db
from core.repositories import InMemoryAccountRepository, InMemoryDomainRepository


@pytest.fixture
def account_store() -> InMemoryAccountRepository:
    return InMemoryAccountRepository()


@pytest.fixture
def domain_store() -> InMemoryDomainRepository:
    return InMemoryDomainRepository()


@pytest.fixture
def test_app_client(test_settings, account_store, domain_store) -> Iterator[TestClient]:
    """Client whose repositories are the in-memory stores above."""
    db.reset()
    app = create_app(test_settings)
    app.dependency_overrides[get_account_repository] = lambda: account_store
    app.dependency_overrides[get_domain_repository] = lambda: domain_store

    with TestClient(app) as client:
        yield client

    db.reset()


@pytest.fixture
def sql_client(test_settings) -> Iterator[TestClient]:
    """Client running the full stack against a fresh in-memory SQLite database."""
    db.reset()
    app = create_app(test_settings)

    with TestClient(app) as client:
        yield client

    db.reset()


@pytest.fixture
def auth_headers(test_settings) -> dict[str, str]:
    token = create_access_token({"sub": "100", "name": "ops"}, settings=test_settings)
    return {"Authorization": f"Bearer {token}"}
