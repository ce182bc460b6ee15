"""
FastAPI dependency injection module.

Provides centralized dependencies for:
- Repositories (bound to the request-scoped database session)
- Services

Tests swap the repository dependencies for in-memory implementations via
app.dependency_overrides.
"""

from fastapi import Depends
from sqlalchemy.orm import Session

from core.db import get_db
from core.repositories import SQLAccountRepository, SQLDomainRepository
from core.repositories.contracts import AccountRepository, DomainRepository
from core.services import AccountService, DomainService

# =============================================================================
# Repository Dependencies
# =============================================================================


def get_account_repository(db: Session = Depends(get_db)) -> AccountRepository:
    """Get SQLAccountRepository instance."""
    return SQLAccountRepository(db)


def get_domain_repository(db: Session = Depends(get_db)) -> DomainRepository:
    """Get SQLDomainRepository instance."""
    return SQLDomainRepository(db)


# =============================================================================
# Service Dependencies
# =============================================================================


def get_account_service(
    repo: AccountRepository = Depends(get_account_repository),
) -> AccountService:
    """Get AccountService instance with injected repository."""
    return AccountService(repo)


def get_domain_service(
    repo: DomainRepository = Depends(get_domain_repository),
) -> DomainService:
    """Get DomainService instance with injected repository."""
    return DomainService(repo)


__all__ = [
    "get_account_repository",
    "get_domain_repository",
    "get_account_service",
    "get_domain_service",
]
