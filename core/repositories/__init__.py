"""
Repository pattern implementations for data access.

Services depend on the AccountRepository / DomainRepository protocols;
two implementations satisfy each of them:

- SQLAccountRepository / SQLDomainRepository: bound to a SQLAlchemy session
- InMemoryAccountRepository / InMemoryDomainRepository: list-backed doubles

Usage:
    from core.repositories import SQLAccountRepository
    from core.db import db

    with db.session() as session:
        repo = SQLAccountRepository(session)
        result = repo.query(offset=0, limit=20)
"""

from .account_repository import SQLAccountRepository
from .base import SQLRepository
from .contracts import AccountRepository, DomainRepository
from .domain_repository import SQLDomainRepository
from .memory import InMemoryAccountRepository, InMemoryDomainRepository

__all__ = [
    "AccountRepository",
    "DomainRepository",
    "SQLRepository",
    "SQLAccountRepository",
    "SQLDomainRepository",
    "InMemoryAccountRepository",
    "InMemoryDomainRepository",
]
