"""
Repository capability interfaces.

Services depend only on these protocols. Any object providing the six
operations satisfies them structurally: the SQLAlchemy repositories in
production, the in-memory ones in tests and local tooling.
"""

from typing import Protocol

from core.entities import Account, Domain
from core.result import Result


class AccountRepository(Protocol):
    """Storage operations for accounts."""

    def get(self, id: str) -> Result[Account]:
        """Return the account with the given id, or NOT_FOUND."""
        ...

    def count(self) -> Result[int]:
        """Return the number of stored accounts."""
        ...

    def query(self, offset: int, limit: int) -> Result[list[Account]]:
        """Return up to `limit` accounts after `offset`, ascending by id."""
        ...

    def create(self, account: Account) -> Result[Account]:
        """Persist a new account, assigning an id if it has none."""
        ...

    def update(self, account: Account) -> Result[None]:
        """Overwrite the stored row with the same id, or NOT_FOUND."""
        ...

    def delete(self, id: str) -> Result[None]:
        """Remove the account with the given id, or NOT_FOUND."""
        ...


class DomainRepository(Protocol):
    """Storage operations for domains, always scoped to an owning account."""

    def get(self, id: str, account_id: str) -> Result[Domain]:
        ...

    def count(self, account_id: str) -> Result[int]:
        ...

    def query(self, offset: int, limit: int, account_id: str) -> Result[list[Domain]]:
        ...

    def create(self, domain: Domain) -> Result[Domain]:
        ...

    def update(self, domain: Domain) -> Result[None]:
        ...

    def delete(self, id: str, account_id: str) -> Result[None]:
        ...


__all__ = ["AccountRepository", "DomainRepository"]
