"""
In-memory repositories.

Each instance owns an explicit ordered list of entities supplied by its
creator, so tests (and local tooling) control exactly what is "stored" and
nothing is shared between instances. Entities are immutable, so handing
them out never lets a caller alter stored state.

Usage:
    repo = InMemoryAccountRepository([Account(id="1", email="a@example.com")])
    service = AccountService(repo)
"""

from collections.abc import Callable, Iterable
from dataclasses import replace

from core.entities import Account, Domain, id_sort_key
from core.errors import not_found, storage_error
from core.result import Result


def _next_id(existing: Iterable[str]) -> str:
    """Allocate one past the largest numeric id seen so far."""
    numeric = [int(item) for item in existing if item.isascii() and item.isdigit()]
    return str(max(numeric, default=0) + 1)


def _duplicate(resource: str, identifier: str) -> Result:
    return Result.failure(
        storage_error(KeyError(f"duplicate {resource} id {identifier!r}"), f"{resource} create")
    )


class InMemoryAccountRepository:
    """Account storage backed by a list owned by the caller."""

    def __init__(self, items: list[Account] | None = None):
        self.items: list[Account] = items if items is not None else []

    def _find(self, id: str) -> int | None:
        for index, item in enumerate(self.items):
            if item.id == id:
                return index
        return None

    def get(self, id: str) -> Result[Account]:
        index = self._find(id)
        if index is None:
            return Result.failure(not_found("account", id))
        return Result.success(self.items[index])

    def count(self) -> Result[int]:
        return Result.success(len(self.items))

    def query(self, offset: int, limit: int) -> Result[list[Account]]:
        ordered = sorted(self.items, key=lambda item: id_sort_key(item.id))
        return Result.success(ordered[offset : offset + limit])

    def create(self, account: Account) -> Result[Account]:
        if account.id and self._find(account.id) is not None:
            return _duplicate("account", account.id)
        if not account.id:
            account = replace(account, id=_next_id(item.id for item in self.items))
        self.items.append(account)
        return Result.success(account)

    def update(self, account: Account) -> Result[None]:
        index = self._find(account.id)
        if index is None:
            return Result.failure(not_found("account", account.id))
        self.items[index] = account
        return Result.success(None)

    def delete(self, id: str) -> Result[None]:
        found = self.get(id)
        if not found.ok:
            return Result.failure(found.error)
        del self.items[self._find(id)]
        return Result.success(None)


class InMemoryDomainRepository:
    """Domain storage backed by a list owned by the caller, scoped by account id."""

    def __init__(self, items: list[Domain] | None = None):
        self.items: list[Domain] = items if items is not None else []

    def _find(self, id: str, account_id: str) -> int | None:
        for index, item in enumerate(self.items):
            if item.id == id and item.account_id == account_id:
                return index
        return None

    def _owned_by(self, account_id: str) -> Callable[[Domain], bool]:
        return lambda item: item.account_id == account_id

    def get(self, id: str, account_id: str) -> Result[Domain]:
        index = self._find(id, account_id)
        if index is None:
            return Result.failure(not_found("domain", id))
        return Result.success(self.items[index])

    def count(self, account_id: str) -> Result[int]:
        return Result.success(sum(1 for _ in filter(self._owned_by(account_id), self.items)))

    def query(self, offset: int, limit: int, account_id: str) -> Result[list[Domain]]:
        owned = sorted(filter(self._owned_by(account_id), self.items), key=lambda item: id_sort_key(item.id))
        return Result.success(owned[offset : offset + limit])

    def create(self, domain: Domain) -> Result[Domain]:
        if domain.id and any(item.id == domain.id for item in self.items):
            return _duplicate("domain", domain.id)
        if not domain.id:
            domain = replace(domain, id=_next_id(item.id for item in self.items))
        self.items.append(domain)
        return Result.success(domain)

    def update(self, domain: Domain) -> Result[None]:
        index = self._find(domain.id, domain.account_id)
        if index is None:
            return Result.failure(not_found("domain", domain.id))
        self.items[index] = domain
        return Result.success(None)

    def delete(self, id: str, account_id: str) -> Result[None]:
        found = self.get(id, account_id)
        if not found.ok:
            return Result.failure(found.error)
        del self.items[self._find(id, account_id)]
        return Result.success(None)


__all__ = ["InMemoryAccountRepository", "InMemoryDomainRepository"]
