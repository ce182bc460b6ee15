"""Domain repository backed by the relational store. Every lookup is owner-scoped."""

from sqlalchemy.exc import SQLAlchemyError

from core.entities import Domain
from core.errors import storage_error
from core.models import DomainModel
from core.result import Result

from .base import SQLRepository, as_utc, parse_key


def to_domain(row: DomainModel) -> Domain:
    """Map a stored row to the immutable entity."""
    return Domain(
        id=str(row.id),
        account_id=str(row.account_id),
        domain=row.domain,
        created_at=as_utc(row.created_at),
        updated_at=as_utc(row.updated_at),
    )


class SQLDomainRepository(SQLRepository[DomainModel]):
    """Repository for Domain operations."""

    model = DomainModel
    resource = "domain"

    def get(self, id: str, account_id: str) -> Result[Domain]:
        owner = parse_key(account_id)
        if owner is None:
            return self._missing(id)
        try:
            row = self._load(id, DomainModel.account_id == owner)
        except SQLAlchemyError as exc:
            return self._failure(exc, "get")
        if row is None:
            return self._missing(id)
        return Result.success(to_domain(row))

    def count(self, account_id: str) -> Result[int]:
        owner = parse_key(account_id)
        if owner is None:
            return Result.success(0)
        try:
            return Result.success(self._count(DomainModel.account_id == owner))
        except SQLAlchemyError as exc:
            return self._failure(exc, "count")

    def query(self, offset: int, limit: int, account_id: str) -> Result[list[Domain]]:
        owner = parse_key(account_id)
        if owner is None:
            return Result.success([])
        try:
            rows = self._page(offset, limit, DomainModel.account_id == owner)
        except SQLAlchemyError as exc:
            return self._failure(exc, "query")
        return Result.success([to_domain(row) for row in rows])

    def create(self, domain: Domain) -> Result[Domain]:
        owner = parse_key(domain.account_id)
        if owner is None:
            return Result.failure(
                storage_error(ValueError(f"unusable account id {domain.account_id!r}"), "domain create")
            )
        row = DomainModel(account_id=owner, domain=domain.domain)
        if domain.id:
            key = parse_key(domain.id)
            if key is None:
                return Result.failure(
                    storage_error(ValueError(f"unusable domain id {domain.id!r}"), "domain create")
                )
            row.id = key
        if domain.created_at is not None:
            row.created_at = domain.created_at
        if domain.updated_at is not None:
            row.updated_at = domain.updated_at

        try:
            self._insert(row)
        except SQLAlchemyError as exc:
            return self._failure(exc, "create")
        return Result.success(to_domain(row))

    def update(self, domain: Domain) -> Result[None]:
        owner = parse_key(domain.account_id)
        if owner is None:
            return self._missing(domain.id)
        try:
            row = self._load(domain.id, DomainModel.account_id == owner)
            if row is None:
                return self._missing(domain.id)
            row.domain = domain.domain
            if domain.created_at is not None:
                row.created_at = domain.created_at
            if domain.updated_at is not None:
                row.updated_at = domain.updated_at
            self.session.flush()
        except SQLAlchemyError as exc:
            return self._failure(exc, "update")
        return Result.success(None)

    def delete(self, id: str, account_id: str) -> Result[None]:
        found = self.get(id, account_id)
        if not found.ok:
            return Result.failure(found.error)
        try:
            self._remove(id)
        except SQLAlchemyError as exc:
            return self._failure(exc, "delete")
        return Result.success(None)
