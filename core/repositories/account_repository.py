"""Account repository backed by the relational store."""

from sqlalchemy.exc import SQLAlchemyError

from core.entities import Account
from core.errors import storage_error
from core.models import AccountModel
from core.result import Result

from .base import SQLRepository, as_utc, parse_key


def to_account(row: AccountModel) -> Account:
    """Map a stored row to the immutable entity."""
    return Account(
        id=str(row.id),
        email=row.email,
        firebase_id=row.firebase_id or "",
        created_at=as_utc(row.created_at),
        updated_at=as_utc(row.updated_at),
    )


class SQLAccountRepository(SQLRepository[AccountModel]):
    """Repository for Account operations."""

    model = AccountModel
    resource = "account"

    def get(self, id: str) -> Result[Account]:
        try:
            row = self._load(id)
        except SQLAlchemyError as exc:
            return self._failure(exc, "get")
        if row is None:
            return self._missing(id)
        return Result.success(to_account(row))

    def count(self) -> Result[int]:
        try:
            return Result.success(self._count())
        except SQLAlchemyError as exc:
            return self._failure(exc, "count")

    def query(self, offset: int, limit: int) -> Result[list[Account]]:
        try:
            rows = self._page(offset, limit)
        except SQLAlchemyError as exc:
            return self._failure(exc, "query")
        return Result.success([to_account(row) for row in rows])

    def create(self, account: Account) -> Result[Account]:
        """
        Insert a new row.

        An id supplied by the caller is used as the primary key; otherwise
        the store allocates the next one.
        """
        row = AccountModel(email=account.email, firebase_id=account.firebase_id)
        if account.id:
            key = parse_key(account.id)
            if key is None:
                return Result.failure(
                    storage_error(ValueError(f"unusable account id {account.id!r}"), "account create")
                )
            row.id = key
        if account.created_at is not None:
            row.created_at = account.created_at
        if account.updated_at is not None:
            row.updated_at = account.updated_at

        try:
            self._insert(row)
        except SQLAlchemyError as exc:
            return self._failure(exc, "create")
        return Result.success(to_account(row))

    def update(self, account: Account) -> Result[None]:
        try:
            row = self._load(account.id)
            if row is None:
                return self._missing(account.id)
            row.email = account.email
            row.firebase_id = account.firebase_id
            if account.created_at is not None:
                row.created_at = account.created_at
            if account.updated_at is not None:
                row.updated_at = account.updated_at
            self.session.flush()
        except SQLAlchemyError as exc:
            return self._failure(exc, "update")
        return Result.success(None)

    def delete(self, id: str) -> Result[None]:
        found = self.get(id)
        if not found.ok:
            return Result.failure(found.error)
        try:
            self._remove(id)
        except SQLAlchemyError as exc:
            return self._failure(exc, "delete")
        return Result.success(None)
