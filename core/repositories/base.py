"""Base repository class with the SQLAlchemy plumbing shared by every resource."""

from datetime import datetime, timezone
from typing import Any, Generic, TypeVar

from sqlalchemy import delete, func, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from core.db import Base
from core.errors import not_found, storage_error
from core.logging import get_logger
from core.result import Result

T = TypeVar("T", bound=Base)

logger = get_logger("repository")

# Largest value a signed 64-bit primary key column can hold
MAX_KEY = 2**63 - 1


def parse_key(identifier: str) -> int | None:
    """
    Convert an opaque id into the integer primary key used by the store.

    Returns None for anything that cannot be a key ("abc", "-1", ""), which
    callers report as not found rather than as an error.
    """
    if not isinstance(identifier, str):
        return None
    text = identifier.strip()
    if not (text.isascii() and text.isdigit()):
        return None
    key = int(text)
    return key if key <= MAX_KEY else None


def as_utc(value: datetime | None) -> datetime | None:
    """SQLite drops tzinfo on round-trip; stored timestamps are always UTC."""
    if value is None or value.tzinfo is not None:
        return value
    return value.replace(tzinfo=timezone.utc)


class SQLRepository(Generic[T]):
    """
    Base for repositories bound to a SQLAlchemy session.

    Operations flush but never commit; the owner of the session (the
    request-scoped dependency or db.session()) decides the transaction
    outcome. Any SQLAlchemyError rolls the session back and is returned as a
    STORAGE failure.

    Usage:
        class SQLAccountRepository(SQLRepository[AccountModel]):
            model = AccountModel
            resource = "account"

        repo = SQLAccountRepository(session)
        result = repo.get("1")
    """

    model: type[T]
    resource: str = "record"

    def __init__(self, session: Session):
        self.session = session

    def _load(self, identifier: str, *criteria: Any) -> T | None:
        """Fetch one row by opaque id plus optional extra criteria."""
        key = parse_key(identifier)
        if key is None:
            return None
        stmt = select(self.model).where(self.model.id == key, *criteria)  # type: ignore[attr-defined]
        return self.session.scalars(stmt).first()

    def _count(self, *criteria: Any) -> int:
        stmt = select(func.count()).select_from(self.model)
        if criteria:
            stmt = stmt.where(*criteria)
        return self.session.scalar(stmt) or 0

    def _page(self, offset: int, limit: int, *criteria: Any) -> list[T]:
        """Rows in ascending id order, sliced by offset/limit."""
        stmt = select(self.model)
        if criteria:
            stmt = stmt.where(*criteria)
        stmt = stmt.order_by(self.model.id).offset(offset).limit(limit)  # type: ignore[attr-defined]
        return list(self.session.scalars(stmt))

    def _insert(self, row: T) -> None:
        self.session.add(row)
        self.session.flush()

    def _remove(self, identifier: str) -> None:
        key = parse_key(identifier)
        self.session.execute(delete(self.model).where(self.model.id == key))  # type: ignore[attr-defined]
        self.session.flush()

    def _missing(self, identifier: str) -> Result[Any]:
        return Result.failure(not_found(self.resource, identifier))

    def _failure(self, exc: SQLAlchemyError, operation: str) -> Result[Any]:
        self.session.rollback()
        logger.error(
            "storage_error",
            resource=self.resource,
            operation=operation,
            error=str(exc),
            error_type=type(exc).__name__,
        )
        return Result.failure(storage_error(exc, f"{self.resource} {operation}"))


__all__ = ["SQLRepository", "parse_key", "as_utc", "MAX_KEY"]
