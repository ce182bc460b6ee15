"""
Account use cases.

Validates requests, stamps timestamps and orchestrates the repository.
Every method returns a Result; repository failures are passed through
unchanged and nothing is retried.
"""

from dataclasses import replace

from pydantic import AliasChoices, BaseModel, Field

from core.entities import Account
from core.errors import ServiceError
from core.logging import get_logger
from core.repositories.contracts import AccountRepository
from core.result import Result
from core.validation import CreateAccountRules, UpdateAccountRules, check_page, check_rules

from .base import BaseService, Clock

logger = get_logger("service.account")


class CreateAccountRequest(BaseModel):
    """Payload for creating an account."""

    email: str = ""
    # "FirebaseId" is accepted for older clients
    firebase_id: str = Field(default="", validation_alias=AliasChoices("firebase_id", "FirebaseId"))

    def check(self) -> ServiceError | None:
        return check_rules(CreateAccountRules, self)


class UpdateAccountRequest(BaseModel):
    """Payload for updating an account. `name` replaces the stored email."""

    name: str = ""

    def check(self) -> ServiceError | None:
        return check_rules(UpdateAccountRules, self)


class AccountService(BaseService):
    """
    Account service.

    Usage:
        service = AccountService(SQLAccountRepository(session))
        result = service.create(CreateAccountRequest(email="a@example.com"))
        if result.ok:
            account = result.value
    """

    def __init__(self, repo: AccountRepository, clock: Clock | None = None):
        super().__init__(clock)
        self.repo = repo

    def get(self, id: str) -> Result[Account]:
        """Return the account with the given id."""
        return self.repo.get(id)

    def count(self) -> Result[int]:
        return self.repo.count()

    def query(self, offset: int, limit: int) -> Result[list[Account]]:
        """Return a page of accounts in ascending id order (possibly empty)."""
        error = check_page(offset, limit)
        if error:
            return Result.failure(error)
        items = self.repo.query(offset, limit)
        if not items.ok:
            return items
        return Result.success(list(items.value or []))

    def create(self, request: CreateAccountRequest) -> Result[Account]:
        """Validate, stamp and persist a new account, then return it as stored."""
        error = request.check()
        if error:
            logger.info("account_validation_failed", fields=error.fields)
            return Result.failure(error)

        now = self._now()
        created = self.repo.create(
            Account(
                email=request.email.strip(),
                firebase_id=request.firebase_id.strip(),
                created_at=now,
                updated_at=now,
            )
        )
        if not created.ok:
            logger.error("account_create_failed", error=created.error)
            return created

        stored = self.repo.get(created.value.id)
        if stored.ok:
            logger.info("account_created", account_id=stored.value.id)
        return stored

    def update(self, id: str, request: UpdateAccountRequest) -> Result[Account]:
        """
        Replace the account's email with `request.name`.

        The request is validated before the account is looked up, so an
        invalid request for an unknown id reports VALIDATION, not NOT_FOUND.
        """
        error = request.check()
        if error:
            logger.info("account_validation_failed", account_id=id, fields=error.fields)
            return Result.failure(error)

        existing = self.repo.get(id)
        if not existing.ok:
            return existing

        account = replace(
            existing.value,
            email=request.name.strip(),
            updated_at=self._now(not_before=existing.value.created_at),
        )
        saved = self.repo.update(account)
        if not saved.ok:
            logger.error("account_update_failed", account_id=id, error=saved.error)
            return Result.failure(saved.error)

        logger.info("account_updated", account_id=id)
        return Result.success(account)

    def delete(self, id: str) -> Result[Account]:
        """Remove the account and return it as it was just before removal."""
        existing = self.repo.get(id)
        if not existing.ok:
            return existing

        removed = self.repo.delete(id)
        if not removed.ok:
            logger.error("account_delete_failed", account_id=id, error=removed.error)
            return Result.failure(removed.error)

        logger.info("account_deleted", account_id=id)
        return existing


__all__ = ["AccountService", "CreateAccountRequest", "UpdateAccountRequest"]
