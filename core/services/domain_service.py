"""
Domain use cases.

Same contract as the account service, with every read and write scoped to
the owning account: a domain that exists under another account is reported
as not found.
"""

from dataclasses import replace

from pydantic import BaseModel, ConfigDict

from core.entities import Domain
from core.errors import ServiceError
from core.logging import get_logger
from core.repositories.contracts import DomainRepository
from core.result import Result
from core.validation import CreateDomainRules, UpdateDomainRules, check_page, check_rules

from .base import BaseService, Clock

logger = get_logger("service.domain")


class CreateDomainRequest(BaseModel):
    """Payload for registering a domain under an account."""

    # JSON clients send account ids as numbers or strings
    model_config = ConfigDict(coerce_numbers_to_str=True)

    name: str = ""
    account_id: str = ""

    def check(self) -> ServiceError | None:
        return check_rules(CreateDomainRules, self)


class UpdateDomainRequest(BaseModel):
    """Payload for renaming a domain. `account_id` scopes the lookup and is not validated."""

    model_config = ConfigDict(coerce_numbers_to_str=True)

    name: str = ""
    account_id: str = ""

    def check(self) -> ServiceError | None:
        return check_rules(UpdateDomainRules, self)


class DomainService(BaseService):
    """
    Domain service.

    Usage:
        service = DomainService(SQLDomainRepository(session))
        result = service.query(offset=0, limit=20, account_id="1")
    """

    def __init__(self, repo: DomainRepository, clock: Clock | None = None):
        super().__init__(clock)
        self.repo = repo

    def get(self, id: str, account_id: str) -> Result[Domain]:
        return self.repo.get(id, account_id)

    def count(self, account_id: str) -> Result[int]:
        return self.repo.count(account_id)

    def query(self, offset: int, limit: int, account_id: str) -> Result[list[Domain]]:
        error = check_page(offset, limit)
        if error:
            return Result.failure(error)
        items = self.repo.query(offset, limit, account_id)
        if not items.ok:
            return items
        return Result.success(list(items.value or []))

    def create(self, request: CreateDomainRequest) -> Result[Domain]:
        error = request.check()
        if error:
            logger.info("domain_validation_failed", fields=error.fields)
            return Result.failure(error)

        now = self._now()
        created = self.repo.create(
            Domain(
                account_id=request.account_id.strip(),
                domain=request.name.strip(),
                created_at=now,
                updated_at=now,
            )
        )
        if not created.ok:
            logger.error(
                "domain_create_failed",
                account_id=request.account_id,
                error=created.error,
            )
            return created

        stored = self.repo.get(created.value.id, created.value.account_id)
        if stored.ok:
            logger.info("domain_created", domain_id=stored.value.id, account_id=stored.value.account_id)
        return stored

    def update(self, id: str, request: UpdateDomainRequest) -> Result[Domain]:
        """Rename a domain. Validation runs before the scoped lookup."""
        error = request.check()
        if error:
            logger.info("domain_validation_failed", domain_id=id, fields=error.fields)
            return Result.failure(error)

        existing = self.repo.get(id, request.account_id.strip())
        if not existing.ok:
            return existing

        domain = replace(
            existing.value,
            domain=request.name.strip(),
            updated_at=self._now(not_before=existing.value.created_at),
        )
        saved = self.repo.update(domain)
        if not saved.ok:
            logger.error("domain_update_failed", domain_id=id, error=saved.error)
            return Result.failure(saved.error)

        logger.info("domain_updated", domain_id=id, account_id=domain.account_id)
        return Result.success(domain)

    def delete(self, id: str, account_id: str) -> Result[Domain]:
        """Remove the domain and return it as it was just before removal."""
        existing = self.repo.get(id, account_id)
        if not existing.ok:
            return existing

        removed = self.repo.delete(id, account_id)
        if not removed.ok:
            logger.error("domain_delete_failed", domain_id=id, error=removed.error)
            return Result.failure(removed.error)

        logger.info("domain_deleted", domain_id=id, account_id=account_id)
        return existing


__all__ = ["DomainService", "CreateDomainRequest", "UpdateDomainRequest"]
