"""Tests for AccountService against the in-memory repository."""

from datetime import datetime, timedelta, timezone

from core.entities import Account
from core.errors import ErrorKind, storage_error
from core.repositories import InMemoryAccountRepository
from core.result import Result
from core.services import AccountService, CreateAccountRequest, UpdateAccountRequest

from .conftest import FIXED_NOW


class FailingAccountRepository:
    """Repository double whose every operation fails at the storage layer."""

    def __init__(self):
        self.error = storage_error(ConnectionError("database is down"), "account operation")

    def get(self, id):
        return Result.failure(self.error)

    def count(self):
        return Result.failure(self.error)

    def query(self, offset, limit):
        return Result.failure(self.error)

    def create(self, account):
        return Result.failure(self.error)

    def update(self, account):
        return Result.failure(self.error)

    def delete(self, id):
        return Result.failure(self.error)


def test_create_then_get_returns_stored_account(account_service):
    created = account_service.create(CreateAccountRequest(email="  a@example.com ", firebase_id="fb"))

    assert created.ok
    assert created.value.id
    assert created.value.email == "a@example.com"
    assert created.value.firebase_id == "fb"
    assert created.value.created_at == FIXED_NOW
    assert created.value.updated_at == FIXED_NOW
    assert account_service.get(created.value.id).value == created.value


def test_create_invalid_request_stores_nothing(account_service, account_repo):
    result = account_service.create(CreateAccountRequest(email=""))

    assert result.error.kind is ErrorKind.VALIDATION
    assert result.error.fields == {"email": "cannot be blank"}
    assert account_repo.items == []


def test_count_grows_by_one_per_create(account_service):
    counts = [account_service.count().value]
    for i in range(3):
        account_service.create(CreateAccountRequest(email=f"user{i}@example.com"))
        counts.append(account_service.count().value)

    assert counts == [0, 1, 2, 3]


def test_query_pagination(account_service):
    for i in range(3):
        account_service.create(CreateAccountRequest(email=f"user{i}@example.com"))

    assert [a.email for a in account_service.query(0, 2).value] == ["user0@example.com", "user1@example.com"]
    assert [a.email for a in account_service.query(2, 2).value] == ["user2@example.com"]
    assert account_service.query(0, 0).value == []
    assert account_service.query(10, 5).value == []


def test_query_rejects_negative_bounds(account_service):
    result = account_service.query(-1, 10)

    assert result.error.kind is ErrorKind.VALIDATION
    assert "offset" in result.error.fields


def test_update_validates_before_lookup(account_service):
    invalid = account_service.update("999", UpdateAccountRequest(name=""))
    missing = account_service.update("999", UpdateAccountRequest(name="b@example.com"))

    assert invalid.error.kind is ErrorKind.VALIDATION
    assert missing.error.kind is ErrorKind.NOT_FOUND


def test_update_replaces_email_and_bumps_updated_at(account_repo):
    later = FIXED_NOW + timedelta(hours=1)
    times = iter([FIXED_NOW, later])
    service = AccountService(account_repo, clock=lambda: next(times))
    created = service.create(CreateAccountRequest(email="a@example.com")).value

    updated = service.update(created.id, UpdateAccountRequest(name=" b@example.com "))

    assert updated.value.email == "b@example.com"
    assert updated.value.created_at == FIXED_NOW
    assert updated.value.updated_at == later
    assert service.get(created.id).value == updated.value


def test_updated_at_never_precedes_created_at(account_repo):
    earlier = datetime(2020, 1, 1, tzinfo=timezone.utc)
    times = iter([FIXED_NOW, earlier])
    service = AccountService(account_repo, clock=lambda: next(times))
    created = service.create(CreateAccountRequest(email="a@example.com")).value

    updated = service.update(created.id, UpdateAccountRequest(name="b@example.com")).value

    assert updated.updated_at == updated.created_at


def test_delete_returns_prior_state_then_not_found(account_service):
    created = account_service.create(CreateAccountRequest(email="a@example.com")).value

    deleted = account_service.delete(created.id)

    assert deleted.value == created
    assert account_service.get(created.id).error.kind is ErrorKind.NOT_FOUND
    assert account_service.delete(created.id).error.kind is ErrorKind.NOT_FOUND
    assert account_service.count().value == 0


def test_end_to_end_lifecycle(fixed_clock):
    service = AccountService(InMemoryAccountRepository(), clock=fixed_clock)

    created = service.create(CreateAccountRequest(email="a@example.com")).value
    assert service.count().value == 1

    rejected = service.update(created.id, UpdateAccountRequest(name=""))
    assert rejected.error.kind is ErrorKind.VALIDATION
    assert service.get(created.id).value == created
    assert service.count().value == 1

    service.update(created.id, UpdateAccountRequest(name="admin@example.com"))
    assert service.get(created.id).value.email == "admin@example.com"
    assert service.delete(created.id).value.email == "admin@example.com"
    assert service.query(0, 10).value == []


def test_storage_failures_pass_through_unchanged():
    repo = FailingAccountRepository()
    service = AccountService(repo)

    assert service.get("1").error is repo.error
    assert service.count().error is repo.error
    assert service.query(0, 10).error is repo.error
    assert service.create(CreateAccountRequest(email="a@example.com")).error is repo.error
    assert service.update("1", UpdateAccountRequest(name="a@example.com")).error is repo.error
    assert service.delete("1").error is repo.error
    assert repo.error.kind is ErrorKind.STORAGE


def test_update_storage_failure_is_reported(account_repo, fixed_clock):
    account_repo.items.append(Account(id="1", email="a@example.com", created_at=FIXED_NOW))

    class RejectingUpdates(InMemoryAccountRepository):
        def update(self, account):
            return Result.failure(storage_error(TimeoutError(), "account update"))

    service = AccountService(RejectingUpdates(account_repo.items), clock=fixed_clock)
    result = service.update("1", UpdateAccountRequest(name="b@example.com"))

    assert result.error.kind is ErrorKind.STORAGE
    assert account_repo.items[0].email == "a@example.com"
