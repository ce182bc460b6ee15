"""Tests for DomainService against the in-memory repository."""

from core.entities import Domain
from core.errors import ErrorKind, storage_error
from core.repositories import InMemoryDomainRepository
from core.result import Result
from core.services import CreateDomainRequest, DomainService, UpdateDomainRequest

from .conftest import FIXED_NOW


def test_create_then_get_within_owner(domain_service):
    created = domain_service.create(CreateDomainRequest(name=" example.com ", account_id="1"))

    assert created.value.domain == "example.com"
    assert created.value.account_id == "1"
    assert created.value.created_at == FIXED_NOW
    assert domain_service.get(created.value.id, "1").value == created.value


def test_domain_is_invisible_to_other_accounts(domain_service):
    created = domain_service.create(CreateDomainRequest(name="example.com", account_id="1")).value

    assert domain_service.get(created.id, "2").error.kind is ErrorKind.NOT_FOUND
    assert domain_service.count("2").value == 0
    assert domain_service.query(0, 10, "2").value == []
    assert domain_service.delete(created.id, "2").error.kind is ErrorKind.NOT_FOUND
    assert domain_service.count("1").value == 1


def test_create_rejects_invalid_account_id(domain_service, domain_repo):
    result = domain_service.create(CreateDomainRequest(name="example.com", account_id="-3"))

    assert result.error.kind is ErrorKind.VALIDATION
    assert result.error.fields == {"account_id": "must be no less than 0"}
    assert domain_repo.items == []


def test_query_is_scoped_and_paged(domain_service):
    for name in ("a.example", "b.example", "c.example"):
        domain_service.create(CreateDomainRequest(name=name, account_id="1"))
    domain_service.create(CreateDomainRequest(name="other.example", account_id="2"))

    assert [d.domain for d in domain_service.query(0, 2, "1").value] == ["a.example", "b.example"]
    assert [d.domain for d in domain_service.query(2, 2, "1").value] == ["c.example"]
    assert domain_service.query(0, 0, "1").value == []
    assert domain_service.query(0, -1, "1").error.kind is ErrorKind.VALIDATION


def test_update_uses_request_account_for_scope(domain_service):
    created = domain_service.create(CreateDomainRequest(name="example.com", account_id="1")).value

    wrong_owner = domain_service.update(created.id, UpdateDomainRequest(name="x.example", account_id="2"))
    renamed = domain_service.update(created.id, UpdateDomainRequest(name="example.org", account_id="1"))

    assert wrong_owner.error.kind is ErrorKind.NOT_FOUND
    assert renamed.value.domain == "example.org"
    assert renamed.value.account_id == "1"
    assert domain_service.get(created.id, "1").value.domain == "example.org"


def test_update_validates_before_lookup(domain_service):
    result = domain_service.update("404", UpdateDomainRequest(name="", account_id="1"))

    assert result.error.kind is ErrorKind.VALIDATION


def test_delete_returns_prior_state_then_not_found(domain_service):
    created = domain_service.create(CreateDomainRequest(name="example.com", account_id="1")).value

    assert domain_service.delete(created.id, "1").value == created
    assert domain_service.delete(created.id, "1").error.kind is ErrorKind.NOT_FOUND


def test_storage_failure_on_create_is_returned(fixed_clock):
    class BrokenStore(InMemoryDomainRepository):
        def create(self, domain):
            return Result.failure(storage_error(ConnectionError(), "domain create"))

    repo = BrokenStore([Domain(id="1", account_id="1", domain="example.com")])
    service = DomainService(repo, clock=fixed_clock)

    result = service.create(CreateDomainRequest(name="example.org", account_id="1"))

    assert result.error.kind is ErrorKind.STORAGE
    assert service.count("1").value == 1


def test_same_hostname_under_two_accounts_stays_separate(domain_service):
    first = domain_service.create(CreateDomainRequest(name="shared.example", account_id="1")).value
    second = domain_service.create(CreateDomainRequest(name="shared.example", account_id="2")).value

    assert first.id != second.id
    assert domain_service.get(first.id, "2").error.kind is ErrorKind.NOT_FOUND
    assert domain_service.delete(first.id, "1").ok
    assert domain_service.get(second.id, "2").value.domain == "shared.example"
