"""Tests for the list-backed repositories."""

from core.entities import Account, Domain
from core.errors import ErrorKind
from core.repositories import InMemoryAccountRepository, InMemoryDomainRepository


def test_create_allocates_sequential_ids(account_repo):
    first = account_repo.create(Account(email="a@example.com"))
    second = account_repo.create(Account(email="b@example.com"))

    assert first.value.id == "1"
    assert second.value.id == "2"
    assert account_repo.count().value == 2


def test_create_keeps_supplied_id_and_continues_after_it():
    repo = InMemoryAccountRepository([Account(id="10", email="a@example.com")])

    created = repo.create(Account(email="b@example.com"))

    assert created.value.id == "11"


def test_create_duplicate_id_is_storage_failure():
    repo = InMemoryAccountRepository([Account(id="1", email="a@example.com")])

    result = repo.create(Account(id="1", email="b@example.com"))

    assert result.error.kind is ErrorKind.STORAGE
    assert repo.count().value == 1


def test_query_orders_numeric_ids_numerically():
    repo = InMemoryAccountRepository(
        [Account(id=i, email=f"{i}@example.com") for i in ("10", "2", "9")]
    )

    ids = [a.id for a in repo.query(0, 10).value]

    assert ids == ["2", "9", "10"]
    assert [a.id for a in repo.query(1, 1).value] == ["9"]
    assert repo.query(0, 0).value == []
    assert repo.query(5, 10).value == []


def test_get_update_delete_missing_account_is_not_found(account_repo):
    assert account_repo.get("1").error.kind is ErrorKind.NOT_FOUND
    assert account_repo.update(Account(id="1", email="x@example.com")).error.kind is ErrorKind.NOT_FOUND
    assert account_repo.delete("1").error.kind is ErrorKind.NOT_FOUND


def test_update_replaces_stored_account(account_repo):
    account_repo.create(Account(email="a@example.com"))

    assert account_repo.update(Account(id="1", email="new@example.com")).ok
    assert account_repo.get("1").value.email == "new@example.com"


def test_delete_removes_account(account_repo):
    account_repo.create(Account(email="a@example.com"))

    assert account_repo.delete("1").ok
    assert account_repo.get("1").error.kind is ErrorKind.NOT_FOUND
    assert account_repo.count().value == 0


def test_instances_do_not_share_state():
    first = InMemoryAccountRepository()
    second = InMemoryAccountRepository()

    first.create(Account(email="a@example.com"))

    assert second.count().value == 0


def test_domains_are_scoped_by_account():
    repo = InMemoryDomainRepository(
        [
            Domain(id="1", account_id="1", domain="one.example"),
            Domain(id="2", account_id="2", domain="two.example"),
            Domain(id="3", account_id="1", domain="three.example"),
        ]
    )

    assert repo.get("1", "1").value.domain == "one.example"
    assert repo.get("1", "2").error.kind is ErrorKind.NOT_FOUND
    assert repo.count("1").value == 2
    assert repo.count("99").value == 0
    assert [d.id for d in repo.query(0, 10, "1").value] == ["1", "3"]


def test_domain_update_and_delete_respect_owner():
    repo = InMemoryDomainRepository([Domain(id="1", account_id="1", domain="one.example")])

    assert repo.update(Domain(id="1", account_id="2", domain="x.example")).error.kind is ErrorKind.NOT_FOUND
    assert repo.delete("1", "2").error.kind is ErrorKind.NOT_FOUND
    assert repo.get("1", "1").value.domain == "one.example"

    assert repo.delete("1", "1").ok
    assert repo.count("1").value == 0


def test_domain_ids_are_unique_across_accounts(domain_repo):
    domain_repo.create(Domain(account_id="1", domain="a.example"))
    created = domain_repo.create(Domain(account_id="2", domain="a.example"))

    assert created.value.id == "2"
    assert domain_repo.create(Domain(id="1", account_id="3", domain="b.example")).error.kind is ErrorKind.STORAGE
