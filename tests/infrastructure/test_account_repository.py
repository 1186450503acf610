from __future__ import annotations

import pytest

from domain.exceptions import NotFoundError
from infrastructure.repositories.account_repository import DEFAULT_ACCOUNTS, AccountRepository
from infrastructure.storage.in_memory_store import InMemoryKeyValueStore


def test_two_empty_slots_by_default() -> None:
    repo = AccountRepository(InMemoryKeyValueStore())

    assert sorted(repo.get_all()) == ["1", "2"]
    assert repo.get_token("1") is None


def test_set_merges_into_slot() -> None:
    repo = AccountRepository(InMemoryKeyValueStore())

    repo.set("1", {"email": "a@b.c", "token": "tok"})
    repo.set("1", {"refresh": "ref"})

    account = repo.get("1")
    assert account["email"] == "a@b.c"
    assert account["refresh"] == "ref"
    assert repo.get_token("1") == "tok"
    assert repo.get_token(1) == "tok"


def test_clear_slot() -> None:
    repo = AccountRepository(InMemoryKeyValueStore())
    repo.set("2", {"token": "tok"})

    repo.clear("2")

    assert repo.get_token("2") is None
    with pytest.raises(NotFoundError):
        repo.clear("9")


def test_clear_all() -> None:
    repo = AccountRepository(InMemoryKeyValueStore())
    repo.set("1", {"token": "a"})
    repo.set("2", {"token": "b"})

    repo.clear_all()

    assert repo.get_token("1") is None
    assert repo.get_token("2") is None


def test_corrupt_document_does_not_leak_into_defaults() -> None:
    store = InMemoryKeyValueStore()
    store.save("apiTester_accounts", "not a dict")
    repo = AccountRepository(store)

    accounts = repo.get_all()
    accounts["1"]["token"] = "leaked"
    repo.set("2", {"token": "tok"})

    assert DEFAULT_ACCOUNTS["1"]["token"] == ""
    assert DEFAULT_ACCOUNTS["2"]["token"] == ""
