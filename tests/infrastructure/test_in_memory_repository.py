"""Unit tests for InMemoryListRepository"""

import logging

from crazy_generics.infrastructure.persistence import InMemoryListRepository


def test_starts_empty():
    repository = InMemoryListRepository()

    assert repository.get_entity_collection() == []
    assert len(repository) == 0


def test_save_appends_in_order(account_factory):
    repository = InMemoryListRepository()
    first = account_factory("first")
    second = account_factory("second")

    repository.save(first)
    repository.save(second)

    assert repository.get_entity_collection() == [first, second]


def test_save_keeps_duplicates_and_new_entities(account_factory):
    repository = InMemoryListRepository()
    account = account_factory()
    draft = account_factory(new=True)

    repository.save(account)
    repository.save(account)
    repository.save(draft)

    assert len(repository) == 3


def test_collection_is_live(account_factory):
    """
    GIVEN a repository
    WHEN its collection is modified directly
    THEN the repository sees the change, and later saves show up in the list.
    """
    repository = InMemoryListRepository()
    entities = repository.get_entity_collection()

    entities.append(account_factory("direct"))
    repository.save(account_factory("saved"))

    assert repository.get_entity_collection() is entities
    assert [e.name for e in entities] == ["direct", "saved"]


def test_seed_entities_are_copied(account_factory):
    seed = [account_factory("a"), account_factory("b")]

    repository = InMemoryListRepository(seed)
    repository.save(account_factory("c"))

    assert len(seed) == 2
    assert len(repository) == 3


def test_save_logs_at_debug(account_factory, caplog):
    repository = InMemoryListRepository()
    account = account_factory()

    with caplog.at_level(logging.DEBUG, logger="crazy_generics.infrastructure.persistence.in_memory"):
        repository.save(account)

    assert f"Saved Account {account.uuid}" in caplog.text
