"""Shared test fixtures for pytest"""
from dataclasses import dataclass
from datetime import UTC, datetime, timedelta
from uuid import UUID, uuid4

import pytest

from crazy_generics.domain.entities.base import BaseEntity
from crazy_generics.infrastructure.config.settings import get_settings

BASE_TIME = datetime(2023, 1, 1, 12, 0, tzinfo=UTC)


@dataclass(eq=False)
class Account(BaseEntity):
    """Concrete entity used across tests"""

    name: str = ""
    active: bool = True


@pytest.fixture(autouse=True)
def clear_settings_cache():
    """Settings are lru_cached; start each test from a clean environment read"""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def account_factory():
    """
    Build accounts with predictable timestamps.

    `minutes` offsets created_on from BASE_TIME. `new=True` leaves the UUID
    unassigned; otherwise `uuid` is used or a random one generated.
    """

    def _create(
        name: str = "account",
        uuid: UUID | None = None,
        minutes: int = 0,
        active: bool = True,
        new: bool = False,
    ) -> Account:
        return Account(
            uuid=None if new else (uuid or uuid4()),
            created_on=BASE_TIME + timedelta(minutes=minutes),
            name=name,
            active=active,
        )

    return _create
