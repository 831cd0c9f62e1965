"""
Base domain entity.

Every entity carries a UUID and a creation timestamp. An entity without a
UUID is "new": it has not been assigned an identity yet. Both identity
fields can be set exactly once.
"""

from abc import ABC
from collections.abc import Iterable
from dataclasses import dataclass
from datetime import datetime
from typing import Any, ClassVar
from uuid import UUID, uuid4

from crazy_generics.domain.exceptions import EntityIdentityException
from crazy_generics.shared.utils.datetime import utc_now


@dataclass(eq=False)
class BaseEntity(ABC):
    """
    Abstract base for entities identified by UUID.

    Construction variants:
        Entity()                     - new entity, no UUID yet
        Entity(uuid)                 - created_on defaults to now (UTC)
        Entity(uuid, created_on)     - both supplied

    Entities compare and hash by UUID. A new entity is only equal to itself,
    and its hash changes once a UUID is assigned, so assign before putting
    it in a set or using it as a dict key.

    Subclasses must be declared with `@dataclass(eq=False)` to keep UUID
    equality. Both base fields have defaults, so subclass fields need a
    default or `kw_only=True`:

        @dataclass(eq=False, kw_only=True)
        class Order(BaseEntity):
            total: int
    """

    uuid: UUID | None = None
    created_on: datetime | None = None

    _IDENTITY_FIELDS: ClassVar[frozenset[str]] = frozenset({"uuid", "created_on"})

    def __post_init__(self):
        if type(self) is BaseEntity:
            raise TypeError("BaseEntity is abstract; subclass it")
        if self.created_on is None:
            self.created_on = utc_now()

    def __setattr__(self, name: str, value: Any) -> None:
        if name in self._IDENTITY_FIELDS and getattr(self, name, None) is not None:
            raise EntityIdentityException(name, type(self).__name__)
        super().__setattr__(name, value)

    def __eq__(self, other: Any) -> bool:
        """Compare entities by UUID; new entities only by identity"""
        if not isinstance(other, BaseEntity):
            return NotImplemented
        if self.uuid is None or other.uuid is None:
            return self is other
        return self.uuid == other.uuid

    def __hash__(self) -> int:
        if self.uuid is None:
            return object.__hash__(self)
        return hash(self.uuid)

    @classmethod
    def generate(cls, **kwargs: Any):
        """Create an entity with a freshly generated UUID"""
        return cls(uuid=uuid4(), **kwargs)

    def is_new(self) -> bool:
        """An entity is new until it has a UUID"""
        return self.uuid is None

    def assign_uuid(self, uuid: UUID | None = None) -> UUID:
        """
        Give a new entity its identity.

        Generates a random UUID when none is passed.

        Raises:
            EntityIdentityException: if the entity already has a UUID
        """
        self.uuid = uuid or uuid4()
        return self.uuid

    @staticmethod
    def has_duplicates_by_uuid(entities: Iterable["BaseEntity"]) -> bool:
        """
        Check whether any two entities share a UUID.

        Stops at the first repeat. Two new entities (both without UUID) count
        as a repeat.
        """
        seen: set[UUID | None] = set()
        for entity in entities:
            if entity.uuid in seen:
                return True
            seen.add(entity.uuid)
        return False
