"""
Repository interfaces (ports) for the application layer.

A repository is a runtime store of entities backed by a collection. The
collection type is a type parameter, ListRepository fixes it to list.
"""

from collections.abc import Collection
from typing import Protocol, TypeVar, runtime_checkable

from crazy_generics.domain.entities.base import BaseEntity

E = TypeVar("E", bound=BaseEntity)
C = TypeVar("C", bound=Collection)


@runtime_checkable
class CollectionRepository(Protocol[E, C]):
    """Protocol for an in-memory entity store over any collection"""

    def save(self, entity: E) -> None:
        """Add an entity to the backing collection"""
        ...

    def get_entity_collection(self) -> C:
        """Return the live backing collection (not a copy)"""
        ...


@runtime_checkable
class ListRepository(CollectionRepository[E, list[E]], Protocol[E]):
    """Protocol for an entity store backed by a list"""
