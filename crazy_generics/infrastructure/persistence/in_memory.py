from collections.abc import Iterable
from typing import Generic, TypeVar

from crazy_generics.domain.entities.base import BaseEntity
from crazy_generics.shared.telemetry.logging import get_logger

logger = get_logger(__name__)

E = TypeVar("E", bound=BaseEntity)


class InMemoryListRepository(Generic[E]):
    """
    List-backed entity store (implements ListRepository).

    The backing list is handed out as-is, so changes made through it are
    visible to the repository and vice versa.
    """

    def __init__(self, entities: Iterable[E] | None = None):
        self._entities: list[E] = list(entities) if entities is not None else []

    def save(self, entity: E) -> None:
        """Append an entity to the store"""
        self._entities.append(entity)
        logger.debug(
            "Saved %s %s (%d stored)",
            type(entity).__name__,
            entity.uuid,
            len(self._entities),
        )

    def get_entity_collection(self) -> list[E]:
        return self._entities

    def __len__(self) -> int:
        return len(self._entities)
