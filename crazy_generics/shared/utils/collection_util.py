"""Generic helpers over collections of values and entities."""

import sys
from collections.abc import Callable, Collection, Iterable, MutableSequence
from typing import Any, ClassVar, TextIO, TypeVar

from crazy_generics.domain.entities.base import BaseEntity
from crazy_generics.domain.exceptions import (IndexOutOfBoundsException,
                                              NoSuchElementException)
from crazy_generics.infrastructure.config.settings import get_settings
from crazy_generics.shared.telemetry.logging import get_logger

logger = get_logger(__name__)

T = TypeVar("T")
K = TypeVar("K")
E = TypeVar("E", bound=BaseEntity)

# Negative, zero or positive as the first argument is less than, equal to or
# greater than the second
Comparator = Callable[[T, T], int]


def comparing(key: Callable[[T], Any]) -> Comparator[T]:
    """Build a comparator that orders values by the result of `key`"""

    def compare(a: T, b: T) -> int:
        ka, kb = key(a), key(b)
        return (ka > kb) - (ka < kb)

    return compare


class CollectionUtil:
    """Stateless generic helpers. Every method is independent of the others."""

    CREATED_ON_COMPARATOR: ClassVar[Comparator[BaseEntity]] = comparing(
        lambda entity: entity.created_on
    )

    @staticmethod
    def print(
        elements: Iterable[Any],
        stream: TextIO | None = None,
        prefix: str | None = None,
    ) -> None:
        """
        Write a dashed list of elements, one per line.

        The prefix defaults to the configured `print_prefix`, the stream to
        stdout.
        """
        out = stream if stream is not None else sys.stdout
        if prefix is None:
            prefix = get_settings().print_prefix
        for element in elements:
            out.write(f"{prefix}{element}\n")

    @staticmethod
    def has_new_entities(entities: Iterable[BaseEntity]) -> bool:
        """True if at least one entity has no UUID assigned"""
        return any(entity.uuid is None for entity in entities)

    @staticmethod
    def is_valid_collection(
        entities: Iterable[E], validation_predicate: Callable[[E], bool]
    ) -> bool:
        """True if every entity satisfies the predicate (vacuously true when empty)"""
        return all(validation_predicate(entity) for entity in entities)

    @staticmethod
    def has_duplicates(entities: Iterable[E | None], target_entity: E | None) -> bool:
        """
        Check whether the target entity occurs more than once.

        Entities are matched by UUID. A missing target, or one without a
        UUID, never has duplicates. None entries and new entities in the
        collection are skipped.
        """
        if target_entity is None or target_entity.uuid is None:
            return False

        matches = sum(
            1
            for entity in entities
            if entity is not None
            and entity.uuid is not None
            and entity.uuid == target_entity.uuid
        )
        return matches > 1

    @staticmethod
    def find_max(elements: Iterable[T], comparator: Comparator[T]) -> T | None:
        """
        Return the greatest element according to the comparator.

        A later element replaces the running max only when it compares
        strictly greater, so the first of several equal elements wins.

        Returns:
            The max element, or None for an empty iterable
        """
        max_element: T | None = None
        found_any = False

        for element in elements:
            if not found_any or comparator(element, max_element) > 0:
                max_element = element
                found_any = True

        return max_element if found_any else None

    @classmethod
    def find_most_recently_created_entity(cls, entities: Collection[E]) -> E:
        """
        Return the entity with the latest `created_on`.

        Raises:
            NoSuchElementException: if the collection is empty
        """
        most_recent = cls.find_max(entities, cls.CREATED_ON_COMPARATOR)
        if most_recent is None:
            raise NoSuchElementException("No entities to pick the most recent one from")
        return most_recent

    @staticmethod
    def swap(elements: MutableSequence[Any], i: int, j: int) -> None:
        """
        Exchange the elements at positions i and j in place.

        Both indices are checked before anything is moved. Negative indices
        are out of range.

        Raises:
            IndexOutOfBoundsException: if either index is outside [0, len)
        """
        size = len(elements)
        for index in (i, j):
            if not 0 <= index < size:
                raise IndexOutOfBoundsException(index, size)

        elements[i], elements[j] = elements[j], elements[i]
        logger.debug("Swapped positions %d and %d", i, j)
