"""
crazy-generics: generic containers, contracts and collection helpers.

Layers:
    domain          - entities, value objects, exceptions
    application     - generic contracts (protocols)
    infrastructure  - configuration and in-memory repository
    shared          - collection utilities, logging, datetime helpers
"""

from crazy_generics.application.interfaces import (CollectionRepository,
                                                   ComparableCollection,
                                                   ComparableList, Converter,
                                                   ListRepository,
                                                   StrictProcessor,
                                                   compare_by_size)
from crazy_generics.domain import (BaseEntity, EntityIdentityException,
                                   GenericsException,
                                   IndexOutOfBoundsException, Limited,
                                   MaxHolder, NoSuchElementException, Sourced)
from crazy_generics.infrastructure.persistence import InMemoryListRepository
from crazy_generics.shared.utils.collection_util import (CollectionUtil,
                                                         Comparator, comparing)

__all__ = [
    "BaseEntity",
    "Sourced",
    "Limited",
    "MaxHolder",
    "Converter",
    "StrictProcessor",
    "CollectionRepository",
    "ListRepository",
    "ComparableCollection",
    "ComparableList",
    "compare_by_size",
    "InMemoryListRepository",
    "CollectionUtil",
    "Comparator",
    "comparing",
    "GenericsException",
    "IndexOutOfBoundsException",
    "NoSuchElementException",
    "EntityIdentityException",
]
