"""
Domain layer.

Entities, value objects and domain exceptions. It has no dependencies on
the other layers apart from the shared datetime helper.
"""

from crazy_generics.domain.entities import BaseEntity
from crazy_generics.domain.exceptions import (EntityIdentityException,
                                              GenericsException,
                                              IndexOutOfBoundsException,
                                              NoSuchElementException)
from crazy_generics.domain.value_objects import (Limited, MaxHolder, Sourced,
                                                 SupportsOrdering)

__all__ = [
    # Entities
    "BaseEntity",
    # Value Objects
    "Sourced",
    "Limited",
    "MaxHolder",
    "SupportsOrdering",
    # Exceptions
    "GenericsException",
    "IndexOutOfBoundsException",
    "NoSuchElementException",
    "EntityIdentityException",
]
