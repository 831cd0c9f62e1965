"""Domain value objects."""

from crazy_generics.domain.value_objects.containers import Limited, Sourced
from crazy_generics.domain.value_objects.max_holder import MaxHolder, SupportsOrdering

__all__ = [
    "Sourced",
    "Limited",
    "MaxHolder",
    "SupportsOrdering",
]
