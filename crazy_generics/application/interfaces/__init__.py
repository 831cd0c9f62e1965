"""
Application layer interfaces (ports).

These protocols define the generic contracts the rest of the library is
written against.
"""

from crazy_generics.application.interfaces.comparable_collection import (
    ComparableCollection, ComparableList, compare_by_size)
from crazy_generics.application.interfaces.processors import (
    Converter, StrictlyProcessable, StrictProcessor, SupportsSerialization)
from crazy_generics.application.interfaces.repositories import (
    CollectionRepository, ListRepository)

__all__ = [
    # Functional interfaces
    "Converter",
    "StrictProcessor",
    "StrictlyProcessable",
    "SupportsSerialization",
    # Repository interfaces
    "CollectionRepository",
    "ListRepository",
    # Size-ordered collections
    "ComparableCollection",
    "ComparableList",
    "compare_by_size",
]
