"""Domain entities."""

from crazy_generics.domain.entities.base import BaseEntity

__all__ = [
    "BaseEntity",
]
