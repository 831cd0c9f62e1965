from crazy_generics.infrastructure.persistence.in_memory import InMemoryListRepository

__all__ = ["InMemoryListRepository"]
