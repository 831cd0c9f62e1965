"""
Domain exceptions for crazy-generics.

Each exception also derives from the closest built-in exception so callers
can catch either the domain type or the standard one.
"""

from typing import Any, ClassVar


class GenericsException(Exception):
    """
    Base exception for all crazy-generics errors.

    Subclasses set `code`; the base falls back to its class name.
    Structured context goes into `details`.
    """

    code: ClassVar[str | None] = None

    def __init__(self, message: str, **details: Any):
        super().__init__(message)
        self.message = message
        self.details = details

    @property
    def error_code(self) -> str:
        return self.code or type(self).__name__

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": self.error_code,
            "message": self.message,
            "details": self.details,
        }


class IndexOutOfBoundsException(GenericsException, IndexError):
    """Raised when an index falls outside [0, size)."""

    code = "INDEX_OUT_OF_BOUNDS"

    def __init__(self, index: int, size: int):
        super().__init__(
            f"Index {index} out of bounds for length {size}", index=index, size=size
        )


class NoSuchElementException(GenericsException, LookupError):
    """Raised when a value is requested from an empty source."""

    code = "NO_SUCH_ELEMENT"

    def __init__(self, message: str = "No value present"):
        super().__init__(message)


class EntityIdentityException(GenericsException, ValueError):
    """Raised when an entity's identity fields are reassigned."""

    code = "ENTITY_IDENTITY_ERROR"

    def __init__(self, field: str, entity_type: str):
        super().__init__(
            f"{entity_type}.{field} is already assigned",
            field=field,
            entity_type=entity_type,
        )
