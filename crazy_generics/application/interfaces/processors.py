"""
Functional contracts (ports).

Converter maps one value to another of an independent type. StrictProcessor
accepts only values that are both orderable and serializable.
"""

from typing import Any, Protocol, TypeVar, runtime_checkable

from crazy_generics.domain.value_objects.max_holder import SupportsOrdering

T_contra = TypeVar("T_contra", contravariant=True)
R_co = TypeVar("R_co", covariant=True)


@runtime_checkable
class Converter(Protocol[T_contra, R_co]):
    """Protocol for one-argument converters"""

    def convert(self, obj: T_contra) -> R_co:
        """Convert a source object into the result type"""
        ...


@runtime_checkable
class SupportsSerialization(Protocol):
    """Objects that can be pickled"""

    def __reduce__(self) -> str | tuple[Any, ...]: ...


@runtime_checkable
class StrictlyProcessable(SupportsOrdering, SupportsSerialization, Protocol):
    """Both orderable and serializable"""


S_contra = TypeVar("S_contra", bound=StrictlyProcessable, contravariant=True)


@runtime_checkable
class StrictProcessor(Protocol[S_contra]):
    """Protocol for processors restricted to orderable, serializable values"""

    def process(self, obj: S_contra) -> None:
        """Process a single value"""
        ...
