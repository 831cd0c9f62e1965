"""
Generic value containers.

Sourced pairs any value with the label of where it came from. Limited is a
numeric triple: an actual value with its min and max bounds.
"""

from dataclasses import dataclass, fields
from numbers import Number
from typing import Generic, TypeVar

T = TypeVar("T")
N = TypeVar("N", bound=Number)


@dataclass
class Sourced(Generic[T]):
    """A value along with the source it was obtained from"""

    value: T | None = None
    source: str | None = None


@dataclass(frozen=True)
class Limited(Generic[N]):
    """
    Value object holding an actual value and its inclusive bounds.

    All three values must be numbers; bools are rejected even though
    Python counts them as ints. Bound ordering is not checked, so
    min > max is accepted as given.
    """

    actual: N
    min: N
    max: N

    def __post_init__(self):
        for f in fields(self):
            value = getattr(self, f.name)
            if isinstance(value, bool) or not isinstance(value, Number):
                raise TypeError(
                    f"Limited.{f.name} must be a number, got {type(value).__name__}"
                )
