from typing import Any, Generic, Protocol, TypeVar


class SupportsOrdering(Protocol):
    """Anything that can be ordered with <"""

    def __lt__(self, other: Any, /) -> bool: ...


O = TypeVar("O", bound=SupportsOrdering)


class MaxHolder(Generic[O]):
    """
    Keeps track of the greatest value put into it.

    A value replaces the current max only when it is strictly greater, so the
    first of several equal values is the one retained. None is ignored.
    """

    def __init__(self, max: O | None = None):
        self._max = max

    @property
    def max(self) -> O | None:
        return self._max

    def get_max(self) -> O | None:
        return self._max

    def put(self, value: O | None) -> None:
        if value is None:
            return
        if self._max is None or self._max < value:
            self._max = value
