"""
Collections ordered by size.

Size does not depend on the element type, so collections of different
element types can be compared. Equality is left alone: two same-size
collections are ordering-equal without being ==.
"""

from collections import UserList
from collections.abc import Collection, Sized
from typing import Generic, TypeVar

E = TypeVar("E")


def compare_by_size(a: Sized, b: Sized) -> int:
    """Return -1, 0 or 1 as len(a) is less than, equal to or greater than len(b)"""
    return (len(a) > len(b)) - (len(a) < len(b))


class ComparableCollection(Collection, Generic[E]):
    """
    Mixin for collections comparable to any other sized collection.

    Subclasses still provide __len__, __iter__ and __contains__.
    """

    def compare_to(self, other: Sized) -> int:
        return compare_by_size(self, other)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Sized):
            return NotImplemented
        return self.compare_to(other) < 0

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Sized):
            return NotImplemented
        return self.compare_to(other) <= 0

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Sized):
            return NotImplemented
        return self.compare_to(other) > 0

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Sized):
            return NotImplemented
        return self.compare_to(other) >= 0


class ComparableList(ComparableCollection[E], UserList):
    """A list that orders by size instead of lexicographically"""
