"""An ordered set of integers kept in a linked list."""

from __future__ import annotations

from collections.abc import Iterable

from dsalab.int_list import IntList

__all__ = ["SortedSet"]


class SortedSet(IntList):
    """Distinct integers kept in ascending order; every insertion goes through ``add``."""

    def __init__(self, values: Iterable[int] = ()) -> None:
        super().__init__(values)

    def add(self, value: int) -> None:
        """Insert ``value`` in its place unless it is already present."""
        head = self._head
        if head is None or value < head.value:
            self._prepend(value)
            return
        node = head
        while node.next is not None and node.next.value <= value:
            node = node.next
        if node.value != value:
            self._insert_after(node, value)

    def push_front(self, value: int) -> None:
        """Same as ``add``: the order is kept."""
        self.add(value)

    def push_back(self, value: int) -> None:
        """Same as ``add``: the order is kept."""
        self.add(value)

    def insert_ordered(self, value: int) -> None:
        """Same as ``add``."""
        self.add(value)

    def __contains__(self, value: object) -> bool:
        if not isinstance(value, int):
            return False
        for item in self:
            if item == value:
                return True
            if item > value:
                return False
        return False

    def __or__(self, other: object) -> SortedSet:
        if not isinstance(other, SortedSet):
            return NotImplemented
        result = SortedSet(other)
        for value in self:
            result.add(value)
        return result

    def __and__(self, other: object) -> SortedSet:
        if not isinstance(other, SortedSet):
            return NotImplemented
        return SortedSet(value for value in other if value in self)

    def __ior__(self, other: object) -> SortedSet:
        if not isinstance(other, SortedSet):
            return NotImplemented
        for value in other:
            self.add(value)
        return self

    def __iand__(self, other: object) -> SortedSet:
        if not isinstance(other, SortedSet):
            return NotImplemented
        kept = [value for value in other if value in self]
        self.clear()
        for value in kept:
            self.add(value)
        return self