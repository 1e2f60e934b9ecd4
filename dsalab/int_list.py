"""A singly linked list of integers with head and tail references."""

from __future__ import annotations

from collections.abc import Iterable, Iterator

__all__ = ["IntList"]


class _Node:
    __slots__ = ("value", "next")

    def __init__(self, value: int, next_node: _Node | None = None) -> None:
        self.value = value
        self.next = next_node


class IntList:
    """Integers linked front to back, with cheap access to both ends."""

    def __init__(self, values: Iterable[int] = ()) -> None:
        self._head: _Node | None = None
        self._tail: _Node | None = None
        self._size = 0
        for value in values:
            self.push_back(value)

    # ------------------------------------------------------------ linking
    def _prepend(self, value: int) -> None:
        self._head = _Node(value, self._head)
        if self._tail is None:
            self._tail = self._head
        self._size += 1

    def _append(self, value: int) -> None:
        node = _Node(value)
        if self._tail is None:
            self._head = node
        else:
            self._tail.next = node
        self._tail = node
        self._size += 1

    def _insert_after(self, anchor: _Node, value: int) -> None:
        anchor.next = _Node(value, anchor.next)
        if anchor is self._tail:
            self._tail = anchor.next
        self._size += 1

    def _walk(self, start: _Node | None) -> Iterator[_Node]:
        node = start
        while node is not None:
            yield node
            node = node.next

    # ------------------------------------------------------------- public
    def push_front(self, value: int) -> None:
        """Add ``value`` at the front."""
        self._prepend(value)

    def push_back(self, value: int) -> None:
        """Add ``value`` at the back."""
        self._append(value)

    def pop_front(self) -> int | None:
        """Remove and return the first value; an empty list is left as it is."""
        if self._head is None:
            return None
        node = self._head
        self._head = node.next
        if self._head is None:
            self._tail = None
        self._size -= 1
        return node.value

    def front(self) -> int:
        """The first value."""
        if self._head is None:
            raise IndexError("front of an empty list")
        return self._head.value

    def back(self) -> int:
        """The last value."""
        if self._tail is None:
            raise IndexError("back of an empty list")
        return self._tail.value

    def clear(self) -> None:
        """Remove every value."""
        self._head = None
        self._tail = None
        self._size = 0

    def selection_sort(self) -> None:
        """Sort the values in ascending order, in place."""
        for node in self._walk(self._head):
            for other in self._walk(node.next):
                if other.value < node.value:
                    node.value, other.value = other.value, node.value

    def insert_ordered(self, value: int) -> None:
        """Insert ``value`` in its place in an ascending list."""
        head, tail = self._head, self._tail
        if head is None or tail is None:
            self._prepend(value)
        elif head is tail:
            if head.value >= value:
                self._prepend(value)
            else:
                self._append(value)
        elif tail.value <= value:
            self._append(value)
        elif head.value >= value:
            self._prepend(value)
        else:
            previous = head
            while previous.next is not None and not (
                previous.value <= value <= previous.next.value
            ):
                previous = previous.next
            self._insert_after(previous, value)

    def remove_duplicates(self) -> None:
        """Drop every value that appeared earlier in the list, keeping first occurrences."""
        seen: set[int] = set()
        previous: _Node | None = None
        for node in self._walk(self._head):
            if node.value in seen:
                assert previous is not None
                previous.next = node.next
                self._size -= 1
            else:
                seen.add(node.value)
                previous = node
        self._tail = previous

    def copy(self) -> IntList:
        """An independent list holding the same values."""
        return type(self)(self)

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[int]:
        return (node.value for node in self._walk(self._head))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, IntList):
            return NotImplemented
        return list(self) == list(other)

    def __str__(self) -> str:
        return " ".join(str(value) for value in self)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"