"""A doubly linked list of integers with sentinel head and tail nodes."""

from __future__ import annotations

from collections.abc import Iterable, Iterator

__all__ = ["DoublyLinkedList"]


class _Node:
    __slots__ = ("value", "prev", "next")

    def __init__(self, value: int) -> None:
        self.value = value
        self.prev: _Node | None = None
        self.next: _Node | None = None


class DoublyLinkedList:
    """Integers linked both ways between two sentinel nodes."""

    def __init__(self, values: Iterable[int] = ()) -> None:
        self._head = _Node(0)
        self._tail = _Node(0)
        self._head.next = self._tail
        self._tail.prev = self._head
        self._size = 0
        for value in values:
            self.push_back(value)

    def _link_after(self, anchor: _Node, value: int) -> None:
        node = _Node(value)
        following = anchor.next
        assert following is not None
        node.prev = anchor
        node.next = following
        anchor.next = node
        following.prev = node
        self._size += 1

    def _unlink(self, node: _Node) -> int:
        assert node.prev is not None and node.next is not None
        node.prev.next = node.next
        node.next.prev = node.prev
        self._size -= 1
        return node.value

    def push_front(self, value: int) -> None:
        """Add ``value`` at the front."""
        self._link_after(self._head, value)

    def push_back(self, value: int) -> None:
        """Add ``value`` at the back."""
        assert self._tail.prev is not None
        self._link_after(self._tail.prev, value)

    def pop_front(self) -> int | None:
        """Remove and return the first value; an empty list is left as it is."""
        if not self._size:
            return None
        assert self._head.next is not None
        return self._unlink(self._head.next)

    def pop_back(self) -> int | None:
        """Remove and return the last value; an empty list is left as it is."""
        if not self._size:
            return None
        assert self._tail.prev is not None
        return self._unlink(self._tail.prev)

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[int]:
        node = self._head.next
        while node is not self._tail:
            assert node is not None
            yield node.value
            node = node.next

    def __reversed__(self) -> Iterator[int]:
        node = self._tail.prev
        while node is not self._head:
            assert node is not None
            yield node.value
            node = node.prev

    def __str__(self) -> str:
        return " ".join(str(value) for value in self)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"

    def format_reverse(self) -> str:
        """The values back to front, separated by spaces."""
        return " ".join(str(value) for value in reversed(self))