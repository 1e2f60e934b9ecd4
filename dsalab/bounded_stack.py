"""A stack that holds at most a fixed number of values."""

from __future__ import annotations

from typing import Generic, TypeVar

__all__ = ["StackOverflowError", "StackUnderflowError", "BoundedStack"]

MAX_SIZE = 20

T = TypeVar("T")


class StackOverflowError(OverflowError):
    """Raised when pushing onto a full stack."""


class StackUnderflowError(IndexError):
    """Raised when reading or popping an empty stack."""


class BoundedStack(Generic[T]):
    """A last-in first-out stack with a fixed capacity."""

    def __init__(self, capacity: int = MAX_SIZE) -> None:
        self.capacity = capacity
        self._items: list[T] = []

    def push(self, value: T) -> None:
        """Put ``value`` on top."""
        if len(self._items) >= self.capacity:
            raise StackOverflowError("Called push on full stack.")
        self._items.append(value)

    def pop(self) -> T:
        """Remove and return the top value."""
        if not self._items:
            raise StackUnderflowError("Called pop on empty stack.")
        return self._items.pop()

    def top(self) -> T:
        """The top value, left on the stack."""
        if not self._items:
            raise StackUnderflowError("Called top on empty stack.")
        return self._items[-1]

    def empty(self) -> bool:
        """Whether the stack holds no values."""
        return not self._items

    def __len__(self) -> int:
        return len(self._items)