"""Generic selection sort and checked element access."""

from __future__ import annotations

from collections.abc import MutableSequence, Sequence
from typing import Any, TypeVar

__all__ = ["min_index", "selection_sort", "letter_sequence", "get_element"]

T = TypeVar("T")


def min_index(values: Sequence[Any], start: int = 0) -> int:
    """Index of the first smallest value at or after ``start``."""
    if not 0 <= start < len(values):
        raise IndexError(f"start index {start} out of range")
    best = start
    for position in range(start + 1, len(values)):
        if values[position] < values[best]:
            best = position
    return best


def selection_sort(values: MutableSequence[Any]) -> None:
    """Sort ``values`` in ascending order, in place, by selection."""
    for position in range(len(values)):
        smallest = min_index(values, position)
        values[position], values[smallest] = values[smallest], values[position]


def letter_sequence(length: int) -> list[str]:
    """The first ``length`` characters counting up from 'a'."""
    if length < 0:
        raise ValueError("length must not be negative")
    return [chr(ord("a") + offset) for offset in range(length)]


def get_element(values: Sequence[T], index: int) -> T:
    """The value at ``index``; negative or too large indices raise IndexError."""
    if not 0 <= index < len(values):
        raise IndexError(f"index {index} out of range")
    return values[index]