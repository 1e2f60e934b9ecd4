"""Quicksort with two pivot choices and insertion sort, with a timing command."""

from __future__ import annotations

import argparse
import random
import sys
import time
from collections.abc import Callable, MutableSequence

__all__ = [
    "partition_midpoint",
    "partition_median_of_three",
    "quicksort_midpoint",
    "quicksort_median_of_three",
    "insertion_sort",
    "random_numbers",
    "main",
]

NUMBERS_SIZE = 50000


def _partition(numbers: MutableSequence[int], low: int, high: int, pivot: int) -> int:
    left, right = low, high
    while True:
        while numbers[left] < pivot:
            left += 1
        while pivot < numbers[right]:
            right -= 1
        if left >= right:
            return right
        numbers[left], numbers[right] = numbers[right], numbers[left]
        left += 1
        right -= 1


def partition_midpoint(numbers: MutableSequence[int], low: int, high: int) -> int:
    """Partition ``numbers[low:high + 1]`` around its middle element; return the low part's end."""
    return _partition(numbers, low, high, numbers[low + (high - low) // 2])


def partition_median_of_three(numbers: MutableSequence[int], low: int, high: int) -> int:
    """Partition around the median of the first, middle and last elements."""
    middle = (low + high) // 2
    median = sorted((numbers[low], numbers[middle], numbers[high]))[1]
    if median == numbers[low]:
        pivot_index = low
    elif median == numbers[high]:
        pivot_index = high
    else:
        pivot_index = middle
    return _partition(numbers, low, high, numbers[pivot_index])


def _quicksort(
    partition: Callable[[MutableSequence[int], int, int], int],
    numbers: MutableSequence[int],
    low: int,
    high: int,
) -> None:
    if low >= high:
        return
    split = partition(numbers, low, high)
    _quicksort(partition, numbers, low, split)
    _quicksort(partition, numbers, split + 1, high)


def quicksort_midpoint(numbers: MutableSequence[int], low: int = 0, high: int | None = None) -> None:
    """Sort ``numbers[low:high + 1]`` in place using midpoint pivots."""
    _quicksort(partition_midpoint, numbers, low, len(numbers) - 1 if high is None else high)


def quicksort_median_of_three(
    numbers: MutableSequence[int], low: int = 0, high: int | None = None
) -> None:
    """Sort ``numbers[low:high + 1]`` in place using median-of-three pivots."""
    _quicksort(partition_median_of_three, numbers, low, len(numbers) - 1 if high is None else high)


def insertion_sort(numbers: MutableSequence[int]) -> None:
    """Sort ``numbers`` in place by insertion."""
    for start in range(1, len(numbers)):
        position = start
        while position > 0 and numbers[position] < numbers[position - 1]:
            numbers[position], numbers[position - 1] = numbers[position - 1], numbers[position]
            position -= 1


def random_numbers(count: int, rng: random.Random | None = None) -> list[int]:
    """``count`` random integers between 0 and ``count`` inclusive."""
    generator = rng if rng is not None else random.Random()
    return [generator.randint(0, count) for _ in range(count)]


def _time_ms(sort: Callable[[list[int]], None], numbers: list[int]) -> int:
    start = time.process_time()
    sort(numbers)
    return int((time.process_time() - start) * 1000)


def main(argv: list[str] | None = None) -> int:
    """Print the milliseconds each sort takes on the same random numbers."""
    parser = argparse.ArgumentParser(description="Time quicksort and insertion sort.")
    parser.add_argument("--size", type=int, default=NUMBERS_SIZE, help="how many numbers to sort")
    parser.add_argument("--seed", type=int, default=None, help="seed for the random numbers")
    args = parser.parse_args(sys.argv[1:] if argv is None else argv)

    numbers = random_numbers(args.size, random.Random(args.seed))
    for sort in (quicksort_midpoint, quicksort_median_of_three, insertion_sort):
        print(_time_ms(sort, list(numbers)))
    return 0


if __name__ == "__main__":
    sys.exit(main())