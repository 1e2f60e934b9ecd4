import random

import pytest

from dsalab.sorting import (
    insertion_sort,
    main,
    partition_median_of_three,
    partition_midpoint,
    quicksort_median_of_three,
    quicksort_midpoint,
    random_numbers,
)


def samples():
    rng = random.Random(11)
    yield []
    yield [1]
    yield [2, 1]
    yield [5, 5, 5, 5]
    yield list(range(20))
    yield list(range(20, 0, -1))
    for size in (3, 17, 64, 200):
        yield [rng.randint(-50, 50) for _ in range(size)]


def partition_samples():
    rng = random.Random(3)
    for _ in range(50):
        yield [rng.randint(0, 30) for _ in range(rng.randint(2, 40))]


@pytest.mark.parametrize("data", list(samples()))
def test_quicksort_midpoint_matches_sorted(data):
    numbers = list(data)
    quicksort_midpoint(numbers)
    assert numbers == sorted(data)


@pytest.mark.parametrize("data", list(samples()))
def test_quicksort_median_of_three_matches_sorted(data):
    numbers = list(data)
    quicksort_median_of_three(numbers)
    assert numbers == sorted(data)


@pytest.mark.parametrize("data", list(samples()))
def test_insertion_sort_matches_sorted(data):
    numbers = list(data)
    insertion_sort(numbers)
    assert numbers == sorted(data)


@pytest.mark.parametrize("data", list(partition_samples()))
def test_partition_midpoint_splits_range(data):
    numbers = list(data)
    split = partition_midpoint(numbers, 0, len(numbers) - 1)
    assert 0 <= split < len(numbers) - 1
    assert max(numbers[: split + 1]) <= min(numbers[split + 1:])
    assert sorted(numbers) == sorted(data)


@pytest.mark.parametrize("data", list(partition_samples()))
def test_partition_median_of_three_splits_range(data):
    numbers = list(data)
    split = partition_median_of_three(numbers, 0, len(numbers) - 1)
    assert 0 <= split < len(numbers) - 1
    assert max(numbers[: split + 1]) <= min(numbers[split + 1:])
    assert sorted(numbers) == sorted(data)


def test_quicksort_midpoint_subrange_leaves_rest():
    numbers = [9, 8, 7, 6, 5, 4, 3, 2, 1]
    quicksort_midpoint(numbers, 2, 6)
    assert numbers[:2] == [9, 8]
    assert numbers[7:] == [2, 1]
    assert numbers[2:7] == [3, 4, 5, 6, 7]


def test_quicksort_median_of_three_subrange_leaves_rest():
    numbers = [9, 8, 7, 6, 5, 4, 3, 2, 1]
    quicksort_median_of_three(numbers, 2, 6)
    assert numbers[:2] == [9, 8]
    assert numbers[7:] == [2, 1]
    assert numbers[2:7] == [3, 4, 5, 6, 7]


def test_random_numbers_range_and_determinism():
    first = random_numbers(500, random.Random(42))
    second = random_numbers(500, random.Random(42))
    assert first == second
    assert len(first) == 500
    assert all(0 <= value <= 500 for value in first)


def test_random_numbers_zero():
    assert random_numbers(0, random.Random(1)) == []


def test_main_prints_three_timings(capsys):
    assert main(["--size", "200", "--seed", "5"]) == 0
    lines = capsys.readouterr().out.split()
    assert len(lines) == 3
    assert all(int(line) >= 0 for line in lines)