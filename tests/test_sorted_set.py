import pytest

from dsalab.int_list import IntList
from dsalab.sorted_set import SortedSet


def test_example_union_prints_sorted_values():
    ss = SortedSet()
    for value in (-97, 70, 99, 114):
        ss.add(value)
    ss1 = SortedSet()
    for value in (-97, 70, 99, 114):
        ss1.add(value)
    ss2 = ss | ss1
    ss1 |= ss2
    assert str(ss1) == "-97 70 99 114"


@pytest.mark.parametrize("values", [[5, 1, 3, 1, 5, 9], [3, 2, 1], [], [4, 4, 4], [-2, 10, -2, 0]])
def test_add_keeps_sorted_and_distinct(values):
    ss = SortedSet()
    for value in values:
        ss.add(value)
    assert list(ss) == sorted(set(values))
    assert len(ss) == len(set(values))


@pytest.mark.parametrize("method", ["push_front", "push_back", "insert_ordered"])
def test_other_insertions_go_through_add(method):
    values = [8, 2, 6, 2, 10, 0]
    ss = SortedSet()
    for value in values:
        getattr(ss, method)(value)
    assert list(ss) == sorted(set(values))


def test_construct_from_unsorted_int_list():
    source = IntList([9, 3, 9, 1, 3])
    ss = SortedSet(source)
    assert list(ss) == sorted(set(source))
    assert list(source) == [9, 3, 9, 1, 3]


def test_contains():
    ss = SortedSet([1, 5, 9])
    assert 5 in ss
    assert 4 not in ss
    assert 10 not in ss
    assert "5" not in ss


def test_union_and_intersection_match_python_sets():
    left_values, right_values = [1, 3, 5, 7], [3, 4, 5, 6]
    left, right = SortedSet(left_values), SortedSet(right_values)
    assert list(left | right) == sorted(set(left_values) | set(right_values))
    assert list(left & right) == sorted(set(left_values) & set(right_values))
    assert list(left) == left_values
    assert list(right) == right_values


def test_in_place_operators_update_same_object():
    left = SortedSet([1, 2, 3])
    before = left
    left |= SortedSet([3, 4])
    assert left is before
    assert list(left) == [1, 2, 3, 4]
    left &= SortedSet([2, 4, 6])
    assert left is before
    assert list(left) == [2, 4]


def test_operators_reject_other_types():
    with pytest.raises(TypeError):
        SortedSet([1]) | [2]
    with pytest.raises(TypeError):
        SortedSet([1]) & {1}