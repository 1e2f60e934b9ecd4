import pytest

from dsalab.bounded_stack import BoundedStack, StackOverflowError, StackUnderflowError


def test_push_top_pop_ints():
    stack = BoundedStack()
    assert stack.empty()
    for value in (10, 20, 30):
        stack.push(value)
    assert stack.top() == 30
    assert stack.pop() == 30
    assert stack.top() == 20
    assert stack.pop() == 20
    assert stack.top() == 10
    assert stack.pop() == 10
    assert stack.empty()


def test_top_on_empty_stack():
    with pytest.raises(StackUnderflowError, match="Called top on empty stack."):
        BoundedStack().top()


def test_pop_on_empty_stack():
    with pytest.raises(StackUnderflowError, match="Called pop on empty stack."):
        BoundedStack().pop()


def test_push_on_full_stack():
    stack = BoundedStack()
    for value in range(1, 21):
        stack.push(value)
    assert stack.top() == 20
    assert len(stack) == 20
    with pytest.raises(StackOverflowError, match="Called push on full stack."):
        stack.push(21)
    assert stack.top() == 20


def test_stack_of_strings_then_top_on_empty():
    stack = BoundedStack()
    for value in ("A", "B", "C"):
        stack.push(value)
    assert [stack.pop() for _ in range(3)] == ["C", "B", "A"]
    assert stack.empty()
    with pytest.raises(StackUnderflowError):
        stack.top()


def test_custom_capacity():
    stack = BoundedStack(capacity=1)
    stack.push("x")
    with pytest.raises(StackOverflowError):
        stack.push("y")
    assert len(stack) == 1


def test_errors_are_standard_exception_kinds():
    with pytest.raises(IndexError):
        BoundedStack().pop()
    stack = BoundedStack(capacity=0)
    with pytest.raises(OverflowError):
        stack.push(1)