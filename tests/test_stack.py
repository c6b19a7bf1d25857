import pytest

from chainlab.doubly import EmptyListError
from chainlab.stack import Stack, main


def test_push_pop_is_lifo():
    stack = Stack()
    for value in [1, 2, 3]:
        stack.push(value)
    assert [stack.pop(), stack.pop(), stack.pop()] == [3, 2, 1]
    assert stack.is_empty()


def test_iteration_top_to_bottom():
    stack = Stack()
    for value in [1, 2, 3]:
        stack.push(value)
    assert list(stack) == [3, 2, 1]
    assert list(reversed(stack)) == [1, 2, 3]
    assert len(stack) == 3


def test_pop_empty_raises():
    with pytest.raises(EmptyListError):
        Stack().pop()


def test_peek_empty_raises():
    with pytest.raises(EmptyListError):
        Stack().peek()


def test_peek_does_not_remove():
    stack = Stack()
    stack.push(7)
    assert stack.peek() == 7
    assert len(stack) == 1
    assert not stack.is_empty()


def test_pop_last_element_leaves_empty_stack():
    stack = Stack()
    stack.push(1)
    assert stack.pop() == 1
    assert stack.is_empty()
    assert list(reversed(stack)) == []


def test_middle_matches_iteration():
    stack = Stack()
    for value in range(5):
        stack.push(value)
    items = list(stack)
    assert stack.middle() in items
    assert items.index(stack.middle()) == len(items) // 2


def test_middle_empty_raises():
    with pytest.raises(EmptyListError):
        Stack().middle()


def test_main_demo(capsys):
    assert main([]) == 0
    lines = capsys.readouterr().out.strip().splitlines()
    assert lines[0] == "Stack Empty"
    assert "30 is poped" in lines
    assert "Not Empty" in lines
    assert lines[-1] == lines[-2]