"""A stack kept on a doubly linked list."""

from __future__ import annotations

import argparse
from typing import Any, Iterator, Optional

from chainlab.doubly import DoublyLinkedList, EmptyListError


class Stack:
    """Last in, first out; iteration runs from top to bottom."""

    def __init__(self) -> None:
        self._items = DoublyLinkedList()

    def push(self, value: Any) -> None:
        """Put a value on top."""
        self._items.push_front(value)

    def pop(self) -> Any:
        """Remove and return the top value."""
        if self.is_empty():
            raise EmptyListError("Stack Empty")
        return self._items.pop_front()

    def peek(self) -> Any:
        """Return the top value without removing it."""
        if self.is_empty():
            raise EmptyListError("Stack Empty")
        return self._items.peek_front()

    def is_empty(self) -> bool:
        return not self._items

    def middle(self) -> Any:
        """Return the middle value counted from the top."""
        if self.is_empty():
            raise EmptyListError("Stack Empty")
        return self._items.middle()

    def __iter__(self) -> Iterator[Any]:
        return iter(self._items)

    def __reversed__(self) -> Iterator[Any]:
        return reversed(self._items)

    def __len__(self) -> int:
        return len(self._items)


def _pop_and_report(stack: Stack) -> None:
    try:
        print(f"{stack.pop()} is poped")
    except EmptyListError:
        print("Stack Empty")


def _line(values) -> str:
    return " ".join(str(value) for value in values)


def main(argv: Optional[list[str]] = None) -> int:
    argparse.ArgumentParser(description="Walk through stack operations.").parse_args(argv)
    stack = Stack()
    _pop_and_report(stack)
    for value in (10, 20, 30):
        stack.push(value)
    print(_line(stack))
    print(stack.peek())
    _pop_and_report(stack)
    print("Stack Empty" if stack.is_empty() else "Not Empty")
    print(_line(stack))
    for value in (40, 30, 35):
        stack.push(value)
    print(_line(stack))
    print(_line(reversed(stack)))
    print(_line(stack))
    print(stack.middle())
    print(stack._items.middle_from_ends())
    return 0