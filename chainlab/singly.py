"""A singly linked list with positional insertion and deletion."""

from __future__ import annotations

import argparse
import sys
from dataclasses import dataclass
from typing import Any, Iterable, Iterator, Optional


@dataclass(eq=False, repr=False)
class _Node:
    value: Any
    next: Optional["_Node"] = None


class SinglyLinkedList:
    """Values linked in one direction; positions are counted from 1."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._head: Optional[_Node] = None
        self._size = 0
        tail: Optional[_Node] = None
        for value in values:
            node = _Node(value)
            if tail is None:
                self._head = node
            else:
                tail.next = node
            tail = node
            self._size += 1

    def _node_at(self, position: int) -> _Node:
        node = self._head
        for _ in range(position - 1):
            node = node.next
        return node

    def insert_at_beginning(self, value: Any) -> None:
        """Put a value in front of the first one."""
        self._head = _Node(value, self._head)
        self._size += 1

    def insert_at_end(self, value: Any) -> None:
        """Put a value after the last one."""
        self.insert_at(value, self._size + 1)

    def insert_at(self, value: Any, position: int) -> None:
        """Insert a value so that it ends up at the given 1-based position."""
        if not 1 <= position <= self._size + 1:
            raise IndexError(f"position {position} out of range")
        if position == 1:
            self.insert_at_beginning(value)
            return
        previous = self._node_at(position - 1)
        previous.next = _Node(value, previous.next)
        self._size += 1

    def delete_at_beginning(self) -> Any:
        """Remove and return the first value."""
        if self._head is None:
            raise IndexError("delete from empty list")
        node = self._head
        self._head = node.next
        self._size -= 1
        return node.value

    def delete_at_end(self) -> Any:
        """Remove and return the last value."""
        if self._head is None:
            raise IndexError("delete from empty list")
        return self.delete_at(self._size)

    def delete_at(self, position: int) -> Any:
        """Remove and return the value at the given 1-based position."""
        if not 1 <= position <= self._size:
            raise IndexError(f"position {position} out of range")
        if position == 1:
            return self.delete_at_beginning()
        previous = self._node_at(position - 1)
        node = previous.next
        previous.next = node.next
        self._size -= 1
        return node.value

    def __iter__(self) -> Iterator[Any]:
        node = self._head
        while node is not None:
            yield node.value
            node = node.next

    def __len__(self) -> int:
        return self._size

    def __contains__(self, value: Any) -> bool:
        return any(item == value for item in self)

    def format(self) -> str:
        """Return the values separated by spaces."""
        return " ".join(str(value) for value in self)


def _demo() -> None:
    items = SinglyLinkedList()
    items.insert_at_beginning(5)
    items.insert_at_beginning(10)
    items.insert_at_beginning(20)
    print(items.format())
    items.insert_at_end(30)
    items.insert_at_end(40)
    print(items.format())
    items.insert_at(50, 3)
    print(items.format())
    items.delete_at_beginning()
    print(items.format())
    items.insert_at(20, 1)
    print(items.format())
    items.delete_at_end()
    print(items.format())


def _search(parser: argparse.ArgumentParser) -> None:
    tokens = sys.stdin.read().split()
    try:
        count = int(tokens[0])
        values = [int(token) for token in tokens[1 : 1 + count]]
        target = int(tokens[1 + count])
    except (IndexError, ValueError):
        parser.error("expected a count, that many integers and a value to find")
    items = SinglyLinkedList()
    for value in values:
        items.insert_at_beginning(value)
    print("Found" if target in items else "Not Found")


def main(argv: Optional[list[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Singly linked list operations.")
    parser.add_argument(
        "command",
        nargs="?",
        choices=("demo", "search"),
        default="demo",
        help="demo: run the insertion/deletion walk-through; "
        "search: read n, n integers and a value from stdin",
    )
    args = parser.parse_args(argv)
    if args.command == "search":
        _search(parser)
    else:
        _demo()
    return 0