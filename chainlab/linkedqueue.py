"""A queue kept on a doubly linked list."""

from __future__ import annotations

import argparse
from typing import Any, Iterator, Optional

from chainlab.doubly import DoublyLinkedList, EmptyListError


class Queue:
    """First in, first out; iteration runs from front to back."""

    def __init__(self) -> None:
        self._items = DoublyLinkedList()

    def enqueue(self, value: Any) -> None:
        """Add a value at the back."""
        self._items.push_back(value)

    def dequeue(self) -> Any:
        """Remove and return the front value."""
        if self.is_empty():
            raise EmptyListError("Empty")
        return self._items.pop_front()

    def is_empty(self) -> bool:
        return not self._items

    def __iter__(self) -> Iterator[Any]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)


def _render(queue: Queue) -> str:
    """Return the queue's values from front to back, space separated."""
    return " ".join(str(value) for value in queue)


def main(argv: Optional[list[str]] = None) -> int:
    argparse.ArgumentParser(description="Walk through queue operations.").parse_args(argv)
    queue = Queue()

    queue.enqueue(10)
    queue.enqueue(20)
    print(_render(queue))
    queue.enqueue(50)
    print(_render(queue))
    queue.dequeue()
    print(_render(queue))
    return 0