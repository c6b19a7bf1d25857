"""A doubly linked list with access from both ends."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable, Iterator, Optional


class EmptyListError(IndexError):
    """Raised when a value is taken from an empty list."""


@dataclass(eq=False, repr=False)
class _Node:
    value: Any
    prev: Optional["_Node"] = None
    next: Optional["_Node"] = None


class DoublyLinkedList:
    """Values linked in both directions, with a head and a tail."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._head: Optional[_Node] = None
        self._tail: Optional[_Node] = None
        self._size = 0
        for value in values:
            self.push_back(value)

    def push_front(self, value: Any) -> None:
        """Put a value before the head."""
        node = _Node(value, None, self._head)
        if self._head is None:
            self._tail = node
        else:
            self._head.prev = node
        self._head = node
        self._size += 1

    def push_back(self, value: Any) -> None:
        """Put a value after the tail."""
        node = _Node(value, self._tail, None)
        if self._tail is None:
            self._head = node
        else:
            self._tail.next = node
        self._tail = node
        self._size += 1

    def _unlink(self, node: _Node) -> Any:
        if node.prev is None:
            self._head = node.next
        else:
            node.prev.next = node.next
        if node.next is None:
            self._tail = node.prev
        else:
            node.next.prev = node.prev
        self._size -= 1
        return node.value

    def pop_front(self) -> Any:
        """Remove and return the head value."""
        if self._head is None:
            raise EmptyListError("list is empty")
        return self._unlink(self._head)

    def pop_back(self) -> Any:
        """Remove and return the tail value."""
        if self._tail is None:
            raise EmptyListError("list is empty")
        return self._unlink(self._tail)

    def peek_front(self) -> Any:
        """Return the head value without removing it."""
        if self._head is None:
            raise EmptyListError("list is empty")
        return self._head.value

    def remove(self, value: Any) -> None:
        """Remove the first occurrence of a value, searching from the head."""
        node = self._head
        while node is not None:
            if node.value == value:
                self._unlink(node)
                return
            node = node.next
        raise ValueError(f"{value!r} not in list")

    def find_from_ends(self, value: Any) -> bool:
        """Search for a value walking inwards from both ends at once."""
        front, back = self._head, self._tail
        if front is None:
            return False
        while front is not back and front.next is not back:
            if front.value == value or back.value == value:
                return True
            front, back = front.next, back.prev
        return front.value == value or back.value == value

    def middle(self) -> Any:
        """Return the middle value (the first of two) using slow and fast walkers."""
        if self._head is None:
            raise EmptyListError("list is empty")
        slow = fast = self._head
        while fast.next is not None and fast.next.next is not None:
            slow = slow.next
            fast = fast.next.next
        return slow.value

    def middle_from_ends(self) -> Any:
        """Return the middle value (the first of two) walking in from both ends."""
        if self._head is None:
            raise EmptyListError("list is empty")
        front, back = self._head, self._tail
        while back is not front and back is not front.next:
            front, back = front.next, back.prev
        return front.value

    def __iter__(self) -> Iterator[Any]:
        node = self._head
        while node is not None:
            yield node.value
            node = node.next

    def __reversed__(self) -> Iterator[Any]:
        node = self._tail
        while node is not None:
            yield node.value
            node = node.prev

    def __len__(self) -> int:
        return self._size

    def __bool__(self) -> bool:
        return self._head is not None

    def format(self) -> str:
        """Return the values from head to tail separated by spaces."""
        return " ".join(str(value) for value in self)