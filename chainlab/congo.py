"""A congo line: dancers join at the back and leave from the front."""

from __future__ import annotations

import argparse
import sys
from typing import Iterator, Optional

from chainlab.doubly import DoublyLinkedList, EmptyListError

_MENU = (
    "\n--- Congo Line Menu ---\n"
    "1. Join the line\n"
    "2. Leave the line\n"
    "3. Show Congo line\n"
    "4. Exit\n"
)


class CongoLine:
    """A queue of dancer names."""

    def __init__(self) -> None:
        self._dancers = DoublyLinkedList()

    def join(self, name: str) -> None:
        """Add a dancer at the back of the line."""
        self._dancers.push_back(name)

    def leave(self) -> str:
        """Remove and return the dancer at the front."""
        if not self._dancers:
            raise EmptyListError("Empty")
        return self._dancers.pop_front()

    def __iter__(self) -> Iterator[str]:
        return iter(self._dancers)

    def __len__(self) -> int:
        return len(self._dancers)

    def format(self) -> str:
        """Return the names from front to back separated by spaces."""
        return " ".join(self._dancers)


def _prompt(text: str) -> Optional[str]:
    print(text, end="", flush=True)
    line = sys.stdin.readline()
    return line.rstrip("\n") if line else None


def main(argv: Optional[list[str]] = None) -> int:
    argparse.ArgumentParser(description="Run the congo line menu.").parse_args(argv)
    line = CongoLine()
    while True:
        print(_MENU, end="")
        raw = _prompt("Enter your choice: ")
        if raw is None:
            break
        try:
            choice = int(raw.strip())
        except ValueError:
            choice = 0
        if choice == 1:
            name = _prompt("Enter name to join: ")
            if name is None:
                break
            line.join(name)
        elif choice == 2:
            try:
                line.leave()
            except EmptyListError:
                print("Empty")
        elif choice == 3:
            print(line.format())
        elif choice == 4:
            print("Congo line ends.")
            break
        else:
            print("Invalid choice. Try again.")
    return 0