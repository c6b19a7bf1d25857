"""A playlist of song titles, newest first."""

from __future__ import annotations

import argparse
import sys
from typing import Iterator, Optional

from chainlab.doubly import DoublyLinkedList, EmptyListError

_MENU = "Enter 1:Insert\nEnter 2:Delete\nEnter 3:Display\nEnter 4:Search\nEnter 5:Exit"


class Playlist:
    """Songs added at the front; lookups walk in from both ends."""

    def __init__(self) -> None:
        self._songs = DoublyLinkedList()

    def add(self, song: str) -> None:
        """Put a song at the front of the playlist."""
        self._songs.push_front(song)

    def remove(self, song: str) -> None:
        """Remove the first song with this title."""
        if not self._songs:
            raise EmptyListError("No songs in your playlist.")
        try:
            self._songs.remove(song)
        except ValueError:
            raise ValueError(f"song not found: {song}") from None

    def search(self, song: str) -> bool:
        """Tell whether a song with this title is in the playlist."""
        return self._songs.find_from_ends(song)

    def __iter__(self) -> Iterator[str]:
        return iter(self._songs)

    def __len__(self) -> int:
        return len(self._songs)

    def format(self) -> str:
        """Return the songs joined by arrows, or a note that there are none."""
        if not self._songs:
            return "No songs in playList"
        return "".join(f"{song}->" for song in self._songs) + "NULL"


def _read_title() -> Optional[str]:
    line = sys.stdin.readline()
    return line.rstrip("\n") if line else None


def main(argv: Optional[list[str]] = None) -> int:
    argparse.ArgumentParser(description="Run the playlist menu.").parse_args(argv)
    playlist = Playlist()
    while True:
        print(_MENU, flush=True)
        raw = sys.stdin.readline()
        if not raw:
            break
        try:
            choice = int(raw.strip())
        except ValueError:
            choice = 0
        if choice == 5:
            break
        if choice == 3:
            print(playlist.format())
            continue
        if choice not in (1, 2, 4):
            continue
        song = _read_title()
        if song is None:
            break
        if choice == 1:
            playlist.add(song)
        elif choice == 2:
            try:
                playlist.remove(song)
            except EmptyListError as exc:
                print(exc)
            except ValueError as exc:
                print(exc)
            else:
                print(f"Removed: {song}")
        elif not len(playlist):
            print("Play List is Empty.")
        elif playlist.search(song):
            print(f"Found: {song}")
        else:
            print("Not found")
    return 0