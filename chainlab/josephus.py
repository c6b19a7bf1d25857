"""Eliminate every k-th player from a circle until one is left."""

from __future__ import annotations

import argparse
import sys
from typing import Iterator, Optional


def eliminate(n: int, k: int) -> Iterator[tuple[int, tuple[int, ...]]]:
    """Yield each eliminated player with the circle that remains, read from its head."""
    if n < 1:
        raise ValueError("the circle needs at least one player")
    if k < 1:
        raise ValueError("k must be at least 1")
    circle = list(range(1, n + 1))
    current = 0
    while len(circle) > 1:
        current = (current + k - 1) % len(circle)
        removed = circle.pop(current)
        if current == len(circle):
            current = 0
        yield removed, tuple(circle)


def survivor(n: int, k: int) -> int:
    """Return the player left when every k-th one has been removed."""
    remaining: tuple[int, ...] = (n,) if n >= 1 else ()
    for _, remaining in eliminate(n, k):
        pass
    return remaining[0]


def main(argv: Optional[list[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Eliminate every k-th player in a circle.")
    parser.add_argument("n", type=int, nargs="?", help="number of players")
    parser.add_argument("k", type=int, nargs="?", help="count to the eliminated player")
    args = parser.parse_args(argv)
    n, k = args.n, args.k
    if n is None or k is None:
        tokens = sys.stdin.read().split()
        try:
            n, k = int(tokens[0]), int(tokens[1])
        except (IndexError, ValueError):
            parser.error("expected two integers n and k")
    try:
        print(" ".join(str(player) for player in range(1, n + 1)))
        last = n
        for _, remaining in eliminate(n, k):
            print(" ".join(str(player) for player in remaining))
            last = remaining[0]
    except ValueError as exc:
        parser.error(str(exc))
    print(last, end="")
    return 0