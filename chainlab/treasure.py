"""A treasure hunt: answer each clue in turn, with three chances per clue."""

from __future__ import annotations

import argparse
import sys
from dataclasses import dataclass
from typing import Any, Iterable, Iterator, Optional

CHANCES = 3
WIN_MESSAGE = "Won the treasure :)"
LOSE_MESSAGE = "Better luck next time!"

_MISSING = object()


@dataclass(frozen=True)
class Clue:
    """A riddle and the number that answers it."""

    text: str
    answer: int


class TreasureHunt:
    """A sequence of clues to be answered in order."""

    def __init__(self, clues: Iterable[Clue] = ()) -> None:
        self.clues: list[Clue] = list(clues)

    def add_clue(self, clue: str, answer: int) -> None:
        """Append a clue to the end of the hunt."""
        self.clues.append(Clue(clue, answer))

    def play(self, answers: Iterable[Any]) -> Iterator[str]:
        """Yield the hunt's lines, taking one answer after each clue is shown.

        The hunt stops early if the answers run out or a clue uses up its chances.
        """
        guesses = iter(answers)
        for clue in self.clues:
            chances = CHANCES
            while True:
                yield clue.text
                guess = next(guesses, _MISSING)
                if guess is _MISSING:
                    return
                if guess == clue.answer:
                    break
                chances -= 1
                if not chances:
                    yield LOSE_MESSAGE
                    return
                yield f"{chances} chances more"
        yield WIN_MESSAGE


def default_hunt() -> TreasureHunt:
    """Return the standard five-clue hunt."""
    hunt = TreasureHunt()
    hunt.add_clue("Even Prime", 2)
    hunt.add_clue("Number of River", 6)
    hunt.add_clue("Invert of six", 9)
    hunt.add_clue("Top half of 8", 0)
    hunt.add_clue("I'm an odd number.Take away one letter,and I become even", 7)
    return hunt


def _stdin_answers() -> Iterator[Any]:
    for line in sys.stdin:
        for token in line.split():
            try:
                yield int(token)
            except ValueError:
                yield token


def main(argv: Optional[list[str]] = None) -> int:
    argparse.ArgumentParser(description="Play the treasure hunt.").parse_args(argv)
    for line in default_hunt().play(_stdin_answers()):
        print(line, flush=True)
    return 0