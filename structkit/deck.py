"""Deal-and-gather card shuffling and how many rounds restore the deck."""

from __future__ import annotations

import re
import sys
from collections.abc import Iterable, Iterator
from itertools import cycle
from typing import Any, Optional, Sequence

PILE_PATTERN = (3, 4, 5)

_USAGE = "Please try again!\nUsage: ./<out file name> <number of cards>"
_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def shuffle_round(deck: Iterable[Any], piles: int) -> list[Any]:
    """Deal ``deck`` face down into ``piles`` piles and gather them again.

    Cards go round-robin onto the piles, each landing on top of its pile.
    The piles are then joined in order, first pile first, each read from
    its top card down.
    """
    if piles < 1:
        raise ValueError("piles must be at least 1")
    stacks: list[list[Any]] = [[] for _ in range(piles)]
    for position, card in enumerate(deck):
        stacks[position % piles].append(card)
    return [card for stack in stacks for card in reversed(stack)]


def _rounds(num_cards: int) -> Iterator[list[int]]:
    """Yield the deck after each round until it is back in its original order."""
    if num_cards < 0:
        raise ValueError("num_cards must not be negative")
    original = list(range(num_cards))
    deck = original
    for piles in cycle(PILE_PATTERN):
        deck = shuffle_round(deck, piles)
        yield deck
        if deck == original:
            return


def rounds_to_restore(num_cards: int) -> int:
    """Count the rounds, with 3, 4, 5, 3, ... piles, that restore the order."""
    return sum(1 for _ in _rounds(num_cards))


def _parse_count(text: str) -> int:
    match = _LEADING_INT.match(text)
    return int(match.group(1)) if match else 0


def _format(deck: Sequence[int]) -> str:
    return " ".join(str(card) for card in deck)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Print every round's deck and the number of rounds for the given card count."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 1:
        print(_USAGE)
        return 0
    num_cards = _parse_count(args[0])
    if num_cards < 0:
        print(_USAGE)
        return 1

    print("original deck order:")
    print("original deck order:")
    print(_format(range(num_cards)))
    rounds = 0
    for deck in _rounds(num_cards):
        rounds += 1
        print("Current deck order:")
        print(_format(deck))
    print(f"Total round needed: {rounds}")
    return 0