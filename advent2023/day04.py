"""Scratchcards: points won and the total number of cards collected."""

from __future__ import annotations

import sys
from collections.abc import Iterable
from dataclasses import dataclass

from advent2023.utils import read_lines


@dataclass(frozen=True)
class Card:
    """A scratchcard with its winning numbers and the numbers it holds."""

    id: int
    winning: frozenset[int]
    numbers: tuple[int, ...]

    @property
    def winners(self) -> int:
        """Number of held numbers that are winning numbers."""
        return sum(1 for number in self.numbers if number in self.winning)

    def points(self) -> int:
        """Return 0 for no match, 1 for the first and doubling after."""
        winners = self.winners
        return winners if winners < 2 else 1 << (winners - 1)


def parse_card(line: str) -> Card:
    """Parse a line of the form ``Card N: w w w | n n n``."""
    header, colon, body = line.partition(":")
    head_tokens = header.split()
    if not colon or len(head_tokens) != 2:
        raise ValueError(f"malformed card line {line!r}")
    card_id = int(head_tokens[1])
    winning_part, _, held_part = body.partition("|")
    return Card(
        id=card_id,
        winning=frozenset(int(token) for token in winning_part.split()),
        numbers=tuple(int(token) for token in held_part.split()),
    )


def total_points(cards: Iterable[Card]) -> int:
    """Sum the points of all cards."""
    return sum(card.points() for card in cards)


def total_cards(cards: Iterable[Card]) -> int:
    """Count every card held once each card wins copies of the following ones."""
    deck: dict[int, int] = {}
    for card in cards:
        copies = deck.get(card.id, 0) + 1
        deck[card.id] = copies
        for won in range(card.id + 1, card.id + card.winners + 1):
            deck[won] = deck.get(won, 0) + copies
    return sum(deck.values())


def main(argv: list[str] | None = None) -> int:
    args = sys.argv[1:] if argv is None else argv
    paths = args or ["test_input.txt", "input.txt"]
    for path in paths:
        try:
            lines = read_lines(path)
        except OSError:
            print(f"Error opening file {path}")
            continue
        print(f"Lines {len(lines)}")
        cards = [parse_card(line) for line in lines if line.strip()]
        print(f"{path}: first result is {total_points(cards)}")
        print(f"{path}: second result is {total_cards(cards)}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())