"""Cube games: which games are possible and how many cubes each needs."""

from __future__ import annotations

import sys
from collections.abc import Iterable
from dataclasses import dataclass

from advent2023.utils import read_lines

RED_LIMIT = 12
GREEN_LIMIT = 13
BLUE_LIMIT = 14


@dataclass(frozen=True)
class Draw:
    """A number of cubes of one colour shown in a game."""

    count: int
    color: str


def parse_draws(line: str) -> list[Draw]:
    """Return every draw listed after the ``Game N:`` header of ``line``."""
    if not line:
        return []
    header, colon, body = line.partition(":")
    if not colon:
        raise ValueError(f"missing ':' in game line {line!r}")
    tokens = iter(body.split())
    draws = []
    for count, color in zip(tokens, tokens):
        if color[-1] in ",;":
            color = color[:-1]
        draws.append(Draw(int(count), color))
    return draws


def is_possible(line: str, red: int, green: int, blue: int) -> bool:
    """Return whether no draw of the game exceeds the given cube limits.

    An empty line is never possible.
    """
    if not line:
        return False
    limits = {"red": red, "green": green, "blue": blue}
    return all(
        draw.count <= limits[draw.color]
        for draw in parse_draws(line)
        if draw.color in limits
    )


def minimum_cubes(line: str) -> tuple[int, int, int] | None:
    """Return the fewest red, green and blue cubes the game needs.

    Returns ``None`` for an empty line.
    """
    if not line:
        return None
    needed = {"red": 0, "green": 0, "blue": 0}
    for draw in parse_draws(line):
        if draw.color in needed:
            needed[draw.color] = max(needed[draw.color], draw.count)
    return needed["red"], needed["green"], needed["blue"]


def solve_part1(lines: Iterable[str]) -> int:
    """Sum the 1-based line numbers of the games that are possible."""
    return sum(
        number
        for number, line in enumerate(lines, start=1)
        if is_possible(line, RED_LIMIT, GREEN_LIMIT, BLUE_LIMIT)
    )


def solve_part2(lines: Iterable[str]) -> int:
    """Sum the products of the minimum cube counts of all games."""
    total = 0
    for line in lines:
        cubes = minimum_cubes(line)
        if cubes is not None:
            red, green, blue = cubes
            total += red * green * blue
    return total


def main(argv: list[str] | None = None) -> int:
    args = sys.argv[1:] if argv is None else argv
    path = args[0] if args else "input.txt"
    try:
        lines = read_lines(path)
    except OSError:
        print("Error opening file")
        return 0
    print(f"Final result for first game is  {solve_part1(lines)}")
    print(f"Final result for second game is {solve_part2(lines)}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())