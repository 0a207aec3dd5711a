"""Boat races: how many hold times beat each record distance."""

from __future__ import annotations

import math
import sys
from collections.abc import Iterable
from dataclasses import dataclass


@dataclass(frozen=True)
class Race:
    """A race lasting ``time`` milliseconds with a record ``distance``."""

    time: int
    distance: int


def _values(line: str) -> list[int]:
    tokens = line.split()
    return [int(token) for token in tokens[1:]]


def parse_races(text: str) -> list[Race]:
    """Parse a ``Time:`` line and a ``Distance:`` line into races."""
    lines = [line for line in text.splitlines() if line.strip()]
    if len(lines) < 2:
        raise ValueError("expected a time line and a distance line")
    times = _values(lines[0])
    distances = _values(lines[1])
    if len(times) != len(distances):
        raise ValueError("number of times and distances differ")
    return [Race(time, distance) for time, distance in zip(times, distances)]


def ways_to_win(time: int, distance: int) -> int:
    """Count whole hold times ``h`` with ``h * (time - h)`` beating ``distance``."""
    discriminant = time * time - 4 * distance
    if discriminant <= 0:
        return 0
    low = max(0, (time - math.isqrt(discriminant)) // 2 - 1)
    while low * (time - low) <= distance:
        low += 1
        if low > time - low:
            return 0
    high = time - low
    return high - low + 1


def solve_part1(races: Iterable[Race]) -> int:
    """Multiply the number of ways to win every race."""
    return math.prod(ways_to_win(race.time, race.distance) for race in races)


def combine_races(races: Iterable[Race]) -> Race:
    """Join the digits of all times and all distances into one race."""
    races = list(races)
    if not races:
        raise ValueError("no races to combine")
    time = int("".join(str(race.time) for race in races))
    distance = int("".join(str(race.distance) for race in races))
    return Race(time, distance)


def solve_part2(races: Iterable[Race]) -> int:
    """Count the ways to win the single race formed by joining all races."""
    race = combine_races(races)
    return ways_to_win(race.time, race.distance)


def main(argv: list[str] | None = None) -> int:
    args = sys.argv[1:] if argv is None else argv
    paths = args or ["test_input.txt", "input.txt"]
    for path in paths:
        try:
            with open(path, encoding="utf-8") as handle:
                races = parse_races(handle.read())
        except OSError:
            print(f"Failed to open file: {path}")
            return 1
        print("times: " + "".join(f"{race.time} " for race in races))
        print("distances: " + "".join(f"{race.distance} " for race in races))
        print(f"First result is: {solve_part1(races)}")
        print(f"Result is: {solve_part2(races)}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())