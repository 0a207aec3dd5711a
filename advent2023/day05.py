"""Seed almanac: follow seeds through the chain of maps to a location."""

from __future__ import annotations

import sys
from collections.abc import Iterator, Sequence
from dataclasses import dataclass


@dataclass(frozen=True)
class FieldMap:
    """One line of a map: ``quantity`` values from ``source`` go to ``destination``."""

    destination: int
    source: int
    quantity: int


@dataclass(frozen=True)
class Almanac:
    """The seed numbers and the maps from seed to location, in order."""

    seeds: tuple[int, ...]
    maps: tuple[tuple[FieldMap, ...], ...]

    def location(self, seed: int) -> int:
        """Return the location reached by ``seed`` through every map."""
        value = seed
        for fields in self.maps:
            value = _convert(fields, value)
        return value


def _convert(fields: Sequence[FieldMap], value: int) -> int:
    # The upper bound is inclusive, the last matching field wins, and a
    # mapped value of 0 counts as no mapping at all.
    result = 0
    for field in fields:
        if field.source <= value <= field.source + field.quantity:
            result = value - field.source + field.destination
    return value if result == 0 else result


def _is_int(token: str) -> bool:
    return token.isdigit()


def parse_almanac(text: str) -> Almanac:
    """Parse a ``seeds:`` line followed by named maps of number triples."""
    tokens = text.split()
    if not tokens or tokens[0] != "seeds:":
        raise ValueError("almanac must start with 'seeds:'")
    position = 1
    seeds = []
    while position < len(tokens) and _is_int(tokens[position]):
        seeds.append(int(tokens[position]))
        position += 1

    maps = []
    while position < len(tokens):
        header = tokens[position : position + 2]
        if len(header) < 2 or any(_is_int(token) for token in header):
            raise ValueError(f"malformed map header near token {position}")
        position += 2
        numbers = []
        while position < len(tokens) and _is_int(tokens[position]):
            numbers.append(int(tokens[position]))
            position += 1
        if len(numbers) % 3:
            raise ValueError(f"map {header[0]!r} has an incomplete entry")
        triples = iter(numbers)
        maps.append(tuple(FieldMap(*entry) for entry in zip(triples, triples, triples)))
    return Almanac(tuple(seeds), tuple(maps))


def lowest_location(almanac: Almanac) -> int:
    """Return the lowest location of any single seed number."""
    if not almanac.seeds:
        raise ValueError("almanac has no seeds")
    return min(almanac.location(seed) for seed in almanac.seeds)


def _seed_ranges(seeds: Sequence[int]) -> Iterator[tuple[int, int]]:
    values = iter(seeds)
    yield from zip(values, values)


def lowest_location_ranges(almanac: Almanac) -> int:
    """Return the lowest location when the seeds are (start, length) pairs.

    Ranges are split against each map's fields and the pieces followed
    level by level; the smallest start reaching the end is the answer.
    """
    ranges = list(_seed_ranges(almanac.seeds))
    if not ranges:
        raise ValueError("almanac has no seed ranges")
    maps = almanac.maps
    lowest: int | None = None

    def walk(start: int, quantity: int, level: int) -> None:
        nonlocal lowest
        if level >= len(maps):
            if lowest is None or start < lowest:
                lowest = start
            return

        for field in maps[level]:
            a1, a2 = start, start + quantity
            b1, b2 = field.source, field.source + field.quantity
            dest = field.destination

            if a1 > b2 or a2 < b1:
                continue
            if a1 == b1 and a2 == b2:
                quantity = 0
                walk(dest, field.quantity, level + 1)
                continue
            if a1 >= b1 and a2 >= b2:
                start, quantity = b2, a2 - b2
                walk(dest + a1 - b1, b2 - a1, level + 1)
                continue
            if a1 <= b1 and a2 <= b2:
                quantity = b1 - a1
                walk(dest, a2 - b1, level + 1)
                continue
            if a1 >= b1 and a2 <= b2:
                walk(dest + a1 - b1, quantity, level + 1)
                quantity = 0
                continue
            quantity = 0
            walk(dest, b2 - b1, level + 1)
            walk(a1, b1 - a1, level)
            walk(b2, a2 - b2, level)

        if quantity != 0:
            walk(start, quantity, level + 1)

    for start, amount in ranges:
        walk(start, amount, 0)
    assert lowest is not None
    return lowest


def main(argv: list[str] | None = None) -> int:
    args = sys.argv[1:] if argv is None else argv
    paths = args or ["test_input.txt", "input.txt"]
    for path in paths:
        try:
            with open(path, encoding="utf-8") as handle:
                almanac = parse_almanac(handle.read())
        except OSError:
            print(f"Error opening file {path}")
            continue
        print(f"{path}: Location Second: {lowest_location_ranges(almanac)}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())