"""Engine schematic: part numbers next to symbols and gear ratios."""

from __future__ import annotations

import re
import sys
from collections.abc import Iterable, Iterator
from dataclasses import dataclass

from advent2023.utils import read_lines

_CELL_PATTERN = re.compile(r"\d+|[^.\d\s]")


@dataclass(frozen=True)
class Number:
    """A number in a schematic row, spanning columns ``start`` to ``end`` (exclusive)."""

    value: int
    start: int
    end: int


@dataclass(frozen=True)
class Symbol:
    """A symbol in a schematic row, occupying column ``start``."""

    char: str
    start: int
    end: int


@dataclass(frozen=True)
class Line:
    """One parsed row of the schematic."""

    index: int
    numbers: tuple[Number, ...]
    symbols: tuple[Symbol, ...]


def _touches(symbol: Symbol, number: Number) -> bool:
    return symbol.start <= number.end and symbol.end >= number.start


def parse_line(text: str, index: int) -> Line:
    """Parse one schematic row; dots and whitespace are empty cells."""
    numbers = []
    symbols = []
    for match in _CELL_PATTERN.finditer(text):
        cell = match.group()
        if cell.isdigit():
            numbers.append(Number(int(cell), match.start(), match.end()))
        else:
            symbols.append(Symbol(cell, match.start(), match.start() + 1))
    return Line(index, tuple(numbers), tuple(symbols))


def parse_schematic(lines: Iterable[str]) -> list[Line]:
    """Parse every row of a schematic, numbering rows from 0."""
    return [parse_line(text, index) for index, text in enumerate(lines)]


def _around(rows: list[Line], row: Line) -> Iterator[Line]:
    if row.index > 0:
        yield rows[row.index - 1]
    yield row
    if row.index < len(rows) - 1:
        yield rows[row.index + 1]


def part_number_sum(lines: Iterable[str]) -> int:
    """Sum the numbers adjacent to any symbol, each number counted once.

    Numbers whose value is zero never count.
    """
    rows = parse_schematic(lines)
    used: set[tuple[int, int]] = set()
    total = 0
    for row in rows:
        for other in _around(rows, row):
            for symbol in row.symbols:
                for position, number in enumerate(other.numbers):
                    key = (other.index, position)
                    if number.value == 0 or key in used:
                        continue
                    if _touches(symbol, number):
                        total += number.value
                        used.add(key)
    return total


def gear_ratio_sum(lines: Iterable[str]) -> int:
    """Sum the products of pairs of numbers that share an adjacent symbol.

    For each symbol, adjacent numbers (rows above, same, below, left to
    right) are paired in the order they are met. A number that has been
    paired once counts as zero from then on.
    """
    rows = parse_schematic(lines)
    consumed: set[tuple[int, int]] = set()

    def value(key: tuple[int, int], number: Number) -> int:
        return 0 if key in consumed else number.value

    total = 0
    for row in rows:
        for symbol in row.symbols:
            pending: tuple[tuple[int, int], Number] | None = None
            for other in _around(rows, row):
                for position, number in enumerate(other.numbers):
                    if not _touches(symbol, number):
                        continue
                    key = (other.index, position)
                    if pending is None:
                        pending = (key, number)
                        continue
                    first_key, first = pending
                    total += value(first_key, first) * value(key, number)
                    consumed.add(first_key)
                    consumed.add(key)
                    pending = None
    return total


def main(argv: list[str] | None = None) -> int:
    args = sys.argv[1:] if argv is None else argv
    path = args[0] if args else "input.txt"
    try:
        lines = read_lines(path)
    except OSError:
        print("Error opening file")
        return 0
    print(f"Final result for first game is {part_number_sum(lines)}")
    print(f"Final result for second game is   {gear_ratio_sum(lines)}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())