"""Calibration values: first and last digit of each line, spelled or not."""

from __future__ import annotations

import sys
from collections.abc import Iterable, Iterator

from advent2023.utils import read_lines

DIGIT_WORDS = ("one", "two", "three", "four", "five", "six", "seven", "eight", "nine")


def _digits(line: str) -> Iterator[int]:
    for pos, char in enumerate(line):
        if "1" <= char <= "9":
            yield int(char)
            continue
        for value, word in enumerate(DIGIT_WORDS, start=1):
            if line.startswith(word, pos):
                yield value


def line_value(line: str) -> int:
    """Return ten times the first digit plus the last digit of ``line``.

    Digits may be written as characters ``1``-``9`` or as English words,
    which may overlap. An empty line is worth 0; a non-empty line with no
    digit raises ``ValueError``.
    """
    if not line:
        return 0
    digits = list(_digits(line))
    if not digits:
        raise ValueError(f"no digit in line {line!r}")
    return 10 * digits[0] + digits[-1]


def solve(lines: Iterable[str]) -> int:
    """Return the sum of the calibration values of all lines."""
    return sum(line_value(line) for line in lines)


def main(argv: list[str] | None = None) -> int:
    args = sys.argv[1:] if argv is None else argv
    path = args[0] if args else "input.txt"
    try:
        lines = read_lines(path)
    except OSError:
        print("Error opening file")
        return 0

    tokens = [token for line in lines for token in line.split()]
    total = 0
    for counter, token in enumerate(tokens, start=1):
        value = line_value(token)
        print(f"Value for : {counter:03d}) {token} -> {value}")
        total += value
    print(f"Final result is {total}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())