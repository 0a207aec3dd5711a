# advent2023

Solutions to days 1 to 6 of Advent of Code 2023. They can be used as a
library or from the command line.

## Installation

```
pip install .
```

To run the tests as well:

```
pip install ".[test]"
pytest
```

## Command line

Each day has its own command.

```
advent2023-day01 input.txt
advent2023-day02 input.txt
advent2023-day03 input.txt
advent2023-day04 test_input.txt input.txt
advent2023-day05 test_input.txt input.txt
advent2023-day06 test_input.txt input.txt
```

- `advent2023-day01`, `advent2023-day02` and `advent2023-day03` read one
  file, `input.txt` in the current directory by default. If it cannot be
  opened they print `Error opening file`. Day 1 prints the value of every
  whitespace-separated token and then the total. Days 2 and 3 print the
  results of both parts.
- `advent2023-day04`, `advent2023-day05` and `advent2023-day06` take any
  number of files, by default `test_input.txt` and then `input.txt`, and
  print results for each one.
  - Day 4 prints the line count and both results. Files that cannot be
    opened are reported and skipped.
  - Day 5 prints only the lowest location for seed ranges (part two).
    Files that cannot be opened are reported and skipped.
  - Day 6 prints the parsed times and distances and both results. It stops
    with exit status 1 at the first file it cannot open.

## Library

```python
from advent2023 import day01, day02, day03, day04, day05, day06
from advent2023.utils import read_lines

lines = read_lines("input.txt")      # lines without terminators

day01.line_value("two1nine")         # 29
day01.solve(lines)                   # sum of calibration values

day02.parse_draws(lines[0])          # list of Draw(count, color)
day02.is_possible(lines[0], 12, 13, 14)
day02.minimum_cubes(lines[0])        # (red, green, blue), or None for ""
day02.solve_part1(lines)             # sum of numbers of possible games
day02.solve_part2(lines)             # sum of powers of minimum cube sets

day03.parse_schematic(lines)         # list of Line(index, numbers, symbols)
day03.part_number_sum(lines)
day03.gear_ratio_sum(lines)

cards = [day04.parse_card(line) for line in lines if line.strip()]
cards[0].points()
day04.total_points(cards)
day04.total_cards(cards)

with open("input.txt", encoding="utf-8") as handle:
    almanac = day05.parse_almanac(handle.read())
almanac.location(almanac.seeds[0])
day05.lowest_location(almanac)          # seeds as single numbers
day05.lowest_location_ranges(almanac)   # seeds as (start, length) pairs

with open("input.txt", encoding="utf-8") as handle:
    races = day06.parse_races(handle.read())
day06.ways_to_win(7, 9)              # 4
day06.solve_part1(races)
day06.combine_races(races)           # one Race with the digits joined
day06.solve_part2(races)
```

Malformed input raises `ValueError`. `read_lines` raises `OSError` when the
file cannot be opened.

## What the package does not do

It does not download puzzle inputs and does not submit answers. Only days
1 to 6 are solved. The day 5 command does not print the part one result,
but `day05.lowest_location` gives it.