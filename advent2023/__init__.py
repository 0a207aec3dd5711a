"""Solutions to days 1 to 6 of Advent of Code 2023, with a shared line reader."""

__version__ = "0.1.0"
__all__ = ["utils", "day01", "day02", "day03", "day04", "day05", "day06"]