[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "advent2023"
version = "0.1.0"
description = "Solutions to the first six Advent of Code 2023 puzzles"
requires-python = ">=3.10"
dependencies = []
keywords = ["advent-of-code", "puzzles", "aoc2023"]
classifiers = [
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Topic :: Games/Entertainment :: Puzzle Games",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
advent2023-day01 = "advent2023.day01:main"
advent2023-day02 = "advent2023.day02:main"
advent2023-day03 = "advent2023.day03:main"
advent2023-day04 = "advent2023.day04:main"
advent2023-day05 = "advent2023.day05:main"
advent2023-day06 = "advent2023.day06:main"

[tool.hatch.build.targets.wheel]
packages = ["advent2023"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
