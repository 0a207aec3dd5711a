"""Helpers shared by the puzzle solutions."""

from __future__ import annotations

import os


def read_lines(path: str | os.PathLike[str]) -> list[str]:
    """Return the lines of a text file without their line terminators.

    Lines are split on ``"\\n"`` only. A final newline does not produce an
    extra empty line. Raises ``OSError`` if the file cannot be opened.
    """
    with open(path, encoding="utf-8", newline="") as handle:
        text = handle.read()
    lines = text.split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    return lines