import pytest

from advent2023.day03 import (
    Line,
    Number,
    Symbol,
    gear_ratio_sum,
    main,
    parse_line,
    parse_schematic,
    part_number_sum,
)

EXAMPLE = [
    "467..114..",
    "...*......",
    "..35..633.",
    "......#...",
    "617*......",
    ".....+.58.",
    "..592.....",
    "......755.",
    "...$.*....",
    ".664.598..",
]


def test_parse_line_numbers_and_positions():
    line = parse_line("467..114..", 0)
    assert line == Line(0, (Number(467, 0, 3), Number(114, 5, 8)), ())


def test_parse_line_symbols():
    line = parse_line("617*......", 4)
    assert line.index == 4
    assert line.numbers == (Number(617, 0, 3),)
    assert line.symbols == (Symbol("*", 3, 4),)


def test_parse_line_number_at_end():
    line = parse_line("..58", 0)
    assert line.numbers == (Number(58, 2, 4),)


def test_parse_schematic_indexes_rows():
    rows = parse_schematic(EXAMPLE)
    assert [row.index for row in rows] == list(range(len(EXAMPLE)))
    assert rows[3].symbols == (Symbol("#", 6, 7),)


def test_part_number_sum_example():
    assert part_number_sum(EXAMPLE) == 4361


def test_gear_ratio_sum_example():
    assert gear_ratio_sum(EXAMPLE) == 467835


def test_isolated_number_is_not_a_part():
    assert part_number_sum(["12....", "......", "....#."]) == 0


def test_number_touching_symbol_counts_once():
    assert part_number_sum(["12*", "*.."]) == 12


def test_diagonal_adjacency():
    assert part_number_sum(["..7", "...", "..."]) == 0
    assert part_number_sum(["7..", ".$.", "..."]) == 7


def test_gear_needs_two_numbers():
    assert gear_ratio_sum(["12*..", "....."]) == 0


def test_gear_ratio_with_two_neighbours_matches_product_of_inputs():
    assert gear_ratio_sum(["5*7"]) == 5 * 7


def test_part_sum_of_empty_schematic():
    assert part_number_sum([]) == 0
    assert gear_ratio_sum([]) == 0


def test_main_reports_results(tmp_path, capsys):
    path = tmp_path / "input.txt"
    path.write_text("\n".join(EXAMPLE) + "\n")
    assert main([str(path)]) == 0
    out = capsys.readouterr().out
    assert "Final result for first game is 4361" in out
    assert "467835" in out


def test_main_missing_file(tmp_path, capsys):
    assert main([str(tmp_path / "missing.txt")]) == 0
    assert "Error opening file" in capsys.readouterr().out


@pytest.mark.parametrize("row", ["..", "....", ""])
def test_rows_without_tokens(row):
    line = parse_line(row, 0)
    assert line.numbers == () and line.symbols == ()