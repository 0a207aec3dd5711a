import pytest

from advent2023.day05 import (
    Almanac,
    FieldMap,
    lowest_location,
    lowest_location_ranges,
    main,
    parse_almanac,
)

EXAMPLE = """seeds: 79 14 55 13

seed-to-soil map:
50 98 2
52 50 48

soil-to-fertilizer map:
0 15 37
37 52 2
39 0 15

fertilizer-to-water map:
49 53 8
0 11 42
42 0 7
57 7 4

water-to-light map:
88 18 7
18 25 70

light-to-temperature map:
45 77 23
81 45 19
68 64 13

temperature-to-humidity map:
0 69 1
1 0 69

humidity-to-location map:
60 56 37
56 93 4
"""


@pytest.fixture
def example():
    return parse_almanac(EXAMPLE)


def test_parse_seeds(example):
    assert example.seeds == (79, 14, 55, 13)


def test_parse_maps(example):
    assert len(example.maps) == 7
    assert example.maps[0] == (FieldMap(50, 98, 2), FieldMap(52, 50, 48))
    assert example.maps[-1] == (FieldMap(60, 56, 37), FieldMap(56, 93, 4))


def test_example_lowest_location(example):
    assert lowest_location(example) == 35


def test_lowest_is_minimum_of_locations(example):
    locations = [example.location(seed) for seed in example.seeds]
    assert lowest_location(example) == min(locations)
    assert example.location(13) == lowest_location(example)


def test_unmapped_value_passes_through():
    almanac = Almanac(seeds=(7,), maps=((FieldMap(50, 100, 5),),))
    assert almanac.location(7) == 7


def test_zero_result_counts_as_unmapped():
    almanac = Almanac(seeds=(10,), maps=((FieldMap(0, 10, 5),),))
    assert almanac.location(10) == 10


def test_upper_bound_is_inclusive():
    almanac = Almanac(seeds=(15,), maps=((FieldMap(100, 10, 5),),))
    assert almanac.location(15) == 105


def test_last_matching_field_wins():
    both = Almanac(seeds=(3,), maps=((FieldMap(100, 0, 10), FieldMap(200, 0, 10)),))
    second = Almanac(seeds=(3,), maps=((FieldMap(200, 0, 10),),))
    assert both.location(3) == second.location(3)


def test_ranges_without_maps_give_smallest_start():
    almanac = Almanac(seeds=(10, 3, 5, 2), maps=())
    assert lowest_location_ranges(almanac) == 5


def test_range_outside_fields_is_unchanged():
    almanac = Almanac(seeds=(1, 2), maps=((FieldMap(50, 100, 5),),))
    assert lowest_location_ranges(almanac) == 1


def test_range_inside_one_field_matches_single_seed():
    almanac = Almanac(seeds=(10, 2), maps=((FieldMap(100, 5, 20),),))
    assert lowest_location_ranges(almanac) == almanac.location(10)


def test_ranges_never_exceed_smallest_start_when_identity():
    almanac = Almanac(seeds=(30, 4, 20, 6), maps=((FieldMap(1000, 500, 10),),))
    assert lowest_location_ranges(almanac) == 20


def test_odd_seed_count_drops_last():
    almanac = Almanac(seeds=(30, 4, 2), maps=())
    assert lowest_location_ranges(almanac) == 30


def test_parse_requires_seeds_header():
    with pytest.raises(ValueError):
        parse_almanac("")
    with pytest.raises(ValueError):
        parse_almanac("soil: 1 2 3")


def test_parse_rejects_incomplete_triple():
    with pytest.raises(ValueError):
        parse_almanac("seeds: 1 2\n\nseed-to-soil map:\n1 2\n")


def test_no_seeds_raises():
    almanac = parse_almanac("seeds:\n")
    with pytest.raises(ValueError):
        lowest_location(almanac)
    with pytest.raises(ValueError):
        lowest_location_ranges(almanac)


def test_main_prints_range_result(tmp_path, capsys, example):
    path = tmp_path / "almanac.txt"
    path.write_text(EXAMPLE, encoding="utf-8")
    assert main([str(path)]) == 0
    out = capsys.readouterr().out
    assert f"Location Second: {lowest_location_ranges(example)}" in out


def test_main_reports_missing_file(tmp_path, capsys):
    missing = tmp_path / "absent.txt"
    assert main([str(missing)]) == 0
    assert "Error opening file" in capsys.readouterr().out