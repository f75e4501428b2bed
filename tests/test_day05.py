# -*- coding: utf-8 -*-
"""
Day 05 tests: almanac remapping and seed range search
"""

import numpy as np
import pytest

from src.models.day05.seed_maps import (
    AlmanacMap,
    MapEntry,
    iter_chunks,
    location_of,
    lowest_location,
    lowest_location_by_ranges,
    lowest_location_parallel,
    main,
    parse_almanac,
    seed_ranges,
)

EXAMPLE = """\
seeds: 79 14 55 13

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
def almanac():
    return parse_almanac(EXAMPLE)


def test_parse_almanac(almanac):
    seeds, maps = almanac

    assert seeds == [79, 14, 55, 13]
    assert [m.name for m in maps][0] == 'seed-to-soil'
    assert len(maps) == 7
    # entries are kept sorted by source start
    assert [e.start for e in maps[0].entries] == [50, 98]


def test_seed_locations(almanac):
    seeds, maps = almanac
    assert [location_of(seed, maps) for seed in seeds] == [82, 43, 86, 35]


def test_part1(almanac):
    seeds, maps = almanac
    assert lowest_location(seeds, maps) == 35


def test_part2_inline(almanac):
    seeds, maps = almanac
    assert lowest_location_parallel(seeds, maps, workers=1, chunk_size=4) == 46


def test_part2_process_pool(almanac):
    seeds, maps = almanac
    assert lowest_location_parallel(seeds, maps, workers=2, chunk_size=5) == 46


def test_interval_solver_matches_brute_force(almanac):
    seeds, maps = almanac
    assert lowest_location_by_ranges(seeds, maps) == 46
    assert lowest_location_by_ranges([0, 100], maps) == \
        lowest_location_parallel([0, 100], maps, workers=1, chunk_size=7)


def test_map_entry_boundaries():
    table = AlmanacMap('a-to-b', [MapEntry.from_line("52 50 48"), MapEntry.from_line("50 98 2")])

    assert table.lookup(49) == 49
    assert table.lookup(50) == 52
    assert table.lookup(97) == 99
    assert table.lookup(98) == 50
    assert table.lookup(99) == 51
    assert table.lookup(100) == 100


def test_vectorised_remap_agrees_with_lookup(almanac):
    _, maps = almanac
    values = np.arange(0, 120, dtype=np.int64)
    for table in maps:
        expected = [table.lookup(int(v)) for v in values]
        assert table.remap(values).tolist() == expected


def test_identity_map_leaves_values_unchanged():
    identity = AlmanacMap('x-to-y', [])
    values = np.array([0, 7, 10 ** 9], dtype=np.int64)

    assert identity.remap(values).tolist() == [0, 7, 10 ** 9]
    assert identity.remap(identity.remap(values)).tolist() == values.tolist()
    assert identity.lookup(42) == 42
    assert identity.remap_intervals([(3, 9)]) == [(3, 9)]


def test_remap_intervals_splits_at_entry_edges():
    table = AlmanacMap('a-to-b', [MapEntry(start=10, end=19, destination_start=100)])
    assert sorted(table.remap_intervals([(5, 25)])) == [(5, 9), (20, 25), (100, 109)]


def test_seed_ranges_and_chunks():
    assert seed_ranges([79, 14, 55, 13]) == [(79, 92), (55, 67)]
    assert list(iter_chunks([(0, 9)], 4)) == [(0, 3), (4, 7), (8, 9)]

    with pytest.raises(ValueError):
        seed_ranges([1, 2, 3])


@pytest.mark.parametrize("text", [
    "79 14 55 13",
    "seeds: 1 2\n\nseed-to-soil map:\n50 98",
    "seeds: 1 2\n\nseed-to-soil:\n50 98 2",
    "seeds: 1 2\n\nseed-to-soil map:\n50 98 0",
])
def test_malformed_almanac_is_rejected(text):
    with pytest.raises(ValueError):
        parse_almanac(text)


def test_main(write_input, capsys, monkeypatch):
    monkeypatch.setattr('src.models.day05.seed_maps.seed_search.WORKERS', 1)
    answers = main(str(write_input(EXAMPLE)))

    assert answers == {'part1': 35, 'part2': 46}
    assert "Part 2: Lowest location number: 46" in capsys.readouterr().out
