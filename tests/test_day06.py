# -*- coding: utf-8 -*-
"""
Day 06 tests: record beating hold times
"""

import pytest

from src.models.day06.boat_race import (
    Race,
    count_record_beating_brute_force,
    count_record_beating_ways,
    main,
    parse_races,
    product_of_ways,
)

EXAMPLE = """\
Time:      7  15   30
Distance:  9  40  200
"""


def test_parse_races():
    assert parse_races(EXAMPLE) == [Race(7, 9), Race(15, 40), Race(30, 200)]
    assert parse_races(EXAMPLE, kerning=True) == [Race(71530, 940200)]


def test_example_counts():
    races = parse_races(EXAMPLE)

    assert [count_record_beating_ways(r) for r in races] == [4, 8, 9]
    assert [count_record_beating_brute_force(r) for r in races] == [4, 8, 9]
    assert product_of_ways(races) == 288


def test_kerned_race():
    race = parse_races(EXAMPLE, kerning=True)[0]
    assert count_record_beating_ways(race) == 71503


def test_exact_roots_only_tie_the_record():
    # roots 10 and 20: those hold times tie the record and do not count
    race = Race(time=30, distance=200)
    assert count_record_beating_ways(race) == 9


def test_unbeatable_record():
    assert count_record_beating_ways(Race(time=4, distance=4)) == 0
    assert count_record_beating_ways(Race(time=4, distance=10)) == 0


@pytest.mark.parametrize("time", range(0, 40))
def test_closed_form_matches_brute_force(time):
    for distance in range(0, time * time // 4 + 2):
        race = Race(time=time, distance=distance)
        assert count_record_beating_ways(race) == count_record_beating_brute_force(race)


def test_mismatched_lines_are_rejected():
    with pytest.raises(ValueError):
        parse_races("Time: 1 2\nDistance: 3")
    with pytest.raises(ValueError):
        parse_races("Distance: 3\nTime: 1")


def test_main(write_input, capsys):
    answers = main(str(write_input(EXAMPLE)))

    assert answers == {'part1': 288, 'part2': 71503}
    assert "Part 2: Number of ways to beat the record: 71503" in capsys.readouterr().out
