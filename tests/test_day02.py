# -*- coding: utf-8 -*-
"""
Day 02 tests: cube game maxima
"""

import pytest

from src.models.day02.cube_game import (
    Game,
    game_maxima,
    main,
    parse_draws,
    parse_games,
    sum_possible_ids,
    sum_powers,
)

EXAMPLE = """\
Game 1: 3 blue, 4 red; 1 red, 2 green, 6 blue; 2 green
Game 2: 1 blue, 2 green; 3 green, 4 blue, 1 red; 1 green, 1 blue
Game 3: 8 green, 6 blue, 20 red; 5 blue, 4 red, 13 green; 5 green, 1 red
Game 4: 1 green, 3 red, 6 blue; 3 green, 6 red; 3 green, 15 blue, 14 red
Game 5: 6 red, 1 blue, 3 green; 2 blue, 1 red, 2 green
"""


def test_game_maxima_per_colour():
    games = parse_games(EXAMPLE)

    assert [g.id for g in games] == [1, 2, 3, 4, 5]
    assert games[0] == Game(id=1, max_red=4, max_green=2, max_blue=6)
    assert games[2] == Game(id=3, max_red=20, max_green=13, max_blue=6)


def test_example_answers():
    games = parse_games(EXAMPLE)
    assert sum_possible_ids(games) == 8
    assert sum_powers(games) == 2286


def test_draw_table_columns():
    draws = parse_draws("Game 3: 1 blue, 2 green; 4 red")

    assert list(draws.columns) == ['game', 'colour', 'count']
    # three draws plus the empty-game placeholder row
    assert len(draws) == 4
    assert draws['count'].sum() == 7


def test_missing_colour_counts_as_zero():
    maxima = game_maxima(parse_draws("Game 7: 2 red; 3 red"))

    assert list(maxima.columns) == ['red', 'green', 'blue']
    assert maxima.loc[7].tolist() == [3, 0, 0]
    assert parse_games("Game 7: 2 red; 3 red")[0].power == 0


def test_custom_limits():
    games = parse_games(EXAMPLE)
    assert sum_possible_ids(games, {'red': 20, 'green': 13, 'blue': 15}) == 15


@pytest.mark.parametrize("line", [
    "Game 1: 3 purple",
    "Game one: 3 red",
    "3 red, 4 blue",
    "Game 1: red 3 4",
])
def test_malformed_records_are_rejected(line):
    with pytest.raises(ValueError):
        parse_games(line)


def test_main(write_input, capsys):
    answers = main(str(write_input(EXAMPLE)))

    assert answers == {'part1': 8, 'part2': 2286}
    assert "Part 2: Sum of powers: 2286" in capsys.readouterr().out
