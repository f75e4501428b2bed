# -*- coding: utf-8 -*-
"""
Day 02: Cube conundrum
======================

A game is a record of handfuls of red, green and blue cubes drawn from a bag.
For each game only the largest count shown per colour matters:

1. Sum the ids of the games possible with the bag limits (12 red, 13 green,
   14 blue);
2. Sum the "power" of every game, the product of its three maxima.

The draws are collected in a long table (game, colour, count) and reduced
with a pivot table to one row of maxima per game.
"""

import logging
from dataclasses import dataclass
from typing import Dict, List, Mapping, Optional

import pandas as pd

from configs.config import CUBE_LIMITS
from src.data.loaders import load_text, split_lines

logger = logging.getLogger(__name__)

DAY = 2
COLOURS: List[str] = ['red', 'green', 'blue']


@dataclass(frozen=True)
class Game:
    """Game id and the largest count shown for each colour"""
    id: int
    max_red: int = 0
    max_green: int = 0
    max_blue: int = 0

    def is_possible(self, limits: Mapping[str, int] = CUBE_LIMITS) -> bool:
        return (self.max_red <= limits['red']
                and self.max_green <= limits['green']
                and self.max_blue <= limits['blue'])

    @property
    def power(self) -> int:
        return self.max_red * self.max_green * self.max_blue


# =============================================================================
# Parsing
# =============================================================================

def parse_draws(text: str) -> pd.DataFrame:
    """
    Parse game records into a long table of draws

    Example line:
        Game 1: 3 blue, 4 red; 1 red, 2 green, 6 blue; 2 green

    Args:
        text: puzzle input

    Returns:
        DataFrame with columns game, colour, count

    Raises:
        ValueError: on a malformed line, draw or unknown colour
    """
    records = []
    for line in split_lines(text):
        header, sep, body = line.partition(':')
        fields = header.split()
        if not sep or len(fields) != 2 or fields[0] != 'Game':
            raise ValueError(f"Malformed game record: {line!r}")
        game_id = int(fields[1])

        for handful in body.split(';'):
            for draw in handful.split(','):
                if not draw.strip():
                    continue
                parts = draw.split()
                if len(parts) != 2:
                    raise ValueError(f"Malformed draw {draw.strip()!r} in game {game_id}")
                count, colour = int(parts[0]), parts[1]
                if colour not in COLOURS:
                    raise ValueError(f"Unknown cube colour {colour!r} in game {game_id}")
                records.append({'game': game_id, 'colour': colour, 'count': count})

        # a game without draws still has to show up in the pivot
        records.append({'game': game_id, 'colour': 'red', 'count': 0})

    return pd.DataFrame.from_records(records, columns=['game', 'colour', 'count'])


def game_maxima(draws: pd.DataFrame) -> pd.DataFrame:
    """
    Maximum count per game and colour

    Args:
        draws: long table from parse_draws

    Returns:
        DataFrame indexed by game id with one column per colour
    """
    table = draws.pivot_table(index='game', columns='colour', values='count',
                              aggfunc='max', fill_value=0)
    table = table.reindex(columns=COLOURS, fill_value=0).astype('int64')
    table.columns.name = None
    return table


def parse_games(text: str) -> List[Game]:
    """Parse the puzzle input into Game records, in id order"""
    maxima = game_maxima(parse_draws(text))
    return [
        Game(id=int(game_id), max_red=int(row['red']),
             max_green=int(row['green']), max_blue=int(row['blue']))
        for game_id, row in maxima.iterrows()
    ]


# =============================================================================
# Answers
# =============================================================================

def sum_possible_ids(games: List[Game], limits: Mapping[str, int] = CUBE_LIMITS) -> int:
    """Sum of the ids of games possible under the bag limits"""
    return sum(game.id for game in games if game.is_possible(limits))


def sum_powers(games: List[Game]) -> int:
    """Sum of the powers of all games"""
    return sum(game.power for game in games)


def main(input_path: Optional[str] = None) -> Dict[str, int]:
    """Solve both parts of day 02"""
    games = parse_games(load_text(DAY, input_path))
    logger.info(f"Day 02: {len(games)} games recorded")

    part1 = sum_possible_ids(games)
    print(f"Part 1: Sum of possible game ids: {part1}")

    part2 = sum_powers(games)
    print(f"Part 2: Sum of powers: {part2}")

    return {'part1': part1, 'part2': part2}


if __name__ == '__main__':
    main()
