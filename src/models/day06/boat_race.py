# -*- coding: utf-8 -*-
"""
Day 06: Wait for it
===================

Holding the boat button for h ms of a T ms race gives speed h and leaves
T - h ms of travel, so the distance is h * (T - h). A hold time beats the
record D when h * (T - h) > D.

1. Multiply the number of winning hold times of every race;
2. The spaces in the sheet were a kerning mistake: read each line as a
   single number and count the winning hold times of that one race.

Closed form
-----------
The winning hold times lie strictly between the roots of

    h^2 - T*h + D = 0,   h = (T -+ sqrt(T^2 - 4D)) / 2

Integer square roots keep the bounds exact for large races, including the
case where the roots are integers themselves (those hold times only tie the
record).
"""

import logging
import math
from dataclasses import dataclass
from typing import Dict, List, Optional

import numpy as np

from src.data.loaders import load_text, split_lines
from src.utils.preprocessing import parse_ints, strip_label

logger = logging.getLogger(__name__)

DAY = 6


@dataclass(frozen=True)
class Race:
    time: int
    distance: int


def parse_races(text: str, kerning: bool = False) -> List[Race]:
    """
    Parse the race sheet

    Example:
        Time:      7  15   30
        Distance:  9  40  200

    Args:
        text: puzzle input
        kerning: if True, spaces are removed so each line is one number

    Returns:
        Races in column order

    Raises:
        ValueError: if the lines are missing or have different lengths
    """
    lines = split_lines(text)
    if len(lines) < 2:
        raise ValueError("Race sheet needs a Time and a Distance line")

    time_field = strip_label(lines[0], 'Time:')
    distance_field = strip_label(lines[1], 'Distance:')
    if kerning:
        time_field = time_field.replace(' ', '')
        distance_field = distance_field.replace(' ', '')

    times, distances = parse_ints(time_field), parse_ints(distance_field)
    if len(times) != len(distances):
        raise ValueError(f"{len(times)} times but {len(distances)} distances")
    return [Race(time=t, distance=d) for t, d in zip(times, distances)]


def count_record_beating_ways(race: Race) -> int:
    """
    Number of integer hold times that beat the record, closed form

    Args:
        race: time limit and record distance

    Returns:
        Count of h in [0, T] with h * (T - h) > D
    """
    T, D = race.time, race.distance
    delta = T * T - 4 * D
    if delta <= 0:
        return 0

    # h wins iff (2h - T)^2 < delta, i.e. |2h - T| <= isqrt(delta - 1)
    r = math.isqrt(delta - 1)
    low = max((T - r + 1) // 2, 0)
    high = min((T + r) // 2, T)
    return max(0, high - low + 1)


def count_record_beating_brute_force(race: Race) -> int:
    """Same count by trying every hold time"""
    hold = np.arange(race.time + 1, dtype=np.int64)
    return int(np.count_nonzero(hold * (race.time - hold) > race.distance))


def product_of_ways(races: List[Race]) -> int:
    result = 1
    for race in races:
        result *= count_record_beating_ways(race)
    return result


def main(input_path: Optional[str] = None) -> Dict[str, int]:
    """Solve both parts of day 06"""
    text = load_text(DAY, input_path)

    races = parse_races(text)
    logger.info(f"Day 06: {len(races)} races")
    part1 = product_of_ways(races)
    print(f"Part 1: Product of the number of ways to beat the record: {part1}")

    race = parse_races(text, kerning=True)[0]
    part2 = count_record_beating_ways(race)
    print(f"Part 2: Number of ways to beat the record: {part2}")

    return {'part1': part1, 'part2': part2}


if __name__ == '__main__':
    main()
