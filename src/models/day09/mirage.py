# -*- coding: utf-8 -*-
"""
Day 09: Mirage maintenance
==========================

Each line is the history of a value. Repeatedly taking differences between
neighbours eventually yields all zeros; walking back up the pyramid
extrapolates the history.

1. Sum of the extrapolated next values;
2. Sum of the extrapolated previous values.
"""

import logging
from typing import Callable, Dict, List, Optional

import numpy as np

from src.data.loaders import load_text, split_lines
from src.utils.preprocessing import parse_int_array

logger = logging.getLogger(__name__)

DAY = 9


def parse_histories(text: str) -> List[np.ndarray]:
    return [parse_int_array(line) for line in split_lines(text)]


def extrapolate_next(history: np.ndarray) -> int:
    """Next value of a history: last value plus next value of its differences"""
    if len(history) == 0:
        raise ValueError("Cannot extrapolate an empty history")
    step = np.diff(history)
    tail = extrapolate_next(step) if step.any() else 0
    return int(history[-1]) + tail


def extrapolate_previous(history: np.ndarray) -> int:
    """Previous value of a history: first value minus previous value of its differences"""
    if len(history) == 0:
        raise ValueError("Cannot extrapolate an empty history")
    step = np.diff(history)
    head = extrapolate_previous(step) if step.any() else 0
    return int(history[0]) - head


def sum_extrapolated(histories: List[np.ndarray], extrapolate: Callable[[np.ndarray], int]) -> int:
    return sum(extrapolate(history) for history in histories)


def main(input_path: Optional[str] = None) -> Dict[str, int]:
    """Solve both parts of day 09"""
    histories = parse_histories(load_text(DAY, input_path))
    logger.info(f"Day 09: {len(histories)} histories")

    part1 = sum_extrapolated(histories, extrapolate_next)
    print(f"Part 1: Sum of extrapolated next values: {part1}")

    part2 = sum_extrapolated(histories, extrapolate_previous)
    print(f"Part 2: Sum of extrapolated previous values: {part2}")

    return {'part1': part1, 'part2': part2}


if __name__ == '__main__':
    main()
