# -*- coding: utf-8 -*-
"""
Day 03: Gear ratios
===================

The engine schematic is a grid of numbers, symbols and '.' filler.

- A symbol is any character that is neither a digit nor '.';
- A part number is a number with a symbol in its 8-neighbourhood;
- A gear is a '*' adjacent to exactly two part numbers, its ratio being their
  product.

1. Sum all part numbers;
2. Sum all gear ratios.

The grid is padded with a one-cell border of '.', so every neighbourhood
window stays inside the array.
"""

import logging
import re
from collections import defaultdict
from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple

import numpy as np

from src.data.loaders import load_text, to_char_grid

logger = logging.getLogger(__name__)

DAY = 3
FILLER = '.'
GEAR = '*'

_NUMBER_PATTERN = re.compile(r'[0-9]+')


@dataclass(frozen=True)
class PartNumber:
    """A number on the padded grid: value, row and inclusive column span"""
    value: int
    row: int
    start: int
    end: int

    def window(self) -> Tuple[slice, slice]:
        """Slices of the neighbourhood rectangle around the number"""
        return slice(self.row - 1, self.row + 2), slice(self.start - 1, self.end + 2)

    def is_adjacent(self, row: int, col: int) -> bool:
        return abs(self.row - row) <= 1 and self.start - 1 <= col <= self.end + 1


@dataclass(frozen=True)
class Gear:
    row: int
    col: int
    ratio: int


def expand_borders(grid: np.ndarray, neutral: str = FILLER) -> np.ndarray:
    """Surround a character grid with a one-cell border of `neutral`"""
    return np.pad(grid, 1, mode='constant', constant_values=neutral)


def symbol_mask(grid: np.ndarray) -> np.ndarray:
    """Boolean mask of symbol cells"""
    is_digit = np.char.isdigit(grid)
    return ~is_digit & (grid != FILLER)


def find_numbers(grid: np.ndarray) -> List[PartNumber]:
    """Every number of the grid with its position"""
    numbers = []
    for row_idx, row in enumerate(grid):
        line = ''.join(row)
        for match in _NUMBER_PATTERN.finditer(line):
            numbers.append(PartNumber(value=int(match.group()), row=row_idx,
                                      start=match.start(), end=match.end() - 1))
    return numbers


def find_part_numbers(grid: np.ndarray) -> List[PartNumber]:
    """
    Numbers with at least one adjacent symbol

    Args:
        grid: padded character grid

    Returns:
        Part numbers in reading order
    """
    symbols = symbol_mask(grid)
    return [number for number in find_numbers(grid) if symbols[number.window()].any()]


def find_gears(grid: np.ndarray, part_numbers: List[PartNumber]) -> List[Gear]:
    """
    '*' cells adjacent to exactly two part numbers

    Args:
        grid: padded character grid
        part_numbers: output of find_part_numbers

    Returns:
        Gears in reading order
    """
    neighbours: Dict[Tuple[int, int], List[int]] = defaultdict(list)
    for number in part_numbers:
        rows, cols = number.window()
        window = grid[rows, cols]
        for d_row, d_col in zip(*np.nonzero(window == GEAR)):
            neighbours[(rows.start + int(d_row), cols.start + int(d_col))].append(number.value)

    return [
        Gear(row=row, col=col, ratio=values[0] * values[1])
        for (row, col), values in sorted(neighbours.items())
        if len(values) == 2
    ]


def solve(text: str) -> Tuple[int, int]:
    """Sum of part numbers and sum of gear ratios"""
    grid = expand_borders(to_char_grid(text))
    part_numbers = find_part_numbers(grid)
    gears = find_gears(grid, part_numbers)
    logger.debug(f"Day 03: {len(part_numbers)} part numbers, {len(gears)} gears")
    return sum(n.value for n in part_numbers), sum(g.ratio for g in gears)


def main(input_path: Optional[str] = None) -> Dict[str, int]:
    """Solve both parts of day 03"""
    part1, part2 = solve(load_text(DAY, input_path))

    print(f"Part 1: Sum of part numbers: {part1}")
    print(f"Part 2: Gear ratio sum: {part2}")

    return {'part1': part1, 'part2': part2}


if __name__ == '__main__':
    main()
