# -*- coding: utf-8 -*-
"""
Day 10: Pipe maze
=================

A grid of pipes ('|', '-', 'L', 'J', '7', 'F'), ground ('.') and the start
tile 'S', which sits on a single closed loop.

1. Distance along the loop to the tile farthest from S, i.e. half the loop
   length;
2. Number of tiles enclosed by the loop.

Part 2 uses the loop tiles as polygon vertices: the shoelace formula gives
the area A, and Pick's theorem A = i + b/2 - 1 gives the interior count i
from the b boundary tiles.
"""

import logging
from dataclasses import dataclass
from typing import Dict, FrozenSet, List, Optional, Tuple

import numpy as np

from src.data.loaders import load_text, to_char_grid

logger = logging.getLogger(__name__)

DAY = 10
START = 'S'

Position = Tuple[int, int]
Direction = Tuple[int, int]

NORTH: Direction = (-1, 0)
SOUTH: Direction = (1, 0)
EAST: Direction = (0, 1)
WEST: Direction = (0, -1)

# openings of each pipe
PIPE_EXITS: Dict[str, FrozenSet[Direction]] = {
    '|': frozenset({NORTH, SOUTH}),
    '-': frozenset({EAST, WEST}),
    'L': frozenset({NORTH, EAST}),
    'J': frozenset({NORTH, WEST}),
    '7': frozenset({SOUTH, WEST}),
    'F': frozenset({SOUTH, EAST}),
}


def opposite(direction: Direction) -> Direction:
    return -direction[0], -direction[1]


@dataclass
class PipeMaze:
    grid: np.ndarray
    start: Position

    @classmethod
    def from_text(cls, text: str) -> 'PipeMaze':
        grid = to_char_grid(text)
        rows, cols = np.nonzero(grid == START)
        if len(rows) != 1:
            raise ValueError(f"Maze must contain exactly one start tile, found {len(rows)}")
        return cls(grid=grid, start=(int(rows[0]), int(cols[0])))

    def in_bounds(self, pos: Position) -> bool:
        n_rows, n_cols = self.grid.shape
        return 0 <= pos[0] < n_rows and 0 <= pos[1] < n_cols

    def tile(self, pos: Position) -> str:
        return str(self.grid[pos])

    def start_direction(self) -> Direction:
        """A direction from S towards a pipe connected back to it"""
        for direction in (NORTH, SOUTH, EAST, WEST):
            neighbour = (self.start[0] + direction[0], self.start[1] + direction[1])
            if not self.in_bounds(neighbour):
                continue
            exits = PIPE_EXITS.get(self.tile(neighbour), frozenset())
            if opposite(direction) in exits:
                return direction
        raise ValueError(f"No pipe connects to the start tile at {self.start}")

    def walk_loop(self) -> List[Position]:
        """
        Follow the loop from S back to S

        Returns:
            Loop tiles in walking order, starting with S

        Raises:
            ValueError: if the path leaves the grid, hits ground or never closes
        """
        path = [self.start]
        pos, direction = self.start, self.start_direction()

        for _ in range(self.grid.size):
            pos = (pos[0] + direction[0], pos[1] + direction[1])
            if not self.in_bounds(pos):
                raise ValueError(f"Loop leaves the grid at {pos}")
            if pos == self.start:
                return path

            exits = PIPE_EXITS.get(self.tile(pos))
            came_from = opposite(direction)
            if exits is None or came_from not in exits:
                raise ValueError(f"Broken pipe {self.tile(pos)!r} at {pos}")
            direction = next(iter(exits - {came_from}))
            path.append(pos)

        raise ValueError("Loop does not return to the start tile")


def farthest_distance(loop: List[Position]) -> int:
    return len(loop) // 2


def enclosed_tiles(loop: List[Position]) -> int:
    """
    Tiles strictly inside the loop (shoelace formula + Pick's theorem)

    Args:
        loop: loop tiles in walking order

    Returns:
        Interior tile count
    """
    points = np.array(loop, dtype=np.int64)
    rows, cols = points[:, 0], points[:, 1]
    twice_area = abs(int(np.sum(rows * np.roll(cols, -1) - np.roll(rows, -1) * cols)))
    return (twice_area - len(loop)) // 2 + 1


def main(input_path: Optional[str] = None) -> Dict[str, int]:
    """Solve both parts of day 10"""
    maze = PipeMaze.from_text(load_text(DAY, input_path))
    loop = maze.walk_loop()
    logger.info(f"Day 10: grid {maze.grid.shape}, loop of {len(loop)} tiles")

    part1 = farthest_distance(loop)
    print(f"Part 1: Farthest distance: {part1}")

    part2 = enclosed_tiles(loop)
    print(f"Part 2: Enclosed tiles: {part2}")

    return {'part1': part1, 'part2': part2}


if __name__ == '__main__':
    main()
