# -*- coding: utf-8 -*-
"""
Day 10 tests: pipe loop length and enclosed area
"""

import pytest

from src.models.day10.pipe_maze import (
    SOUTH,
    PipeMaze,
    enclosed_tiles,
    farthest_distance,
    main,
)

SQUARE_LOOP = """\
.....
.S-7.
.|.|.
.L-J.
.....
"""

COMPLEX_LOOP = """\
..F7.
.FJ|.
SJ.L7
|F--J
LJ...
"""

ENCLOSED_LOOP = """\
...........
.S-------7.
.|F-----7|.
.||.....||.
.||.....||.
.|L-7.F-J|.
.|..|.|..|.
.L--J.L--J.
...........
"""

SQUEEZED_LOOP = """\
..........
.S------7.
.|F----7|.
.||....||.
.||....||.
.|L-7F-J|.
.|..||..|.
.L--JL--J.
..........
"""


def test_find_start():
    maze = PipeMaze.from_text(COMPLEX_LOOP)

    assert maze.start == (2, 0)
    assert maze.start_direction() == SOUTH
    assert PipeMaze.from_text(SQUARE_LOOP).start_direction() == SOUTH


def test_start_in_corner():
    maze = PipeMaze.from_text("S7\nLJ")
    assert maze.start_direction() == SOUTH
    assert maze.walk_loop() == [(0, 0), (1, 0), (1, 1), (0, 1)]
    assert enclosed_tiles(maze.walk_loop()) == 0


def test_farthest_distance():
    assert farthest_distance(PipeMaze.from_text(SQUARE_LOOP).walk_loop()) == 4
    assert farthest_distance(PipeMaze.from_text(COMPLEX_LOOP).walk_loop()) == 8


def test_enclosed_tiles():
    assert enclosed_tiles(PipeMaze.from_text(SQUARE_LOOP).walk_loop()) == 1
    assert enclosed_tiles(PipeMaze.from_text(ENCLOSED_LOOP).walk_loop()) == 4
    assert enclosed_tiles(PipeMaze.from_text(SQUEEZED_LOOP).walk_loop()) == 4


@pytest.mark.parametrize("text", [
    ".....\n.-7..\n.|.|.",
    "S-7\n|.|\nL-.",
    "S.\n..",
])
def test_broken_mazes_are_rejected(text):
    with pytest.raises(ValueError):
        PipeMaze.from_text(text).walk_loop()


def test_main(write_input, capsys):
    answers = main(str(write_input(ENCLOSED_LOOP)))

    assert answers == {'part1': 23, 'part2': 4}
    assert "Part 2: Enclosed tiles: 4" in capsys.readouterr().out
