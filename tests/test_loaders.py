# -*- coding: utf-8 -*-
"""
Input loader tests
"""

from pathlib import Path

import pytest

from configs.config import input_path
from src.data.loaders import load_text, resolve_input, split_blocks, split_lines, to_char_grid
from src.utils.preprocessing import parse_int_array, parse_ints, strip_label


def test_default_input_path():
    assert input_path(5) == Path('inputs') / 'day05'
    assert resolve_input(10) == Path('inputs') / 'day10'
    assert resolve_input(1, 'other.txt') == Path('other.txt')


def test_load_text_strips_trailing_newline(write_input):
    path = write_input("a\nb\n\n")
    assert load_text(1, path) == "a\nb"


def test_load_text_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError, match="day 2"):
        load_text(2, tmp_path / 'nope')


def test_split_lines_and_blocks():
    assert split_lines("a \n\nb\n") == ["a", "b"]
    assert split_blocks("x\ny\n\n\nz\r\n\r\nw") == ["x\ny", "z", "w"]


def test_char_grid():
    grid = to_char_grid("ab\ncd\n")
    assert grid.shape == (2, 2)
    assert grid[1, 0] == 'c'

    with pytest.raises(ValueError):
        to_char_grid("abc\nd")


def test_parsing_helpers():
    assert parse_ints("Time:  7 -15   30") == [7, -15, 30]
    assert parse_int_array("1 -2 3").tolist() == [1, -2, 3]
    assert strip_label("seeds: 1 2", "seeds:") == "1 2"

    with pytest.raises(ValueError):
        strip_label("soil: 1", "seeds:")
    with pytest.raises(ValueError):
        parse_int_array("1 x 3")
