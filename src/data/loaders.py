# -*- coding: utf-8 -*-
"""
Input loading
=============
Uniform access to the per-day puzzle input files
"""

import logging
from pathlib import Path
from typing import List, Optional, Union

import numpy as np

from configs.config import input_path

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


def resolve_input(day: int, path: Optional[PathLike] = None) -> Path:
    """
    Resolve the input file of a day

    Args:
        day: day number
        path: explicit file, overrides the default inputs/dayNN

    Returns:
        Path of the input file
    """
    return Path(path) if path is not None else input_path(day)


def load_text(day: int, path: Optional[PathLike] = None) -> str:
    """
    Read the whole input of a day as text

    Args:
        day: day number
        path: explicit file (optional)

    Returns:
        File content with the trailing newline removed

    Raises:
        FileNotFoundError: if the input file does not exist
    """
    file_path = resolve_input(day, path)
    if not file_path.is_file():
        raise FileNotFoundError(f"Input file for day {day} not found: {file_path}")

    text = file_path.read_text(encoding='utf-8')
    logger.debug(f"Loaded {file_path} ({len(text)} chars)")
    return text.rstrip('\n')


def split_lines(text: str) -> List[str]:
    """Non-empty lines of a text, trailing whitespace removed"""
    return [line.rstrip() for line in text.splitlines() if line.strip()]


def split_blocks(text: str) -> List[str]:
    """
    Split a text into blank-line separated blocks

    Args:
        text: raw input text

    Returns:
        Blocks in order of appearance, each stripped
    """
    normalized = text.replace('\r\n', '\n')
    return [block.strip() for block in normalized.split('\n\n') if block.strip()]


def to_char_grid(text: str) -> np.ndarray:
    """
    Convert a rectangular block of text into a 2-D array of characters

    Args:
        text: lines of equal length

    Returns:
        Array of shape (rows, cols) and dtype '<U1'

    Raises:
        ValueError: if the lines have different lengths
    """
    lines = split_lines(text)
    if not lines:
        raise ValueError("Empty grid")

    width = len(lines[0])
    for row, line in enumerate(lines):
        if len(line) != width:
            raise ValueError(f"Grid row {row} has length {len(line)}, expected {width}: {line!r}")

    return np.array([list(line) for line in lines], dtype='<U1')
