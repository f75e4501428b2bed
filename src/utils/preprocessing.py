# -*- coding: utf-8 -*-
"""
Parsing helpers
===============
Small helpers shared by the day parsers: integer extraction and labelled lines
"""

import re
from typing import List

import numpy as np

_INT_PATTERN = re.compile(r'-?\d+')


def parse_ints(text: str) -> List[int]:
    """
    Extract every (possibly negative) integer of a string, in order

    Args:
        text: free-form text such as "Time:      7  15   30"

    Returns:
        List of integers
    """
    return [int(token) for token in _INT_PATTERN.findall(text)]


def parse_int_array(text: str) -> np.ndarray:
    """
    Whitespace separated integers as an int64 array

    Args:
        text: e.g. "0 3 6 9 12 15"

    Returns:
        1-D int64 array

    Raises:
        ValueError: if a token is not an integer
    """
    return np.array([int(token) for token in text.split()], dtype=np.int64)


def strip_label(line: str, label: str) -> str:
    """
    Remove a required prefix label from a line

    Args:
        line: input line, e.g. "seeds: 79 14 55 13"
        label: expected prefix, e.g. "seeds:"

    Returns:
        Remainder of the line, stripped

    Raises:
        ValueError: if the line does not start with the label
    """
    if not line.startswith(label):
        raise ValueError(f"Expected line starting with {label!r}, got: {line!r}")
    return line[len(label):].strip()
