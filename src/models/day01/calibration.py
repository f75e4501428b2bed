# -*- coding: utf-8 -*-
"""
Day 01: Trebuchet calibration
=============================

Each line of the calibration document hides a two digit value formed by its
first and last digit (a single digit counts as both).

1. Sum the values using literal digits only;
2. Same, but digits may also be spelled out ("one" .. "nine"). Spellings can
   overlap, "oneight" reads as 1 then 8.
"""

import logging
import re
from typing import Callable, Dict, Iterable, Optional, Tuple

from src.data.loaders import load_text, split_lines

logger = logging.getLogger(__name__)

DAY = 1

SPELLED_DIGITS: Dict[str, int] = {
    'one': 1, 'two': 2, 'three': 3, 'four': 4, 'five': 5,
    'six': 6, 'seven': 7, 'eight': 8, 'nine': 9,
}

# lookahead so that overlapping spellings are all found
_DIGIT_PATTERN = re.compile(r'(?=([0-9]))')
_WORD_OR_DIGIT_PATTERN = re.compile(r'(?=([0-9]|' + '|'.join(SPELLED_DIGITS) + r'))')


def _token_value(token: str) -> int:
    return int(token) if token.isdigit() else SPELLED_DIGITS[token]


def _first_and_last(line: str, pattern: re.Pattern) -> Tuple[int, int]:
    tokens = pattern.findall(line)
    if not tokens:
        raise ValueError(f"No calibration digit in line: {line!r}")
    return _token_value(tokens[0]), _token_value(tokens[-1])


def calibration_digits(line: str) -> Tuple[int, int]:
    """First and last literal digit of a line"""
    return _first_and_last(line, _DIGIT_PATTERN)


def calibration_digits_spelled(line: str) -> Tuple[int, int]:
    """First and last digit of a line, spelled digits included"""
    return _first_and_last(line, _WORD_OR_DIGIT_PATTERN)


def total_calibration_value(lines: Iterable[str],
                            digits: Callable[[str], Tuple[int, int]]) -> int:
    """
    Sum of calibration values

    Args:
        lines: calibration document, one entry per line
        digits: extractor returning (first, last) digit of a line

    Returns:
        Sum of 10 * first + last over all lines
    """
    total = 0
    for line in lines:
        first, last = digits(line)
        total += first * 10 + last
    return total


def main(input_path: Optional[str] = None) -> Dict[str, int]:
    """Solve both parts of day 01"""
    lines = split_lines(load_text(DAY, input_path))
    logger.info(f"Day 01: {len(lines)} calibration lines")

    part1 = total_calibration_value(lines, calibration_digits)
    print(f"Part 1: Total calibration value: {part1}")

    part2 = total_calibration_value(lines, calibration_digits_spelled)
    print(f"Part 2: Total calibration value: {part2}")

    return {'part1': part1, 'part2': part2}


if __name__ == '__main__':
    main()
