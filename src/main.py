# -*- coding: utf-8 -*-
"""
Puzzle day runner
=================

Selects a day's solution by number and runs it.

Usage:
    python -m src.main 5
    python -m src.main 5 --input path/to/day05.txt
    python -m src.main --list
    python scripts/run_day.py 5
"""

import argparse
import importlib
import logging
import sys
from typing import Any, Dict, List, Optional, Tuple

from configs.config import FIRST_DAY, LAST_DAY, LOG_FORMAT, input_path

logger = logging.getLogger(__name__)


# =============================================================================
# Day registry
# =============================================================================

DAYS: Dict[int, Dict[str, str]] = {
    1: {'name': 'Trebuchet calibration', 'module': 'src.models.day01'},
    2: {'name': 'Cube conundrum', 'module': 'src.models.day02'},
    3: {'name': 'Gear ratios', 'module': 'src.models.day03'},
    4: {'name': 'Scratchcards', 'module': 'src.models.day04'},
    5: {'name': 'If you give a seed a fertilizer', 'module': 'src.models.day05'},
    6: {'name': 'Wait for it', 'module': 'src.models.day06'},
    7: {'name': 'Camel cards', 'module': 'src.models.day07'},
    8: {'name': 'Haunted wasteland', 'module': 'src.models.day08'},
    9: {'name': 'Mirage maintenance', 'module': 'src.models.day09'},
    10: {'name': 'Pipe maze', 'module': 'src.models.day10'},
}

NO_ARGUMENT_MESSAGE = "No input argument."
INVALID_ARGUMENT_MESSAGE = "Invalid input argument."


def setup_logging(verbose: bool = False) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format=LOG_FORMAT,
        handlers=[logging.StreamHandler(sys.stdout)],
        force=True,
    )


def parse_day(value: Optional[str]) -> Optional[int]:
    """
    Day number from the positional argument

    Returns:
        The day if it is a registered day number, otherwise None
    """
    try:
        day = int(value)
    except (TypeError, ValueError):
        return None
    return day if day in DAYS else None


def run_day(day: int, path: Optional[str] = None) -> Dict[str, Any]:
    """
    Import and run one day's solution

    Args:
        day: registered day number
        path: input file override

    Returns:
        Answers returned by the day's main()
    """
    if day not in DAYS:
        raise ValueError(f"Unknown day: {day}. Valid days: {list(DAYS.keys())}")

    info = DAYS[day]
    logger.info(f"Day {day:02d}: {info['name']} (input: {path or input_path(day)})")

    module = importlib.import_module(info['module'])
    return module.main(path)


def parse_args(argv: Optional[List[str]] = None) -> Tuple[argparse.Namespace, List[str]]:
    """
    Parse the command line

    Returns:
        Parsed options and the tokens argparse did not recognise
    """
    parser = argparse.ArgumentParser(description="Run the solution of a puzzle day")

    parser.add_argument(
        'day',
        nargs='?',
        default=None,
        help=f'day number to run ({FIRST_DAY}-{LAST_DAY})'
    )

    parser.add_argument(
        '--input',
        default=None,
        help='input file (default: inputs/dayNN in the working directory)'
    )

    parser.add_argument(
        '--list',
        action='store_true',
        help='list the available days'
    )

    parser.add_argument(
        '--verbose',
        action='store_true',
        help='debug logging'
    )

    return parser.parse_known_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    """Entry point; returns the process exit code"""
    args, extras = parse_args(argv)
    setup_logging(args.verbose)

    if args.list:
        print("\nAvailable days:")
        print("-" * 40)
        for day, info in DAYS.items():
            print(f"  {day:>2}: {info['name']}")
        return 0

    if args.day is None:
        print(INVALID_ARGUMENT_MESSAGE if extras else NO_ARGUMENT_MESSAGE)
        return 0

    # tokens after the day are ignored
    if extras:
        logger.debug(f"Ignoring extra arguments: {extras}")

    day = parse_day(args.day)
    if day is None:
        print(INVALID_ARGUMENT_MESSAGE)
        return 0

    try:
        run_day(day, args.input)
    except (FileNotFoundError, ValueError) as e:
        logger.error(f"Day {day:02d} failed: {e}")
        return 1

    return 0


if __name__ == '__main__':
    sys.exit(main())
