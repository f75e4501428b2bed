# -*- coding: utf-8 -*-
"""
Global configuration
====================
Paths, per-day constants and solver tunables for all puzzle days.
"""

import os
from pathlib import Path

# =============================================================================
# Paths
# =============================================================================

def get_project_root() -> Path:
    """Return the project root directory"""
    # configs/config.py -> configs -> project root
    return Path(__file__).parent.parent.absolute()


PROJECT_ROOT = get_project_root()

# Puzzle inputs are read relative to the working directory, one file per day
INPUTS_DIR = Path("inputs")

FIRST_DAY = 1
LAST_DAY = 10


def input_path(day: int) -> Path:
    """
    Default input file of a puzzle day

    Args:
        day: day number (1-based)

    Returns:
        Path such as inputs/day05
    """
    return INPUTS_DIR / f"day{day:02d}"


# =============================================================================
# Logging
# =============================================================================

LOG_FORMAT = '%(asctime)s - %(levelname)s - %(message)s'

# =============================================================================
# Day 02: cube limits of the bag
# =============================================================================

CUBE_LIMITS = {
    'red': 12,
    'green': 13,
    'blue': 14,
}

# =============================================================================
# Day 05: brute-force seed search
# =============================================================================

class SeedSearchConfig:
    """Worker pool settings for the part 2 seed range search"""

    WORKERS = os.cpu_count() or 1      # fixed-size process pool
    CHUNK_SIZE = 5_000_000             # seeds per task handed to a worker


seed_search = SeedSearchConfig()


if __name__ == "__main__":
    print(f"Project root: {PROJECT_ROOT}")
    print(f"Inputs dir:   {INPUTS_DIR.resolve()}")
    print(f"Days:         {FIRST_DAY}-{LAST_DAY}")
    print(f"Seed search:  workers={seed_search.WORKERS}, chunk={seed_search.CHUNK_SIZE}")
