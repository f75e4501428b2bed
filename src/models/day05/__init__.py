# -*- coding: utf-8 -*-
"""
Day 05: Seed almanac
====================

Interval remapping tables, brute-force range search on a process pool and
an exact interval-splitting solver
"""

from .seed_maps import (
    MapEntry,
    AlmanacMap,
    parse_almanac,
    lowest_location,
    lowest_location_parallel,
    lowest_location_by_ranges,
    main,
)

__all__ = [
    'MapEntry',
    'AlmanacMap',
    'parse_almanac',
    'lowest_location',
    'lowest_location_parallel',
    'lowest_location_by_ranges',
    'main',
]
