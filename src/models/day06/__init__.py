# -*- coding: utf-8 -*-
"""
Day 06: Boat races
==================
Closed-form quadratic root count, with a brute-force counterpart
"""

from .boat_race import (
    Race,
    parse_races,
    count_record_beating_ways,
    count_record_beating_brute_force,
    main,
)
