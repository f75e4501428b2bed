# -*- coding: utf-8 -*-
"""
Day 08: Haunted wasteland
=========================
"""

from .haunted_wasteland import main, Network, parse_network, solve_part1, solve_part2
