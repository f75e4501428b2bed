# -*- coding: utf-8 -*-
"""
Day 03: Gear ratios
===================
"""

from .gear_ratios import main, solve
