# -*- coding: utf-8 -*-
"""
Day 09: Mirage maintenance
==========================
"""

from .mirage import main, parse_histories, extrapolate_next, extrapolate_previous
