# -*- coding: utf-8 -*-
"""
Utility module
==============
Shared parsing helpers for the puzzle days
"""

from .preprocessing import parse_ints, parse_int_array, strip_label
