# -*- coding: utf-8 -*-
"""
Day 01: Trebuchet calibration
=============================
First/last digit extraction, literal and spelled
"""

from .calibration import main
