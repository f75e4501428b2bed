# -*- coding: utf-8 -*-
"""
Day 04: Scratchcards
====================
"""

from .scratchcards import main, Scratchcard, parse_cards
