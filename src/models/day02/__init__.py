# -*- coding: utf-8 -*-
"""
Day 02: Cube conundrum
======================
Per-game colour maxima, possible games and game power
"""

from .cube_game import main, Game, parse_games
